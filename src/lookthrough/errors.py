"""Exception hierarchy for the look-through engine.

Every error raised by the library derives from `LookthroughError` so callers
(the CLI in particular) can catch the whole family with one clause. Errors
keep their identifiers (ISIN, country, dimension, ...) as attributes in
addition to a readable message.
"""
from __future__ import annotations

from typing import List, Optional, Sequence


class LookthroughError(Exception):
    """Base class for all look-through errors."""


# ---------------------------------------------------------------------------
# Load-time errors
# ---------------------------------------------------------------------------


class DataLoadError(LookthroughError):
    """Raised when an input table cannot be turned into the in-memory model."""


class SecurityFormatError(DataLoadError):
    pass


class PortfolioFormatError(DataLoadError):
    def __init__(self, message: str, problems: Optional[Sequence[str]] = None):
        self.problems = list(problems or [])
        super().__init__(message)


class UnmappedSectorError(DataLoadError):
    """Sector label is neither a known sector nor a known synonym."""

    def __init__(self, sector: str, isin: Optional[str] = None):
        self.sector = sector
        self.isin = isin
        where = f" for security {isin}" if isin else ""
        super().__init__(f"Unknown sector {sector!r}{where}")


class RegistrySealedError(LookthroughError):
    def __init__(self, isin: str):
        self.isin = isin
        super().__init__(f"Security registry is sealed; cannot modify {isin}")


# ---------------------------------------------------------------------------
# Derivation / resolution errors
# ---------------------------------------------------------------------------


class UnmappedCountryError(LookthroughError):
    """Country label has no entry in the static country table.

    This means the reference table is incomplete, not that a single row is bad,
    so it aborts the run.
    """

    def __init__(self, country: str, isin: str, dimension: str):
        self.country = country
        self.isin = isin
        self.dimension = dimension
        super().__init__(f"Country {country!r} of security {isin} has no {dimension} mapping")


class UnknownSecurityError(LookthroughError):
    def __init__(self, isin: str):
        self.isin = isin
        super().__init__(f"ISIN {isin} not found in securities")


class CyclicHoldingError(LookthroughError):
    def __init__(self, path: Sequence[str]):
        self.path = list(path)
        super().__init__("Cyclic holding chain: " + " -> ".join(self.path))


class OverAllocationError(LookthroughError):
    def __init__(self, dimension: str, total: float):
        self.dimension = dimension
        self.total = total
        super().__init__(f"{dimension} exposure total {total:.4f}% > 100%")


class InvalidExposureError(LookthroughError):
    """Breakdown total is not a finite number (NaN or infinite weights)."""

    def __init__(self, dimension: str, total: float):
        self.dimension = dimension
        self.total = total
        super().__init__(f"{dimension} exposure total is not finite: {total}")


class ExposureResolutionError(LookthroughError):
    """One or more portfolio positions could not be resolved.

    Carries every collected `UnknownSecurityError` so the caller sees all
    offending ISINs at once.
    """

    def __init__(self, dimension: str, errors: List[UnknownSecurityError]):
        self.dimension = dimension
        self.errors = list(errors)
        isins = ", ".join(e.isin for e in self.errors)
        super().__init__(f"{len(self.errors)} position(s) could not be resolved for {dimension}: {isins}")

    @property
    def isins(self) -> List[str]:
        return [e.isin for e in self.errors]
