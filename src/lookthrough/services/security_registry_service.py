"""Security registry and the security CSV loader.

The registry is the in-memory model of every known security. It is built by
merging partial records (one per CSV row), completed by the derived exposure
pass and then sealed for the analysis phase.
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, Iterable, Iterator, List, Optional
import logging
import math

import pandas as pd
from pydantic import ValidationError

from lookthrough.data_models.reference_tables import ReferenceTables
from lookthrough.data_models.security import ExposureDimension, Security
from lookthrough.errors import RegistrySealedError, SecurityFormatError, UnmappedSectorError

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = [
    "ISIN",
    "Name",
    "Ticker",
    "TER",
    "Holding",
    "HoldingWeight",
    "Sector",
    "SectorWeight",
    "Country",
    "CountryWeight",
    "Region",
    "RegionWeight",
]
OPTIONAL_COLUMNS = ["Market", "MarketWeight"]

# (label column, weight column) per dimension
_DIMENSION_COLUMNS = {
    ExposureDimension.HOLDING: ("Holding", "HoldingWeight"),
    ExposureDimension.SECTOR: ("Sector", "SectorWeight"),
    ExposureDimension.COUNTRY: ("Country", "CountryWeight"),
    ExposureDimension.REGION: ("Region", "RegionWeight"),
    ExposureDimension.MARKET: ("Market", "MarketWeight"),
}


class SecurityRegistry:
    """ISIN -> Security mapping.

    Mutable while records are merged and exposures derived; read-only once
    `seal()` has been called. `lookup` returns the stored (frozen) `Security`;
    its exposure dicts are shared, so callers must treat them as read-only.
    """

    def __init__(self, securities: Optional[Iterable[Security]] = None):
        self._securities: Dict[str, Security] = {}
        self._sealed = False
        for security in securities or []:
            self.merge(security)

    def __contains__(self, isin: object) -> bool:
        return isin in self._securities

    def __len__(self) -> int:
        return len(self._securities)

    def __iter__(self) -> Iterator[Security]:
        return iter(self._securities.values())

    @property
    def sealed(self) -> bool:
        return self._sealed

    def isins(self) -> List[str]:
        return list(self._securities)

    def lookup(self, isin: str) -> Optional[Security]:
        return self._securities.get(isin)

    @staticmethod
    def get_dimension(security: Security, dimension: ExposureDimension) -> Dict[str, float]:
        return security.get_exposure(dimension)

    def merge(self, record: Security) -> Security:
        """Add a record, or fold it into the stored security with the same ISIN."""
        if self._sealed:
            raise RegistrySealedError(record.isin)
        existing = self._securities.get(record.isin)
        merged = existing.merge(record) if existing is not None else record
        self._securities[record.isin] = merged
        return merged

    def replace(self, security: Security) -> None:
        if self._sealed:
            raise RegistrySealedError(security.isin)
        self._securities[security.isin] = security

    def seal(self) -> None:
        self._sealed = True


def _parse_percent(val: object) -> float:
    """Parse a percentage cell into a fraction; blanks and junk become 0."""
    s = str(val).strip() if val is not None else ""
    if s == "":
        return 0.0
    try:
        value = float(s)
    except ValueError:
        return 0.0
    return value / 100.0 if math.isfinite(value) else 0.0


def record_from_row(row: Dict[str, str], isin: str, tables: ReferenceTables) -> Security:
    """Turn one CSV row into a partial `Security` record.

    Entries with a zero weight are dropped. Non-empty sector labels are
    normalized against the reference tables, whatever their weight.
    """
    maps: Dict[str, Dict[str, float]] = {}
    for dimension, (label_col, weight_col) in _DIMENSION_COLUMNS.items():
        label = (row.get(label_col) or "").strip()
        if not label:
            continue
        # Unknown sector labels are fatal even when the weight is blank
        if dimension == ExposureDimension.SECTOR:
            canonical = tables.normalize_sector(label)
            if canonical is None:
                raise UnmappedSectorError(label, isin)
            label = canonical
        weight = _parse_percent(row.get(weight_col))
        if weight <= 0.0:
            continue
        maps[dimension.value.lower()] = {label: weight}

    try:
        return Security(
            isin=isin,
            name=(row.get("Name") or "").strip(),
            ticker=(row.get("Ticker") or "").strip() or None,
            cost_ratio=_parse_percent(row.get("TER")),
            **maps,
        )
    except ValidationError as exc:
        raise SecurityFormatError(f"Invalid record for security {isin}: {exc}") from exc


def build_registry(rows: Iterable[Dict[str, str]], tables: ReferenceTables) -> SecurityRegistry:
    """Build an unsealed registry from rows whose ISIN cells are already filled."""
    registry = SecurityRegistry()
    for row in rows:
        isin = (row.get("ISIN") or "").strip()
        registry.merge(record_from_row(row, isin, tables))
    return registry


def load_securities_from_csv(
    csv_path: Path | str,
    tables: ReferenceTables,
    derive: bool = True,
) -> SecurityRegistry:
    """Load the securities CSV into a sealed `SecurityRegistry`.

    A security's composition may span several consecutive rows: rows with a
    blank ISIN continue the security of the row above. Leading rows with no
    ISIN to continue are skipped.

    When `derive` is true the Region/Market derivation pass runs before the
    registry is sealed.
    """
    from lookthrough.services.derived_exposure_service import derive_region_and_market

    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"Securities CSV file not found: {path}")

    df = pd.read_csv(path, dtype=str, keep_default_na=False, skipinitialspace=True)
    df.columns = [str(c).strip() for c in df.columns]

    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise SecurityFormatError(f"Missing required columns in securities CSV {path}: {missing}")
    for col in OPTIONAL_COLUMNS:
        if col not in df.columns:
            df[col] = ""

    df["ISIN"] = df["ISIN"].str.strip().replace("", pd.NA).ffill()
    orphans = df["ISIN"].isna()
    if orphans.any():
        logger.warning("Skipping %d leading row(s) without an ISIN in %s", int(orphans.sum()), path)
        df = df[~orphans]

    registry = build_registry(df.to_dict(orient="records"), tables)

    if derive:
        derive_region_and_market(registry, tables)
    registry.seal()

    logger.info("Parsed %d securities into database", len(registry))
    return registry
