"""Portfolio-level exposure breakdowns.

Resolves every position of a portfolio, merges the results and normalizes
them into a percentage breakdown that sums to 100%, with unclassified weight
shown as "Unknown".
"""
from __future__ import annotations

from typing import Dict, Iterable, List, Optional
import logging
import math

from lookthrough.data_models.exposure_result import (
    UNKNOWN_LABEL,
    ExposureItem,
    ExposureResult,
    PortfolioReport,
)
from lookthrough.data_models.portfolio import Portfolio
from lookthrough.data_models.security import ExposureDimension
from lookthrough.errors import (
    ExposureResolutionError,
    InvalidExposureError,
    OverAllocationError,
    UnknownSecurityError,
)
from lookthrough.services.cost_ratio_service import calculate_ter
from lookthrough.services.exposure_resolution_service import merge_exposures, resolve_exposure
from lookthrough.services.security_registry_service import SecurityRegistry

logger = logging.getLogger(__name__)

# Percentage points
DEFAULT_TOLERANCE = 1e-3


def normalize_exposure(
    dimension: ExposureDimension,
    weights: Dict[str, float],
    tolerance: float = DEFAULT_TOLERANCE,
) -> ExposureResult:
    """Turn merged weight fractions into a sorted percentage breakdown.

    Items are sorted by descending percentage; equal percentages keep the order
    in which their labels were first seen. A shortfall below 100% is appended as
    "Unknown"; a total above 100% raises `OverAllocationError` and a NaN or
    infinite total raises `InvalidExposureError`.
    """
    items = [ExposureItem(label=label, percentage=weight * 100.0) for label, weight in weights.items()]
    items.sort(key=lambda x: x.percentage, reverse=True)

    total = sum(i.percentage for i in items)
    if not math.isfinite(total):
        raise InvalidExposureError(dimension.value, total)
    if total > 100.0 + tolerance:
        raise OverAllocationError(dimension.value, total)
    if total < 100.0 - tolerance:
        items.append(ExposureItem(label=UNKNOWN_LABEL, percentage=100.0 - total))

    return ExposureResult(dimension=dimension, items=items)


def analyze_exposure(
    registry: SecurityRegistry,
    portfolio: Portfolio,
    dimension: ExposureDimension,
    tolerance: float = DEFAULT_TOLERANCE,
    strict: bool = True,
) -> ExposureResult:
    """Compute the normalized breakdown of `portfolio` along `dimension`.

    Unknown ISINs do not stop the loop: every one of them is collected, logged,
    and reported together in a single `ExposureResolutionError`. With
    `strict=False` they are only logged and their weight ends up in "Unknown".
    """
    results: Dict[str, float] = {}
    errors: List[UnknownSecurityError] = []

    for isin, weight in portfolio.weights.items():
        try:
            isin_results = resolve_exposure(registry, dimension, isin, weight)
        except UnknownSecurityError as exc:
            errors.append(exc)
            continue
        logger.debug("Results for %s: %s", isin, isin_results)
        merge_exposures(results, isin_results)

    if errors:
        if not strict:
            for err in errors:
                logger.warning("%s; counted as %s", err, UNKNOWN_LABEL)
        else:
            for err in errors:
                logger.error("%s", err)
            raise ExposureResolutionError(dimension.value, errors)

    result = normalize_exposure(dimension, results, tolerance=tolerance)
    logger.debug("%s analysis results: %s", dimension.value, result.as_pairs())
    return result


def build_portfolio_report(
    registry: SecurityRegistry,
    portfolio: Portfolio,
    name: Optional[str] = None,
    currency: str = "€",
    dimensions: Iterable[ExposureDimension] = tuple(ExposureDimension),
    tolerance: float = DEFAULT_TOLERANCE,
) -> PortfolioReport:
    """Compute every breakdown and the blended TER of a portfolio."""
    exposures = [analyze_exposure(registry, portfolio, d, tolerance=tolerance) for d in dimensions]
    ter = calculate_ter(registry, portfolio)

    report = PortfolioReport(
        name=name,
        exposures=exposures,
        ter=ter,
        total_amount=portfolio.total_amount,
        currency=currency,
    )
    logger.info(
        "Built exposure report for %s: %d dimensions, TER %.3f%%",
        name or "portfolio",
        len(exposures),
        report.ter_pct,
    )
    return report
