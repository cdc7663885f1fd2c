"""Look-through resolution of a single portfolio position.

A holding that is itself a registered security (a fund of funds) is expanded
into that security's own composition, recursively, with weights multiplied
along the way.
"""
from __future__ import annotations

from typing import Dict, Tuple
import logging

from lookthrough.data_models.security import ExposureDimension
from lookthrough.errors import CyclicHoldingError, UnknownSecurityError
from lookthrough.services.security_registry_service import SecurityRegistry

logger = logging.getLogger(__name__)


def merge_exposures(target: Dict[str, float], other: Dict[str, float]) -> Dict[str, float]:
    """Add `other` into `target` label by label and return `target`."""
    for label, weight in other.items():
        target[label] = target.get(label, 0.0) + weight
    return target


def resolve_exposure(
    registry: SecurityRegistry,
    dimension: ExposureDimension,
    isin: str,
    base_weight: float,
    _chain: Tuple[str, ...] = (),
) -> Dict[str, float]:
    """Compute the exposure of one position along `dimension`.

    Args:
        registry: Registry of known securities.
        dimension: Dimension to compute.
        isin: Security held by the position.
        base_weight: Share of the portfolio held in `isin` (fraction).

    Returns:
        A new dict label -> weight fraction of the whole portfolio.

    Raises:
        UnknownSecurityError: `isin` is not registered.
        CyclicHoldingError: a security transitively holds itself.
    """
    if isin in _chain:
        raise CyclicHoldingError(_chain[_chain.index(isin):] + (isin,))

    security = registry.lookup(isin)
    if security is None:
        raise UnknownSecurityError(isin)

    chain = _chain + (isin,)
    results: Dict[str, float] = {}

    # Expand holdings that are funds themselves
    for holding, weight in security.holding.items():
        if holding in registry:
            logger.debug("Recursing for holding %s of %s, weight %s", holding, isin, weight)
            nested = resolve_exposure(registry, dimension, holding, base_weight * weight, chain)
            merge_exposures(results, nested)

    for item, weight in security.get_exposure(dimension).items():
        # Already expanded above
        if dimension == ExposureDimension.HOLDING and item in registry:
            continue
        results[item] = results.get(item, 0.0) + weight * base_weight

    return results
