from __future__ import annotations

import logging

from lookthrough.data_models.portfolio import Portfolio
from lookthrough.errors import UnknownSecurityError
from lookthrough.services.security_registry_service import SecurityRegistry

logger = logging.getLogger(__name__)


def calculate_ter(registry: SecurityRegistry, portfolio: Portfolio) -> float:
    """Blended total expense ratio of a portfolio, as a fraction.

    ter = sum(security.cost_ratio * position_weight)

    The TER is a single number, so the first unknown ISIN fails the whole call.
    """
    ter = 0.0
    for isin, weight in portfolio.weights.items():
        security = registry.lookup(isin)
        if security is None:
            raise UnknownSecurityError(isin)
        ter += security.cost_ratio * weight

    logger.info("Calculated portfolio TER: %.3f%%", ter * 100.0)
    return float(ter)
