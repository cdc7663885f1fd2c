"""Derived Region/Market exposure.

Securities often report only their country split. Region and market splits
are filled in from it using the static country tables.
"""
from __future__ import annotations

from typing import Dict
import logging

from lookthrough.data_models.reference_tables import ReferenceTables
from lookthrough.data_models.security import ExposureDimension, Security
from lookthrough.errors import UnmappedCountryError
from lookthrough.services.security_registry_service import SecurityRegistry

logger = logging.getLogger(__name__)

DERIVED_DIMENSIONS = (ExposureDimension.REGION, ExposureDimension.MARKET)


def map_country_exposure(
    security: Security,
    dimension: ExposureDimension,
    country_table: Dict[str, str],
) -> Dict[str, float]:
    """Map a security's country weights through `country_table`.

    Countries resolving to the same label have their weights summed.
    Raises `UnmappedCountryError` for a country missing from the table.
    """
    derived: Dict[str, float] = {}
    for country, weight in security.country.items():
        label = country_table.get(country)
        if label is None:
            raise UnmappedCountryError(country, security.isin, dimension.value)
        derived[label] = derived.get(label, 0.0) + weight
    return derived


def derive_region_and_market(registry: SecurityRegistry, tables: ReferenceTables) -> int:
    """Fill empty Region/Market maps from Country maps, in place.

    Must run after the registry is fully populated and before it is sealed.
    Returns the number of securities that were updated.
    """
    updated = 0
    for security in list(registry):
        if not security.country:
            continue

        update = {}
        for dimension in DERIVED_DIMENSIONS:
            if security.get_exposure(dimension):
                continue
            derived = map_country_exposure(security, dimension, tables.country_table(dimension))
            update[dimension.value.lower()] = derived
            logger.debug(
                "Calculated %s for %s [%s]: %s",
                dimension.value,
                security.isin,
                security.name,
                derived,
            )

        if update:
            registry.replace(security.model_copy(update=update))
            updated += 1

    logger.info("Derived region/market exposure for %d securities", updated)
    return updated
