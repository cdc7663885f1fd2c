"""Static lookup tables used while loading and deriving exposures.

The tables are immutable and passed explicitly to the loader and to the
derived exposure pass; nothing reads them as module globals at call time.
"""
from __future__ import annotations

import json
from pathlib import Path
from typing import Dict, FrozenSet, Optional

from pydantic import BaseModel, ConfigDict, Field

from lookthrough.data_models.security import ExposureDimension


class ReferenceTables(BaseModel):
    model_config = ConfigDict(frozen=True)

    country_to_region: Dict[str, str] = Field(default_factory=dict)
    country_to_market: Dict[str, str] = Field(default_factory=dict)
    sectors: FrozenSet[str] = Field(default_factory=frozenset)
    sector_synonyms: Dict[str, str] = Field(default_factory=dict)

    def country_table(self, dimension: ExposureDimension) -> Dict[str, str]:
        if dimension == ExposureDimension.REGION:
            return self.country_to_region
        if dimension == ExposureDimension.MARKET:
            return self.country_to_market
        raise ValueError(f"No country table for dimension {dimension.value}")

    def normalize_sector(self, sector: str) -> Optional[str]:
        """Return the canonical sector for `sector`, or None when unknown."""
        if sector in self.sectors:
            return sector
        return self.sector_synonyms.get(sector)


def load_reference_tables(path: Path | str | None = None) -> ReferenceTables:
    """Return the built-in tables, or tables read from a JSON file.

    The JSON file uses the same keys as `ReferenceTables`; keys it omits fall
    back to the built-in tables.
    """
    from lookthrough.reference import geography, sectors

    defaults = {
        "country_to_region": geography.COUNTRY_TO_REGION,
        "country_to_market": geography.COUNTRY_TO_MARKET,
        "sectors": sectors.SECTORS,
        "sector_synonyms": sectors.SECTOR_SYNONYMS,
    }
    if path is None:
        return ReferenceTables(**defaults)

    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Reference tables file not found: {p}")
    overrides = json.loads(p.read_text(encoding="utf-8"))
    return ReferenceTables(**{**defaults, **overrides})
