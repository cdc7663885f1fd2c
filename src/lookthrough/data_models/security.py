"""Security models.

`Security` holds one fund's or stock's composition along every exposure
dimension. `ExposureDimension` is the tag used to pick one of those maps.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field


class ExposureDimension(str, Enum):
    """
    Axis along which portfolio composition is reported.

    Iteration order is the order in which breakdowns are computed and charted.
    """

    HOLDING = "Holding"
    SECTOR = "Sector"
    COUNTRY = "Country"
    REGION = "Region"
    MARKET = "Market"


class Security(BaseModel):
    """A security identified by its ISIN.

    Every exposure map goes from an exposure item label (an ISIN for holdings,
    a sector/country/region/market name otherwise) to a weight fraction in
    [0, 1]. Maps need not sum to 1; funds may carry unclassified weight.

    Instances are frozen: updates go through `merge` or `model_copy`. The maps
    themselves are plain dicts and must not be mutated in place.
    """

    model_config = ConfigDict(frozen=True)

    isin: str
    name: str = ""
    ticker: Optional[str] = None
    # Fraction, e.g. 0.0022 for a 0.22% TER
    cost_ratio: float = Field(default=0.0, ge=0.0)

    holding: Dict[str, float] = Field(default_factory=dict)
    sector: Dict[str, float] = Field(default_factory=dict)
    country: Dict[str, float] = Field(default_factory=dict)
    region: Dict[str, float] = Field(default_factory=dict)
    market: Dict[str, float] = Field(default_factory=dict)

    def get_exposure(self, dimension: ExposureDimension) -> Dict[str, float]:
        return getattr(self, _FIELD_BY_DIMENSION[ExposureDimension(dimension)])

    def merge(self, other: "Security") -> "Security":
        """Return a copy of this security updated with a partial record.

        Non-empty name/ticker and a non-zero cost ratio from `other` win.
        Exposure maps accumulate: labels from `other` are added, and a label
        present in both takes the weight from `other`.
        """
        if other.isin != self.isin:
            raise ValueError(f"Cannot merge {other.isin} into {self.isin}")

        update: Dict[str, object] = {}
        if other.name:
            update["name"] = other.name
        if other.ticker:
            update["ticker"] = other.ticker
        if other.cost_ratio > 0.0:
            update["cost_ratio"] = other.cost_ratio
        for dimension, field_name in _FIELD_BY_DIMENSION.items():
            incoming = other.get_exposure(dimension)
            if incoming:
                update[field_name] = {**self.get_exposure(dimension), **incoming}
        return self.model_copy(update=update)


_FIELD_BY_DIMENSION = {
    ExposureDimension.HOLDING: "holding",
    ExposureDimension.SECTOR: "sector",
    ExposureDimension.COUNTRY: "country",
    ExposureDimension.REGION: "region",
    ExposureDimension.MARKET: "market",
}
