from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field

from lookthrough.data_models.security import ExposureDimension

UNKNOWN_LABEL = "Unknown"


class ExposureItem(BaseModel):
    """One bar of a breakdown: an exposure item and its share of the portfolio."""

    label: str
    # Share of the portfolio expressed as a percentage (0-100)
    percentage: float

    @property
    def is_unknown(self) -> bool:
        return self.label == UNKNOWN_LABEL

    def amount(self, total_amount: float) -> float:
        """Absolute currency value of this item for a portfolio worth `total_amount`."""
        return self.percentage * total_amount / 100.0


class ExposureResult(BaseModel):
    """
    Normalized breakdown of the portfolio along one dimension.

    Items are sorted by descending percentage; a trailing "Unknown" item holds
    the residual when classified exposure falls short of 100%.
    """

    dimension: ExposureDimension
    items: List[ExposureItem] = Field(default_factory=list)

    @property
    def total(self) -> float:
        return float(sum(i.percentage for i in self.items))

    @property
    def unknown(self) -> float:
        return float(sum(i.percentage for i in self.items if i.is_unknown))

    def labels(self) -> List[str]:
        return [i.label for i in self.items]

    def as_pairs(self) -> List[Tuple[str, float]]:
        return [(i.label, i.percentage) for i in self.items]

    def top(self, limit: Optional[int]) -> List[ExposureItem]:
        if limit is None or len(self.items) <= limit:
            return list(self.items)
        return self.items[:limit]


class PortfolioReport(BaseModel):
    """All five breakdowns of a portfolio plus its blended cost ratio.

    Attributes:
        exposures: One `ExposureResult` per dimension, in dimension order.
        ter: Blended cost ratio as a fraction.
        total_amount: Portfolio value when known, used for currency figures.
        currency: Display symbol for `total_amount`.
    """

    name: Optional[str] = None
    exposures: List[ExposureResult] = Field(default_factory=list)
    ter: float
    total_amount: Optional[float] = None
    currency: str = "€"

    @property
    def ter_pct(self) -> float:
        return self.ter * 100.0

    def get(self, dimension: ExposureDimension) -> ExposureResult:
        for result in self.exposures:
            if result.dimension == dimension:
                return result
        raise KeyError(dimension)
