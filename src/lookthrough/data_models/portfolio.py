"""Portfolio allocation model."""
from __future__ import annotations

from typing import Dict, Optional

from pydantic import BaseModel, Field


class Portfolio(BaseModel):
    """An investor's allocation across securities.

    Attributes:
        weights: ISIN -> weight fraction in [0, 1], in the order the positions
            were read.
        total_amount: Absolute currency value of the portfolio when it was
            given as amounts; None when it was given as percentages.
    """

    weights: Dict[str, float] = Field(default_factory=dict)
    total_amount: Optional[float] = None

    @property
    def total_weight(self) -> float:
        return float(sum(self.weights.values()))

    def __len__(self) -> int:
        return len(self.weights)
