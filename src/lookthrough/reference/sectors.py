"""GICS sectors and the labels fund providers use for them."""
from __future__ import annotations

from typing import Dict, FrozenSet

SECTORS: FrozenSet[str] = frozenset(
    {
        "Communication Services",
        "Consumer Discretionary",
        "Consumer Staples",
        "Energy",
        "Financials",
        "Health Care",
        "Industrials",
        "Information Technology",
        "Materials",
        "Real Estate",
        "Utilities",
        "Cash and Derivatives",
    }
)

SECTOR_SYNONYMS: Dict[str, str] = {
    # Morningstar / Yahoo style names
    "Technology": "Information Technology",
    "Tech": "Information Technology",
    "IT": "Information Technology",
    "Communication": "Communication Services",
    "Communications": "Communication Services",
    "Telecommunication Services": "Communication Services",
    "Telecommunications": "Communication Services",
    "Telecom": "Communication Services",
    "Media": "Communication Services",
    "Consumer Cyclical": "Consumer Discretionary",
    "Consumer Cyclicals": "Consumer Discretionary",
    "Consumer Defensive": "Consumer Staples",
    "Consumer Non-Cyclicals": "Consumer Staples",
    "Financial": "Financials",
    "Financial Services": "Financials",
    "Finance": "Financials",
    "Healthcare": "Health Care",
    "Health": "Health Care",
    "Industrial": "Industrials",
    "Basic Materials": "Materials",
    "Material": "Materials",
    "Utility": "Utilities",
    "Realty": "Real Estate",
    "Oil & Gas": "Energy",
    "Cash": "Cash and Derivatives",
    "Cash and/or Derivatives": "Cash and Derivatives",
    "Derivatives": "Cash and Derivatives",
}
