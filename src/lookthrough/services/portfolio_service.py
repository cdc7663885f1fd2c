"""Portfolio allocation loading.

A portfolio CSV has an `ISIN` column and either a `Weight` column
(percentages) or an `Amount` column (values in the portfolio currency).
"""
from __future__ import annotations

from pathlib import Path
from typing import Dict, List, Tuple
import logging
import math

import pandas as pd

from lookthrough.data_models.portfolio import Portfolio
from lookthrough.errors import PortfolioFormatError

logger = logging.getLogger(__name__)

WEIGHT_COLUMN = "Weight"
AMOUNT_COLUMN = "Amount"


def build_portfolio(allocations: List[Tuple[str, float]], percent: bool) -> Portfolio:
    """Normalize raw (isin, allocation) pairs into a `Portfolio`.

    With `percent=True` allocations are percentages: any value above 100 is an
    error, and weights are allocation / 100. Otherwise allocations are amounts,
    weights are amount / sum(amounts) and the sum is kept as `total_amount`.

    Negative, NaN and infinite allocations are errors. A repeated ISIN keeps
    its first allocation.
    """
    raw: Dict[str, float] = {}
    problems: List[str] = []

    for isin, allocation in allocations:
        if not math.isfinite(allocation) or allocation < 0.0:
            problems.append(f"Portfolio ISIN {isin} allocation {allocation} is not a finite non-negative number")
            continue
        if percent and allocation > 100.0:
            problems.append(f"Portfolio ISIN {isin} weight {allocation} > 100%")
            continue
        if isin in raw:
            logger.warning("Duplicate portfolio ISIN %s; keeping first allocation %s", isin, raw[isin])
            continue
        raw[isin] = allocation

    if problems:
        for msg in problems:
            logger.error(msg)
        raise PortfolioFormatError(f"{len(problems)} invalid portfolio weight(s)", problems)

    if percent:
        return Portfolio(weights={k: v / 100.0 for k, v in raw.items()}, total_amount=None)

    total = float(sum(raw.values()))
    if not math.isfinite(total) or total <= 0.0:
        raise PortfolioFormatError(f"Portfolio total amount must be positive, got {total}")
    logger.info("Portfolio total value %.2f", total)
    return Portfolio(weights={k: v / total for k, v in raw.items()}, total_amount=total)


def load_portfolio_from_csv(csv_path: Path | str) -> Portfolio:
    """Load a portfolio CSV into a `Portfolio`.

    Lines starting with `#` are ignored.
    """
    path = Path(csv_path)
    if not path.exists():
        raise FileNotFoundError(f"Portfolio CSV file not found: {path}")

    df = pd.read_csv(path, comment="#", dtype=str, keep_default_na=False, skipinitialspace=True)
    df.columns = [str(c).strip() for c in df.columns]

    if "ISIN" not in df.columns:
        raise PortfolioFormatError(f"Bad CSV header {list(df.columns)!r} in {path}")
    if WEIGHT_COLUMN in df.columns:
        percent = True
        column = WEIGHT_COLUMN
        logger.debug("Securities with weights")
    elif AMOUNT_COLUMN in df.columns:
        percent = False
        column = AMOUNT_COLUMN
        logger.debug("Securities with total amounts")
    else:
        raise PortfolioFormatError(f"Bad CSV header {list(df.columns)!r} in {path}")

    allocations: List[Tuple[str, float]] = []
    for _, row in df.iterrows():
        isin = str(row["ISIN"]).strip()
        raw = str(row[column]).strip()
        try:
            allocations.append((isin, float(raw)))
        except ValueError as exc:
            raise PortfolioFormatError(f"Unparseable {column} {raw!r} for ISIN {isin} in {path}") from exc

    portfolio = build_portfolio(allocations, percent=percent)
    logger.info("Parsed %d securities into portfolio", len(portfolio))
    return portfolio
