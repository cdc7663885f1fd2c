import pytest

from lookthrough.data_models.portfolio import Portfolio
from lookthrough.data_models.security import ExposureDimension
from lookthrough.services.exposure_aggregation_service import analyze_exposure
from lookthrough.services.exposure_resolution_service import resolve_exposure


def test_resolution_is_linear_in_base_weight(make_registry):
    """
    Scaling a position's base weight scales every exposure item by the same factor,
    however deep the fund-of-funds chain.
    """
    registry = make_registry(
        A={"holding": {"B": 0.3, "C": 0.2}, "sector": {"Energy": 0.1}},
        B={"holding": {"C": 0.5}, "sector": {"Materials": 0.4}},
        C={"sector": {"Utilities": 0.9}},
    )

    r1 = resolve_exposure(registry, ExposureDimension.SECTOR, "A", 0.2)
    r2 = resolve_exposure(registry, ExposureDimension.SECTOR, "A", 0.6)

    assert set(r1) == set(r2)
    for label in r1:
        assert pytest.approx(r2[label], rel=1e-9) == 3.0 * r1[label]


def test_fully_classified_portfolio_has_no_unknown(make_registry):
    """
    When every security's sector map sums to 1 and the portfolio is fully invested,
    the breakdown sums to 100% without a residual bucket.
    """
    registry = make_registry(
        A={"sector": {"Energy": 0.5, "Financials": 0.5}},
        B={"sector": {"Energy": 0.2, "Health Care": 0.8}},
    )
    portfolio = Portfolio(weights={"A": 0.25, "B": 0.75})

    result = analyze_exposure(registry, portfolio, ExposureDimension.SECTOR)
    assert "Unknown" not in result.labels()
    assert result.total == pytest.approx(100.0, abs=1e-3)
    assert dict(result.as_pairs()) == pytest.approx(
        {"Energy": 27.5, "Financials": 12.5, "Health Care": 60.0}
    )


def test_partially_classified_portfolio_residual_equals_shortfall(make_registry):
    """The Unknown bucket is exactly what the classified weights leave uncovered."""
    registry = make_registry(
        A={"country": {"Japan": 0.6}},
        B={"country": {"Japan": 0.3, "Australia": 0.3}},
    )
    portfolio = Portfolio(weights={"A": 0.5, "B": 0.5})

    result = analyze_exposure(registry, portfolio, ExposureDimension.COUNTRY)
    pairs = dict(result.as_pairs())
    assert pairs["Japan"] == pytest.approx(45.0)
    assert pairs["Australia"] == pytest.approx(15.0)
    assert pairs["Unknown"] == pytest.approx(40.0)
    assert result.total == pytest.approx(100.0, abs=1e-3)
