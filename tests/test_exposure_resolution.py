import pytest

from lookthrough.data_models.security import ExposureDimension
from lookthrough.errors import CyclicHoldingError, UnknownSecurityError
from lookthrough.services.exposure_resolution_service import resolve_exposure


def test_no_holdings_returns_own_map_scaled(make_registry):
    registry = make_registry(A={"sector": {"Energy": 0.6, "Utilities": 0.3}})

    res = resolve_exposure(registry, ExposureDimension.SECTOR, "A", 0.5)
    assert res == pytest.approx({"Energy": 0.3, "Utilities": 0.15})


def test_fund_of_funds_expands_nested_sector(make_registry):
    registry = make_registry(
        A={"holding": {"B": 0.5}, "sector": {"Energy": 0.2}},
        B={"sector": {"Tech": 1.0}},
    )

    res = resolve_exposure(registry, ExposureDimension.SECTOR, "A", 1.0)
    assert res == pytest.approx({"Tech": 0.5, "Energy": 0.2})


def test_holding_dimension_skips_registered_isins(make_registry):
    registry = make_registry(
        A={"holding": {"B": 0.5, "AAPL": 0.3}},
        B={"holding": {"MSFT": 0.4, "AAPL": 0.6}},
    )

    res = resolve_exposure(registry, ExposureDimension.HOLDING, "A", 1.0)
    # B is expanded, never reported as a terminal holding
    assert "B" not in res
    assert res == pytest.approx({"MSFT": 0.2, "AAPL": 0.6})


def test_unregistered_holdings_ignored_for_other_dimensions(make_registry):
    registry = make_registry(A={"holding": {"AAPL": 0.5}, "country": {"United States": 1.0}})

    res = resolve_exposure(registry, ExposureDimension.COUNTRY, "A", 0.4)
    assert res == pytest.approx({"United States": 0.4})


def test_three_levels_multiply_weights(make_registry):
    registry = make_registry(
        A={"holding": {"B": 0.5}},
        B={"holding": {"C": 0.4}},
        C={"country": {"Japan": 1.0}},
    )

    res = resolve_exposure(registry, ExposureDimension.COUNTRY, "A", 0.5)
    assert res == pytest.approx({"Japan": 0.1})


def test_diamond_is_not_a_cycle(make_registry):
    registry = make_registry(
        A={"holding": {"B": 0.5, "C": 0.5}},
        B={"holding": {"D": 1.0}},
        C={"holding": {"D": 1.0}},
        D={"sector": {"Energy": 1.0}},
    )

    res = resolve_exposure(registry, ExposureDimension.SECTOR, "A", 1.0)
    assert res == pytest.approx({"Energy": 1.0})


def test_cycle_raises_with_path(make_registry):
    registry = make_registry(
        A={"holding": {"B": 0.5}},
        B={"holding": {"A": 0.5}},
    )

    with pytest.raises(CyclicHoldingError) as exc:
        resolve_exposure(registry, ExposureDimension.SECTOR, "A", 1.0)
    assert exc.value.path == ["A", "B", "A"]


def test_unknown_isin(make_registry):
    registry = make_registry(A={})

    with pytest.raises(UnknownSecurityError) as exc:
        resolve_exposure(registry, ExposureDimension.SECTOR, "ZZ", 1.0)
    assert exc.value.isin == "ZZ"


def test_resolution_returns_fresh_accumulators(make_registry):
    registry = make_registry(A={"sector": {"Energy": 1.0}})

    first = resolve_exposure(registry, ExposureDimension.SECTOR, "A", 1.0)
    first["Energy"] = 99.0
    second = resolve_exposure(registry, ExposureDimension.SECTOR, "A", 1.0)
    assert second == {"Energy": 1.0}
    assert registry.lookup("A").sector == {"Energy": 1.0}
