import pytest
from pydantic import ValidationError

from lookthrough.data_models.security import ExposureDimension, Security
from lookthrough.errors import RegistrySealedError
from lookthrough.services.security_registry_service import SecurityRegistry


def test_lookup_and_get_dimension():
    registry = SecurityRegistry([Security(isin="A", name="Fund A", sector={"Energy": 0.4})])

    sec = registry.lookup("A")
    assert sec is not None
    assert registry.get_dimension(sec, ExposureDimension.SECTOR) == {"Energy": 0.4}
    assert registry.get_dimension(sec, ExposureDimension.COUNTRY) == {}
    assert registry.lookup("missing") is None
    assert "A" in registry and "missing" not in registry


def test_merge_accumulates_exposure_entries():
    registry = SecurityRegistry()
    registry.merge(Security(isin="A", name="Fund A", cost_ratio=0.002, sector={"Energy": 0.4}))
    registry.merge(Security(isin="A", sector={"Utilities": 0.3}, country={"France": 1.0}))

    sec = registry.lookup("A")
    assert sec.name == "Fund A"
    assert sec.cost_ratio == pytest.approx(0.002)
    assert sec.sector == {"Energy": 0.4, "Utilities": 0.3}
    assert sec.country == {"France": 1.0}
    assert len(registry) == 1


def test_merge_non_empty_fields_overwrite():
    registry = SecurityRegistry()
    registry.merge(Security(isin="A", name="Old", cost_ratio=0.002, sector={"Energy": 0.4}))
    registry.merge(Security(isin="A", name="New", cost_ratio=0.001, sector={"Energy": 0.5}))

    sec = registry.lookup("A")
    assert sec.name == "New"
    assert sec.cost_ratio == pytest.approx(0.001)
    # Same label: later record wins
    assert sec.sector == {"Energy": 0.5}


def test_merge_rejects_different_isin():
    with pytest.raises(ValueError):
        Security(isin="A").merge(Security(isin="B"))


def test_sealed_registry_is_read_only():
    registry = SecurityRegistry([Security(isin="A")])
    registry.seal()

    assert registry.sealed
    with pytest.raises(RegistrySealedError):
        registry.merge(Security(isin="B"))
    with pytest.raises(RegistrySealedError):
        registry.replace(Security(isin="A", name="changed"))
    assert registry.lookup("A").name == ""


def test_looked_up_security_is_frozen():
    registry = SecurityRegistry([Security(isin="A", sector={"Energy": 1.0})])
    registry.seal()

    with pytest.raises(ValidationError):
        registry.lookup("A").sector = {"Utilities": 1.0}
    assert registry.lookup("A").sector == {"Energy": 1.0}
