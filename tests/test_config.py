from lookthrough.config import Settings


def test_settings_defaults(monkeypatch):
    for var in ("LOOKTHROUGH_LIMIT", "LOOKTHROUGH_CURRENCY", "LOOKTHROUGH_TOLERANCE"):
        monkeypatch.delenv(var, raising=False)

    settings = Settings(_env_file=None)
    assert settings.limit == 25
    assert settings.currency == "€"
    assert settings.tolerance == 1e-3
    assert settings.reference_tables is None


def test_settings_from_environment(monkeypatch):
    monkeypatch.setenv("LOOKTHROUGH_LIMIT", "10")
    monkeypatch.setenv("LOOKTHROUGH_CURRENCY", "CHF")

    settings = Settings(_env_file=None)
    assert settings.limit == 10
    assert settings.currency == "CHF"
