from roll_pricing.config import Settings
from roll_pricing.models.pricing import DEFAULT_TAX_RATE_PERCENT
from roll_pricing.pricing.engine import REFERENCE_WIDTH_INCHES


def test_defaults(monkeypatch):
    for key in ("REFERENCE_WIDTH_INCHES", "DEFAULT_TAX_RATE_PERCENT", "MAX_ORDER_LINES"):
        monkeypatch.delenv(key, raising=False)

    settings = Settings(_env_file=None)

    assert settings.REFERENCE_WIDTH_INCHES == 44.0
    assert settings.DEFAULT_TAX_RATE_PERCENT == 18.0
    assert settings.MAX_ORDER_LINES == 200


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("DEFAULT_TAX_RATE_PERCENT", "12")
    monkeypatch.setenv("LOG_JSON", "true")

    settings = Settings(_env_file=None)

    assert settings.DEFAULT_TAX_RATE_PERCENT == 12.0
    assert settings.LOG_JSON is True


def test_defaults_follow_engine_constants(monkeypatch):
    monkeypatch.delenv("REFERENCE_WIDTH_INCHES", raising=False)
    monkeypatch.delenv("DEFAULT_TAX_RATE_PERCENT", raising=False)

    settings = Settings(_env_file=None)

    assert settings.REFERENCE_WIDTH_INCHES == REFERENCE_WIDTH_INCHES
    assert settings.DEFAULT_TAX_RATE_PERCENT == DEFAULT_TAX_RATE_PERCENT
