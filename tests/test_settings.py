from datetime import time
from types import SimpleNamespace

import pytest

from config import get_settings_module
from src.shift_billing.shift_billing.core.exceptions import ValidationError
from src.shift_billing.shift_billing.core.settings import BillingSettings, load_settings


def test_app_env_selects_settings_module(monkeypatch):
    monkeypatch.setenv("APP_ENV", "production")
    assert get_settings_module() == "config.production"

    monkeypatch.setenv("APP_ENV", "test")
    assert get_settings_module() == "config.testing"

    monkeypatch.delenv("APP_ENV")
    assert get_settings_module() == "config.development"


def test_testing_settings_load():
    settings = load_settings("config.testing")

    assert settings.fallback_rate_cents == 2500
    assert settings.weeknight_threshold == time(19, 0)
    assert settings.max_workers == 2
    assert settings.db_config["database"] == "shiftmate_test"


def test_defaults_for_missing_values():
    settings = BillingSettings.from_module(SimpleNamespace(DB_CONFIG={"host": "db"}))

    assert settings.fallback_rate_cents == 2500
    assert settings.weeknight_threshold == time(19, 0)
    assert settings.currency == "AUD"


def test_bad_threshold_is_rejected():
    with pytest.raises(ValidationError):
        BillingSettings.from_module(SimpleNamespace(WEEKNIGHT_THRESHOLD="7pm"))
