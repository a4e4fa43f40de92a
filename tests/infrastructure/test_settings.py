"""Tests for infrastructure settings."""

from datetime import date
from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import DashboardSettings


@pytest.fixture(autouse=True)
def _isolate_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    monkeypatch.setattr(settings_module, "get_app_logger", MagicMock)
    for name in (
        "DASHBOARD_PERIOD",
        "DASHBOARD_TODAY",
        "LEDGER_STRICT_FETCH",
        "DASHBOARD_CURRENCY_SYMBOL",
    ):
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults() -> None:
    """Without variables the dashboard opens on the current quarter."""
    settings = DashboardSettings.from_env()

    assert settings.default_period == "quarter"
    assert settings.today_override is None
    assert settings.strict_fetch is False
    assert settings.currency_symbol == "$"


def test_from_env_reads_overrides(monkeypatch) -> None:
    """Environment values override every default."""
    monkeypatch.setenv("DASHBOARD_PERIOD", "Month")
    monkeypatch.setenv("DASHBOARD_TODAY", "2024-06-10")
    monkeypatch.setenv("LEDGER_STRICT_FETCH", "yes")
    monkeypatch.setenv("DASHBOARD_CURRENCY_SYMBOL", "€")

    settings = DashboardSettings.from_env()

    assert settings.default_period == "month"
    assert settings.today() == date(2024, 6, 10)
    assert settings.strict_fetch is True
    assert settings.currency_symbol == "€"


def test_invalid_values_fall_back(monkeypatch) -> None:
    """Unknown periods and malformed dates fall back to defaults."""
    monkeypatch.setenv("DASHBOARD_PERIOD", "decade")
    monkeypatch.setenv("DASHBOARD_TODAY", "10/06/2024")

    settings = DashboardSettings.from_env()

    assert settings.default_period == "quarter"
    assert settings.today_override is None


def test_today_defaults_to_system_date() -> None:
    """today() returns the system date when not overridden."""
    assert DashboardSettings().today() == date.today()
