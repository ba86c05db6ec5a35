"""Tests for infrastructure settings."""

from decimal import Decimal
from pathlib import Path

import pytest

from household_finance.infrastructure import settings as settings_module
from household_finance.infrastructure.settings import (
    AppSettings,
    NotificationSettings,
)


_ENV_VARS = (
    "STORAGE_CURRENCY",
    "DISPLAY_CURRENCY",
    "BALANCES_CACHE_TTL",
    "EXCHANGE_RATES_URL",
    "EXCHANGE_RATES_TIMEOUT",
    "CATEGORY_RULES_FILE",
    "COUNTRY_CODE",
    "NOTIFY_EMAIL",
    "NOTIFY_BUDGET_ALERTS",
    "NOTIFY_LARGE_TRANSACTIONS",
    "NOTIFY_LARGE_TRANSACTION_THRESHOLD",
    "NOTIFY_WEEKLY_DIGEST",
)


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch):
    monkeypatch.setattr(settings_module.dotenv, "load_dotenv", lambda: None)
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_uses_defaults() -> None:
    settings = AppSettings.from_env()

    assert settings.storage_currency == "AUD"
    assert settings.display_currency == "AUD"
    assert settings.balances_cache_ttl_seconds == 300.0
    assert settings.rates_url == settings_module.DEFAULT_RATES_URL
    assert settings.rules_file.name == "category_rules.json"
    assert settings.notifications == NotificationSettings()


def test_from_env_reads_values(monkeypatch, tmp_path: Path) -> None:
    monkeypatch.setenv("STORAGE_CURRENCY", "usd")
    monkeypatch.setenv("DISPLAY_CURRENCY", " eur ")
    monkeypatch.setenv("BALANCES_CACHE_TTL", "60")
    monkeypatch.setenv("CATEGORY_RULES_FILE", str(tmp_path / "rules.json"))
    monkeypatch.setenv("NOTIFY_WEEKLY_DIGEST", "yes")
    monkeypatch.setenv("NOTIFY_EMAIL", "false")
    monkeypatch.setenv("NOTIFY_LARGE_TRANSACTION_THRESHOLD", "250")

    settings = AppSettings.from_env()

    assert settings.storage_currency == "USD"
    assert settings.display_currency == "EUR"
    assert settings.balances_cache_ttl_seconds == 60.0
    assert settings.rules_file == (tmp_path / "rules.json").resolve()
    assert settings.notifications.weekly_digest is True
    assert settings.notifications.email_enabled is False
    assert settings.notifications.large_transaction_threshold == Decimal("250")


def test_invalid_number_falls_back_to_default(monkeypatch) -> None:
    monkeypatch.setenv("BALANCES_CACHE_TTL", "soon")

    settings = AppSettings.from_env()

    assert settings.balances_cache_ttl_seconds == 300.0


def test_country_code_defaults_to_australia(monkeypatch) -> None:
    assert AppSettings.from_env().country_code == "AU"

    monkeypatch.setenv("COUNTRY_CODE", " in ")

    assert AppSettings.from_env().country_code == "IN"


def test_large_transaction_alert_threshold(monkeypatch) -> None:
    monkeypatch.setenv("NOTIFY_LARGE_TRANSACTION_THRESHOLD", "500")

    enabled = AppSettings.from_env().notifications

    assert enabled.large_transaction_alert_threshold == Decimal("500")

    monkeypatch.setenv("NOTIFY_LARGE_TRANSACTIONS", "off")

    disabled = AppSettings.from_env().notifications

    assert disabled.large_transaction_alert_threshold is None
