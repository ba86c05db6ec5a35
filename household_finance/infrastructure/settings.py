"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass, field
from decimal import Decimal
import os
from pathlib import Path

import dotenv

from household_finance.domain.constants import (
    DEFAULT_COUNTRY_CODE,
    DEFAULT_DISPLAY_CURRENCY,
    DEFAULT_STORAGE_CURRENCY,
)
from household_finance.domain.services.formatting import (
    normalize_currency_code,
)
from household_finance.infrastructure.logging.logger import get_app_logger
from household_finance.utils.utils import get_project_root


DEFAULT_RATES_URL = "https://open.er-api.com/v6/latest"
_TRUE_VALUES = {"1", "true", "yes", "on"}


def default_rules_file() -> Path:
    """Return the rules file used when none is configured."""
    return get_project_root() / "data" / "category_rules.json"


@dataclass(frozen=True)
class NotificationSettings:
    """User notification preferences.

    Only the large-transaction settings drive behaviour here (the
    transaction review); the other flags are carried for delivery channels
    outside this package.

    Attributes:
        email_enabled: Send notifications by email.
        budget_alerts: Alert when a budget is close to its limit.
        large_transaction_alerts: Alert on transactions above the threshold.
        large_transaction_threshold: Amount above which a transaction is
            considered large, in the storage currency.
        weekly_digest: Send a weekly summary.
    """

    email_enabled: bool = True
    budget_alerts: bool = True
    large_transaction_alerts: bool = True
    large_transaction_threshold: Decimal = Decimal("1000")
    weekly_digest: bool = False

    @property
    def large_transaction_alert_threshold(self) -> Decimal | None:
        """Threshold to flag transactions at, or None when alerts are off."""
        if not self.large_transaction_alerts:
            return None
        return self.large_transaction_threshold


@dataclass(frozen=True)
class AppSettings:
    """Application settings sourced from the environment."""

    storage_currency: str = DEFAULT_STORAGE_CURRENCY
    display_currency: str = DEFAULT_DISPLAY_CURRENCY
    balances_cache_ttl_seconds: float = 300.0
    rates_url: str = DEFAULT_RATES_URL
    rates_timeout_seconds: float = 10.0
    rules_file: Path | None = None
    country_code: str = DEFAULT_COUNTRY_CODE
    notifications: NotificationSettings = field(
        default_factory=NotificationSettings
    )

    @classmethod
    def from_env(cls) -> "AppSettings":
        """Build settings from environment variables.

        Returns:
            AppSettings: Settings sourced from environment variables, with
            invalid values replaced by defaults.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        defaults = cls()
        rules_file = os.getenv("CATEGORY_RULES_FILE")
        return cls(
            storage_currency=cls._code(
                "STORAGE_CURRENCY", defaults.storage_currency
            ),
            display_currency=cls._code(
                "DISPLAY_CURRENCY", defaults.display_currency
            ),
            balances_cache_ttl_seconds=cls._number(
                "BALANCES_CACHE_TTL",
                defaults.balances_cache_ttl_seconds,
                logger,
            ),
            rates_url=os.getenv("EXCHANGE_RATES_URL", defaults.rates_url),
            rates_timeout_seconds=cls._number(
                "EXCHANGE_RATES_TIMEOUT",
                defaults.rates_timeout_seconds,
                logger,
            ),
            country_code=cls._code(
                "COUNTRY_CODE", defaults.country_code
            ),
            rules_file=(
                Path(rules_file).expanduser().resolve()
                if rules_file
                else default_rules_file()
            ),
            notifications=NotificationSettings(
                email_enabled=cls._flag("NOTIFY_EMAIL", True),
                budget_alerts=cls._flag("NOTIFY_BUDGET_ALERTS", True),
                large_transaction_alerts=cls._flag(
                    "NOTIFY_LARGE_TRANSACTIONS", True
                ),
                large_transaction_threshold=Decimal(
                    str(
                        cls._number(
                            "NOTIFY_LARGE_TRANSACTION_THRESHOLD",
                            1000,
                            logger,
                        )
                    )
                ),
                weekly_digest=cls._flag("NOTIFY_WEEKLY_DIGEST", False),
            ),
        )

    @staticmethod
    def _code(name: str, default: str) -> str:
        return normalize_currency_code(os.getenv(name)) or default

    @staticmethod
    def _flag(name: str, default: bool) -> bool:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        return raw.strip().lower() in _TRUE_VALUES

    @staticmethod
    def _number(name: str, default: float, logger) -> float:
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            return float(raw)
        except ValueError:
            logger.warning(f"Invalid number for {name}: {raw!r}")
            return default


__all__ = [
    "AppSettings",
    "NotificationSettings",
    "DEFAULT_RATES_URL",
    "default_rules_file",
]
