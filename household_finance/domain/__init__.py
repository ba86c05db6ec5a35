"""Domain package for business rules and core models."""

from .constants import (
    ACCOUNT_KINDS,
    DEFAULT_DISPLAY_CURRENCY,
    DEFAULT_STORAGE_CURRENCY,
    FALLBACK_CATEGORY,
)
from .errors import (
    AuthenticationError,
    FetchError,
    HouseholdFinanceError,
    MissingRateError,
)
from .models import (
    Account,
    AccountBalance,
    CategoryRule,
    ExchangeRates,
    Transaction,
    UserSession,
)
from .services import (
    aggregate_account_balances,
    categorize,
    convert_amount,
    format_currency,
    normalize_balance,
)

__all__ = [
    "ACCOUNT_KINDS",
    "DEFAULT_DISPLAY_CURRENCY",
    "DEFAULT_STORAGE_CURRENCY",
    "FALLBACK_CATEGORY",
    "AuthenticationError",
    "FetchError",
    "HouseholdFinanceError",
    "MissingRateError",
    "Account",
    "AccountBalance",
    "CategoryRule",
    "ExchangeRates",
    "Transaction",
    "UserSession",
    "aggregate_account_balances",
    "categorize",
    "convert_amount",
    "format_currency",
    "normalize_balance",
]
