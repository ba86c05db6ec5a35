"""Domain models package."""

from .accounts import Account, AccountBalance
from .categories import (
    CategorizationResult,
    Category,
    CategoryBucket,
    CategoryGroup,
    CategoryRule,
    SeededCategories,
)
from .financial_year import CountryRule, FinancialYear
from .rates import CurrencyInfo, ExchangeRates
from .reports import (
    DuplicateDetectionResult,
    DuplicateGroup,
    NetWorthSummary,
    TransactionReview,
)
from .session import UserSession
from .transactions import Transaction

__all__ = [
    "Account",
    "AccountBalance",
    "Transaction",
    "CategoryRule",
    "CategorizationResult",
    "CategoryGroup",
    "CategoryBucket",
    "Category",
    "SeededCategories",
    "CurrencyInfo",
    "ExchangeRates",
    "UserSession",
    "CountryRule",
    "FinancialYear",
    "NetWorthSummary",
    "DuplicateGroup",
    "DuplicateDetectionResult",
    "TransactionReview",
]
