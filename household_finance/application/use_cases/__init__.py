"""Application use cases package."""

from .account_balances_query import AccountBalancesQuery, QueryResult
from .categorize_transactions import CategorizeTransactionsUseCase
from .get_account_balance import GetAccountBalanceUseCase
from .get_account_balances import (
    GetAccountBalancesUseCase,
    compute_account_balances,
)
from .get_net_worth_summary import GetNetWorthSummaryUseCase
from .review_transactions import ReviewTransactionsUseCase
from .seed_default_categories import SeedDefaultCategoriesUseCase

__all__ = [
    "AccountBalancesQuery",
    "QueryResult",
    "CategorizeTransactionsUseCase",
    "GetAccountBalanceUseCase",
    "GetAccountBalancesUseCase",
    "compute_account_balances",
    "SeedDefaultCategoriesUseCase",
    "GetNetWorthSummaryUseCase",
    "ReviewTransactionsUseCase",
]
