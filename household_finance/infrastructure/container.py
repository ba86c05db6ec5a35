"""Composition root for wiring infrastructure adapters."""

from household_finance.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from household_finance.application.ports.database import DatabaseEnginePort
from household_finance.application.ports.exchange_rates import (
    ExchangeRatesPort,
)
from household_finance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_finance.application.ports.rules_store import (
    UserRulesStorePort,
)
from household_finance.application.use_cases.account_balances_query import (
    AccountBalancesQuery,
)
from household_finance.application.use_cases.categorize_transactions import (
    CategorizeTransactionsUseCase,
)
from household_finance.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from household_finance.application.use_cases.review_transactions import (
    ReviewTransactionsUseCase,
)
from household_finance.infrastructure.category_repository import (
    SqlAlchemyCategoryRepository,
)
from household_finance.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from household_finance.infrastructure.exchange_rates import (
    HttpExchangeRatesProvider,
)
from household_finance.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)
from household_finance.infrastructure.logging.logger import get_app_logger
from household_finance.infrastructure.query_cache import TimedQueryCache
from household_finance.infrastructure.rules_store import JsonUserRulesStore
from household_finance.infrastructure.settings import (
    AppSettings,
    default_rules_file,
)


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the accounts and transactions repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_category_repository(
    db_port: DatabaseEnginePort | None = None,
) -> CategoryRepositoryPort:
    """Return the category hierarchy repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyCategoryRepository(resolved_db)


def build_exchange_rates_provider(
    settings: AppSettings | None = None,
) -> ExchangeRatesPort:
    """Return the HTTP exchange-rate provider."""
    resolved = settings or AppSettings.from_env()
    return HttpExchangeRatesProvider(
        base_url=resolved.rates_url,
        timeout=resolved.rates_timeout_seconds,
        logger=get_app_logger(),
    )


def build_rules_store(
    settings: AppSettings | None = None,
) -> UserRulesStorePort:
    """Return the JSON store for user categorization rules."""
    resolved = settings or AppSettings.from_env()
    return JsonUserRulesStore(
        resolved.rules_file or default_rules_file(),
        logger=get_app_logger(),
    )


def build_account_balances_query(
    db_port: DatabaseEnginePort | None = None,
    settings: AppSettings | None = None,
) -> AccountBalancesQuery:
    """Return the cached display-currency balances query."""
    resolved = settings or AppSettings.from_env()
    use_case = GetAccountBalancesUseCase(
        build_ledger_repository(db_port),
        storage_currency=resolved.storage_currency,
        logger=get_app_logger(),
    )
    return AccountBalancesQuery(
        use_case,
        cache=TimedQueryCache(ttl_seconds=resolved.balances_cache_ttl_seconds),
        logger=get_app_logger(),
    )


def build_review_transactions_use_case(
    db_port: DatabaseEnginePort | None = None,
    settings: AppSettings | None = None,
) -> ReviewTransactionsUseCase:
    """Return the duplicate and large-transaction review use case."""
    resolved = settings or AppSettings.from_env()
    return ReviewTransactionsUseCase(
        build_ledger_repository(db_port),
        large_transaction_threshold=(
            resolved.notifications.large_transaction_alert_threshold
        ),
        logger=get_app_logger(),
    )


def build_categorize_use_case(
    settings: AppSettings | None = None,
) -> CategorizeTransactionsUseCase:
    """Return the categorization use case backed by the rules store."""
    return CategorizeTransactionsUseCase(
        build_rules_store(settings),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_category_repository",
    "build_exchange_rates_provider",
    "build_rules_store",
    "build_account_balances_query",
    "build_review_transactions_use_case",
    "build_categorize_use_case",
]
