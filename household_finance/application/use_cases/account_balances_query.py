"""Cached query returning account balances in the display currency.

The query is disabled (the store is not read) while there is no session or
while the rate table cannot convert from the storage currency to the display
currency. Unconverted figures are never returned.
"""

from dataclasses import dataclass, field

from household_finance.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from household_finance.domain.errors import HouseholdFinanceError
from household_finance.domain.models import (
    AccountBalance,
    ExchangeRates,
    UserSession,
)
from household_finance.domain.services.fx import normalize_balance
from household_finance.infrastructure.logging.logger import get_app_logger
from household_finance.infrastructure.query_cache import TimedQueryCache


STATUS_DISABLED = "disabled"
STATUS_SUCCESS = "success"
STATUS_ERROR = "error"


@dataclass(frozen=True)
class QueryResult:
    """Outcome of a balances query.

    Attributes:
        status: ``disabled``, ``success`` or ``error``.
        data: Converted balances; empty unless status is ``success``.
        error: The surfaced exception when status is ``error``.
        from_cache: True when ``data`` came from the cache.
    """

    status: str
    data: list[AccountBalance] = field(default_factory=list)
    error: Exception | None = None
    from_cache: bool = False

    @property
    def is_disabled(self) -> bool:
        return self.status == STATUS_DISABLED

    @property
    def is_success(self) -> bool:
        return self.status == STATUS_SUCCESS

    @property
    def is_error(self) -> bool:
        return self.status == STATUS_ERROR


class AccountBalancesQuery:
    """Fetch, convert and cache account balances per user and currency."""

    def __init__(
        self,
        balances_use_case: GetAccountBalancesUseCase,
        cache: TimedQueryCache | None = None,
        logger=None,
    ) -> None:
        """Initialize the query.

        Args:
            balances_use_case: Use case computing storage-currency balances.
            cache: Optional cache; a five minute cache is used by default.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balances_use_case = balances_use_case
        self._cache = cache if cache is not None else TimedQueryCache()
        self._logger = logger or get_app_logger()

    def is_enabled(
        self,
        session: UserSession | None,
        display_currency: str,
        rates: ExchangeRates | None,
    ) -> bool:
        """Return True when the query can run without guessing rates."""
        if session is None or not session.user_id:
            return False
        storage_currency = self._balances_use_case.storage_currency
        if storage_currency == display_currency:
            return True
        if rates is None:
            return False
        return rates.covers(storage_currency, display_currency)

    def fetch(
        self,
        session: UserSession | None,
        display_currency: str,
        rates: ExchangeRates | None,
    ) -> QueryResult:
        """Return balances converted into ``display_currency``.

        Args:
            session: Authenticated session, or None.
            display_currency: Currency to express balances in.
            rates: Loaded rate table, or None while rates are unavailable.

        Returns:
            QueryResult: Disabled, successful, or failed outcome.
        """
        if not self.is_enabled(session, display_currency, rates):
            self._logger.info(
                f"Account balances query disabled for {display_currency}"
            )
            return QueryResult(status=STATUS_DISABLED)

        key = (
            session.user_id,
            display_currency,
            rates.fingerprint() if rates is not None else None,
        )
        hit, cached = self._cache.get(key)
        if hit:
            return QueryResult(
                status=STATUS_SUCCESS,
                data=cached,
                from_cache=True,
            )

        storage_currency = self._balances_use_case.storage_currency
        try:
            balances = self._balances_use_case.execute(session)
            converted = [
                normalize_balance(
                    balance,
                    storage_currency,
                    display_currency,
                    rates,
                )
                for balance in balances
            ]
        except HouseholdFinanceError as exc:
            self._logger.error(f"Account balances query failed: {exc}")
            return QueryResult(status=STATUS_ERROR, error=exc)

        self._cache.set(key, converted)
        return QueryResult(status=STATUS_SUCCESS, data=converted)

    def invalidate(self) -> None:
        """Drop every cached result."""
        self._cache.invalidate()


__all__ = [
    "AccountBalancesQuery",
    "QueryResult",
    "STATUS_DISABLED",
    "STATUS_ERROR",
    "STATUS_SUCCESS",
]
