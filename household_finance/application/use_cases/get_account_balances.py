"""Use case to compute per-account balances for a user."""

from household_finance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_finance.application.use_cases.session_guard import (
    require_user_id,
)
from household_finance.domain.constants import DEFAULT_STORAGE_CURRENCY
from household_finance.domain.models import AccountBalance, UserSession
from household_finance.domain.services.balances import (
    aggregate_account_balances,
)
from household_finance.infrastructure.logging.logger import get_app_logger


def compute_account_balances(
    user_id: str,
    repository: LedgerRepositoryPort,
    *,
    storage_currency: str = DEFAULT_STORAGE_CURRENCY,
    logger=None,
) -> list[AccountBalance]:
    """Fetch a user's accounts and transactions and aggregate balances.

    Args:
        user_id: Identifier of the account owner.
        repository: Port providing accounts and transactions.
        storage_currency: Currency stored amounts are expressed in.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        list[AccountBalance]: One balance per account, in store order.
    """
    resolved_logger = logger or get_app_logger()
    accounts = repository.fetch_accounts(user_id)
    transactions = repository.fetch_transactions(user_id)
    balances = aggregate_account_balances(
        accounts,
        transactions,
        currency_code=storage_currency,
        logger=resolved_logger,
    )
    resolved_logger.info(
        f"Computed {len(balances)} account balances for user {user_id}"
    )
    return balances


class GetAccountBalancesUseCase:
    """Compute account balances for the session's user."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        storage_currency: str = DEFAULT_STORAGE_CURRENCY,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing accounts and transactions.
            storage_currency: Currency stored amounts are expressed in.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._storage_currency = storage_currency
        self._logger = logger or get_app_logger()

    @property
    def storage_currency(self) -> str:
        return self._storage_currency

    def execute(self, session: UserSession | None) -> list[AccountBalance]:
        """Return balances in the storage currency.

        Raises:
            AuthenticationError: If there is no authenticated session.
            FetchError: If the store cannot be read.
        """
        user_id = require_user_id(session)
        return compute_account_balances(
            user_id,
            self._ledger_repository,
            storage_currency=self._storage_currency,
            logger=self._logger,
        )


__all__ = ["GetAccountBalancesUseCase", "compute_account_balances"]
