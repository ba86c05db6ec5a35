"""Use case to compute net worth from account balances."""

from household_finance.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from household_finance.domain.models import NetWorthSummary, UserSession
from household_finance.domain.services.net_worth import summarize_net_worth
from household_finance.infrastructure.logging.logger import get_app_logger


class GetNetWorthSummaryUseCase:
    """Compute net worth for the session's user in the storage currency."""

    def __init__(
        self,
        balances_use_case: GetAccountBalancesUseCase,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            balances_use_case: Use case computing per-account balances.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._balances_use_case = balances_use_case
        self._logger = logger or get_app_logger()

    def execute(self, session: UserSession | None) -> NetWorthSummary:
        """Return the net worth summary.

        Raises:
            AuthenticationError: If there is no authenticated session.
            FetchError: If the store cannot be read.
        """
        balances = self._balances_use_case.execute(session)
        summary = summarize_net_worth(
            balances,
            currency_code=self._balances_use_case.storage_currency,
            logger=self._logger,
        )
        self._logger.info(
            f"Net worth computed: assets={summary.asset_total}, "
            f"liabilities={summary.liability_total}"
        )
        return summary


__all__ = ["GetNetWorthSummaryUseCase"]
