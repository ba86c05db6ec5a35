"""Use case to look up one account's calculated balance."""

from decimal import Decimal

from household_finance.application.use_cases.get_account_balances import (
    GetAccountBalancesUseCase,
)
from household_finance.domain.models import UserSession


class GetAccountBalanceUseCase:
    """Return the calculated balance of a single account."""

    def __init__(self, balances_use_case: GetAccountBalancesUseCase) -> None:
        self._balances_use_case = balances_use_case

    def execute(
        self,
        session: UserSession | None,
        account_id: str,
    ) -> Decimal:
        """Return the account's calculated balance, or 0 when unknown."""
        for balance in self._balances_use_case.execute(session):
            if balance.account_id == account_id:
                return balance.calculated_balance
        return Decimal("0")


__all__ = ["GetAccountBalanceUseCase"]
