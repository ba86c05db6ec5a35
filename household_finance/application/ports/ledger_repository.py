"""Port for reading accounts and transactions."""

from typing import Protocol

from household_finance.domain.models import Account, Transaction


class LedgerRepositoryPort(Protocol):
    """Port exposing read access to a user's accounts and transactions."""

    def fetch_accounts(self, user_id: str) -> list[Account]:
        """Return the user's accounts in the store's natural order."""

    def fetch_transactions(
        self,
        user_id: str,
        account_id: str | None = None,
    ) -> list[Transaction]:
        """Return the user's transactions, optionally for one account."""


__all__ = ["LedgerRepositoryPort"]
