"""Domain models for accounts and their derived balances."""

from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Account:
    """An asset or liability account owned by a user.

    Attributes:
        account_id: Store identifier.
        name: Display name.
        account_type: Free-form type tag (bank, savings, credit_card, ...).
        kind: ``asset`` or ``liability``.
        opening_balance: Balance as of ``opening_balance_date``.
        opening_balance_date: Date the opening balance applies from.
        entity_name: Name of the owning entity, when known.
    """

    account_id: str
    name: str
    account_type: str
    kind: str
    opening_balance: Decimal
    opening_balance_date: date | None = None
    entity_name: str | None = None


@dataclass(frozen=True)
class AccountBalance:
    """Derived balance for one account.

    ``calculated_balance`` is always ``opening_balance + transaction_sum``
    when built by the aggregator.
    """

    account_id: str
    account_name: str
    account_kind: str
    opening_balance: Decimal
    transaction_sum: Decimal
    calculated_balance: Decimal
    currency_code: str

    def with_amounts(
        self,
        opening_balance: Decimal,
        transaction_sum: Decimal,
        calculated_balance: Decimal,
        currency_code: str,
    ) -> "AccountBalance":
        """Return a copy carrying new monetary figures."""
        return replace(
            self,
            opening_balance=opening_balance,
            transaction_sum=transaction_sum,
            calculated_balance=calculated_balance,
            currency_code=currency_code,
        )


__all__ = ["Account", "AccountBalance"]
