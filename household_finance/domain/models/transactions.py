"""Domain model for ledger transactions."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Transaction:
    """A signed movement on an account."""

    transaction_id: str
    account_id: str
    amount: Decimal
    currency_code: str
    occurred_on: date
    category: str | None = None
    description: str = ""


__all__ = ["Transaction"]
