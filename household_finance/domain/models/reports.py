"""Domain models for summaries derived from balances and transactions."""

from dataclasses import dataclass, field
from decimal import Decimal

from .transactions import Transaction


@dataclass(frozen=True)
class NetWorthSummary:
    """Summary of net worth figures.

    Attributes:
        asset_total: Sum of asset balances.
        liability_total: Sum of liability balances, as a positive amount.
        net_worth: Assets minus liabilities.
        currency_code: Currency the figures are expressed in.
    """

    asset_total: Decimal
    liability_total: Decimal
    net_worth: Decimal
    currency_code: str


@dataclass(frozen=True)
class DuplicateGroup:
    """Transactions that look like repeats of the first one.

    Attributes:
        group_id: ``group-<id of the first transaction>``.
        transactions: The kept transaction followed by its likely repeats.
        criteria: Human readable reason for the grouping.
        confidence: ``high``, ``medium`` or ``low``.
    """

    group_id: str
    transactions: tuple[Transaction, ...]
    criteria: str
    confidence: str

    @property
    def duplicates(self) -> tuple[Transaction, ...]:
        return self.transactions[1:]


@dataclass(frozen=True)
class DuplicateDetectionResult:
    groups: tuple[DuplicateGroup, ...] = ()
    total_duplicates: int = 0
    potential_savings: Decimal = Decimal("0")


@dataclass(frozen=True)
class TransactionReview:
    """Findings of a transaction review for one user."""

    duplicates: DuplicateDetectionResult = field(
        default_factory=DuplicateDetectionResult
    )
    large_transactions: tuple[Transaction, ...] = ()
    large_transaction_threshold: Decimal | None = None


__all__ = [
    "DuplicateDetectionResult",
    "DuplicateGroup",
    "NetWorthSummary",
    "TransactionReview",
]
