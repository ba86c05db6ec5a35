"""Demonstration transactions and CSV export."""

import csv
from collections.abc import Iterable
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import IO

from household_finance.domain.models import Transaction


CSV_COLUMNS = ("date", "description", "amount", "currency", "category")

_SAMPLE_ROWS = (
    ("Grocery Store Purchase", "-85.50", date(2024, 1, 15), "Groceries"),
    ("Coffee Shop", "-4.25", date(2024, 1, 16), "Uncategorized"),
    ("Salary Deposit", "3500.00", date(2024, 1, 17), "Salary"),
    ("Gas Station", "-45.80", date(2024, 1, 18), "Uncategorized"),
    ("Restaurant Dinner", "-67.90", date(2024, 1, 19), "Restaurants"),
    ("Online Purchase Amazon", "-23.99", date(2024, 1, 20), "Uncategorized"),
    ("Freelance Payment", "850.00", date(2024, 1, 21), "Freelance"),
    ("Utility Bill Electric", "-120.00", date(2024, 1, 22), "Uncategorized"),
)


def build_sample_transactions(
    account_id: str,
    currency_code: str = "USD",
) -> list[Transaction]:
    """Return a fixed set of demonstration transactions for an account."""
    return [
        Transaction(
            transaction_id=f"sample-{index}",
            account_id=account_id,
            amount=Decimal(amount),
            currency_code=currency_code,
            occurred_on=occurred_on,
            category=category,
            description=description,
        )
        for index, (description, amount, occurred_on, category) in enumerate(
            _SAMPLE_ROWS, start=1
        )
    ]


def write_transactions_csv(
    transactions: Iterable[Transaction],
    target: str | Path | IO[str],
) -> int:
    """Write transactions as CSV to a path or an open text stream.

    Returns:
        int: Number of data rows written.
    """
    if isinstance(target, (str, Path)):
        with open(target, "w", newline="", encoding="utf-8") as handle:
            return _write_rows(transactions, handle)
    return _write_rows(transactions, target)


def _write_rows(transactions: Iterable[Transaction], handle: IO[str]) -> int:
    writer = csv.writer(handle)
    writer.writerow(CSV_COLUMNS)
    count = 0
    for transaction in transactions:
        writer.writerow(
            (
                transaction.occurred_on.isoformat(),
                transaction.description,
                str(transaction.amount),
                transaction.currency_code,
                transaction.category or "",
            )
        )
        count += 1
    return count


__all__ = [
    "CSV_COLUMNS",
    "build_sample_transactions",
    "write_transactions_csv",
]
