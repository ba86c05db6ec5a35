"""Tests for the demonstration transactions."""

import csv
import io
from decimal import Decimal

from household_finance.domain.services.sample_data import (
    CSV_COLUMNS,
    build_sample_transactions,
    write_transactions_csv,
)


def test_sample_transactions_belong_to_account() -> None:
    transactions = build_sample_transactions("acc-1", "AUD")

    assert len(transactions) == 8
    assert {t.account_id for t in transactions} == {"acc-1"}
    assert {t.currency_code for t in transactions} == {"AUD"}
    assert transactions[0].description == "Grocery Store Purchase"
    assert transactions[0].amount == Decimal("-85.50")


def test_write_transactions_csv_to_stream() -> None:
    buffer = io.StringIO()
    transactions = build_sample_transactions("acc-1")

    count = write_transactions_csv(transactions, buffer)

    rows = list(csv.reader(io.StringIO(buffer.getvalue())))
    assert count == len(transactions)
    assert tuple(rows[0]) == CSV_COLUMNS
    assert rows[1] == [
        "2024-01-15",
        "Grocery Store Purchase",
        "-85.50",
        "USD",
        "Groceries",
    ]


def test_write_transactions_csv_to_path(tmp_path) -> None:
    target = tmp_path / "sample.csv"

    count = write_transactions_csv(build_sample_transactions("acc-1"), target)

    lines = target.read_text(encoding="utf-8").splitlines()
    assert count == 8
    assert len(lines) == 9
