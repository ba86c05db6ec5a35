"""Tests for the SQLAlchemy ledger repository."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import OperationalError

from household_finance.domain.errors import FetchError
from household_finance.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from household_finance.infrastructure.ledger_repository import (
    SqlAlchemyLedgerRepository,
)


@pytest.fixture
def repository(tmp_path) -> SqlAlchemyLedgerRepository:
    engine = create_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
    repo = SqlAlchemyLedgerRepository(SqlAlchemyDatabaseEngineAdapter(engine))
    repo.ensure_schema()
    with engine.begin() as conn:
        conn.execute(
            text(
                """
                INSERT INTO accounts (
                    id, user_id, name, account_type, kind,
                    opening_balance, opening_balance_date, entity_name,
                    created_at
                )
                VALUES (
                    :id, :user_id, :name, :account_type, :kind,
                    :opening_balance, :opening_balance_date, :entity_name,
                    :created_at
                )
                """
            ),
            [
                {
                    "id": "savings",
                    "user_id": "user-1",
                    "name": "Savings",
                    "account_type": "savings",
                    "kind": "asset",
                    "opening_balance": "1000.00",
                    "opening_balance_date": "2024-01-01",
                    "entity_name": "Household",
                    "created_at": "2024-01-01 09:00:00",
                },
                {
                    "id": "card",
                    "user_id": "user-1",
                    "name": "Credit Card",
                    "account_type": "credit_card",
                    "kind": "liability",
                    "opening_balance": "-200",
                    "opening_balance_date": None,
                    "entity_name": None,
                    "created_at": "2024-02-01 09:00:00",
                },
                {
                    "id": "other",
                    "user_id": "user-2",
                    "name": "Someone Else",
                    "account_type": "bank",
                    "kind": "asset",
                    "opening_balance": "5",
                    "opening_balance_date": None,
                    "entity_name": None,
                    "created_at": "2023-01-01 09:00:00",
                },
            ],
        )
        conn.execute(
            text(
                """
                INSERT INTO transactions (
                    id, user_id, account_id, amount, currency, date,
                    category, description
                )
                VALUES (
                    :id, :user_id, :account_id, :amount, :currency, :date,
                    :category, :description
                )
                """
            ),
            [
                {
                    "id": "t1",
                    "user_id": "user-1",
                    "account_id": "savings",
                    "amount": "-85.50",
                    "currency": "AUD",
                    "date": "2024-01-15",
                    "category": "Groceries",
                    "description": "Grocery Store Purchase",
                },
                {
                    "id": "t2",
                    "user_id": "user-1",
                    "account_id": "savings",
                    "amount": "3500.00",
                    "currency": "AUD",
                    "date": "2024-01-17",
                    "category": "Salary",
                    "description": "Salary Deposit",
                },
                {
                    "id": "t3",
                    "user_id": "user-1",
                    "account_id": "card",
                    "amount": "-45.80",
                    "currency": "AUD",
                    "date": "2024-01-18",
                    "category": None,
                    "description": None,
                },
                {
                    "id": "t4",
                    "user_id": "user-2",
                    "account_id": "other",
                    "amount": "1",
                    "currency": "AUD",
                    "date": "2024-01-18",
                    "category": None,
                    "description": "",
                },
            ],
        )
    return repo


def test_fetch_accounts_returns_user_accounts_in_creation_order(repository):
    accounts = repository.fetch_accounts("user-1")

    assert [account.account_id for account in accounts] == ["savings", "card"]
    assert accounts[0].opening_balance == Decimal("1000")
    assert accounts[0].opening_balance_date == date(2024, 1, 1)
    assert accounts[0].entity_name == "Household"
    assert accounts[1].kind == "liability"
    assert accounts[1].opening_balance == Decimal("-200")
    assert accounts[1].opening_balance_date is None


def test_fetch_transactions_filters_by_user(repository):
    transactions = repository.fetch_transactions("user-1")

    assert [t.transaction_id for t in transactions] == ["t1", "t2", "t3"]
    assert transactions[0].amount == Decimal("-85.5")
    assert transactions[0].occurred_on == date(2024, 1, 15)
    assert transactions[2].description == ""


def test_fetch_transactions_filters_by_account(repository):
    transactions = repository.fetch_transactions("user-1", account_id="card")

    assert [t.transaction_id for t in transactions] == ["t3"]


def test_unknown_user_has_no_accounts(repository):
    assert repository.fetch_accounts("nobody") == []


def test_driver_errors_become_fetch_errors():
    engine = MagicMock()
    engine.connect.side_effect = OperationalError("SELECT", {}, Exception("down"))
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    repo = SqlAlchemyLedgerRepository(db_port)

    with pytest.raises(FetchError):
        repo.fetch_accounts("user-1")
