"""SQLAlchemy-backed repository for accounts and transactions."""

from datetime import date, datetime

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from household_finance.application.ports.database import DatabaseEnginePort
from household_finance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_finance.domain.errors import FetchError
from household_finance.domain.models import Account, Transaction
from household_finance.utils.decimal_utils import coerce_decimal


SELECT_ACCOUNTS_SQL = text(
    """
    SELECT id, name, account_type, kind, opening_balance,
           opening_balance_date, entity_name
    FROM accounts
    WHERE user_id = :user_id
    ORDER BY created_at, id
    """
)

CREATE_ACCOUNTS_SQL = """
CREATE TABLE IF NOT EXISTS accounts (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    name TEXT NOT NULL,
    account_type TEXT,
    kind TEXT NOT NULL DEFAULT 'asset',
    opening_balance NUMERIC NOT NULL DEFAULT 0,
    opening_balance_date DATE,
    entity_name TEXT,
    created_at TIMESTAMP DEFAULT CURRENT_TIMESTAMP
)
"""

CREATE_TRANSACTIONS_SQL = """
CREATE TABLE IF NOT EXISTS transactions (
    id TEXT PRIMARY KEY,
    user_id TEXT NOT NULL,
    account_id TEXT NOT NULL,
    amount NUMERIC NOT NULL,
    currency TEXT NOT NULL,
    date DATE NOT NULL,
    category TEXT,
    description TEXT
)
"""


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for the ledger tables."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def ensure_schema(self) -> None:
        """Create the accounts and transactions tables if missing."""
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                conn.exec_driver_sql(CREATE_ACCOUNTS_SQL)
                conn.exec_driver_sql(CREATE_TRANSACTIONS_SQL)
        except SQLAlchemyError as exc:
            raise FetchError(f"Could not create ledger tables: {exc}") from exc

    def fetch_accounts(self, user_id: str) -> list[Account]:
        """Return the user's accounts ordered by creation."""
        rows = self._fetch_rows(
            SELECT_ACCOUNTS_SQL,
            {"user_id": user_id},
            "accounts",
        )
        return [
            Account(
                account_id=str(row.id),
                name=row.name,
                account_type=row.account_type or "",
                kind=row.kind,
                opening_balance=coerce_decimal(row.opening_balance),
                opening_balance_date=_coerce_date(row.opening_balance_date),
                entity_name=row.entity_name,
            )
            for row in rows
        ]

    def fetch_transactions(
        self,
        user_id: str,
        account_id: str | None = None,
    ) -> list[Transaction]:
        """Return the user's transactions, optionally for one account."""
        query, params = self._build_transactions_query(user_id, account_id)
        rows = self._fetch_rows(query, params, "transactions")
        return [
            Transaction(
                transaction_id=str(row.id),
                account_id=str(row.account_id),
                amount=coerce_decimal(row.amount),
                currency_code=row.currency,
                occurred_on=_coerce_date(row.date),
                category=row.category,
                description=row.description or "",
            )
            for row in rows
        ]

    def _fetch_rows(self, query, params: dict, label: str) -> list:
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.connect() as conn:
                return conn.execute(query, params).all()
        except SQLAlchemyError as exc:
            raise FetchError(f"Could not fetch {label}: {exc}") from exc

    @staticmethod
    def _build_transactions_query(
        user_id: str,
        account_id: str | None,
    ):
        base_sql = """
        SELECT id, account_id, amount, currency, date, category, description
        FROM transactions
        WHERE user_id = :user_id
        """
        params = {"user_id": user_id}
        if account_id:
            base_sql += " AND account_id = :account_id"
            params["account_id"] = account_id
        base_sql += " ORDER BY date, id"
        return text(base_sql), params


def _coerce_date(value) -> date | None:
    """Normalize driver date values (date, datetime or ISO string)."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return date.fromisoformat(str(value)[:10])


__all__ = ["SqlAlchemyLedgerRepository"]
