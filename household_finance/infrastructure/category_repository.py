"""SQLAlchemy-backed repository for the category hierarchy."""

from contextlib import contextmanager
from typing import Iterator
from uuid import uuid4

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from household_finance.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from household_finance.application.ports.database import DatabaseEnginePort
from household_finance.domain.errors import FetchError
from household_finance.domain.models import (
    Category,
    CategoryBucket,
    CategoryGroup,
)


INSERT_GROUP_SQL = text(
    """
    INSERT INTO category_groups (id, user_id, name, category_type, description)
    VALUES (:id, :user_id, :name, :category_type, :description)
    """
)

INSERT_BUCKET_SQL = text(
    """
    INSERT INTO category_buckets (id, user_id, name, group_id)
    VALUES (:id, :user_id, :name, :group_id)
    """
)

INSERT_CATEGORY_SQL = text(
    """
    INSERT INTO categories (id, user_id, name, bucket_id)
    VALUES (:id, :user_id, :name, :bucket_id)
    """
)

CREATE_CATEGORY_TABLES_SQL = (
    """
    CREATE TABLE IF NOT EXISTS category_groups (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        category_type TEXT NOT NULL,
        description TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS category_buckets (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        group_id TEXT
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS categories (
        id TEXT PRIMARY KEY,
        user_id TEXT NOT NULL,
        name TEXT NOT NULL,
        bucket_id TEXT
    )
    """,
)


class SqlAlchemyCategoryRepository(CategoryRepositoryPort):
    """Repository writing category groups, buckets and categories."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        self._db_port = db_port
        self._conn = None

    @contextmanager
    def transaction(self) -> Iterator[None]:
        """Run every insert made inside the block in one transaction.

        The transaction is rolled back when any insert fails.

        Raises:
            FetchError: If the transaction cannot be opened or committed.
        """
        if self._conn is not None:
            yield
            return
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                self._conn = conn
                try:
                    yield
                finally:
                    self._conn = None
        except SQLAlchemyError as exc:
            raise FetchError(f"Category transaction failed: {exc}") from exc

    def ensure_schema(self) -> None:
        """Create the category tables if missing."""
        engine = self._db_port.get_ledger_engine()
        try:
            with engine.begin() as conn:
                for statement in CREATE_CATEGORY_TABLES_SQL:
                    conn.exec_driver_sql(statement)
        except SQLAlchemyError as exc:
            raise FetchError(
                f"Could not create category tables: {exc}"
            ) from exc

    def insert_groups(
        self,
        user_id: str,
        groups: list[dict],
    ) -> list[CategoryGroup]:
        records = self._with_ids(user_id, groups)
        self._insert(INSERT_GROUP_SQL, records, "category groups")
        return [
            CategoryGroup(
                group_id=record["id"],
                name=record["name"],
                category_type=record["category_type"],
                description=record.get("description") or "",
            )
            for record in records
        ]

    def insert_buckets(
        self,
        user_id: str,
        buckets: list[dict],
    ) -> list[CategoryBucket]:
        records = self._with_ids(user_id, buckets)
        self._insert(INSERT_BUCKET_SQL, records, "category buckets")
        return [
            CategoryBucket(
                bucket_id=record["id"],
                name=record["name"],
                group_id=record["group_id"],
            )
            for record in records
        ]

    def insert_categories(
        self,
        user_id: str,
        categories: list[dict],
    ) -> list[Category]:
        records = self._with_ids(user_id, categories)
        self._insert(INSERT_CATEGORY_SQL, records, "categories")
        return [
            Category(
                category_id=record["id"],
                name=record["name"],
                bucket_id=record["bucket_id"],
            )
            for record in records
        ]

    @staticmethod
    def _with_ids(user_id: str, rows: list[dict]) -> list[dict]:
        return [{**row, "id": str(uuid4()), "user_id": user_id} for row in rows]

    def _insert(self, statement, records: list[dict], label: str) -> None:
        if not records:
            return
        try:
            if self._conn is not None:
                self._conn.execute(statement, records)
                return
            engine = self._db_port.get_ledger_engine()
            with engine.begin() as conn:
                conn.execute(statement, records)
        except SQLAlchemyError as exc:
            raise FetchError(f"Could not insert {label}: {exc}") from exc


__all__ = ["SqlAlchemyCategoryRepository"]
