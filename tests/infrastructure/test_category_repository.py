"""Tests for the SQLAlchemy category repository."""

from unittest.mock import MagicMock

import pytest
from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError

from household_finance.application.use_cases.seed_default_categories import (
    SeedDefaultCategoriesUseCase,
)
from household_finance.domain.errors import FetchError
from household_finance.domain.models import UserSession
from household_finance.infrastructure.category_repository import (
    SqlAlchemyCategoryRepository,
)
from household_finance.infrastructure.db import SqlAlchemyDatabaseEngineAdapter


INCOME_GROUP = {
    "name": "Income",
    "category_type": "income",
    "description": "",
}


@pytest.fixture
def engine(tmp_path):
    return create_engine(f"sqlite:///{tmp_path / 'categories.db'}")


@pytest.fixture
def repository(engine) -> SqlAlchemyCategoryRepository:
    repo = SqlAlchemyCategoryRepository(SqlAlchemyDatabaseEngineAdapter(engine))
    repo.ensure_schema()
    return repo


def test_insert_groups_assigns_ids_and_persists(repository, engine):
    groups = repository.insert_groups(
        "user-1",
        [{"name": "Income", "category_type": "income", "description": "In"}],
    )

    assert groups[0].group_id
    with engine.connect() as conn:
        row = conn.execute(
            text("SELECT user_id, name FROM category_groups WHERE id = :id"),
            {"id": groups[0].group_id},
        ).first()
    assert row.user_id == "user-1"
    assert row.name == "Income"


def test_seeding_writes_the_full_hierarchy(repository, engine):
    use_case = SeedDefaultCategoriesUseCase(repository, logger=MagicMock())

    use_case.execute(UserSession(user_id="user-1"))

    with engine.connect() as conn:
        counts = {
            table: conn.execute(
                text(f"SELECT COUNT(*) FROM {table} WHERE user_id = 'user-1'")
            ).scalar_one()
            for table in ("category_groups", "category_buckets", "categories")
        }
        orphan_categories = conn.execute(
            text(
                """
                SELECT COUNT(*) FROM categories c
                LEFT JOIN category_buckets b ON b.id = c.bucket_id
                WHERE b.id IS NULL
                """
            )
        ).scalar_one()
    assert counts == {
        "category_groups": 3,
        "category_buckets": 4,
        "categories": 7,
    }
    assert orphan_categories == 0


def test_insert_errors_become_fetch_errors():
    engine = MagicMock()
    engine.begin.side_effect = IntegrityError("INSERT", {}, Exception("dup"))
    db_port = MagicMock()
    db_port.get_ledger_engine.return_value = engine
    repo = SqlAlchemyCategoryRepository(db_port)

    with pytest.raises(FetchError):
        repo.insert_categories("user-1", [{"name": "X", "bucket_id": None}])


def test_empty_insert_skips_database():
    db_port = MagicMock()
    repo = SqlAlchemyCategoryRepository(db_port)

    assert repo.insert_buckets("user-1", []) == []
    db_port.get_ledger_engine.assert_not_called()


def test_failed_category_insert_rolls_back_earlier_layers(repository, engine):
    with pytest.raises(FetchError):
        with repository.transaction():
            groups = repository.insert_groups(
                "user-1",
                [INCOME_GROUP],
            )
            repository.insert_buckets(
                "user-1",
                [{"name": "Salary & Wages", "group_id": groups[0].group_id}],
            )
            repository.insert_categories(
                "user-1",
                [{"name": None, "bucket_id": None}],
            )

    with engine.connect() as conn:
        for table in ("category_groups", "category_buckets", "categories"):
            count = conn.execute(
                text(f"SELECT COUNT(*) FROM {table}")
            ).scalar_one()
            assert count == 0

    # The repository is usable again after the rollback.
    assert repository.insert_groups(
        "user-1",
        [INCOME_GROUP],
    )
