"""Tests for the seed_categories_cli adapter."""

from types import SimpleNamespace
from unittest.mock import MagicMock

from household_finance.adapters import seed_categories_cli


def test_main_seeds_and_prints_summary(monkeypatch, capsys):
    """The CLI should prepare the schema, run the use case and print."""
    monkeypatch.setenv("FINANCE_USER_ID", "user-1")
    fake_logger = MagicMock()
    dummy_adapter = object()
    repository = MagicMock()
    fake_use_case = MagicMock()
    fake_use_case.execute.return_value = SimpleNamespace(
        categories=[1] * 7,
        buckets=[1] * 4,
    )

    monkeypatch.setattr(
        seed_categories_cli,
        "get_app_logger",
        lambda: fake_logger,
    )
    monkeypatch.setattr(
        seed_categories_cli,
        "build_database_adapter",
        lambda: dummy_adapter,
    )

    def _fake_repository(db_port):
        assert db_port is dummy_adapter
        return repository

    def _fake_use_case(category_repository, logger):
        assert category_repository is repository
        assert logger is fake_logger
        return fake_use_case

    monkeypatch.setattr(
        seed_categories_cli,
        "build_category_repository",
        _fake_repository,
    )
    monkeypatch.setattr(
        seed_categories_cli,
        "SeedDefaultCategoriesUseCase",
        _fake_use_case,
    )

    seed_categories_cli.main()

    repository.ensure_schema.assert_called_once()
    assert fake_use_case.execute.call_args.args[0].user_id == "user-1"
    captured = capsys.readouterr()
    assert "7 categories" in captured.out
