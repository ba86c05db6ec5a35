"""Tests for the ReviewTransactionsUseCase."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from household_finance.application.use_cases.review_transactions import (
    ReviewTransactionsUseCase,
)
from household_finance.domain.errors import AuthenticationError
from household_finance.domain.models import Transaction, UserSession


SESSION = UserSession(user_id="user-1")


def _tx(tx_id: str, amount: str, day: int, description: str) -> Transaction:
    return Transaction(
        transaction_id=tx_id,
        account_id="acc-1",
        amount=Decimal(amount),
        currency_code="AUD",
        occurred_on=date(2024, 5, day),
        description=description,
    )


def _repository() -> MagicMock:
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        _tx("t1", "-1200", 3, "Rent May"),
        _tx("t2", "-1200", 3, "Rent May"),
        _tx("t3", "-9.99", 4, "Spotify"),
    ]
    return repository


def test_execute_reports_duplicates_and_large_transactions() -> None:
    repository = _repository()
    use_case = ReviewTransactionsUseCase(
        repository,
        large_transaction_threshold=Decimal("1000"),
        logger=MagicMock(),
    )

    review = use_case.execute(SESSION, account_id="acc-1")

    repository.fetch_transactions.assert_called_once_with("user-1", "acc-1")
    assert review.duplicates.total_duplicates == 1
    assert review.duplicates.potential_savings == Decimal("1200")
    assert [t.transaction_id for t in review.large_transactions] == [
        "t1",
        "t2",
    ]
    assert review.large_transaction_threshold == Decimal("1000")


def test_large_transaction_check_is_off_without_threshold() -> None:
    use_case = ReviewTransactionsUseCase(_repository(), logger=MagicMock())

    review = use_case.execute(SESSION)

    assert review.large_transactions == ()
    assert review.large_transaction_threshold is None


def test_min_confidence_filters_groups() -> None:
    repository = MagicMock()
    repository.fetch_transactions.return_value = [
        _tx("t1", "30", 10, "gym membership weekly fee direct"),
        _tx("t2", "30", 11, "gym membership weekly fee direct au"),
    ]
    use_case = ReviewTransactionsUseCase(repository, logger=MagicMock())

    medium = use_case.execute(SESSION, "medium").duplicates
    assert [group.confidence for group in medium.groups] == ["medium"]
    assert use_case.execute(SESSION, "high").duplicates.groups == ()


def test_execute_requires_session() -> None:
    repository = _repository()
    use_case = ReviewTransactionsUseCase(repository, logger=MagicMock())

    with pytest.raises(AuthenticationError):
        use_case.execute(None)

    repository.fetch_transactions.assert_not_called()
