"""Use case reviewing a user's transactions for duplicates and large items."""

from decimal import Decimal

from household_finance.application.ports.ledger_repository import (
    LedgerRepositoryPort,
)
from household_finance.application.use_cases.session_guard import (
    require_user_id,
)
from household_finance.domain.constants import CONFIDENCE_LOW
from household_finance.domain.models import TransactionReview, UserSession
from household_finance.domain.services.duplicates import (
    detect_duplicate_transactions,
    filter_duplicates_by_confidence,
    find_large_transactions,
)
from household_finance.infrastructure.logging.logger import get_app_logger


class ReviewTransactionsUseCase:
    """Flag likely duplicates and, optionally, unusually large transactions."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        large_transaction_threshold: Decimal | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing transactions.
            large_transaction_threshold: Absolute amount above which a
                transaction is flagged; None disables the check.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._threshold = large_transaction_threshold
        self._logger = logger or get_app_logger()

    def execute(
        self,
        session: UserSession | None,
        min_confidence: str = CONFIDENCE_LOW,
        account_id: str | None = None,
    ) -> TransactionReview:
        """Return the review for the session's user.

        Args:
            session: Authenticated session.
            min_confidence: Lowest duplicate confidence to report.
            account_id: Optional account to restrict the review to.

        Raises:
            AuthenticationError: If there is no authenticated session.
            FetchError: If the store cannot be read.
            ValueError: If ``min_confidence`` is unknown.
        """
        user_id = require_user_id(session)
        transactions = self._ledger_repository.fetch_transactions(
            user_id,
            account_id,
        )
        duplicates = filter_duplicates_by_confidence(
            detect_duplicate_transactions(transactions),
            min_confidence,
        )
        large = ()
        if self._threshold is not None:
            large = tuple(find_large_transactions(transactions, self._threshold))

        self._logger.info(
            f"Reviewed {len(transactions)} transactions for user {user_id}: "
            f"{duplicates.total_duplicates} duplicates, {len(large)} large"
        )
        return TransactionReview(
            duplicates=duplicates,
            large_transactions=large,
            large_transaction_threshold=self._threshold,
        )


__all__ = ["ReviewTransactionsUseCase"]
