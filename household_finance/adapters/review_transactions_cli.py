"""CLI adapter reviewing ``FINANCE_USER_ID``'s transactions.

Prints likely duplicate groups at or above ``DUPLICATE_MIN_CONFIDENCE``
(default ``low``) and, when large-transaction alerts are on, every
transaction above the configured threshold.
"""

import os

from household_finance.domain.constants import CONFIDENCE_LEVELS
from household_finance.domain.models import UserSession
from household_finance.domain.services.formatting import format_currency
from household_finance.infrastructure.container import (
    build_review_transactions_use_case,
)
from household_finance.infrastructure.logging.logger import get_app_logger
from household_finance.infrastructure.settings import AppSettings


def main() -> None:
    """Run the transaction review once and print the findings."""
    logger = get_app_logger()
    settings = AppSettings.from_env()
    user_id = os.getenv("FINANCE_USER_ID")
    if not user_id:
        logger.warning("FINANCE_USER_ID is required to review transactions.")
        return
    min_confidence = os.getenv("DUPLICATE_MIN_CONFIDENCE", "low").lower()
    if min_confidence not in CONFIDENCE_LEVELS:
        logger.warning(f"Unknown duplicate confidence: {min_confidence}")
        return

    use_case = build_review_transactions_use_case(settings=settings)
    review = use_case.execute(UserSession(user_id=user_id), min_confidence)
    currency = settings.storage_currency

    for group in review.duplicates.groups:
        first = group.transactions[0]
        print(
            f"[{group.confidence}] {first.occurred_on} {first.description} "
            f"{format_currency(first.amount, currency)} "
            f"x{len(group.transactions)}: {group.criteria}"
        )
    print(
        f"{review.duplicates.total_duplicates} duplicates, potential savings "
        f"{format_currency(review.duplicates.potential_savings, currency)}"
    )

    if review.large_transaction_threshold is None:
        return
    threshold = format_currency(review.large_transaction_threshold, currency)
    for transaction in review.large_transactions:
        print(
            f"Large: {transaction.occurred_on} {transaction.description} "
            f"{format_currency(transaction.amount, currency)}"
        )
    print(f"{len(review.large_transactions)} transactions above {threshold}")


if __name__ == "__main__":  # pragma: no cover
    main()
