"""CLI adapter writing demonstration transactions to a CSV file.

Each row is printed with the category the rules would suggest for it.
"""

import os
from pathlib import Path

from household_finance.domain.services.sample_data import (
    build_sample_transactions,
    write_transactions_csv,
)
from household_finance.infrastructure.container import (
    build_categorize_use_case,
)
from household_finance.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Write the sample CSV and print suggested categories."""
    logger = get_app_logger()
    account_id = os.getenv("SAMPLE_ACCOUNT_ID", "sample-account")
    target = Path(os.getenv("SAMPLE_CSV_PATH", "sample_transactions.csv"))
    currency = os.getenv("SAMPLE_CURRENCY", "USD")

    transactions = build_sample_transactions(account_id, currency)
    count = write_transactions_csv(transactions, target)
    logger.info(f"Wrote {count} sample transactions to {target}")

    use_case = build_categorize_use_case()
    results = use_case.execute(t.description for t in transactions)
    for result in results:
        print(f"{result.description}: {result.category} ({result.source})")


if __name__ == "__main__":  # pragma: no cover
    main()
