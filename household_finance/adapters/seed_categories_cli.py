"""CLI adapter seeding the default categories for ``FINANCE_USER_ID``."""

import os

from household_finance.application.use_cases.seed_default_categories import (
    SeedDefaultCategoriesUseCase,
)
from household_finance.domain.models import UserSession
from household_finance.infrastructure.container import (
    build_category_repository,
    build_database_adapter,
)
from household_finance.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Create the category tables if needed and seed the defaults."""
    logger = get_app_logger()
    user_id = os.getenv("FINANCE_USER_ID")
    if not user_id:
        logger.warning("FINANCE_USER_ID is required to seed categories.")
        return

    repository = build_category_repository(build_database_adapter())
    repository.ensure_schema()
    use_case = SeedDefaultCategoriesUseCase(repository, logger=logger)
    result = use_case.execute(UserSession(user_id=user_id))

    print(
        f"Seeded {len(result.categories)} categories "
        f"in {len(result.buckets)} buckets for {user_id}."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
