"""Use case provisioning the default category hierarchy for a user.

Groups are inserted first, then buckets linked to the returned group ids,
then categories linked to the returned bucket ids. All three layers are
written in one repository transaction.
"""

from household_finance.application.ports.category_repository import (
    CategoryRepositoryPort,
)
from household_finance.application.use_cases.session_guard import (
    require_user_id,
)
from household_finance.domain.constants import (
    DEFAULT_CATEGORIES,
    DEFAULT_CATEGORY_BUCKETS,
    DEFAULT_CATEGORY_GROUPS,
)
from household_finance.domain.models import SeededCategories, UserSession
from household_finance.infrastructure.logging.logger import get_app_logger


class SeedDefaultCategoriesUseCase:
    """Create the default groups, buckets and categories."""

    def __init__(
        self,
        category_repository: CategoryRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            category_repository: Port writing the category hierarchy.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._category_repository = category_repository
        self._logger = logger or get_app_logger()

    def execute(self, session: UserSession | None) -> SeededCategories:
        """Seed the defaults for the session's user.

        Returns:
            SeededCategories: Every record created.

        Raises:
            AuthenticationError: If there is no authenticated session.
            FetchError: If the store rejects an insert.
        """
        user_id = require_user_id(session)
        self._logger.info(f"Seeding default categories for user {user_id}")

        repository = self._category_repository
        with repository.transaction():
            groups = repository.insert_groups(
                user_id,
                [
                    {
                        "name": name,
                        "category_type": category_type,
                        "description": description,
                    }
                    for name, category_type, description
                    in DEFAULT_CATEGORY_GROUPS
                ],
            )
            group_ids = {
                group.category_type: group.group_id for group in groups
            }

            buckets = repository.insert_buckets(
                user_id,
                [
                    {"name": name, "group_id": group_ids.get(category_type)}
                    for name, category_type in DEFAULT_CATEGORY_BUCKETS
                ],
            )
            bucket_ids = {bucket.name: bucket.bucket_id for bucket in buckets}

            categories = repository.insert_categories(
                user_id,
                [
                    {"name": name, "bucket_id": bucket_ids.get(bucket_name)}
                    for name, bucket_name in DEFAULT_CATEGORIES
                ],
            )

        self._logger.info(
            f"Seeded {len(groups)} groups, {len(buckets)} buckets and "
            f"{len(categories)} categories"
        )
        return SeededCategories(
            groups=groups,
            buckets=buckets,
            categories=categories,
        )


__all__ = ["SeedDefaultCategoriesUseCase"]
