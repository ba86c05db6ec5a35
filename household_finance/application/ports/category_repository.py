"""Port for provisioning category groups, buckets and categories."""

from typing import ContextManager, Protocol

from household_finance.domain.models import (
    Category,
    CategoryBucket,
    CategoryGroup,
)


class CategoryRepositoryPort(Protocol):
    """Port writing the category hierarchy of a user."""

    def transaction(self) -> ContextManager[None]:
        """Group the inserts made inside the block into one transaction."""

    def insert_groups(
        self,
        user_id: str,
        groups: list[dict],
    ) -> list[CategoryGroup]:
        """Insert groups (name, category_type, description) and return them."""

    def insert_buckets(
        self,
        user_id: str,
        buckets: list[dict],
    ) -> list[CategoryBucket]:
        """Insert buckets (name, group_id) and return them."""

    def insert_categories(
        self,
        user_id: str,
        categories: list[dict],
    ) -> list[Category]:
        """Insert categories (name, bucket_id) and return them."""


__all__ = ["CategoryRepositoryPort"]
