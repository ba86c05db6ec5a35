"""Domain models for categories and categorization rules."""

from dataclasses import dataclass, field


@dataclass
class CategoryRule:
    """Keywords mapped to a category. Any keyword match selects the rule."""

    keywords: list[str]
    category: str


@dataclass(frozen=True)
class CategorizationResult:
    """Outcome of categorizing one description."""

    description: str
    category: str
    source: str


@dataclass(frozen=True)
class CategoryGroup:
    group_id: str
    name: str
    category_type: str
    description: str = ""


@dataclass(frozen=True)
class CategoryBucket:
    bucket_id: str
    name: str
    group_id: str


@dataclass(frozen=True)
class Category:
    category_id: str
    name: str
    bucket_id: str


@dataclass(frozen=True)
class SeededCategories:
    """Records created by a default-category seeding run."""

    groups: list[CategoryGroup] = field(default_factory=list)
    buckets: list[CategoryBucket] = field(default_factory=list)
    categories: list[Category] = field(default_factory=list)


__all__ = [
    "CategoryRule",
    "CategorizationResult",
    "CategoryGroup",
    "CategoryBucket",
    "Category",
    "SeededCategories",
]
