"""Use case categorizing descriptions with user rules first."""

from collections.abc import Iterable

from household_finance.application.ports.rules_store import (
    UserRulesStorePort,
)
from household_finance.domain.models import (
    CategorizationResult,
    CategoryRule,
)
from household_finance.domain.services.categorization import (
    KeywordCategorizer,
    match_rules,
    merge_user_rule,
)
from household_finance.infrastructure.logging.logger import get_app_logger


SOURCE_USER_RULE = "user_rule"
SOURCE_KEYWORD = "keyword"
SOURCE_FALLBACK = "fallback"


class CategorizeTransactionsUseCase:
    """Categorize descriptions, letting user-defined rules win."""

    def __init__(
        self,
        rules_store: UserRulesStorePort,
        keyword_categorizer: KeywordCategorizer | None = None,
        logger=None,
    ) -> None:
        self._rules_store = rules_store
        self._keyword_categorizer = keyword_categorizer or KeywordCategorizer()
        self._logger = logger or get_app_logger()
        self._user_rules: list[CategoryRule] = rules_store.load_rules()

    @property
    def user_rules(self) -> list[CategoryRule]:
        return list(self._user_rules)

    def categorize(self, description: str) -> CategorizationResult:
        category = match_rules(description, self._user_rules)
        if category is not None:
            return CategorizationResult(description, category, SOURCE_USER_RULE)
        category = match_rules(description, self._keyword_categorizer.rules)
        if category is not None:
            return CategorizationResult(description, category, SOURCE_KEYWORD)
        return CategorizationResult(
            description,
            self._keyword_categorizer.fallback,
            SOURCE_FALLBACK,
        )

    def execute(
        self,
        descriptions: Iterable[str],
    ) -> list[CategorizationResult]:
        """Categorize a batch of descriptions, preserving order."""
        results = [self.categorize(description) for description in descriptions]
        matched = sum(1 for result in results if result.source != SOURCE_FALLBACK)
        self._logger.info(
            f"Categorized {len(results)} descriptions, "
            f"{matched} matched a rule"
        )
        return results

    def add_user_rule(self, description: str, category: str) -> None:
        """Learn a rule from a user's manual categorization and persist it."""
        merge_user_rule(self._user_rules, description, category)
        self._rules_store.save_rules(self._user_rules)
        self._logger.info(f"Stored user rule for category {category}")


__all__ = [
    "CategorizeTransactionsUseCase",
    "SOURCE_FALLBACK",
    "SOURCE_KEYWORD",
    "SOURCE_USER_RULE",
]
