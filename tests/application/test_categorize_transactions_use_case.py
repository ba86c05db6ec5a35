"""Tests for the CategorizeTransactionsUseCase."""

from unittest.mock import MagicMock

from household_finance.application.use_cases.categorize_transactions import (
    SOURCE_FALLBACK,
    SOURCE_KEYWORD,
    SOURCE_USER_RULE,
    CategorizeTransactionsUseCase,
)
from household_finance.domain.models import CategoryRule
from household_finance.domain.services.categorization import (
    KeywordCategorizer,
)


def _build_store(rules: list[CategoryRule] | None = None) -> MagicMock:
    store = MagicMock()
    store.load_rules.return_value = list(rules or [])
    return store


def test_user_rules_take_priority_over_keywords() -> None:
    store = _build_store([CategoryRule(["netflix"], "Subscriptions")])
    use_case = CategorizeTransactionsUseCase(store, logger=MagicMock())

    result = use_case.categorize("Netflix Subscription")

    assert result.category == "Subscriptions"
    assert result.source == SOURCE_USER_RULE


def test_execute_reports_category_and_source() -> None:
    use_case = CategorizeTransactionsUseCase(_build_store(), logger=MagicMock())

    results = use_case.execute(["UBER RIDE", "Random XYZ 123"])

    assert [(r.category, r.source) for r in results] == [
        ("Transportation", SOURCE_KEYWORD),
        ("Other", SOURCE_FALLBACK),
    ]


def test_add_user_rule_persists_and_applies() -> None:
    store = _build_store()
    use_case = CategorizeTransactionsUseCase(store, logger=MagicMock())

    use_case.add_user_rule("Random XYZ 123", "Hobbies")

    saved_rules = store.save_rules.call_args.args[0]
    assert saved_rules == [
        CategoryRule(keywords=["random", "xyz", "123"], category="Hobbies")
    ]
    assert use_case.categorize("random purchase").category == "Hobbies"


def test_fallback_comes_from_the_injected_categorizer() -> None:
    categorizer = KeywordCategorizer(
        [CategoryRule(["gym"], "Health")],
        fallback="Uncategorized",
    )
    use_case = CategorizeTransactionsUseCase(
        _build_store(),
        keyword_categorizer=categorizer,
        logger=MagicMock(),
    )

    result = use_case.categorize("Random XYZ 123")

    assert result.category == "Uncategorized"
    assert result.source == SOURCE_FALLBACK
