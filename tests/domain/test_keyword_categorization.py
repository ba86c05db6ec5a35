"""Tests for keyword categorization."""

import pytest

from household_finance.domain.models import CategoryRule
from household_finance.domain.services.categorization import (
    KeywordCategorizer,
    categorize,
    extract_rule_keywords,
    merge_user_rule,
)


@pytest.mark.parametrize(
    ("description", "expected"),
    [
        ("Grocery Store Purchase", "Food"),
        ("Netflix Subscription", "Entertainment"),
        ("Random XYZ 123", "Other"),
        ("UBER RIDE", "Transportation"),
        ("Uber Eats order", "Food"),
        ("Salary Deposit", "Income"),
        ("Online Purchase Amazon", "Shopping"),
        ("", "Other"),
    ],
)
def test_default_rules(description: str, expected: str) -> None:
    assert categorize(description) == expected


def test_first_matching_rule_wins() -> None:
    """Rule order should decide between overlapping keywords."""
    categorizer = KeywordCategorizer(
        [
            CategoryRule(["coffee"], "Treats"),
            CategoryRule(["coffee", "shop"], "Shopping"),
        ]
    )

    assert categorizer.categorize("Coffee Shop") == "Treats"
    assert categorizer.categorize("Gift shop") == "Shopping"


def test_custom_fallback() -> None:
    categorizer = KeywordCategorizer([], fallback="Uncategorized")

    assert categorizer.categorize("anything") == "Uncategorized"


def test_extract_rule_keywords_skips_short_words() -> None:
    assert extract_rule_keywords("To My Local Bakery on Main St") == [
        "local",
        "bakery",
        "main",
    ]


def test_merge_user_rule_appends_new_rule() -> None:
    rules: list[CategoryRule] = []

    merge_user_rule(rules, "Bakery Delight Fitzroy", "Food")

    assert rules == [
        CategoryRule(keywords=["bakery", "delight", "fitzroy"], category="Food")
    ]


def test_merge_user_rule_merges_shared_keyword() -> None:
    """A rule for the same category sharing a keyword should grow."""
    rules = [CategoryRule(keywords=["bakery"], category="Food")]

    merge_user_rule(rules, "Bakery Carlton", "Food")

    assert len(rules) == 1
    assert rules[0].keywords == ["bakery", "carlton"]


def test_merge_user_rule_ignores_descriptions_without_keywords() -> None:
    rules: list[CategoryRule] = []

    merge_user_rule(rules, "a b", "Food")

    assert rules == []
