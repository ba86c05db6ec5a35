"""Keyword rule categorization."""

from collections.abc import Iterable, Sequence

from household_finance.domain.constants import FALLBACK_CATEGORY
from household_finance.domain.models import CategoryRule


# Order matters: "uber eats" must be seen before the transport "uber" rule.
DEFAULT_KEYWORD_RULES: tuple[CategoryRule, ...] = (
    CategoryRule(
        ["salary", "payroll", "wage", "direct credit", "freelance"],
        "Income",
    ),
    CategoryRule(
        [
            "uber eats",
            "grocery",
            "groceries",
            "supermarket",
            "woolworths",
            "coles",
            "aldi",
            "restaurant",
            "cafe",
            "coffee",
            "mcdonalds",
            "pizza",
        ],
        "Food",
    ),
    CategoryRule(
        [
            "uber",
            "taxi",
            "lyft",
            "gas station",
            "fuel",
            "petrol",
            "public transport",
            "metro",
        ],
        "Transportation",
    ),
    CategoryRule(
        ["netflix", "spotify", "youtube", "cinema", "movie", "theater"],
        "Entertainment",
    ),
    CategoryRule(
        ["electricity", "utility", "internet", "mobile", "rent", "mortgage"],
        "Bills",
    ),
    CategoryRule(
        ["pharmacy", "doctor", "hospital", "medical", "dental"],
        "Health",
    ),
    CategoryRule(["amazon", "ebay", "clothing", "shopping"], "Shopping"),
    CategoryRule(["flight", "hotel", "airbnb", "airline"], "Travel"),
    CategoryRule(["tuition", "school", "course"], "Education"),
    CategoryRule(["insurance"], "Insurance"),
    CategoryRule(["donation", "charity"], "Charity"),
    CategoryRule(["dividend", "interest", "investment"], "Investment"),
    CategoryRule(
        ["transfer", "bpay", "payid", "atm", "withdrawal"],
        "Banking",
    ),
)


def match_rules(
    description: str,
    rules: Iterable[CategoryRule],
) -> str | None:
    """Return the category of the first rule matching the description.

    Matching is a case-insensitive substring test on each keyword.
    """
    lowered = description.lower()
    for rule in rules:
        if any(keyword.lower() in lowered for keyword in rule.keywords):
            return rule.category
    return None


class KeywordCategorizer:
    """Categorize descriptions with an ordered list of keyword rules."""

    def __init__(
        self,
        rules: Sequence[CategoryRule] = DEFAULT_KEYWORD_RULES,
        fallback: str = FALLBACK_CATEGORY,
    ) -> None:
        self._rules = tuple(rules)
        self._fallback = fallback

    @property
    def rules(self) -> tuple[CategoryRule, ...]:
        return self._rules

    @property
    def fallback(self) -> str:
        return self._fallback

    def categorize(self, description: str) -> str:
        return match_rules(description, self._rules) or self._fallback


_default_categorizer = KeywordCategorizer()


def categorize(description: str) -> str:
    """Categorize a description with the default keyword rules.

    Returns ``"Other"`` when no rule matches.
    """
    return _default_categorizer.categorize(description)


def extract_rule_keywords(description: str, limit: int = 3) -> list[str]:
    """Return the first meaningful words of a description.

    Words of two characters or fewer are dropped.
    """
    words = [word for word in description.lower().split() if len(word) > 2]
    return words[:limit]


def merge_user_rule(
    rules: list[CategoryRule],
    description: str,
    category: str,
) -> list[CategoryRule]:
    """Add a rule learned from a user's categorization.

    Keywords are merged into an existing rule for the same category that
    already shares a keyword; otherwise a new rule is appended.

    Returns:
        list[CategoryRule]: The updated rule list (``rules`` is modified).
    """
    keywords = extract_rule_keywords(description)
    if not keywords:
        return rules
    for rule in rules:
        if rule.category == category and any(
            keyword in keywords for keyword in rule.keywords
        ):
            for keyword in keywords:
                if keyword not in rule.keywords:
                    rule.keywords.append(keyword)
            return rules
    rules.append(CategoryRule(keywords=keywords, category=category))
    return rules


__all__ = [
    "DEFAULT_KEYWORD_RULES",
    "KeywordCategorizer",
    "categorize",
    "extract_rule_keywords",
    "match_rules",
    "merge_user_rule",
]
