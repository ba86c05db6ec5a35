"""Detection of transactions that were probably recorded twice.

Transactions are compared newest first. Each unclaimed transaction opens a
group and claims every later transaction with the same absolute amount that
also matches one of these rules:

* same date and same normalized description (``high``);
* dates at most one day apart and description similarity above 0.8
  (``medium``);
* dates at most three days apart and similarity above 0.9 (``low``).

A group keeps the strongest confidence of its members and the criteria of
the first member that joined it.
"""

import re
from collections.abc import Iterable
from datetime import date
from decimal import Decimal

from household_finance.domain.constants import (
    CONFIDENCE_HIGH,
    CONFIDENCE_LEVELS,
    CONFIDENCE_LOW,
    CONFIDENCE_MEDIUM,
)
from household_finance.domain.models import (
    DuplicateDetectionResult,
    DuplicateGroup,
    Transaction,
)


EXACT_MATCH = "Exact match: same amount, date, and description"
NEAR_MATCH = "Near match: same amount, similar description, close dates"
POTENTIAL_MATCH = (
    "Potential match: same amount, very similar description, within 3 days"
)

_NON_WORD = re.compile(r"[^\w\s]")
_SPACES = re.compile(r"\s+")


def normalize_text(text: str) -> str:
    """Lower-case, replace punctuation with spaces and collapse spaces."""
    cleaned = _NON_WORD.sub(" ", text.lower())
    return _SPACES.sub(" ", cleaned).strip()


def text_similarity(first: str, second: str) -> float:
    """Share of distinct words the two descriptions have in common."""
    normalized_first = normalize_text(first)
    normalized_second = normalize_text(second)
    if normalized_first == normalized_second:
        return 1.0
    words_first = set(normalized_first.split(" "))
    words_second = set(normalized_second.split(" "))
    all_words = words_first | words_second
    return len(words_first & words_second) / len(all_words)


def dates_within(first: date, second: date, days: int) -> bool:
    return abs((first - second).days) <= days


def _match(current: Transaction, candidate: Transaction) -> str | None:
    if abs(current.amount) != abs(candidate.amount):
        return None
    if current.occurred_on == candidate.occurred_on and normalize_text(
        current.description
    ) == normalize_text(candidate.description):
        return CONFIDENCE_HIGH
    similarity = text_similarity(current.description, candidate.description)
    if dates_within(current.occurred_on, candidate.occurred_on, 1) and (
        similarity > 0.8
    ):
        return CONFIDENCE_MEDIUM
    if dates_within(current.occurred_on, candidate.occurred_on, 3) and (
        similarity > 0.9
    ):
        return CONFIDENCE_LOW
    return None


_CRITERIA = {
    CONFIDENCE_HIGH: EXACT_MATCH,
    CONFIDENCE_MEDIUM: NEAR_MATCH,
    CONFIDENCE_LOW: POTENTIAL_MATCH,
}


def _rank(confidence: str) -> int:
    return CONFIDENCE_LEVELS.index(confidence)


def _summarize(groups: list[DuplicateGroup]) -> DuplicateDetectionResult:
    total = sum(len(group.duplicates) for group in groups)
    savings = sum(
        (
            abs(transaction.amount)
            for group in groups
            for transaction in group.duplicates
        ),
        Decimal("0"),
    )
    return DuplicateDetectionResult(
        groups=tuple(groups),
        total_duplicates=total,
        potential_savings=savings,
    )


def detect_duplicate_transactions(
    transactions: Iterable[Transaction],
) -> DuplicateDetectionResult:
    """Group likely duplicates and total the amounts they repeat.

    Returns:
        DuplicateDetectionResult: Groups in discovery order, the number of
        repeats beyond the first transaction of each group, and the sum of
        their absolute amounts.
    """
    ordered = sorted(
        transactions,
        key=lambda transaction: transaction.occurred_on,
        reverse=True,
    )
    claimed: set[str] = set()
    groups: list[DuplicateGroup] = []

    for index, current in enumerate(ordered):
        if current.transaction_id in claimed:
            continue
        members = [current]
        confidence = CONFIDENCE_LOW
        criteria = ""
        for candidate in ordered[index + 1:]:
            if candidate.transaction_id in claimed:
                continue
            level = _match(current, candidate)
            if level is None:
                continue
            members.append(candidate)
            if level == CONFIDENCE_HIGH:
                criteria = EXACT_MATCH
            elif not criteria:
                criteria = _CRITERIA[level]
            if _rank(level) > _rank(confidence):
                confidence = level

        if len(members) > 1:
            claimed.update(member.transaction_id for member in members)
            groups.append(
                DuplicateGroup(
                    group_id=f"group-{current.transaction_id}",
                    transactions=tuple(members),
                    criteria=criteria,
                    confidence=confidence,
                )
            )

    return _summarize(groups)


def filter_duplicates_by_confidence(
    result: DuplicateDetectionResult,
    min_confidence: str = CONFIDENCE_LOW,
) -> DuplicateDetectionResult:
    """Keep groups at or above ``min_confidence`` and recompute totals.

    Raises:
        ValueError: If ``min_confidence`` is not a known level.
    """
    if min_confidence not in CONFIDENCE_LEVELS:
        raise ValueError(f"Unknown confidence level: {min_confidence}")
    threshold = _rank(min_confidence)
    kept = [
        group for group in result.groups if _rank(group.confidence) >= threshold
    ]
    return _summarize(kept)


def find_large_transactions(
    transactions: Iterable[Transaction],
    threshold: Decimal,
) -> list[Transaction]:
    """Return transactions whose absolute amount exceeds ``threshold``."""
    return [
        transaction
        for transaction in transactions
        if abs(transaction.amount) > threshold
    ]


__all__ = [
    "EXACT_MATCH",
    "NEAR_MATCH",
    "POTENTIAL_MATCH",
    "dates_within",
    "detect_duplicate_transactions",
    "filter_duplicates_by_confidence",
    "find_large_transactions",
    "normalize_text",
    "text_similarity",
]
