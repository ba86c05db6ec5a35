"""Domain services package."""

from .balances import aggregate_account_balances
from .categorization import (
    DEFAULT_KEYWORD_RULES,
    KeywordCategorizer,
    categorize,
    extract_rule_keywords,
    match_rules,
    merge_user_rule,
)
from .duplicates import (
    detect_duplicate_transactions,
    filter_duplicates_by_confidence,
    find_large_transactions,
)
from .financial_year import (
    COUNTRY_RULES,
    current_financial_year,
    financial_year_for_date,
    financial_years_for_range,
)
from .formatting import (
    CURRENCY_SYMBOLS,
    SUPPORTED_CURRENCIES,
    format_currency,
    normalize_currency_code,
)
from .fx import convert_amount, normalize_balance
from .net_worth import summarize_net_worth
from .sample_data import build_sample_transactions, write_transactions_csv

__all__ = [
    "aggregate_account_balances",
    "convert_amount",
    "normalize_balance",
    "DEFAULT_KEYWORD_RULES",
    "KeywordCategorizer",
    "categorize",
    "extract_rule_keywords",
    "match_rules",
    "merge_user_rule",
    "CURRENCY_SYMBOLS",
    "SUPPORTED_CURRENCIES",
    "format_currency",
    "normalize_currency_code",
    "build_sample_transactions",
    "write_transactions_csv",
    "detect_duplicate_transactions",
    "filter_duplicates_by_confidence",
    "find_large_transactions",
    "COUNTRY_RULES",
    "current_financial_year",
    "financial_year_for_date",
    "financial_years_for_range",
    "summarize_net_worth",
]
