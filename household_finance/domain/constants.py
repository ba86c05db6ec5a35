"""Domain constants for household finance."""

DEFAULT_STORAGE_CURRENCY = "AUD"
DEFAULT_DISPLAY_CURRENCY = "AUD"

ASSET_KIND = "asset"
LIABILITY_KIND = "liability"
ACCOUNT_KINDS = (ASSET_KIND, LIABILITY_KIND)

FALLBACK_CATEGORY = "Other"

DEFAULT_COUNTRY_CODE = "AU"

CONFIDENCE_LOW = "low"
CONFIDENCE_MEDIUM = "medium"
CONFIDENCE_HIGH = "high"
CONFIDENCE_LEVELS = (CONFIDENCE_LOW, CONFIDENCE_MEDIUM, CONFIDENCE_HIGH)

DEFAULT_CATEGORY_GROUPS = (
    ("Income", "income", "Money coming in"),
    ("Expenses", "expense", "Money going out"),
    ("Transfers", "transfer", "Money moving between accounts"),
)

# bucket name -> owning group category_type
DEFAULT_CATEGORY_BUCKETS = (
    ("Salary & Wages", "income"),
    ("Food & Dining", "expense"),
    ("Transportation", "expense"),
    ("Transfers", "transfer"),
)

# category name -> owning bucket name
DEFAULT_CATEGORIES = (
    ("Salary", "Salary & Wages"),
    ("Groceries", "Food & Dining"),
    ("Restaurants", "Food & Dining"),
    ("Gas & Fuel", "Transportation"),
    ("Public Transport", "Transportation"),
    ("Transfer In", "Transfers"),
    ("Transfer Out", "Transfers"),
)


__all__ = [
    "DEFAULT_STORAGE_CURRENCY",
    "DEFAULT_DISPLAY_CURRENCY",
    "ASSET_KIND",
    "LIABILITY_KIND",
    "ACCOUNT_KINDS",
    "FALLBACK_CATEGORY",
    "DEFAULT_COUNTRY_CODE",
    "CONFIDENCE_LOW",
    "CONFIDENCE_MEDIUM",
    "CONFIDENCE_HIGH",
    "CONFIDENCE_LEVELS",
    "DEFAULT_CATEGORY_GROUPS",
    "DEFAULT_CATEGORY_BUCKETS",
    "DEFAULT_CATEGORIES",
]
