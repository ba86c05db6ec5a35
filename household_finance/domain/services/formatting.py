"""Currency catalogue and display formatting."""

from decimal import Decimal

from household_finance.domain.models import CurrencyInfo
from household_finance.utils.decimal_utils import coerce_decimal


SUPPORTED_CURRENCIES: tuple[CurrencyInfo, ...] = (
    CurrencyInfo("AUD", "Australian Dollar", "A$"),
    CurrencyInfo("USD", "US Dollar", "$"),
    CurrencyInfo("EUR", "Euro", "€"),
    CurrencyInfo("GBP", "British Pound", "£"),
    CurrencyInfo("NZD", "New Zealand Dollar", "NZ$"),
    CurrencyInfo("CAD", "Canadian Dollar", "C$"),
    CurrencyInfo("JPY", "Japanese Yen", "¥"),
    CurrencyInfo("INR", "Indian Rupee", "₹"),
    CurrencyInfo("SGD", "Singapore Dollar", "S$"),
)

CURRENCY_SYMBOLS = {info.code: info.symbol for info in SUPPORTED_CURRENCIES}


def normalize_currency_code(code: str | None) -> str | None:
    """Return an upper-cased, stripped currency code, or None when blank."""
    if not code:
        return None
    cleaned = code.strip()
    return cleaned.upper() if cleaned else None


def format_currency(amount, currency_code: str) -> str:
    """Format an amount with its currency symbol and two decimals.

    Examples: ``A$1,234.56``, ``-A$1,234.56``, ``A$0.00``.
    """
    value = coerce_decimal(amount)
    symbol = CURRENCY_SYMBOLS.get(currency_code, currency_code)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"


__all__ = [
    "SUPPORTED_CURRENCIES",
    "CURRENCY_SYMBOLS",
    "format_currency",
    "normalize_currency_code",
]
