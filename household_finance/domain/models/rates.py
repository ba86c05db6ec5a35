"""Domain models for currencies and exchange rates."""

from dataclasses import dataclass, field
from decimal import Decimal


@dataclass(frozen=True)
class CurrencyInfo:
    code: str
    name: str
    symbol: str


@dataclass(frozen=True)
class ExchangeRates:
    """Rates quoted as units of each currency per one unit of ``base``."""

    base: str
    rates: dict[str, Decimal] = field(default_factory=dict)

    def rate_for(self, currency_code: str) -> Decimal | None:
        """Return the rate for a currency, or None when unknown.

        The base currency always has a rate of 1.
        """
        if currency_code == self.base:
            return Decimal("1")
        return self.rates.get(currency_code)

    def covers(self, *currency_codes: str) -> bool:
        """Return True when every given currency has a usable rate."""
        for code in currency_codes:
            rate = self.rate_for(code)
            if rate is None or rate == 0:
                return False
        return True

    def fingerprint(self) -> tuple:
        """Hashable identity of the rate table, for cache keys."""
        return (self.base, tuple(sorted(self.rates.items())))


__all__ = ["CurrencyInfo", "ExchangeRates"]
