"""Port for loading exchange-rate tables."""

from typing import Protocol

from household_finance.domain.models import ExchangeRates


class ExchangeRatesPort(Protocol):
    def fetch_rates(self, base_currency: str) -> ExchangeRates:
        """Return rates quoted against ``base_currency``."""


__all__ = ["ExchangeRatesPort"]
