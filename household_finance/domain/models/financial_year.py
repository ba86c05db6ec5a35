"""Domain models for country financial-year rules."""

from dataclasses import dataclass
from datetime import date


@dataclass(frozen=True)
class CountryRule:
    """Financial-year convention of a country.

    Attributes:
        country_code: ISO country code.
        country_name: Display name.
        currency_code: Default currency of the country.
        start_month: Month the financial year starts in (1-12).
        start_day: Day of ``start_month`` the financial year starts on.
    """

    country_code: str
    country_name: str
    currency_code: str
    start_month: int
    start_day: int = 1


@dataclass(frozen=True)
class FinancialYear:
    """A financial year with inclusive start and end dates."""

    start_date: date
    end_date: date
    name: str
    tax_year: int

    def contains(self, on: date) -> bool:
        return self.start_date <= on <= self.end_date

    @property
    def display_name(self) -> str:
        return f"{self.name} ({self.start_date.year}-{self.end_date.year})"


__all__ = ["CountryRule", "FinancialYear"]
