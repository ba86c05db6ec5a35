"""Financial-year resolution per country."""

from datetime import date, timedelta

from household_finance.domain.constants import DEFAULT_COUNTRY_CODE
from household_finance.domain.models import CountryRule, FinancialYear


COUNTRY_RULES: dict[str, CountryRule] = {
    "AU": CountryRule("AU", "Australia", "AUD", start_month=7),
    "IN": CountryRule("IN", "India", "INR", start_month=4),
    "US": CountryRule("US", "United States", "USD", start_month=1),
}


def country_rule(country_code: str) -> CountryRule:
    """Return the rule for a country, falling back to Australia."""
    return COUNTRY_RULES.get(country_code, COUNTRY_RULES[DEFAULT_COUNTRY_CODE])


def financial_year_for_date(country_code: str, on: date) -> FinancialYear:
    """Return the financial year containing ``on``.

    The year is named after the calendar year it ends in (``FY2025``).
    Indian years name both calendar years (``FY2024-25``).
    """
    rule = country_rule(country_code)
    start = date(on.year, rule.start_month, rule.start_day)
    if on < start:
        start = date(on.year - 1, rule.start_month, rule.start_day)
    end = date(start.year + 1, rule.start_month, rule.start_day) - timedelta(
        days=1
    )
    tax_year = end.year
    if country_code == "IN":
        name = f"FY{tax_year - 1}-{tax_year % 100:02d}"
    else:
        name = f"FY{tax_year}"
    return FinancialYear(
        start_date=start,
        end_date=end,
        name=name,
        tax_year=tax_year,
    )


def current_financial_year(
    country_code: str,
    today: date | None = None,
) -> FinancialYear:
    return financial_year_for_date(country_code, today or date.today())


def financial_years_for_range(
    country_code: str,
    start_year: int,
    end_year: int,
) -> list[FinancialYear]:
    """Return the financial years whose tax year lies in the range.

    January 1st of a year always falls in the financial year ending in
    that year.
    """
    return [
        financial_year_for_date(country_code, date(year, 1, 1))
        for year in range(start_year, end_year + 1)
    ]


def currency_for_country(country_code: str) -> str:
    return country_rule(country_code).currency_code


def is_date_in_financial_year(on: date, financial_year: FinancialYear) -> bool:
    return financial_year.contains(on)


__all__ = [
    "COUNTRY_RULES",
    "country_rule",
    "currency_for_country",
    "current_financial_year",
    "financial_year_for_date",
    "financial_years_for_range",
    "is_date_in_financial_year",
]
