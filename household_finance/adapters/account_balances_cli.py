"""CLI adapter printing account balances in the display currency.

The user comes from ``FINANCE_USER_ID`` and the currency from
``DISPLAY_CURRENCY``. Exchange rates are only fetched when the display
currency differs from the storage currency. The listing ends with the
net worth and the current financial year of ``COUNTRY_CODE``.
"""

import os

from household_finance.domain.errors import FetchError
from household_finance.domain.models import UserSession
from household_finance.domain.services.financial_year import (
    current_financial_year,
)
from household_finance.domain.services.formatting import format_currency
from household_finance.domain.services.net_worth import summarize_net_worth
from household_finance.infrastructure.container import (
    build_account_balances_query,
    build_exchange_rates_provider,
)
from household_finance.infrastructure.logging.logger import (
    get_app_logger,
    get_usage_logger,
)
from household_finance.infrastructure.settings import AppSettings


def main() -> None:
    """Run the balances query once and print the result."""
    logger = get_app_logger()
    settings = AppSettings.from_env()
    user_id = os.getenv("FINANCE_USER_ID")
    if not user_id:
        logger.warning("FINANCE_USER_ID is required to list balances.")
        return
    session = UserSession(user_id=user_id)
    display_currency = settings.display_currency

    rates = None
    if display_currency != settings.storage_currency:
        provider = build_exchange_rates_provider(settings)
        try:
            rates = provider.fetch_rates(settings.storage_currency)
        except FetchError as exc:
            logger.warning(f"Exchange rates unavailable: {exc}")

    query = build_account_balances_query(settings=settings)
    result = query.fetch(session, display_currency, rates)
    get_usage_logger().info(
        f"balances_cli user={user_id} currency={display_currency} "
        f"status={result.status}"
    )

    if result.is_disabled:
        print(
            f"Balances unavailable: no exchange rate from "
            f"{settings.storage_currency} to {display_currency}."
        )
        return
    if result.is_error:
        print(f"Failed to compute balances: {result.error}")
        return

    for balance in result.data:
        print(
            f"{balance.account_name} ({balance.account_kind}): "
            f"{format_currency(balance.calculated_balance, balance.currency_code)}"
        )
    print(f"{len(result.data)} accounts")

    summary = summarize_net_worth(
        result.data,
        currency_code=display_currency,
        logger=logger,
    )
    print(
        f"Net worth: {format_currency(summary.net_worth, display_currency)} "
        f"(assets {format_currency(summary.asset_total, display_currency)}, "
        "liabilities "
        f"{format_currency(summary.liability_total, display_currency)})"
    )
    financial_year = current_financial_year(settings.country_code)
    print(f"Financial year: {financial_year.display_name}")


if __name__ == "__main__":  # pragma: no cover
    main()
