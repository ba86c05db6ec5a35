"""Currency conversion against an exchange-rate table."""

from decimal import Decimal

from household_finance.domain.errors import MissingRateError
from household_finance.domain.models import AccountBalance, ExchangeRates


def convert_amount(
    amount: Decimal,
    from_currency: str,
    to_currency: str,
    rates: ExchangeRates,
) -> Decimal:
    """Convert an amount between two currencies.

    The amount is divided by the source rate and multiplied by the target
    rate, both quoted against ``rates.base``. No rounding is applied.

    Args:
        amount: Amount in ``from_currency``.
        from_currency: Source currency code.
        to_currency: Target currency code.
        rates: Rate table quoted against its base currency.

    Returns:
        Decimal: Amount in ``to_currency``.

    Raises:
        MissingRateError: If either currency has no usable rate.
    """
    if from_currency == to_currency:
        return amount
    from_rate = rates.rate_for(from_currency)
    if not from_rate:
        raise MissingRateError(from_currency, rates.base)
    to_rate = rates.rate_for(to_currency)
    if not to_rate:
        raise MissingRateError(to_currency, rates.base)
    return amount / from_rate * to_rate


def normalize_balance(
    balance: AccountBalance,
    from_currency: str,
    to_currency: str,
    rates: ExchangeRates,
) -> AccountBalance:
    """Convert every monetary field of a balance independently.

    Raises:
        MissingRateError: If a required rate is missing.
    """
    if from_currency == to_currency:
        return balance.with_amounts(
            balance.opening_balance,
            balance.transaction_sum,
            balance.calculated_balance,
            to_currency,
        )
    return balance.with_amounts(
        opening_balance=convert_amount(
            balance.opening_balance, from_currency, to_currency, rates
        ),
        transaction_sum=convert_amount(
            balance.transaction_sum, from_currency, to_currency, rates
        ),
        calculated_balance=convert_amount(
            balance.calculated_balance, from_currency, to_currency, rates
        ),
        currency_code=to_currency,
    )


__all__ = ["convert_amount", "normalize_balance"]
