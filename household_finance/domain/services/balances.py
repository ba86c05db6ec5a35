"""Balance aggregation over accounts and their transactions."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from household_finance.domain.models import (
    Account,
    AccountBalance,
    Transaction,
)
from household_finance.utils.decimal_utils import coerce_decimal


def aggregate_account_balances(
    accounts: Iterable[Account],
    transactions: Iterable[Transaction],
    *,
    currency_code: str,
    logger: Logger | None = None,
) -> list[AccountBalance]:
    """Compute one balance per account.

    Args:
        accounts: Accounts in the order the store returned them.
        transactions: Transactions belonging to those accounts.
        currency_code: Currency the stored amounts are expressed in.
        logger: Optional logger used for warnings about orphan transactions.

    Returns:
        list[AccountBalance]: Balances in account order, with
        ``calculated_balance = opening_balance + transaction_sum``.
    """
    ordered = list(accounts)
    sums: dict[str, Decimal] = {
        account.account_id: Decimal("0") for account in ordered
    }
    orphans = 0
    for transaction in transactions:
        if transaction.account_id not in sums:
            orphans += 1
            continue
        sums[transaction.account_id] += coerce_decimal(transaction.amount)
    if orphans and logger is not None:
        logger.warning(
            f"Ignored {orphans} transactions without a matching account"
        )

    balances = []
    for account in ordered:
        opening = coerce_decimal(account.opening_balance)
        transaction_sum = sums[account.account_id]
        balances.append(
            AccountBalance(
                account_id=account.account_id,
                account_name=account.name,
                account_kind=account.kind,
                opening_balance=opening,
                transaction_sum=transaction_sum,
                calculated_balance=opening + transaction_sum,
                currency_code=currency_code,
            )
        )
    return balances


__all__ = ["aggregate_account_balances"]
