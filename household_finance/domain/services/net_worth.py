"""Net worth over account balances."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger

from household_finance.domain.constants import ASSET_KIND, LIABILITY_KIND
from household_finance.domain.models import AccountBalance, NetWorthSummary


def summarize_net_worth(
    balances: Iterable[AccountBalance],
    *,
    currency_code: str,
    logger: Logger | None = None,
) -> NetWorthSummary:
    """Return total assets minus total liabilities.

    Liability balances count by magnitude, whichever sign the store keeps
    them in. Balances of any other kind are skipped.

    Args:
        balances: Balances already expressed in ``currency_code``.
        currency_code: Currency of the balances.
        logger: Optional logger used for warnings about unknown kinds.

    Returns:
        NetWorthSummary: Asset, liability and net worth totals.
    """
    asset_total = Decimal("0")
    liability_total = Decimal("0")
    skipped = []
    for balance in balances:
        if balance.account_kind == ASSET_KIND:
            asset_total += balance.calculated_balance
        elif balance.account_kind == LIABILITY_KIND:
            liability_total += abs(balance.calculated_balance)
        else:
            skipped.append(balance.account_id)

    if skipped and logger is not None:
        logger.warning(
            f"Skipped {len(skipped)} balances with an unknown account kind: "
            f"{', '.join(skipped)}"
        )

    return NetWorthSummary(
        asset_total=asset_total,
        liability_total=liability_total,
        net_worth=asset_total - liability_total,
        currency_code=currency_code,
    )


__all__ = ["summarize_net_worth"]
