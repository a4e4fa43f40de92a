"""Day-by-day cash-flow projection with cash-gap detection."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import APPROVED, EXPENSE, INCOME
from src.domain.models import (
    Account,
    CashFlowForecast,
    CashFlowPoint,
    DateRange,
    LedgerFilters,
    PlannedPayment,
    Transaction,
)
from src.domain.services.balances import select_accounts
from src.domain.services.periods import filter_transactions
from src.utils.date_utils import iter_days
from src.utils.decimal_utils import sum_decimals


def project_cash_flow(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    planned_payments: Sequence[PlannedPayment],
    date_range: DateRange,
    today: date,
    filters: LedgerFilters,
) -> CashFlowForecast:
    """Walk the window day by day and project the running balance.

    The balance starts from the opening balances of the selected accounts.
    Days up to and including ``today`` apply approved transactions; later
    days apply planned payments. Transfers are not applied.

    Args:
        accounts: Ledger accounts.
        transactions: Full transaction list.
        planned_payments: Planned payments.
        date_range: Inclusive window to materialize.
        today: Boundary between actual and forecast days.
        filters: Account and project selection for transactions.

    Returns:
        CashFlowForecast: One point per day and the cash-gap date.
    """
    running_balance = sum_decimals(
        account.opening_balance
        for account in select_accounts(accounts, filters.account_id)
    )
    actual_by_day = _group_by_day(
        txn
        for txn in filter_transactions(transactions, filters)
        if txn.status == APPROVED
    )
    planned_by_day = _group_by_day(planned_payments)

    points: list[CashFlowPoint] = []
    for day in iter_days(date_range.start, date_range.end):
        if day <= today:
            running_balance += _net_flow(actual_by_day.get(day, ()))
            points.append(
                CashFlowPoint(
                    date=day,
                    balance=running_balance,
                    is_projection=False,
                    actual=running_balance,
                )
            )
        else:
            running_balance += _net_flow(planned_by_day.get(day, ()))
            points.append(
                CashFlowPoint(
                    date=day,
                    balance=running_balance,
                    is_projection=True,
                    forecast=running_balance,
                )
            )
    return CashFlowForecast(points=points, cash_gap_date=find_cash_gap(points))


def find_cash_gap(points: Iterable[CashFlowPoint]) -> date | None:
    """Return the first projected day with a negative balance."""
    for point in points:
        if point.is_projection and point.balance < 0:
            return point.date
    return None


def _group_by_day(records) -> dict[date, list]:
    grouped: dict[date, list] = defaultdict(list)
    for record in records:
        if record.date is not None:
            grouped[record.date].append(record)
    return grouped


def _net_flow(records) -> Decimal:
    flow = Decimal("0")
    for record in records:
        if record.type == INCOME:
            flow += record.amount
        elif record.type == EXPENSE:
            flow -= record.amount
    return flow


__all__ = ["project_cash_flow", "find_cash_gap"]
