"""Headline KPI computation for a selected period."""

from collections.abc import Sequence
from datetime import timedelta
from decimal import Decimal

from src.domain.constants import (
    EXPENSE,
    INCOME,
    KPI_CASH_LABEL,
    KPI_EXPENSE_LABEL,
    KPI_INCOME_LABEL,
    KPI_NET_PROFIT_LABEL,
    SPARKLINE_POINTS,
)
from src.domain.models import (
    CalculatedAccount,
    DateRange,
    KPIData,
    LedgerFilters,
    Transaction,
)
from src.domain.services.balances import select_accounts
from src.domain.services.periods import filter_transactions, sum_period_amount
from src.utils.date_utils import days_between
from src.utils.decimal_utils import round_half_up, sum_decimals


def compute_period_days(date_range: DateRange) -> int:
    """Return the period length used for comparisons, at least one day."""
    return max(1, days_between(date_range.start, date_range.end))


def compute_delta(current: Decimal, previous: Decimal) -> int:
    """Return the integer percentage change from previous to current.

    A zero previous value yields 100 when current is positive, else 0.
    """
    if previous == 0:
        return 100 if current > 0 else 0
    change = (current - previous) / abs(previous) * Decimal("100")
    return round_half_up(change)


def build_sparkline(
    transactions: Sequence[Transaction],
    date_range: DateRange,
    transaction_type: str,
    period_days: int,
) -> list[Decimal]:
    """Sum a transaction type over seven trailing sub-windows.

    Sub-windows are ``period_days // 7`` days long, tiled backward from the
    window end, oldest first. Periods shorter than seven days give a zero
    step, so every point covers the end day only.
    """
    step = period_days // SPARKLINE_POINTS
    points: list[Decimal] = []
    for offset in range(SPARKLINE_POINTS - 1, -1, -1):
        window_end = date_range.end - timedelta(days=offset * step)
        window = DateRange(
            start=window_end - timedelta(days=step),
            end=window_end,
        )
        points.append(sum_period_amount(transactions, window, transaction_type))
    return points


def compute_kpis(
    transactions: Sequence[Transaction],
    calculated_accounts: Sequence[CalculatedAccount],
    date_range: DateRange,
    filters: LedgerFilters,
) -> list[KPIData]:
    """Compute Income, Expenses, Net Profit and Business Cash.

    Args:
        transactions: Full transaction list.
        calculated_accounts: Accounts with derived balances.
        date_range: Current period.
        filters: Account and project selection.

    Returns:
        list[KPIData]: The four metrics in display order.
    """
    txns = filter_transactions(transactions, filters)
    period_days = compute_period_days(date_range)
    previous_range = date_range.shift(period_days)

    income = sum_period_amount(txns, date_range, INCOME)
    previous_income = sum_period_amount(txns, previous_range, INCOME)
    expense = sum_period_amount(txns, date_range, EXPENSE)
    previous_expense = sum_period_amount(txns, previous_range, EXPENSE)
    net_profit = income - expense
    previous_net_profit = previous_income - previous_expense

    income_line = build_sparkline(txns, date_range, INCOME, period_days)
    expense_line = build_sparkline(txns, date_range, EXPENSE, period_days)
    net_profit_line = [
        inflow - outflow for inflow, outflow in zip(income_line, expense_line)
    ]

    total_cash = sum_decimals(
        item.balance
        for item in select_accounts(calculated_accounts, filters.account_id)
    )

    return [
        KPIData(
            label=KPI_INCOME_LABEL,
            value=income,
            previous_value=previous_income,
            delta=compute_delta(income, previous_income),
            sparkline=income_line,
        ),
        KPIData(
            label=KPI_EXPENSE_LABEL,
            value=expense,
            previous_value=previous_expense,
            delta=compute_delta(expense, previous_expense),
            sparkline=expense_line,
        ),
        KPIData(
            label=KPI_NET_PROFIT_LABEL,
            value=net_profit,
            previous_value=previous_net_profit,
            delta=compute_delta(net_profit, previous_net_profit),
            sparkline=net_profit_line,
        ),
        KPIData(
            label=KPI_CASH_LABEL,
            value=total_cash,
            previous_value=Decimal("0"),
            delta=0,
            sparkline=[total_cash],
        ),
    ]


__all__ = [
    "compute_period_days",
    "compute_delta",
    "build_sparkline",
    "compute_kpis",
]
