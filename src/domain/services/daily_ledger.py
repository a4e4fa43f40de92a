"""Per-day ledger behind the calendar view."""

from collections import defaultdict
from collections.abc import Iterable, Sequence
from datetime import date
from decimal import Decimal

from src.domain.constants import (
    ALL_FILTER,
    APPROVED,
    EXPENSE,
    INCOME,
    TRANSFER,
)
from src.domain.models import (
    Account,
    DailyLedgerDay,
    DateRange,
    LedgerFilters,
    PlannedPayment,
    Transaction,
)
from src.domain.services.balances import select_accounts
from src.utils.date_utils import iter_days
from src.utils.decimal_utils import sum_decimals

SHOW_ACTUAL = "actual"
SHOW_PLANNED = "planned"


def build_daily_ledger(
    accounts: Sequence[Account],
    transactions: Sequence[Transaction],
    planned_payments: Sequence[PlannedPayment],
    date_range: DateRange,
    today: date,
    filters: LedgerFilters,
    show: str = ALL_FILTER,
    type_filter: str = ALL_FILTER,
) -> list[DailyLedgerDay]:
    """Return the opening and closing balance of every day in the window.

    The running balance starts from the selected accounts' opening balances
    and absorbs every matching approved transaction dated before the window.
    Within the window, days up to ``today`` apply approved transactions and
    later days apply planned payments. Planned payments are narrowed by
    account and project. When one account is selected its transfers move
    the balance: outgoing ones subtract, incoming ones add.

    Args:
        accounts: Ledger accounts.
        transactions: Full transaction list.
        planned_payments: Planned payments.
        date_range: Inclusive window of calendar days.
        today: Last day treated as actual.
        filters: Account and project selection.
        show: ``"all"``, ``"actual"`` or ``"planned"``. Future approved
            transactions count unless ``"planned"``; past planned payments
            are listed in the day totals unless ``"actual"``, without
            moving the balance.
        type_filter: ``"all"``, ``INCOME`` or ``EXPENSE``.

    Returns:
        list[DailyLedgerDay]: One entry per day, ascending.
    """
    selected_account = filters.account_id
    running_balance = sum_decimals(
        account.opening_balance
        for account in select_accounts(accounts, selected_account)
    )
    matching = [
        txn
        for txn in transactions
        if txn.status == APPROVED
        and txn.date is not None
        and _matches_transaction(txn, filters)
        and _matches_type(txn.type, type_filter)
    ]
    for txn in matching:
        if txn.date < date_range.start:
            running_balance += _balance_effect(txn, selected_account)

    actual_by_day = _group_by_day(matching)
    planned_by_day = _group_by_day(
        payment
        for payment in planned_payments
        if _matches(payment.account_id, selected_account)
        and _matches(payment.project_id, filters.project_id)
        and _matches_type(payment.type, type_filter)
    )

    days: list[DailyLedgerDay] = []
    for day in iter_days(date_range.start, date_range.end):
        is_projection = day > today
        start_balance = running_balance
        income = Decimal("0")
        expense = Decimal("0")

        if not is_projection or show != SHOW_PLANNED:
            for txn in actual_by_day.get(day, ()):
                running_balance += _balance_effect(txn, selected_account)
                if txn.type == INCOME:
                    income += txn.amount
                elif txn.type == EXPENSE:
                    expense += txn.amount

        if is_projection or show != SHOW_ACTUAL:
            for payment in planned_by_day.get(day, ()):
                if payment.type == INCOME:
                    income += payment.amount
                    if is_projection:
                        running_balance += payment.amount
                elif payment.type == EXPENSE:
                    expense += payment.amount
                    if is_projection:
                        running_balance -= payment.amount

        days.append(
            DailyLedgerDay(
                date=day,
                start_balance=start_balance,
                end_balance=running_balance,
                income=income,
                expense=expense,
                is_projection=is_projection,
                has_cash_gap=running_balance < 0,
            )
        )
    return days


def _balance_effect(txn: Transaction, selected_account: str) -> Decimal:
    if txn.type == INCOME:
        return txn.amount
    if txn.type == EXPENSE:
        return -txn.amount
    if txn.type == TRANSFER and selected_account != ALL_FILTER:
        effect = Decimal("0")
        if txn.account_id == selected_account:
            effect -= txn.amount
        if txn.to_account_id == selected_account:
            effect += txn.amount
        return effect
    return Decimal("0")


def _matches_transaction(txn: Transaction, filters: LedgerFilters) -> bool:
    account_match = _matches(txn.account_id, filters.account_id) or (
        txn.type == TRANSFER and txn.to_account_id == filters.account_id
    )
    return account_match and _matches(txn.project_id, filters.project_id)


def _matches(reference: str | None, selected: str) -> bool:
    return selected == ALL_FILTER or reference == selected


def _matches_type(record_type: str, type_filter: str) -> bool:
    return type_filter == ALL_FILTER or record_type == type_filter


def _group_by_day(records: Iterable) -> dict[date, list]:
    grouped: dict[date, list] = defaultdict(list)
    for record in records:
        if record.date is not None:
            grouped[record.date].append(record)
    return grouped


__all__ = ["SHOW_ACTUAL", "SHOW_PLANNED", "build_daily_ledger"]
