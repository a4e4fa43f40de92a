"""Period aggregation over approved transactions."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import ALL_FILTER, APPROVED
from src.domain.models import DateRange, LedgerFilters, Transaction
from src.utils.decimal_utils import sum_decimals


def filter_transactions(
    transactions: Iterable[Transaction],
    filters: LedgerFilters,
) -> list[Transaction]:
    """Keep transactions matching the account and project selection.

    The account filter matches the source ``account_id`` only.

    Args:
        transactions: Ledger transactions.
        filters: Account and project selection.

    Returns:
        list[Transaction]: Matching transactions in input order.
    """
    return [
        txn
        for txn in transactions
        if _matches(txn.account_id, filters.account_id)
        and _matches(txn.project_id, filters.project_id)
    ]


def is_approved_in_range(txn: Transaction, date_range: DateRange) -> bool:
    """Return True for an approved transaction dated inside the window."""
    return txn.status == APPROVED and date_range.contains(txn.date)


def select_period_transactions(
    transactions: Iterable[Transaction],
    date_range: DateRange,
    transaction_type: str,
) -> list[Transaction]:
    """Return approved transactions of a type dated inside the window."""
    return [
        txn
        for txn in transactions
        if txn.type == transaction_type and is_approved_in_range(txn, date_range)
    ]


def sum_period_amount(
    transactions: Iterable[Transaction],
    date_range: DateRange,
    transaction_type: str,
    *,
    account_id: str = ALL_FILTER,
    project_id: str = ALL_FILTER,
) -> Decimal:
    """Sum approved amounts of a type over an inclusive window.

    Args:
        transactions: Ledger transactions.
        date_range: Inclusive window of calendar days.
        transaction_type: INCOME or EXPENSE.
        account_id: Source account id or ``"all"``.
        project_id: Project id or ``"all"``.

    Returns:
        Decimal: Sum of matching amounts, zero when nothing matches.
    """
    filtered = filter_transactions(
        transactions,
        LedgerFilters(account_id=account_id, project_id=project_id),
    )
    return sum_decimals(
        txn.amount
        for txn in select_period_transactions(
            filtered,
            date_range,
            transaction_type,
        )
    )


def _matches(reference: str | None, selected: str) -> bool:
    return selected == ALL_FILTER or reference == selected


__all__ = [
    "filter_transactions",
    "is_approved_in_range",
    "select_period_transactions",
    "sum_period_amount",
]
