"""Tests for the cash-flow projection."""

from datetime import date, timedelta
from decimal import Decimal

from src.domain.models import (
    Account,
    CashFlowPoint,
    DateRange,
    LedgerFilters,
    PlannedPayment,
    Transaction,
)
from src.domain.services.cashflow import find_cash_gap, project_cash_flow

TODAY = date(2024, 6, 10)


def _account(account_id: str, opening: str) -> Account:
    return Account(
        id=account_id,
        group_id=None,
        name=account_id,
        opening_balance=Decimal(opening),
        currency="USD",
    )


def _txn(
    txn_id: str,
    day: date,
    txn_type: str,
    amount: str,
    account_id: str = "bank",
    status: str = "APPROVED",
    to_account_id: str | None = None,
) -> Transaction:
    return Transaction(
        id=txn_id,
        date=day,
        type=txn_type,
        status=status,
        amount=Decimal(amount),
        account_id=account_id,
        to_account_id=to_account_id,
    )


def _planned(payment_id: str, day: date, txn_type: str, amount: str):
    return PlannedPayment(
        id=payment_id,
        date=day,
        type=txn_type,
        amount=Decimal(amount),
        account_id="bank",
    )


def test_emits_one_point_per_day_in_order() -> None:
    """Every day of the window appears once, ascending."""
    date_range = DateRange(start=date(2024, 6, 1), end=date(2024, 6, 30))

    forecast = project_cash_flow(
        [_account("bank", "0")],
        [],
        [],
        date_range,
        TODAY,
        LedgerFilters(),
    )

    days = [point.date for point in forecast.points]
    assert len(days) == 30
    assert days == sorted(days)
    assert days[0] == date(2024, 6, 1)
    assert days[-1] == date(2024, 6, 30)
    assert all(point.balance == Decimal("0") for point in forecast.points)


def test_cash_gap_on_first_negative_projected_day() -> None:
    """A planned expense larger than the balance opens a cash gap."""
    date_range = DateRange(start=TODAY, end=TODAY + timedelta(days=5))
    planned = [_planned("rent", TODAY + timedelta(days=3), "EXPENSE", "1500")]

    forecast = project_cash_flow(
        [_account("bank", "1000")],
        [],
        planned,
        date_range,
        TODAY,
        LedgerFilters(),
    )

    by_day = {point.date: point for point in forecast.points}
    assert by_day[TODAY].balance == Decimal("1000")
    assert by_day[TODAY].is_projection is False
    assert forecast.cash_gap_date == TODAY + timedelta(days=3)
    assert by_day[TODAY + timedelta(days=3)].balance == Decimal("-500")
    assert by_day[TODAY + timedelta(days=3)].forecast == Decimal("-500")


def test_no_cash_gap_when_balance_stays_positive() -> None:
    """Without a negative projected day there is no cash gap."""
    date_range = DateRange(start=TODAY, end=TODAY + timedelta(days=5))
    planned = [_planned("fee", TODAY + timedelta(days=1), "EXPENSE", "10")]

    forecast = project_cash_flow(
        [_account("bank", "100")],
        [],
        planned,
        date_range,
        TODAY,
        LedgerFilters(),
    )

    assert forecast.cash_gap_date is None
    assert forecast.points[-1].balance == Decimal("90")


def test_planned_payments_never_apply_on_or_before_today() -> None:
    """Past and same-day planned payments are ignored."""
    date_range = DateRange(start=TODAY - timedelta(days=2), end=TODAY)
    planned = [
        _planned("old", TODAY - timedelta(days=1), "EXPENSE", "900"),
        _planned("now", TODAY, "INCOME", "400"),
    ]

    forecast = project_cash_flow(
        [_account("bank", "100")],
        [],
        planned,
        date_range,
        TODAY,
        LedgerFilters(),
    )

    assert [point.balance for point in forecast.points] == [
        Decimal("100"),
        Decimal("100"),
        Decimal("100"),
    ]
    assert all(not point.is_projection for point in forecast.points)


def test_transactions_never_apply_after_today() -> None:
    """Future-dated transactions are not part of the projection."""
    date_range = DateRange(start=TODAY, end=TODAY + timedelta(days=2))
    txns = [
        _txn("past", TODAY, "INCOME", "50"),
        _txn("future", TODAY + timedelta(days=1), "EXPENSE", "999"),
    ]

    forecast = project_cash_flow(
        [_account("bank", "0")],
        txns,
        [],
        date_range,
        TODAY,
        LedgerFilters(),
    )

    assert [point.balance for point in forecast.points] == [
        Decimal("50"),
        Decimal("50"),
        Decimal("50"),
    ]
    assert [point.is_projection for point in forecast.points] == [
        False,
        True,
        True,
    ]


def test_actual_segment_skips_transfers_and_unapproved() -> None:
    """Only approved incomes and expenses move the running balance."""
    date_range = DateRange(start=TODAY, end=TODAY)
    txns = [
        _txn("in", TODAY, "INCOME", "70"),
        _txn("out", TODAY, "EXPENSE", "20"),
        _txn("move", TODAY, "TRANSFER", "500", to_account_id="cash"),
        _txn("draft", TODAY, "INCOME", "1000", status="DRAFT"),
    ]

    forecast = project_cash_flow(
        [_account("bank", "0")],
        txns,
        [],
        date_range,
        TODAY,
        LedgerFilters(),
    )

    assert forecast.points[0].actual == Decimal("50")


def test_account_filter_limits_opening_balance_and_transactions() -> None:
    """Only the selected account seeds and moves the balance."""
    date_range = DateRange(start=TODAY, end=TODAY)
    txns = [
        _txn("a", TODAY, "INCOME", "5", account_id="bank"),
        _txn("b", TODAY, "INCOME", "7", account_id="cash"),
    ]

    forecast = project_cash_flow(
        [_account("bank", "100"), _account("cash", "300")],
        txns,
        [],
        date_range,
        TODAY,
        LedgerFilters(account_id="cash"),
    )

    assert forecast.points[0].balance == Decimal("307")


def test_find_cash_gap_ignores_negative_actual_points() -> None:
    """Only projected points can mark a cash gap."""
    points = [
        CashFlowPoint(
            date=date(2024, 1, 1),
            balance=Decimal("-5"),
            is_projection=False,
        ),
        CashFlowPoint(
            date=date(2024, 1, 2),
            balance=Decimal("-1"),
            is_projection=True,
        ),
    ]

    assert find_cash_gap(points) == date(2024, 1, 2)
    assert find_cash_gap(points[:1]) is None


def test_single_day_window_on_today_is_one_actual_point() -> None:
    """A window from today to today yields exactly one actual point."""
    forecast = project_cash_flow(
        [_account("bank", "250")],
        [_txn("in", TODAY, "INCOME", "50")],
        [_planned("later", TODAY + timedelta(days=1), "EXPENSE", "999")],
        DateRange(start=TODAY, end=TODAY),
        TODAY,
        LedgerFilters(),
    )

    assert len(forecast.points) == 1
    point = forecast.points[0]
    assert point.date == TODAY
    assert point.is_projection is False
    assert point.balance == Decimal("300")
    assert point.actual == Decimal("300")
    assert point.forecast is None
    assert forecast.cash_gap_date is None


def test_empty_ledger_gives_flat_zero_line() -> None:
    """Without openings, transactions or plans every day stays at zero."""
    date_range = DateRange(
        start=TODAY - timedelta(days=3),
        end=TODAY + timedelta(days=3),
    )

    forecast = project_cash_flow(
        [],
        [],
        [],
        date_range,
        TODAY,
        LedgerFilters(),
    )

    assert len(forecast.points) == 7
    assert {point.balance for point in forecast.points} == {Decimal("0")}
    assert [point.is_projection for point in forecast.points] == [
        False,
        False,
        False,
        False,
        True,
        True,
        True,
    ]
    assert forecast.cash_gap_date is None
