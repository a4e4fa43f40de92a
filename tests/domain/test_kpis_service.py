"""Tests for KPI computation."""

from datetime import date
from decimal import Decimal

from src.domain.models import (
    Account,
    CalculatedAccount,
    DateRange,
    LedgerFilters,
    Transaction,
)
from src.domain.services.balances import calculate_accounts
from src.domain.services.kpis import (
    build_sparkline,
    compute_delta,
    compute_kpis,
    compute_period_days,
)


def _account(account_id: str = "bank", opening: str = "50000") -> Account:
    return Account(
        id=account_id,
        group_id=None,
        name="Main",
        opening_balance=Decimal(opening),
        currency="USD",
    )


def _txn(
    txn_id: str,
    day: date,
    txn_type: str,
    amount: str,
    account_id: str = "bank",
) -> Transaction:
    return Transaction(
        id=txn_id,
        date=day,
        type=txn_type,
        status="APPROVED",
        amount=Decimal(amount),
        account_id=account_id,
    )


def test_delta_zero_cases() -> None:
    """A zero previous value gives 0 or 100 depending on current."""
    assert compute_delta(Decimal("0"), Decimal("0")) == 0
    assert compute_delta(Decimal("5000"), Decimal("0")) == 100
    assert compute_delta(Decimal("-10"), Decimal("0")) == 0


def test_delta_rounds_half_toward_positive_infinity() -> None:
    """Half percentages round up, negative halves toward zero."""
    assert compute_delta(Decimal("102.5"), Decimal("100")) == 3
    assert compute_delta(Decimal("97.5"), Decimal("100")) == -2
    assert compute_delta(Decimal("50"), Decimal("100")) == -50


def test_delta_uses_absolute_previous_value() -> None:
    """A negative baseline still yields an increase for a gain."""
    assert compute_delta(Decimal("50"), Decimal("-100")) == 150


def test_period_days_is_at_least_one() -> None:
    """A single-day window still compares against one prior day."""
    single = DateRange(start=date(2024, 3, 1), end=date(2024, 3, 1))
    month = DateRange(start=date(2024, 3, 1), end=date(2024, 3, 31))

    assert compute_period_days(single) == 1
    assert compute_period_days(month) == 30


def test_sparkline_tiles_windows_back_from_end() -> None:
    """Seven trailing windows of period_days // 7 days, oldest first."""
    date_range = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 29))
    txns = [
        _txn("early", date(2024, 1, 3), "INCOME", "100"),
        _txn("late", date(2024, 1, 29), "INCOME", "50"),
    ]

    points = build_sparkline(txns, date_range, "INCOME", 28)

    assert len(points) == 7
    assert points[0] == Decimal("100")
    assert points[-1] == Decimal("50")
    assert sum(points[1:-1]) == 0


def test_short_period_sparkline_collapses_to_end_day() -> None:
    """Periods under a week give a zero step covering only the end day."""
    date_range = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 5))
    txns = [
        _txn("start", date(2024, 1, 1), "EXPENSE", "10"),
        _txn("end", date(2024, 1, 5), "EXPENSE", "5000"),
    ]

    points = build_sparkline(txns, date_range, "EXPENSE", 4)

    assert points == [Decimal("5000")] * 7


def test_concrete_scenario_kpis() -> None:
    """Income 25k and expense 5k on a 50k opening balance."""
    account = _account()
    txns = [
        _txn("income", date(2024, 1, 1), "INCOME", "25000"),
        _txn("expense", date(2024, 1, 5), "EXPENSE", "5000"),
    ]
    date_range = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 5))
    accounts = calculate_accounts([account], txns)

    income, expense, net_profit, cash = compute_kpis(
        txns,
        accounts,
        date_range,
        LedgerFilters(),
    )

    assert accounts[0].balance == Decimal("70000")
    assert (income.label, income.value) == ("Income", Decimal("25000"))
    assert (expense.label, expense.value) == ("Expenses", Decimal("5000"))
    assert net_profit.label == "Net Profit"
    assert net_profit.value == Decimal("20000")
    assert cash.label == "Business Cash"
    assert cash.value == Decimal("70000")


def test_previous_period_is_shifted_by_period_days() -> None:
    """The comparison window ends period_days before the current end."""
    txns = [
        _txn("prev", date(2024, 1, 10), "INCOME", "1000"),
        _txn("curr", date(2024, 1, 25), "INCOME", "1500"),
    ]
    date_range = DateRange(start=date(2024, 1, 20), end=date(2024, 1, 30))

    income = compute_kpis(txns, [], date_range, LedgerFilters())[0]

    assert income.previous_value == Decimal("1000")
    assert income.value == Decimal("1500")
    assert income.delta == 50


def test_business_cash_respects_account_filter() -> None:
    """Business Cash sums only the selected account balances."""
    accounts = [
        CalculatedAccount(account=_account("a"), balance=Decimal("10")),
        CalculatedAccount(account=_account("b"), balance=Decimal("32")),
    ]
    date_range = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 31))

    all_cash = compute_kpis([], accounts, date_range, LedgerFilters())[3]
    one_cash = compute_kpis(
        [],
        accounts,
        date_range,
        LedgerFilters(account_id="b"),
    )[3]

    assert all_cash.value == Decimal("42")
    assert one_cash.value == Decimal("32")
    assert one_cash.delta == 0
    assert one_cash.previous_value == Decimal("0")
    assert one_cash.sparkline == [Decimal("32")]


def test_net_profit_sparkline_is_pointwise_difference() -> None:
    """Net profit points subtract expense points from income points."""
    date_range = DateRange(start=date(2024, 1, 1), end=date(2024, 1, 29))
    txns = [
        _txn("in", date(2024, 1, 29), "INCOME", "300"),
        _txn("out", date(2024, 1, 28), "EXPENSE", "120"),
    ]

    income, expense, net_profit, _ = compute_kpis(
        txns,
        [],
        date_range,
        LedgerFilters(),
    )

    assert net_profit.sparkline == [
        inflow - outflow
        for inflow, outflow in zip(income.sparkline, expense.sparkline)
    ]
    assert net_profit.sparkline[-1] == Decimal("180")
