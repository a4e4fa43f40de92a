"""Supplementary reports: dynamics, projects, counterparties, statements."""

from collections.abc import Sequence
from decimal import Decimal

from src.domain.constants import (
    ACTIVE_STATUS,
    APPROVED,
    EXPENSE,
    INCOME,
    PENDING,
    TRANSFER,
)
from src.domain.models import (
    Account,
    BalanceSheet,
    CalculatedAccount,
    CashFlowStatement,
    Category,
    CategoryAmount,
    CategoryDynamicsPoint,
    Counterparty,
    CounterpartyBalance,
    CounterpartyBalances,
    DateRange,
    LedgerFilters,
    PendingLiabilities,
    ProfitAndLoss,
    Project,
    ProjectFinancials,
    Transaction,
    TransferLine,
)
from src.domain.services.periods import (
    filter_transactions,
    is_approved_in_range,
    select_period_transactions,
)
from src.domain.services.structure import (
    build_category_names,
    resolve_category_name,
)
from src.utils.date_utils import month_key, month_label
from src.utils.decimal_utils import round_half_up, sum_decimals


def compute_category_dynamics(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    date_range: DateRange,
    transaction_type: str,
    filters: LedgerFilters | None = None,
) -> list[CategoryDynamicsPoint]:
    """Split a period's approved amounts by month and category.

    Months appear in the order they are first met in ``transactions``.
    """
    names_by_id = build_category_names(categories)
    selected = (
        filter_transactions(transactions, filters) if filters else transactions
    )
    months: dict[str, dict[str, Decimal]] = {}
    labels: dict[str, str] = {}
    for txn in select_period_transactions(
        selected,
        date_range,
        transaction_type,
    ):
        key = month_key(txn.date)
        if key not in months:
            months[key] = {}
            labels[key] = month_label(txn.date)
        name = resolve_category_name(txn.category_id, names_by_id)
        months[key][name] = months[key].get(name, Decimal("0")) + txn.amount
    return [
        CategoryDynamicsPoint(month=key, label=labels[key], amounts=amounts)
        for key, amounts in months.items()
    ]


def compute_project_financials(
    projects: Sequence[Project],
    transactions: Sequence[Transaction],
) -> list[ProjectFinancials]:
    """Compare each project's plan with its approved actuals."""
    actuals: dict[str, list[Decimal]] = {
        project.id: [Decimal("0"), Decimal("0")] for project in projects
    }
    for txn in transactions:
        if txn.status != APPROVED or txn.project_id not in actuals:
            continue
        if txn.type == INCOME:
            actuals[txn.project_id][0] += txn.amount
        elif txn.type == EXPENSE:
            actuals[txn.project_id][1] += txn.amount

    results = []
    for project in projects:
        revenue, expense = actuals[project.id]
        results.append(
            ProjectFinancials(
                project_id=project.id,
                name=project.name,
                actual_revenue=revenue,
                actual_expense=expense,
                planned_income=project.planned_income,
                planned_expense=project.planned_expense,
                profitability=_margin(revenue - expense, revenue),
                planned_profitability=_margin(
                    project.planned_income - project.planned_expense,
                    project.planned_income,
                ),
                receivables=max(Decimal("0"), project.planned_income - revenue),
                payables=max(Decimal("0"), project.planned_expense - expense),
            )
        )
    return results


def compute_counterparty_balances(
    counterparties: Sequence[Counterparty],
    transactions: Sequence[Transaction],
) -> CounterpartyBalances:
    """Net approved income and expense per active counterparty.

    Positive balances are receivables, negative ones payables.
    """
    active = [
        counterparty
        for counterparty in counterparties
        if (counterparty.status or ACTIVE_STATUS) == ACTIVE_STATUS
    ]
    balances = _counterparty_balances(active, transactions)
    return CounterpartyBalances(
        balances=balances,
        total_receivable=sum_decimals(
            item.balance for item in balances if item.balance > 0
        ),
        total_payable=sum_decimals(
            -item.balance for item in balances if item.balance < 0
        ),
    )


def compute_pending_liabilities(
    transactions: Sequence[Transaction],
) -> PendingLiabilities:
    """Sum pending expenses (creditor) and pending incomes (debtor)."""
    creditor = sum_decimals(
        txn.amount
        for txn in transactions
        if txn.status == PENDING and txn.type == EXPENSE
    )
    debtor = sum_decimals(
        txn.amount
        for txn in transactions
        if txn.status == PENDING and txn.type == INCOME
    )
    return PendingLiabilities(creditor=creditor, debtor=debtor)


def compute_profit_and_loss(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    date_range: DateRange,
    filters: LedgerFilters | None = None,
) -> ProfitAndLoss:
    """Build a cash-basis income statement for the window.

    Approved incomes and expenses are summed per category name, each side
    sorted by amount, largest first.

    Args:
        transactions: Ledger transactions.
        categories: Categories used to resolve names.
        date_range: Inclusive window of calendar days.
        filters: Optional account and project selection.

    Returns:
        ProfitAndLoss: Revenue and expense lines with totals and margin.
    """
    names_by_id = build_category_names(categories)
    revenue: dict[str, Decimal] = {}
    expenses: dict[str, Decimal] = {}
    for txn in _approved_in_range(transactions, date_range, filters):
        if txn.type == INCOME:
            bucket = revenue
        elif txn.type == EXPENSE:
            bucket = expenses
        else:
            continue
        name = resolve_category_name(txn.category_id, names_by_id)
        bucket[name] = bucket.get(name, Decimal("0")) + txn.amount

    total_income = sum_decimals(revenue.values())
    total_expense = sum_decimals(expenses.values())
    net_margin = Decimal("0")
    if total_income > 0:
        net_margin = (total_income - total_expense) / total_income * 100
    return ProfitAndLoss(
        revenue=_sorted_lines(revenue, key=lambda amount: -amount),
        expenses=_sorted_lines(expenses, key=lambda amount: -amount),
        total_income=total_income,
        total_expense=total_expense,
        net_margin=net_margin,
    )


def compute_cash_flow_statement(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    accounts: Sequence[Account],
    date_range: DateRange,
    filters: LedgerFilters | None = None,
) -> CashFlowStatement:
    """Split the window's approved movements into operating and transfers.

    Operating lines are signed (income positive, expense negative) and
    sorted by absolute amount. Transfers are listed by account name, with
    ``"?"`` for accounts that no longer exist.
    """
    names_by_id = build_category_names(categories)
    account_names = {account.id: account.name for account in accounts}
    operating: dict[str, Decimal] = {}
    transfers: list[TransferLine] = []
    for txn in _approved_in_range(transactions, date_range, filters):
        if txn.type == TRANSFER:
            transfers.append(
                TransferLine(
                    from_account=account_names.get(txn.account_id, "?"),
                    to_account=account_names.get(txn.to_account_id, "?"),
                    amount=txn.amount,
                )
            )
            continue
        if txn.type == INCOME:
            signed = txn.amount
        elif txn.type == EXPENSE:
            signed = -txn.amount
        else:
            continue
        name = resolve_category_name(txn.category_id, names_by_id)
        operating[name] = operating.get(name, Decimal("0")) + signed

    return CashFlowStatement(
        operating=_sorted_lines(operating, key=lambda amount: -abs(amount)),
        operating_total=sum_decimals(operating.values()),
        transfers=transfers,
    )


def compute_balance_sheet(
    calculated_accounts: Sequence[CalculatedAccount],
    counterparties: Sequence[Counterparty],
    transactions: Sequence[Transaction],
) -> BalanceSheet:
    """Summarize cash, receivables and payables at the current date.

    Only accounts with a positive balance count as cash. Every
    counterparty is included, whatever its status, and its balance covers
    all approved transactions regardless of date.
    """
    cash_accounts = sorted(
        (item for item in calculated_accounts if item.balance > 0),
        key=lambda item: -item.balance,
    )
    balances = _counterparty_balances(counterparties, transactions)
    receivables = sorted(
        (item for item in balances if item.balance > 0),
        key=lambda item: -item.balance,
    )
    payables = sorted(
        (item for item in balances if item.balance < 0),
        key=lambda item: item.balance,
    )
    return BalanceSheet(
        cash_accounts=cash_accounts,
        total_cash=sum_decimals(item.balance for item in cash_accounts),
        receivables=receivables,
        total_receivables=sum_decimals(item.balance for item in receivables),
        payables=payables,
        total_payables=abs(sum_decimals(item.balance for item in payables)),
    )


def _approved_in_range(
    transactions: Sequence[Transaction],
    date_range: DateRange,
    filters: LedgerFilters | None,
) -> list[Transaction]:
    selected = (
        filter_transactions(transactions, filters) if filters else transactions
    )
    return [txn for txn in selected if is_approved_in_range(txn, date_range)]


def _sorted_lines(totals: dict[str, Decimal], key) -> list[CategoryAmount]:
    return [
        CategoryAmount(name=name, amount=amount)
        for name, amount in sorted(
            totals.items(),
            key=lambda item: key(item[1]),
        )
    ]


def _counterparty_balances(
    counterparties: Sequence[Counterparty],
    transactions: Sequence[Transaction],
) -> list[CounterpartyBalance]:
    flows: dict[str, list[Decimal]] = {}
    for txn in transactions:
        if txn.status != APPROVED or not txn.counterparty_id:
            continue
        if txn.type not in (INCOME, EXPENSE):
            continue
        flow = flows.setdefault(
            txn.counterparty_id,
            [Decimal("0"), Decimal("0")],
        )
        if txn.type == INCOME:
            flow[0] += txn.amount
        else:
            flow[1] += txn.amount

    balances = []
    for counterparty in counterparties:
        income, expense = flows.get(
            counterparty.id,
            (Decimal("0"), Decimal("0")),
        )
        balances.append(
            CounterpartyBalance(
                counterparty_id=counterparty.id,
                name=counterparty.name,
                type=counterparty.type,
                income=income,
                expense=expense,
            )
        )
    return balances


def _margin(profit: Decimal, revenue: Decimal) -> int:
    if revenue <= 0:
        return 0
    return round_half_up(profit / revenue * Decimal("100"))


__all__ = [
    "compute_category_dynamics",
    "compute_project_financials",
    "compute_counterparty_balances",
    "compute_pending_liabilities",
    "compute_profit_and_loss",
    "compute_cash_flow_statement",
    "compute_balance_sheet",
]
