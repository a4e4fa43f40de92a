"""Domain models for derived financial views."""

from dataclasses import dataclass
from datetime import date
from decimal import Decimal

from src.domain.models.ledger import Account


@dataclass(frozen=True)
class CalculatedAccount:
    """Account paired with its derived balance."""

    account: Account
    balance: Decimal

    @property
    def id(self) -> str:
        return self.account.id

    @property
    def name(self) -> str:
        return self.account.name


@dataclass(frozen=True)
class KPIData:
    """Headline metric for the selected period.

    Attributes:
        label: Display label.
        value: Current-period value.
        previous_value: Value over the preceding equal-length period.
        delta: Integer percentage change versus the previous period.
        sparkline: Trailing sub-period values, oldest first.
    """

    label: str
    value: Decimal
    previous_value: Decimal
    delta: int
    sparkline: list[Decimal]


@dataclass(frozen=True)
class CashFlowPoint:
    """Running balance at the end of one calendar day."""

    date: date
    balance: Decimal
    is_projection: bool
    actual: Decimal | None = None
    forecast: Decimal | None = None


@dataclass(frozen=True)
class CashFlowForecast:
    """Daily cash-flow series and the first projected negative day."""

    points: list[CashFlowPoint]
    cash_gap_date: date | None


@dataclass(frozen=True)
class StructureSlice:
    """One category's share of a period total."""

    name: str
    value: Decimal
    percentage: int
    color: str


@dataclass(frozen=True)
class CategoryDynamicsPoint:
    """Per-category totals for one calendar month."""

    month: str
    label: str
    amounts: dict[str, Decimal]

    @property
    def total(self) -> Decimal:
        return sum(self.amounts.values(), start=Decimal("0"))


@dataclass(frozen=True)
class ProjectFinancials:
    """Plan versus actual figures for a project."""

    project_id: str
    name: str
    actual_revenue: Decimal
    actual_expense: Decimal
    planned_income: Decimal
    planned_expense: Decimal
    profitability: int
    planned_profitability: int
    receivables: Decimal
    payables: Decimal

    @property
    def gross_profit(self) -> Decimal:
        return self.actual_revenue - self.actual_expense

    @property
    def planned_profit(self) -> Decimal:
        return self.planned_income - self.planned_expense


@dataclass(frozen=True)
class CounterpartyBalance:
    """Net approved flow with a counterparty (income minus expense)."""

    counterparty_id: str
    name: str
    type: str
    income: Decimal
    expense: Decimal

    @property
    def balance(self) -> Decimal:
        return self.income - self.expense


@dataclass(frozen=True)
class CounterpartyBalances:
    """Counterparty balances with receivable and payable totals."""

    balances: list[CounterpartyBalance]
    total_receivable: Decimal
    total_payable: Decimal


@dataclass(frozen=True)
class PendingLiabilities:
    """Totals of transactions still awaiting approval."""

    creditor: Decimal
    debtor: Decimal


@dataclass(frozen=True)
class CategoryAmount:
    """Total attributed to one category name."""

    name: str
    amount: Decimal


@dataclass(frozen=True)
class ProfitAndLoss:
    """Cash-basis income statement for a period.

    Attributes:
        revenue: Income per category, largest first.
        expenses: Expense per category, largest first.
        total_income: Sum of approved income.
        total_expense: Sum of approved expense.
        net_margin: Net profit as a percentage of income, 0 without income.
    """

    revenue: list[CategoryAmount]
    expenses: list[CategoryAmount]
    total_income: Decimal
    total_expense: Decimal
    net_margin: Decimal

    @property
    def net_profit(self) -> Decimal:
        return self.total_income - self.total_expense


@dataclass(frozen=True)
class TransferLine:
    """Movement between two accounts, by account name."""

    from_account: str
    to_account: str
    amount: Decimal


@dataclass(frozen=True)
class CashFlowStatement:
    """Signed operating flows per category plus internal transfers."""

    operating: list[CategoryAmount]
    operating_total: Decimal
    transfers: list[TransferLine]

    @property
    def net_cash_flow(self) -> Decimal:
        return self.operating_total


@dataclass(frozen=True)
class BalanceSheet:
    """Cash, receivables and payables with the resulting equity.

    Attributes:
        cash_accounts: Accounts with a positive balance, largest first.
        receivables: Counterparties owing money, largest first.
        payables: Counterparties owed money, largest debt first.
        total_payables: Payables as a positive amount.
    """

    cash_accounts: list[CalculatedAccount]
    total_cash: Decimal
    receivables: list[CounterpartyBalance]
    total_receivables: Decimal
    payables: list[CounterpartyBalance]
    total_payables: Decimal

    @property
    def total_assets(self) -> Decimal:
        return self.total_cash + self.total_receivables

    @property
    def equity(self) -> Decimal:
        return self.total_assets - self.total_payables


@dataclass(frozen=True)
class DailyLedgerDay:
    """Calendar day with its opening and closing balance.

    Attributes:
        start_balance: Running balance before the day.
        end_balance: Running balance after the day.
        income: Income shown for the day, actual and planned.
        expense: Expense shown for the day, actual and planned.
        has_cash_gap: True when the day closes below zero.
    """

    date: date
    start_balance: Decimal
    end_balance: Decimal
    income: Decimal
    expense: Decimal
    is_projection: bool
    has_cash_gap: bool

    @property
    def net(self) -> Decimal:
        return self.income - self.expense


__all__ = [
    "CalculatedAccount",
    "KPIData",
    "CashFlowPoint",
    "CashFlowForecast",
    "StructureSlice",
    "CategoryDynamicsPoint",
    "ProjectFinancials",
    "CounterpartyBalance",
    "CounterpartyBalances",
    "PendingLiabilities",
    "CategoryAmount",
    "ProfitAndLoss",
    "TransferLine",
    "CashFlowStatement",
    "BalanceSheet",
    "DailyLedgerDay",
]
