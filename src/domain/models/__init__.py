"""Domain models package."""

from .finance import (
    BalanceSheet,
    CalculatedAccount,
    CashFlowForecast,
    CashFlowPoint,
    CashFlowStatement,
    CategoryAmount,
    CategoryDynamicsPoint,
    CounterpartyBalance,
    CounterpartyBalances,
    DailyLedgerDay,
    KPIData,
    PendingLiabilities,
    ProfitAndLoss,
    ProjectFinancials,
    StructureSlice,
    TransferLine,
)
from .ledger import (
    Account,
    AccountGroup,
    Category,
    CategoryGroup,
    Counterparty,
    DateRange,
    LedgerFilters,
    LedgerSnapshot,
    PlannedPayment,
    Project,
    Transaction,
)

__all__ = [
    "Account",
    "AccountGroup",
    "Category",
    "CategoryGroup",
    "Counterparty",
    "DateRange",
    "LedgerFilters",
    "LedgerSnapshot",
    "PlannedPayment",
    "Project",
    "Transaction",
    "CalculatedAccount",
    "CashFlowForecast",
    "CashFlowPoint",
    "CategoryDynamicsPoint",
    "CounterpartyBalance",
    "CounterpartyBalances",
    "KPIData",
    "PendingLiabilities",
    "ProjectFinancials",
    "StructureSlice",
    "BalanceSheet",
    "CashFlowStatement",
    "CategoryAmount",
    "DailyLedgerDay",
    "ProfitAndLoss",
    "TransferLine",
]
