"""Domain package for ledger models and derivation rules."""

from .constants import (
    ALL_FILTER,
    APPROVED,
    EXPENSE,
    INCOME,
    OTHER_CATEGORY_LABEL,
    TRANSFER,
)
from .models import (
    Account,
    CalculatedAccount,
    CashFlowForecast,
    CashFlowPoint,
    DateRange,
    KPIData,
    LedgerFilters,
    LedgerSnapshot,
    PlannedPayment,
    StructureSlice,
    Transaction,
)
from .services import (
    calculate_accounts,
    compute_category_structure,
    compute_kpis,
    project_cash_flow,
    sum_period_amount,
)

__all__ = [
    "ALL_FILTER",
    "APPROVED",
    "EXPENSE",
    "INCOME",
    "OTHER_CATEGORY_LABEL",
    "TRANSFER",
    "Account",
    "CalculatedAccount",
    "CashFlowForecast",
    "CashFlowPoint",
    "DateRange",
    "KPIData",
    "LedgerFilters",
    "LedgerSnapshot",
    "PlannedPayment",
    "StructureSlice",
    "Transaction",
    "calculate_accounts",
    "compute_category_structure",
    "compute_kpis",
    "project_cash_flow",
    "sum_period_amount",
]
