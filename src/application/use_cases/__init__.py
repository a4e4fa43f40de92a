"""Application use cases package."""

from .get_balance_sheet import BalanceSheet, GetBalanceSheetUseCase
from .get_calculated_accounts import (
    CalculatedAccount,
    GetCalculatedAccountsUseCase,
)
from .get_cash_flow_forecast import (
    CashFlowForecast,
    GetCashFlowForecastUseCase,
)
from .get_cash_flow_statement import (
    CashFlowStatement,
    GetCashFlowStatementUseCase,
)
from .get_category_dynamics import (
    CategoryDynamicsPoint,
    GetCategoryDynamicsUseCase,
)
from .get_category_structure import (
    GetCategoryStructureUseCase,
    StructureSlice,
)
from .get_counterparty_balances import (
    CounterpartyBalances,
    GetCounterpartyBalancesUseCase,
)
from .get_daily_ledger import DailyLedgerDay, GetDailyLedgerUseCase
from .get_kpis import GetKpisUseCase, KPIData
from .get_pending_liabilities import (
    GetPendingLiabilitiesUseCase,
    PendingLiabilities,
)
from .get_profit_and_loss import GetProfitAndLossUseCase, ProfitAndLoss
from .get_project_financials import (
    GetProjectFinancialsUseCase,
    ProjectFinancials,
)
from .load_ledger_snapshot import LedgerFetchError, LoadLedgerSnapshotUseCase
from .manage_ledger_records import ManageLedgerRecordsUseCase

__all__ = [
    "CalculatedAccount",
    "GetCalculatedAccountsUseCase",
    "CashFlowForecast",
    "GetCashFlowForecastUseCase",
    "BalanceSheet",
    "GetBalanceSheetUseCase",
    "CashFlowStatement",
    "GetCashFlowStatementUseCase",
    "CategoryDynamicsPoint",
    "GetCategoryDynamicsUseCase",
    "GetCategoryStructureUseCase",
    "StructureSlice",
    "CounterpartyBalances",
    "GetCounterpartyBalancesUseCase",
    "DailyLedgerDay",
    "GetDailyLedgerUseCase",
    "GetKpisUseCase",
    "KPIData",
    "GetPendingLiabilitiesUseCase",
    "PendingLiabilities",
    "GetProfitAndLossUseCase",
    "ProfitAndLoss",
    "GetProjectFinancialsUseCase",
    "ProjectFinancials",
    "LedgerFetchError",
    "LoadLedgerSnapshotUseCase",
    "ManageLedgerRecordsUseCase",
]
