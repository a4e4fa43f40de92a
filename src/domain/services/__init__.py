"""Domain services package."""

from .balances import (
    calculate_accounts,
    compute_account_balance,
    select_accounts,
)
from .cashflow import find_cash_gap, project_cash_flow
from .daily_ledger import build_daily_ledger
from .kpis import (
    build_sparkline,
    compute_delta,
    compute_kpis,
    compute_period_days,
)
from .normalization import normalize_code, normalize_reference
from .periods import (
    filter_transactions,
    is_approved_in_range,
    select_period_transactions,
    sum_period_amount,
)
from .reports import (
    compute_balance_sheet,
    compute_cash_flow_statement,
    compute_category_dynamics,
    compute_counterparty_balances,
    compute_pending_liabilities,
    compute_profit_and_loss,
    compute_project_financials,
)
from .structure import compute_category_structure
from .validation import validate_amount_sign, validate_code

__all__ = [
    "calculate_accounts",
    "compute_account_balance",
    "select_accounts",
    "find_cash_gap",
    "project_cash_flow",
    "build_daily_ledger",
    "build_sparkline",
    "compute_delta",
    "compute_kpis",
    "compute_period_days",
    "normalize_code",
    "normalize_reference",
    "filter_transactions",
    "is_approved_in_range",
    "select_period_transactions",
    "sum_period_amount",
    "compute_category_dynamics",
    "compute_counterparty_balances",
    "compute_pending_liabilities",
    "compute_project_financials",
    "compute_profit_and_loss",
    "compute_cash_flow_statement",
    "compute_balance_sheet",
    "compute_category_structure",
    "validate_amount_sign",
    "validate_code",
]
