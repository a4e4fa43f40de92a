"""CLI adapter printing the dashboard figures for a period.

The period and filters come from environment variables:
``REPORT_START_DATE`` / ``REPORT_END_DATE`` (YYYY-MM-DD, default: current
quarter), ``REPORT_ACCOUNT`` and ``REPORT_PROJECT`` (ids, default ``all``).
"""

from datetime import date
import os

from src.adapters.periods import resolve_period_range
from src.application.use_cases.get_calculated_accounts import (
    GetCalculatedAccountsUseCase,
)
from src.application.use_cases.get_cash_flow_forecast import (
    GetCashFlowForecastUseCase,
)
from src.application.use_cases.get_category_structure import (
    GetCategoryStructureUseCase,
)
from src.application.use_cases.get_kpis import GetKpisUseCase
from src.domain.constants import ALL_FILTER, EXPENSE, INCOME
from src.domain.models import DateRange, LedgerFilters
from src.infrastructure.container import build_snapshot_loader
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def _parse_date(value: str | None, logger) -> date | None:
    """Parse an ISO date string into a date.

    Args:
        value: Date string in YYYY-MM-DD format.
        logger: Logger used for warnings.

    Returns:
        date | None: Parsed date or None when invalid.
    """
    if not value:
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        logger.warning(
            f"Invalid date '{value}'. Expected format YYYY-MM-DD."
        )
        return None


def _resolve_range(settings: DashboardSettings, logger) -> DateRange:
    default_range = resolve_period_range(
        settings.default_period,
        settings.today(),
    )
    start = _parse_date(os.getenv("REPORT_START_DATE"), logger)
    end = _parse_date(os.getenv("REPORT_END_DATE"), logger)
    return DateRange(
        start=start or default_range.start,
        end=end or default_range.end,
    )


def main() -> None:
    """Load the ledger and print KPIs, cash gap and category structure."""
    logger = get_app_logger()
    settings = DashboardSettings.from_env()
    date_range = _resolve_range(settings, logger)
    if date_range.end < date_range.start:
        logger.warning(
            f"Report end {date_range.end} is before start {date_range.start}"
        )
        return
    filters = LedgerFilters(
        account_id=os.getenv("REPORT_ACCOUNT", ALL_FILTER),
        project_id=os.getenv("REPORT_PROJECT", ALL_FILTER),
    )

    snapshot = build_snapshot_loader(settings=settings).execute()
    symbol = settings.currency_symbol

    print(
        f"Ledger report {date_range.start} .. {date_range.end} "
        f"(account={filters.account_id}, project={filters.project_id})"
    )
    for account in GetCalculatedAccountsUseCase(logger=logger).execute(
        snapshot
    ):
        print(f"  {account.name}: {symbol}{account.balance:,.2f}")

    for kpi in GetKpisUseCase(logger=logger).execute(
        snapshot,
        date_range,
        filters,
    ):
        print(
            f"{kpi.label}: {symbol}{kpi.value:,.2f} "
            f"(previous={symbol}{kpi.previous_value:,.2f}, "
            f"delta={kpi.delta:+d}%)"
        )

    forecast = GetCashFlowForecastUseCase(logger=logger).execute(
        snapshot,
        date_range,
        filters,
        today=settings.today(),
    )
    if forecast.points:
        print(f"Closing balance: {symbol}{forecast.points[-1].balance:,.2f}")
    if forecast.cash_gap_date:
        print(f"Cash gap expected on {forecast.cash_gap_date}")
    else:
        print("No cash gap expected")

    structure_use_case = GetCategoryStructureUseCase(logger=logger)
    for transaction_type in (INCOME, EXPENSE):
        print(f"{transaction_type} by category:")
        for item in structure_use_case.execute(
            snapshot,
            date_range,
            transaction_type,
            filters,
        ):
            print(
                f"  {item.name}: {symbol}{item.value:,.2f} "
                f"({item.percentage}%)"
            )


if __name__ == "__main__":  # pragma: no cover
    main()
