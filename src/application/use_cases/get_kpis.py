"""Use case computing the dashboard headline KPIs."""

from src.domain.models import DateRange, KPIData, LedgerFilters, LedgerSnapshot
from src.domain.services.balances import calculate_accounts
from src.domain.services.kpis import compute_kpis
from src.infrastructure.logging.logger import get_app_logger


class GetKpisUseCase:
    """Compute Income, Expenses, Net Profit and Business Cash."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot,
        date_range: DateRange,
        filters: LedgerFilters | None = None,
    ) -> list[KPIData]:
        """Return the four KPIs for the selected period.

        Args:
            snapshot: Ledger snapshot to derive from.
            date_range: Inclusive current period.
            filters: Optional account and project selection.

        Returns:
            list[KPIData]: Income, Expenses, Net Profit, Business Cash.
        """
        filters = filters or LedgerFilters()
        calculated = calculate_accounts(
            snapshot.accounts,
            snapshot.transactions,
        )
        kpis = compute_kpis(
            snapshot.transactions,
            calculated,
            date_range,
            filters,
        )
        self._logger.info(
            f"KPIs computed for {date_range.start}..{date_range.end} "
            f"(account={filters.account_id}, project={filters.project_id}): "
            + ", ".join(f"{kpi.label}={kpi.value}" for kpi in kpis)
        )
        return kpis


__all__ = ["GetKpisUseCase", "KPIData"]
