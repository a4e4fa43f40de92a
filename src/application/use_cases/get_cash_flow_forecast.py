"""Use case projecting the daily cash position over a window."""

from datetime import date

from src.domain.models import (
    CashFlowForecast,
    DateRange,
    LedgerFilters,
    LedgerSnapshot,
)
from src.domain.services.cashflow import project_cash_flow
from src.infrastructure.logging.logger import get_app_logger


class GetCashFlowForecastUseCase:
    """Build the actual and forecast cash-flow series."""

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
        today: date | None = None,
    ) -> CashFlowForecast:
        """Return one point per day of the window and the cash-gap date.

        Args:
            snapshot: Ledger snapshot to derive from.
            date_range: Inclusive window to project.
            filters: Optional account and project selection.
            today: Boundary between actual and forecast days, defaults to
                the current date.

        Returns:
            CashFlowForecast: Daily points and the first negative forecast day.
        """
        filters = filters or LedgerFilters()
        forecast = project_cash_flow(
            snapshot.accounts,
            snapshot.transactions,
            snapshot.planned_payments,
            date_range,
            today or date.today(),
            filters,
        )
        if forecast.cash_gap_date is not None:
            self._logger.warning(
                f"Projected cash gap on {forecast.cash_gap_date} "
                f"(account={filters.account_id})"
            )
        self._logger.info(
            f"Cash-flow series computed: {len(forecast.points)} days from "
            f"{date_range.start} to {date_range.end}"
        )
        return forecast


__all__ = ["GetCashFlowForecastUseCase", "CashFlowForecast"]
