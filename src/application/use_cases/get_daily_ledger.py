"""Use case deriving the per-day balances shown on the calendar."""

from datetime import date

from src.domain.constants import ALL_FILTER
from src.domain.models import (
    DailyLedgerDay,
    DateRange,
    LedgerFilters,
    LedgerSnapshot,
)
from src.domain.services.daily_ledger import build_daily_ledger
from src.infrastructure.logging.logger import get_app_logger


class GetDailyLedgerUseCase:
    """Build opening and closing balances for each calendar day."""

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
        show: str = ALL_FILTER,
        type_filter: str = ALL_FILTER,
    ) -> list[DailyLedgerDay]:
        """Return one entry per day of the window.

        Args:
            snapshot: Ledger snapshot to derive from.
            date_range: Inclusive window, usually a calendar month grid.
            filters: Optional account and project selection.
            today: Last actual day, defaults to the current date.
            show: ``"all"``, ``"actual"`` or ``"planned"``.
            type_filter: ``"all"``, ``INCOME`` or ``EXPENSE``.

        Returns:
            list[DailyLedgerDay]: Daily balances and totals.
        """
        days = build_daily_ledger(
            snapshot.accounts,
            snapshot.transactions,
            snapshot.planned_payments,
            date_range,
            today or date.today(),
            filters or LedgerFilters(),
            show=show,
            type_filter=type_filter,
        )
        gap_days = [day.date for day in days if day.has_cash_gap]
        if gap_days:
            self._logger.warning(
                f"Daily ledger closes negative on {len(gap_days)} days, "
                f"first {gap_days[0]}"
            )
        self._logger.info(
            f"Daily ledger computed: {len(days)} days from "
            f"{date_range.start} to {date_range.end}"
        )
        return days


__all__ = ["GetDailyLedgerUseCase", "DailyLedgerDay"]
