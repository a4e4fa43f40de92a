"""Use case building the cash-basis income statement."""

from src.domain.models import (
    DateRange,
    LedgerFilters,
    LedgerSnapshot,
    ProfitAndLoss,
)
from src.domain.services.reports import compute_profit_and_loss
from src.infrastructure.logging.logger import get_app_logger


class GetProfitAndLossUseCase:
    """Revenue and expense per category with the net margin."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot,
        date_range: DateRange,
        filters: LedgerFilters | None = None,
    ) -> ProfitAndLoss:
        statement = compute_profit_and_loss(
            snapshot.transactions,
            snapshot.categories,
            date_range,
            filters,
        )
        self._logger.info(
            f"Profit and loss computed: income={statement.total_income}, "
            f"expense={statement.total_expense}, "
            f"margin={statement.net_margin:.1f}%"
        )
        return statement


__all__ = ["GetProfitAndLossUseCase", "ProfitAndLoss"]
