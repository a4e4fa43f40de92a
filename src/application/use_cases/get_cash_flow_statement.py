"""Use case splitting a period into operating flows and transfers."""

from src.domain.models import (
    CashFlowStatement,
    DateRange,
    LedgerFilters,
    LedgerSnapshot,
)
from src.domain.services.reports import compute_cash_flow_statement
from src.infrastructure.logging.logger import get_app_logger


class GetCashFlowStatementUseCase:
    """Signed operating totals per category and account-to-account moves."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot,
        date_range: DateRange,
        filters: LedgerFilters | None = None,
    ) -> CashFlowStatement:
        statement = compute_cash_flow_statement(
            snapshot.transactions,
            snapshot.categories,
            snapshot.accounts,
            date_range,
            filters,
        )
        self._logger.info(
            f"Cash-flow statement computed: net={statement.net_cash_flow}, "
            f"transfers={len(statement.transfers)}"
        )
        return statement


__all__ = ["GetCashFlowStatementUseCase", "CashFlowStatement"]
