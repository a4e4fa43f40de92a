"""Use case summing transactions that still await approval."""

from src.domain.models import LedgerSnapshot, PendingLiabilities
from src.domain.services.reports import compute_pending_liabilities
from src.infrastructure.logging.logger import get_app_logger


class GetPendingLiabilitiesUseCase:
    """Expose pending expenses and incomes as dashboard liabilities."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(self, snapshot: LedgerSnapshot) -> PendingLiabilities:
        liabilities = compute_pending_liabilities(snapshot.transactions)
        self._logger.info(
            f"Pending liabilities: creditor={liabilities.creditor}, "
            f"debtor={liabilities.debtor}"
        )
        return liabilities


__all__ = ["GetPendingLiabilitiesUseCase", "PendingLiabilities"]
