"""Use case summarizing assets, payables and equity."""

from src.domain.models import BalanceSheet, LedgerSnapshot
from src.domain.services.balances import calculate_accounts
from src.domain.services.reports import compute_balance_sheet
from src.infrastructure.logging.logger import get_app_logger


class GetBalanceSheetUseCase:
    """Cash accounts, counterparty receivables and payables."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(self, snapshot: LedgerSnapshot) -> BalanceSheet:
        sheet = compute_balance_sheet(
            calculate_accounts(snapshot.accounts, snapshot.transactions),
            snapshot.counterparties,
            snapshot.transactions,
        )
        self._logger.info(
            f"Balance sheet computed: assets={sheet.total_assets}, "
            f"payables={sheet.total_payables}, equity={sheet.equity}"
        )
        return sheet


__all__ = ["GetBalanceSheetUseCase", "BalanceSheet"]
