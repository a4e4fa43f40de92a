"""Use case computing receivables and payables per counterparty."""

from src.domain.models import CounterpartyBalances, LedgerSnapshot
from src.domain.services.reports import compute_counterparty_balances
from src.infrastructure.logging.logger import get_app_logger


class GetCounterpartyBalancesUseCase:
    """Net approved income and expense with each active counterparty."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(self, snapshot: LedgerSnapshot) -> CounterpartyBalances:
        result = compute_counterparty_balances(
            snapshot.counterparties,
            snapshot.transactions,
        )
        self._logger.info(
            f"Counterparty balances computed: "
            f"receivable={result.total_receivable}, "
            f"payable={result.total_payable}"
        )
        return result


__all__ = ["GetCounterpartyBalancesUseCase", "CounterpartyBalances"]
