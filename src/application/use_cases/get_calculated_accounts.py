"""Use case deriving account balances from a ledger snapshot."""

from src.domain.models import CalculatedAccount, LedgerSnapshot
from src.domain.services.balances import calculate_accounts
from src.infrastructure.logging.logger import get_app_logger
from src.utils.decimal_utils import sum_decimals


class GetCalculatedAccountsUseCase:
    """Compute the current balance of every account."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(self, snapshot: LedgerSnapshot) -> list[CalculatedAccount]:
        """Return accounts with derived balances, in ledger order.

        Args:
            snapshot: Ledger snapshot to derive from.

        Returns:
            list[CalculatedAccount]: Accounts paired with their balance.
        """
        accounts = calculate_accounts(
            snapshot.accounts,
            snapshot.transactions,
        )
        total = sum_decimals(item.balance for item in accounts)
        self._logger.info(
            f"Calculated {len(accounts)} account balances, total={total}"
        )
        return accounts


__all__ = ["GetCalculatedAccountsUseCase", "CalculatedAccount"]
