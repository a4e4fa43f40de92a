"""Use case loading an immutable ledger snapshot from the Ledger Store.

Each collection is fetched independently. By default a failed fetch leaves
that collection empty and logs a warning, so the dashboard keeps rendering
with degraded totals. In strict mode the first failure is raised instead.
"""

import itertools
from collections.abc import Callable

from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.domain.constants import (
    PLANNED_PAYMENT_TYPES,
    TRANSACTION_STATUSES,
    TRANSACTION_TYPES,
)
from src.domain.models import LedgerSnapshot
from src.domain.services.validation import validate_amount_sign, validate_code
from src.infrastructure.logging.logger import get_app_logger

_snapshot_versions = itertools.count(1)


class LedgerFetchError(RuntimeError):
    """Raised in strict mode when a ledger collection cannot be fetched."""

    def __init__(self, collection: str, cause: Exception) -> None:
        super().__init__(f"Failed to fetch ledger collection '{collection}'")
        self.collection = collection
        self.cause = cause


class LoadLedgerSnapshotUseCase:
    """Fetch every ledger collection into a ``LedgerSnapshot``."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
        strict: bool = False,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing ledger collections.
            logger: Optional logger compatible with logging.Logger-like API.
            strict: Raise ``LedgerFetchError`` instead of degrading to an
                empty collection.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()
        self._strict = strict

    def execute(self) -> LedgerSnapshot:
        """Return a fresh snapshot of the ledger.

        Returns:
            LedgerSnapshot: All collections, the load version and the names
            of collections that could not be fetched.

        Raises:
            LedgerFetchError: In strict mode, when a fetch fails.
        """
        repo = self._ledger_repository
        failed: list[str] = []

        def fetch(name: str, loader: Callable[[], list]) -> tuple:
            return tuple(self._fetch(name, loader, failed))

        snapshot = LedgerSnapshot(
            account_groups=fetch("account_groups", repo.list_account_groups),
            accounts=fetch("accounts", repo.list_accounts),
            transactions=fetch("transactions", repo.list_transactions),
            planned_payments=fetch(
                "planned_payments",
                repo.list_planned_payments,
            ),
            category_groups=fetch(
                "category_groups",
                repo.list_category_groups,
            ),
            categories=fetch("categories", repo.list_categories),
            projects=fetch("projects", repo.list_projects),
            counterparties=fetch("counterparties", repo.list_counterparties),
            version=next(_snapshot_versions),
            failed_collections=tuple(failed),
        )
        self._validate(snapshot)
        self._logger.info(
            f"Ledger snapshot v{snapshot.version} loaded: "
            f"accounts={len(snapshot.accounts)}, "
            f"transactions={len(snapshot.transactions)}, "
            f"planned_payments={len(snapshot.planned_payments)}, "
            f"failed={list(snapshot.failed_collections)}"
        )
        return snapshot

    def _fetch(
        self,
        name: str,
        loader: Callable[[], list],
        failed: list[str],
    ) -> list:
        try:
            return loader()
        except SQLAlchemyError as exc:
            if self._strict:
                raise LedgerFetchError(name, exc) from exc
            self._logger.warning(
                f"Failed to fetch {name}, using an empty collection: {exc}"
            )
            failed.append(name)
            return []

    def _validate(self, snapshot: LedgerSnapshot) -> None:
        for txn in snapshot.transactions:
            validate_amount_sign("transaction", txn.id, txn.amount, self._logger)
            validate_code(
                "transaction",
                txn.id,
                "type",
                txn.type,
                TRANSACTION_TYPES,
                self._logger,
            )
            validate_code(
                "transaction",
                txn.id,
                "status",
                txn.status,
                TRANSACTION_STATUSES,
                self._logger,
            )
        for payment in snapshot.planned_payments:
            validate_amount_sign(
                "planned payment",
                payment.id,
                payment.amount,
                self._logger,
            )
            validate_code(
                "planned payment",
                payment.id,
                "type",
                payment.type,
                PLANNED_PAYMENT_TYPES,
                self._logger,
            )


__all__ = ["LoadLedgerSnapshotUseCase", "LedgerFetchError"]
