"""Use case issuing record mutations against the Ledger Store.

Mutations are independent requests. A multi-record change such as swapping
the order of two sibling rows is sent as two sequential updates with no
rollback when the second one fails. Callers reload the snapshot afterwards;
derived views are never patched in place.
"""

from typing import Any

from src.application.ports.ledger_repository import (
    LEDGER_COLLECTIONS,
    LedgerRepositoryPort,
)
from src.infrastructure.logging.logger import get_app_logger


class ManageLedgerRecordsUseCase:
    """Create, update, delete and reorder ledger records."""

    def __init__(
        self,
        ledger_repository: LedgerRepositoryPort,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            ledger_repository: Port providing write access to the ledger.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._ledger_repository = ledger_repository
        self._logger = logger or get_app_logger()

    def create(self, collection: str, values: dict[str, Any]) -> dict[str, Any]:
        """Insert a record and return the stored row."""
        self._check_collection(collection)
        row = self._ledger_repository.insert_record(collection, values)
        self._logger.info(f"Inserted {collection} id={row.get('id')}")
        return row

    def update(
        self,
        collection: str,
        record_id: str,
        values: dict[str, Any],
    ) -> None:
        """Update fields of an existing record."""
        self._check_collection(collection)
        self._ledger_repository.update_record(collection, record_id, values)
        self._logger.info(
            f"Updated {collection} id={record_id} fields={sorted(values)}"
        )

    def delete(self, collection: str, record_id: str) -> None:
        """Delete a record. Referencing rows are left untouched."""
        self._check_collection(collection)
        self._ledger_repository.delete_record(collection, record_id)
        self._logger.info(f"Deleted {collection} id={record_id}")

    def swap_sort_order(
        self,
        collection: str,
        first: tuple[str, int],
        second: tuple[str, int],
    ) -> None:
        """Exchange the sort order of two sibling records.

        Args:
            collection: Collection holding both records.
            first: ``(id, sort_order)`` of the first record.
            second: ``(id, sort_order)`` of the second record.
        """
        first_id, first_order = first
        second_id, second_order = second
        self.update(collection, first_id, {"sort_order": second_order})
        self.update(collection, second_id, {"sort_order": first_order})

    @staticmethod
    def _check_collection(collection: str) -> None:
        if collection not in LEDGER_COLLECTIONS:
            raise ValueError(f"Unknown ledger collection: {collection}")


__all__ = ["ManageLedgerRecordsUseCase"]
