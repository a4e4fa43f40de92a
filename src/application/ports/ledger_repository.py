"""Port for the Ledger Store collaborator."""

from typing import Any, Protocol

from src.domain.models import (
    Account,
    AccountGroup,
    Category,
    CategoryGroup,
    Counterparty,
    PlannedPayment,
    Project,
    Transaction,
)

LEDGER_COLLECTIONS = (
    "account_groups",
    "accounts",
    "transactions",
    "planned_payments",
    "category_groups",
    "categories",
    "projects",
    "counterparties",
)


class LedgerRepositoryPort(Protocol):
    """Port exposing list and write access to ledger collections."""

    def list_account_groups(self) -> list[AccountGroup]:
        """Return account groups ordered by sort order."""

    def list_accounts(self) -> list[Account]:
        """Return accounts ordered by sort order."""

    def list_transactions(self) -> list[Transaction]:
        """Return transactions, most recent first."""

    def list_planned_payments(self) -> list[PlannedPayment]:
        """Return planned payments ordered by date."""

    def list_category_groups(self) -> list[CategoryGroup]:
        """Return category groups ordered by sort order."""

    def list_categories(self) -> list[Category]:
        """Return categories ordered by sort order."""

    def list_projects(self) -> list[Project]:
        """Return projects ordered by creation time."""

    def list_counterparties(self) -> list[Counterparty]:
        """Return counterparties ordered by creation time."""

    def insert_record(
        self,
        collection: str,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        """Insert a record and return the stored row."""

    def update_record(
        self,
        collection: str,
        record_id: str,
        values: dict[str, Any],
    ) -> None:
        """Update the given fields of a record."""

    def delete_record(self, collection: str, record_id: str) -> None:
        """Delete a record by id."""


__all__ = ["LEDGER_COLLECTIONS", "LedgerRepositoryPort"]
