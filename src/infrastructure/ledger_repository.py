"""SQLAlchemy-backed repository for the Ledger Store."""

from datetime import date
from typing import Any

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import (
    LEDGER_COLLECTIONS,
    LedgerRepositoryPort,
)
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
from src.domain.services.normalization import (
    normalize_code,
    normalize_reference,
)
from src.utils.date_utils import format_iso_date, parse_iso_date
from src.utils.decimal_utils import coerce_decimal

WRITABLE_COLUMNS: dict[str, tuple[str, ...]] = {
    "account_groups": ("name", "sort_order"),
    "accounts": (
        "group_id",
        "name",
        "opening_balance",
        "currency",
        "sort_order",
    ),
    "transactions": (
        "date",
        "type",
        "status",
        "amount",
        "account_id",
        "to_account_id",
        "category_id",
        "project_id",
        "counterparty_id",
        "description",
    ),
    "planned_payments": (
        "date",
        "type",
        "amount",
        "account_id",
        "to_account_id",
        "category_id",
        "project_id",
        "description",
        "is_recurring",
    ),
    "category_groups": ("name", "type", "sort_order"),
    "categories": ("group_id", "name", "type", "sort_order"),
    "projects": (
        "name",
        "planned_income",
        "planned_expense",
        "status",
        "description",
        "start_date",
        "end_date",
    ),
    "counterparties": ("name", "type", "email", "phone", "status"),
}


class SqlAlchemyLedgerRepository(LedgerRepositoryPort):
    """Repository backed by SQLAlchemy for ledger collections."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the repository.

        Args:
            db_port: Port providing access to the ledger engine.
        """
        self._db_port = db_port

    def list_account_groups(self) -> list[AccountGroup]:
        rows = self._select(
            "SELECT id, name, sort_order FROM account_groups "
            "ORDER BY sort_order"
        )
        return [
            AccountGroup(
                id=str(row.id),
                name=row.name or "",
                sort_order=row.sort_order or 0,
            )
            for row in rows
        ]

    def list_accounts(self) -> list[Account]:
        rows = self._select(
            """
            SELECT id, group_id, name, opening_balance, currency, sort_order
            FROM accounts
            ORDER BY sort_order
            """
        )
        return [
            Account(
                id=str(row.id),
                group_id=normalize_reference(row.group_id),
                name=row.name or "",
                opening_balance=coerce_decimal(row.opening_balance),
                currency=normalize_code(row.currency),
                sort_order=row.sort_order or 0,
            )
            for row in rows
        ]

    def list_transactions(self) -> list[Transaction]:
        rows = self._select(
            """
            SELECT id, date, type, status, amount, account_id, to_account_id,
                   category_id, project_id, counterparty_id, description
            FROM transactions
            ORDER BY date DESC
            """
        )
        return [
            Transaction(
                id=str(row.id),
                date=parse_iso_date(row.date),
                type=normalize_code(row.type),
                status=normalize_code(row.status),
                amount=coerce_decimal(row.amount),
                account_id=normalize_reference(row.account_id),
                to_account_id=normalize_reference(row.to_account_id),
                category_id=normalize_reference(row.category_id),
                project_id=normalize_reference(row.project_id),
                counterparty_id=normalize_reference(row.counterparty_id),
                description=row.description or "",
            )
            for row in rows
        ]

    def list_planned_payments(self) -> list[PlannedPayment]:
        rows = self._select(
            """
            SELECT id, date, type, amount, account_id, to_account_id,
                   category_id, project_id, description, is_recurring
            FROM planned_payments
            ORDER BY date
            """
        )
        return [
            PlannedPayment(
                id=str(row.id),
                date=parse_iso_date(row.date),
                type=normalize_code(row.type),
                amount=coerce_decimal(row.amount),
                account_id=normalize_reference(row.account_id),
                to_account_id=normalize_reference(row.to_account_id),
                category_id=normalize_reference(row.category_id),
                project_id=normalize_reference(row.project_id),
                description=row.description or "",
                is_recurring=bool(row.is_recurring),
            )
            for row in rows
        ]

    def list_category_groups(self) -> list[CategoryGroup]:
        rows = self._select(
            "SELECT id, name, type, sort_order FROM category_groups "
            "ORDER BY sort_order"
        )
        return [
            CategoryGroup(
                id=str(row.id),
                name=row.name or "",
                type=normalize_code(row.type),
                sort_order=row.sort_order or 0,
            )
            for row in rows
        ]

    def list_categories(self) -> list[Category]:
        rows = self._select(
            "SELECT id, group_id, name, type, sort_order FROM categories "
            "ORDER BY sort_order"
        )
        return [
            Category(
                id=str(row.id),
                group_id=normalize_reference(row.group_id),
                name=row.name or "",
                type=normalize_code(row.type),
                sort_order=row.sort_order or 0,
            )
            for row in rows
        ]

    def list_projects(self) -> list[Project]:
        rows = self._select(
            """
            SELECT id, name, planned_income, planned_expense, status
            FROM projects
            ORDER BY created_at
            """
        )
        return [
            Project(
                id=str(row.id),
                name=row.name or "",
                planned_income=coerce_decimal(row.planned_income),
                planned_expense=coerce_decimal(row.planned_expense),
                status=normalize_code(row.status) or "ACTIVE",
            )
            for row in rows
        ]

    def list_counterparties(self) -> list[Counterparty]:
        rows = self._select(
            """
            SELECT id, name, type, email, phone, status
            FROM counterparties
            ORDER BY created_at
            """
        )
        return [
            Counterparty(
                id=str(row.id),
                name=row.name or "",
                type=normalize_code(row.type),
                email=row.email or "",
                phone=row.phone or "",
                status=normalize_code(row.status) or "ACTIVE",
            )
            for row in rows
        ]

    def insert_record(
        self,
        collection: str,
        values: dict[str, Any],
    ) -> dict[str, Any]:
        columns = self._writable(collection, values)
        query = text(
            f"INSERT INTO {collection} ({', '.join(columns)}) "
            f"VALUES ({', '.join(f':{column}' for column in columns)}) "
            "RETURNING *"
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            row = conn.execute(query, _bind_values(values)).mappings().first()
        return dict(row) if row else {}

    def update_record(
        self,
        collection: str,
        record_id: str,
        values: dict[str, Any],
    ) -> None:
        columns = self._writable(collection, values)
        if not columns:
            raise ValueError(f"No columns to update for {collection}")
        assignments = ", ".join(f"{column} = :{column}" for column in columns)
        query = text(
            f"UPDATE {collection} SET {assignments} WHERE id = :record_id"
        )
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(
                query,
                {**_bind_values(values), "record_id": record_id},
            )

    def delete_record(self, collection: str, record_id: str) -> None:
        self._writable(collection, {})
        query = text(f"DELETE FROM {collection} WHERE id = :record_id")
        engine = self._db_port.get_ledger_engine()
        with engine.begin() as conn:
            conn.execute(query, {"record_id": record_id})

    def _select(self, sql: str) -> list:
        engine = self._db_port.get_ledger_engine()
        with engine.connect() as conn:
            return conn.execute(text(sql)).all()

    @staticmethod
    def _writable(collection: str, values: dict[str, Any]) -> list[str]:
        """Return the column names of ``values`` after whitelisting.

        Raises:
            ValueError: For unknown collections or columns.
        """
        if collection not in LEDGER_COLLECTIONS:
            raise ValueError(f"Unknown ledger collection: {collection}")
        allowed = WRITABLE_COLUMNS[collection]
        unknown = sorted(set(values) - set(allowed))
        if unknown:
            raise ValueError(
                f"Unknown columns for {collection}: {', '.join(unknown)}"
            )
        return [column for column in allowed if column in values]


def _bind_values(values: dict[str, Any]) -> dict[str, Any]:
    """Return bind parameters with calendar days as ``YYYY-MM-DD``."""
    return {
        column: format_iso_date(value) if isinstance(value, date) else value
        for column, value in values.items()
    }


__all__ = ["SqlAlchemyLedgerRepository", "WRITABLE_COLUMNS"]
