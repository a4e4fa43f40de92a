"""Composition root for wiring infrastructure adapters."""

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.ledger_repository import LedgerRepositoryPort
from src.application.use_cases.load_ledger_snapshot import (
    LoadLedgerSnapshotUseCase,
)
from src.application.use_cases.manage_ledger_records import (
    ManageLedgerRecordsUseCase,
)
from src.infrastructure.db import SqlAlchemyDatabaseEngineAdapter
from src.infrastructure.ledger_repository import SqlAlchemyLedgerRepository
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import DashboardSettings


def build_database_adapter() -> DatabaseEnginePort:
    """Return the database adapter instance."""
    return SqlAlchemyDatabaseEngineAdapter()


def build_ledger_repository(
    db_port: DatabaseEnginePort | None = None,
) -> LedgerRepositoryPort:
    """Return the Ledger Store repository."""
    resolved_db = db_port or build_database_adapter()
    return SqlAlchemyLedgerRepository(resolved_db)


def build_snapshot_loader(
    db_port: DatabaseEnginePort | None = None,
    settings: DashboardSettings | None = None,
) -> LoadLedgerSnapshotUseCase:
    """Return the snapshot loader honoring the strict fetch setting."""
    resolved_settings = settings or DashboardSettings.from_env()
    return LoadLedgerSnapshotUseCase(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
        strict=resolved_settings.strict_fetch,
    )


def build_record_manager(
    db_port: DatabaseEnginePort | None = None,
) -> ManageLedgerRecordsUseCase:
    """Return the use case issuing ledger record mutations."""
    return ManageLedgerRecordsUseCase(
        build_ledger_repository(db_port),
        logger=get_app_logger(),
    )


__all__ = [
    "build_database_adapter",
    "build_ledger_repository",
    "build_snapshot_loader",
    "build_record_manager",
]
