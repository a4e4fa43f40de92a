"""Application ports package."""

from .database import DatabaseEnginePort
from .ledger_repository import LEDGER_COLLECTIONS, LedgerRepositoryPort

__all__ = [
    "DatabaseEnginePort",
    "LEDGER_COLLECTIONS",
    "LedgerRepositoryPort",
]
