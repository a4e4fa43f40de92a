"""CLI checking that the Ledger Store database is reachable.

Connects with the configured ``LEDGER_DB_URL`` and counts the rows of every
ledger collection, so a missing table shows up before the dashboard starts.
"""

from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from src.application.ports.ledger_repository import LEDGER_COLLECTIONS
from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Run the connectivity check.

    Returns:
        int: Number of collections that could not be queried.
    """
    logger = get_app_logger()
    engine = build_database_adapter().get_ledger_engine()
    logger.info(f"Ledger DB: {engine.url}")

    missing = 0
    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
        for collection in LEDGER_COLLECTIONS:
            try:
                count = conn.execute(
                    text(f"SELECT COUNT(*) FROM {collection}")
                ).scalar()
            except SQLAlchemyError as exc:
                logger.error(f"{collection}: not readable ({exc})")
                conn.rollback()
                missing += 1
                continue
            logger.info(f"{collection}: {count} rows")

    if missing:
        logger.warning(f"{missing} ledger collections are not readable.")
    else:
        logger.info("Ledger connection is working.")
    return missing


if __name__ == "__main__":  # pragma: no cover
    raise SystemExit(main())
