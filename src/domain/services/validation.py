"""Domain validation helpers."""

from collections.abc import Iterable
from decimal import Decimal
from logging import Logger


def validate_amount_sign(
    record_kind: str,
    record_id: str,
    amount: Decimal,
    logger: Logger,
) -> None:
    """Warn when a ledger amount is negative.

    Args:
        record_kind: Collection name used in the warning.
        record_id: Identifier of the offending record.
        amount: Raw amount.
        logger: Logger used for warnings.
    """
    if amount < 0:
        logger.warning(
            f"Negative amount on {record_kind} id={record_id}: {amount}"
        )


def validate_code(
    record_kind: str,
    record_id: str,
    field_name: str,
    value: str,
    allowed: Iterable[str],
    logger: Logger,
) -> None:
    """Warn when a type or status code is not recognized.

    Unknown codes are kept; derivations simply ignore them.
    """
    if value not in allowed:
        logger.warning(
            f"Unknown {field_name} '{value}' on {record_kind} id={record_id}"
        )


__all__ = ["validate_amount_sign", "validate_code"]
