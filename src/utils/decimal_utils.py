"""Helpers for Decimal normalization and rounding."""

from decimal import ROUND_FLOOR, Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values from the ledger store to Decimal.

    Args:
        value: Raw numeric value (Decimal, int, float, str or None).

    Returns:
        Decimal: Normalized value, zero for None, unparsable or non-finite
        input (``NaN``, ``Infinity``).
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value if value.is_finite() else Decimal("0")
    try:
        parsed = Decimal(str(value).strip() or "0")
    except InvalidOperation:
        return Decimal("0")
    return parsed if parsed.is_finite() else Decimal("0")


def round_half_up(value: Decimal) -> int:
    """Round to the nearest integer, halves toward positive infinity.

    Percentages on the dashboard use this rule: ``2.5 -> 3`` and
    ``-2.5 -> -2``.
    """
    return int((value + Decimal("0.5")).to_integral_value(rounding=ROUND_FLOOR))


def sum_decimals(values) -> Decimal:
    """Sum an iterable of Decimals starting from zero."""
    return sum(values, start=Decimal("0"))


__all__ = ["coerce_decimal", "round_half_up", "sum_decimals"]
