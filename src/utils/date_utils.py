"""Calendar-day helpers shared by the ledger and the derivations."""

from collections.abc import Iterator
from datetime import date, datetime, timedelta

ISO_DATE_FORMAT = "%Y-%m-%d"


def parse_iso_date(value) -> date | None:
    """Parse a ledger date into a calendar day.

    Args:
        value: ``date``, ``datetime`` or ``YYYY-MM-DD`` string. Longer ISO
            strings keep only their date part.

    Returns:
        date | None: Parsed day, or None when the value is empty or invalid.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    if not text:
        return None
    try:
        return date.fromisoformat(text[:10])
    except ValueError:
        return None


def format_iso_date(day: date) -> str:
    """Format a calendar day as ``YYYY-MM-DD``."""
    return day.strftime(ISO_DATE_FORMAT)


def days_between(start: date, end: date) -> int:
    """Return the signed number of whole days from start to end."""
    return (end - start).days


def iter_days(start: date, end: date) -> Iterator[date]:
    """Yield every day from start to end inclusive, ascending."""
    cursor = start
    while cursor <= end:
        yield cursor
        cursor += timedelta(days=1)


def month_key(day: date) -> str:
    """Return the ``YYYY-MM`` bucket of a day."""
    return f"{day.year:04d}-{day.month:02d}"


def month_label(day: date) -> str:
    """Return a short month label such as ``Jan 24``."""
    return day.strftime("%b %y")


__all__ = [
    "ISO_DATE_FORMAT",
    "parse_iso_date",
    "format_iso_date",
    "days_between",
    "iter_days",
    "month_key",
    "month_label",
]
