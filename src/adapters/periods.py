"""Date window presets offered by the dashboard filter bar."""

from datetime import date, timedelta

from src.domain.models import DateRange

PERIOD_LABELS = {
    "month": "This Month",
    "quarter": "This Quarter",
    "year": "This Year",
    "last_month": "Last Month",
    "last_quarter": "Last Quarter",
    "last_year": "Last Year",
    "all_time": "All Time",
}

ALL_TIME_RANGE = DateRange(start=date(2020, 1, 1), end=date(2030, 12, 31))


def _month_range(year: int, month: int) -> DateRange:
    start = date(year, month, 1)
    if month == 12:
        next_start = date(year + 1, 1, 1)
    else:
        next_start = date(year, month + 1, 1)
    return DateRange(start=start, end=next_start - timedelta(days=1))


def _quarter_range(year: int, quarter: int) -> DateRange:
    first_month = (quarter - 1) * 3 + 1
    start = _month_range(year, first_month).start
    end = _month_range(year, first_month + 2).end
    return DateRange(start=start, end=end)


def resolve_period_range(period: str, today: date) -> DateRange:
    """Return the inclusive window for a preset key.

    Args:
        period: One of the ``PERIOD_LABELS`` keys.
        today: Reference day.

    Returns:
        DateRange: Window for the preset; unknown keys fall back to the
        current quarter.
    """
    quarter = (today.month - 1) // 3 + 1
    if period == "month":
        return _month_range(today.year, today.month)
    if period == "year":
        return DateRange(
            start=date(today.year, 1, 1),
            end=date(today.year, 12, 31),
        )
    if period == "last_month":
        if today.month == 1:
            return _month_range(today.year - 1, 12)
        return _month_range(today.year, today.month - 1)
    if period == "last_quarter":
        if quarter == 1:
            return _quarter_range(today.year - 1, 4)
        return _quarter_range(today.year, quarter - 1)
    if period == "last_year":
        return DateRange(
            start=date(today.year - 1, 1, 1),
            end=date(today.year - 1, 12, 31),
        )
    if period == "all_time":
        return ALL_TIME_RANGE
    return _quarter_range(today.year, quarter)


def month_grid_range(day: date) -> DateRange:
    """Return the Monday-to-Sunday weeks covering the month of ``day``."""
    month = _month_range(day.year, day.month)
    start = month.start - timedelta(days=month.start.weekday())
    end = month.end + timedelta(days=6 - month.end.weekday())
    return DateRange(start=start, end=end)


__all__ = [
    "PERIOD_LABELS",
    "ALL_TIME_RANGE",
    "resolve_period_range",
    "month_grid_range",
]
