"""Chart presentation logic for the Streamlit dashboard.

This module holds pure, testable transformations from the derived views
(``CashFlowForecast``, ``KPIData``, ``StructureSlice``, ``DailyLedgerDay``)
to chart-ready data and Plotly figures. The UI is responsible for loading
the views and rendering the returned objects; there is no IO here.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal
from typing import TYPE_CHECKING

from src.domain.constants import KPI_CASH_LABEL
from src.domain.models import (
    CashFlowForecast,
    CashFlowPoint,
    DailyLedgerDay,
    KPIData,
    StructureSlice,
)

if TYPE_CHECKING:  # pragma: no cover
    import plotly.graph_objects as go


MAX_CHART_POINTS = 90

ACTUAL_COLOR = "#3b6fd8"
FORECAST_COLOR = "#8aa9e8"
GAP_COLOR = "#e5484d"


def sample_points(
    points: Sequence[CashFlowPoint],
    max_points: int = MAX_CHART_POINTS,
) -> list[CashFlowPoint]:
    """Thin a long daily series for display.

    Keeps every ``ceil(len / max_points)``-th point and always the last one.

    Args:
        points: Daily cash-flow points.
        max_points: Size above which the series is thinned.

    Returns:
        list[CashFlowPoint]: Points to plot, in date order.
    """
    if len(points) <= max_points:
        return list(points)
    step = -(-len(points) // max_points)
    last = len(points) - 1
    return [
        point
        for index, point in enumerate(points)
        if index % step == 0 or index == last
    ]


def format_compact_currency(value: Decimal, symbol: str = "$") -> str:
    """Format an amount as ``$1.2M``, ``$15K`` or ``$900``."""
    amount = float(value)
    if abs(amount) >= 1_000_000:
        return f"{symbol}{amount / 1_000_000:.1f}M"
    if abs(amount) >= 1_000:
        return f"{symbol}{amount / 1_000:.0f}K"
    return f"{symbol}{amount:.0f}"


def format_kpi_value(value: Decimal, symbol: str = "$") -> str:
    """Format a KPI headline value."""
    amount = float(value)
    if abs(amount) >= 1_000_000:
        return f"{symbol}{amount / 1_000_000:.1f}M"
    return f"{symbol}{amount:,.0f}"


def format_kpi_delta(kpi: KPIData) -> str | None:
    """Return the delta label, None for the point-in-time cash metric."""
    if kpi.label == KPI_CASH_LABEL:
        return None
    return f"{kpi.delta:+d}%"


def sparkline_rows(kpi: KPIData) -> list[dict[str, str | float]]:
    """Return Altair-ready rows for a KPI sparkline."""
    return [
        {"period": f"Period {index + 1}", "value": float(value)}
        for index, value in enumerate(kpi.sparkline)
    ]


def daily_ledger_rows(
    days: Sequence[DailyLedgerDay],
    symbol: str = "$",
) -> list[dict[str, str | bool]]:
    """Return table rows for the calendar, amounts in compact form."""
    return [
        {
            "Date": day.date.isoformat(),
            "Weekday": day.date.strftime("%a"),
            "Start": format_compact_currency(day.start_balance, symbol),
            "Income": format_compact_currency(day.income, symbol),
            "Expense": format_compact_currency(day.expense, symbol),
            "Net": format_compact_currency(day.net, symbol),
            "End": format_compact_currency(day.end_balance, symbol),
            "Forecast": day.is_projection,
            "Cash gap": day.has_cash_gap,
        }
        for day in days
    ]


def structure_rows(
    slices: Sequence[StructureSlice],
    symbol: str = "$",
) -> list[dict[str, str | float]]:
    """Return Altair-ready rows for a category donut."""
    return [
        {
            "category": item.name,
            "amount": float(item.value),
            "amount_label": f"{symbol}{item.value:,.2f}",
            "share_label": f"{item.percentage}%",
            "color": item.color,
        }
        for item in slices
    ]


def build_cash_flow_figure(
    forecast: CashFlowForecast,
    symbol: str = "$",
) -> "go.Figure":
    """Build a Plotly figure with actual and forecast balance lines.

    The forecast trace starts at the last actual point so both lines join.
    A vertical marker flags the cash-gap date when there is one.

    Args:
        forecast: Daily cash-flow series.
        symbol: Currency symbol for the y-axis.

    Returns:
        Plotly figure ready to be displayed in Streamlit.
    """
    points = sample_points(forecast.points)
    actual = [point for point in points if not point.is_projection]
    projected = [point for point in points if point.is_projection]
    if actual and projected:
        projected = [actual[-1], *projected]

    import plotly.graph_objects as go

    fig = go.Figure()
    fig.add_trace(
        go.Scatter(
            x=[point.date.isoformat() for point in actual],
            y=[float(point.balance) for point in actual],
            name="Actual",
            mode="lines",
            line=dict(color=ACTUAL_COLOR, width=2),
            fill="tozeroy",
        )
    )
    fig.add_trace(
        go.Scatter(
            x=[point.date.isoformat() for point in projected],
            y=[float(point.balance) for point in projected],
            name="Forecast",
            mode="lines",
            line=dict(color=FORECAST_COLOR, width=2, dash="dash"),
        )
    )
    fig.add_hline(y=0, line=dict(color="rgba(0,0,0,0.3)", width=1))
    if forecast.cash_gap_date is not None:
        fig.add_vline(
            x=forecast.cash_gap_date.isoformat(),
            line=dict(color=GAP_COLOR, width=1, dash="dot"),
        )
    fig.update_layout(
        margin=dict(l=8, r=8, t=8, b=8),
        height=320,
        yaxis=dict(tickprefix=symbol),
        legend=dict(orientation="h"),
    )
    return fig


__all__ = [
    "MAX_CHART_POINTS",
    "sample_points",
    "format_compact_currency",
    "format_kpi_value",
    "format_kpi_delta",
    "sparkline_rows",
    "daily_ledger_rows",
    "structure_rows",
    "build_cash_flow_figure",
]
