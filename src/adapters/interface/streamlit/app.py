"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from datetime import date
from decimal import Decimal

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.charts import (
    build_cash_flow_figure,
    daily_ledger_rows,
    format_kpi_delta,
    format_kpi_value,
    sparkline_rows,
    structure_rows,
)
from src.adapters.periods import (
    PERIOD_LABELS,
    month_grid_range,
    resolve_period_range,
)
from src.application.use_cases.get_balance_sheet import GetBalanceSheetUseCase
from src.application.use_cases.get_calculated_accounts import (
    GetCalculatedAccountsUseCase,
)
from src.application.use_cases.get_cash_flow_forecast import (
    GetCashFlowForecastUseCase,
)
from src.application.use_cases.get_cash_flow_statement import (
    GetCashFlowStatementUseCase,
)
from src.application.use_cases.get_category_dynamics import (
    GetCategoryDynamicsUseCase,
)
from src.application.use_cases.get_category_structure import (
    GetCategoryStructureUseCase,
)
from src.application.use_cases.get_counterparty_balances import (
    GetCounterpartyBalancesUseCase,
)
from src.application.use_cases.get_daily_ledger import GetDailyLedgerUseCase
from src.application.use_cases.get_kpis import GetKpisUseCase
from src.application.use_cases.get_pending_liabilities import (
    GetPendingLiabilitiesUseCase,
)
from src.application.use_cases.get_profit_and_loss import (
    GetProfitAndLossUseCase,
)
from src.application.use_cases.get_project_financials import (
    GetProjectFinancialsUseCase,
)
from src.domain.constants import (
    ALL_FILTER,
    APPROVED,
    EXPENSE,
    INCOME,
    KPI_EXPENSE_LABEL,
)
from src.domain.models import (
    CalculatedAccount,
    DateRange,
    KPIData,
    LedgerFilters,
    LedgerSnapshot,
    StructureSlice,
)
from src.domain.services.daily_ledger import SHOW_ACTUAL, SHOW_PLANNED
from src.infrastructure.container import (
    build_record_manager,
    build_snapshot_loader,
)
from src.infrastructure.logging.logger import get_usage_logger
from src.infrastructure.settings import DashboardSettings

PAGES = ["Dashboard", "Accounts", "Reports", "Analytics", "Calendar"]
CUSTOM_PERIOD = "custom"
SHOW_LABELS = {
    ALL_FILTER: "Actual and planned",
    SHOW_ACTUAL: "Actual only",
    SHOW_PLANNED: "Planned only",
}
TYPE_LABELS = {ALL_FILTER: "All types", INCOME: "Income", EXPENSE: "Expense"}


def _fetch_snapshot() -> LedgerSnapshot:
    """Load every ledger collection from the Ledger Store."""
    settings = DashboardSettings.from_env()
    return build_snapshot_loader(settings=settings).execute()


@st.cache_data(show_spinner=False)
def _load_snapshot(schema_version: int = 1) -> LedgerSnapshot:
    """Cached wrapper around _fetch_snapshot for Streamlit sessions."""
    _ = schema_version
    return _fetch_snapshot()


def _format_currency(value: Decimal, symbol: str) -> str:
    """Format currency values for display."""
    return f"{symbol}{value:,.2f}"


def _share_of(amount: Decimal, total: Decimal) -> str:
    """Format an amount as a one-decimal percentage of a total."""
    if total <= 0:
        return "0%"
    return f"{amount / total * 100:.1f}%"


def _select_filters(snapshot: LedgerSnapshot) -> LedgerFilters:
    """Render the account and project selectors."""
    account_names = {account.id: account.name for account in snapshot.accounts}
    project_names = {project.id: project.name for project in snapshot.projects}
    account_id = st.sidebar.selectbox(
        "Account",
        options=[ALL_FILTER, *account_names],
        format_func=lambda key: account_names.get(key, "All accounts"),
    )
    project_id = st.sidebar.selectbox(
        "Project",
        options=[ALL_FILTER, *project_names],
        format_func=lambda key: project_names.get(key, "All projects"),
    )
    return LedgerFilters(account_id=account_id, project_id=project_id)


def _select_period(settings: DashboardSettings) -> DateRange:
    """Render the period selector and resolve its window.

    Besides the presets, a custom window is picked with two date inputs
    that start from the configured default period.
    """
    keys = [*PERIOD_LABELS, CUSTOM_PERIOD]
    default_index = (
        keys.index(settings.default_period)
        if settings.default_period in keys
        else 0
    )
    period = st.sidebar.selectbox(
        "Period",
        options=keys,
        index=default_index,
        format_func=lambda key: PERIOD_LABELS.get(key, "Custom"),
    )
    if period != CUSTOM_PERIOD:
        return resolve_period_range(period, settings.today())

    default_range = resolve_period_range(
        settings.default_period,
        settings.today(),
    )
    start = st.sidebar.date_input("From", value=default_range.start)
    end = st.sidebar.date_input("To", value=default_range.end)
    if end < start:
        st.sidebar.warning("End date is before start date; swapping them.")
        start, end = end, start
    return DateRange(start=start, end=end)


def _render_sparkline(kpi: KPIData) -> None:
    """Render a small area chart under a KPI metric."""
    chart = alt.Chart(alt.Data(values=sparkline_rows(kpi))).mark_area(
        line=True,
        opacity=0.3,
    ).encode(
        x=alt.X("period:N", axis=None, sort=None),
        y=alt.Y("value:Q", axis=None),
        tooltip=[alt.Tooltip("value:Q", format=",.0f")],
    ).properties(
        height=60,
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_kpis(kpis: Sequence[KPIData], symbol: str) -> None:
    """Render the four headline metrics with their sparklines."""
    columns = st.columns(len(kpis))
    for column, kpi in zip(columns, kpis):
        column.metric(
            kpi.label,
            format_kpi_value(kpi.value, symbol),
            format_kpi_delta(kpi),
            delta_color="inverse" if kpi.label == KPI_EXPENSE_LABEL else "normal",
        )
        with column:
            _render_sparkline(kpi)


def _render_cash_flow(forecast, symbol: str) -> None:
    """Render the actual and projected balance chart."""
    st.subheader("Cash Flow")
    if not forecast.points:
        st.info("No cash-flow data for the selected period.")
        return
    if forecast.cash_gap_date is not None:
        st.warning(
            f"Cash gap expected on {forecast.cash_gap_date.isoformat()}."
        )
    st.plotly_chart(build_cash_flow_figure(forecast, symbol), width="stretch")


def _render_structure_chart(
    slices: Sequence[StructureSlice],
    title: str,
    symbol: str,
    chart_size: int = 300,
) -> None:
    """Render a donut chart of amounts by category.

    Args:
        slices: Category slices, largest first.
        title: Chart title to display above the donut.
        symbol: Currency symbol for labels.
        chart_size: Width/height for the chart canvas.
    """
    st.subheader(title)
    if not slices:
        st.info("No transactions for the selected period.")
        return
    data = structure_rows(slices, symbol)

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="view:mouseover",
        clear="view:mouseout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.4,
        cornerRadius=8,
        padAngle=0.02,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(
                domain=[row["category"] for row in data],
                range=[row["color"] for row in data],
            ),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N"),
            alt.Tooltip("share_label:N"),
        ],
    )
    hover_text = alt.Chart(alt.Data(values=data)).transform_filter(
        hover
    ).mark_text(
        align="center",
        baseline="middle",
        fontSize=16,
        fontWeight="bold",
    ).encode(
        text="share_label:N"
    )
    chart = alt.layer(base, hover_text).add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    ).configure_view(
        stroke=None
    )
    st.altair_chart(chart, width="stretch")


def _render_dashboard(
    snapshot: LedgerSnapshot,
    date_range: DateRange,
    filters: LedgerFilters,
    settings: DashboardSettings,
) -> None:
    """Render KPIs, cash flow and category structure."""
    symbol = settings.currency_symbol
    st.caption(f"{date_range.start} to {date_range.end}")
    kpis = GetKpisUseCase().execute(snapshot, date_range, filters)
    _render_kpis(kpis, symbol)

    forecast = GetCashFlowForecastUseCase().execute(
        snapshot,
        date_range,
        filters,
        today=settings.today(),
    )
    _render_cash_flow(forecast, symbol)

    structure = GetCategoryStructureUseCase()
    income_col, expense_col = st.columns(2)
    with income_col:
        _render_structure_chart(
            structure.execute(snapshot, date_range, INCOME, filters),
            "Income by Category",
            symbol,
        )
    with expense_col:
        _render_structure_chart(
            structure.execute(snapshot, date_range, EXPENSE, filters),
            "Expenses by Category",
            symbol,
        )


def _render_accounts(
    accounts: Sequence[CalculatedAccount],
    snapshot: LedgerSnapshot,
    symbol: str,
) -> None:
    """Render account balances grouped by account group."""
    st.subheader("Accounts")
    if not accounts:
        st.warning("No accounts found in the ledger.")
        return
    group_names = {group.id: group.name for group in snapshot.account_groups}
    data = [
        {
            "Group": group_names.get(item.account.group_id, "Ungrouped"),
            "Name": item.name,
            "Currency": item.account.currency,
            "Balance": _format_currency(item.balance, symbol),
        }
        for item in accounts
    ]
    total = sum((item.balance for item in accounts), start=Decimal("0"))
    st.caption(f"Total: {_format_currency(total, symbol)}")
    st.dataframe(data, width="stretch", hide_index=True)

    pending = GetPendingLiabilitiesUseCase().execute(snapshot)
    creditor_col, debtor_col = st.columns(2)
    creditor_col.metric(
        "Creditor debt",
        _format_currency(pending.creditor, symbol),
    )
    debtor_col.metric(
        "Debtor debt",
        _format_currency(pending.debtor, symbol),
    )


def _render_reports(
    snapshot: LedgerSnapshot,
    date_range: DateRange,
    filters: LedgerFilters,
    symbol: str,
) -> None:
    """Render project, counterparty and monthly expense reports."""
    st.subheader("Projects")
    projects = GetProjectFinancialsUseCase().execute(snapshot)
    st.dataframe(
        [
            {
                "Project": item.name,
                "Revenue": _format_currency(item.actual_revenue, symbol),
                "Expenses": _format_currency(item.actual_expense, symbol),
                "Profit": _format_currency(item.gross_profit, symbol),
                "Margin %": item.profitability,
                "Plan margin %": item.planned_profitability,
            }
            for item in projects
        ],
        width="stretch",
        hide_index=True,
    )

    st.subheader("Counterparties")
    balances = GetCounterpartyBalancesUseCase().execute(snapshot)
    receivable_col, payable_col = st.columns(2)
    receivable_col.metric(
        "Receivables",
        _format_currency(balances.total_receivable, symbol),
    )
    payable_col.metric(
        "Payables",
        _format_currency(balances.total_payable, symbol),
    )
    st.dataframe(
        [
            {
                "Counterparty": item.name,
                "Type": item.type,
                "Balance": _format_currency(item.balance, symbol),
            }
            for item in balances.balances
        ],
        width="stretch",
        hide_index=True,
    )

    st.subheader("Expense Dynamics")
    dynamics = GetCategoryDynamicsUseCase().execute(
        snapshot,
        date_range,
        EXPENSE,
        filters,
    )
    rows = [
        {"month": point.label, "category": name, "amount": float(amount)}
        for point in dynamics
        for name, amount in point.amounts.items()
    ]
    if not rows:
        st.info("No expenses for the selected period.")
        return
    chart = alt.Chart(alt.Data(values=rows)).mark_bar().encode(
        x=alt.X("month:N", sort=[point.label for point in dynamics]),
        y=alt.Y("amount:Q", stack=True),
        color=alt.Color("category:N", legend=alt.Legend(orient="bottom")),
        tooltip=[
            alt.Tooltip("month:N"),
            alt.Tooltip("category:N"),
            alt.Tooltip("amount:Q", format=",.2f"),
        ],
    )
    st.altair_chart(chart, width="stretch")


def _render_analytics(
    snapshot: LedgerSnapshot,
    date_range: DateRange,
    filters: LedgerFilters,
    symbol: str,
) -> None:
    """Render the income statement, cash-flow statement and balance sheet."""
    st.subheader("Profit & Loss")
    pnl = GetProfitAndLossUseCase().execute(snapshot, date_range, filters)
    income_col, expense_col, margin_col = st.columns(3)
    income_col.metric(
        "Total Income",
        _format_currency(pnl.total_income, symbol),
    )
    expense_col.metric(
        "Total Expense",
        _format_currency(pnl.total_expense, symbol),
    )
    margin_col.metric("Net Margin", f"{pnl.net_margin:.1f}%")
    lines = [
        {
            "Section": section,
            "Category": line.name,
            "Amount": _format_currency(line.amount, symbol),
            "% of Revenue": _share_of(line.amount, pnl.total_income),
        }
        for section, items in (
            ("Revenue", pnl.revenue),
            ("Operating Expenses", pnl.expenses),
        )
        for line in items
    ]
    if lines:
        st.dataframe(lines, width="stretch", hide_index=True)
    else:
        st.info("No income or expenses for the selected period.")
    st.caption(f"Net Profit: {_format_currency(pnl.net_profit, symbol)}")

    st.subheader("Cash Flow Statement")
    statement = GetCashFlowStatementUseCase().execute(
        snapshot,
        date_range,
        filters,
    )
    st.metric(
        "Net Cash Flow",
        _format_currency(statement.net_cash_flow, symbol),
    )
    if statement.operating:
        st.dataframe(
            [
                {
                    "Category": line.name,
                    "Amount": _format_currency(line.amount, symbol),
                }
                for line in statement.operating
            ],
            width="stretch",
            hide_index=True,
        )
    if statement.transfers:
        st.dataframe(
            [
                {
                    "From": transfer.from_account,
                    "To": transfer.to_account,
                    "Amount": _format_currency(transfer.amount, symbol),
                }
                for transfer in statement.transfers
            ],
            width="stretch",
            hide_index=True,
        )

    st.subheader("Balance Sheet")
    sheet = GetBalanceSheetUseCase().execute(snapshot)
    assets_col, payables_col, equity_col = st.columns(3)
    assets_col.metric(
        "Total Assets",
        _format_currency(sheet.total_assets, symbol),
    )
    payables_col.metric(
        "Payables",
        _format_currency(sheet.total_payables, symbol),
    )
    equity_col.metric("Equity", _format_currency(sheet.equity, symbol))
    rows = [
        {
            "Line": "Cash",
            "Name": item.name,
            "Amount": _format_currency(item.balance, symbol),
        }
        for item in sheet.cash_accounts
    ]
    rows.extend(
        {
            "Line": "Receivable",
            "Name": item.name,
            "Amount": _format_currency(item.balance, symbol),
        }
        for item in sheet.receivables
    )
    rows.extend(
        {
            "Line": "Payable",
            "Name": item.name,
            "Amount": _format_currency(-item.balance, symbol),
        }
        for item in sheet.payables
    )
    if rows:
        st.dataframe(rows, width="stretch", hide_index=True)


def _render_add_transaction_form(
    snapshot: LedgerSnapshot,
    default_day: date,
) -> None:
    """Render a form recording an approved income or expense."""
    account_names = {account.id: account.name for account in snapshot.accounts}
    if not account_names:
        return
    category_names = {
        category.id: category.name for category in snapshot.categories
    }
    project_names = {project.id: project.name for project in snapshot.projects}
    with st.form("add_transaction"):
        st.subheader("Add transaction")
        txn_type = st.selectbox(
            "Type",
            options=[INCOME, EXPENSE],
            format_func=lambda key: TYPE_LABELS[key],
        )
        day = st.date_input("Date", value=default_day)
        amount = st.number_input("Amount", min_value=0.0, step=100.0)
        account_id = st.selectbox(
            "Account",
            options=list(account_names),
            format_func=lambda key: account_names[key],
        )
        category_id = st.selectbox(
            "Category",
            options=[None, *category_names],
            format_func=lambda key: category_names.get(key, "None"),
        )
        project_id = st.selectbox(
            "Project",
            options=[None, *project_names],
            format_func=lambda key: project_names.get(key, "None"),
        )
        description = st.text_input("Description")
        submitted = st.form_submit_button("Add")

    if not submitted:
        return
    if amount <= 0:
        st.warning("Enter an amount greater than zero.")
        return
    row = build_record_manager().create(
        "transactions",
        {
            "date": day,
            "type": txn_type,
            "status": APPROVED,
            "amount": Decimal(str(amount)),
            "account_id": account_id,
            "category_id": category_id,
            "project_id": project_id,
            "description": description,
        },
    )
    get_usage_logger().info(f"Transaction added: id={row.get('id')}")
    st.success("Transaction added.")
    _load_snapshot.clear()


def _render_calendar(
    snapshot: LedgerSnapshot,
    settings: DashboardSettings,
) -> None:
    """Render the daily ledger for the weeks covering one month."""
    month_day = st.sidebar.date_input("Month", value=settings.today())
    filters = _select_filters(snapshot)
    show = st.sidebar.selectbox(
        "Show",
        options=list(SHOW_LABELS),
        format_func=lambda key: SHOW_LABELS[key],
    )
    type_filter = st.sidebar.selectbox(
        "Type",
        options=list(TYPE_LABELS),
        format_func=lambda key: TYPE_LABELS[key],
    )
    date_range = month_grid_range(month_day)
    days = GetDailyLedgerUseCase().execute(
        snapshot,
        date_range,
        filters,
        today=settings.today(),
        show=show,
        type_filter=type_filter,
    )

    st.subheader(month_day.strftime("%B %Y"))
    gap_days = [
        day.date.isoformat()
        for day in days
        if day.has_cash_gap and day.is_projection
    ]
    if gap_days:
        st.warning(f"Cash gap expected on {', '.join(gap_days)}.")
    st.dataframe(
        daily_ledger_rows(days, settings.currency_symbol),
        width="stretch",
        hide_index=True,
    )
    _render_add_transaction_form(snapshot, settings.today())


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Finance Dashboard", layout="wide")
    st.title("Finance Dashboard")

    settings = DashboardSettings.from_env()
    page = st.sidebar.selectbox("Page", PAGES)
    if st.sidebar.button("Refresh data"):
        _load_snapshot.clear()
    get_usage_logger().info(f"Page view: {page}")

    snapshot = _load_snapshot(schema_version=1)
    if snapshot.failed_collections:
        st.warning(
            "Some ledger data could not be loaded: "
            f"{', '.join(snapshot.failed_collections)}"
        )

    if page == "Accounts":
        accounts = GetCalculatedAccountsUseCase().execute(snapshot)
        _render_accounts(accounts, snapshot, settings.currency_symbol)
        return
    if page == "Calendar":
        _render_calendar(snapshot, settings)
        return

    date_range = _select_period(settings)
    filters = _select_filters(snapshot)
    if page == "Reports":
        _render_reports(
            snapshot,
            date_range,
            filters,
            settings.currency_symbol,
        )
    elif page == "Analytics":
        _render_analytics(
            snapshot,
            date_range,
            filters,
            settings.currency_symbol,
        )
    else:
        _render_dashboard(snapshot, date_range, filters, settings)


if __name__ == "__main__":  # pragma: no cover
    main()
