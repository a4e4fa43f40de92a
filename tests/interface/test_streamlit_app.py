"""Tests for the Streamlit app module."""

from datetime import date
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.domain.models import (
    Account,
    AccountGroup,
    Category,
    Counterparty,
    LedgerSnapshot,
    PlannedPayment,
    Project,
    Transaction,
)
from src.infrastructure.settings import DashboardSettings


def test_fetch_snapshot_uses_snapshot_loader(monkeypatch):
    """_fetch_snapshot should build the loader from env settings."""
    settings = DashboardSettings(strict_fetch=True)
    captured = {}

    class _FakeLoader:
        def execute(self):
            return "snapshot"

    def _fake_builder(settings=None):
        captured["settings"] = settings
        return _FakeLoader()

    monkeypatch.setattr(
        app.DashboardSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    monkeypatch.setattr(app, "build_snapshot_loader", _fake_builder)

    assert app._fetch_snapshot() == "snapshot"
    assert captured["settings"] is settings


def test_load_snapshot_uses_fetch(monkeypatch):
    """The cached loader should delegate to _fetch_snapshot."""
    monkeypatch.setattr(app, "_fetch_snapshot", lambda: "cached")

    assert app._load_snapshot(schema_version=99) == "cached"


class _FakeColumn:
    def __init__(self, owner: "_FakeStreamlit") -> None:
        self.owner = owner

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False

    def metric(self, label, value, delta=None, **kwargs):
        self.owner.metrics.append((label, value, delta))


class _FakeSidebar:
    def __init__(self, owner: "_FakeStreamlit") -> None:
        self.owner = owner

    def selectbox(self, label, options, index=0, format_func=str):
        return self.owner.selectbox(label, options, index, format_func)

    def date_input(self, label, value=None):
        return self.owner.date_input(label, value)

    def button(self, label):
        return False

    def warning(self, text: str):
        self.owner.sidebar_warnings.append(text)


class _FakeForm:
    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        return False


class _FakeStreamlit:
    def __init__(self, page: str, selections=None, submit=False) -> None:
        self.selections = {"Page": page, **(selections or {})}
        self.submit = submit
        self.sidebar_warnings: list[str] = []
        self.successes: list[str] = []
        self.select_labels: dict[str, list[str]] = {}
        self.sidebar = _FakeSidebar(self)
        self.metrics: list[tuple] = []
        self.subheaders: list[str] = []
        self.warnings: list[str] = []
        self.infos: list[str] = []
        self.captions: list[str] = []
        self.dataframes: list = []
        self.altair_charts: list = []
        self.plotly_charts: list = []
        self.title_text = None

    def selectbox(self, label, options, index=0, format_func=str):
        self.select_labels[label] = [format_func(o) for o in options]
        return self.selections.get(label, list(options)[index])

    def date_input(self, label, value=None):
        return self.selections.get(label, value)

    def number_input(self, label, **kwargs):
        return self.selections.get(label, 0.0)

    def text_input(self, label):
        return self.selections.get(label, "")

    def form(self, key):
        return _FakeForm()

    def form_submit_button(self, label):
        return self.submit

    def success(self, text: str):
        self.successes.append(text)

    def set_page_config(self, **kwargs):
        self.config_kwargs = kwargs

    def title(self, text: str):
        self.title_text = text

    def caption(self, text: str):
        self.captions.append(text)

    def subheader(self, text: str):
        self.subheaders.append(text)

    def warning(self, text: str):
        self.warnings.append(text)

    def info(self, text: str):
        self.infos.append(text)

    def columns(self, count):
        return [_FakeColumn(self) for _ in range(count)]

    def metric(self, label, value, delta=None, **kwargs):
        self.metrics.append((label, value, delta))

    def dataframe(self, data, **kwargs):
        self.dataframes.append((data, kwargs))

    def altair_chart(self, chart, **kwargs):
        self.altair_charts.append(chart)

    def plotly_chart(self, figure, **kwargs):
        self.plotly_charts.append(figure)


def _snapshot(failed: tuple[str, ...] = ()) -> LedgerSnapshot:
    return LedgerSnapshot(
        account_groups=(AccountGroup(id="g1", name="Banks"),),
        accounts=(
            Account(
                id="bank",
                group_id="g1",
                name="Main Bank",
                opening_balance=Decimal("1000"),
                currency="USD",
            ),
        ),
        transactions=(
            Transaction(
                id="t1",
                date=date(2024, 6, 3),
                type="INCOME",
                status="APPROVED",
                amount=Decimal("500"),
                account_id="bank",
                category_id="c1",
                project_id="p1",
                counterparty_id="k1",
            ),
            Transaction(
                id="t2",
                date=date(2024, 6, 4),
                type="EXPENSE",
                status="APPROVED",
                amount=Decimal("200"),
                account_id="bank",
                category_id="c2",
                project_id="p1",
            ),
            Transaction(
                id="t3",
                date=date(2024, 6, 5),
                type="EXPENSE",
                status="PENDING",
                amount=Decimal("75"),
                account_id="bank",
            ),
        ),
        planned_payments=(
            PlannedPayment(
                id="pp1",
                date=date(2024, 6, 20),
                type="EXPENSE",
                amount=Decimal("5000"),
                account_id="bank",
            ),
        ),
        categories=(
            Category(id="c1", group_id=None, name="Sales", type="INCOME"),
            Category(id="c2", group_id=None, name="Rent", type="EXPENSE"),
        ),
        projects=(
            Project(
                id="p1",
                name="Launch",
                planned_income=Decimal("1000"),
                planned_expense=Decimal("400"),
            ),
        ),
        counterparties=(Counterparty(id="k1", name="Acme", type="CLIENT"),),
        failed_collections=failed,
    )


@pytest.fixture
def render(monkeypatch):
    """Return a helper running main() against a fake Streamlit."""
    settings = DashboardSettings(
        default_period="month",
        today_override=date(2024, 6, 10),
    )
    usage_logger = MagicMock()
    monkeypatch.setattr(
        app.DashboardSettings,
        "from_env",
        classmethod(lambda cls: settings),
    )
    monkeypatch.setattr(app, "get_usage_logger", lambda: usage_logger)

    def _render(
        page: str,
        snapshot: LedgerSnapshot,
        selections=None,
        submit=False,
    ) -> _FakeStreamlit:
        fake_st = _FakeStreamlit(page, selections, submit)
        loader = MagicMock(return_value=snapshot)
        monkeypatch.setattr(app, "st", fake_st)
        monkeypatch.setattr(app, "_load_snapshot", loader)
        app.main()
        fake_st.usage_logger = usage_logger
        fake_st.loader = loader
        return fake_st

    return _render


def test_dashboard_page_renders_kpis_and_charts(render):
    """The dashboard shows KPIs, the cash-flow chart and two donuts."""
    fake_st = render("Dashboard", _snapshot())

    assert fake_st.title_text == "Finance Dashboard"
    labels = [metric[0] for metric in fake_st.metrics]
    assert labels == ["Income", "Expenses", "Net Profit", "Business Cash"]
    assert fake_st.metrics[0][1] == "$500"
    assert fake_st.metrics[3][2] is None
    assert len(fake_st.plotly_charts) == 1
    assert any("2024-06-20" in text for text in fake_st.warnings)
    assert "Income by Category" in fake_st.subheaders
    assert "Expenses by Category" in fake_st.subheaders
    assert fake_st.select_labels["Period"][1] == "This Quarter"
    assert fake_st.select_labels["Account"] == ["All accounts", "Main Bank"]
    fake_st.usage_logger.info.assert_called_once_with(
        "Page view: Dashboard"
    )


def test_accounts_page_lists_balances_and_liabilities(render):
    """The accounts page shows derived balances and pending debts."""
    fake_st = render("Accounts", _snapshot())

    table, kwargs = fake_st.dataframes[0]
    assert table == [
        {
            "Group": "Banks",
            "Name": "Main Bank",
            "Currency": "USD",
            "Balance": "$1,300.00",
        }
    ]
    assert kwargs["hide_index"] is True
    assert ("Creditor debt", "$75.00", None) in fake_st.metrics
    assert "Period" not in fake_st.select_labels


def test_accounts_page_warns_without_accounts(render):
    """An empty ledger shows a warning instead of a table."""
    fake_st = render("Accounts", LedgerSnapshot())

    assert fake_st.warnings == ["No accounts found in the ledger."]
    assert fake_st.dataframes == []


def test_reports_page_renders_tables(render):
    """The reports page lists projects, counterparties and dynamics."""
    fake_st = render("Reports", _snapshot())

    projects_table = fake_st.dataframes[0][0]
    assert projects_table[0]["Project"] == "Launch"
    assert projects_table[0]["Margin %"] == 60
    counterparties_table = fake_st.dataframes[1][0]
    assert counterparties_table[0]["Balance"] == "$500.00"
    assert ("Receivables", "$500.00", None) in fake_st.metrics
    assert len(fake_st.altair_charts) == 1


def test_failed_collections_are_reported(render):
    """Partially loaded snapshots surface a warning."""
    fake_st = render("Accounts", _snapshot(failed=("projects",)))

    assert "projects" in fake_st.warnings[0]


def test_accounts_without_group_are_labelled_ungrouped(render):
    """Accounts whose group is unknown fall under a plain label."""
    snapshot = LedgerSnapshot(
        accounts=(
            Account(
                id="cash",
                group_id=None,
                name="Petty Cash",
                opening_balance=Decimal("20"),
                currency="USD",
            ),
        ),
    )

    fake_st = render("Accounts", snapshot)

    assert fake_st.dataframes[0][0][0]["Group"] == "Ungrouped"


def test_custom_period_uses_date_inputs(render):
    """A custom period reads both dates and swaps a reversed pair."""
    fake_st = render(
        "Dashboard",
        _snapshot(),
        selections={
            "Period": "custom",
            "From": date(2024, 6, 4),
            "To": date(2024, 6, 3),
        },
    )

    assert fake_st.select_labels["Period"][-1] == "Custom"
    assert fake_st.captions[0] == "2024-06-03 to 2024-06-04"
    assert len(fake_st.sidebar_warnings) == 1
    assert fake_st.metrics[0][1] == "$500"


def test_analytics_page_renders_statements(render):
    """Profit and loss, cash flow and balance sheet are shown."""
    fake_st = render("Analytics", _snapshot())

    assert fake_st.subheaders == [
        "Profit & Loss",
        "Cash Flow Statement",
        "Balance Sheet",
    ]
    assert ("Total Income", "$500.00", None) in fake_st.metrics
    assert ("Net Margin", "60.0%", None) in fake_st.metrics
    assert ("Net Cash Flow", "$300.00", None) in fake_st.metrics
    assert ("Equity", "$1,800.00", None) in fake_st.metrics
    pnl_rows = fake_st.dataframes[0][0]
    assert [row["Category"] for row in pnl_rows] == ["Sales", "Rent"]
    assert pnl_rows[1]["% of Revenue"] == "40.0%"
    sheet_rows = fake_st.dataframes[2][0]
    assert [row["Line"] for row in sheet_rows] == ["Cash", "Receivable"]


def test_calendar_page_lists_month_grid_and_cash_gap(render):
    """The calendar shows every grid day and warns about negative days."""
    fake_st = render(
        "Calendar",
        _snapshot(),
        selections={"Month": date(2024, 6, 10)},
    )

    assert "June 2024" in fake_st.subheaders
    rows = fake_st.dataframes[0][0]
    assert len(rows) == 35
    assert rows[0]["Date"] == "2024-05-27"
    assert rows[-1]["Date"] == "2024-06-30"
    assert "2024-06-20" in fake_st.warnings[0]
    assert "Period" not in fake_st.select_labels
    assert fake_st.successes == []


def test_calendar_form_records_transaction(render, monkeypatch):
    """Submitting the form creates an approved transaction and reloads."""
    manager = MagicMock()
    manager.create.return_value = {"id": "t9"}
    monkeypatch.setattr(app, "build_record_manager", lambda: manager)

    fake_st = render(
        "Calendar",
        _snapshot(),
        selections={"Amount": 250.0, "Description": "Consulting"},
        submit=True,
    )

    manager.create.assert_called_once_with(
        "transactions",
        {
            "date": date(2024, 6, 10),
            "type": "INCOME",
            "status": "APPROVED",
            "amount": Decimal("250.0"),
            "account_id": "bank",
            "category_id": None,
            "project_id": None,
            "description": "Consulting",
        },
    )
    assert fake_st.successes == ["Transaction added."]
    fake_st.loader.clear.assert_called_once()


def test_calendar_form_rejects_zero_amount(render, monkeypatch):
    """A zero amount is refused before anything is written."""
    manager = MagicMock()
    monkeypatch.setattr(app, "build_record_manager", lambda: manager)

    fake_st = render("Calendar", _snapshot(), submit=True)

    manager.create.assert_not_called()
    assert "Enter an amount greater than zero." in fake_st.warnings
