"""Domain models for ledger records held by the Ledger Store."""

from dataclasses import dataclass
from datetime import date, timedelta
from decimal import Decimal

from src.domain.constants import ALL_FILTER, ACTIVE_STATUS


@dataclass(frozen=True)
class AccountGroup:
    """Named group of accounts."""

    id: str
    name: str
    sort_order: int = 0


@dataclass(frozen=True)
class Account:
    """Money account. The balance is always derived, never stored."""

    id: str
    group_id: str | None
    name: str
    opening_balance: Decimal
    currency: str
    sort_order: int = 0


@dataclass(frozen=True)
class Transaction:
    """Actual ledger movement.

    Attributes:
        date: Calendar day of the movement, None when unparsable.
        type: INCOME, EXPENSE or TRANSFER.
        status: DRAFT, PENDING or APPROVED.
        amount: Non-negative amount.
        account_id: Source account.
        to_account_id: Destination account, TRANSFER only.
    """

    id: str
    date: date | None
    type: str
    status: str
    amount: Decimal
    account_id: str | None
    to_account_id: str | None = None
    category_id: str | None = None
    project_id: str | None = None
    counterparty_id: str | None = None
    description: str = ""


@dataclass(frozen=True)
class PlannedPayment:
    """Forecast-only income or expense, applied after today."""

    id: str
    date: date | None
    type: str
    amount: Decimal
    account_id: str | None
    to_account_id: str | None = None
    category_id: str | None = None
    project_id: str | None = None
    description: str = ""
    is_recurring: bool = False


@dataclass(frozen=True)
class CategoryGroup:
    """Named group of categories."""

    id: str
    name: str
    type: str
    sort_order: int = 0


@dataclass(frozen=True)
class Category:
    """Income or expense category."""

    id: str
    group_id: str | None
    name: str
    type: str
    sort_order: int = 0


@dataclass(frozen=True)
class Project:
    """Project with a planned budget."""

    id: str
    name: str
    planned_income: Decimal
    planned_expense: Decimal
    status: str = ACTIVE_STATUS


@dataclass(frozen=True)
class Counterparty:
    """Client, vendor or contractor."""

    id: str
    name: str
    type: str
    email: str = ""
    phone: str = ""
    status: str = ACTIVE_STATUS


@dataclass(frozen=True)
class DateRange:
    """Inclusive window of calendar days."""

    start: date
    end: date

    def contains(self, day: date | None) -> bool:
        """Return True when the day falls inside the window."""
        if day is None:
            return False
        return self.start <= day <= self.end

    def shift(self, days: int) -> "DateRange":
        """Return the window moved back by ``days`` days."""
        delta = timedelta(days=days)
        return DateRange(start=self.start - delta, end=self.end - delta)


@dataclass(frozen=True)
class LedgerFilters:
    """Account and project selection, each an id or ``"all"``."""

    account_id: str = ALL_FILTER
    project_id: str = ALL_FILTER


@dataclass(frozen=True)
class LedgerSnapshot:
    """Immutable view of every ledger collection for one derivation pass."""

    account_groups: tuple[AccountGroup, ...] = ()
    accounts: tuple[Account, ...] = ()
    transactions: tuple[Transaction, ...] = ()
    planned_payments: tuple[PlannedPayment, ...] = ()
    category_groups: tuple[CategoryGroup, ...] = ()
    categories: tuple[Category, ...] = ()
    projects: tuple[Project, ...] = ()
    counterparties: tuple[Counterparty, ...] = ()
    version: int = 0
    failed_collections: tuple[str, ...] = ()


__all__ = [
    "AccountGroup",
    "Account",
    "Transaction",
    "PlannedPayment",
    "CategoryGroup",
    "Category",
    "Project",
    "Counterparty",
    "DateRange",
    "LedgerFilters",
    "LedgerSnapshot",
]
