"""Domain constants for ledger derivations."""

INCOME = "INCOME"
EXPENSE = "EXPENSE"
TRANSFER = "TRANSFER"
TRANSACTION_TYPES = (INCOME, EXPENSE, TRANSFER)
PLANNED_PAYMENT_TYPES = (INCOME, EXPENSE)

DRAFT = "DRAFT"
PENDING = "PENDING"
APPROVED = "APPROVED"
TRANSACTION_STATUSES = (DRAFT, PENDING, APPROVED)

ALL_FILTER = "all"
OTHER_CATEGORY_LABEL = "Other"
ACTIVE_STATUS = "ACTIVE"

SPARKLINE_POINTS = 7

KPI_INCOME_LABEL = "Income"
KPI_EXPENSE_LABEL = "Expenses"
KPI_NET_PROFIT_LABEL = "Net Profit"
KPI_CASH_LABEL = "Business Cash"

STRUCTURE_PALETTE = (
    "hsl(220, 70%, 50%)",
    "hsl(142, 71%, 45%)",
    "hsl(262, 83%, 58%)",
    "hsl(25, 95%, 53%)",
    "hsl(0, 84%, 60%)",
    "hsl(45, 93%, 47%)",
    "hsl(330, 81%, 60%)",
    "hsl(199, 89%, 48%)",
    "hsl(160, 60%, 45%)",
    "hsl(280, 65%, 60%)",
)


__all__ = [
    "INCOME",
    "EXPENSE",
    "TRANSFER",
    "TRANSACTION_TYPES",
    "PLANNED_PAYMENT_TYPES",
    "DRAFT",
    "PENDING",
    "APPROVED",
    "TRANSACTION_STATUSES",
    "ALL_FILTER",
    "OTHER_CATEGORY_LABEL",
    "ACTIVE_STATUS",
    "SPARKLINE_POINTS",
    "KPI_INCOME_LABEL",
    "KPI_EXPENSE_LABEL",
    "KPI_NET_PROFIT_LABEL",
    "KPI_CASH_LABEL",
    "STRUCTURE_PALETTE",
]
