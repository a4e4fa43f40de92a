"""Category structure of income or expenses over a period."""

from collections.abc import Iterable, Sequence
from decimal import Decimal

from src.domain.constants import OTHER_CATEGORY_LABEL, STRUCTURE_PALETTE
from src.domain.models import (
    Category,
    DateRange,
    LedgerFilters,
    StructureSlice,
    Transaction,
)
from src.domain.services.periods import (
    filter_transactions,
    select_period_transactions,
)
from src.utils.decimal_utils import round_half_up, sum_decimals


def build_category_names(categories: Iterable[Category]) -> dict[str, str]:
    """Map category ids to names."""
    return {category.id: category.name for category in categories}


def resolve_category_name(
    category_id: str | None,
    names_by_id: dict[str, str],
) -> str:
    """Return the category name, ``"Other"`` when missing or unresolved."""
    if category_id is None:
        return OTHER_CATEGORY_LABEL
    return names_by_id.get(category_id) or OTHER_CATEGORY_LABEL


def compute_category_structure(
    transactions: Sequence[Transaction],
    categories: Sequence[Category],
    date_range: DateRange,
    transaction_type: str,
    filters: LedgerFilters,
    palette: Sequence[str] = STRUCTURE_PALETTE,
) -> list[StructureSlice]:
    """Group a period's approved amounts of one type by category.

    Args:
        transactions: Full transaction list.
        categories: Categories used to resolve names.
        date_range: Inclusive period.
        transaction_type: INCOME or EXPENSE.
        filters: Account and project selection.
        palette: Colors assigned by sorted position, cycling.

    Returns:
        list[StructureSlice]: Slices sorted by amount, largest first. Equal
        amounts keep first-seen order.
    """
    names_by_id = build_category_names(categories)
    totals: dict[str, Decimal] = {}
    for txn in select_period_transactions(
        filter_transactions(transactions, filters),
        date_range,
        transaction_type,
    ):
        name = resolve_category_name(txn.category_id, names_by_id)
        totals[name] = totals.get(name, Decimal("0")) + txn.amount

    total = sum_decimals(totals.values())
    ordered = sorted(totals.items(), key=lambda item: item[1], reverse=True)
    return [
        StructureSlice(
            name=name,
            value=value,
            percentage=(
                round_half_up(value / total * Decimal("100")) if total else 0
            ),
            color=palette[index % len(palette)],
        )
        for index, (name, value) in enumerate(ordered)
    ]


__all__ = [
    "build_category_names",
    "resolve_category_name",
    "compute_category_structure",
]
