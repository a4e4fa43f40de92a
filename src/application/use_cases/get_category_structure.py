"""Use case computing the category structure of a period."""

from src.domain.models import (
    DateRange,
    LedgerFilters,
    LedgerSnapshot,
    StructureSlice,
)
from src.domain.services.structure import compute_category_structure
from src.infrastructure.logging.logger import get_app_logger


class GetCategoryStructureUseCase:
    """Group a period's income or expenses by category."""

    def __init__(self, logger=None) -> None:
        """Initialize the use case.

        Args:
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot,
        date_range: DateRange,
        transaction_type: str,
        filters: LedgerFilters | None = None,
    ) -> list[StructureSlice]:
        """Return category slices sorted by amount, largest first.

        Args:
            snapshot: Ledger snapshot to derive from.
            date_range: Inclusive period.
            transaction_type: INCOME or EXPENSE.
            filters: Optional account and project selection.

        Returns:
            list[StructureSlice]: Category totals with share and color.
        """
        slices = compute_category_structure(
            snapshot.transactions,
            snapshot.categories,
            date_range,
            transaction_type,
            filters or LedgerFilters(),
        )
        self._logger.info(
            f"{transaction_type} structure computed: {len(slices)} categories"
        )
        return slices


__all__ = ["GetCategoryStructureUseCase", "StructureSlice"]
