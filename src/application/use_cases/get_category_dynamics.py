"""Use case splitting a period's amounts by month and category."""

from src.domain.models import (
    CategoryDynamicsPoint,
    DateRange,
    LedgerFilters,
    LedgerSnapshot,
)
from src.domain.services.reports import compute_category_dynamics
from src.infrastructure.logging.logger import get_app_logger


class GetCategoryDynamicsUseCase:
    """Compute monthly per-category totals for stacked bar charts."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot,
        date_range: DateRange,
        transaction_type: str,
        filters: LedgerFilters | None = None,
    ) -> list[CategoryDynamicsPoint]:
        """Return one point per month that has matching transactions."""
        points = compute_category_dynamics(
            snapshot.transactions,
            snapshot.categories,
            date_range,
            transaction_type,
            filters,
        )
        self._logger.info(
            f"{transaction_type} dynamics computed: {len(points)} months"
        )
        return points


__all__ = ["GetCategoryDynamicsUseCase", "CategoryDynamicsPoint"]
