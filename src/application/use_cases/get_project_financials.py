"""Use case comparing project budgets with approved actuals."""

from src.domain.models import LedgerSnapshot, ProjectFinancials
from src.domain.services.reports import compute_project_financials
from src.infrastructure.logging.logger import get_app_logger


class GetProjectFinancialsUseCase:
    """Compute plan versus actual figures per project."""

    def __init__(self, logger=None) -> None:
        self._logger = logger or get_app_logger()

    def execute(
        self,
        snapshot: LedgerSnapshot,
        status: str | None = None,
    ) -> list[ProjectFinancials]:
        """Return financials for every project, optionally by status.

        Args:
            snapshot: Ledger snapshot to derive from.
            status: Optional project status (ACTIVE, COMPLETED, ARCHIVED).

        Returns:
            list[ProjectFinancials]: One entry per selected project.
        """
        projects = [
            project
            for project in snapshot.projects
            if status is None or project.status == status
        ]
        financials = compute_project_financials(
            projects,
            snapshot.transactions,
        )
        self._logger.info(
            f"Project financials computed for {len(financials)} projects"
        )
        return financials


__all__ = ["GetProjectFinancialsUseCase", "ProjectFinancials"]
