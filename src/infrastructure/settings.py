"""Settings helpers for the dashboard adapters."""

from dataclasses import dataclass
from datetime import date
import os

import dotenv

from src.infrastructure.logging.logger import get_app_logger

DEFAULT_PERIODS = ("quarter", "month", "year")
_TRUTHY = {"1", "true", "yes", "on"}


@dataclass(frozen=True)
class DashboardSettings:
    """Settings for the finance dashboard.

    Attributes:
        default_period: Initial window (quarter, month or year).
        today_override: Fixed "today" used instead of the system date.
        strict_fetch: Raise on ledger fetch failures instead of degrading.
        currency_symbol: Symbol used when formatting amounts.
    """

    default_period: str = "quarter"
    today_override: date | None = None
    strict_fetch: bool = False
    currency_symbol: str = "$"

    @classmethod
    def from_env(cls) -> "DashboardSettings":
        """Build settings from environment variables.

        Returns:
            DashboardSettings: Settings sourced from environment variables.
        """
        dotenv.load_dotenv()
        logger = get_app_logger()
        period = os.getenv("DASHBOARD_PERIOD", "quarter").strip().lower()
        if period not in DEFAULT_PERIODS:
            logger.warning(
                f"Unknown DASHBOARD_PERIOD '{period}', using quarter"
            )
            period = "quarter"
        strict = (
            os.getenv("LEDGER_STRICT_FETCH", "").strip().lower() in _TRUTHY
        )
        return cls(
            default_period=period,
            today_override=cls._parse_today(
                os.getenv("DASHBOARD_TODAY"),
                logger=logger,
            ),
            strict_fetch=strict,
            currency_symbol=os.getenv("DASHBOARD_CURRENCY_SYMBOL", "$"),
        )

    def today(self) -> date:
        """Return the configured "today", defaulting to the system date."""
        return self.today_override or date.today()

    @staticmethod
    def _parse_today(raw_value: str | None, logger) -> date | None:
        """Parse the optional DASHBOARD_TODAY override.

        Args:
            raw_value: Raw environment value.
            logger: Logger used for warnings.

        Returns:
            date | None: Parsed date or None when missing or invalid.
        """
        if not raw_value:
            return None
        try:
            return date.fromisoformat(raw_value.strip())
        except ValueError:
            logger.warning(
                f"Invalid DASHBOARD_TODAY '{raw_value}'. "
                "Expected format YYYY-MM-DD."
            )
            return None


__all__ = ["DashboardSettings", "DEFAULT_PERIODS"]
