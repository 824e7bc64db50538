"""Settings helpers for infrastructure adapters."""

from dataclasses import dataclass
import math
import os

from src.domain.constants import DEFAULT_CURRENT_PERIOD, DEFAULT_PRIOR_PERIOD
from src.infrastructure.logging.logger import get_app_logger


DEFAULT_BUDGET_DATA_URL = (
    "https://raw.githubusercontent.com/cyganiewicz/Budget-Transparency/"
    "refs/heads/main/TEST%20FY25%20General%20Fund%20Budget%20Master%20for"
    "%20Accounting.csv"
)
DEFAULT_CHART_OF_ACCOUNTS_URL = (
    "https://raw.githubusercontent.com/cyganiewicz/Budget-Transparency/"
    "refs/heads/main/Chart%20of%20Accounts%20Organization.csv"
)


@dataclass(frozen=True)
class BudgetSettings:
    """Settings for locating and fetching the budget sources.

    Attributes:
        budget_url: URL or path of the budget line-item file.
        chart_of_accounts_url: URL or path of the chart-of-accounts file.
        prior_period: Period column used as the summary baseline.
        current_period: Period column compared against the baseline.
        http_timeout: Per-request timeout in seconds.
        http_retries: Retry attempts for transient HTTP failures.
    """

    budget_url: str = DEFAULT_BUDGET_DATA_URL
    chart_of_accounts_url: str = DEFAULT_CHART_OF_ACCOUNTS_URL
    prior_period: str = DEFAULT_PRIOR_PERIOD
    current_period: str = DEFAULT_CURRENT_PERIOD
    http_timeout: float = 30.0
    http_retries: int = 3

    @classmethod
    def from_env(cls) -> "BudgetSettings":
        """Build settings from environment variables.

        Returns:
            BudgetSettings: Settings sourced from environment variables.
        """
        logger = get_app_logger()
        return cls(
            budget_url=_env_text("BUDGET_DATA_URL", DEFAULT_BUDGET_DATA_URL),
            chart_of_accounts_url=_env_text(
                "CHART_OF_ACCOUNTS_URL",
                DEFAULT_CHART_OF_ACCOUNTS_URL,
            ),
            prior_period=_env_text(
                "BUDGET_PRIOR_COLUMN",
                DEFAULT_PRIOR_PERIOD,
            ),
            current_period=_env_text(
                "BUDGET_CURRENT_COLUMN",
                DEFAULT_CURRENT_PERIOD,
            ),
            http_timeout=cls._parse_number(
                "BUDGET_HTTP_TIMEOUT",
                30.0,
                float,
                logger=logger,
                allow_zero=False,
            ),
            http_retries=cls._parse_number(
                "BUDGET_HTTP_RETRIES",
                3,
                int,
                logger=logger,
            ),
        )

    @staticmethod
    def _parse_number(name: str, default, cast, logger, allow_zero=True):
        """Parse a finite, non-negative numeric environment variable.

        Args:
            name: Environment variable name.
            default: Value used when unset or invalid.
            cast: Numeric type to convert to.
            logger: Logger used for warnings.
            allow_zero: Whether zero is an accepted value.

        Returns:
            The parsed value or the default.
        """
        raw = os.getenv(name)
        if raw is None or not raw.strip():
            return default
        try:
            value = cast(raw.strip())
        except ValueError:
            logger.warning(
                f"Invalid value '{raw}' for {name}; using {default}"
            )
            return default
        if not math.isfinite(value) or value < 0 or (
            value == 0 and not allow_zero
        ):
            logger.warning(
                f"Out-of-range value '{raw}' for {name}; using {default}"
            )
            return default
        return value


def _env_text(name: str, default: str) -> str:
    value = os.getenv(name, "").strip()
    return value or default


__all__ = [
    "BudgetSettings",
    "DEFAULT_BUDGET_DATA_URL",
    "DEFAULT_CHART_OF_ACCOUNTS_URL",
]
