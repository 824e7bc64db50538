"""Factory helpers to select the source adapter for each location."""

from urllib.parse import urlparse

from src.application.ports.budget_source import BudgetSourcePort
from src.domain.errors import ConfigurationError
from src.infrastructure.budget_source import FileBudgetSource, HttpBudgetSource
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


HTTP_SCHEMES = ("http", "https")
FILE_SCHEMES = ("", "file")


def resolve_backend(location: str) -> str:
    """Return ``http`` or ``file`` for a source location.

    Args:
        location: URL, ``file://`` URI, or filesystem path.

    Returns:
        str: Backend identifier.

    Raises:
        ConfigurationError: If the URL scheme is not supported.
    """
    scheme = urlparse(location).scheme.lower()
    if scheme in HTTP_SCHEMES:
        return "http"
    # Single letters are Windows drive prefixes such as C:\budget.csv.
    if scheme in FILE_SCHEMES or len(scheme) == 1:
        return "file"
    raise ConfigurationError(
        f"Unsupported source scheme: {scheme}. Expected http(s) or a path."
    )


class RoutingBudgetSource:
    """Dispatch each fetch to the HTTP or file adapter by location."""

    def __init__(
        self,
        settings: BudgetSettings | None = None,
        logger=None,
    ) -> None:
        self._settings = settings or BudgetSettings()
        self._logger = logger or get_app_logger()
        self._http: HttpBudgetSource | None = None
        self._file: FileBudgetSource | None = None

    def fetch_text(self, location: str) -> str:
        return self._adapter_for(location).fetch_text(location)

    def close(self) -> None:
        if self._http is not None:
            self._http.close()
            self._http = None

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def _adapter_for(self, location: str) -> BudgetSourcePort:
        if resolve_backend(location) == "http":
            if self._http is None:
                self._http = HttpBudgetSource(
                    timeout=self._settings.http_timeout,
                    retries=self._settings.http_retries,
                    logger=self._logger,
                )
            return self._http
        if self._file is None:
            self._file = FileBudgetSource(logger=self._logger)
        return self._file


def create_budget_source(
    settings: BudgetSettings | None = None,
    logger=None,
) -> RoutingBudgetSource:
    """Return a source able to read every configured location.

    Both configured locations are validated up front so a bad scheme fails
    before any network request.

    Args:
        settings: Optional settings; read from the environment when omitted.
        logger: Optional logger compatible with logging.Logger-like API.

    Returns:
        RoutingBudgetSource: Source adapter for the pipeline.

    Raises:
        ConfigurationError: If a location uses an unsupported scheme.
    """
    resolved_settings = settings or BudgetSettings.from_env()
    resolve_backend(resolved_settings.budget_url)
    resolve_backend(resolved_settings.chart_of_accounts_url)
    return RoutingBudgetSource(
        resolved_settings,
        logger=logger or get_app_logger(),
    )


__all__ = ["create_budget_source", "resolve_backend", "RoutingBudgetSource"]
