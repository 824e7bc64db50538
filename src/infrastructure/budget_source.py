"""Source adapters reading budget CSV text over HTTP or from disk."""

from pathlib import Path
from urllib.parse import unquote, urlparse

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from src.domain.errors import SourceLoadError
from src.infrastructure.logging.logger import get_app_logger


RETRY_STATUS_CODES = (429, 500, 502, 503, 504)


def build_session(
    retries: int = 3,
    backoff_factor: float = 0.5,
) -> requests.Session:
    """Return a session retrying idempotent requests on transient failures.

    Args:
        retries: Maximum retry attempts per request.
        backoff_factor: Exponential backoff multiplier between attempts.

    Returns:
        requests.Session: Session with the retry adapter mounted.
    """
    session = requests.Session()
    retry = Retry(
        total=retries,
        backoff_factor=backoff_factor,
        status_forcelist=RETRY_STATUS_CODES,
        allowed_methods=["GET", "HEAD"],
        raise_on_status=False,
    )
    adapter = HTTPAdapter(max_retries=retry)
    session.mount("http://", adapter)
    session.mount("https://", adapter)
    return session


class HttpBudgetSource:
    """Fetch source text with a pooled ``requests`` session."""

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float = 30.0,
        retries: int = 3,
        logger=None,
    ) -> None:
        """Initialize the adapter.

        Args:
            session: Optional preconfigured session.
            timeout: Per-request timeout in seconds.
            retries: Retry attempts when building the default session.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._session = session or build_session(retries=retries)
        self._timeout = timeout
        self._logger = logger or get_app_logger()

    def fetch_text(self, location: str) -> str:
        """Return the decoded body at ``location``.

        Raises:
            SourceLoadError: On a transport error or a non-success status.
        """
        self._logger.info(f"Fetching {location}")
        try:
            response = self._session.get(location, timeout=self._timeout)
        except requests.RequestException as exc:
            self._logger.error(f"Request to {location} failed: {exc}")
            raise SourceLoadError(location, str(exc)) from exc
        if not response.ok:
            reason = f"HTTP {response.status_code}"
            self._logger.error(f"Request to {location} returned {reason}")
            raise SourceLoadError(location, reason)
        if response.encoding is None:
            response.encoding = "utf-8"
        return response.text

    def close(self) -> None:
        """Close the underlying session."""
        self._session.close()

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()


class FileBudgetSource:
    """Read source text from local paths or ``file://`` URIs."""

    def __init__(self, encoding: str = "utf-8", logger=None) -> None:
        self._encoding = encoding
        self._logger = logger or get_app_logger()

    def fetch_text(self, location: str) -> str:
        """Return the file contents at ``location``.

        Raises:
            SourceLoadError: If the file cannot be read.
        """
        path = self.resolve_path(location)
        try:
            return path.read_text(encoding=self._encoding)
        except (OSError, UnicodeDecodeError) as exc:
            self._logger.error(f"Could not read {path}: {exc}")
            raise SourceLoadError(location, str(exc)) from exc

    @staticmethod
    def resolve_path(location: str) -> Path:
        """Convert a path or ``file://`` URI to an absolute path."""
        parsed = urlparse(location)
        if parsed.scheme == "file":
            location = unquote(parsed.path)
        return Path(location).expanduser().resolve()


__all__ = [
    "HttpBudgetSource",
    "FileBudgetSource",
    "build_session",
    "RETRY_STATUS_CODES",
]
