"""Tests for the HTTP and file source adapters."""

from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest
import requests

from src.domain.errors import SourceLoadError
from src.infrastructure.budget_source import (
    RETRY_STATUS_CODES,
    FileBudgetSource,
    HttpBudgetSource,
    build_session,
)


class _FakeSession:
    def __init__(self, response=None, error: Exception | None = None):
        self.response = response
        self.error = error
        self.calls: list[tuple[str, float]] = []
        self.closed = False

    def get(self, url: str, timeout: float):
        self.calls.append((url, timeout))
        if self.error is not None:
            raise self.error
        return self.response

    def close(self) -> None:
        self.closed = True


def _response(status_code: int, text: str = "", encoding="utf-8"):
    return SimpleNamespace(
        ok=200 <= status_code < 400,
        status_code=status_code,
        text=text,
        encoding=encoding,
    )


def test_http_source_returns_body_text() -> None:
    """A successful response body should be returned unchanged."""
    session = _FakeSession(_response(200, "Account Number\n100\n"))
    source = HttpBudgetSource(session=session, timeout=5, logger=MagicMock())

    text = source.fetch_text("https://example.test/a.csv")

    assert text == "Account Number\n100\n"
    assert session.calls == [("https://example.test/a.csv", 5)]


def test_http_source_defaults_missing_encoding_to_utf8() -> None:
    response = _response(200, "x", encoding=None)
    source = HttpBudgetSource(
        session=_FakeSession(response),
        logger=MagicMock(),
    )

    source.fetch_text("https://example.test/a.csv")

    assert response.encoding == "utf-8"


def test_http_source_raises_on_error_status() -> None:
    """Non-success statuses should surface as SourceLoadError."""
    logger = MagicMock()
    source = HttpBudgetSource(
        session=_FakeSession(_response(404)),
        logger=logger,
    )

    with pytest.raises(SourceLoadError) as excinfo:
        source.fetch_text("https://example.test/missing.csv")

    assert excinfo.value.source == "https://example.test/missing.csv"
    assert "404" in str(excinfo.value)
    logger.error.assert_called_once()


def test_http_source_wraps_transport_errors() -> None:
    """Connection failures should surface as SourceLoadError."""
    error = requests.ConnectionError("connection refused")
    source = HttpBudgetSource(
        session=_FakeSession(error=error),
        logger=MagicMock(),
    )

    with pytest.raises(SourceLoadError) as excinfo:
        source.fetch_text("https://example.test/a.csv")

    assert excinfo.value.__cause__ is error


def test_http_source_context_manager_closes_session() -> None:
    session = _FakeSession(_response(200, ""))

    with HttpBudgetSource(session=session, logger=MagicMock()):
        pass

    assert session.closed


def test_build_session_mounts_bounded_retry() -> None:
    """The default session should retry GETs on transient statuses."""
    session = build_session(retries=2, backoff_factor=0.1)

    adapter = session.get_adapter("https://example.test/")
    retry = adapter.max_retries

    assert retry.total == 2
    assert set(retry.status_forcelist) == set(RETRY_STATUS_CODES)
    assert "GET" in retry.allowed_methods
    session.close()


def test_file_source_reads_paths_and_file_uris(tmp_path: Path) -> None:
    """Local paths and file:// URIs should both be readable."""
    path = tmp_path / "accounts.csv"
    path.write_text("Account Number,Category\n100,Parks\n", encoding="utf-8")
    source = FileBudgetSource(logger=MagicMock())

    assert source.fetch_text(str(path)).startswith("Account Number")
    assert source.fetch_text(path.as_uri()).endswith("Parks\n")


def test_file_source_missing_file_raises(tmp_path: Path) -> None:
    source = FileBudgetSource(logger=MagicMock())

    with pytest.raises(SourceLoadError):
        source.fetch_text(str(tmp_path / "missing.csv"))
