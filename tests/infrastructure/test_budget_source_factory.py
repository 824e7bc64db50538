"""Tests for source adapter selection."""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

from src.domain.errors import ConfigurationError
from src.infrastructure import budget_source_factory as factory
from src.infrastructure.settings import BudgetSettings


def test_resolve_backend_by_scheme() -> None:
    assert factory.resolve_backend("https://example.test/a.csv") == "http"
    assert factory.resolve_backend("HTTP://example.test/a.csv") == "http"
    assert factory.resolve_backend("/data/a.csv") == "file"
    assert factory.resolve_backend("file:///data/a.csv") == "file"
    assert factory.resolve_backend("data/a.csv") == "file"


def test_resolve_backend_rejects_unknown_scheme() -> None:
    with pytest.raises(ConfigurationError):
        factory.resolve_backend("ftp://example.test/a.csv")


def test_create_budget_source_validates_locations() -> None:
    """A bad scheme should fail before any fetch."""
    settings = BudgetSettings(budget_url="s3://bucket/budget.csv")

    with pytest.raises(ConfigurationError):
        factory.create_budget_source(settings, logger=MagicMock())


def test_routing_source_reads_local_files(tmp_path: Path) -> None:
    """Local locations should be served by the file adapter."""
    path = tmp_path / "budget.csv"
    path.write_text("Description\nRadios\n", encoding="utf-8")
    source = factory.create_budget_source(
        BudgetSettings(
            budget_url=str(path),
            chart_of_accounts_url=str(path),
        ),
        logger=MagicMock(),
    )

    assert source.fetch_text(str(path)) == "Description\nRadios\n"


def test_routing_source_builds_http_adapter_from_settings(monkeypatch) -> None:
    """HTTP locations should use settings for timeout and retries."""
    created = {}

    class _FakeHttp:
        def __init__(self, timeout, retries, logger):
            created.update(timeout=timeout, retries=retries)
            self.closed = False

        def fetch_text(self, location: str) -> str:
            return f"body of {location}"

        def close(self) -> None:
            self.closed = True

    monkeypatch.setattr(factory, "HttpBudgetSource", _FakeHttp)
    settings = BudgetSettings(http_timeout=12.5, http_retries=1)

    with factory.RoutingBudgetSource(settings, logger=MagicMock()) as source:
        text = source.fetch_text("https://example.test/a.csv")
        http = source._http

    assert text == "body of https://example.test/a.csv"
    assert created == {"timeout": 12.5, "retries": 1}
    assert http.closed
