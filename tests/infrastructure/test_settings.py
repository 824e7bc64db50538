"""Tests for infrastructure settings."""

from unittest.mock import MagicMock

import pytest

from src.infrastructure import settings as settings_module
from src.infrastructure.settings import (
    DEFAULT_BUDGET_DATA_URL,
    DEFAULT_CHART_OF_ACCOUNTS_URL,
    BudgetSettings,
)


_ENV_VARS = (
    "BUDGET_DATA_URL",
    "CHART_OF_ACCOUNTS_URL",
    "BUDGET_PRIOR_COLUMN",
    "BUDGET_CURRENT_COLUMN",
    "BUDGET_HTTP_TIMEOUT",
    "BUDGET_HTTP_RETRIES",
)


def _clear_env(monkeypatch) -> None:
    for name in _ENV_VARS:
        monkeypatch.delenv(name, raising=False)


def test_from_env_defaults(monkeypatch) -> None:
    """Unset variables should fall back to the published sources."""
    _clear_env(monkeypatch)

    settings = BudgetSettings.from_env()

    assert settings.budget_url == DEFAULT_BUDGET_DATA_URL
    assert settings.chart_of_accounts_url == DEFAULT_CHART_OF_ACCOUNTS_URL
    assert settings.prior_period == "FY24 BUDGET"
    assert settings.current_period == "FY25 DEPT REQ."
    assert settings.http_timeout == 30.0
    assert settings.http_retries == 3


def test_from_env_reads_overrides(monkeypatch) -> None:
    _clear_env(monkeypatch)
    monkeypatch.setenv("BUDGET_DATA_URL", " /data/budget.csv ")
    monkeypatch.setenv("BUDGET_PRIOR_COLUMN", "FY23 ACTUALS")
    monkeypatch.setenv("BUDGET_HTTP_TIMEOUT", "7.5")
    monkeypatch.setenv("BUDGET_HTTP_RETRIES", "0")

    settings = BudgetSettings.from_env()

    assert settings.budget_url == "/data/budget.csv"
    assert settings.prior_period == "FY23 ACTUALS"
    assert settings.http_timeout == 7.5
    assert settings.http_retries == 0


def test_from_env_invalid_numbers_warn_and_default(monkeypatch) -> None:
    """Malformed numeric values should not crash settings loading."""
    _clear_env(monkeypatch)
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("BUDGET_HTTP_TIMEOUT", "soon")
    monkeypatch.setenv("BUDGET_HTTP_RETRIES", "-2")

    settings = BudgetSettings.from_env()

    assert settings.http_timeout == 30.0
    assert settings.http_retries == 3
    assert logger.warning.call_count == 2


@pytest.mark.parametrize("raw", ["0", "-1", "nan", "inf"])
def test_from_env_rejects_unusable_timeout(monkeypatch, raw) -> None:
    """A timeout must be a positive, finite number of seconds."""
    _clear_env(monkeypatch)
    logger = MagicMock()
    monkeypatch.setattr(settings_module, "get_app_logger", lambda: logger)
    monkeypatch.setenv("BUDGET_HTTP_TIMEOUT", raw)

    settings = BudgetSettings.from_env()

    assert settings.http_timeout == 30.0
    logger.warning.assert_called_once()
    assert "BUDGET_HTTP_TIMEOUT" in logger.warning.call_args.args[0]
