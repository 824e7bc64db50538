"""Tests for the chart dependency check in the Streamlit app."""

from decimal import Decimal
import sys
import types
from unittest.mock import MagicMock

import pytest

from src.adapters.interface.streamlit import app
from src.domain.models.report import BudgetReport, LoadDiagnostics
from src.domain.services.aggregation import aggregate_budget
from src.domain.services.directory import build_account_directory
from src.domain.services.summary import summarize_tree


def _install(monkeypatch, numpy, pandas) -> None:
    monkeypatch.setitem(sys.modules, "numpy", numpy)
    monkeypatch.setitem(sys.modules, "pandas", pandas)


def test_dependencies_ok_when_modules_complete(monkeypatch) -> None:
    _install(
        monkeypatch,
        types.SimpleNamespace(ndarray=object),
        types.SimpleNamespace(Timestamp=object),
    )

    assert app._check_altair_dependencies() == (True, None)


@pytest.mark.parametrize(
    ("numpy_attrs", "pandas_attrs", "expected"),
    [
        ({}, {"Timestamp": object}, "numpy"),
        ({"ndarray": object}, {}, "pandas"),
    ],
)
def test_dependencies_report_incomplete_module(
    monkeypatch,
    numpy_attrs,
    pandas_attrs,
    expected,
) -> None:
    """A half-installed numpy or pandas disables charts with a message."""
    _install(
        monkeypatch,
        types.SimpleNamespace(**numpy_attrs),
        types.SimpleNamespace(**pandas_attrs),
    )

    ok, message = app._check_altair_dependencies()

    assert ok is False
    assert expected in message


def test_main_warns_instead_of_charting_when_broken(monkeypatch) -> None:
    """main should keep rendering tables when charts are unavailable."""
    directory = build_account_directory(
        [{"Account Number": "1", "Category": "Parks",
          "Department": "Recreation"}]
    )
    tree = aggregate_budget(
        [{"Account Number": "1", "Description": "Pool",
          "FY24 BUDGET": Decimal("10"), "FY25 DEPT REQ.": Decimal("12")}],
        directory,
    )
    report = BudgetReport(
        tree=tree,
        summary=summarize_tree(tree),
        directory=directory,
        diagnostics=LoadDiagnostics(),
    )
    fake_st = MagicMock()
    fake_st.columns.side_effect = lambda count: [
        MagicMock() for _ in range(count)
    ]
    fake_st.sidebar.selectbox.side_effect = (
        lambda label, options, index=0: options[index]
    )
    monkeypatch.setattr(app, "st", fake_st)
    monkeypatch.setattr(app, "_load_report", lambda: report)
    monkeypatch.setattr(
        app,
        "_check_altair_dependencies",
        lambda: (False, "numpy import failed"),
    )
    monkeypatch.setattr(app, "get_usage_logger", MagicMock)

    app.main()

    fake_st.altair_chart.assert_not_called()
    assert "numpy import failed" in fake_st.warning.call_args.args[0]
    fake_st.dataframe.assert_called()
