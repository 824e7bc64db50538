"""Tests for the summary projector."""

from decimal import Decimal

from src.domain.constants import NOT_APPLICABLE
from src.domain.services.aggregation import aggregate_budget
from src.domain.services.directory import build_account_directory
from src.domain.services.summary import (
    percent_change,
    summarize_records,
    summarize_tree,
)


RECORDS = [
    {
        "Account Number": "100",
        "Description": "Radios",
        "FY24 BUDGET": Decimal("1000"),
        "FY25 DEPT REQ.": Decimal("1200"),
    },
    {
        "Account Number": "200",
        "Description": "Salt",
        "FY24 BUDGET": Decimal("500"),
        "FY25 DEPT REQ.": Decimal("450"),
    },
]


def test_percent_change_with_zero_prior_is_not_applicable() -> None:
    """A zero baseline should return the sentinel, not inf or NaN."""
    assert percent_change(Decimal("0"), Decimal("500")) == NOT_APPLICABLE


def test_percent_change_keeps_full_precision() -> None:
    """Rounding only happens in the display property."""
    change = percent_change(Decimal("3"), Decimal("4"))

    assert change == Decimal("1") / Decimal("3") * Decimal("100")
    assert change != Decimal("33.33")


def test_summarize_records_totals_two_periods() -> None:
    """Totals should sum the configured prior and current columns."""
    summary = summarize_records(RECORDS)

    assert summary.total_prior == Decimal("1500")
    assert summary.total_current == Decimal("1650")
    assert summary.percent_change == Decimal("10")
    assert summary.percent_change_display == "+10.00%"
    assert summary.difference == Decimal("150")


def test_summarize_records_zero_prior_displays_not_applicable() -> None:
    """Summary with prior 0 and current 500 reports N/A."""
    summary = summarize_records(
        [{"FY24 BUDGET": Decimal("0"), "FY25 DEPT REQ.": Decimal("500")}]
    )

    assert summary.percent_change == NOT_APPLICABLE
    assert summary.percent_change_display == NOT_APPLICABLE


def test_summarize_tree_matches_records_for_joined_data() -> None:
    """Tree grand totals and raw joined records give the same summary."""
    directory = build_account_directory(
        [
            {"Account Number": "100", "Category": "Safety",
             "Department": "Police"},
            {"Account Number": "200", "Category": "Works",
             "Department": "Highway"},
        ]
    )
    tree = aggregate_budget(RECORDS, directory)

    assert summarize_tree(tree) == summarize_records(RECORDS)


def test_summarize_tree_with_custom_periods() -> None:
    """The compared periods should be configurable."""
    directory = build_account_directory(
        [{"Account Number": "100", "Category": "Safety",
          "Department": "Police"}]
    )
    tree = aggregate_budget(
        [
            {
                "Account Number": "100",
                "FY23 ACTUALS": Decimal("80"),
                "FY24 BUDGET": Decimal("100"),
            }
        ],
        directory,
    )

    summary = summarize_tree(
        tree,
        prior_period="FY23 ACTUALS",
        current_period="FY24 BUDGET",
    )

    assert summary.percent_change == Decimal("25")
    assert summary.percent_change_display == "+25.00%"


def test_unchanged_negative_baseline_displays_unsigned_zero() -> None:
    """A flat negative total rounds to zero without a stray sign."""
    summary = summarize_records(
        [{"FY24 BUDGET": Decimal("-40"), "FY25 DEPT REQ.": Decimal("-40")}]
    )

    assert summary.percent_change.is_zero()
    assert summary.percent_change_display == "0.00%"


def test_decrease_and_tiny_changes_display_rounded_sign() -> None:
    decrease = summarize_records(
        [{"FY24 BUDGET": Decimal("400"), "FY25 DEPT REQ.": Decimal("383")}]
    )
    tiny = summarize_records(
        [{"FY24 BUDGET": Decimal("100000"),
          "FY25 DEPT REQ.": Decimal("99999.99")}]
    )

    assert decrease.percent_change_display == "-4.25%"
    assert tiny.percent_change_display == "0.00%"
