"""Streamlit dashboard entry point."""

from collections.abc import Sequence
from decimal import Decimal
import sys

import streamlit as st
import altair as alt

from src.adapters.interface.streamlit.charts import (
    build_category_rows,
    build_line_item_rows,
    format_currency,
    format_percent_change,
    prepare_category_chart_data,
    prepare_department_chart_data,
    prepare_period_trend_data,
)
from src.domain.errors import ConfigurationError, SourceLoadError
from src.domain.models.budget import (
    AggregationTree,
    BudgetSummary,
    CategoryNode,
)
from src.domain.models.report import BudgetReport, LoadDiagnostics
from src.infrastructure.container import run_budget_report
from src.infrastructure.logging.logger import get_usage_logger


PALETTE = (
    "#FF6384",
    "#36A2EB",
    "#FFCE56",
    "#4BC0C0",
    "#9966FF",
    "#FF9F40",
    "#6c8ead",
    "#a0c4ff",
)


def _fetch_report() -> BudgetReport:
    """Run the budget pipeline against the configured sources."""
    return run_budget_report()


@st.cache_resource(show_spinner="Loading budget data...", ttl=3600)
def _load_report() -> BudgetReport:
    """Cached wrapper around _fetch_report for Streamlit sessions."""
    return _fetch_report()


def _check_altair_dependencies() -> tuple[bool, str | None]:
    """Return whether numpy and pandas expose what Altair needs.

    Returns:
        tuple[bool, str | None]: Status and an error message when broken.
    """
    numpy = sys.modules.get("numpy")
    if numpy is None:
        try:
            import numpy
        except ImportError as exc:
            return False, f"numpy import failed: {exc}"
    if not hasattr(numpy, "ndarray"):
        return False, "numpy is installed but incomplete (missing ndarray)"
    pandas = sys.modules.get("pandas")
    if pandas is None:
        try:
            import pandas
        except ImportError as exc:
            return False, f"pandas import failed: {exc}"
    if not hasattr(pandas, "Timestamp"):
        return False, "pandas is installed but incomplete (missing Timestamp)"
    return True, None


def _render_summary(summary: BudgetSummary) -> None:
    """Render the top-line metric cards."""
    prior_col, current_col, change_col = st.columns(3)
    prior_col.metric(
        f"Total {summary.prior_period}",
        format_currency(summary.total_prior),
    )
    current_col.metric(
        f"Total {summary.current_period}",
        format_currency(summary.total_current),
        format_currency(summary.difference),
    )
    change_col.metric(
        "Percent Change",
        format_percent_change(summary),
    )


def _render_category_chart(
    tree: AggregationTree,
    period: str,
    chart_size: int = 360,
    max_categories: int = 6,
) -> None:
    """Render a donut chart of category totals for a period.

    Args:
        tree: Aggregated budget.
        period: Period whose totals are charted.
        chart_size: Width/height for the chart canvas.
        max_categories: Maximum categories before grouping into Other.
    """
    data, total_amount = prepare_category_chart_data(
        tree,
        period,
        max_categories=max_categories,
    )
    if not data or total_amount == 0:
        st.info("No category amounts available for the chart.")
        return

    hover = alt.selection_point(
        name="hover",
        fields=["category"],
        on="pointerover",
        clear="pointerout",
        empty=False,
    )
    base = alt.Chart(alt.Data(values=data)).mark_arc(
        innerRadius=chart_size * 0.3,
        padAngle=0.01,
    ).encode(
        theta=alt.Theta("amount:Q"),
        color=alt.Color(
            "category:N",
            scale=alt.Scale(range=list(PALETTE)),
            legend=alt.Legend(orient="bottom", title=None, columns=2),
        ),
        opacity=alt.condition(hover, alt.value(1.0), alt.value(0.6)),
        order=alt.Order("amount:Q", sort="descending"),
        tooltip=[
            alt.Tooltip("category:N"),
            alt.Tooltip("amount_label:N", title="amount"),
            alt.Tooltip("share_label:N", title="share"),
        ],
    )
    chart = base.add_params(hover).properties(
        width=chart_size,
        height=chart_size,
    )
    st.subheader(f"Spending by Category ({period})")
    st.altair_chart(chart, use_container_width=True)


def _render_department_chart(category: CategoryNode, period: str) -> None:
    """Render a horizontal bar chart of department totals."""
    data = prepare_department_chart_data(category, period)
    if not data:
        st.info("No departments in this category.")
        return
    chart = alt.Chart(alt.Data(values=data)).mark_bar().encode(
        x=alt.X("amount:Q", title=period),
        y=alt.Y("department:N", sort="-x", title=None),
        color=alt.value(PALETTE[1]),
        tooltip=[
            alt.Tooltip("department:N"),
            alt.Tooltip("amount_label:N", title="amount"),
        ],
    )
    st.subheader(f"{category.name} by Department")
    st.altair_chart(chart, use_container_width=True)


def _render_period_trend(tree: AggregationTree) -> None:
    """Render grand totals across every fiscal period as a line chart."""
    data = prepare_period_trend_data(tree)
    if not data:
        return
    chart = alt.Chart(alt.Data(values=data)).mark_line(point=True).encode(
        x=alt.X("period:N", sort=list(tree.periods), title=None),
        y=alt.Y("amount:Q", title="Total"),
        color=alt.value(PALETTE[0]),
        tooltip=[alt.Tooltip("period:N"), alt.Tooltip("amount:Q")],
    )
    st.subheader("Total Budget by Period")
    st.altair_chart(chart, use_container_width=True)


def _render_department_details(
    category: CategoryNode,
    periods: Sequence[str],
    period: str,
) -> None:
    """Render one expandable section per department with its line items."""
    st.subheader(f"{category.name} Line Items")
    for department in category.departments:
        amount = department.totals.get(period, Decimal("0"))
        label = f"{department.name}: {format_currency(amount)}"
        with st.expander(label, expanded=False):
            st.dataframe(
                build_line_item_rows(department, tuple(periods)),
                use_container_width=True,
                hide_index=True,
            )


def _render_diagnostics(diagnostics: LoadDiagnostics) -> None:
    """Render a caption listing rows recovered during the load."""
    parts = []
    if diagnostics.budget_rows_excluded:
        parts.append(
            f"{diagnostics.budget_rows_excluded} budget rows without an "
            f"account match"
        )
    skipped = (
        diagnostics.budget_rows_skipped + diagnostics.directory_rows_skipped
    )
    if skipped:
        parts.append(f"{skipped} malformed rows skipped")
    if diagnostics.directory_entries_invalid:
        parts.append(
            f"{diagnostics.directory_entries_invalid} incomplete "
            f"chart-of-accounts rows"
        )
    if parts:
        st.caption("Excluded: " + "; ".join(parts))


def main() -> None:
    """Render the Streamlit app."""
    st.set_page_config(page_title="Budget Transparency", layout="wide")
    st.title("Municipal Budget Transparency")

    try:
        report = _load_report()
    except (SourceLoadError, ConfigurationError) as exc:
        st.error(f"Could not load budget data: {exc}")
        return

    tree = report.tree
    if not tree.categories:
        st.warning("No budget lines matched the chart of accounts.")
        _render_diagnostics(report.diagnostics)
        return

    periods = list(tree.periods)
    period = st.sidebar.selectbox(
        "Fiscal period",
        periods,
        index=periods.index(report.summary.current_period),
    )

    _render_summary(report.summary)
    _render_diagnostics(report.diagnostics)

    ok, message = _check_altair_dependencies()
    chart_left, chart_right = st.columns(2)
    category_names = [category.name for category in tree.categories]
    selected_name = st.sidebar.selectbox("Category", category_names, index=0)
    selected = tree.category(selected_name) or tree.categories[0]
    get_usage_logger().info(
        f"Viewed category={selected.name} period={period}"
    )

    if ok:
        with chart_left:
            _render_category_chart(tree, period)
        with chart_right:
            _render_department_chart(selected, period)
        _render_period_trend(tree)
    else:
        st.warning(f"Charts unavailable: {message}")

    st.subheader("Totals by Category")
    st.dataframe(
        build_category_rows(tree),
        use_container_width=True,
        hide_index=True,
    )
    _render_department_details(selected, periods, period)


if __name__ == "__main__":  # pragma: no cover
    main()
