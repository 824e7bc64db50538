"""Budget presentation logic for the Streamlit UI.

This module contains pure, testable transformations from an
``AggregationTree`` produced by ``LoadBudgetUseCase`` to Altair-ready rows
and table records. No IO happens here; the app owns loading and widgets.
"""

from __future__ import annotations

from decimal import Decimal

from src.domain.models.budget import (
    AggregationTree,
    BudgetSummary,
    CategoryNode,
    DepartmentNode,
)

OTHER_LABEL = "Other"


def format_currency(value: Decimal) -> str:
    """Format an amount as dollars with two decimals."""
    sign = "-" if value < 0 else ""
    return f"{sign}${abs(value):,.2f}"


def format_percent_change(summary: BudgetSummary) -> str:
    """Format the summary change with an explicit sign, or ``N/A``."""
    return summary.percent_change_display


def prepare_category_chart_data(
    tree: AggregationTree,
    period: str,
    max_categories: int = 6,
) -> tuple[list[dict[str, str | float]], Decimal]:
    """Prepare donut chart rows with a Top-N + Other grouping.

    Args:
        tree: Aggregated budget.
        period: Period whose category totals are charted.
        max_categories: Maximum categories to keep before grouping into Other.

    Returns:
        Tuple with Altair-ready chart rows and the total amount.
    """
    amounts = [
        (category.name, category.totals.get(period, Decimal("0")))
        for category in tree.categories
    ]
    sorted_items = sorted(amounts, key=lambda item: item[1], reverse=True)
    top_items = sorted_items[:max_categories]
    other_items = sorted_items[max_categories:]
    other_amount = sum(
        (amount for _, amount in other_items),
        start=Decimal("0"),
    )
    if other_items and other_amount != 0:
        top_items = [*top_items, (OTHER_LABEL, other_amount)]
    total_amount = sum(
        (amount for _, amount in sorted_items),
        start=Decimal("0"),
    )

    data: list[dict[str, str | float]] = []
    for name, amount in top_items:
        share = (
            (amount / total_amount) * Decimal("100")
            if total_amount
            else Decimal("0")
        )
        data.append(
            {
                "category": name,
                "amount": float(amount),
                "amount_label": format_currency(amount),
                "share_label": f"{share:.1f}%",
            }
        )
    return data, total_amount


def prepare_department_chart_data(
    category: CategoryNode,
    period: str,
) -> list[dict[str, str | float]]:
    """Return bar chart rows for departments, largest first."""
    departments = sorted(
        category.departments,
        key=lambda department: department.totals.get(period, Decimal("0")),
        reverse=True,
    )
    return [
        {
            "department": department.name,
            "amount": float(department.totals.get(period, Decimal("0"))),
            "amount_label": format_currency(
                department.totals.get(period, Decimal("0"))
            ),
        }
        for department in departments
    ]


def prepare_period_trend_data(
    tree: AggregationTree,
) -> list[dict[str, str | float]]:
    """Return one row per period with the grand total, in period order."""
    return [
        {
            "period": period,
            "amount": float(tree.grand_totals.get(period, Decimal("0"))),
        }
        for period in tree.periods
    ]


def build_line_item_rows(
    department: DepartmentNode,
    periods: tuple[str, ...],
) -> list[dict[str, str]]:
    """Return table rows for a department's line items.

    The last row is the department total.
    """
    rows = []
    for item in department.line_items:
        row = {"Description": item.description}
        for period in periods:
            row[period] = format_currency(item.amount(period))
        rows.append(row)
    total_row = {"Description": "Total"}
    for period in periods:
        total_row[period] = format_currency(
            department.totals.get(period, Decimal("0"))
        )
    rows.append(total_row)
    return rows


def build_category_rows(
    tree: AggregationTree,
) -> list[dict[str, str]]:
    """Return one formatted row per category plus the grand total."""
    rows = []
    for category in tree.categories:
        row = {
            "Category": category.name,
            "Departments": str(len(category.departments)),
        }
        for period in tree.periods:
            row[period] = format_currency(
                category.totals.get(period, Decimal("0"))
            )
        rows.append(row)
    total_row = {"Category": "Grand Total", "Departments": ""}
    for period in tree.periods:
        total_row[period] = format_currency(
            tree.grand_totals.get(period, Decimal("0"))
        )
    rows.append(total_row)
    return rows


__all__ = [
    "OTHER_LABEL",
    "format_currency",
    "format_percent_change",
    "prepare_category_chart_data",
    "prepare_department_chart_data",
    "prepare_period_trend_data",
    "build_line_item_rows",
    "build_category_rows",
]
