"""Join budget records to the account directory and roll up totals."""

from collections.abc import Iterable
from dataclasses import dataclass, field
from decimal import Decimal
from logging import Logger
from types import MappingProxyType

from src.domain.models.budget import (
    AccountDirectory,
    AggregationTree,
    CategoryNode,
    DepartmentNode,
    LineItem,
)
from src.domain.models.columns import BudgetColumns
from src.domain.models.records import RawRecord
from src.domain.services.directory import normalize_account_number
from src.utils.decimal_utils import coerce_amount


@dataclass
class _DepartmentBuilder:
    name: str
    totals: dict[str, Decimal]
    line_items: list[LineItem] = field(default_factory=list)

    def freeze(self) -> DepartmentNode:
        return DepartmentNode(
            name=self.name,
            totals=MappingProxyType(dict(self.totals)),
            line_items=tuple(self.line_items),
        )


@dataclass
class _CategoryBuilder:
    name: str
    totals: dict[str, Decimal]
    departments: dict[str, _DepartmentBuilder] = field(default_factory=dict)

    def freeze(self) -> CategoryNode:
        return CategoryNode(
            name=self.name,
            totals=MappingProxyType(dict(self.totals)),
            departments=tuple(
                department.freeze()
                for department in self.departments.values()
            ),
        )


def build_line_item(
    record: RawRecord,
    columns: BudgetColumns,
) -> LineItem:
    """Build a line item from the configured period columns.

    Missing or non-numeric amounts become zero.
    """
    description = record.get(columns.description, "")
    return LineItem(
        description=str(description).strip(),
        values=tuple(
            (period, coerce_amount(record.get(period)))
            for period in columns.periods
        ),
    )


def aggregate_budget(
    records: Iterable[RawRecord],
    directory: AccountDirectory,
    columns: BudgetColumns | None = None,
    logger: Logger | None = None,
) -> AggregationTree:
    """Build the category -> department -> line item tree.

    Records whose account number has no directory entry are excluded from the
    tree and counted in ``excluded_count``. Categories and departments keep
    first-seen order. Totals are exact ``Decimal`` sums.

    Args:
        records: Parsed budget records.
        directory: Account lookup built by ``build_account_directory``.
        columns: Header names to read.
        logger: Optional logger for the exclusion summary.

    Returns:
        AggregationTree: Frozen tree with per-period totals at every level.
    """
    columns = columns or BudgetColumns()
    periods = tuple(columns.periods)
    categories: dict[str, _CategoryBuilder] = {}
    grand_totals = _zero_totals(periods)
    included = 0
    excluded = 0

    for record in records:
        account_number = normalize_account_number(
            record.get(columns.account_number)
        )
        entry = directory.get(account_number)
        if entry is None:
            excluded += 1
            continue

        category = categories.get(entry.category)
        if category is None:
            category = _CategoryBuilder(
                name=entry.category,
                totals=_zero_totals(periods),
            )
            categories[entry.category] = category
        department = category.departments.get(entry.department)
        if department is None:
            department = _DepartmentBuilder(
                name=entry.department,
                totals=_zero_totals(periods),
            )
            category.departments[entry.department] = department

        line_item = build_line_item(record, columns)
        department.line_items.append(line_item)
        for period, amount in line_item.values:
            department.totals[period] += amount
            category.totals[period] += amount
            grand_totals[period] += amount
        included += 1

    if logger is not None:
        if excluded:
            logger.warning(
                f"Excluded {excluded} budget rows with no matching "
                f"chart-of-accounts entry"
            )
        logger.info(
            f"Aggregated {included} budget rows into "
            f"{len(categories)} categories"
        )

    return AggregationTree(
        periods=periods,
        categories=tuple(
            category.freeze() for category in categories.values()
        ),
        grand_totals=MappingProxyType(grand_totals),
        included_count=included,
        excluded_count=excluded,
    )


def _zero_totals(periods: tuple[str, ...]) -> dict[str, Decimal]:
    return {period: Decimal("0") for period in periods}


__all__ = ["aggregate_budget", "build_line_item"]
