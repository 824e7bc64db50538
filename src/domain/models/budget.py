"""Domain models for the aggregated budget hierarchy."""

from dataclasses import dataclass
from decimal import Decimal
from types import MappingProxyType
from typing import Mapping

from src.domain.constants import NOT_APPLICABLE


@dataclass(frozen=True)
class DirectoryEntry:
    """Category and department assigned to an account number."""

    category: str
    department: str


@dataclass(frozen=True)
class AccountDirectory:
    """Read-only account number lookup built from the chart of accounts.

    Attributes:
        entries: Account number to directory entry.
        invalid_count: Records dropped for a blank identifier, category, or
            department.
        duplicate_count: Records that overwrote an earlier account number.
    """

    entries: Mapping[str, DirectoryEntry]
    invalid_count: int = 0
    duplicate_count: int = 0

    def __post_init__(self) -> None:
        if not isinstance(self.entries, MappingProxyType):
            object.__setattr__(
                self,
                "entries",
                MappingProxyType(dict(self.entries)),
            )

    def get(self, account_number: str) -> DirectoryEntry | None:
        return self.entries.get(account_number)

    def __contains__(self, account_number: object) -> bool:
        return account_number in self.entries

    def __len__(self) -> int:
        return len(self.entries)


@dataclass(frozen=True)
class LineItem:
    """Single budget line with one amount per fiscal period."""

    description: str
    values: tuple[tuple[str, Decimal], ...]

    def amount(self, period: str) -> Decimal:
        """Return the amount for a period, or zero when absent."""
        for name, value in self.values:
            if name == period:
                return value
        return Decimal("0")


@dataclass(frozen=True)
class DepartmentNode:
    """Department rollup inside a category."""

    name: str
    totals: Mapping[str, Decimal]
    line_items: tuple[LineItem, ...]


@dataclass(frozen=True)
class CategoryNode:
    """Category rollup containing its departments."""

    name: str
    totals: Mapping[str, Decimal]
    departments: tuple[DepartmentNode, ...]

    def department(self, name: str) -> DepartmentNode | None:
        for department in self.departments:
            if department.name == name:
                return department
        return None


@dataclass(frozen=True)
class AggregationTree:
    """Category -> department -> line item hierarchy with grand totals.

    Attributes:
        periods: Fiscal period keys, in display order.
        categories: Category nodes in first-seen order.
        grand_totals: Sum of every category total per period.
        included_count: Budget records joined into the tree.
        excluded_count: Budget records with no directory entry.
    """

    periods: tuple[str, ...]
    categories: tuple[CategoryNode, ...]
    grand_totals: Mapping[str, Decimal]
    included_count: int = 0
    excluded_count: int = 0

    def category(self, name: str) -> CategoryNode | None:
        for category in self.categories:
            if category.name == name:
                return category
        return None


@dataclass(frozen=True)
class BudgetSummary:
    """Top-line totals for two fiscal periods.

    Attributes:
        prior_period: Period key used as the baseline.
        current_period: Period key compared against the baseline.
        total_prior: Sum of the prior period.
        total_current: Sum of the current period.
        percent_change: Full-precision change in percent, or ``N/A`` when the
            prior total is zero.
    """

    prior_period: str
    current_period: str
    total_prior: Decimal
    total_current: Decimal
    percent_change: Decimal | str

    @property
    def difference(self) -> Decimal:
        """Return total_current minus total_prior."""
        return self.total_current - self.total_prior

    @property
    def percent_change_display(self) -> str:
        """Return the signed percent change rounded to two places.

        Returns:
            str: Text such as ``+10.00%`` or ``-4.25%``, or ``N/A``.
        """
        if self.percent_change == NOT_APPLICABLE:
            return NOT_APPLICABLE
        rounded = self.percent_change.quantize(Decimal("0.01"))
        if rounded.is_zero():
            return "0.00%"
        sign = "+" if rounded > 0 else "-"
        return f"{sign}{rounded.copy_abs()}%"


__all__ = [
    "DirectoryEntry",
    "AccountDirectory",
    "LineItem",
    "DepartmentNode",
    "CategoryNode",
    "AggregationTree",
    "BudgetSummary",
]
