"""Column mappings from logical fields to spreadsheet headers."""

from dataclasses import dataclass

from src.domain.constants import (
    ACCOUNT_NUMBER_COLUMN,
    CATEGORY_COLUMN,
    DEFAULT_PERIOD_COLUMNS,
    DEPARTMENT_COLUMN,
    DESCRIPTION_COLUMN,
)


@dataclass(frozen=True)
class DirectoryColumns:
    """Headers read from the chart-of-accounts file.

    Attributes:
        account_number: Header holding the account identifier.
        category: Header holding the spending category.
        department: Header holding the department name.
    """

    account_number: str = ACCOUNT_NUMBER_COLUMN
    category: str = CATEGORY_COLUMN
    department: str = DEPARTMENT_COLUMN


@dataclass(frozen=True)
class BudgetColumns:
    """Headers read from the budget line-item file.

    Attributes:
        account_number: Header holding the account identifier.
        description: Header holding the line-item description.
        periods: Fiscal period headers, in display order. The header text is
            also used as the period key in aggregated totals.
    """

    account_number: str = ACCOUNT_NUMBER_COLUMN
    description: str = DESCRIPTION_COLUMN
    periods: tuple[str, ...] = DEFAULT_PERIOD_COLUMNS


__all__ = ["DirectoryColumns", "BudgetColumns"]
