"""Domain package for budget parsing, aggregation, and summaries."""

from .constants import (
    DEFAULT_CURRENT_PERIOD,
    DEFAULT_PERIOD_COLUMNS,
    DEFAULT_PRIOR_PERIOD,
    NOT_APPLICABLE,
)
from .errors import ConfigurationError, SourceLoadError
from .models import (
    AccountDirectory,
    AggregationTree,
    BudgetColumns,
    BudgetSummary,
    CategoryNode,
    DepartmentNode,
    DirectoryColumns,
    DirectoryEntry,
    LineItem,
    ParsedTable,
)
from .policies import is_valid_label
from .services import (
    aggregate_budget,
    build_account_directory,
    clean_value,
    parse_delimited,
    percent_change,
    summarize_records,
    summarize_tree,
)

__all__ = [
    "DEFAULT_CURRENT_PERIOD",
    "DEFAULT_PERIOD_COLUMNS",
    "DEFAULT_PRIOR_PERIOD",
    "NOT_APPLICABLE",
    "ConfigurationError",
    "SourceLoadError",
    "AccountDirectory",
    "AggregationTree",
    "BudgetColumns",
    "BudgetSummary",
    "CategoryNode",
    "DepartmentNode",
    "DirectoryColumns",
    "DirectoryEntry",
    "LineItem",
    "ParsedTable",
    "aggregate_budget",
    "build_account_directory",
    "clean_value",
    "parse_delimited",
    "percent_change",
    "summarize_records",
    "summarize_tree",
]
