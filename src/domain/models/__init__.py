"""Domain models package."""

from .budget import (
    AccountDirectory,
    AggregationTree,
    BudgetSummary,
    CategoryNode,
    DepartmentNode,
    DirectoryEntry,
    LineItem,
)
from .columns import BudgetColumns, DirectoryColumns
from .records import ParsedTable, RawRecord, RawValue
from .report import BudgetReport, LoadDiagnostics

__all__ = [
    "AccountDirectory",
    "AggregationTree",
    "BudgetSummary",
    "CategoryNode",
    "DepartmentNode",
    "DirectoryEntry",
    "LineItem",
    "BudgetColumns",
    "DirectoryColumns",
    "ParsedTable",
    "RawRecord",
    "RawValue",
    "BudgetReport",
    "LoadDiagnostics",
]
