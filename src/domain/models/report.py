"""Domain models bundling pipeline outputs for presentation."""

from dataclasses import dataclass

from .budget import AccountDirectory, AggregationTree, BudgetSummary


@dataclass(frozen=True)
class LoadDiagnostics:
    """Counts of rows recovered locally during a load.

    Attributes:
        directory_rows_skipped: Chart-of-accounts rows with a bad field count.
        budget_rows_skipped: Budget rows with a bad field count.
        directory_entries_invalid: Directory rows missing a required label.
        directory_duplicates: Directory rows overwriting an earlier account.
        budget_rows_excluded: Budget rows with no directory entry.
    """

    directory_rows_skipped: int = 0
    budget_rows_skipped: int = 0
    directory_entries_invalid: int = 0
    directory_duplicates: int = 0
    budget_rows_excluded: int = 0


@dataclass(frozen=True)
class BudgetReport:
    """Aggregated budget and its summary, ready for rendering."""

    tree: AggregationTree
    summary: BudgetSummary
    directory: AccountDirectory
    diagnostics: LoadDiagnostics


__all__ = ["LoadDiagnostics", "BudgetReport"]
