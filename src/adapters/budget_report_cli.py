"""CLI adapter printing the budget summary and category totals.

This module wires the LoadBudgetUseCase through the composition root and
provides a simple command-line entry point for checking a data refresh.
"""

import sys

from src.adapters.interface.streamlit.charts import (
    format_currency,
    format_percent_change,
)
from src.domain.errors import ConfigurationError, SourceLoadError
from src.infrastructure.container import run_budget_report
from src.infrastructure.logging.logger import get_app_logger


def main() -> int:
    """Run the budget pipeline and print a text report.

    Returns:
        int: Process exit status, 1 when a source could not be loaded.
    """
    logger = get_app_logger()
    try:
        report = run_budget_report()
    except (SourceLoadError, ConfigurationError) as exc:
        logger.error(str(exc))
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    summary = report.summary
    print(
        f"{summary.prior_period}: {format_currency(summary.total_prior)}"
    )
    print(
        f"{summary.current_period}: {format_currency(summary.total_current)}"
    )
    print(f"Change: {format_percent_change(summary)}")
    print()
    for category in report.tree.categories:
        amount = category.totals.get(summary.current_period)
        print(
            f"{category.name}: {format_currency(amount)} "
            f"({len(category.departments)} departments)"
        )

    diagnostics = report.diagnostics
    print()
    print(
        "Rows excluded: "
        f"unmatched={diagnostics.budget_rows_excluded}, "
        f"malformed={diagnostics.budget_rows_skipped}, "
        f"directory_invalid={diagnostics.directory_entries_invalid}, "
        f"directory_malformed={diagnostics.directory_rows_skipped}"
    )
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
