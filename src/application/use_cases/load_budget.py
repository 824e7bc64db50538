"""Use case to load, join, and summarize the municipal budget.

The pipeline runs in one synchronous pass:

* fetch the chart of accounts and the budget line items;
* parse both into records;
* build the account directory and aggregate the budget against it;
* summarize the prior and current fiscal periods.

A source failure aborts the pass before any aggregation happens.
"""

from dataclasses import dataclass, field

from src.application.ports.budget_source import BudgetSourcePort
from src.domain.constants import DEFAULT_CURRENT_PERIOD, DEFAULT_PRIOR_PERIOD
from src.domain.errors import ConfigurationError
from src.domain.models.columns import BudgetColumns, DirectoryColumns
from src.domain.models.records import ParsedTable
from src.domain.models.report import BudgetReport, LoadDiagnostics
from src.domain.services.aggregation import aggregate_budget
from src.domain.services.directory import build_account_directory
from src.domain.services.parsing import parse_delimited
from src.domain.services.summary import summarize_tree
from src.infrastructure.logging.logger import get_app_logger


@dataclass(frozen=True)
class BudgetSources:
    """Locations of the two source files.

    Attributes:
        budget_url: URL or path of the budget line-item file.
        directory_url: URL or path of the chart-of-accounts file.
    """

    budget_url: str
    directory_url: str


@dataclass(frozen=True)
class BudgetLayout:
    """Column configuration and the periods compared in the summary."""

    budget_columns: BudgetColumns = field(default_factory=BudgetColumns)
    directory_columns: DirectoryColumns = field(
        default_factory=DirectoryColumns
    )
    prior_period: str = DEFAULT_PRIOR_PERIOD
    current_period: str = DEFAULT_CURRENT_PERIOD


class LoadBudgetUseCase:
    """Build a ``BudgetReport`` from the configured sources."""

    def __init__(
        self,
        source: BudgetSourcePort,
        sources: BudgetSources,
        layout: BudgetLayout | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            source: Port used to read both files.
            sources: Locations of the budget and chart-of-accounts files.
            layout: Optional column and period configuration.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            ConfigurationError: If a summary period is not a configured
                period column.
        """
        self._source = source
        self._sources = sources
        self._layout = layout or BudgetLayout()
        self._logger = logger or get_app_logger()
        self._validate_layout()

    def execute(self) -> BudgetReport:
        """Run the pipeline.

        Returns:
            BudgetReport: Tree, summary, directory, and diagnostics.

        Raises:
            SourceLoadError: If either source cannot be read.
        """
        directory_table = self._load_table(
            self._sources.directory_url,
            text_columns=(
                self._layout.directory_columns.account_number,
                self._layout.directory_columns.category,
                self._layout.directory_columns.department,
            ),
        )
        budget_table = self._load_table(
            self._sources.budget_url,
            text_columns=(
                self._layout.budget_columns.account_number,
                self._layout.budget_columns.description,
            ),
        )

        directory = build_account_directory(
            directory_table.records,
            self._layout.directory_columns,
            logger=self._logger,
        )
        tree = aggregate_budget(
            budget_table.records,
            directory,
            self._layout.budget_columns,
            logger=self._logger,
        )
        summary = summarize_tree(
            tree,
            prior_period=self._layout.prior_period,
            current_period=self._layout.current_period,
        )

        self._logger.info(
            f"Budget summary: {summary.prior_period}={summary.total_prior}, "
            f"{summary.current_period}={summary.total_current}, "
            f"change={summary.percent_change_display}"
        )

        return BudgetReport(
            tree=tree,
            summary=summary,
            directory=directory,
            diagnostics=LoadDiagnostics(
                directory_rows_skipped=directory_table.skipped_rows,
                budget_rows_skipped=budget_table.skipped_rows,
                directory_entries_invalid=directory.invalid_count,
                directory_duplicates=directory.duplicate_count,
                budget_rows_excluded=tree.excluded_count,
            ),
        )

    def _load_table(
        self,
        location: str,
        text_columns: tuple[str, ...],
    ) -> ParsedTable:
        """Fetch and parse one source.

        Args:
            location: URL or path passed to the source port.
            text_columns: Headers kept as text.

        Returns:
            ParsedTable: Parsed headers and records.
        """
        raw_text = self._source.fetch_text(location)
        table = parse_delimited(
            raw_text,
            text_columns=text_columns,
            logger=self._logger,
        )
        self._logger.info(
            f"Parsed {len(table.records)} rows from {location}"
        )
        missing = [
            column for column in text_columns if column not in table.headers
        ]
        if table.headers and missing:
            self._logger.warning(
                f"Columns missing from {location}: {', '.join(missing)}"
            )
        return table

    def _validate_layout(self) -> None:
        periods = self._layout.budget_columns.periods
        for period in (self._layout.prior_period, self._layout.current_period):
            if period not in periods:
                raise ConfigurationError(
                    f"Summary period {period!r} is not one of the configured "
                    f"period columns: {', '.join(periods)}"
                )


__all__ = ["LoadBudgetUseCase", "BudgetSources", "BudgetLayout"]
