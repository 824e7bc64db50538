"""Composition root for wiring infrastructure adapters."""

from src.application.use_cases.load_budget import (
    BudgetLayout,
    BudgetSources,
    LoadBudgetUseCase,
)
from src.domain.models.report import BudgetReport
from src.infrastructure.budget_source_factory import (
    RoutingBudgetSource,
    create_budget_source,
)
from src.infrastructure.logging.logger import get_app_logger
from src.infrastructure.settings import BudgetSettings


def build_settings() -> BudgetSettings:
    """Return settings sourced from the environment."""
    return BudgetSettings.from_env()


def build_budget_source(
    settings: BudgetSettings | None = None,
) -> RoutingBudgetSource:
    """Return the source adapter for the configured locations."""
    resolved = settings or build_settings()
    return create_budget_source(resolved, logger=get_app_logger())


def build_load_budget_use_case(
    settings: BudgetSettings | None = None,
    source: RoutingBudgetSource | None = None,
) -> LoadBudgetUseCase:
    """Return the budget pipeline wired to its source and layout."""
    resolved = settings or build_settings()
    return LoadBudgetUseCase(
        source=source or build_budget_source(resolved),
        sources=BudgetSources(
            budget_url=resolved.budget_url,
            directory_url=resolved.chart_of_accounts_url,
        ),
        layout=BudgetLayout(
            prior_period=resolved.prior_period,
            current_period=resolved.current_period,
        ),
        logger=get_app_logger(),
    )


def run_budget_report(settings: BudgetSettings | None = None) -> BudgetReport:
    """Run the budget pipeline and release the source afterwards.

    The HTTP session behind the source is closed whether the run succeeds
    or raises.

    Args:
        settings: Optional settings; read from the environment when omitted.

    Returns:
        BudgetReport: Report produced by ``LoadBudgetUseCase``.
    """
    resolved = settings or build_settings()
    with build_budget_source(resolved) as source:
        return build_load_budget_use_case(resolved, source).execute()


__all__ = [
    "build_settings",
    "build_budget_source",
    "build_load_budget_use_case",
    "run_budget_report",
]
