"""Project budget records or an aggregation tree onto top-line totals."""

from collections.abc import Iterable
from decimal import Decimal

from src.domain.constants import (
    DEFAULT_CURRENT_PERIOD,
    DEFAULT_PRIOR_PERIOD,
    NOT_APPLICABLE,
)
from src.domain.models.budget import AggregationTree, BudgetSummary
from src.domain.models.records import RawRecord
from src.utils.decimal_utils import coerce_amount


def percent_change(prior: Decimal, current: Decimal) -> Decimal | str:
    """Return the change from prior to current in percent.

    Args:
        prior: Baseline amount.
        current: Compared amount.

    Returns:
        Decimal | str: Full-precision percentage, or ``N/A`` when prior is
        zero.
    """
    if prior == 0:
        return NOT_APPLICABLE
    return (current - prior) / prior * Decimal("100")


def summarize_records(
    records: Iterable[RawRecord],
    prior_period: str = DEFAULT_PRIOR_PERIOD,
    current_period: str = DEFAULT_CURRENT_PERIOD,
) -> BudgetSummary:
    """Sum two period columns across raw budget records."""
    total_prior = Decimal("0")
    total_current = Decimal("0")
    for record in records:
        total_prior += coerce_amount(record.get(prior_period))
        total_current += coerce_amount(record.get(current_period))
    return BudgetSummary(
        prior_period=prior_period,
        current_period=current_period,
        total_prior=total_prior,
        total_current=total_current,
        percent_change=percent_change(total_prior, total_current),
    )


def summarize_tree(
    tree: AggregationTree,
    prior_period: str = DEFAULT_PRIOR_PERIOD,
    current_period: str = DEFAULT_CURRENT_PERIOD,
) -> BudgetSummary:
    """Read two periods from the tree's grand totals."""
    total_prior = tree.grand_totals.get(prior_period, Decimal("0"))
    total_current = tree.grand_totals.get(current_period, Decimal("0"))
    return BudgetSummary(
        prior_period=prior_period,
        current_period=current_period,
        total_prior=total_prior,
        total_current=total_current,
        percent_change=percent_change(total_prior, total_current),
    )


__all__ = ["percent_change", "summarize_records", "summarize_tree"]
