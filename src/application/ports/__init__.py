"""Application ports package."""

from .budget_source import BudgetSourcePort

__all__ = ["BudgetSourcePort"]
