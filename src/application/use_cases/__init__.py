"""Application use cases package."""

from .load_budget import BudgetLayout, BudgetSources, LoadBudgetUseCase

__all__ = [
    "LoadBudgetUseCase",
    "BudgetSources",
    "BudgetLayout",
]
