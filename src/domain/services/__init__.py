"""Domain services package."""

from .aggregation import aggregate_budget, build_line_item
from .directory import build_account_directory, normalize_account_number
from .parsing import clean_value, parse_delimited
from .summary import percent_change, summarize_records, summarize_tree

__all__ = [
    "aggregate_budget",
    "build_line_item",
    "build_account_directory",
    "normalize_account_number",
    "clean_value",
    "parse_delimited",
    "percent_change",
    "summarize_records",
    "summarize_tree",
]
