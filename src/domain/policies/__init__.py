"""Domain policies package."""

from .label_filters import is_valid_label

__all__ = ["is_valid_label"]
