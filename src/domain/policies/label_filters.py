"""Validation rules for directory labels."""


def is_valid_label(value: object) -> bool:
    """Return True when a category or department label is usable.

    Args:
        value: Parsed cell value.

    Returns:
        bool: True for non-blank text. Numeric cells are rejected since an
        empty cell parses to ``Decimal("0")``.
    """
    if not isinstance(value, str):
        return False
    return bool(value.strip())


__all__ = ["is_valid_label"]
