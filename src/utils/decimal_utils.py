"""Helpers for Decimal normalization."""

from decimal import Decimal, InvalidOperation


def coerce_decimal(value) -> Decimal:
    """Normalize numeric values to Decimal.

    Args:
        value: Raw numeric value from a parsed record or adapter.

    Returns:
        Decimal: Normalized numeric value.

    Raises:
        decimal.InvalidOperation: If the value is not numeric.
    """
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    return Decimal(str(value))


def coerce_amount(value) -> Decimal:
    """Normalize a budget amount, defaulting to zero.

    Args:
        value: Parsed field value; text, ``None``, or a non-finite number
            means the cell holds no usable amount.

    Returns:
        Decimal: The amount, or ``Decimal("0")`` when absent or non-numeric.
    """
    if isinstance(value, str):
        return Decimal("0")
    try:
        amount = coerce_decimal(value)
    except (InvalidOperation, ValueError):
        return Decimal("0")
    if not amount.is_finite():
        return Decimal("0")
    return amount


__all__ = ["coerce_decimal", "coerce_amount"]
