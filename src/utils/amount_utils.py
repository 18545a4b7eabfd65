"""Helpers for integer amount normalization."""

from decimal import Decimal


def coerce_amount(value) -> int:
    """Normalize numeric values to an integer amount.

    Amounts are stored in the smallest currency unit, so SQL drivers may
    hand back ``int``, ``Decimal`` or numeric strings for the same column.

    Args:
        value: Raw numeric value from SQL or adapters.

    Returns:
        int: Normalized amount.
    """
    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, Decimal):
        return int(value)
    return int(Decimal(str(value)))


__all__ = ["coerce_amount"]
