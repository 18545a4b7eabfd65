"""Domain normalization helpers."""

from collections.abc import Iterable


def normalize_name(name: str | None) -> str:
    """Normalize display names coming from a record store.

    Args:
        name: Raw name value.

    Returns:
        str: Name without surrounding whitespace, empty when missing.
    """
    if not name:
        return ""
    return name.strip()


def normalize_category_ids(ids: Iterable[int] | None) -> tuple[int, ...]:
    """Return unique category ids in ascending order.

    Args:
        ids: Raw category ids, possibly repeated.

    Returns:
        tuple[int, ...]: Sorted, de-duplicated ids.
    """
    if not ids:
        return ()
    return tuple(sorted({int(value) for value in ids}))


__all__ = ["normalize_name", "normalize_category_ids"]
