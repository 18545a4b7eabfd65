"""Ordering and assembly of rollups into the summary value."""

from collections.abc import Iterable

from src.domain.models import (
    ExpenseGroupSummary,
    ExpenseSummary,
    IncomeGroupSummary,
    IncomeSummary,
    NamedAmount,
    ParentCategoryAmount,
    PriorityAmount,
    Summary,
)
from src.domain.services.rollup import (
    GroupTotal,
    ParentCategoryTotal,
    PriorityTotal,
    RawRollups,
)


def assemble(rollups: RawRollups) -> Summary:
    """Order every grouping level and build the nested summary.

    Groups are sorted by amount descending, then by name ascending (priority
    levels by level ascending). Groups without contributing records are
    dropped; a group holding only zero-amount records is kept.

    Args:
        rollups: Unordered totals from ``aggregate``.

    Returns:
        Summary: Immutable summary value.
    """
    parent_categories = tuple(
        ParentCategoryAmount(
            name=parent.name,
            amount=parent.amount,
            categories=_ordered_named(parent.categories),
        )
        for parent in _ordered_parents(rollups.parent_categories)
    )
    priorities = tuple(
        PriorityAmount(level=item.level, amount=item.amount)
        for item in _ordered_priorities(rollups.priorities)
    )
    return Summary(
        expense=ExpenseSummary(
            amount=rollups.expense_amount,
            group_summary=ExpenseGroupSummary(
                parent_categories=parent_categories,
                priorities=priorities,
            ),
        ),
        income=IncomeSummary(
            amount=rollups.income_amount,
            group_summary=IncomeGroupSummary(
                wallets=_ordered_named(rollups.wallets),
            ),
        ),
    )


def _ordered_named(items: Iterable[GroupTotal]) -> tuple[NamedAmount, ...]:
    kept = [item for item in items if item.record_count > 0]
    kept.sort(key=lambda item: (-item.amount, item.name, item.key))
    return tuple(
        NamedAmount(name=item.name, amount=item.amount) for item in kept
    )


def _ordered_parents(
    items: Iterable[ParentCategoryTotal],
) -> list[ParentCategoryTotal]:
    kept = [
        item
        for item in items
        if any(child.record_count > 0 for child in item.categories)
    ]
    kept.sort(key=lambda item: (-item.amount, item.name, item.key))
    return kept


def _ordered_priorities(
    items: Iterable[PriorityTotal],
) -> list[PriorityTotal]:
    kept = [item for item in items if item.record_count > 0]
    kept.sort(key=lambda item: (-item.amount, item.level))
    return kept


__all__ = ["assemble"]
