"""Rollup aggregation of filtered expense and income records."""

from dataclasses import dataclass
from logging import Logger

from src.domain.models import FilteredRecords
from src.domain.services.category_hierarchy import CategoryDirectory
from src.domain.services.validation import (
    validate_expense_record,
    validate_income_record,
)


@dataclass(frozen=True)
class GroupTotal:
    """Running sum for one group key.

    Attributes:
        key: Group identity (category id or wallet id).
        name: Display name of the group.
        amount: Summed amount.
        record_count: Number of contributing records.
    """

    key: int
    name: str
    amount: int
    record_count: int


@dataclass(frozen=True)
class ParentCategoryTotal:
    """Parent category bucket with its category totals."""

    key: int
    name: str
    amount: int
    record_count: int
    categories: tuple[GroupTotal, ...]


@dataclass(frozen=True)
class PriorityTotal:
    """Running sum for one priority level."""

    level: int
    amount: int
    record_count: int


@dataclass(frozen=True)
class RawRollups:
    """Unordered rollups produced by ``aggregate``.

    Group tuples follow first-seen order; ordering is the assembler's job.
    """

    expense_amount: int
    income_amount: int
    parent_categories: tuple[ParentCategoryTotal, ...]
    priorities: tuple[PriorityTotal, ...]
    wallets: tuple[GroupTotal, ...]


def aggregate(
    records: FilteredRecords,
    directory: CategoryDirectory,
    *,
    logger: Logger | None = None,
) -> RawRollups:
    """Sum filtered records by category, priority and wallet.

    Args:
        records: Records retained by ``filter_records``.
        directory: Lookup used to resolve categories and wallet names.
        logger: Optional logger used for data-quality warnings.

    Returns:
        RawRollups: Totals and per-group sums with record counts.

    Raises:
        UnknownCategoryError: If an expense references a missing category.
    """
    expense_amount = 0
    category_totals: dict[int, list[int]] = {}
    priority_totals: dict[int, list[int]] = {}
    for record in records.expenses:
        validate_expense_record(record, logger)
        expense_amount += record.amount
        _accumulate(category_totals, record.category_id, record.amount)
        _accumulate(priority_totals, record.priority, record.amount)

    income_amount = 0
    wallet_totals: dict[int, list[int]] = {}
    for record in records.incomes:
        validate_income_record(record, logger)
        income_amount += record.amount
        _accumulate(wallet_totals, record.wallet_id, record.amount)

    return RawRollups(
        expense_amount=expense_amount,
        income_amount=income_amount,
        parent_categories=_bucket_by_parent(category_totals, directory),
        priorities=tuple(
            PriorityTotal(level=level, amount=amount, record_count=count)
            for level, (amount, count) in priority_totals.items()
        ),
        wallets=tuple(
            GroupTotal(
                key=wallet_id,
                name=_wallet_name(directory, wallet_id, logger),
                amount=amount,
                record_count=count,
            )
            for wallet_id, (amount, count) in wallet_totals.items()
        ),
    )


def _accumulate(totals: dict[int, list[int]], key: int, amount: int) -> None:
    if key not in totals:
        totals[key] = [amount, 1]
    else:
        totals[key][0] += amount
        totals[key][1] += 1


def _bucket_by_parent(
    category_totals: dict[int, list[int]],
    directory: CategoryDirectory,
) -> tuple[ParentCategoryTotal, ...]:
    names: dict[int, str] = {}
    children: dict[int, list[GroupTotal]] = {}
    for category_id, (amount, count) in category_totals.items():
        resolved = directory.resolve(category_id)
        parent_id = resolved.parent_category_id
        if parent_id not in children:
            names[parent_id] = resolved.parent_category_name
            children[parent_id] = []
        children[parent_id].append(
            GroupTotal(
                key=category_id,
                name=resolved.category_name,
                amount=amount,
                record_count=count,
            )
        )

    return tuple(
        ParentCategoryTotal(
            key=parent_id,
            name=names[parent_id],
            amount=sum(child.amount for child in items),
            record_count=sum(child.record_count for child in items),
            categories=tuple(items),
        )
        for parent_id, items in children.items()
    )


def _wallet_name(
    directory: CategoryDirectory,
    wallet_id: int,
    logger: Logger | None,
) -> str:
    name = directory.wallet_name(wallet_id)
    if name is not None:
        return name
    if logger is not None:
        logger.warning(f"Missing wallet name for wallet_id={wallet_id}")
    return str(wallet_id)


__all__ = [
    "GroupTotal",
    "ParentCategoryTotal",
    "PriorityTotal",
    "RawRollups",
    "aggregate",
]
