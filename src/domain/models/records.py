"""Domain models for expense and income records and their directory."""

from dataclasses import dataclass, field
from datetime import date


@dataclass(frozen=True)
class ExpenseRecord:
    """Expense row loaded from the record store.

    Attributes:
        amount: Non-negative amount in the smallest currency unit.
        date: Day the expense was booked.
        category_id: Category the expense belongs to.
        priority: Necessity level, 0 (primary) to 2 (tertiary).
        wallet_id: Wallet the expense was paid from.
        tag_ids: Tags attached to the expense.
        description: Optional free-text description.
    """

    amount: int
    date: date
    category_id: int
    priority: int
    wallet_id: int | None = None
    tag_ids: tuple[int, ...] = ()
    description: str | None = None


@dataclass(frozen=True)
class IncomeRecord:
    """Income row loaded from the record store."""

    amount: int
    date: date
    wallet_id: int
    description: str | None = None


@dataclass(frozen=True)
class ParentCategory:
    """Top-level classification grouping categories."""

    id: int
    name: str


@dataclass(frozen=True)
class Category:
    """Category attached to exactly one parent category."""

    id: int
    name: str
    parent_category_id: int


@dataclass(frozen=True)
class Wallet:
    """Wallet receiving incomes and paying expenses."""

    id: int
    name: str


@dataclass(frozen=True)
class Tag:
    """Label attached to expenses."""

    id: int
    name: str
    is_important: bool = False


@dataclass(frozen=True)
class FilteredRecords:
    """Expense and income records retained for one computation."""

    expenses: tuple[ExpenseRecord, ...] = field(default_factory=tuple)
    incomes: tuple[IncomeRecord, ...] = field(default_factory=tuple)


__all__ = [
    "ExpenseRecord",
    "IncomeRecord",
    "ParentCategory",
    "Category",
    "Wallet",
    "Tag",
    "FilteredRecords",
]
