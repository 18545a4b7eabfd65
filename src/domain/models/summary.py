"""Domain models for the computed income/expense summary."""

from dataclasses import dataclass


@dataclass(frozen=True)
class NamedAmount:
    """Amount aggregated for a named group (category or wallet)."""

    name: str
    amount: int

    def to_dict(self) -> dict:
        return {"name": self.name, "amount": self.amount}


@dataclass(frozen=True)
class ParentCategoryAmount:
    """Amount aggregated for a parent category and its categories."""

    name: str
    amount: int
    categories: tuple[NamedAmount, ...]

    def to_dict(self) -> dict:
        return {
            "name": self.name,
            "amount": self.amount,
            "categories": [item.to_dict() for item in self.categories],
        }


@dataclass(frozen=True)
class PriorityAmount:
    """Amount aggregated for a priority level."""

    level: int
    amount: int

    def to_dict(self) -> dict:
        return {"level": self.level, "amount": self.amount}


@dataclass(frozen=True)
class ExpenseGroupSummary:
    """Expense breakdowns by category hierarchy and by priority."""

    parent_categories: tuple[ParentCategoryAmount, ...] = ()
    priorities: tuple[PriorityAmount, ...] = ()


@dataclass(frozen=True)
class ExpenseSummary:
    """Total expenses and their breakdowns."""

    amount: int
    group_summary: ExpenseGroupSummary

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "groupSummary": {
                "parentCategories": [
                    item.to_dict()
                    for item in self.group_summary.parent_categories
                ],
                "priorities": [
                    item.to_dict() for item in self.group_summary.priorities
                ],
            },
        }


@dataclass(frozen=True)
class IncomeGroupSummary:
    """Income breakdown by wallet."""

    wallets: tuple[NamedAmount, ...] = ()


@dataclass(frozen=True)
class IncomeSummary:
    """Total incomes and their breakdown."""

    amount: int
    group_summary: IncomeGroupSummary

    def to_dict(self) -> dict:
        return {
            "amount": self.amount,
            "groupSummary": {
                "wallets": [
                    item.to_dict() for item in self.group_summary.wallets
                ],
            },
        }


@dataclass(frozen=True)
class Summary:
    """Income and expense summary for a date range.

    The value is never persisted: it is serialized through ``to_dict`` or
    projected into a chart payload and then discarded.
    """

    expense: ExpenseSummary
    income: IncomeSummary

    def to_dict(self) -> dict:
        """Return the nested camelCase structure exposed to clients."""
        return {
            "expense": self.expense.to_dict(),
            "income": self.income.to_dict(),
        }


def empty_summary() -> Summary:
    """Return a summary with zero totals and no groups."""
    return Summary(
        expense=ExpenseSummary(amount=0, group_summary=ExpenseGroupSummary()),
        income=IncomeSummary(amount=0, group_summary=IncomeGroupSummary()),
    )


__all__ = [
    "NamedAmount",
    "ParentCategoryAmount",
    "PriorityAmount",
    "ExpenseGroupSummary",
    "ExpenseSummary",
    "IncomeGroupSummary",
    "IncomeSummary",
    "Summary",
    "empty_summary",
]
