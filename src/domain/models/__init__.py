"""Domain models package."""

from .charts import (
    BarPayload,
    BarPoint,
    BarSeries,
    ChartPayload,
    ChartType,
    SankeyLink,
    SankeyPayload,
    SunburstNode,
    SunburstPayload,
    SunburstTree,
)
from .records import (
    Category,
    ExpenseRecord,
    FilteredRecords,
    IncomeRecord,
    ParentCategory,
    Tag,
    Wallet,
)
from .summary import (
    ExpenseGroupSummary,
    ExpenseSummary,
    IncomeGroupSummary,
    IncomeSummary,
    NamedAmount,
    ParentCategoryAmount,
    PriorityAmount,
    Summary,
    empty_summary,
)

__all__ = [
    "BarPayload",
    "BarPoint",
    "BarSeries",
    "ChartPayload",
    "ChartType",
    "SankeyLink",
    "SankeyPayload",
    "SunburstNode",
    "SunburstPayload",
    "SunburstTree",
    "Category",
    "ExpenseRecord",
    "FilteredRecords",
    "IncomeRecord",
    "ParentCategory",
    "Tag",
    "Wallet",
    "ExpenseGroupSummary",
    "ExpenseSummary",
    "IncomeGroupSummary",
    "IncomeSummary",
    "NamedAmount",
    "ParentCategoryAmount",
    "PriorityAmount",
    "Summary",
    "empty_summary",
]
