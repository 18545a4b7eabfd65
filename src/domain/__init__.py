"""Domain package for summary rules and core models."""

from .constants import CHART_TYPES, PRIORITY_LEVELS
from .errors import (
    InvalidRangeError,
    InvalidRequestError,
    SummaryError,
    UnknownCategoryError,
    UnsupportedChartTypeError,
)
from .models import (
    Category,
    ExpenseRecord,
    IncomeRecord,
    ParentCategory,
    Summary,
    Wallet,
)
from .services import CategoryDirectory, compute_summary, project

__all__ = [
    "CHART_TYPES",
    "PRIORITY_LEVELS",
    "InvalidRangeError",
    "InvalidRequestError",
    "SummaryError",
    "UnknownCategoryError",
    "UnsupportedChartTypeError",
    "Category",
    "ExpenseRecord",
    "IncomeRecord",
    "ParentCategory",
    "Summary",
    "Wallet",
    "CategoryDirectory",
    "compute_summary",
    "project",
]
