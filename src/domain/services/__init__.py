"""Domain services package."""

from .assembler import assemble
from .category_hierarchy import CategoryDirectory, ResolvedCategory
from .chart_projection import project
from .normalization import normalize_category_ids, normalize_name
from .record_filter import filter_records
from .rollup import RawRollups, aggregate
from .summary import compute_summary
from .validation import validate_expense_record, validate_income_record

__all__ = [
    "assemble",
    "CategoryDirectory",
    "ResolvedCategory",
    "project",
    "normalize_category_ids",
    "normalize_name",
    "filter_records",
    "RawRollups",
    "aggregate",
    "compute_summary",
    "validate_expense_record",
    "validate_income_record",
]
