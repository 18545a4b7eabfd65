"""Domain service computing the income/expense summary."""

from collections.abc import Iterable
from datetime import date
from logging import Logger

from src.domain.models import ExpenseRecord, IncomeRecord, Summary
from src.domain.services.assembler import assemble
from src.domain.services.category_hierarchy import CategoryDirectory
from src.domain.services.record_filter import filter_records
from src.domain.services.rollup import aggregate


def compute_summary(
    expenses: Iterable[ExpenseRecord],
    incomes: Iterable[IncomeRecord],
    directory: CategoryDirectory,
    *,
    start_date: date,
    end_date: date,
    excluded_category_ids: Iterable[int] = (),
    logger: Logger | None = None,
) -> Summary:
    """Filter, aggregate and assemble records into a summary.

    The computation is pure: it performs no I/O and never mutates its
    inputs, so concurrent calls need no coordination.

    Args:
        expenses: Expense records snapshot.
        incomes: Income records snapshot.
        directory: Category, parent category and wallet lookups.
        start_date: Inclusive lower bound.
        end_date: Inclusive upper bound.
        excluded_category_ids: Categories dropped from every expense total.
        logger: Optional logger used for data-quality warnings.

    Returns:
        Summary: Expense and income totals with ordered breakdowns.

    Raises:
        UnknownCategoryError: If a retained expense has a dangling category.
    """
    filtered = filter_records(
        expenses,
        incomes,
        start_date,
        end_date,
        excluded_category_ids,
    )
    rollups = aggregate(filtered, directory, logger=logger)
    return assemble(rollups)


__all__ = ["compute_summary"]
