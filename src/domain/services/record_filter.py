"""Record selection by date window and excluded categories."""

from collections.abc import Iterable
from datetime import date

from src.domain.models import ExpenseRecord, FilteredRecords, IncomeRecord


def filter_records(
    expenses: Iterable[ExpenseRecord],
    incomes: Iterable[IncomeRecord],
    start_date: date,
    end_date: date,
    excluded_category_ids: Iterable[int] = (),
) -> FilteredRecords:
    """Keep records dated inside ``[start_date, end_date]``.

    Exclusions only apply to expenses. A reversed range yields an empty
    result; rejecting it is the request boundary's job.

    Args:
        expenses: Expense records in store order.
        incomes: Income records in store order.
        start_date: Inclusive lower bound.
        end_date: Inclusive upper bound.
        excluded_category_ids: Category ids whose expenses are dropped.

    Returns:
        FilteredRecords: Retained records, input order preserved.
    """
    if start_date > end_date:
        return FilteredRecords()
    excluded = frozenset(excluded_category_ids)
    kept_expenses = tuple(
        record
        for record in expenses
        if start_date <= record.date <= end_date
        and record.category_id not in excluded
    )
    kept_incomes = tuple(
        record
        for record in incomes
        if start_date <= record.date <= end_date
    )
    return FilteredRecords(expenses=kept_expenses, incomes=kept_incomes)


__all__ = ["filter_records"]
