"""Use case to compute the income/expense summary for a period."""

from collections.abc import Iterable
from datetime import date

from src.application.ports.record_store import (
    CategoryDirectoryPort,
    RecordStorePort,
)
from src.domain.models import Summary
from src.domain.services.category_hierarchy import CategoryDirectory
from src.domain.services.normalization import normalize_category_ids
from src.domain.services.summary import compute_summary
from src.infrastructure.logging.logger import get_app_logger


class GenerateSummaryUseCase:
    """Compute the summary from records supplied by the record store."""

    def __init__(
        self,
        record_store: RecordStorePort,
        directory: CategoryDirectoryPort | None = None,
        logger=None,
    ) -> None:
        """Initialize the use case.

        Args:
            record_store: Port providing expense and income records.
            directory: Port providing categories and wallets. Defaults to
                the record store when it also serves the directory.
            logger: Optional logger compatible with logging.Logger-like API.
        """
        self._record_store = record_store
        self._directory = directory or record_store
        self._logger = logger or get_app_logger()

    def execute(
        self,
        start_date: date,
        end_date: date,
        exclude_category_ids: Iterable[int] | None = None,
    ) -> Summary:
        """Return the summary of the inclusive period.

        Args:
            start_date: Inclusive lower bound for record dates.
            end_date: Inclusive upper bound for record dates.
            exclude_category_ids: Categories removed from expense totals.

        Returns:
            Summary: Expense and income totals with ordered breakdowns.

        Raises:
            UnknownCategoryError: If an expense has a dangling category.
        """
        excluded = normalize_category_ids(exclude_category_ids)
        expenses = self._record_store.fetch_expenses(start_date, end_date)
        incomes = self._record_store.fetch_incomes(start_date, end_date)
        self._logger.info(
            f"Fetched {len(expenses)} expenses and {len(incomes)} incomes "
            f"for {start_date}..{end_date}"
        )
        directory = CategoryDirectory(
            self._directory.fetch_parent_categories(),
            self._directory.fetch_categories(),
            self._directory.fetch_wallets(),
        )
        summary = compute_summary(
            expenses,
            incomes,
            directory,
            start_date=start_date,
            end_date=end_date,
            excluded_category_ids=excluded,
            logger=self._logger,
        )
        self._logger.info(
            f"Summary computed: expense={summary.expense.amount}, "
            f"income={summary.income.amount}, excluded={list(excluded)}"
        )
        return summary


__all__ = ["GenerateSummaryUseCase", "Summary"]
