"""Domain validation helpers."""

from logging import Logger

from src.domain.constants import PRIORITY_LEVELS
from src.domain.models import ExpenseRecord, IncomeRecord


def validate_expense_record(
    record: ExpenseRecord,
    logger: Logger | None,
) -> None:
    """Warn when an expense violates the record store conventions.

    Args:
        record: Expense record about to be aggregated.
        logger: Logger used for warnings.
    """
    if logger is None:
        return
    if record.amount < 0:
        logger.warning(
            f"Expense amount is negative for category_id={record.category_id}"
            f" on {record.date}: {record.amount}"
        )
    if record.priority not in PRIORITY_LEVELS:
        logger.warning(
            f"Expense priority {record.priority} is outside "
            f"{PRIORITY_LEVELS} for category_id={record.category_id}"
        )


def validate_income_record(
    record: IncomeRecord,
    logger: Logger | None,
) -> None:
    """Warn when an income amount is negative."""
    if logger is None:
        return
    if record.amount < 0:
        logger.warning(
            f"Income amount is negative for wallet_id={record.wallet_id}"
            f" on {record.date}: {record.amount}"
        )


__all__ = ["validate_expense_record", "validate_income_record"]
