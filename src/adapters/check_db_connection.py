"""Simple CLI to validate the expenses database connection.

This adapter is meant for local operations: it builds the database adapter
from the composition root, runs a basic health check and reports how many
expense and income rows are visible.
"""

from src.infrastructure.container import build_database_adapter
from src.infrastructure.logging.logger import get_app_logger


def main() -> None:
    """Run a connectivity check against the configured database."""
    adapter = build_database_adapter()
    logger = get_app_logger()

    engine = adapter.get_engine()
    logger.info(f"Expenses DB: {engine.url}")

    with engine.connect() as conn:
        conn.exec_driver_sql("SELECT 1")
        expense_count = conn.exec_driver_sql(
            "SELECT COUNT(*) FROM expense"
        ).scalar_one()
        income_count = conn.exec_driver_sql(
            "SELECT COUNT(*) FROM income"
        ).scalar_one()

    logger.info(
        f"Connection is working: {expense_count} expenses, "
        f"{income_count} incomes."
    )


if __name__ == "__main__":  # pragma: no cover
    main()
