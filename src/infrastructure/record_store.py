"""SQLAlchemy-backed record store for expenses, incomes and directory."""

from datetime import date

from sqlalchemy import text

from src.application.ports.database import DatabaseEnginePort
from src.application.ports.record_store import SummaryDataSourcePort
from src.domain.models import (
    Category,
    ExpenseRecord,
    IncomeRecord,
    ParentCategory,
    Wallet,
)
from src.domain.services.normalization import normalize_name
from src.utils.amount_utils import coerce_amount


class SqlAlchemyRecordStore(SummaryDataSourcePort):
    """Record store reading the expenses database through SQLAlchemy."""

    def __init__(self, db_port: DatabaseEnginePort) -> None:
        """Initialize the store.

        Args:
            db_port: Port providing access to the expenses engine.
        """
        self._db_port = db_port

    def fetch_expenses(
        self,
        start_date: date,
        end_date: date,
    ) -> list[ExpenseRecord]:
        query = text(
            """
            SELECT e.id AS id,
                   e.amount AS amount,
                   e.date AS date,
                   e.category_id AS category_id,
                   e.priority AS priority,
                   e.wallet_id AS wallet_id,
                   e.description AS description,
                   COALESCE(
                       ARRAY_AGG(et.tag_id ORDER BY et.tag_id)
                           FILTER (WHERE et.tag_id IS NOT NULL),
                       '{}'
                   ) AS tag_ids
            FROM expense e
            LEFT JOIN expense_tag et ON et.expense_id = e.id
            WHERE e.date BETWEEN :start_date AND :end_date
            GROUP BY e.id
            ORDER BY e.date, e.id
            """
        )
        rows = self._fetch_all(
            query,
            {"start_date": start_date, "end_date": end_date},
        )
        return [
            ExpenseRecord(
                amount=coerce_amount(row.amount),
                date=row.date,
                category_id=row.category_id,
                priority=int(row.priority),
                wallet_id=row.wallet_id,
                tag_ids=tuple(row.tag_ids or ()),
                description=row.description,
            )
            for row in rows
        ]

    def fetch_incomes(
        self,
        start_date: date,
        end_date: date,
    ) -> list[IncomeRecord]:
        query = text(
            """
            SELECT i.amount AS amount,
                   i.date AS date,
                   i.wallet_id AS wallet_id,
                   i.description AS description
            FROM income i
            WHERE i.date BETWEEN :start_date AND :end_date
            ORDER BY i.date, i.id
            """
        )
        rows = self._fetch_all(
            query,
            {"start_date": start_date, "end_date": end_date},
        )
        return [
            IncomeRecord(
                amount=coerce_amount(row.amount),
                date=row.date,
                wallet_id=row.wallet_id,
                description=row.description,
            )
            for row in rows
        ]

    def fetch_parent_categories(self) -> list[ParentCategory]:
        query = text("SELECT id, name FROM parent_category ORDER BY id")
        return [
            ParentCategory(id=row.id, name=normalize_name(row.name))
            for row in self._fetch_all(query)
        ]

    def fetch_categories(self) -> list[Category]:
        query = text(
            """
            SELECT id, name, parent_category_id
            FROM category
            ORDER BY id
            """
        )
        return [
            Category(
                id=row.id,
                name=normalize_name(row.name),
                parent_category_id=row.parent_category_id,
            )
            for row in self._fetch_all(query)
        ]

    def fetch_wallets(self) -> list[Wallet]:
        query = text("SELECT id, name FROM wallet ORDER BY id")
        return [
            Wallet(id=row.id, name=normalize_name(row.name))
            for row in self._fetch_all(query)
        ]

    def _fetch_all(self, query, params: dict | None = None) -> list:
        engine = self._db_port.get_engine()
        with engine.connect() as conn:
            return conn.execute(query, params or {}).all()


__all__ = ["SqlAlchemyRecordStore"]
