"""Application ports for record and directory access."""

from datetime import date
from typing import Protocol

from src.domain.models import (
    Category,
    ExpenseRecord,
    IncomeRecord,
    ParentCategory,
    Wallet,
)


class RecordStorePort(Protocol):
    """Port exposing expense and income records for a date range."""

    def fetch_expenses(
        self,
        start_date: date,
        end_date: date,
    ) -> list[ExpenseRecord]:
        """Return expense records dated inside the inclusive range."""

    def fetch_incomes(
        self,
        start_date: date,
        end_date: date,
    ) -> list[IncomeRecord]:
        """Return income records dated inside the inclusive range."""


class CategoryDirectoryPort(Protocol):
    """Port exposing categories, parent categories and wallets."""

    def fetch_parent_categories(self) -> list[ParentCategory]:
        """Return every parent category."""

    def fetch_categories(self) -> list[Category]:
        """Return every category with its parent id."""

    def fetch_wallets(self) -> list[Wallet]:
        """Return every wallet."""


class SummaryDataSourcePort(RecordStorePort, CategoryDirectoryPort, Protocol):
    """Record store that also serves the category/wallet directory."""


__all__ = [
    "RecordStorePort",
    "CategoryDirectoryPort",
    "SummaryDataSourcePort",
]
