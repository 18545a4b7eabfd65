"""JSON snapshot record store for offline summaries.

The snapshot mirrors the API shapes with camelCase keys::

    {
      "parentCategories": [{"id": 1, "name": "Daily Expenses"}],
      "categories": [{"id": 3, "name": "Food", "parentCategoryId": 1}],
      "wallets": [{"id": 1, "name": "Cash"}],
      "expenses": [{"amount": 1200, "date": "2025-03-02", "categoryId": 3,
                    "priority": 0, "walletId": 1, "tagIds": [2]}],
      "incomes": [{"amount": 5000, "date": "2025-03-01", "walletId": 1}]
    }
"""

import json
from datetime import date
from decimal import InvalidOperation
from pathlib import Path

from src.application.ports.record_store import SummaryDataSourcePort
from src.domain.models import (
    Category,
    ExpenseRecord,
    IncomeRecord,
    ParentCategory,
    Wallet,
)
from src.domain.services.normalization import normalize_name
from src.infrastructure.logging.logger import get_app_logger
from src.utils.amount_utils import coerce_amount


class JsonSnapshotRecordStore(SummaryDataSourcePort):
    """Record store reading a JSON snapshot file once at construction."""

    def __init__(self, snapshot_path: Path | str, logger=None) -> None:
        """Load the snapshot.

        Args:
            snapshot_path: Path to the JSON snapshot file.
            logger: Optional logger compatible with logging.Logger-like API.

        Raises:
            RuntimeError: If the file is missing, is not valid JSON or
                holds an item with a missing or malformed field.
        """
        self._logger = logger or get_app_logger()
        self._path = Path(snapshot_path)
        if not self._path.exists():
            raise RuntimeError(f"Snapshot file not found: {self._path}")
        try:
            payload = json.loads(self._path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise RuntimeError(
                f"Snapshot file is not valid JSON: {self._path}"
            ) from exc
        if not isinstance(payload, dict):
            raise RuntimeError(
                f"Snapshot root must be an object: {self._path}"
            )

        try:
            self._load(payload)
        except (KeyError, TypeError, ValueError, InvalidOperation) as exc:
            raise RuntimeError(
                f"Snapshot file has a malformed item: {self._path} ({exc!r})"
            ) from exc
        self._logger.info(
            f"Loaded snapshot {self._path.name}: "
            f"{len(self._expenses)} expenses, {len(self._incomes)} incomes"
        )

    def _load(self, payload: dict) -> None:
        self._parent_categories = [
            ParentCategory(
                id=int(item["id"]),
                name=normalize_name(item["name"]),
            )
            for item in payload.get("parentCategories", [])
        ]
        self._categories = [
            Category(
                id=int(item["id"]),
                name=normalize_name(item["name"]),
                parent_category_id=int(item["parentCategoryId"]),
            )
            for item in payload.get("categories", [])
        ]
        self._wallets = [
            Wallet(id=int(item["id"]), name=normalize_name(item["name"]))
            for item in payload.get("wallets", [])
        ]
        self._expenses = [
            ExpenseRecord(
                amount=coerce_amount(item["amount"]),
                date=date.fromisoformat(item["date"]),
                category_id=int(item["categoryId"]),
                priority=int(item["priority"]),
                wallet_id=_optional_int(item.get("walletId")),
                tag_ids=tuple(item.get("tagIds") or ()),
                description=item.get("description"),
            )
            for item in payload.get("expenses", [])
        ]
        self._incomes = [
            IncomeRecord(
                amount=coerce_amount(item["amount"]),
                date=date.fromisoformat(item["date"]),
                wallet_id=int(item["walletId"]),
                description=item.get("description"),
            )
            for item in payload.get("incomes", [])
        ]

    def fetch_expenses(
        self,
        start_date: date,
        end_date: date,
    ) -> list[ExpenseRecord]:
        return [
            record
            for record in self._expenses
            if start_date <= record.date <= end_date
        ]

    def fetch_incomes(
        self,
        start_date: date,
        end_date: date,
    ) -> list[IncomeRecord]:
        return [
            record
            for record in self._incomes
            if start_date <= record.date <= end_date
        ]

    def fetch_parent_categories(self) -> list[ParentCategory]:
        return list(self._parent_categories)

    def fetch_categories(self) -> list[Category]:
        return list(self._categories)

    def fetch_wallets(self) -> list[Wallet]:
        return list(self._wallets)


def _optional_int(value) -> int | None:
    return None if value is None else int(value)


__all__ = ["JsonSnapshotRecordStore"]
