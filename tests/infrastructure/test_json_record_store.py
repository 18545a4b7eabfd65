"""Tests for the JSON snapshot record store."""

import json
from datetime import date
from unittest.mock import MagicMock

import pytest

from src.domain.models import Category, ExpenseRecord, Wallet
from src.infrastructure.json_record_store import JsonSnapshotRecordStore

SNAPSHOT = {
    "parentCategories": [{"id": 1, "name": "Daily Expenses"}],
    "categories": [{"id": 3, "name": " Food", "parentCategoryId": 1}],
    "wallets": [{"id": 1, "name": "Cash"}],
    "expenses": [
        {
            "amount": 1200,
            "date": "2024-01-02",
            "categoryId": 3,
            "priority": 0,
            "walletId": 1,
            "tagIds": [2],
        },
        {
            "amount": 300,
            "date": "2024-02-02",
            "categoryId": 3,
            "priority": 1,
        },
    ],
    "incomes": [
        {"amount": 5000, "date": "2024-01-31", "walletId": 1},
        {"amount": 10, "date": "2023-12-31", "walletId": 1},
    ],
}


def _write(tmp_path, payload) -> str:
    path = tmp_path / "snapshot.json"
    path.write_text(json.dumps(payload), encoding="utf-8")
    return str(path)


def test_fetches_filter_by_inclusive_range(tmp_path) -> None:
    """Records outside the inclusive range should be skipped."""
    store = JsonSnapshotRecordStore(
        _write(tmp_path, SNAPSHOT),
        logger=MagicMock(),
    )

    expenses = store.fetch_expenses(date(2024, 1, 2), date(2024, 1, 31))
    incomes = store.fetch_incomes(date(2024, 1, 2), date(2024, 1, 31))

    assert expenses == [
        ExpenseRecord(
            amount=1200,
            date=date(2024, 1, 2),
            category_id=3,
            priority=0,
            wallet_id=1,
            tag_ids=(2,),
        )
    ]
    assert [record.amount for record in incomes] == [5000]


def test_directory_is_loaded_from_snapshot(tmp_path) -> None:
    store = JsonSnapshotRecordStore(
        _write(tmp_path, SNAPSHOT),
        logger=MagicMock(),
    )

    assert store.fetch_categories() == [
        Category(id=3, name="Food", parent_category_id=1)
    ]
    assert store.fetch_wallets() == [Wallet(id=1, name="Cash")]
    store.fetch_wallets().clear()
    assert len(store.fetch_wallets()) == 1


def test_empty_snapshot_yields_no_records(tmp_path) -> None:
    store = JsonSnapshotRecordStore(_write(tmp_path, {}), logger=MagicMock())

    assert store.fetch_expenses(date(2024, 1, 1), date(2024, 12, 31)) == []
    assert store.fetch_parent_categories() == []


def test_missing_file_raises(tmp_path) -> None:
    with pytest.raises(RuntimeError, match="not found"):
        JsonSnapshotRecordStore(tmp_path / "absent.json", logger=MagicMock())


@pytest.mark.parametrize("content", ["{not json", "[1, 2]"])
def test_invalid_content_raises(tmp_path, content) -> None:
    path = tmp_path / "broken.json"
    path.write_text(content, encoding="utf-8")

    with pytest.raises(RuntimeError):
        JsonSnapshotRecordStore(path, logger=MagicMock())


@pytest.mark.parametrize(
    "expense",
    [
        {"amount": 10, "date": "2024-01-02", "priority": 0},
        {"amount": 10, "date": "02/01/2024", "categoryId": 3, "priority": 0},
        {"amount": "ten", "date": "2024-01-02", "categoryId": 3, "priority": 0},
    ],
)
def test_malformed_item_raises_runtime_error(tmp_path, expense) -> None:
    """Bad items should surface like other unreadable snapshots."""
    path = _write(tmp_path, {**SNAPSHOT, "expenses": [expense]})

    with pytest.raises(RuntimeError, match="malformed item"):
        JsonSnapshotRecordStore(path, logger=MagicMock())


def test_expense_wallet_id_is_coerced_to_int(tmp_path) -> None:
    expense = {
        "amount": 10,
        "date": "2024-01-02",
        "categoryId": 3,
        "priority": 0,
        "walletId": "4",
    }
    store = JsonSnapshotRecordStore(
        _write(tmp_path, {**SNAPSHOT, "expenses": [expense]}),
        logger=MagicMock(),
    )

    records = store.fetch_expenses(date(2024, 1, 1), date(2024, 1, 31))

    assert records[0].wallet_id == 4
