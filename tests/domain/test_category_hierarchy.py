"""Tests for the category directory."""

import pytest

from src.domain.errors import UnknownCategoryError
from src.domain.models import Category, ParentCategory, Wallet
from src.domain.services.category_hierarchy import CategoryDirectory


def _directory() -> CategoryDirectory:
    return CategoryDirectory(
        parent_categories=[
            ParentCategory(id=1, name="Daily Expenses"),
            ParentCategory(id=2, name="Monthly Bills"),
        ],
        categories=[
            Category(id=10, name="Food", parent_category_id=1),
            Category(id=11, name="Rent", parent_category_id=2),
            Category(id=12, name="Orphan", parent_category_id=99),
        ],
        wallets=[Wallet(id=5, name="GoPay")],
    )


def test_resolve_returns_category_and_parent():
    resolved = _directory().resolve(10)

    assert resolved.category_name == "Food"
    assert resolved.parent_category_id == 1
    assert resolved.parent_category_name == "Daily Expenses"


def test_resolve_unknown_category_raises():
    with pytest.raises(UnknownCategoryError) as exc_info:
        _directory().resolve(404)

    assert exc_info.value.category_id == 404


def test_resolve_category_with_missing_parent_raises():
    with pytest.raises(UnknownCategoryError):
        _directory().resolve(12)


def test_wallet_and_category_lookups():
    directory = _directory()

    assert directory.wallet_name(5) == "GoPay"
    assert directory.wallet_name(6) is None
    assert directory.category_name(11) == "Rent"
    assert directory.category_ids() == [10, 11, 12]
