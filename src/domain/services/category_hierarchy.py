"""Two-tier category hierarchy lookups."""

from collections.abc import Iterable
from dataclasses import dataclass

from src.domain.errors import UnknownCategoryError
from src.domain.models import Category, ParentCategory, Wallet


@dataclass(frozen=True)
class ResolvedCategory:
    """Category name together with its parent identity."""

    category_name: str
    parent_category_id: int
    parent_category_name: str


class CategoryDirectory:
    """Index-based lookup of categories, parent categories and wallets.

    The hierarchy is kept as flat id tables (id -> name, id -> parent id)
    rather than linked objects.
    """

    def __init__(
        self,
        parent_categories: Iterable[ParentCategory],
        categories: Iterable[Category],
        wallets: Iterable[Wallet] = (),
    ) -> None:
        self._parent_names = {
            parent.id: parent.name for parent in parent_categories
        }
        self._category_names: dict[int, str] = {}
        self._parent_by_category: dict[int, int] = {}
        for category in categories:
            self._category_names[category.id] = category.name
            self._parent_by_category[category.id] = category.parent_category_id
        self._wallet_names = {wallet.id: wallet.name for wallet in wallets}

    def resolve(self, category_id: int) -> ResolvedCategory:
        """Return the category name and its parent.

        Raises:
            UnknownCategoryError: If the category, or its parent, is missing.
        """
        name = self._category_names.get(category_id)
        if name is None:
            raise UnknownCategoryError(category_id)
        parent_id = self._parent_by_category[category_id]
        parent_name = self._parent_names.get(parent_id)
        if parent_name is None:
            raise UnknownCategoryError(category_id)
        return ResolvedCategory(
            category_name=name,
            parent_category_id=parent_id,
            parent_category_name=parent_name,
        )

    def wallet_name(self, wallet_id: int) -> str | None:
        return self._wallet_names.get(wallet_id)

    def category_ids(self) -> list[int]:
        return sorted(self._category_names)

    def category_name(self, category_id: int) -> str | None:
        return self._category_names.get(category_id)


__all__ = ["CategoryDirectory", "ResolvedCategory"]
