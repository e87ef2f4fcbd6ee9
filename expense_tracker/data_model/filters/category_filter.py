# expense_tracker/data_model/filters/category_filter.py
from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, Optional

from expense_tracker.utilities.exceptions import InvalidCategory
from expense_tracker.utilities.input_validation import is_valid_category

from ..interfaces import EnumFilterKind, ITransaction, ITransactionFilter


class CategoryFilter:
    """
    Keeps transactions whose category matches, ignoring case.

    "Food", "food" and "FOOD" are the same category. Matching is exact apart
    from case; there is no substring matching.
    """

    __slots__ = ("_category",)

    def __init__(self, category: str) -> None:
        """
        Args:
            category: one of food, travel, bills, entertainment, other (any case).

        Raises:
            InvalidCategory: if ``category`` fails ``is_valid_category``.
        """
        if not is_valid_category(category):
            raise InvalidCategory(f"Invalid category: {category!r}")
        self._category: str = category.strip()

    @property
    def category(self) -> str:
        return self._category

    @property
    def kind(self) -> EnumFilterKind:
        return EnumFilterKind.CATEGORY

    def filter(
        self, transactions: Iterable[Optional[ITransaction]]
    ) -> list[ITransaction]:
        target = self._category.lower()
        out: list[ITransaction] = []
        for t in transactions:
            category = getattr(t, "category", None)
            if isinstance(category, str) and category.lower() == target:
                out.append(t)
        return out

    apply = filter

    def describe(self) -> str:
        return f"Category = {self._category}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CategoryFilter):
            return NotImplemented
        return self._category.lower() == other._category.lower()

    def __hash__(self) -> int:
        return hash(self._category.lower())

    def __repr__(self) -> str:
        return f"CategoryFilter(category={self._category!r})"


if TYPE_CHECKING:
    _is_i_transaction_filter: type[ITransactionFilter] = CategoryFilter
