# expense_tracker/data_model/filter_state.py
"""
The controller's single filter slot, as a closed set of states.

    NoFilter                 nothing narrows the view (initial state)
    CategoryActive(filter)   a CategoryFilter is active
    AmountActive(filter)     an AmountFilter is active

Each state knows how to turn the stored transactions into the visible ones,
so the controller never has to test for a missing filter.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Union

from .filters import AmountFilter, CategoryFilter
from .interfaces import EnumFilterKind, ITransaction


@dataclass(frozen=True)
class NoFilter:
    @property
    def kind(self) -> EnumFilterKind:
        return EnumFilterKind.NONE

    @property
    def filter(self) -> None:
        return None

    def apply(self, transactions: Iterable[ITransaction]) -> list[ITransaction]:
        return list(transactions)

    def describe(self) -> str:
        return "No filter"


@dataclass(frozen=True)
class CategoryActive:
    filter: CategoryFilter

    @property
    def kind(self) -> EnumFilterKind:
        return EnumFilterKind.CATEGORY

    def apply(self, transactions: Iterable[ITransaction]) -> list[ITransaction]:
        return self.filter.filter(transactions)

    def describe(self) -> str:
        return self.filter.describe()


@dataclass(frozen=True)
class AmountActive:
    filter: AmountFilter

    @property
    def kind(self) -> EnumFilterKind:
        return EnumFilterKind.AMOUNT_MIN

    def apply(self, transactions: Iterable[ITransaction]) -> list[ITransaction]:
        return self.filter.filter(transactions)

    def describe(self) -> str:
        return self.filter.describe()


FilterState = Union[NoFilter, CategoryActive, AmountActive]

NO_FILTER = NoFilter()


def filter_state_for(
    f: Optional[Union[CategoryFilter, AmountFilter]],
) -> FilterState:
    """Wrap a filter object in the matching state; None gives ``NO_FILTER``."""
    if f is None:
        return NO_FILTER
    if isinstance(f, CategoryFilter):
        return CategoryActive(f)
    if isinstance(f, AmountFilter):
        return AmountActive(f)
    raise TypeError(f"Unsupported filter type: {type(f).__name__}")
