from __future__ import annotations

import pytest

from expense_tracker.data_model import (
    NO_FILTER,
    AmountActive,
    AmountFilter,
    CategoryActive,
    CategoryFilter,
    EnumFilterKind,
    NoFilter,
    Transaction,
    filter_state_for,
)


@pytest.fixture
def txns():
    return [Transaction(50, "food"), Transaction(75, "travel"), Transaction(150, "food")]


def test_no_filter_returns_everything_as_new_list(txns):
    out = NO_FILTER.apply(txns)
    assert out == txns
    assert out is not txns
    assert NO_FILTER.kind is EnumFilterKind.NONE
    assert NO_FILTER.filter is None


def test_category_active_delegates(txns):
    state = filter_state_for(CategoryFilter("food"))
    assert isinstance(state, CategoryActive)
    assert state.kind is EnumFilterKind.CATEGORY
    assert state.apply(txns) == [txns[0], txns[2]]


def test_amount_active_delegates(txns):
    state = filter_state_for(AmountFilter(60))
    assert isinstance(state, AmountActive)
    assert state.kind is EnumFilterKind.AMOUNT_MIN
    assert state.apply(txns) == [txns[1], txns[2]]
    assert state.describe() == "Amount >= 60.00"


def test_filter_state_for_none_is_no_filter():
    assert isinstance(filter_state_for(None), NoFilter)


def test_filter_state_for_unknown_type_raises():
    with pytest.raises(TypeError):
        filter_state_for(object())  # type: ignore[arg-type]
