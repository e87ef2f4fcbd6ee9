from __future__ import annotations

from decimal import Decimal

import pytest

from expense_tracker.utilities.input_validation import is_valid_amount, is_valid_category


# ---------- is_valid_amount ----------
@pytest.mark.parametrize("amount", [0.01, 1, 50.0, 999.99, 1000, 1000.0, Decimal("12.5")])
def test_is_valid_amount_accepts_range(amount):
    assert is_valid_amount(amount) is True


@pytest.mark.parametrize("amount", [0, 0.0, -0.01, -50, 1000.01, 1500, float("inf")])
def test_is_valid_amount_rejects_out_of_range(amount):
    assert is_valid_amount(amount) is False


@pytest.mark.parametrize("amount", [None, "50", True, float("nan"), Decimal("NaN")])
def test_is_valid_amount_rejects_non_numbers_without_raising(amount):
    assert is_valid_amount(amount) is False


# ---------- is_valid_category ----------
@pytest.mark.parametrize(
    "category", ["food", "travel", "bills", "entertainment", "other", "Food", "TRAVEL", "BiLlS"]
)
def test_is_valid_category_accepts_known_words_any_case(category):
    assert is_valid_category(category) is True


@pytest.mark.parametrize(
    "category",
    [
        None,
        "",
        "   ",
        "groceries",
        "food123",
        "food!",
        "fo od",
        "food-bills",
        " food",
        "food ",
        "café",
        "bogus",
    ],
)
def test_is_valid_category_rejects(category):
    assert is_valid_category(category) is False


def test_is_valid_category_rejects_non_strings():
    assert is_valid_category(42) is False
    assert is_valid_category(["food"]) is False
