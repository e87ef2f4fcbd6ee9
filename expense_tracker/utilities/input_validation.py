# expense_tracker/utilities/input_validation.py
"""
Business-rule predicates for user input.

Both functions are pure and never raise; callers decide how to report a
``False`` result.
"""
from __future__ import annotations

import math
import re
from decimal import Decimal
from numbers import Real

from .config_tracker import MAX_AMOUNT, MIN_AMOUNT_EXCLUSIVE, VALID_CATEGORIES
from .core_util import is_null_or_whitespace

_LETTERS_ONLY = re.compile(r"[A-Za-z]+")


def is_valid_amount(amount: object) -> bool:
    """Return True iff ``0 < amount <= 1000``. Non-numbers and NaN are invalid."""
    if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
        return False
    if isinstance(amount, float) and math.isnan(amount):
        return False
    if isinstance(amount, Decimal) and amount.is_nan():
        return False
    return MIN_AMOUNT_EXCLUSIVE < amount <= MAX_AMOUNT


def is_valid_category(category: object) -> bool:
    """
    Return True iff ``category`` names one of the known categories.

    The value must be a non-blank string made only of ASCII letters
    (no digits, punctuation, or whitespace anywhere), and its lower-case
    form must be one of: food, travel, bills, entertainment, other.
    """
    if not isinstance(category, str) or is_null_or_whitespace(category):
        return False
    if _LETTERS_ONLY.fullmatch(category) is None:
        return False
    return category.lower() in VALID_CATEGORIES
