# expense_tracker/data_model/interfaces/enum_filter_kind.py
from __future__ import annotations

from enum import Enum


class EnumFilterKind(Enum):
    """Kinds of filter the user can select. Only one is active at a time."""

    NONE = "none"
    CATEGORY = "category"
    AMOUNT_MIN = "amount-min"

    @classmethod
    def from_token(cls, token: object) -> "EnumFilterKind":
        """
        Map a selection token to a kind.

        Tokens are matched case-insensitively. Besides the enum values, the
        combobox labels "None", "Category" and "Amount >=" are understood
        (anything starting with "amount" selects AMOUNT_MIN).
        Unrecognized tokens, including None, map to NONE.
        """
        if isinstance(token, cls):
            return token
        if not isinstance(token, str):
            return cls.NONE
        t = token.strip().lower()
        if t == cls.CATEGORY.value:
            return cls.CATEGORY
        if t.startswith("amount"):
            return cls.AMOUNT_MIN
        return cls.NONE

    def __str__(self) -> str:
        return self.value
