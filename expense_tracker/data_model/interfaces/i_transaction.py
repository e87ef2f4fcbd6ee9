# expense_tracker/data_model/interfaces/i_transaction.py
from __future__ import annotations

from typing import runtime_checkable

from typing_extensions import Protocol

from .i_to_dict import IToDict


@runtime_checkable
class ITransaction(IToDict, Protocol):
    """Structural shape of a recorded expense, sufficient for filtering and display."""

    @property
    def amount(self) -> float: ...
    @property
    def category(self) -> str: ...
    @property
    def timestamp(self) -> str: ...
