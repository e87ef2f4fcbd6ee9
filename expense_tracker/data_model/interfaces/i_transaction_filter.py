# expense_tracker/data_model/interfaces/i_transaction_filter.py
from __future__ import annotations

from typing import Iterable, Optional, runtime_checkable

from typing_extensions import Protocol

from .enum_filter_kind import EnumFilterKind
from .i_transaction import ITransaction


@runtime_checkable
class ITransactionFilter(Protocol):
    """
    Strategy that selects transactions from a sequence.

    Implementations return a new list holding the matching transactions in
    their original order. The input is never modified, and items that are
    None or lack the inspected value are left out rather than raising.
    """

    @property
    def kind(self) -> EnumFilterKind: ...

    def filter(
        self, transactions: Iterable[Optional[ITransaction]]
    ) -> list[ITransaction]: ...

    def describe(self) -> str: ...
