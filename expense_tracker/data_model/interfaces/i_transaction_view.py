# expense_tracker/data_model/interfaces/i_transaction_view.py
from __future__ import annotations

from typing import Sequence, runtime_checkable

from typing_extensions import Protocol

from .i_transaction import ITransaction


@runtime_checkable
class ITransactionView(Protocol):
    """Presentation collaborator that receives every refreshed view of the data."""

    def render(
        self, visible_transactions: Sequence[ITransaction], total_amount: float
    ) -> None: ...
