# expense_tracker/data_model/filters/amount_filter.py
from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from numbers import Real
from typing import TYPE_CHECKING, Iterable, Optional

from ..interfaces import EnumFilterKind, ITransaction, ITransactionFilter


@dataclass(frozen=True)
class AmountFilter:
    """
    Keeps transactions whose amount is at least ``min_amount`` (inclusive).

    The threshold is taken as given; zero and negative thresholds are allowed.
    Checking user-entered thresholds is the controller's job.
    """

    min_amount: float

    @property
    def kind(self) -> EnumFilterKind:
        return EnumFilterKind.AMOUNT_MIN

    def filter(
        self, transactions: Iterable[Optional[ITransaction]]
    ) -> list[ITransaction]:
        out: list[ITransaction] = []
        for t in transactions:
            amount = getattr(t, "amount", None)
            if isinstance(amount, bool) or not isinstance(amount, (Real, Decimal)):
                continue
            if amount >= self.min_amount:
                out.append(t)
        return out

    apply = filter

    def describe(self) -> str:
        return f"Amount >= {self.min_amount:.2f}"


if TYPE_CHECKING:
    _is_i_transaction_filter: type[ITransactionFilter] = AmountFilter
