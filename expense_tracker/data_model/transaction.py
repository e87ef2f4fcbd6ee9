# expense_tracker/data_model/transaction.py
from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import TYPE_CHECKING

from expense_tracker.utilities.config_tracker import TIMESTAMP_FORMAT

from .interfaces import IToDict, ITransaction, RecursiveDictStr


def _now() -> datetime:
    return datetime.now()


def _generate_timestamp() -> str:
    """Format the current instant as ``dd-mm-YYYY HH:MM`` (e.g. "28-10-2025 14:30")."""
    return _now().strftime(TIMESTAMP_FORMAT)


@dataclass(frozen=True, eq=False)
class Transaction:
    """
    A single recorded expense.

    Instances are immutable. ``timestamp`` is stamped once, when the object is
    built, and cannot be supplied by the caller. Equality is identity: two
    transactions with the same amount and category are still distinct entries.

    No validation happens here; ``ExpenseTrackerController.add_transaction`` is
    the validated way to create and record one.
    """

    amount: float
    category: str
    timestamp: str = field(init=False, default_factory=_generate_timestamp)

    def to_dict(self) -> dict[str, RecursiveDictStr]:
        return {
            "amount": str(self.amount),
            "category": self.category,
            "timestamp": self.timestamp,
        }


if TYPE_CHECKING:
    _is_i_transaction: type[ITransaction] = Transaction
    _is_IToDict: type[IToDict] = Transaction
