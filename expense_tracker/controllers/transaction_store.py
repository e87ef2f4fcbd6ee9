# expense_tracker/controllers/transaction_store.py
from __future__ import annotations

import logging
from typing import Iterator, List, Tuple

from expense_tracker.data_model.interfaces import ITransaction

log = logging.getLogger(__name__)


class TransactionStore:
    """
    Owns the recorded transactions, in insertion order.

    Insertion order is the order used for display and for totals. Callers only
    ever see immutable snapshots; ``add`` and ``remove`` are the only way to
    change the contents. Nothing is validated here, and duplicates are allowed:
    two transactions with equal values are separate entries.
    """

    def __init__(self) -> None:
        self._transactions: List[ITransaction] = []

    def add(self, transaction: ITransaction) -> None:
        """Append ``transaction`` to the end of the sequence."""
        self._transactions.append(transaction)
        log.debug("Stored transaction #%d: %r", len(self._transactions), transaction)

    def remove(self, transaction: ITransaction) -> None:
        """
        Remove this exact instance (matched by identity, not by value).

        Removing a transaction that is not stored does nothing.
        """
        for i, t in enumerate(self._transactions):
            if t is transaction:
                del self._transactions[i]
                log.debug("Removed transaction at index %d", i)
                return
        log.debug("Remove ignored; transaction not stored: %r", transaction)

    def snapshot(self) -> Tuple[ITransaction, ...]:
        """Return the current contents as a tuple. Later changes to the store do not show up in it."""
        return tuple(self._transactions)

    @property
    def transactions(self) -> Tuple[ITransaction, ...]:
        return self.snapshot()

    def total_amount(self) -> float:
        return sum((float(t.amount) for t in self._transactions), 0.0)

    def __len__(self) -> int:
        return len(self._transactions)

    def __iter__(self) -> Iterator[ITransaction]:
        return iter(self.snapshot())

    def __repr__(self) -> str:
        return f"TransactionStore({len(self._transactions)} transactions)"
