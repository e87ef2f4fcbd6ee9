from .expense_tracker_controller import (
    EnumResultStatus,
    ExpenseTrackerController,
    OperationResult,
    RefreshSnapshot,
)
from .transaction_store import TransactionStore

__all__ = [
    "ExpenseTrackerController",
    "EnumResultStatus",
    "OperationResult",
    "RefreshSnapshot",
    "TransactionStore",
]
