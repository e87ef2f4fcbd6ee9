# expense_tracker/data_model/__init__.py
from .filter_state import (
    NO_FILTER,
    AmountActive,
    CategoryActive,
    FilterState,
    NoFilter,
    filter_state_for,
)
from .filters import AmountFilter, CategoryFilter
from .interfaces import (
    EnumFilterKind,
    IToDict,
    ITransaction,
    ITransactionFilter,
    ITransactionView,
)
from .transaction import Transaction

__all__ = [
    "Transaction", "AmountFilter", "CategoryFilter", "EnumFilterKind",
    "IToDict", "ITransaction", "ITransactionFilter", "ITransactionView",
    "FilterState", "NoFilter", "CategoryActive", "AmountActive",
    "NO_FILTER", "filter_state_for"]
