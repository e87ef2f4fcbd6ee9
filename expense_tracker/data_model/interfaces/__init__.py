"""
Interfaces and Enums for the expense tracker data model.
"""

from .enum_filter_kind import EnumFilterKind
from .i_to_dict import IToDict, RecursiveDictStr
from .i_transaction import ITransaction
from .i_transaction_filter import ITransactionFilter
from .i_transaction_view import ITransactionView

__all__ = [
    "EnumFilterKind",
    "IToDict",
    "ITransaction",
    "ITransactionFilter",
    "ITransactionView",
    "RecursiveDictStr",
]
