# expense_tracker/data_model/filters/__init__.py

from .amount_filter import AmountFilter
from .category_filter import CategoryFilter

__all__ = [
    "AmountFilter",
    "CategoryFilter",
]
