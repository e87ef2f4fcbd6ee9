"""Expense tracker: validated transactions behind a single active filter."""

__version__ = "1.0.0"
