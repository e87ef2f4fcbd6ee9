# expense_tracker/utilities/config_tracker.py
from __future__ import annotations

from typing import Final

# Business rules
VALID_CATEGORIES: Final[frozenset[str]] = frozenset(
    {"food", "travel", "bills", "entertainment", "other"}
)
MIN_AMOUNT_EXCLUSIVE: Final[float] = 0
MAX_AMOUNT: Final[float] = 1000

# Display
TIMESTAMP_FORMAT: Final[str] = "%d-%m-%Y %H:%M"
TABLE_COLUMNS: Final[tuple[str, ...]] = ("serial", "Amount", "Category", "Date")
TOTAL_ROW_LABEL: Final[str] = "Total"
FILTER_CHOICES: Final[tuple[str, ...]] = ("None", "Category", "Amount >=")
WINDOW_TITLE: Final[str] = "Expense Tracker"

# Logging
LOG_DIR_ENV: Final[str] = "EXPENSE_TRACKER_LOG_DIR"
DEFAULT_LOG_DIR: Final[str] = "logs"
LOG_FILE_NAME: Final[str] = "app.log"
