from .config_logging import LOGGING, build_logging_config, configure_logging
from .core_util import is_null_or_whitespace, parse_amount_text
from .exceptions import (
    ExpenseTrackerError,
    InvalidAmount,
    InvalidCategory,
    InvalidFilterParameter,
    UnparsableNumber,
)
from .input_validation import is_valid_amount, is_valid_category

__all__ = [
    "is_null_or_whitespace",
    "parse_amount_text",
    "is_valid_amount",
    "is_valid_category",
    "ExpenseTrackerError",
    "InvalidAmount",
    "InvalidCategory",
    "InvalidFilterParameter",
    "UnparsableNumber",
    "LOGGING",
    "build_logging_config",
    "configure_logging",
]
