#!/usr/bin/env python3
"""
Core Utilities

Features:
- String utilities
- Lenient number parsing for text typed into entry fields
"""

from __future__ import annotations

import re
from decimal import Decimal
from numbers import Real
from typing import Optional

from .exceptions import UnparsableNumber

# thousands separators and any whitespace a user may type around digits
_STRIP_RE = re.compile(r"[,\s]")


def is_null_or_whitespace(s: Optional[str]) -> bool:
    """Check if a string is None, empty, or consists only of whitespace."""
    return s is None or s.strip() == ""


def parse_amount_text(value: object) -> float:
    """
    Convert a raw amount (number or text) to ``float``.

    Accepts:
      • int / float / Decimal → returned as float
      • str such as "50", " 1,000.5 ", "-3" → commas and whitespace removed, then parsed

    Raises
    ------
    UnparsableNumber
        If the value is None, a bool, blank, or not a number.
    """
    if isinstance(value, bool) or value is None:
        raise UnparsableNumber(f"Cannot convert {type(value).__name__} to a number")
    if isinstance(value, (Real, Decimal)):
        return float(value)
    if isinstance(value, str):
        s = _STRIP_RE.sub("", value)
        if not s:
            raise UnparsableNumber("Empty text is not a number")
        try:
            return float(s)
        except ValueError as e:
            raise UnparsableNumber(f"Not a number: {value!r}") from e
    raise UnparsableNumber(f"Cannot convert {type(value).__name__} to a number")
