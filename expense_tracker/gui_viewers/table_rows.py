# expense_tracker/gui_viewers/table_rows.py
"""Turn a rendered (visible, total) pair into table rows. No tkinter here."""
from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

from expense_tracker.data_model.interfaces import ITransaction
from expense_tracker.utilities.config_tracker import TOTAL_ROW_LABEL

Row = Tuple[Union[int, str], Optional[float], Optional[str], Optional[str]]


def build_table_rows(visible: Sequence[ITransaction], total: float) -> List[Row]:
    """
    One row per transaction, numbered from 1 in sequence order, then a total row.

    Columns follow ``TABLE_COLUMNS``: (serial, amount, category, date).
    The total row is ``("Total", total, None, None)``.
    """
    rows: List[Row] = [
        (i, t.amount, t.category, t.timestamp) for i, t in enumerate(visible, start=1)
    ]
    rows.append((TOTAL_ROW_LABEL, total, None, None))
    return rows


def format_row(row: Row) -> Tuple[str, str, str, str]:
    """Display strings for a row: amounts with two decimals, empty cells for None."""
    serial, amount, category, stamp = row
    return (
        str(serial),
        "" if amount is None else f"{amount:.2f}",
        category or "",
        stamp or "",
    )
