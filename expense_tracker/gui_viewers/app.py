# expense_tracker/gui_viewers/app.py
from __future__ import annotations

import logging
import tkinter as tk
from tkinter import messagebox, ttk
from types import SimpleNamespace
from typing import TYPE_CHECKING, List, Optional, Sequence

from expense_tracker.controllers import ExpenseTrackerController, TransactionStore
from expense_tracker.controllers.expense_tracker_controller import MSG_INVALID_AMOUNT
from expense_tracker.data_model.interfaces import ITransaction, ITransactionView
from expense_tracker.utilities import (
    UnparsableNumber,
    configure_logging,
    is_null_or_whitespace,
    parse_amount_text,
)
from expense_tracker.utilities.config_tracker import (
    FILTER_CHOICES,
    TABLE_COLUMNS,
    WINDOW_TITLE,
)

from .table_rows import Row, build_table_rows, format_row

log = logging.getLogger(__name__)


class App(tk.Tk):
    """
    Main window: input row, filter row, and the transaction table.

    The window only reads raw input and shows what the controller pushes
    through ``render``. Bind a controller with ``bind_controller`` before the
    buttons are used.
    """

    def __init__(self, messagebox_api=None):
        super().__init__()
        self.title(WINDOW_TITLE)
        self.geometry("640x420")

        # Dependency-injected messagebox wrapper; calls module functions at call time
        self.mb = messagebox_api or SimpleNamespace(
            showinfo=lambda *a, **k: messagebox.showinfo(*a, **k),
            showerror=lambda *a, **k: messagebox.showerror(*a, **k),
        )
        self.controller: Optional[ExpenseTrackerController] = None
        self.rows: List[Row] = []

        self.amount_var = tk.StringVar(value="")
        self.category_var = tk.StringVar(value="")
        self.filter_var = tk.StringVar(value=FILTER_CHOICES[0])
        self.filter_param_var = tk.StringVar(value="")
        self.status_var = tk.StringVar(value="")

        # --- input row ---
        inputs = ttk.Frame(self)
        inputs.pack(fill="x", padx=8, pady=(8, 4))
        ttk.Label(inputs, text="Amount:").grid(row=0, column=0, sticky="w")
        ttk.Entry(inputs, textvariable=self.amount_var, width=10).grid(row=0, column=1, padx=4)
        ttk.Label(inputs, text="Category:").grid(row=0, column=2, sticky="w")
        ttk.Entry(inputs, textvariable=self.category_var, width=14).grid(row=0, column=3, padx=4)
        self.add_btn = ttk.Button(inputs, text="Add Transaction", command=self._on_add)
        self.add_btn.grid(row=0, column=4, padx=4)

        # --- filter row ---
        filters = ttk.Frame(self)
        filters.pack(fill="x", padx=8, pady=4)
        ttk.Label(filters, text="Filter:").grid(row=0, column=0, sticky="w")
        self.filter_combo = ttk.Combobox(
            filters,
            textvariable=self.filter_var,
            values=FILTER_CHOICES,
            state="readonly",
            width=10,
        )
        self.filter_combo.grid(row=0, column=1, padx=4)
        ttk.Entry(filters, textvariable=self.filter_param_var, width=14).grid(row=0, column=2, padx=4)
        self.apply_filter_btn = ttk.Button(filters, text="Apply Filter", command=self._on_apply_filter)
        self.apply_filter_btn.grid(row=0, column=3, padx=4)

        # --- table ---
        self.table = ttk.Treeview(self, columns=TABLE_COLUMNS, show="headings")
        for col in TABLE_COLUMNS:
            self.table.heading(col, text=col)
            self.table.column(col, width=120, anchor="w")
        self.table.pack(fill="both", expand=True, padx=8, pady=4)

        ttk.Label(self, textvariable=self.status_var).pack(fill="x", padx=8, pady=(0, 8))

    def bind_controller(self, controller: ExpenseTrackerController) -> None:
        self.controller = controller

    # ---------- ITransactionView ----------

    def render(self, visible_transactions: Sequence[ITransaction], total_amount: float) -> None:
        """Replace the table contents with the numbered rows plus a total row."""
        self.rows = build_table_rows(visible_transactions, total_amount)
        self.table.delete(*self.table.get_children())
        for row in self.rows:
            self.table.insert("", "end", values=format_row(row))
        self.status_var.set(f"{len(visible_transactions)} transaction(s), total {total_amount:.2f}")

    # ---------- raw input ----------

    def read_amount(self) -> float:
        """Amount typed by the user; blank reads as 0. Raises UnparsableNumber for junk."""
        text = self.amount_var.get()
        if is_null_or_whitespace(text):
            return 0.0
        return parse_amount_text(text)

    def read_category(self) -> str:
        return self.category_var.get()

    # ---------- handlers ----------

    def _on_add(self) -> None:
        if self.controller is None:
            raise RuntimeError("No controller bound to the window")
        try:
            amount = self.read_amount()
        except UnparsableNumber as e:
            log.warning("Amount entry not a number: %s", e)
            self.mb.showerror("Error", MSG_INVALID_AMOUNT)
            return
        result = self.controller.add_transaction(amount, self.read_category())
        if not result:
            self.mb.showerror("Error", result.message)

    def _on_apply_filter(self) -> None:
        if self.controller is None:
            raise RuntimeError("No controller bound to the window")
        result = self.controller.apply_filter(self.filter_var.get(), self.filter_param_var.get())
        if not result:
            self.mb.showerror("Error", result.message)


if TYPE_CHECKING:
    _is_i_transaction_view: type[ITransactionView] = App


def main() -> None:
    configure_logging()
    store = TransactionStore()
    app = App()
    app.bind_controller(ExpenseTrackerController(store, app))
    log.info("Expense tracker started")
    app.mainloop()


if __name__ == "__main__":
    main()
