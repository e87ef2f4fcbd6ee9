# expense_tracker/controllers/expense_tracker_controller.py
"""
ExpenseTrackerController: the one place that decides what is on screen.

Key points:
• Raw user input is validated here; the store and the filters trust their callers.
• At most one filter is active. Activating a filter replaces the previous one.
• Every successful change ends with refresh(), which pushes (visible, total) to the view.
• Rejections are returned as OperationResult values; no exception leaves the controller.

Public surface (stable):
    class ExpenseTrackerController:
        def __init__(self, store, view=None) -> None
        def add_transaction(self, amount, category) -> OperationResult
        def remove_transaction(self, transaction) -> OperationResult
        def apply_filter(self, selection_kind, raw_parameter) -> OperationResult
        def set_filter(self, f) -> OperationResult
        def clear_filter(self) -> OperationResult
        def refresh(self) -> RefreshSnapshot

        @property def store(self) -> TransactionStore
        @property def filter_state(self) -> FilterState
        @property def active_filter(self) -> CategoryFilter | AmountFilter | None
        @property def visible(self) -> tuple[ITransaction, ...]
        @property def total(self) -> float
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from expense_tracker.data_model import (
    NO_FILTER,
    AmountFilter,
    CategoryFilter,
    EnumFilterKind,
    FilterState,
    ITransaction,
    ITransactionView,
    Transaction,
    filter_state_for,
)
from expense_tracker.utilities.core_util import parse_amount_text
from expense_tracker.utilities.exceptions import (
    InvalidAmount,
    InvalidCategory,
    InvalidFilterParameter,
    UnparsableNumber,
)
from expense_tracker.utilities.input_validation import is_valid_amount, is_valid_category

from .transaction_store import TransactionStore

log = logging.getLogger(__name__)

# user-facing messages
MSG_INVALID_AMOUNT = "Invalid amount"
MSG_INVALID_CATEGORY = "Invalid category"
MSG_INVALID_CATEGORY_PARAM = "Invalid category parameter"
MSG_INVALID_AMOUNT_PARAM = "Amount parameter is invalid"
MSG_UNPARSABLE_AMOUNT_PARAM = "Invalid number for amount filter"

_NONE_TOKENS = ("", EnumFilterKind.NONE.value)


class EnumResultStatus(Enum):
    ACCEPTED = "accepted"
    AMOUNT_INVALID = "amount-invalid"
    CATEGORY_INVALID = "category-invalid"
    PARAMETER_NUMBER_UNPARSABLE = "parameter-number-unparsable"
    FILTER_PARAMETER_INVALID = "filter-parameter-invalid"


@dataclass(frozen=True)
class OperationResult:
    """
    Outcome of a controller operation.

    Truthy only when the operation was accepted, so it can be used wherever a
    plain accepted/rejected boolean is expected. ``message`` is suitable for
    showing to the user.
    """

    status: EnumResultStatus
    message: str = ""

    @property
    def accepted(self) -> bool:
        return self.status is EnumResultStatus.ACCEPTED

    def __bool__(self) -> bool:
        return self.accepted


ACCEPTED = OperationResult(EnumResultStatus.ACCEPTED)


class RefreshSnapshot(NamedTuple):
    visible: Tuple[ITransaction, ...]
    total: float


class ExpenseTrackerController:
    """
    Wires validated input to the store, owns the active filter, and keeps the view in sync.

    All operations are synchronous: the render push has happened by the time
    a method returns.
    """

    def __init__(
        self, store: TransactionStore, view: Optional[ITransactionView] = None
    ) -> None:
        """
        Args:
            store: where transactions are kept.
            view: receives ``render(visible, total)`` after every change. May be None
                (headless use); the last pushed values stay readable via
                ``visible`` / ``total``.
        """
        self._store: TransactionStore = store
        self._view: Optional[ITransactionView] = view
        self._filter_state: FilterState = NO_FILTER
        self._last: RefreshSnapshot = RefreshSnapshot((), 0.0)

        # initial push so the view starts out showing the store contents
        self.refresh()

    # --- public properties ---

    @property
    def store(self) -> TransactionStore:
        return self._store

    @property
    def filter_state(self) -> FilterState:
        return self._filter_state

    @property
    def active_filter(self) -> Optional[Union[CategoryFilter, AmountFilter]]:
        return self._filter_state.filter

    @property
    def visible(self) -> Tuple[ITransaction, ...]:
        """Transactions pushed to the view by the last refresh."""
        return self._last.visible

    @property
    def total(self) -> float:
        """Total pushed to the view by the last refresh."""
        return self._last.total

    # --- transactions ---

    def add_transaction(self, amount: float, category: str) -> OperationResult:
        """
        Validate, record and display a new transaction.

        The amount must be in (0, 1000] and the category one of the known
        categories. On rejection nothing is stored and the view is not touched.
        The category is stored exactly as supplied.
        """
        try:
            transaction = self._validated_transaction(amount, category)
        except InvalidAmount as e:
            log.warning("Rejected transaction: %s", e)
            return OperationResult(EnumResultStatus.AMOUNT_INVALID, MSG_INVALID_AMOUNT)
        except InvalidCategory as e:
            log.warning("Rejected transaction: %s", e)
            return OperationResult(EnumResultStatus.CATEGORY_INVALID, MSG_INVALID_CATEGORY)

        self._store.add(transaction)
        log.info("Added transaction: %s %s", transaction.amount, transaction.category)
        self.refresh()
        return ACCEPTED

    def remove_transaction(self, transaction: ITransaction) -> OperationResult:
        """Remove this exact transaction, then refresh. Unknown transactions are ignored."""
        before = len(self._store)
        self._store.remove(transaction)
        if len(self._store) < before:
            log.info("Removed transaction: %s %s", transaction.amount, transaction.category)
        else:
            log.debug("Nothing removed; transaction not stored: %r", transaction)
        self.refresh()
        return ACCEPTED

    # --- filtering ---

    def apply_filter(self, selection_kind: object, raw_parameter: object) -> OperationResult:
        """
        Activate the filter named by ``selection_kind``, built from ``raw_parameter``.

        Kinds (case-insensitive): "none", "category", "amount-min" (the combobox
        labels "None", "Category" and "Amount >=" also work). Unrecognized kinds
        behave like "none".

        Returns:
            ACCEPTED when the filter slot changed, otherwise one of
            PARAMETER_NUMBER_UNPARSABLE (amount text is not a number) or
            FILTER_PARAMETER_INVALID (category or amount fails validation).
            A rejected call leaves the current filter in place.
        """
        kind = EnumFilterKind.from_token(selection_kind)
        if kind is EnumFilterKind.NONE:
            if not self._is_none_token(selection_kind):
                log.warning("Unknown filter selection %r; clearing filter", selection_kind)
            return self.clear_filter()

        try:
            f = self._build_filter(kind, raw_parameter)
        except UnparsableNumber as e:
            log.warning("Rejected %s filter: %s", kind, e)
            return OperationResult(
                EnumResultStatus.PARAMETER_NUMBER_UNPARSABLE, MSG_UNPARSABLE_AMOUNT_PARAM
            )
        except InvalidFilterParameter as e:
            log.warning("Rejected %s filter: %s", kind, e)
            return OperationResult(EnumResultStatus.FILTER_PARAMETER_INVALID, str(e))

        return self.set_filter(f)

    def set_filter(self, f: Union[CategoryFilter, AmountFilter]) -> OperationResult:
        """Make an already-built filter the active one (replacing any other) and refresh."""
        self._filter_state = filter_state_for(f)
        log.info("Active filter: %s", self._filter_state.describe())
        self.refresh()
        return ACCEPTED

    def clear_filter(self) -> OperationResult:
        """Drop the active filter, if any, and show every stored transaction."""
        self._filter_state = NO_FILTER
        log.info("Active filter cleared")
        self.refresh()
        return ACCEPTED

    # --- view sync ---

    def refresh(self) -> RefreshSnapshot:
        """
        Recompute what is visible and push it to the view.

        Visible = the store snapshot narrowed by the active filter; total = sum of
        the visible amounts. Nothing but the push happens, so two calls in a row
        push identical values.
        """
        visible = tuple(self._filter_state.apply(self._store.snapshot()))
        total = sum((float(t.amount) for t in visible), 0.0)
        self._last = RefreshSnapshot(visible, total)
        log.debug(
            "Refresh: %d visible (%s), total %.2f",
            len(visible),
            self._filter_state.describe(),
            total,
        )
        if self._view is not None:
            self._view.render(visible, total)
        return self._last

    # --- helpers ---

    @staticmethod
    def _validated_transaction(amount: float, category: str) -> Transaction:
        if not is_valid_amount(amount):
            raise InvalidAmount(f"amount {amount!r} is not in (0, 1000]")
        if not is_valid_category(category):
            raise InvalidCategory(f"category {category!r} is not a known category")
        return Transaction(float(amount), category)

    @staticmethod
    def _build_filter(
        kind: EnumFilterKind, raw_parameter: object
    ) -> Union[CategoryFilter, AmountFilter]:
        if kind is EnumFilterKind.CATEGORY:
            try:
                return CategoryFilter(raw_parameter)  # type: ignore[arg-type]
            except InvalidCategory as e:
                raise InvalidFilterParameter(MSG_INVALID_CATEGORY_PARAM) from e

        # AMOUNT_MIN
        min_amount = parse_amount_text(raw_parameter)
        if not is_valid_amount(min_amount):
            raise InvalidFilterParameter(MSG_INVALID_AMOUNT_PARAM)
        return AmountFilter(min_amount)

    @staticmethod
    def _is_none_token(token: object) -> bool:
        if token is None or token is EnumFilterKind.NONE:
            return True
        return isinstance(token, str) and token.strip().lower() in _NONE_TOKENS
