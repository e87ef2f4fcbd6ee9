"""Exception classes for the expense tracker."""


class ExpenseTrackerError(Exception):
    """Base exception for the expense tracker."""
    pass


class InvalidAmount(ExpenseTrackerError, ValueError):
    """Amount outside of (0, 1000]."""
    pass


class InvalidCategory(ExpenseTrackerError, ValueError):
    """Category missing, blank, non-alphabetic, or not one of the known categories."""
    pass


class UnparsableNumber(ExpenseTrackerError, ValueError):
    """Text that should hold a number could not be parsed as one."""
    pass


class InvalidFilterParameter(ExpenseTrackerError, ValueError):
    """A filter could not be built from the parameter the user supplied."""
    pass
