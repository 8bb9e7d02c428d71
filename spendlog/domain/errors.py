"""Errors raised by the ledger core.

All of them are recoverable: the caller reports the message and lets the
user try again.
"""


class LedgerError(ValueError):
    """Base class for rejected ledger input."""


class InvalidDate(LedgerError):
    """Date string is malformed or not a real calendar date."""

    def __init__(self, text: str) -> None:
        super().__init__(f"Invalid date '{text}'. Please use YYYY-MM-DD.")
        self.text = text


class InvalidAmount(LedgerError):
    """Amount is not a positive number of cents."""

    def __init__(self, amount: object, reason: str = "Amount must be positive.") -> None:
        super().__init__(f"Invalid amount '{amount}'. {reason}")
        self.amount = amount


class EmptyCategory(LedgerError):
    """Category was blank."""

    def __init__(self) -> None:
        super().__init__("Category cannot be empty.")
