"""Domain models and types for spendlog.

This package contains the functional core:
- Pure functions with no side effects
- No I/O operations
- Easy to test
- Business logic separated from the presentation layer
"""

from spendlog.domain.errors import EmptyCategory, InvalidAmount, InvalidDate, LedgerError
from spendlog.domain.models import CategoryName, Description, Money

__all__ = [
    "Money",
    "CategoryName",
    "Description",
    "LedgerError",
    "InvalidDate",
    "InvalidAmount",
    "EmptyCategory",
]
