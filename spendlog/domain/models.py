"""Domain type definitions for spendlog.

These NewTypes provide semantic clarity and help with type checking:
- Money: Amount in cents (minor units)
- CategoryName: Name of an expense category
- Description: Free-text expense description
"""

from typing import NewType

# Money amounts are stored as cents (minor units) to avoid floating point errors
Money = NewType("Money", int)

# Category name, compared exactly when grouping
CategoryName = NewType("CategoryName", str)

# Expense description text, may be empty
Description = NewType("Description", str)
