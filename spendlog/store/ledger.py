"""Append-only, in-memory expense ledger."""

import logging
from decimal import Decimal
from typing import Iterator

from spendlog.domain.expenses import (
    Expense,
    FilterResult,
    Summary,
    create_expense,
    filter_expenses,
    summarize_expenses,
)

logger = logging.getLogger(__name__)


class Ledger:
    """Ordered collection of expenses in arrival order.

    Owned by a single caller; there is no locking. Expenses can only be
    appended through add().
    """

    def __init__(self) -> None:
        self._expenses: list[Expense] = []

    def __len__(self) -> int:
        return len(self._expenses)

    def __iter__(self) -> Iterator[Expense]:
        return iter(tuple(self._expenses))

    def add(
        self,
        date_text: str,
        amount: float | int | str | Decimal,
        category: str,
        description: str = "",
    ) -> Expense:
        """Validate and append a new expense.

        Args:
            date_text: Expense date (YYYY-MM-DD).
            amount: Amount in dollars, must be positive.
            category: Category name, must not be empty.
            description: Optional free text.

        Returns:
            The stored Expense.

        Raises:
            InvalidDate: If the date is malformed or not a real date.
            InvalidAmount: If the amount is not positive.
            EmptyCategory: If the category is empty.
        """
        expense = create_expense(date_text, amount, category, description)
        self._expenses.append(expense)
        logger.debug("Added expense %s %s %d", expense.date, expense.category, expense.amount)
        return expense

    def filter(
        self,
        start: str | None = None,
        end: str | None = None,
        category: str | None = None,
    ) -> FilterResult:
        """Return expenses within the date range and category.

        Bounds that fail to parse are ignored and reported in
        FilterResult.ignored_bounds.
        """
        result = filter_expenses(self._expenses, start, end, category)
        for ignored in result.ignored_bounds:
            logger.info(ignored.message)
        return result

    def summarize(self) -> Summary:
        """Total all expenses per category and overall."""
        return summarize_expenses(self._expenses)

    def get_all(self) -> tuple[Expense, ...]:
        """Return every expense in insertion order."""
        return tuple(self._expenses)
