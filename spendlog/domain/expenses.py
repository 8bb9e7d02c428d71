"""Pure functions for expense validation, filtering and summaries.

This module contains the functional core for expense operations:
- No I/O operations (no console, no files)
- No side effects
- Pure data transformations
- Easy to test

All monetary amounts are in cents (Money type).
"""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Iterable, Literal

from spendlog.dates import CalendarDate, parse_date
from spendlog.domain.errors import EmptyCategory, InvalidAmount, InvalidDate
from spendlog.domain.models import CategoryName, Description, Money

Bound = Literal["start", "end"]
SummarySort = Literal["alpha", "value", "insertion"]

# Amounts at or above this many dollars are rejected
MAX_AMOUNT = Decimal("1e12")
CENT = Decimal("0.01")


@dataclass(frozen=True)
class Expense:
    """Immutable expense record."""

    date: CalendarDate
    amount: Money
    category: CategoryName
    description: Description = Description("")


@dataclass(frozen=True)
class IgnoredBound:
    """Filter bound that could not be parsed and was left out."""

    bound: Bound
    text: str

    @property
    def message(self) -> str:
        """Warning text for the ignored bound."""
        return f"Invalid {self.bound} date '{self.text}'. Ignoring."


@dataclass(frozen=True)
class FilterResult:
    """Immutable filter result with any ignored-bound diagnostics."""

    expenses: tuple[Expense, ...]
    ignored_bounds: tuple[IgnoredBound, ...] = ()


@dataclass(frozen=True)
class Summary:
    """Per-category totals and grand total."""

    totals: dict[CategoryName, Money]
    total: Money


def to_minor_units(amount: float | int | str | Decimal) -> Money:
    """Convert a major-unit amount to cents.

    Args:
        amount: Amount in dollars (e.g. 45.90 or "45.90").

    Returns:
        Amount in cents. Nothing is rounded away.

    Raises:
        InvalidAmount: If the amount is not a finite number, has more than
            two decimal places, or is too large.
    """
    if isinstance(amount, bool):
        raise InvalidAmount(amount)

    try:
        value = Decimal(str(amount).strip())
    except InvalidOperation:
        raise InvalidAmount(amount) from None

    if not value.is_finite():
        raise InvalidAmount(amount)

    if abs(value) >= MAX_AMOUNT:
        raise InvalidAmount(amount, f"Amount must be below {MAX_AMOUNT:,f}.")

    if value != value.quantize(CENT):
        raise InvalidAmount(amount, "Amount can have at most two decimal places.")

    return Money(int(value * 100))


def format_money(amount: Money, symbol: str = "$") -> str:
    """Format cents for display.

    Args:
        amount: Amount in cents.
        symbol: Currency symbol prefix.

    Returns:
        Formatted string (e.g., "$1,234.50" or "-$3.00").
    """
    formatted = f"{symbol}{abs(amount) / 100:,.2f}"
    return f"-{formatted}" if amount < 0 else formatted


def create_expense(
    date_text: str,
    amount: float | int | str | Decimal,
    category: str,
    description: str = "",
) -> Expense:
    """Validate raw input and build an Expense.

    Checks run in order: date, amount, category. The first failure is raised.

    Raises:
        InvalidDate: If the date cannot be parsed.
        InvalidAmount: If the amount is not positive.
        EmptyCategory: If the category is empty.
    """
    date = parse_date(date_text)

    cents = to_minor_units(amount)
    if cents <= 0:
        raise InvalidAmount(amount)

    if not category:
        raise EmptyCategory()

    return Expense(
        date=date,
        amount=cents,
        category=CategoryName(category),
        description=Description(description or ""),
    )


def categories_match(category: str, wanted: str) -> bool:
    """Case-insensitive category match.

    Strings of different length never match.
    """
    if len(category) != len(wanted):
        return False
    return all(a.lower() == b.lower() for a, b in zip(category, wanted))


def resolve_bound(bound: Bound, text: str | None) -> tuple[CalendarDate | None, IgnoredBound | None]:
    """Parse an optional filter bound.

    Args:
        bound: Which bound this is ("start" or "end").
        text: Raw date string; None or empty means no bound.

    Returns:
        Tuple of (date, ignored) where at most one is set.
    """
    if not text:
        return None, None

    try:
        return parse_date(text), None
    except InvalidDate:
        return None, IgnoredBound(bound=bound, text=text)


def expense_matches(
    expense: Expense,
    start: CalendarDate | None,
    end: CalendarDate | None,
    category: str | None,
) -> bool:
    """Check an expense against resolved filter constraints."""
    if start is not None and expense.date < start:
        return False
    if end is not None and expense.date > end:
        return False
    if category and not categories_match(expense.category, category):
        return False
    return True


def filter_expenses(
    expenses: Iterable[Expense],
    start: str | None = None,
    end: str | None = None,
    category: str | None = None,
) -> FilterResult:
    """Filter expenses by date range and category.

    Unparseable date bounds are ignored and reported in the result.

    Args:
        expenses: Expenses in ledger order.
        start: Optional inclusive start date (YYYY-MM-DD).
        end: Optional inclusive end date (YYYY-MM-DD).
        category: Optional category, matched case-insensitively.

    Returns:
        FilterResult with matching expenses in their original order.
    """
    start_date, start_ignored = resolve_bound("start", start)
    end_date, end_ignored = resolve_bound("end", end)
    ignored = tuple(b for b in (start_ignored, end_ignored) if b is not None)

    matched = tuple(e for e in expenses if expense_matches(e, start_date, end_date, category))
    return FilterResult(expenses=matched, ignored_bounds=ignored)


def summarize_expenses(expenses: Iterable[Expense]) -> Summary:
    """Total expenses per category and overall.

    Categories are grouped by exact string, case included.

    Args:
        expenses: Expenses to total.

    Returns:
        Summary with per-category totals in first-seen order.
    """
    totals: dict[CategoryName, Money] = {}
    total = 0

    for expense in expenses:
        totals[expense.category] = Money(totals.get(expense.category, 0) + expense.amount)
        total += expense.amount

    return Summary(totals=totals, total=Money(total))


def sort_summary(summary: Summary, sort_by: SummarySort = "alpha") -> list[tuple[CategoryName, Money]]:
    """Order summary rows for display.

    Args:
        summary: Summary to order.
        sort_by: "alpha" (by name), "value" (largest first) or "insertion" (first seen).

    Returns:
        List of (category, amount) tuples.
    """
    rows = list(summary.totals.items())
    if sort_by == "alpha":
        return sorted(rows, key=lambda x: x[0])
    if sort_by == "value":
        return sorted(rows, key=lambda x: x[1], reverse=True)
    return rows
