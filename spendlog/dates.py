"""Date utilities for spendlog.

Pure functions for parsing, comparing and formatting calendar dates.
"""

import re
from dataclasses import dataclass
from datetime import date, timedelta

from spendlog.domain.errors import InvalidDate

MIN_YEAR = 1900

_DATE_PATTERN = re.compile(r"(\d{1,4})-(\d{1,2})-(\d{1,2})", re.ASCII)


@dataclass(frozen=True, order=True)
class CalendarDate:
    """Immutable, validated Gregorian date.

    Field order gives the natural (year, month, day) ordering.
    """

    year: int
    month: int
    day: int

    def __post_init__(self) -> None:
        if not is_real_date(self.year, self.month, self.day):
            raise InvalidDate(f"{self.year:04d}-{self.month:02d}-{self.day:02d}")

    def __str__(self) -> str:
        return format_date(self)


def is_real_date(year: int, month: int, day: int) -> bool:
    """Check that a year/month/day triple names a real calendar day.

    The day is rolled forward from the first of the month; naive overflow
    (e.g. February 30th) lands in the next month and fails the round trip.

    Args:
        year: Four digit year, at least 1900.
        month: Month number.
        day: Day of month.

    Returns:
        True if the triple survives normalization unchanged.
    """
    if year < MIN_YEAR or not 1 <= month <= 12 or not 1 <= day <= 31:
        return False

    try:
        normalized = date(year, month, 1) + timedelta(days=day - 1)
    except (ValueError, OverflowError):
        return False

    return (normalized.year, normalized.month, normalized.day) == (year, month, day)


def parse_date(text: str) -> CalendarDate:
    """Parse a YYYY-MM-DD string into a CalendarDate.

    Args:
        text: Date string with '-' separators. Surrounding whitespace is ignored.

    Returns:
        Validated CalendarDate.

    Raises:
        InvalidDate: If the text is malformed or not a real date.
    """
    match = _DATE_PATTERN.fullmatch(text.strip())
    if match is None:
        raise InvalidDate(text)

    year, month, day = (int(part) for part in match.groups())
    if not is_real_date(year, month, day):
        raise InvalidDate(text)

    return CalendarDate(year, month, day)


def compare_dates(a: CalendarDate, b: CalendarDate) -> int:
    """Compare two dates.

    Returns:
        -1 if a is earlier, 0 if equal, 1 if a is later.
    """
    left = (a.year, a.month, a.day)
    right = (b.year, b.month, b.day)
    return (left > right) - (left < right)


def format_date(value: CalendarDate) -> str:
    """Format a CalendarDate as YYYY-MM-DD."""
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"
