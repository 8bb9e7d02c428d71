"""Tests for the in-memory Ledger."""

import logging

import pytest

from spendlog.dates import CalendarDate
from spendlog.domain.errors import EmptyCategory, InvalidAmount, InvalidDate, LedgerError
from spendlog.domain.models import CategoryName, Money
from spendlog.store import Ledger


@pytest.fixture
def ledger() -> Ledger:
    ledger = Ledger()
    ledger.add("2025-05-20", 45.90, "Groceries", "fruits and veggies")
    ledger.add("2025-05-21", 10.00, "Transportation", "Bus fare")
    ledger.add("2025-05-22", 25.50, "Dining Out", "Lunch with friends")
    return ledger


class TestLedgerAdd:
    """Tests for Ledger.add."""

    def test_add_stores_all_fields(self) -> None:
        """Should store the expense with every field intact."""
        ledger = Ledger()

        ledger.add("2025-05-20", 45.90, "Groceries", "fruits and veggies")

        assert len(ledger) == 1
        stored = ledger.get_all()[0]
        assert stored.date == CalendarDate(2025, 5, 20)
        assert stored.amount == Money(4590)
        assert stored.category == "Groceries"
        assert stored.description == "fruits and veggies"

    def test_add_returns_stored_expense(self) -> None:
        """Should return the expense that was appended."""
        ledger = Ledger()

        expense = ledger.add("2025-05-20", 10, "Food")

        assert ledger.get_all() == (expense,)
        assert expense.description == ""

    def test_negative_amount_rejected(self) -> None:
        """Should reject a negative amount and leave the ledger unchanged."""
        ledger = Ledger()

        with pytest.raises(InvalidAmount):
            ledger.add("2025-05-20", -5, "Food")

        assert len(ledger) == 0

    def test_huge_amount_rejected(self, ledger: Ledger) -> None:
        """Should reject an amount too large to store without changing the ledger."""
        with pytest.raises(InvalidAmount):
            ledger.add("2025-05-20", 1e30, "Food")

        assert len(ledger) == 3

    def test_fractional_cents_rejected(self, ledger: Ledger) -> None:
        """Should reject an amount it cannot store exactly."""
        with pytest.raises(InvalidAmount):
            ledger.add("2025-05-20", 1.234, "Food")

        assert len(ledger) == 3

    def test_empty_category_rejected(self, ledger: Ledger) -> None:
        """Should reject an empty category without partial mutation."""
        with pytest.raises(EmptyCategory):
            ledger.add("2025-05-20", 10, "")

        assert len(ledger) == 3

    def test_invalid_date_rejected(self, ledger: Ledger) -> None:
        """Should reject an impossible date."""
        with pytest.raises(InvalidDate):
            ledger.add("2025-02-30", 10, "Food")

        assert len(ledger) == 3

    def test_errors_share_base_class(self) -> None:
        """Should raise LedgerError subclasses for every rejection."""
        ledger = Ledger()
        for args in [("bad", 1, "Food"), ("2025-05-20", 0, "Food"), ("2025-05-20", 1, "")]:
            with pytest.raises(LedgerError):
                ledger.add(*args)

    def test_keeps_arrival_order(self) -> None:
        """Should keep insertion order rather than date order."""
        ledger = Ledger()
        ledger.add("2025-05-22", 1, "A")
        ledger.add("2025-05-20", 2, "B")

        assert [e.category for e in ledger.get_all()] == ["A", "B"]

    def test_logs_added_expense(self, caplog: pytest.LogCaptureFixture) -> None:
        """Should log each added expense at debug level."""
        caplog.set_level(logging.DEBUG, logger="spendlog.store.ledger")

        Ledger().add("2025-05-20", 10, "Food")

        assert "Added expense 2025-05-20 Food 1000" in caplog.text


class TestLedgerGetAll:
    """Tests for Ledger.get_all and iteration."""

    def test_returns_immutable_view(self, ledger: Ledger) -> None:
        """Should not let callers change the ledger."""
        expenses = ledger.get_all()

        assert isinstance(expenses, tuple)
        with pytest.raises(AttributeError):
            expenses.append(expenses[0])  # type: ignore[attr-defined]

    def test_iterates_in_order(self, ledger: Ledger) -> None:
        """Should iterate in insertion order."""
        assert [e.category for e in ledger] == ["Groceries", "Transportation", "Dining Out"]


class TestLedgerFilter:
    """Tests for Ledger.filter."""

    def test_start_bound(self, ledger: Ledger) -> None:
        """Should return the 05-21 and 05-22 expenses in order."""
        result = ledger.filter(start="2025-05-21", end="", category="")

        assert [str(e.date) for e in result.expenses] == ["2025-05-21", "2025-05-22"]
        assert result.ignored_bounds == ()

    def test_category_case_insensitive(self, ledger: Ledger) -> None:
        """Should match a category regardless of case."""
        result = ledger.filter(category="groceries")

        assert [e.category for e in result.expenses] == ["Groceries"]

    def test_category_length_mismatch(self, ledger: Ledger) -> None:
        """Should not match a shorter category."""
        assert ledger.filter(category="Grocer").expenses == ()

    def test_invalid_bound_degrades(self, ledger: Ledger, caplog: pytest.LogCaptureFixture) -> None:
        """Should ignore an unparseable start bound, report and log it."""
        caplog.set_level(logging.INFO, logger="spendlog.store.ledger")

        result = ledger.filter(start="not-a-date")

        assert result.expenses == ledger.filter().expenses
        assert len(result.ignored_bounds) == 1
        assert result.ignored_bounds[0].bound == "start"
        assert "Invalid start date 'not-a-date'" in caplog.text

    def test_oversized_bound_is_ignored(self, ledger: Ledger) -> None:
        """Should ignore a bound with an overlong year instead of failing."""
        text = "9" * 5000 + "-01-01"

        result = ledger.filter(start=text)

        assert result.expenses == ledger.get_all()
        assert result.ignored_bounds[0].text == text

    def test_does_not_mutate(self, ledger: Ledger) -> None:
        """Should leave the ledger untouched."""
        before = ledger.get_all()

        ledger.filter(start="2025-05-22")

        assert ledger.get_all() == before


class TestLedgerSummarize:
    """Tests for Ledger.summarize."""

    def test_summary(self, ledger: Ledger) -> None:
        """Should total each category and the grand total."""
        summary = ledger.summarize()

        assert summary.total == Money(8140)
        assert summary.totals == {
            CategoryName("Groceries"): Money(4590),
            CategoryName("Transportation"): Money(1000),
            CategoryName("Dining Out"): Money(2550),
        }

    def test_empty_ledger(self) -> None:
        """Should return an empty summary for an empty ledger."""
        summary = Ledger().summarize()

        assert summary.totals == {}
        assert summary.total == 0

    def test_reflects_new_expenses(self, ledger: Ledger) -> None:
        """Should recompute on every call."""
        ledger.summarize()
        ledger.add("2025-05-23", 4.60, "groceries")

        summary = ledger.summarize()

        assert summary.total == Money(8600)
        assert summary.totals[CategoryName("groceries")] == Money(460)
        assert sum(summary.totals.values()) == summary.total
