"""Interactive menu for adding, listing, filtering and summarizing expenses."""

from collections.abc import Sequence

import typer
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from spendlog.config import Settings
from spendlog.dates import format_date
from spendlog.domain.errors import LedgerError
from spendlog.domain.expenses import Expense, format_money, sort_summary
from spendlog.store import Ledger

console = Console()

CANCEL = "q"

MENU = """
[bold]Expense Tracker Menu:[/bold]
1. Add New Expense
2. View All Expenses
3. Filter Expenses
4. View Summary
5. Exit"""


def render_expenses(expenses: Sequence[Expense], title: str, settings: Settings) -> None:
    """Print expenses as a table.

    Args:
        expenses: Expenses to show, in order.
        title: Table title.
        settings: Display settings.
    """
    if not expenses:
        console.print(f"[yellow]{title}: no expenses found[/yellow]")
        return

    table = Table(title=title)
    table.add_column("Date", style="cyan")
    table.add_column("Category", style="magenta")
    table.add_column("Amount", justify="right")
    table.add_column("Description", style="white")

    for expense in expenses:
        table.add_row(
            format_date(expense.date),
            escape(expense.category),
            format_money(expense.amount, settings.currency_symbol),
            escape(expense.description),
        )

    console.print(table)


def render_summary(ledger: Ledger, settings: Settings) -> None:
    """Print per-category totals and the grand total."""
    summary = ledger.summarize()

    table = Table(title="Expense Summary", show_footer=True)
    table.add_column("Category", footer="TOTAL", style="magenta")
    table.add_column(
        "Amount",
        footer=format_money(summary.total, settings.currency_symbol),
        justify="right",
    )

    for category, amount in sort_summary(summary, settings.summary_sort):
        table.add_row(escape(category), format_money(amount, settings.currency_symbol))

    console.print(table)


def prompt_new_expense(ledger: Ledger) -> None:
    """Prompt for a new expense and add it to the ledger."""
    console.print("\n[bold]Add New Expense:[/bold]")
    console.print(f"[dim](Enter '{CANCEL}' at any time to cancel)[/dim]")

    date_text: str = typer.prompt("Enter date (YYYY-MM-DD)", type=str)
    if date_text == CANCEL:
        console.print("[dim]Expense entry cancelled.[/dim]")
        return

    amount: float = typer.prompt("Enter amount", type=float)
    if amount <= 0:
        console.print("[red]Amount must be positive. Try again.[/red]")
        return

    category: str = typer.prompt("Enter category", type=str)
    if category == CANCEL:
        console.print("[dim]Expense entry cancelled.[/dim]")
        return

    description: str = typer.prompt("Enter description (optional)", default="", show_default=False)

    try:
        ledger.add(date_text, amount, category, description)
    except LedgerError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        return

    console.print("[green]✓[/green] Expense added successfully!")


def prompt_filter(ledger: Ledger, settings: Settings) -> None:
    """Prompt for filter bounds and print the matching expenses."""
    console.print("\n[bold]Filter Expenses:[/bold]")
    start: str = typer.prompt(
        "Enter start date (YYYY-MM-DD, leave empty for no filter)", default="", show_default=False
    )
    end: str = typer.prompt("Enter end date (YYYY-MM-DD, leave empty for no filter)", default="", show_default=False)
    category: str = typer.prompt(
        "Enter category to filter by (leave empty for no filter)", default="", show_default=False
    )

    result = ledger.filter(start, end, category)
    for ignored in result.ignored_bounds:
        console.print(f"[yellow]{escape(ignored.message)}[/yellow]")

    render_expenses(result.expenses, "Filtered Expenses", settings)


def run_menu(ledger: Ledger, settings: Settings) -> None:
    """Run the menu loop until the user exits.

    Args:
        ledger: Ledger owned by this session.
        settings: Display settings.
    """
    while True:
        console.print(MENU)
        choice: int = typer.prompt("Enter your choice (1-5)", type=int)

        if choice == 1:
            prompt_new_expense(ledger)
        elif choice == 2:
            render_expenses(ledger.get_all(), "All Expenses", settings)
        elif choice == 3:
            prompt_filter(ledger, settings)
        elif choice == 4:
            render_summary(ledger, settings)
        elif choice == 5:
            console.print("Exiting Expense Tracker. Goodbye!")
            break
        else:
            console.print("[red]Invalid choice. Please enter a number between 1 and 5.[/red]")
