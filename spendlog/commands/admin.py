"""Admin commands for config setup and starting a session."""

import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape

from spendlog.commands.shell import run_menu
from spendlog.config import ConfigError, create_default_config, get_config_path, load_settings
from spendlog.store import Ledger

console = Console()


def init_command(force: bool = False) -> None:
    """Write the default config file."""
    config_path = get_config_path()

    # Guard: refuse to overwrite without force flag
    if config_path.exists() and not force:
        console.print("[red]Initialization failed:[/red]", style="bold")
        console.print(f"  Config already exists: {config_path}")
        console.print("\n[yellow]Use 'spendlog init --force' to overwrite[/yellow]")
        sys.exit(1)

    try:
        console.print(f"[cyan]Creating config file at {config_path}...[/cyan]")
        create_default_config(config_path)
    except OSError as e:
        console.print(f"[red]Filesystem error: {e}[/red]", style="bold")
        sys.exit(1)

    console.print("[green]✓[/green] Config file created (permissions: 600)")
    console.print("[dim]Expenses are kept in memory only and are lost on exit[/dim]")


def shell_command(config_path: str | None = None) -> None:
    """Start an interactive session with a fresh ledger."""
    path = Path(config_path).expanduser() if config_path else None

    try:
        settings = load_settings(path)
    except ConfigError as e:
        console.print(f"[red]Config error: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)
    except OSError as e:
        console.print(f"[red]Could not read config: {escape(str(e))}[/red]", style="bold")
        sys.exit(1)

    run_menu(Ledger(), settings)
