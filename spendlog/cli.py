"""CLI entry point for spendlog."""

import typer

from spendlog.commands.admin import init_command, shell_command
from spendlog.log import setup_logging

app = typer.Typer(
    name="spendlog",
    help="spendlog - record, filter and summarize your expenses",
    add_completion=False,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Show debug logging"),
) -> None:
    """spendlog - record, filter and summarize your expenses."""
    setup_logging(verbose)


@app.command(name="init")
def init(
    force: bool = typer.Option(False, "--force", "-f", help="Overwrite existing config"),
) -> None:
    """Create the default configuration file."""
    init_command(force)


@app.command()
def shell(
    config: str = typer.Option(None, "--config", "-c", help="Config file (default: ~/.config/spendlog/config.toml)"),
) -> None:
    """Start an interactive expense tracking session."""
    shell_command(config)


if __name__ == "__main__":
    app()
