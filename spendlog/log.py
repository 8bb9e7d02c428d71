"""Logging setup for the spendlog CLI."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_FORMAT = "%(message)s"
LOG_DATEFMT = "[%X]"


def setup_logging(verbose: bool = False, console: Console | None = None) -> None:
    """Route log records through rich on stderr.

    Args:
        verbose: Log DEBUG and above instead of WARNING and above.
        console: Console to write to. Defaults to a stderr console.
    """
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
        datefmt=LOG_DATEFMT,
        handlers=[handler],
        force=True,
    )
