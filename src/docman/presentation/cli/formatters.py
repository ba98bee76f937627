"""Rich output utilities for the CLI.

Diagnostics and log records go to standard error; standard output carries
only the generated document.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

err_console = Console(stderr=True, soft_wrap=True)


def error_message(message: str) -> None:
    """Print a red error message to standard error."""
    err_console.print(f"[bold red]❌ {escape(message)}[/]")


def setup_logging(verbose: bool = False) -> None:
    """Route ``logging`` through Rich on standard error."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, show_path=False, markup=False)],
        force=True,
    )
