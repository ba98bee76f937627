"""Thin CLI wrapper — a Typer command that delegates to the use case.

All wiring goes through the Container (bootstrap.py).  Every failure is
reported on standard error and turned into exit code 1 by :func:`main`.
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Annotated, Optional

import click
import typer
from pydantic import ValidationError

from docman.domain.errors import (
    ConfigurationError,
    DocmanError,
    InvalidArgumentsError,
    SourceUnavailableError,
)
from docman.presentation.cli.formatters import error_message, setup_logging

if TYPE_CHECKING:
    from docman.config.models import DocmanConfig

app = typer.Typer(
    name="docman",
    help="Append a formatted reference list to a document with [id] citation markers.",
    add_completion=False,
    pretty_exceptions_enable=False,
)

# Recent Typer releases parse with a bundled Click whose exceptions derive from
# typer.TyperException rather than click.ClickException.
_USAGE_ERRORS: tuple[type[Exception], ...] = (click.ClickException,) + tuple(
    cls for cls in (getattr(typer, "TyperException", None),) if cls is not None
)
_ABORT_ERRORS = (click.exceptions.Abort, typer.Abort)


def _usage_message(exc: Exception) -> str:
    format_message = getattr(exc, "format_message", None)
    return format_message() if callable(format_message) else str(exc)


def _load_settings(settings: Optional[Path]) -> DocmanConfig:
    from docman.config.loader import load_config, resolve_config_path

    path = resolve_config_path(settings)
    try:
        return load_config(path)
    except FileNotFoundError as exc:
        raise SourceUnavailableError(f"Failed to open settings file: {path}", path) from exc
    except (OSError, UnicodeDecodeError, json.JSONDecodeError, ValidationError) as exc:
        raise ConfigurationError(f"Invalid settings file {path}: {exc}", path) from exc


@app.command()
def generate(
    document: Annotated[Path, typer.Argument(help="Document containing [id] markers")],
    citations: Annotated[
        Optional[Path], typer.Option("-c", "--citations", help="Bibliography JSON file")
    ] = None,
    output: Annotated[
        Optional[Path],
        typer.Option("-o", "--output", help="Output file (default: standard output)"),
    ] = None,
    base_url: Annotated[
        Optional[str],
        typer.Option("--base_url", "--base-url", help="Metadata service host"),
    ] = None,
    settings: Annotated[
        Optional[Path], typer.Option("--settings", help="JSON settings file")
    ] = None,
    verbose: Annotated[bool, typer.Option("--verbose", "-v", help="Debug logging")] = False,
) -> None:
    """Resolve the document's citation markers and append the reference list."""
    from docman.application.use_cases.generate_references import write_output
    from docman.bootstrap import Container

    setup_logging(verbose)

    if citations is None:
        raise InvalidArgumentsError("Error: Citation file path is required.")

    container = Container(config=_load_settings(settings), base_url=base_url)
    try:
        result = container.generate_references().execute(citations, document)
    finally:
        container.close()

    if output is None:
        typer.echo(result, nl=False)
    else:
        write_output(result, output, encoding=container.config.encoding)


def main(argv: Optional[list[str]] = None) -> int:
    """Run the CLI and return the process exit code."""
    try:
        app(args=argv, prog_name="docman", standalone_mode=False)
    except _ABORT_ERRORS:
        error_message("Aborted.")
        return 1
    except _USAGE_ERRORS as exc:
        error_message(_usage_message(exc))
        return 1
    except DocmanError as exc:
        error_message(str(exc))
        return 1
    return 0


def run() -> None:
    """Console-script entry point."""
    sys.exit(main())
