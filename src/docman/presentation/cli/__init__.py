"""Command-line interface (Typer + Rich)."""

from docman.presentation.cli.app import app, main

__all__ = ["app", "main"]
