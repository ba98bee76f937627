"""Domain errors — custom exceptions for docman.

Every failure in the pipeline is fatal for the run. Components raise one of
these and the CLI maps them to a diagnostic and a non-zero exit code.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional, Union


class DocmanError(Exception):
    """Base exception for all docman errors."""


class SourceUnavailableError(DocmanError):
    """Raised when the bibliography or document file cannot be opened."""

    def __init__(self, message: str, path: Union[str, Path]) -> None:
        super().__init__(message)
        self.path = Path(path)


class MalformedBibliographyError(DocmanError):
    """Raised when a recognised entry is missing a required field."""


class FetchFailedError(DocmanError):
    """Raised when the metadata service fails or returns undecodable data."""

    def __init__(
        self,
        message: str,
        kind: str,
        lookup_key: str,
        status: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.kind = kind
        self.lookup_key = lookup_key
        self.status = status


class MalformedDocumentError(DocmanError):
    """Raised when an opening ``[`` has no closing ``]``."""

    def __init__(self, message: str, position: int) -> None:
        super().__init__(message)
        self.position = position


class UnresolvedReferenceError(DocmanError):
    """Raised when a marker has no matching bibliography id."""

    def __init__(self, marker: str) -> None:
        super().__init__(f"Reference ID not found in citations: [{marker}]")
        self.marker = marker


class OutputUnwritableError(DocmanError):
    """Raised when the output destination cannot be opened for writing."""

    def __init__(self, message: str, path: Union[str, Path]) -> None:
        super().__init__(message)
        self.path = Path(path)


class InvalidArgumentsError(DocmanError):
    """Raised for a missing required CLI option or an unknown option."""


class ConfigurationError(DocmanError):
    """Raised when a settings file is unreadable or invalid."""

    def __init__(self, message: str, path: Union[str, Path]) -> None:
        super().__init__(message)
        self.path = Path(path)
