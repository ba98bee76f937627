"""Use Case: Append a resolved reference list to a document.

Pipeline: load bibliography (enriching through the fetcher) -> read the
document -> extract markers -> resolve them -> document + reference block.
Nothing is produced unless every step succeeds.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Union

from docman.domain.errors import OutputUnwritableError, SourceUnavailableError
from docman.domain.models.bibliography import Bibliography
from docman.domain.services.extractor import extract_markers
from docman.domain.services.resolver import append_references, resolve

logger = logging.getLogger(__name__)

BibliographyLoader = Callable[[Path], Bibliography]


def read_document(path: Union[str, Path], encoding: str = "utf-8") -> str:
    """Read the document text at *path*, keeping its line endings as-is.

    Raises:
        SourceUnavailableError: The file cannot be opened or decoded.
    """
    path = Path(path)
    try:
        with path.open(encoding=encoding, newline="") as fh:
            return fh.read()
    except (OSError, UnicodeDecodeError) as exc:
        raise SourceUnavailableError(f"Failed to open article file: {path}", path) from exc


def write_output(text: str, path: Union[str, Path], encoding: str = "utf-8") -> None:
    """Write the final *text* to *path*.

    Raises:
        OutputUnwritableError: The destination cannot be opened for writing.
    """
    path = Path(path)
    try:
        with path.open("w", encoding=encoding, newline="") as fh:
            fh.write(text)
    except OSError as exc:
        raise OutputUnwritableError(f"Failed to open output file: {path}", path) from exc


class GenerateReferencesUseCase:
    """Resolve a document's markers against a bibliography."""

    def __init__(self, load_bibliography: BibliographyLoader, encoding: str = "utf-8") -> None:
        self._load_bibliography = load_bibliography
        self._encoding = encoding

    def render(self, text: str, bibliography: Bibliography) -> str:
        """Return *text* with the reference block for its markers appended."""
        markers = extract_markers(text)
        return append_references(text, resolve(markers, bibliography))

    def execute(self, bibliography_path: Path, document_path: Path) -> str:
        """Run the full pipeline and return the output text.

        The bibliography is loaded (and every fetch completed) before the
        document is read.

        Raises:
            DocmanError: Any failure along the pipeline.
        """
        bibliography = self._load_bibliography(bibliography_path)
        text = read_document(document_path, self._encoding)
        logger.debug("Read %d characters from %s", len(text), document_path)
        return self.render(text, bibliography)
