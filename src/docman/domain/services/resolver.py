"""Resolve markers against a bibliography and build the reference block."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Mapping

from docman.domain.errors import UnresolvedReferenceError
from docman.domain.models.citation import Citation, format_citation

logger = logging.getLogger(__name__)

REFERENCES_HEADER = "\n\nReferences:\n"


def resolve(markers: Iterable[str], bibliography: Mapping[str, Citation]) -> str:
    """Build the reference block for *markers*, one line per marker.

    Lines follow marker order; a repeated marker yields a repeated line.
    Nothing is returned unless every marker resolves.

    Raises:
        UnresolvedReferenceError: A marker is not an id in *bibliography*.
    """
    lines: list[str] = []
    for marker in markers:
        entry = bibliography.get(marker)
        if entry is None:
            raise UnresolvedReferenceError(marker)
        logger.debug("Resolved [%s] as %s entry", marker, entry.kind)
        lines.append(format_citation(entry) + "\n")
    return REFERENCES_HEADER + "".join(lines)


def append_references(text: str, block: str) -> str:
    """Return the document text followed by its reference block."""
    return text + block
