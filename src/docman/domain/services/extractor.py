"""Reference marker extraction from raw document text."""

from __future__ import annotations

import logging

from docman.domain.errors import MalformedDocumentError

logger = logging.getLogger(__name__)


def extract_markers(text: str) -> list[str]:
    """Return every ``[marker]`` in *text*, in document order.

    The first ``]`` after an ``[`` closes it, so brackets do not nest: a
    ``[`` inside an open span is part of the marker.  Duplicates are kept.

    Raises:
        MalformedDocumentError: An ``[`` has no ``]`` after it.
    """
    markers: list[str] = []
    pos = 0
    while True:
        start = text.find("[", pos)
        if start == -1:
            break
        end = text.find("]", start + 1)
        if end == -1:
            raise MalformedDocumentError("Malformed article file: unmatched '['", position=start)
        markers.append(text[start + 1 : end])
        pos = end + 1

    logger.info("Extracted %d reference marker(s)", len(markers))
    return markers
