"""JSON bibliography loader.

Reads ``{"citations": [{"id": ..., "type": ..., ...}, ...]}`` into a
:class:`Bibliography`, enriching books and webpages through the injected
fetcher before the mapping is returned.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional, Union

from pydantic import ValidationError

from docman.domain.errors import MalformedBibliographyError, SourceUnavailableError
from docman.domain.models.bibliography import Bibliography
from docman.domain.models.citation import ENTRY_MODELS, LOOKUP_FIELDS, Book, Citation, Webpage
from docman.domain.models.enums import CitationKind
from docman.domain.ports.metadata_fetcher import MetadataFetcherPort

logger = logging.getLogger(__name__)

_KNOWN_KINDS = {kind.value for kind in CitationKind}


def _describe_errors(exc: ValidationError) -> str:
    """Summarise a ValidationError as ``field: message; ...``."""
    parts = []
    for err in exc.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "<entry>"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _build_entry(index: int, descriptor: Any) -> Optional[Citation]:
    """Construct the entry for one descriptor, or ``None`` for unknown types."""
    if not isinstance(descriptor, dict):
        raise MalformedBibliographyError(f"Citation #{index} is not an object")

    entry_id = descriptor.get("id")
    entry_type = descriptor.get("type")
    if not isinstance(entry_id, str) or not entry_id:
        raise MalformedBibliographyError(f"Citation #{index} has no string 'id'")
    if not isinstance(entry_type, str):
        raise MalformedBibliographyError(f"Citation '{entry_id}' has no string 'type'")

    if entry_type not in _KNOWN_KINDS:
        logger.warning("Skipping citation '%s' with unrecognized type '%s'", entry_id, entry_type)
        return None

    kind = CitationKind(entry_type)
    if kind in LOOKUP_FIELDS:
        # descriptive fields come from the lookup service
        keep = ("id", "type", LOOKUP_FIELDS[kind])
        descriptor = {key: descriptor[key] for key in keep if key in descriptor}

    model = ENTRY_MODELS[kind]
    try:
        return model.model_validate(descriptor)  # type: ignore[return-value]
    except ValidationError as exc:
        raise MalformedBibliographyError(
            f"Citation '{entry_id}' ({entry_type}) is malformed: {_describe_errors(exc)}"
        ) from exc


def parse_bibliography(data: Any, fetcher: MetadataFetcherPort) -> Bibliography:
    """Build a fully enriched bibliography from decoded JSON *data*.

    Entries are processed in descriptor order and books/webpages are fetched
    one at a time.  A later descriptor with an existing id replaces the
    earlier entry.

    Raises:
        MalformedBibliographyError: Structure or required fields are invalid.
        FetchFailedError: A book or webpage lookup failed.
    """
    if not isinstance(data, dict) or not isinstance(data.get("citations"), list):
        raise MalformedBibliographyError("Bibliography must contain a 'citations' list")

    entries: dict[str, Citation] = {}
    for index, descriptor in enumerate(data["citations"]):
        entry = _build_entry(index, descriptor)
        if entry is None:
            continue

        if isinstance(entry, (Book, Webpage)):
            metadata = fetcher.fetch(CitationKind(entry.kind), entry.lookup_key)
            entry = entry.with_metadata(metadata)  # type: ignore[arg-type]

        if entry.id in entries:
            logger.debug("Citation '%s' redefined; keeping the later entry", entry.id)
        entries[entry.id] = entry
        logger.debug("Loaded %s citation '%s'", entry.kind, entry.id)

    logger.info("Loaded %d citation(s)", len(entries))
    return Bibliography(entries)


def load_bibliography(
    path: Union[str, Path],
    fetcher: MetadataFetcherPort,
    encoding: str = "utf-8",
) -> Bibliography:
    """Read the JSON bibliography at *path* and build it.

    Raises:
        SourceUnavailableError: The file cannot be opened.
        MalformedBibliographyError: The file is not valid bibliography JSON.
        FetchFailedError: A book or webpage lookup failed.
    """
    path = Path(path)
    try:
        raw = path.read_text(encoding=encoding)
    except OSError as exc:
        raise SourceUnavailableError(f"Failed to open citation file: {path}", path) from exc
    except UnicodeDecodeError as exc:
        raise MalformedBibliographyError(f"Citation file is not valid {encoding}: {path}") from exc

    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise MalformedBibliographyError(f"Citation file is not valid JSON: {path} ({exc})") from exc

    return parse_bibliography(data, fetcher)
