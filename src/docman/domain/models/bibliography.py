"""Bibliography — read-only mapping from entry id to citation."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from types import MappingProxyType

from docman.domain.models.citation import Citation


class Bibliography(Mapping[str, Citation]):
    """Immutable ``id -> Citation`` mapping built once per run.

    Iteration follows insertion order.  A duplicate id passed to the
    constructor replaces the earlier entry but keeps its original position.
    """

    def __init__(self, entries: Mapping[str, Citation] | None = None) -> None:
        self._entries: Mapping[str, Citation] = MappingProxyType(dict(entries or {}))

    def __getitem__(self, entry_id: str) -> Citation:
        return self._entries[entry_id]

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"Bibliography({list(self._entries)!r})"
