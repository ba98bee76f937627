"""Port: Metadata fetcher — enrich books and webpages from a lookup service."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from docman.domain.models.citation import BookMetadata, WebpageMetadata
from docman.domain.models.enums import CitationKind

EnrichedFields = Union[BookMetadata, WebpageMetadata]


class MetadataFetcherPort(ABC):
    """Contract for fetching the descriptive fields of an entry."""

    @abstractmethod
    def fetch_book(self, isbn: str) -> BookMetadata:
        """Look up a book by ISBN.

        Raises:
            FetchFailedError: If the lookup fails.
        """
        ...

    @abstractmethod
    def fetch_webpage(self, url: str) -> WebpageMetadata:
        """Look up a webpage title by URL.

        Raises:
            FetchFailedError: If the lookup fails.
        """
        ...

    def close(self) -> None:
        """Release resources held by the fetcher.  The default holds none."""

    def fetch(self, kind: CitationKind, lookup_key: str) -> EnrichedFields:
        """Dispatch to the lookup for *kind*.

        Args:
            kind: ``BOOK`` (key is an ISBN) or ``WEBPAGE`` (key is a URL).
            lookup_key: The ISBN or URL.

        Raises:
            ValueError: If *kind* has no enrichment step.
            FetchFailedError: If the lookup fails.
        """
        if not kind.needs_enrichment:
            raise ValueError(f"{kind.value} entries are not enriched")
        if kind is CitationKind.BOOK:
            return self.fetch_book(lookup_key)
        return self.fetch_webpage(lookup_key)
