"""Enumerations for citation entries."""

from enum import Enum


class CitationKind(str, Enum):
    """Kinds of bibliography entries."""

    BOOK = "book"  # enriched by ISBN lookup
    WEBPAGE = "webpage"  # enriched by URL lookup
    ARTICLE = "article"  # self-contained

    @property
    def needs_enrichment(self) -> bool:
        return self is not CitationKind.ARTICLE
