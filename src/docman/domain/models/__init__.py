"""Domain models — public API."""

from docman.domain.models.bibliography import Bibliography
from docman.domain.models.citation import (
    Article,
    Book,
    BookMetadata,
    Citation,
    Webpage,
    WebpageMetadata,
    format_citation,
)
from docman.domain.models.enums import CitationKind

__all__ = [
    "Article",
    "Bibliography",
    "Book",
    "BookMetadata",
    "Citation",
    "CitationKind",
    "Webpage",
    "WebpageMetadata",
    "format_citation",
]
