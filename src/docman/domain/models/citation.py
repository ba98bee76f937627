"""Citation entry models.

Contains the three entry kinds (Book, Webpage, Article), the metadata
records returned by the lookup service, and the formatting rule for each kind.

Entries are immutable Pydantic models tagged by ``kind``.  Books and webpages
are constructed with only their lookup key; their descriptive fields are
filled in by :meth:`Book.with_metadata` / :meth:`Webpage.with_metadata` once
the metadata service has answered.
"""

from __future__ import annotations

from typing import Callable, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr

from docman.domain.models.enums import CitationKind


# ---------------------------------------------------------------------------
# Metadata returned by the lookup service
# ---------------------------------------------------------------------------


class BookMetadata(BaseModel):
    """Response body of ``GET /isbn/{isbn}``."""

    author: StrictStr
    title: StrictStr
    publisher: StrictStr
    year: StrictStr


class WebpageMetadata(BaseModel):
    """Response body of a webpage title lookup."""

    title: StrictStr


# ---------------------------------------------------------------------------
# Entries
# ---------------------------------------------------------------------------


class _Entry(BaseModel):
    model_config = ConfigDict(frozen=True, extra="ignore", populate_by_name=True)

    id: StrictStr = Field(..., min_length=1)


class Book(_Entry):
    """A book, enriched by ISBN."""

    kind: Literal["book"] = Field("book", alias="type")
    isbn: StrictStr
    author: str = ""
    title: str = ""
    publisher: str = ""
    year: str = ""

    @property
    def lookup_key(self) -> str:
        return self.isbn

    def with_metadata(self, metadata: BookMetadata) -> Book:
        """Return a copy with the fetched descriptive fields filled in."""
        return self.model_copy(update=metadata.model_dump())


class Webpage(_Entry):
    """A webpage, enriched by URL."""

    kind: Literal["webpage"] = Field("webpage", alias="type")
    url: StrictStr
    title: str = ""

    @property
    def lookup_key(self) -> str:
        return self.url

    def with_metadata(self, metadata: WebpageMetadata) -> Webpage:
        """Return a copy with the fetched title filled in."""
        return self.model_copy(update={"title": metadata.title})


class Article(_Entry):
    """A journal article; every field comes from the bibliography itself."""

    kind: Literal["article"] = Field("article", alias="type")
    title: StrictStr
    author: StrictStr
    journal: StrictStr
    year: StrictStr
    volume: StrictInt
    issue: StrictInt


Citation = Union[Book, Webpage, Article]

ENTRY_MODELS: dict[CitationKind, type[_Entry]] = {
    CitationKind.BOOK: Book,
    CitationKind.WEBPAGE: Webpage,
    CitationKind.ARTICLE: Article,
}

# Descriptor field each enriched kind is looked up by; its other fields are ignored
LOOKUP_FIELDS: dict[CitationKind, str] = {
    CitationKind.BOOK: "isbn",
    CitationKind.WEBPAGE: "url",
}


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------


def _format_book(entry: Book) -> str:
    return f"[{entry.id}] book: {entry.author}, {entry.title}, {entry.publisher}, {entry.year}"


def _format_webpage(entry: Webpage) -> str:
    return f"[{entry.id}] webpage: {entry.title}. Available at {entry.url}"


def _format_article(entry: Article) -> str:
    return (
        f"[{entry.id}] article: {entry.author}, {entry.title}, {entry.journal}, "
        f"{entry.year}, {entry.volume:d}, {entry.issue:d}"
    )


_FORMATTERS: dict[CitationKind, Callable[..., str]] = {
    CitationKind.BOOK: _format_book,
    CitationKind.WEBPAGE: _format_webpage,
    CitationKind.ARTICLE: _format_article,
}


def format_citation(entry: Citation) -> str:
    """Render one reference line (without trailing newline) for *entry*."""
    return _FORMATTERS[CitationKind(entry.kind)](entry)
