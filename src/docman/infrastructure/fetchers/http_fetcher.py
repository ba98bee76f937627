"""HTTP metadata fetcher — implements MetadataFetcherPort over ``requests``.

Book lookups hit ``GET {base_url}/isbn/{isbn}``.  Webpage lookups send the
encoded page URL itself, scheme and slashes included, as the request path.
One attempt per entry, no retries.
"""

from __future__ import annotations

import logging
from typing import Optional, TypeVar
from urllib.parse import quote

import requests
from pydantic import BaseModel, ValidationError

from docman.domain.errors import FetchFailedError
from docman.domain.models.citation import BookMetadata, WebpageMetadata
from docman.domain.models.enums import CitationKind
from docman.domain.ports.metadata_fetcher import MetadataFetcherPort

logger = logging.getLogger(__name__)

_M = TypeVar("_M", bound=BaseModel)


# Everything ASCII passes through except space, "+", CR, LF, "'", ",", ";" and
# "#" (which would otherwise start a fragment); non-ASCII goes out as UTF-8 %XX.
_ENCODED_ASCII = " +\r\n',;#"
_SAFE_ASCII = "".join(chr(c) for c in range(0x80) if chr(c) not in _ENCODED_ASCII)


def encode_lookup_key(key: str) -> str:
    """Percent-encode *key* for use as a request path, leaving URL syntax intact."""
    return quote(key, safe=_SAFE_ASCII)


class HttpMetadataFetcher(MetadataFetcherPort):
    """Fetch entry metadata from the docman lookup service.

    Parameters
    ----------
    base_url : str
        Scheme and host of the service, e.g. ``http://docman.lcpu.dev``.
    session : requests.Session | None
        Session to issue requests on; a new one is created when omitted.
    timeout : float | None
        Per-request timeout in seconds; ``None`` waits indefinitely.
    user_agent : str | None
        ``User-Agent`` header sent with every request.
    """

    def __init__(
        self,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: Optional[float] = None,
        user_agent: Optional[str] = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._timeout = timeout
        if user_agent:
            self._session.headers["User-Agent"] = user_agent

    @property
    def base_url(self) -> str:
        return self._base_url

    def close(self) -> None:
        """Close the session if this fetcher created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> HttpMetadataFetcher:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    # -- MetadataFetcherPort ---------------------------------------------------

    def fetch_book(self, isbn: str) -> BookMetadata:
        return self._get(
            f"/isbn/{encode_lookup_key(isbn)}",
            BookMetadata,
            kind=CitationKind.BOOK,
            lookup_key=isbn,
            failure=f"Failed to fetch book info for ISBN: {isbn}",
        )

    def fetch_webpage(self, url: str) -> WebpageMetadata:
        target = encode_lookup_key(url)
        return self._get(
            target if target.startswith("/") else f"/{target}",
            WebpageMetadata,
            kind=CitationKind.WEBPAGE,
            lookup_key=url,
            failure=f"Failed to fetch webpage title for URL: {url}",
        )

    # -- Internals -------------------------------------------------------------

    def _get(
        self,
        target: str,
        model: type[_M],
        *,
        kind: CitationKind,
        lookup_key: str,
        failure: str,
    ) -> _M:
        url = self._base_url + target
        logger.debug("GET %s", url)

        try:
            resp = self._session.get(url, timeout=self._timeout)
        except requests.RequestException as exc:
            raise FetchFailedError(
                f"{failure} ({exc})", kind=kind.value, lookup_key=lookup_key
            ) from exc

        if resp.status_code != 200:
            raise FetchFailedError(
                f"{failure} (HTTP {resp.status_code})",
                kind=kind.value,
                lookup_key=lookup_key,
                status=resp.status_code,
            )

        try:
            return model.model_validate(resp.json())
        except (ValueError, ValidationError) as exc:
            # requests raises a ValueError subclass for undecodable JSON
            raise FetchFailedError(
                f"{failure} (invalid response body)",
                kind=kind.value,
                lookup_key=lookup_key,
                status=resp.status_code,
            ) from exc
