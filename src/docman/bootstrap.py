"""Composition Root — Dependency Injection Container.

This module is the ONLY place where concrete infrastructure classes are
imported and wired together.  All other layers refer to ports (interfaces).
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from docman.application.use_cases.generate_references import GenerateReferencesUseCase
from docman.config import DocmanConfig, get_config
from docman.domain.models.bibliography import Bibliography
from docman.domain.ports.metadata_fetcher import MetadataFetcherPort
from docman.infrastructure.fetchers.http_fetcher import HttpMetadataFetcher
from docman.infrastructure.persistence.json_bibliography import load_bibliography


class Container:
    """Simple dependency injection container.

    Builds the metadata fetcher from configuration and hands it, explicitly,
    to the bibliography loader used by the use case.

    Usage::

        container = Container(base_url="http://localhost:8000")
        text = container.generate_references().execute(bib_path, doc_path)
    """

    def __init__(
        self,
        config: Optional[DocmanConfig] = None,
        base_url: Optional[str] = None,
        fetcher: Optional[MetadataFetcherPort] = None,
    ) -> None:
        config = config or get_config()
        if base_url:
            config = DocmanConfig.model_validate({**config.model_dump(), "base_url": base_url})
        self._config = config

        self._fetcher = fetcher or HttpMetadataFetcher(
            config.base_url,
            timeout=config.timeout,
            user_agent=config.user_agent,
        )

    @property
    def config(self) -> DocmanConfig:
        return self._config

    @property
    def fetcher(self) -> MetadataFetcherPort:
        return self._fetcher

    def close(self) -> None:
        """Release the fetcher's network resources."""
        self._fetcher.close()

    def load_bibliography(self, path: Path) -> Bibliography:
        """Load and enrich the bibliography at *path*."""
        return load_bibliography(path, self._fetcher, encoding=self._config.encoding)

    def generate_references(self) -> GenerateReferencesUseCase:
        return GenerateReferencesUseCase(
            self.load_bibliography,
            encoding=self._config.encoding,
        )
