"""Metadata fetchers — retrieve entry metadata from the lookup service."""

from docman.infrastructure.fetchers.http_fetcher import HttpMetadataFetcher

__all__ = ["HttpMetadataFetcher"]
