"""Tests for the generate-references use case and the container wiring."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from docman.application.use_cases.generate_references import (
    GenerateReferencesUseCase,
    read_document,
    write_output,
)
from docman.bootstrap import Container
from docman.config.models import DocmanConfig
from docman.domain.errors import (
    FetchFailedError,
    OutputUnwritableError,
    SourceUnavailableError,
    UnresolvedReferenceError,
)
from docman.domain.models import Article, Bibliography
from docman.infrastructure.fetchers.http_fetcher import HttpMetadataFetcher

_BIB = Bibliography(
    {
        "A1": Article(
            id="A1", title="T", author="Au", journal="J", year="2020", volume=3, issue=2
        )
    }
)


class TestUseCase:
    def test_execute(self, tmp_path):
        doc = tmp_path / "doc.txt"
        doc.write_text("See [A1].", encoding="utf-8")
        loader = MagicMock(return_value=_BIB)

        out = GenerateReferencesUseCase(loader).execute(tmp_path / "bib.json", doc)

        loader.assert_called_once_with(tmp_path / "bib.json")
        assert out == "See [A1].\n\nReferences:\n[A1] article: Au, T, J, 2020, 3, 2\n"

    def test_bibliography_loaded_before_document(self, tmp_path):
        loader = MagicMock(side_effect=FetchFailedError("boom", kind="book", lookup_key="1"))
        with pytest.raises(FetchFailedError):
            GenerateReferencesUseCase(loader).execute(tmp_path / "b.json", tmp_path / "missing.txt")

    def test_missing_document(self, tmp_path):
        loader = MagicMock(return_value=_BIB)
        with pytest.raises(SourceUnavailableError, match="Failed to open article file"):
            GenerateReferencesUseCase(loader).execute(tmp_path / "b.json", tmp_path / "missing.txt")

    def test_render_unresolved(self):
        uc = GenerateReferencesUseCase(MagicMock())
        with pytest.raises(UnresolvedReferenceError):
            uc.render("[A1] [B9]", _BIB)


class TestFileHelpers:
    def test_read_document(self, tmp_path):
        path = tmp_path / "doc.txt"
        path.write_text("héllo [A1]", encoding="utf-8")
        assert read_document(path) == "héllo [A1]"

    def test_write_output(self, tmp_path):
        path = tmp_path / "out.txt"
        write_output("text\n", path)
        assert path.read_text(encoding="utf-8") == "text\n"

    def test_line_endings_preserved(self, tmp_path):
        doc = tmp_path / "doc.txt"
        doc.write_bytes(b"line1\r\nsee [A1]\r\nold mac\rline")
        text = read_document(doc)
        assert text == "line1\r\nsee [A1]\r\nold mac\rline"

        out = tmp_path / "out.txt"
        write_output(text + "\n", out)
        assert out.read_bytes() == b"line1\r\nsee [A1]\r\nold mac\rline\n"

    def test_write_output_unwritable(self, tmp_path):
        path = tmp_path / "no_such_dir" / "out.txt"
        with pytest.raises(OutputUnwritableError, match="Failed to open output file"):
            write_output("text", path)


class TestContainer:
    def test_builds_http_fetcher_from_config(self):
        container = Container(config=DocmanConfig(base_url="http://svc.example", timeout=3))
        assert isinstance(container.fetcher, HttpMetadataFetcher)
        assert container.fetcher.base_url == "http://svc.example"

    def test_base_url_override(self):
        container = Container(config=DocmanConfig(), base_url="localhost:8080")
        assert container.config.base_url == "http://localhost:8080"
        assert container.fetcher.base_url == "http://localhost:8080"

    def test_injected_fetcher(self):
        fetcher = MagicMock()
        assert Container(config=DocmanConfig(), fetcher=fetcher).fetcher is fetcher

    def test_close_releases_fetcher(self):
        fetcher = MagicMock()
        Container(config=DocmanConfig(), fetcher=fetcher).close()
        fetcher.close.assert_called_once()
