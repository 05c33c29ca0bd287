"""Document sources: file and http fetch, failure -> CompileFailure / placeholder."""
from unittest.mock import patch

import httpx
import pytest

from slidedeck.errors import CompileFailure
from slidedeck.sources import (
    FileSource,
    HttpSource,
    fetch_document,
    get_source,
    load_deck,
    load_deck_or_placeholder,
)


def test_get_source_by_scheme():
    assert isinstance(get_source("https://example.com/data.md"), HttpSource)
    assert isinstance(get_source("http://example.com/data.md"), HttpSource)
    assert isinstance(get_source("data.md"), FileSource)
    assert isinstance(get_source("file:///tmp/data.md"), FileSource)


def test_unsupported_scheme():
    with pytest.raises(CompileFailure):
        get_source("ftp://example.com/data.md")


def test_file_source_reads_utf8(tmp_path):
    path = tmp_path / "data.md"
    path.write_text("# Café\nbody\n", encoding="utf-8")
    assert fetch_document(str(path)) == "# Café\nbody\n"


def test_missing_file_is_compile_failure(tmp_path):
    with pytest.raises(CompileFailure) as exc:
        fetch_document(str(tmp_path / "missing.md"))
    assert exc.value.source.endswith("missing.md")


def test_http_source_success():
    url = "https://example.com/data.md"
    response = httpx.Response(200, content="# Remote\nhi\n".encode(), request=httpx.Request("GET", url))
    with patch("slidedeck.sources.httpx.get", return_value=response) as get:
        deck = load_deck(url, timeout=3.0)
    get.assert_called_once_with(url, timeout=3.0, follow_redirects=True)
    assert deck.titles() == ["Remote"]


def test_http_error_status_is_compile_failure():
    url = "https://example.com/data.md"
    response = httpx.Response(404, request=httpx.Request("GET", url))
    with patch("slidedeck.sources.httpx.get", return_value=response):
        with pytest.raises(CompileFailure):
            fetch_document(url)


def test_http_connection_error_is_compile_failure():
    url = "https://example.com/data.md"
    with patch("slidedeck.sources.httpx.get", side_effect=httpx.ConnectError("refused")):
        with pytest.raises(CompileFailure):
            fetch_document(url)


def test_placeholder_on_empty_document(tmp_path):
    path = tmp_path / "data.md"
    path.write_text("", encoding="utf-8")
    deck, error = load_deck_or_placeholder(str(path))
    assert len(deck) == 0
    assert deck.sealed
    assert isinstance(error, CompileFailure)


def test_placeholder_not_used_on_success(tmp_path):
    path = tmp_path / "data.md"
    path.write_text("# A\n# B\n", encoding="utf-8")
    deck, error = load_deck_or_placeholder(str(path))
    assert error is None
    assert deck.titles() == ["A", "B"]
