"""Tests for opening resolved sources and detecting brushes."""

from __future__ import annotations

from pathlib import Path

import pytest
import responses

from src.snippets.base import ResolutionError, ResolvedSource, SnippetIOError
from src.snippets.reader import detect_brush, open_source


@pytest.mark.parametrize(
    ("path", "expected"),
    [
        ("/docs/Example.java", "java"),
        ("/docs/archive.tar.gz", "gz"),
        ("/docs/Upper.JS", "JS"),
        ("/docs/v1.0/README", None),
        ("/docs/trailing.", None),
        ("C:\\docs\\script.ps1", "ps1"),
    ],
)
def test_detect_brush(path: str, expected: str | None) -> None:
    assert detect_brush(path) == expected


def test_detect_brush_uses_aliases_when_present() -> None:
    assert detect_brush("hello.py", aliases={"py": "python"}) == "python"
    assert detect_brush("hello.rb", aliases={"py": "python"}) == "rb"


def test_open_local_file_yields_lines_without_terminators(tmp_path: Path) -> None:
    source = tmp_path / "sample.txt"
    source.write_bytes(b"first\r\nsecond\nthird")
    resolved = ResolvedSource(uri=source.as_uri(), path=str(source), brush="txt")

    with open_source(resolved) as lines:
        collected = list(lines)

    assert collected == ["first", "second", "third"]


def test_open_local_file_closes_handle_after_error(tmp_path: Path, monkeypatch) -> None:
    source = tmp_path / "sample.txt"
    source.write_text("a\nb\n", encoding="utf-8")
    resolved = ResolvedSource(uri=source.as_uri(), path=str(source))
    opened = []
    original_open = Path.open

    def tracking_open(self, *args, **kwargs):
        handle = original_open(self, *args, **kwargs)
        opened.append(handle)
        return handle

    monkeypatch.setattr(Path, "open", tracking_open)

    with pytest.raises(RuntimeError):
        with open_source(resolved) as lines:
            next(lines)
            raise RuntimeError("boom")

    assert opened and opened[0].closed


def test_open_missing_file_raises_io_error(tmp_path: Path) -> None:
    missing = tmp_path / "missing.txt"
    resolved = ResolvedSource(uri=missing.as_uri(), path=str(missing))

    with pytest.raises(SnippetIOError, match="Could not open file") as excinfo:
        with open_source(resolved):
            pass

    assert isinstance(excinfo.value.__cause__, OSError)


def test_decode_failure_raises_read_error(tmp_path: Path) -> None:
    source = tmp_path / "binary.txt"
    source.write_bytes(b"ok\n\xff\xfe\xfd\n")
    resolved = ResolvedSource(uri=source.as_uri(), path=str(source))

    with pytest.raises(SnippetIOError, match="Could not read from file"):
        with open_source(resolved) as lines:
            list(lines)


def test_unsupported_scheme_raises_resolution_error() -> None:
    resolved = ResolvedSource(uri="ftp://example.com/a.java", path="/a.java", brush="java")

    with pytest.raises(ResolutionError, match="Unsupported URI scheme"):
        with open_source(resolved):
            pass


def test_open_http_source_streams_lines() -> None:
    url = "https://example.com/src/Example.java"
    resolved = ResolvedSource(uri=url, path="/src/Example.java", brush="java")

    with responses.RequestsMock() as mock:
        mock.add(
            responses.GET,
            url,
            body="class Example {\n}\n",
            status=200,
            content_type="text/plain; charset=utf-8",
        )

        with open_source(resolved) as lines:
            collected = list(lines)

    assert collected == ["class Example {", "}"]


def test_open_http_error_status_raises_io_error() -> None:
    url = "https://example.com/missing.java"
    resolved = ResolvedSource(uri=url, path="/missing.java", brush="java")

    with responses.RequestsMock() as mock:
        mock.add(responses.GET, url, status=404)

        with pytest.raises(SnippetIOError, match="Could not open file"):
            with open_source(resolved):
                pass


def test_http_and_file_sources_split_lines_identically(tmp_path: Path) -> None:
    body = "a\x0cb\nc d\r\ne\x85f\n\nlast"
    source = tmp_path / "sample.txt"
    source.write_bytes(body.encode("utf-8"))
    local = ResolvedSource(uri=source.as_uri(), path=str(source))
    url = "https://example.com/sample.txt"
    remote = ResolvedSource(uri=url, path="/sample.txt", brush="txt")

    with open_source(local) as lines:
        from_file = list(lines)

    with responses.RequestsMock() as mock:
        mock.add(responses.GET, url, body=body.encode("utf-8"), status=200, content_type="text/plain; charset=utf-8")

        with open_source(remote) as lines:
            from_http = list(lines)

    assert from_file == ["a\x0cb", "c d", "e\x85f", "", "last"]
    assert from_http == from_file
