"""Line-oriented readers for resolved sources and brush detection."""

from __future__ import annotations

import io
import logging
from contextlib import contextmanager
from pathlib import Path
from typing import Iterable, Iterator, Mapping

import requests
from urllib3.exceptions import HTTPError as TransportError

from .base import ResolutionError, ResolvedSource, SnippetIOError
from .config import MacroConfig

logger = logging.getLogger(__name__)

SUPPORTED_SCHEMES = frozenset({"file", "http", "https"})


def detect_brush(path: str, *, aliases: Mapping[str, str] | None = None) -> str | None:
    """Return the extension of the last segment of ``path``, or ``None`` without one."""

    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    if "." not in name:
        return None
    suffix = name.rsplit(".", 1)[1]
    if not suffix:
        return None
    if aliases:
        return aliases.get(suffix, suffix)
    return suffix


@contextmanager
def open_source(resolved: ResolvedSource, *, config: MacroConfig | None = None) -> Iterator[Iterator[str]]:
    """Open ``resolved`` and yield its lines without terminators.

    The underlying file handle or HTTP response is released when the block
    exits, whether extraction finished or raised.
    """

    active_config = config or MacroConfig.default()
    scheme = resolved.scheme
    if scheme not in SUPPORTED_SCHEMES:
        raise ResolutionError(f"Unsupported URI scheme '{scheme}' for {resolved.uri}")

    if scheme == "file":
        with _open_file(Path(resolved.path), active_config) as lines:
            yield lines
    else:
        with _open_http(resolved.uri, active_config) as lines:
            yield lines


@contextmanager
def _open_file(path: Path, config: MacroConfig) -> Iterator[Iterator[str]]:
    try:
        handle = path.open("r", encoding=config.encoding)
    except OSError as exc:
        raise SnippetIOError(f"Could not open file '{path}'") from exc

    logger.debug("Opened %s", path)
    with handle:
        yield _guarded_lines(handle, str(path))


@contextmanager
def _open_http(uri: str, config: MacroConfig) -> Iterator[Iterator[str]]:
    try:
        response = requests.get(uri, stream=True, timeout=config.timeout_seconds)
        response.raise_for_status()
    except requests.RequestException as exc:
        raise SnippetIOError(f"Could not open file '{uri}'") from exc

    if response.encoding is None:
        response.encoding = config.encoding
    logger.debug("Fetched %s (status=%s)", uri, response.status_code)
    response.raw.decode_content = True
    with response:
        stream = io.TextIOWrapper(response.raw, encoding=response.encoding, newline=None)
        yield _guarded_lines(stream, uri)


def _guarded_lines(source: Iterable[str], location: str) -> Iterator[str]:
    try:
        for line in source:
            yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError, requests.RequestException, TransportError) as exc:
        raise SnippetIOError(f"Could not read from file '{location}'") from exc
