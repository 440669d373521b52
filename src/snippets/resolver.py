"""Resolve macro parameters into an openable source location."""

from __future__ import annotations

import logging
import os
from pathlib import Path
from urllib.parse import urlsplit
from urllib.request import url2pathname

from .base import ConfigurationError, ExtractionRequest, ResolutionError, ResolvedSource
from .config import MacroConfig
from .reader import detect_brush

logger = logging.getLogger(__name__)


def resolve_source(request: ExtractionRequest, *, config: MacroConfig | None = None) -> ResolvedSource:
    """Turn the ``uri`` or ``file`` parameter of ``request`` into a ``ResolvedSource``."""

    active_config = config or MacroConfig.default()
    if (request.uri is None) == (request.file is None):
        raise ConfigurationError(
            'Exactly one of the parameters "uri" and "file" must be specified.'
        )

    if request.uri is not None:
        resolved = _resolve_uri(request.uri, active_config)
    else:
        path = resolve_file_path(
            request.file,
            request.basedir,
            fallback_search=active_config.fallback_search,
        )
        resolved = ResolvedSource(
            uri=path.as_uri(),
            path=str(path),
            brush=detect_brush(path.name, aliases=active_config.brush_aliases),
        )

    logger.debug("Resolved source %s (brush=%s)", resolved.uri, resolved.brush)
    return resolved


def resolve_file_path(
    file: str,
    basedir: Path | None,
    *,
    fallback_search: bool = True,
) -> Path:
    """Locate ``file`` relative to ``basedir``, looking one directory deeper when absent."""

    if not file:
        raise ConfigurationError('The "file" parameter must not be empty.')

    base = Path(basedir) if basedir is not None else Path.cwd()
    path = Path(file)
    if not path.is_absolute():
        path = base / path
    try:
        if path.exists():
            return _absolute(path)

        if fallback_search and base.is_dir():
            candidate = _search_subdirectories(base, file)
            if candidate is not None:
                return _absolute(candidate)
    except OSError as exc:
        raise ResolutionError(f'Could not resolve file "{file}": {exc.strerror or exc}') from exc

    raise ResolutionError(f'No such file: "{file}"')


def _search_subdirectories(base: Path, file: str) -> Path | None:
    subdirectories = sorted(
        (entry for entry in base.iterdir() if entry.is_dir() and not entry.name.startswith(".")),
        key=lambda entry: entry.name,
    )
    matches = [subdirectory / file for subdirectory in subdirectories if (subdirectory / file).exists()]
    if not matches:
        return None
    if len(matches) > 1:
        logger.warning(
            "File '%s' found in %d subdirectories of %s; using %s",
            file,
            len(matches),
            base,
            matches[0],
        )
    else:
        logger.debug("File '%s' not under %s; found in %s", file, base, matches[0].parent)
    return matches[0]


def _resolve_uri(uri: str, config: MacroConfig) -> ResolvedSource:
    try:
        parts = urlsplit(uri)
    except ValueError as exc:
        raise ResolutionError("Illegally formatted URI (uri parameter).") from exc

    if not parts.scheme or any(ch.isspace() for ch in uri):
        raise ResolutionError("Illegally formatted URI (uri parameter).")

    scheme = parts.scheme.lower()
    if scheme == "file":
        path = url2pathname(parts.path)
    else:
        path = parts.path
    name = path.replace("\\", "/").rsplit("/", 1)[-1]
    return ResolvedSource(
        uri=uri,
        path=path,
        brush=detect_brush(name, aliases=config.brush_aliases),
    )


def _absolute(path: Path) -> Path:
    return Path(os.path.abspath(path))
