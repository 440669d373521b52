"""Documentation-host entry point for the ``source-code`` macro."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from .base import (
    ConfigurationError,
    ExtractionRequest,
    MacroRequest,
    ResolvedSource,
    Sink,
)
from .config import MacroConfig
from .markup import emit
from .reader import open_source
from .resolver import resolve_source
from .scanner import find_snippet, read_all

logger = logging.getLogger(__name__)

MACRO_NAME = "source-code"


@dataclass(slots=True)
class ParameterRequest:
    """Plain :class:`MacroRequest` backed by a parameter mapping."""

    parameters: Mapping[str, Any] = field(default_factory=dict)
    basedir: Path | None = None

    def get_parameter(self, name: str) -> Any:
        return self.parameters.get(name)

    def get_basedir(self) -> Path | None:
        return self.basedir


def build_extraction_request(request: MacroRequest) -> ExtractionRequest:
    """Validate the raw macro parameters and collect them into an ``ExtractionRequest``."""

    uri = request.get_parameter("uri")
    file = request.get_parameter("file")
    snippet = request.get_parameter("snippet")

    if uri is not None and not isinstance(uri, str):
        raise ConfigurationError("Illegally formatted URI (uri parameter).")
    if file is not None and not isinstance(file, str):
        raise ConfigurationError("Illegally formatted URI (file parameter).")
    if snippet is not None and not isinstance(snippet, str):
        raise ConfigurationError("Illegally formatted snippet id")

    basedir = request.get_basedir()
    return ExtractionRequest(
        uri=uri,
        file=file,
        basedir=Path(basedir) if basedir is not None else None,
        snippet=snippet,
    )


def extract_source(
    request: ExtractionRequest,
    *,
    config: MacroConfig | None = None,
) -> tuple[ResolvedSource, str]:
    """Resolve, open, and read ``request``; return the source and extracted text."""

    active_config = config or MacroConfig.default()
    resolved = resolve_source(request, config=active_config)
    with open_source(resolved, config=active_config) as lines:
        if request.whole_file:
            content = read_all(lines, newline=active_config.newline)
        else:
            content = find_snippet(lines, request.snippet, newline=active_config.newline)
    return resolved, content


class SourceCodeMacro:
    """Render a source file, or one snippet of it, into the host's sink."""

    name = MACRO_NAME

    def __init__(self, config: MacroConfig | None = None) -> None:
        self.config = config or MacroConfig.default()

    def execute(self, sink: Sink, request: MacroRequest) -> None:
        extraction = build_extraction_request(request)
        resolved, content = extract_source(extraction, config=self.config)
        logger.debug(
            "Rendering %s from %s",
            f"snippet '{extraction.snippet}'" if extraction.snippet else "whole file",
            resolved.uri,
        )
        emit(sink, content, resolved.brush, config=self.config)
