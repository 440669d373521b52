"""Result-returning orchestration for rendering source blocks."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from .base import ExtractionRequest, SnippetError
from .config import MacroConfig
from .macro import extract_source
from .markup import HtmlSink, emit


@dataclass(slots=True)
class RenderOutcome:
    source: str | None
    status: str
    markup: str | None = None
    brush: str | None = None
    snippet: str | None = None
    error: str | None = None

    @property
    def succeeded(self) -> bool:
        return self.status == "rendered"


def render_source(
    *,
    uri: str | None = None,
    file: str | None = None,
    basedir: str | Path | None = None,
    snippet: str | None = None,
    config: MacroConfig | None = None,
) -> RenderOutcome:
    active_config = config or MacroConfig.default()
    request = ExtractionRequest(
        uri=uri,
        file=file,
        basedir=Path(basedir) if basedir is not None else None,
        snippet=snippet,
    )

    try:
        resolved, content = extract_source(request, config=active_config)
    except SnippetError as exc:
        return RenderOutcome(
            source=uri or file,
            status="error",
            snippet=snippet,
            error=str(exc),
        )

    sink = HtmlSink()
    emit(sink, content, resolved.brush, config=active_config)
    return RenderOutcome(
        source=resolved.uri,
        status="rendered",
        markup=sink.getvalue(),
        brush=resolved.brush,
        snippet=snippet,
    )
