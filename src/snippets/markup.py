"""HTML markup for highlighted source blocks."""

from __future__ import annotations

import html

from .base import Sink
from .config import MacroConfig


class HtmlSink:
    """Sink that accumulates raw markup fragments in memory."""

    def __init__(self) -> None:
        self._fragments: list[str] = []

    def raw_text(self, text: str) -> None:
        self._fragments.append(text)

    @property
    def fragments(self) -> list[str]:
        return list(self._fragments)

    def getvalue(self) -> str:
        return "".join(self._fragments)


def render_markup(content: str, brush: str | None, *, config: MacroConfig | None = None) -> list[str]:
    """Return the markup fragments wrapping ``content`` for display."""

    active_config = config or MacroConfig.default()
    container_class = html.escape(active_config.container_class, quote=True)
    if brush is None:
        pre_open = "<pre>"
    else:
        pre_open = f'<pre class="brush: {html.escape(brush, quote=True)}">'
    return [
        f'<div class="{container_class}">',
        pre_open,
        html.escape(content, quote=True),
        "</pre></div>",
    ]


def emit(sink: Sink, content: str, brush: str | None, *, config: MacroConfig | None = None) -> None:
    for fragment in render_markup(content, brush, config=config):
        sink.raw_text(fragment)
