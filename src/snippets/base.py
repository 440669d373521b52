"""Core snippet interfaces, errors, and data models."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Any, Protocol


class SnippetError(RuntimeError):
    """Raised when a source block cannot be rendered."""


class ConfigurationError(SnippetError):
    """Raised when the macro parameters are missing, conflicting, or mistyped."""


class ResolutionError(SnippetError):
    """Raised when a source location cannot be parsed or found."""


class SnippetIOError(SnippetError):
    """Raised when a resolved source cannot be opened or read."""


class SnippetNotFoundError(SnippetError):
    """Raised when the requested snippet has no complete start/end pair."""

    def __init__(self, snippet_id: str, message: str | None = None) -> None:
        self.snippet_id = snippet_id
        super().__init__(message or f'Could not find snippet "{snippet_id}"')


class UnterminatedSnippetError(SnippetNotFoundError):
    """Raised when a start marker is found but its end marker never follows."""

    def __init__(self, snippet_id: str) -> None:
        super().__init__(
            snippet_id,
            f'Could not find end of snippet "{snippet_id}" (missing END SNIPPET marker)',
        )


@dataclass(frozen=True)
class ExtractionRequest:
    """Describes which source to load and which region of it to keep."""

    uri: str | None = None
    file: str | None = None
    basedir: Path | None = None
    snippet: str | None = None

    @property
    def whole_file(self) -> bool:
        return self.snippet is None


@dataclass(frozen=True)
class ResolvedSource:
    """A concrete, openable location plus the brush derived from its path."""

    uri: str
    path: str
    brush: str | None = None

    @property
    def scheme(self) -> str:
        return self.uri.split(":", 1)[0].lower()


class Sink(Protocol):
    """Output channel that accumulates rendered document markup."""

    def raw_text(self, text: str) -> None:
        ...


class MacroRequest(Protocol):
    """Parameter bag handed to the macro by the documentation host."""

    def get_parameter(self, name: str) -> Any:
        ...

    def get_basedir(self) -> Path | None:
        ...
