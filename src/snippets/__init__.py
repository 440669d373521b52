"""Source-code macro: render files and marked snippets for documentation pages."""

from .base import (
    ConfigurationError,
    ExtractionRequest,
    MacroRequest,
    ResolutionError,
    ResolvedSource,
    Sink,
    SnippetError,
    SnippetIOError,
    SnippetNotFoundError,
    UnterminatedSnippetError,
)
from .config import MacroConfig, load_macro_config
from .macro import ParameterRequest, SourceCodeMacro, extract_source
from .markup import HtmlSink, emit, render_markup
from .reader import detect_brush, open_source
from .resolver import resolve_file_path, resolve_source
from .runner import RenderOutcome, render_source
from .scanner import END_SNIPPET, START_SNIPPET, ScanState, find_snippet, list_snippets, read_all

__all__ = [
    "ConfigurationError",
    "ExtractionRequest",
    "MacroRequest",
    "ResolutionError",
    "ResolvedSource",
    "Sink",
    "SnippetError",
    "SnippetIOError",
    "SnippetNotFoundError",
    "UnterminatedSnippetError",
    "MacroConfig",
    "load_macro_config",
    "ParameterRequest",
    "SourceCodeMacro",
    "extract_source",
    "HtmlSink",
    "emit",
    "render_markup",
    "detect_brush",
    "open_source",
    "resolve_file_path",
    "resolve_source",
    "RenderOutcome",
    "render_source",
    "END_SNIPPET",
    "START_SNIPPET",
    "ScanState",
    "find_snippet",
    "list_snippets",
    "read_all",
]
