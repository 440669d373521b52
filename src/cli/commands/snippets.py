"""CLI commands for rendering source files and snippets to HTML."""
from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from src.snippets.base import ExtractionRequest, SnippetError
from src.snippets.config import MacroConfig, load_macro_config
from src.snippets.reader import open_source
from src.snippets.resolver import resolve_source
from src.snippets.runner import render_source
from src.snippets.scanner import list_snippets

__all__ = ["build_parser", "render_cli"]


def build_parser(*, prog: str | None = None) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Render a source file or snippet as highlighted HTML.",
        prog=prog,
    )
    _configure_parser(parser)
    return parser


def _configure_parser(parser: argparse.ArgumentParser) -> None:
    location = parser.add_mutually_exclusive_group(required=True)
    location.add_argument("--file", help="Source file path, relative to --basedir unless absolute.")
    location.add_argument("--uri", help="Source URI (file, http, or https).")
    parser.add_argument("--snippet", help="Snippet identifier to extract. Omit to render the whole file.")
    parser.add_argument(
        "--basedir",
        type=Path,
        default=None,
        help="Base directory for relative --file paths (defaults to the working directory).",
    )
    parser.add_argument(
        "--config",
        type=Path,
        help="Path to a snippet YAML config (default: config/snippets.yaml when present).",
    )
    parser.add_argument(
        "--list",
        action="store_true",
        help="List snippet identifiers found in the source instead of rendering.",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging.",
    )
    parser.set_defaults(func=render_cli, command="render")


def render_cli(args: argparse.Namespace) -> int:
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        config = load_macro_config(args.config)
    except (FileNotFoundError, ValueError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    if args.list:
        return _list_cli(args, config)

    outcome = render_source(
        uri=args.uri,
        file=args.file,
        basedir=args.basedir,
        snippet=args.snippet,
        config=config,
    )
    if not outcome.succeeded:
        print(f"error: {outcome.error}", file=sys.stderr)
        return 1

    print(outcome.markup)
    return 0


def _list_cli(args: argparse.Namespace, config: MacroConfig) -> int:
    request = ExtractionRequest(uri=args.uri, file=args.file, basedir=args.basedir)
    try:
        resolved = resolve_source(request, config=config)
        with open_source(resolved, config=config) as lines:
            identifiers = list_snippets(lines)
    except SnippetError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 1

    for identifier in identifiers:
        print(identifier)
    return 0
