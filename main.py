#!/usr/bin/env python3

from __future__ import annotations

import argparse
import sys

from src.cli.commands.snippets import build_parser as build_render_parser
from src.cli.commands.snippets import render_cli


def main(argv: list[str] | None = None) -> int:
    raw_args = sys.argv[1:] if argv is None else argv

    if raw_args and raw_args[0] == "render":
        raw_args = raw_args[1:]

    parser = build_render_parser(prog="python -m main render")
    try:
        args = parser.parse_args(raw_args)
    except argparse.ArgumentError as exc:
        parser.error(str(exc))

    return render_cli(args)


if __name__ == "__main__":
    raise SystemExit(main())
