"""Snippet marker scanning over line streams."""

from __future__ import annotations

import logging
import os
import re
from enum import Enum
from typing import Iterable

from .base import SnippetNotFoundError, UnterminatedSnippetError

logger = logging.getLogger(__name__)

START_SNIPPET = re.compile(r"START SNIPPET:\s*(\S+)")
END_SNIPPET = re.compile(r"END SNIPPET:\s*(\S+)")


class ScanState(str, Enum):
    SEEKING_START = "seeking_start"
    IN_SNIPPET = "in_snippet"
    DONE = "done"


def matches_marker(line: str, pattern: re.Pattern[str], snippet_id: str) -> bool:
    """Return ``True`` when ``line`` carries ``pattern`` tagged with ``snippet_id``."""

    match = pattern.search(line)
    return match is not None and match.group(1) == snippet_id


def read_all(lines: Iterable[str], *, newline: str = os.linesep) -> str:
    """Join every line of ``lines`` with a trailing ``newline`` each."""

    return "".join(f"{line}{newline}" for line in lines)


def find_snippet(lines: Iterable[str], snippet_id: str, *, newline: str = os.linesep) -> str:
    """Return the lines strictly between the start and end markers of ``snippet_id``.

    Raises :class:`SnippetNotFoundError` when no start marker matches and
    :class:`UnterminatedSnippetError` when the stream ends inside the snippet.
    """

    state = ScanState.SEEKING_START
    buffer: list[str] = []

    for line in lines:
        if state is ScanState.SEEKING_START:
            if matches_marker(line, START_SNIPPET, snippet_id):
                state = ScanState.IN_SNIPPET
            continue

        if matches_marker(line, END_SNIPPET, snippet_id):
            state = ScanState.DONE
            break
        buffer.append(line)
        buffer.append(newline)

    if state is ScanState.SEEKING_START:
        raise SnippetNotFoundError(snippet_id)
    if state is ScanState.IN_SNIPPET:
        raise UnterminatedSnippetError(snippet_id)

    logger.debug("Extracted snippet '%s' (%d lines)", snippet_id, len(buffer) // 2)
    return "".join(buffer)


def list_snippets(lines: Iterable[str]) -> list[str]:
    """Return snippet identifiers in the order their start markers appear."""

    identifiers: list[str] = []
    for line in lines:
        match = START_SNIPPET.search(line)
        if match and match.group(1) not in identifiers:
            identifiers.append(match.group(1))
    return identifiers
