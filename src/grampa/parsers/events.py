# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Classify lines of ESLint ``stylish`` output into parser events.

The stylish formatter prints a header line holding the absolute path of each
linted file, followed by one line per problem shaped like::

    12:5  error  Missing semicolon  semi

and finally blank and summary lines. :func:`classify` isolates the two
interesting shapes without a full grammar; everything else is noise.
"""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Final

from ..config import DEFAULT_EXTENSIONS

PATH_SEPARATORS: Final[tuple[str, ...]] = ("/", "\\")
PARSE_FAILURE_MARKER: Final[str] = "unexpected token"
_POSITION_SEPARATOR: Final[str] = ":"
_POSITION_PARTS: Final[int] = 2


@dataclass(frozen=True, slots=True)
class FilePathReceived:
    """A header line announcing the file subsequent errors belong to."""

    filepath: str


@dataclass(frozen=True, slots=True)
class ErrorReceived:
    """A problem line carrying a line number and rule identifier."""

    line_number: int
    rule_name: str


@dataclass(frozen=True, slots=True)
class Noise:
    """Any line carrying no usable signal."""


Event = FilePathReceived | ErrorReceived | Noise

NOISE: Final[Noise] = Noise()


def _parse_line_number(token: str) -> int | None:
    """Return the 1-based line number encoded in a ``line:column`` token."""

    parts = token.split(_POSITION_SEPARATOR)
    if len(parts) != _POSITION_PARTS:
        return None
    head = parts[0]
    if not (head.isascii() and head.isdigit()):
        return None
    value = int(head)
    return value if value >= 1 else None


def classify(line: str, *, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> Event:
    """Map one line of linter output to a parser event.

    Args:
        line: Raw line of text without its terminator.
        extensions: Source suffixes that identify a file header line.

    Returns:
        Event: :class:`FilePathReceived`, :class:`ErrorReceived` or :class:`Noise`.
    """

    if line.startswith(PATH_SEPARATORS) and line.endswith(tuple(extensions)):
        return FilePathReceived(filepath=line)
    # Parse failures carry no rule id and must never become a directive.
    if PARSE_FAILURE_MARKER in line.casefold():
        return NOISE
    tokens = line.split()
    if not tokens:
        return NOISE
    first, last = tokens[0], tokens[-1]
    if first == last:
        return NOISE
    line_number = _parse_line_number(first)
    if line_number is None:
        return NOISE
    return ErrorReceived(line_number=line_number, rule_name=last)


__all__ = [
    "NOISE",
    "ErrorReceived",
    "Event",
    "FilePathReceived",
    "Noise",
    "classify",
]
