# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Single-pass state machine grouping stylish output into per-file edits."""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass

from ..config import DEFAULT_EXTENSIONS
from ..core.errors import GrampaError
from ..core.models import ConsolidatedFile, FileDiagnosticBag
from ..core.text import split_lines
from ..diagnostics.consolidate import consolidate
from .events import ErrorReceived, Event, FilePathReceived, Noise, classify

LOGGER = logging.getLogger(__name__)

_ANSI_ESCAPE = re.compile(r"\x1b\[[0-9;]*m")


class StreamStructureError(GrampaError):
    """Raised when an error line appears before any file path header."""


@dataclass(frozen=True, slots=True)
class NoFileOpen:
    """Aggregator state before the first file header."""


@dataclass(frozen=True, slots=True)
class FileOpen:
    """Aggregator state while diagnostics accumulate for ``bag.filepath``."""

    bag: FileDiagnosticBag


AggregatorState = NoFileOpen | FileOpen


class StreamAggregator:
    """Consume parser events and emit one :class:`ConsolidatedFile` per header.

    Files are emitted in the order their headers were first seen. A bag is
    closed when the next header arrives or when :meth:`finish` is called.
    """

    def __init__(self) -> None:
        self._state: AggregatorState = NoFileOpen()
        self._emitted: list[ConsolidatedFile] = []
        self._line_index = 0

    @property
    def state(self) -> AggregatorState:
        """Return the current aggregator state."""

        return self._state

    def feed(self, event: Event) -> None:
        """Advance the state machine by one event.

        Args:
            event: Classified input line.

        Raises:
            StreamStructureError: If an error line arrives while no file is open.
        """

        self._line_index += 1
        match event:
            case FilePathReceived(filepath=filepath):
                self._close()
                self._state = FileOpen(bag=FileDiagnosticBag(filepath=filepath))
            case ErrorReceived(line_number=line_number, rule_name=rule_name):
                match self._state:
                    case FileOpen(bag=bag):
                        bag.add(line_number, rule_name)
                    case NoFileOpen():
                        raise StreamStructureError(
                            f"input line {self._line_index} reports rule '{rule_name}' "
                            "before any file path was announced",
                        )
            case Noise():
                pass

    def finish(self) -> list[ConsolidatedFile]:
        """Close any open file and return every consolidated file emitted so far."""

        self._close()
        return list(self._emitted)

    def _close(self) -> None:
        match self._state:
            case FileOpen(bag=bag):
                LOGGER.debug("closing %s with %d diagnostics", bag.filepath, len(bag.diagnostics))
                self._emitted.append(consolidate(bag))
            case NoFileOpen():
                pass
        self._state = NoFileOpen()


def aggregate(lines: Iterable[str], *, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> list[ConsolidatedFile]:
    """Classify and aggregate ``lines`` into consolidated files.

    Args:
        lines: Lines of stylish output, with or without trailing terminators.
            Colour escape sequences are removed before classification.
        extensions: Source suffixes recognised on file header lines.

    Returns:
        list[ConsolidatedFile]: Consolidated files in first-seen order.

    Raises:
        StreamStructureError: If an error line precedes every file header.
    """

    aggregator = StreamAggregator()
    for line in lines:
        cleaned = _ANSI_ESCAPE.sub("", line.rstrip("\r\n"))
        aggregator.feed(classify(cleaned, extensions=extensions))
    return aggregator.finish()


def aggregate_text(text: str, *, extensions: Sequence[str] = DEFAULT_EXTENSIONS) -> list[ConsolidatedFile]:
    """Aggregate a fully buffered block of stylish output."""

    lines, _ = split_lines(text)
    return aggregate(lines, extensions=extensions)


__all__ = [
    "AggregatorState",
    "FileOpen",
    "NoFileOpen",
    "StreamAggregator",
    "StreamStructureError",
    "aggregate",
    "aggregate_text",
]
