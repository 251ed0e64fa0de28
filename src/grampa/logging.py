# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Console output for grampa: status lines and routed debug records.

Every message is printed through a Rich console from :func:`console_for`,
which caches one console per colour, emoji and TTY combination. The CLI's
status lines and the ``--debug`` handler therefore share the same consoles.
"""

from __future__ import annotations

import logging
import sys
from enum import StrEnum
from functools import lru_cache
from typing import Final

from rich.console import Console
from rich.text import Text

PACKAGE_LOGGER: Final[str] = "grampa"


class Level(StrEnum):
    """Kinds of status line the CLI prints."""

    INFO = "info"
    OK = "ok"
    WARN = "warn"
    FAIL = "fail"


# (emoji prefix, rich style)
_LEVEL_STYLE: Final[dict[Level, tuple[str, str]]] = {
    Level.INFO: ("ℹ️ ", "cyan"),
    Level.OK: ("✅ ", "green"),
    Level.WARN: ("⚠️ ", "yellow"),
    Level.FAIL: ("❌ ", "red"),
}


def stdout_is_tty() -> bool:
    """Return whether ``sys.stdout`` is attached to a terminal."""

    try:
        return sys.stdout.isatty()
    except (AttributeError, ValueError):
        return False


@lru_cache(maxsize=8)
def _cached_console(color: bool, emoji: bool, tty: bool) -> Console:
    colourise = color and tty
    return Console(
        color_system="auto" if colourise else None,
        force_terminal=tty,
        no_color=not colourise,
        emoji=emoji,
        highlight=False,
        soft_wrap=True,
    )


def console_for(*, color: bool, emoji: bool) -> Console:
    """Return the shared console for the given presentation flags.

    Colour is only ever emitted when stdout is a terminal, whatever ``color``
    says. The console resolves ``sys.stdout`` at print time, so redirected
    streams (test runners, pipes) receive the output.

    Args:
        color: Whether colour output is wanted.
        emoji: Whether Rich should render emoji codes.

    Returns:
        Console: Cached console for the flags and the current TTY state.
    """

    return _cached_console(color, emoji, stdout_is_tty())


def emit(level: Level, msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    """Print ``msg`` as a status line of ``level``.

    Args:
        level: Kind of status line; selects the emoji prefix and style.
        msg: Message text.
        use_emoji: Whether to prefix the level's emoji.
        use_color: Explicit colour choice; ``None`` follows TTY detection.
    """

    color = stdout_is_tty() if use_color is None else use_color
    prefix, style = _LEVEL_STYLE[level]
    text = Text(f"{prefix}{msg}" if use_emoji else msg)
    if color:
        text.stylize(style)
    console_for(color=color, emoji=use_emoji).print(text)


def info(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Level.INFO, msg, use_emoji=use_emoji, use_color=use_color)


def ok(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Level.OK, msg, use_emoji=use_emoji, use_color=use_color)


def warn(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Level.WARN, msg, use_emoji=use_emoji, use_color=use_color)


def fail(msg: str, *, use_emoji: bool, use_color: bool | None = None) -> None:
    emit(Level.FAIL, msg, use_emoji=use_emoji, use_color=use_color)


class ConsoleDebugHandler(logging.Handler):
    """Print ``grampa`` log records as ``[debug] <logger>: <message>`` lines."""

    def __init__(self, *, use_color: bool) -> None:
        super().__init__(level=logging.DEBUG)
        self._use_color = use_color

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = self.format(record)
        except (TypeError, ValueError):
            self.handleError(record)
            return
        styled = self._use_color
        text = Text("[debug] ", style="bold cyan" if styled else "")
        text.append(f"{record.name}: ", style="bold magenta" if styled else "")
        text.append(message, style="dim" if styled else "")
        console_for(color=styled, emoji=False).print(text)


def configure_debug_logging(*, enabled: bool, use_color: bool) -> None:
    """Route ``grampa`` debug records to the console when ``enabled``.

    Repeated calls replace the previously installed handler.

    Args:
        enabled: Whether debug output should be shown.
        use_color: Whether the debug output may be colourised.
    """

    logger = logging.getLogger(PACKAGE_LOGGER)
    for handler in list(logger.handlers):
        if isinstance(handler, ConsoleDebugHandler):
            logger.removeHandler(handler)
    if not enabled:
        logger.setLevel(logging.NOTSET)
        return
    logger.addHandler(ConsoleDebugHandler(use_color=use_color))
    logger.setLevel(logging.DEBUG)


__all__ = [
    "ConsoleDebugHandler",
    "Level",
    "configure_debug_logging",
    "console_for",
    "emit",
    "fail",
    "info",
    "ok",
    "stdout_is_tty",
    "warn",
]
