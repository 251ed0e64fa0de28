# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Line splitting that matches how ESLint numbers source lines."""

from __future__ import annotations

import re
from typing import Final

LINE_TERMINATOR: Final[re.Pattern[str]] = re.compile(r"\r\n|\r|\n")


def split_lines(text: str) -> tuple[list[str], bool]:
    """Split ``text`` on ``\\r\\n``, ``\\r`` and ``\\n`` only.

    Unlike :meth:`str.splitlines`, form feeds, NEL, vertical tabs and the
    Unicode line/paragraph separators stay inside their line, because ESLint
    does not count them as line breaks.

    Args:
        text: Complete text to split.

    Returns:
        tuple[list[str], bool]: The lines without terminators, and whether
        ``text`` ended with a terminator.
    """

    if not text:
        return [], False
    lines = LINE_TERMINATOR.split(text)
    trailing = lines[-1] == ""
    if trailing:
        lines.pop()
    return lines, trailing


__all__ = ["LINE_TERMINATOR", "split_lines"]
