# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Insert suppression directives into source files."""

from __future__ import annotations

import logging
from collections.abc import Sequence
from pathlib import Path

from ..config import DEFAULT_DIRECTIVE, GrampaConfig
from ..core.errors import GrampaError
from ..core.models import ConsolidatedFile, LineEdit, PatchOutcome, PatchStatus
from ..core.text import split_lines

LOGGER = logging.getLogger(__name__)


class PatchRangeError(GrampaError):
    """Raised when an edit targets a line beyond the end of the file."""


def render_directive(rule_names: Sequence[str], *, directive: str = DEFAULT_DIRECTIVE) -> str:
    """Return the suppression line for ``rule_names``.

    Example:
        >>> render_directive(["semi", "no-undef"])
        '// eslint-disable-next-line semi, no-undef'
    """

    return f"{directive} {', '.join(rule_names)}"


def apply_edits(
    lines: Sequence[str],
    edits: Sequence[LineEdit],
    *,
    directive: str = DEFAULT_DIRECTIVE,
) -> list[str]:
    """Return ``lines`` with a directive inserted above every edited line.

    ``edits`` must be ordered from the highest line number down, as produced by
    consolidation. Each insertion then happens below every position still
    pending, so the original line numbers stay valid throughout.

    Args:
        lines: File contents split into lines.
        edits: Edits sorted strictly descending by line number.
        directive: Directive prefix placed before the rule names.

    Returns:
        list[str]: New line sequence; ``lines`` itself is not modified.

    Raises:
        PatchRangeError: If an edit targets a line the file does not have.
    """

    patched = list(lines)
    total = len(patched)
    for edit in edits:
        if edit.line_number > total:
            raise PatchRangeError(f"line {edit.line_number} is beyond the end of the file ({total} lines)")
        patched.insert(edit.line_number - 1, render_directive(edit.rule_names, directive=directive))
    return patched


def _read_lines(path: Path, *, encoding: str) -> tuple[list[str], bool]:
    """Return the lines of ``path`` and whether the text ended with a terminator."""

    with path.open("r", encoding=encoding, newline="") as handle:
        return split_lines(handle.read())


def _write_lines(path: Path, lines: Sequence[str], *, encoding: str, newline: str, trailing: bool) -> None:
    body = newline.join(lines)
    if trailing:
        body += newline
    # Encode first: a UnicodeEncodeError must not leave the file truncated.
    payload = body.encode(encoding)
    with path.open("wb") as handle:
        handle.write(payload)


def patch_file(
    consolidated: ConsolidatedFile,
    config: GrampaConfig | None = None,
    *,
    root: Path | None = None,
) -> PatchOutcome:
    """Apply the edits for one file and persist the result.

    The file is read whole, patched in memory and overwritten in full. Files
    without edits are never opened. Read, write and range failures are
    returned as a failed outcome rather than raised so that one bad file does
    not stop a batch.

    Args:
        consolidated: Edits for a single file.
        config: Active configuration; defaults are used when omitted.
        root: Directory relative file paths are resolved against.

    Returns:
        PatchOutcome: Result for the file.
    """

    cfg = config or GrampaConfig()
    filepath = consolidated.filepath
    if not consolidated.edits:
        return PatchOutcome(filepath=filepath, status=PatchStatus.UNCHANGED)
    path = Path(filepath)
    if root is not None and not path.is_absolute():
        path = root / path
    try:
        lines, trailing = _read_lines(path, encoding=cfg.encoding)
        patched = apply_edits(lines, consolidated.edits, directive=cfg.directive)
        if cfg.dry_run:
            LOGGER.debug("dry run: %d directive(s) planned for %s", len(consolidated.edits), filepath)
            return PatchOutcome(filepath=filepath, status=PatchStatus.PLANNED, inserted=len(consolidated.edits))
        _write_lines(path, patched, encoding=cfg.encoding, newline=cfg.newline, trailing=trailing)
    except (OSError, UnicodeError, PatchRangeError) as exc:
        LOGGER.debug("failed to patch %s: %s", filepath, exc)
        return PatchOutcome(filepath=filepath, status=PatchStatus.FAILED, error=str(exc))
    LOGGER.debug("inserted %d directive(s) into %s", len(consolidated.edits), filepath)
    return PatchOutcome(filepath=filepath, status=PatchStatus.PATCHED, inserted=len(consolidated.edits))


__all__ = ["PatchRangeError", "apply_edits", "patch_file", "render_directive"]
