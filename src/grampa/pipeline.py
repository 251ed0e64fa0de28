# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""End-to-end suppression runs over text streams and structured reports."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from pathlib import Path
from typing import TextIO

from .config import GrampaConfig
from .core.models import ConsolidatedFile, RunSummary
from .core.serialization import JsonValue
from .diagnostics.consolidate import consolidate
from .parsers.report import bags_from_report
from .parsers.stream import aggregate_text
from .patching.applier import patch_file

LOGGER = logging.getLogger(__name__)


def apply_consolidated(
    files: Iterable[ConsolidatedFile],
    config: GrampaConfig | None = None,
    *,
    root: Path | None = None,
) -> RunSummary:
    """Patch each consolidated file in order, isolating per-file failures.

    Args:
        files: Consolidated files in first-seen order.
        config: Active configuration.
        root: Directory relative file paths are resolved against.

    Returns:
        RunSummary: Outcome for every file, in processing order.
    """

    cfg = config or GrampaConfig()
    summary = RunSummary()
    for consolidated in files:
        outcome = patch_file(consolidated, cfg, root=root)
        if not outcome.ok:
            LOGGER.info("skipped %s: %s", outcome.filepath, outcome.error)
        summary.record(outcome)
    return summary


def suppress_text(text: str, config: GrampaConfig | None = None, *, root: Path | None = None) -> RunSummary:
    """Suppress every error reported in a buffer of stylish output.

    The whole buffer is parsed and consolidated before the first file is
    touched, so a structural error aborts the run without writing anything.

    Args:
        text: Complete linter output.
        config: Active configuration.
        root: Directory relative file paths are resolved against.

    Returns:
        RunSummary: Per-file outcomes.

    Raises:
        StreamStructureError: If an error line precedes every file header.
    """

    cfg = config or GrampaConfig()
    files = aggregate_text(text, extensions=cfg.extensions)
    return apply_consolidated(files, cfg, root=root)


def suppress_stream(stream: TextIO, config: GrampaConfig | None = None, *, root: Path | None = None) -> RunSummary:
    """Read ``stream`` to end-of-input and hand the buffer to :func:`suppress_text`."""

    buffer = stream.read()
    return suppress_text(buffer, config, root=root)


def suppress_report(
    results: JsonValue,
    config: GrampaConfig | None = None,
    *,
    root: Path | None = None,
) -> RunSummary:
    """Suppress every error found in a decoded ESLint JSON report.

    Args:
        results: ESLint result list.
        config: Active configuration.
        root: Directory relative file paths are resolved against.

    Returns:
        RunSummary: Per-file outcomes, one per report record.

    Raises:
        ReportFormatError: If ``results`` is not a list of file records.
    """

    cfg = config or GrampaConfig()
    bags = bags_from_report(results, error_severity=cfg.error_severity)
    files = [consolidate(bag) for bag in bags]
    return apply_consolidated(files, cfg, root=root)


def format_results(results: JsonValue, _context: object | None = None) -> str:
    """Formatter-style entry point returning the advisory status message.

    Args:
        results: ESLint result list.
        _context: Formatter context supplied by the caller (unused).

    Returns:
        str: Message asking the operator to review the diff, followed by one
        line per file that could not be patched.
    """

    summary = suppress_report(results)
    lines = [summary.message]
    lines.extend(f"Could not patch {outcome.filepath}: {outcome.error}" for outcome in summary.failures)
    return "\n".join(lines)


__all__ = [
    "apply_consolidated",
    "format_results",
    "suppress_report",
    "suppress_stream",
    "suppress_text",
]
