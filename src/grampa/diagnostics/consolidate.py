# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Turn a bag of raw diagnostics into edits that are safe to apply in order."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from ..core.errors import GrampaError
from ..core.models import ConsolidatedFile, Diagnostic, FileDiagnosticBag, LineEdit


class DiagnosticContractError(GrampaError):
    """Raised when a diagnostic without a rule name reaches consolidation."""


def dedupe_diagnostics(diagnostics: Iterable[Diagnostic], *, filepath: str = "<unknown>") -> list[Diagnostic]:
    """Return ``diagnostics`` keeping the first occurrence of each ``(rule, line)`` pair.

    Args:
        diagnostics: Diagnostics in observation order.
        filepath: File the diagnostics belong to, used in error messages.

    Returns:
        list[Diagnostic]: Order-preserving deduplicated diagnostics.

    Raises:
        DiagnosticContractError: If any diagnostic lacks a rule name.
    """

    seen: set[tuple[str, int]] = set()
    unique: list[Diagnostic] = []
    for diagnostic in diagnostics:
        if not diagnostic.rule_name:
            raise DiagnosticContractError(
                f"diagnostic on line {diagnostic.line_number} of {filepath} has no rule name",
            )
        key = (diagnostic.rule_name, diagnostic.line_number)
        if key in seen:
            continue
        seen.add(key)
        unique.append(diagnostic)
    return unique


def merge_by_line(diagnostics: Sequence[Diagnostic]) -> list[LineEdit]:
    """Group deduplicated diagnostics into one :class:`LineEdit` per line.

    Rule names keep the order in which they first appeared on each line.
    """

    grouped: dict[int, list[str]] = {}
    for diagnostic in diagnostics:
        names = grouped.setdefault(diagnostic.line_number, [])
        if diagnostic.rule_name is not None and diagnostic.rule_name not in names:
            names.append(diagnostic.rule_name)
    return [LineEdit(line_number=line, rule_names=tuple(names)) for line, names in grouped.items()]


def consolidate(bag: FileDiagnosticBag) -> ConsolidatedFile:
    """Deduplicate, merge and order the diagnostics collected for one file.

    Edits come back sorted from the highest line number down: inserting a
    directive above line ``n`` shifts every later line, so applying the
    bottom-most edit first leaves the targets of the remaining edits intact.

    Args:
        bag: Diagnostics gathered for a single file.

    Returns:
        ConsolidatedFile: Edits ready for the patch applier.

    Raises:
        DiagnosticContractError: If a diagnostic lacks a rule name.
    """

    unique = dedupe_diagnostics(bag.diagnostics, filepath=bag.filepath)
    edits = merge_by_line(unique)
    edits.sort(key=lambda edit: edit.line_number, reverse=True)
    return ConsolidatedFile(filepath=bag.filepath, edits=tuple(edits))


__all__ = [
    "DiagnosticContractError",
    "consolidate",
    "dedupe_diagnostics",
    "merge_by_line",
]
