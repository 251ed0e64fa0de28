# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for diagnostic deduplication, merging and ordering."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from grampa.core.models import ConsolidatedFile, Diagnostic, FileDiagnosticBag, LineEdit
from grampa.diagnostics import DiagnosticContractError, consolidate, dedupe_diagnostics, merge_by_line


def _bag(*pairs: tuple[int, str | None]) -> FileDiagnosticBag:
    bag = FileDiagnosticBag(filepath="/repo/a.js")
    for line, rule in pairs:
        bag.add(line, rule)
    return bag


def test_consolidate_merges_and_orders_descending() -> None:
    result = consolidate(_bag((5, "a"), (5, "a"), (5, "b"), (2, "c")))

    assert result.filepath == "/repo/a.js"
    assert result.edits == (
        LineEdit(line_number=5, rule_names=("a", "b")),
        LineEdit(line_number=2, rule_names=("c",)),
    )


def test_dedupe_keeps_first_occurrence_order() -> None:
    diagnostics = [
        Diagnostic(line_number=4, rule_name="b"),
        Diagnostic(line_number=4, rule_name="a"),
        Diagnostic(line_number=4, rule_name="b"),
        Diagnostic(line_number=7, rule_name="b"),
    ]

    unique = dedupe_diagnostics(diagnostics)

    assert [(item.line_number, item.rule_name) for item in unique] == [(4, "b"), (4, "a"), (7, "b")]
    assert merge_by_line(unique)[0].rule_names == ("b", "a")


def test_same_rule_on_different_lines_is_kept() -> None:
    result = consolidate(_bag((1, "semi"), (3, "semi"), (2, "semi")))

    assert [edit.line_number for edit in result.edits] == [3, 2, 1]
    assert all(edit.rule_names == ("semi",) for edit in result.edits)


def test_missing_rule_name_is_a_contract_breach() -> None:
    with pytest.raises(DiagnosticContractError, match="line 3"):
        consolidate(_bag((1, "semi"), (3, None)))


def test_empty_bag_yields_no_edits() -> None:
    assert consolidate(FileDiagnosticBag(filepath="/repo/empty.js")).edits == ()


def test_consolidated_file_rejects_ascending_edits() -> None:
    with pytest.raises(ValidationError):
        ConsolidatedFile(
            filepath="/repo/a.js",
            edits=(
                LineEdit(line_number=1, rule_names=("a",)),
                LineEdit(line_number=2, rule_names=("b",)),
            ),
        )


def test_consolidated_file_rejects_duplicate_lines() -> None:
    with pytest.raises(ValidationError):
        ConsolidatedFile(
            filepath="/repo/a.js",
            edits=(
                LineEdit(line_number=2, rule_names=("a",)),
                LineEdit(line_number=2, rule_names=("b",)),
            ),
        )


def test_diagnostic_requires_positive_line() -> None:
    with pytest.raises(ValidationError):
        Diagnostic(line_number=0, rule_name="semi")
