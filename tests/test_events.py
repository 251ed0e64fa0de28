# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the stylish output line classifier."""

from __future__ import annotations

import pytest

from grampa.parsers.events import ErrorReceived, FilePathReceived, Noise, classify


@pytest.mark.parametrize(
    "line",
    [
        "/home/dev/app/src/index.js",
        "/home/dev/app/src/index.ts",
        "/home/dev/app/src/App.jsx",
        "/home/dev/app/src/App.tsx",
        "\\repo\\src\\main.ts",
    ],
)
def test_recognised_paths_open_a_file(line: str) -> None:
    assert classify(line) == FilePathReceived(filepath=line)


@pytest.mark.parametrize(
    "line",
    [
        "/home/dev/app/src/styles.css",
        "/home/dev/app/README.md",
        "/home/dev/app/src/index.mjs",
    ],
)
def test_unrecognised_suffix_is_noise(line: str) -> None:
    assert classify(line) == Noise()


def test_relative_path_is_not_a_header() -> None:
    assert not isinstance(classify("src/index.js"), FilePathReceived)


def test_error_line_yields_line_and_rule() -> None:
    assert classify("12:5  error  Missing semicolon  semi") == ErrorReceived(line_number=12, rule_name="semi")


def test_error_line_with_leading_indentation() -> None:
    event = classify("   3:14  error  'foo' is not defined  no-undef")

    assert event == ErrorReceived(line_number=3, rule_name="no-undef")


def test_scoped_rule_names_are_kept_whole() -> None:
    event = classify("  40:1  error  Unexpected any  @typescript-eslint/no-explicit-any")

    assert event == ErrorReceived(line_number=40, rule_name="@typescript-eslint/no-explicit-any")


@pytest.mark.parametrize(
    "line",
    [
        "  1:1  error  Parsing error: Unexpected token )  ",
        "  7:3  error  Parsing error: unexpected TOKEN  null",
        "UNEXPECTED TOKEN 4:2 rule",
    ],
)
def test_unexpected_token_lines_are_noise(line: str) -> None:
    assert classify(line) == Noise()


@pytest.mark.parametrize(
    "line",
    [
        "",
        "    ",
        "✖ 3 problems (3 errors, 0 warnings)",
        "12:5",
        "semi semi",
        "0:4  error  Bad line  semi",
        "x:4  error  Not numeric  semi",
        "-3:4  error  Negative  semi",
        "12:5:9  error  Too many colons  semi",
        "12  error  No column  semi",
        "１２:5  error  Full width digits  semi",
    ],
)
def test_other_shapes_are_noise(line: str) -> None:
    assert classify(line) == Noise()


def test_custom_extensions_override_defaults() -> None:
    assert classify("/repo/src/main.vue", extensions=(".vue",)) == FilePathReceived(filepath="/repo/src/main.vue")
    assert classify("/repo/src/main.js", extensions=(".vue",)) == Noise()
