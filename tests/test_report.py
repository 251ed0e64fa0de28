# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for structured ESLint report ingestion."""

from __future__ import annotations

import json

import pytest

from grampa.core.severity import Severity
from grampa.parsers.report import ReportFormatError, bags_from_report, load_report


def test_only_error_messages_with_rules_are_kept() -> None:
    payload = [
        {
            "filePath": "/repo/a.js",
            "messages": [
                {"line": 3, "severity": 2, "ruleId": "semi"},
                {"line": 4, "severity": 1, "ruleId": "no-console"},
                {"line": 1, "severity": 2, "ruleId": None, "message": "Parsing error"},
                {"line": 6, "severity": 2},
                {"line": 3, "severity": 2, "ruleId": "quotes"},
            ],
        },
    ]

    bags = bags_from_report(payload)

    assert len(bags) == 1
    assert [(item.line_number, item.rule_name) for item in bags[0].diagnostics] == [(3, "semi"), (3, "quotes")]


def test_records_without_errors_still_produce_a_bag() -> None:
    payload = [
        {"filePath": "/repo/a.js", "messages": [{"line": 1, "severity": 2, "ruleId": "semi"}]},
        {"filePath": "/repo/b.js", "messages": [{"line": 1, "severity": 1, "ruleId": "semi"}]},
    ]

    bags = bags_from_report(payload)

    assert [bag.filepath for bag in bags] == ["/repo/a.js", "/repo/b.js"]
    assert bags[1].diagnostics == []


def test_diagnostics_alias_is_accepted() -> None:
    payload = [{"filePath": "/repo/a.js", "diagnostics": [{"line": 2, "severity": 2, "ruleId": "eqeqeq"}]}]

    bags = bags_from_report(payload)

    assert bags[0].diagnostics[0].rule_name == "eqeqeq"


def test_error_severity_is_configurable() -> None:
    payload = [{"filePath": "/repo/a.js", "messages": [{"line": 2, "severity": 1, "ruleId": "no-console"}]}]

    bags = bags_from_report(payload, error_severity=Severity.WARNING)

    assert bags[0].diagnostics[0].rule_name == "no-console"


def test_non_list_report_is_rejected() -> None:
    with pytest.raises(ReportFormatError):
        bags_from_report({"filePath": "/repo/a.js"})


def test_record_without_path_is_rejected() -> None:
    with pytest.raises(ReportFormatError, match="record 0"):
        bags_from_report([{"messages": []}])


def test_load_report_decodes_json_document() -> None:
    payload = [{"filePath": "/repo/a.js", "messages": []}]

    assert load_report(json.dumps(payload)) == payload
    assert load_report("   \n") == []


def test_load_report_falls_back_to_json_lines() -> None:
    text = "\n".join(
        [
            json.dumps([{"filePath": "/repo/a.js", "messages": []}]),
            "not json",
            json.dumps({"filePath": "/repo/b.js", "messages": []}),
        ],
    )

    assert [entry["filePath"] for entry in load_report(text)] == ["/repo/a.js", "/repo/b.js"]


def test_load_report_rejects_garbage() -> None:
    with pytest.raises(ReportFormatError):
        load_report("/repo/a.js\n  1:1  error  Missing semicolon  semi")
