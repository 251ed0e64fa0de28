# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Read ESLint's structured JSON report into per-file diagnostic bags."""

from __future__ import annotations

import json
import logging
from collections.abc import Mapping, Sequence
from typing import Final, cast

from ..core.errors import GrampaError
from ..core.models import FileDiagnosticBag
from ..core.serialization import JsonValue, coerce_optional_int, coerce_optional_str, iter_dicts
from ..core.severity import Severity, severity_from_payload

LOGGER = logging.getLogger(__name__)

_PATH_KEYS: Final[tuple[str, ...]] = ("filePath", "filename")
_MESSAGE_KEYS: Final[tuple[str, ...]] = ("messages", "diagnostics")


class ReportFormatError(GrampaError):
    """Raised when a structured report is not a list of file records."""


def load_report(text: str) -> JsonValue:
    """Decode a JSON report, falling back to newline-delimited documents.

    Args:
        text: Raw report text as written by ``eslint --format json``.

    Returns:
        JsonValue: Decoded payload; an empty list for blank input.

    Raises:
        ReportFormatError: If no line of ``text`` decodes as JSON.
    """

    stripped = text.strip()
    if not stripped:
        return []
    try:
        return cast(JsonValue, json.loads(stripped))
    except json.JSONDecodeError as exc:
        payload: list[JsonValue] = []
        for raw_line in stripped.splitlines():
            trimmed = raw_line.strip()
            if not trimmed:
                continue
            try:
                document = cast(JsonValue, json.loads(trimmed))
            except json.JSONDecodeError:
                continue
            if isinstance(document, list):
                payload.extend(document)
            else:
                payload.append(document)
        if not payload:
            raise ReportFormatError(f"report is not valid JSON: {exc}") from exc
        return payload


def _first_present(entry: Mapping[str, JsonValue], keys: Sequence[str]) -> JsonValue:
    for key in keys:
        if key in entry:
            return entry[key]
    return None


def bags_from_report(payload: JsonValue, *, error_severity: Severity = Severity.ERROR) -> list[FileDiagnosticBag]:
    """Convert an ESLint result list into one bag per file record.

    Only messages at ``error_severity`` are kept, and messages without a
    ``ruleId`` (parse failures, for instance) are dropped. Records whose
    messages are all filtered out still produce an empty bag so that the run
    reports them as unchanged.

    Args:
        payload: Decoded ESLint JSON report.
        error_severity: Severity level that qualifies a message for suppression.

    Returns:
        list[FileDiagnosticBag]: Bags in report order.

    Raises:
        ReportFormatError: If ``payload`` is not a list or a record lacks a path.
    """

    if not isinstance(payload, list):
        raise ReportFormatError("structured report must be a list of file records")
    bags: list[FileDiagnosticBag] = []
    for index, entry in enumerate(iter_dicts(payload)):
        path = coerce_optional_str(_first_present(entry, _PATH_KEYS))
        if path is None:
            raise ReportFormatError(f"report record {index} has no filePath")
        bag = FileDiagnosticBag(filepath=path)
        dropped = 0
        for message in iter_dicts(_first_present(entry, _MESSAGE_KEYS)):
            if severity_from_payload(message.get("severity")) is not error_severity:
                continue
            rule_id = coerce_optional_str(message.get("ruleId"))
            line = coerce_optional_int(message.get("line"))
            if rule_id is None or line is None or line < 1:
                dropped += 1
                continue
            bag.add(line, rule_id)
        if dropped:
            LOGGER.debug("dropped %d rule-less error(s) from %s", dropped, path)
        bags.append(bag)
    return bags


__all__ = ["ReportFormatError", "bags_from_report", "load_report"]
