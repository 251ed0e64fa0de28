# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parsers for ESLint text and JSON output."""

from __future__ import annotations

from .events import ErrorReceived, Event, FilePathReceived, Noise, classify
from .report import ReportFormatError, bags_from_report, load_report
from .stream import StreamAggregator, StreamStructureError, aggregate, aggregate_text

__all__ = [
    "ErrorReceived",
    "Event",
    "FilePathReceived",
    "Noise",
    "ReportFormatError",
    "StreamAggregator",
    "StreamStructureError",
    "aggregate",
    "aggregate_text",
    "bags_from_report",
    "classify",
    "load_report",
]
