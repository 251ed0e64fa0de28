# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models and error types shared across grampa."""

from __future__ import annotations

from .errors import GrampaError
from .models import (
    ConsolidatedFile,
    Diagnostic,
    FileDiagnosticBag,
    LineEdit,
    PatchOutcome,
    PatchStatus,
    RunSummary,
)
from .severity import Severity

__all__ = [
    "ConsolidatedFile",
    "Diagnostic",
    "FileDiagnosticBag",
    "GrampaError",
    "LineEdit",
    "PatchOutcome",
    "PatchStatus",
    "RunSummary",
    "Severity",
]
