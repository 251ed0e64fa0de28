# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Diagnostic consolidation helpers."""

from __future__ import annotations

from .consolidate import DiagnosticContractError, consolidate, dedupe_diagnostics, merge_by_line

__all__ = [
    "DiagnosticContractError",
    "consolidate",
    "dedupe_diagnostics",
    "merge_by_line",
]
