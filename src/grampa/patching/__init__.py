# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Patch application for suppression directives."""

from __future__ import annotations

from .applier import PatchRangeError, apply_edits, patch_file, render_directive

__all__ = ["PatchRangeError", "apply_edits", "patch_file", "render_directive"]
