# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Base exception type for grampa."""

from __future__ import annotations


class GrampaError(RuntimeError):
    """Base class for every error raised deliberately by grampa."""


__all__ = ["GrampaError"]
