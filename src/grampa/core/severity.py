# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity levels reported by ESLint."""

from __future__ import annotations

from enum import IntEnum

from .serialization import JsonValue, coerce_optional_int


class Severity(IntEnum):
    """Numeric severity levels used in ESLint's JSON report."""

    OFF = 0
    WARNING = 1
    ERROR = 2


def severity_from_payload(value: JsonValue) -> Severity | None:
    """Return the :class:`Severity` encoded by ``value``.

    Args:
        value: Raw ``severity`` field from an ESLint message.

    Returns:
        Severity | None: Matching severity, or ``None`` when ``value`` is not a
        recognised level.
    """

    level = coerce_optional_int(value)
    if level is None:
        return None
    try:
        return Severity(level)
    except ValueError:
        return None


__all__ = ["Severity", "severity_from_payload"]
