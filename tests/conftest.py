# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

SourceFactory = Callable[[str, list[str]], Path]


@pytest.fixture
def write_source(tmp_path: Path) -> SourceFactory:
    """Return a helper writing ``lines`` to ``tmp_path / name`` with LF endings."""

    def _write(name: str, lines: list[str]) -> Path:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text("\n".join(lines) + "\n", encoding="utf-8")
        return path

    return _write
