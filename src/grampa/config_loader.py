# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Load grampa configuration from ``[tool.grampa]`` in ``pyproject.toml``."""

from __future__ import annotations

import logging
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from .config import ConfigError, GrampaConfig, build_config

PYPROJECT_FILENAME: Final[str] = "pyproject.toml"
PYPROJECT_TOOL_KEY: Final[str] = "tool"
PYPROJECT_SECTION_KEY: Final[str] = "grampa"

LOGGER = logging.getLogger(__name__)


def _normalise_keys(payload: Mapping[str, Any]) -> dict[str, Any]:
    """Convert kebab-case TOML keys into model field names."""

    return {str(key).replace("-", "_"): value for key, value in payload.items()}


def read_pyproject_section(path: Path) -> dict[str, Any]:
    """Return the ``[tool.grampa]`` table from ``path``.

    Args:
        path: Location of a ``pyproject.toml`` document.

    Returns:
        dict[str, Any]: Normalised section contents, empty when the file or
        section is absent.

    Raises:
        ConfigError: If the document cannot be parsed or the section is not a table.
    """

    if not path.is_file():
        return {}
    try:
        with path.open("rb") as handle:
            data = tomllib.load(handle)
    except (OSError, tomllib.TOMLDecodeError) as exc:
        raise ConfigError(f"Unable to read {path}: {exc}") from exc
    tool_section = data.get(PYPROJECT_TOOL_KEY)
    if not isinstance(tool_section, Mapping):
        return {}
    section = tool_section.get(PYPROJECT_SECTION_KEY)
    if section is None:
        return {}
    if not isinstance(section, Mapping):
        raise ConfigError(f"[{PYPROJECT_TOOL_KEY}.{PYPROJECT_SECTION_KEY}] in {path} must be a table")
    return _normalise_keys(section)


def load_config(project_root: Path, *, overrides: Mapping[str, Any] | None = None) -> GrampaConfig:
    """Load configuration for ``project_root`` layering overrides last.

    Args:
        project_root: Directory whose ``pyproject.toml`` is consulted.
        overrides: Optional values (usually CLI options) applied after the file.

    Returns:
        GrampaConfig: Validated configuration.
    """

    pyproject = project_root / PYPROJECT_FILENAME
    section = read_pyproject_section(pyproject)
    if section:
        LOGGER.debug("loaded [tool.grampa] from %s keys=%s", pyproject, sorted(section))
    config = build_config(section)
    if overrides:
        config = config.with_overrides(overrides)
    return config


__all__ = ["load_config", "read_pyproject_section"]
