# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Configuration model for the suppression inserter."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Final

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from .core.errors import GrampaError
from .core.severity import Severity

DEFAULT_DIRECTIVE: Final[str] = "// eslint-disable-next-line"
DEFAULT_EXTENSIONS: Final[tuple[str, ...]] = (".js", ".ts", ".jsx", ".tsx")


class ConfigError(GrampaError):
    """Raised when configuration input is invalid."""


class GrampaConfig(BaseModel):
    """Settings controlling how diagnostics are read and directives written."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    directive: str = DEFAULT_DIRECTIVE
    extensions: tuple[str, ...] = DEFAULT_EXTENSIONS
    error_severity: Severity = Severity.ERROR
    encoding: str = "utf-8"
    newline: str = "\n"
    dry_run: bool = False

    @field_validator("directive")
    @classmethod
    def _strip_directive(cls, value: str) -> str:
        stripped = value.strip()
        if not stripped:
            raise ValueError("directive must not be empty")
        return stripped

    @field_validator("extensions", mode="before")
    @classmethod
    def _normalise_extensions(cls, value: Any) -> tuple[str, ...]:
        if isinstance(value, str):
            value = (value,)
        normalised: list[str] = []
        for raw in value:
            suffix = str(raw).strip()
            if not suffix:
                continue
            if not suffix.startswith("."):
                suffix = f".{suffix}"
            if suffix not in normalised:
                normalised.append(suffix)
        if not normalised:
            raise ValueError("at least one source extension is required")
        return tuple(normalised)

    @field_validator("newline")
    @classmethod
    def _check_newline(cls, value: str) -> str:
        if value not in {"\n", "\r\n"}:
            raise ValueError("newline must be '\\n' or '\\r\\n'")
        return value

    def with_overrides(self, overrides: Mapping[str, Any]) -> GrampaConfig:
        """Return a copy of the config with ``overrides`` applied and validated.

        ``None`` values are ignored so that unset CLI options leave the loaded
        configuration untouched.

        Args:
            overrides: Field names mapped to replacement values.

        Returns:
            GrampaConfig: Validated configuration including the overrides.

        Raises:
            ConfigError: If an override is unknown or fails validation.
        """

        updates = {key: value for key, value in overrides.items() if value is not None}
        if not updates:
            return self
        return build_config({**self.model_dump(), **updates})


def build_config(data: Mapping[str, Any]) -> GrampaConfig:
    """Validate ``data`` into a :class:`GrampaConfig`.

    Args:
        data: Raw configuration mapping, typically read from TOML.

    Returns:
        GrampaConfig: Validated configuration.

    Raises:
        ConfigError: If ``data`` does not describe a valid configuration.
    """

    try:
        return GrampaConfig.model_validate(dict(data))
    except ValidationError as exc:
        raise ConfigError(f"Invalid grampa configuration: {exc}") from exc


__all__ = [
    "DEFAULT_DIRECTIVE",
    "DEFAULT_EXTENSIONS",
    "ConfigError",
    "GrampaConfig",
    "build_config",
]
