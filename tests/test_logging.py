# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for console output and debug routing."""

from __future__ import annotations

import logging
from collections.abc import Iterator

import pytest

from grampa.logging import (
    PACKAGE_LOGGER,
    ConsoleDebugHandler,
    Level,
    configure_debug_logging,
    console_for,
    emit,
    warn,
)


@pytest.fixture
def package_logger() -> Iterator[logging.Logger]:
    logger = logging.getLogger(PACKAGE_LOGGER)
    yield logger
    configure_debug_logging(enabled=False, use_color=False)


def _debug_handlers(logger: logging.Logger) -> list[logging.Handler]:
    return [handler for handler in logger.handlers if isinstance(handler, ConsoleDebugHandler)]


def test_console_for_reuses_consoles_per_flags() -> None:
    plain = console_for(color=False, emoji=False)

    assert console_for(color=False, emoji=False) is plain
    assert console_for(color=False, emoji=True) is not plain


def test_status_lines_respect_emoji_flag(capsys: pytest.CaptureFixture[str]) -> None:
    warn("careful", use_emoji=False, use_color=False)
    emit(Level.OK, "done", use_emoji=True, use_color=False)

    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "careful"
    assert lines[1].startswith("✅")
    assert lines[1].endswith("done")


def test_configure_debug_logging_installs_single_handler(package_logger: logging.Logger) -> None:
    configure_debug_logging(enabled=True, use_color=False)
    configure_debug_logging(enabled=True, use_color=False)

    assert len(_debug_handlers(package_logger)) == 1
    assert package_logger.level == logging.DEBUG

    configure_debug_logging(enabled=False, use_color=False)

    assert _debug_handlers(package_logger) == []
    assert package_logger.level == logging.NOTSET


def test_debug_records_print_on_shared_console(
    package_logger: logging.Logger,
    capsys: pytest.CaptureFixture[str],
) -> None:
    configure_debug_logging(enabled=True, use_color=False)

    logging.getLogger(f"{PACKAGE_LOGGER}.patching").debug("inserted %d directive(s)", 2)
    warn("after", use_emoji=False, use_color=False)

    out = capsys.readouterr().out.splitlines()
    assert out == ["[debug] grampa.patching: inserted 2 directive(s)", "after"]
