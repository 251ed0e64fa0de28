# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI entry point inserting ESLint suppression directives."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import Final

import typer

from ..config_loader import load_config
from ..core.errors import GrampaError
from ..core.models import PatchStatus, RunSummary
from ..logging import configure_debug_logging
from ..parsers.report import load_report
from ..pipeline import suppress_report, suppress_text
from .shared import CLIError, CLILogger, build_cli_logger

STDIN_MARKER: Final[str] = "-"

app = typer.Typer(
    name="grampa",
    help="Insert eslint-disable-next-line directives above every reported error.",
    add_completion=False,
    no_args_is_help=False,
)


def _read_input(source: Path | None) -> str:
    """Return the full diagnostic input for this invocation.

    Args:
        source: File holding linter output, or ``None``/``-`` for stdin.

    Returns:
        str: Complete input text read to end-of-input.

    Raises:
        CLIError: If the input file cannot be read.
    """

    if source is None or str(source) == STDIN_MARKER:
        return sys.stdin.read()
    try:
        return source.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CLIError(f"Unable to read linter output from {source}: {exc}", exit_code=2) from exc


def _render_summary(summary: RunSummary, logger: CLILogger, *, dry_run: bool) -> None:
    for outcome in summary.failures:
        logger.warn(f"Could not patch {outcome.filepath}: {outcome.error}")
    if dry_run:
        planned = [outcome for outcome in summary.outcomes if outcome.status is PatchStatus.PLANNED]
        for outcome in planned:
            logger.echo(f"  {outcome.filepath}: {outcome.inserted} directive(s)")
        logger.info(f"Dry run: {summary.directives} directive(s) planned in {len(planned)} file(s); nothing was written.")
        return
    logger.info(f"Inserted {summary.directives} directive(s) into {summary.patched} file(s).")
    logger.ok(summary.message)


@app.command()
def suppress(
    source: Path | None = typer.Argument(
        None,
        metavar="[FILE]",
        help="ESLint output to read; omit or pass '-' to read stdin.",
    ),
    report: bool = typer.Option(
        False,
        "--report",
        "-j",
        help="Treat the input as an ESLint JSON report (--format json).",
    ),
    root: Path | None = typer.Option(
        None,
        "--root",
        "-r",
        help="Project root for configuration and relative paths (default: cwd).",
    ),
    directive: str | None = typer.Option(
        None,
        "--directive",
        help="Directive prefix inserted before the rule names.",
    ),
    dry_run: bool = typer.Option(False, "--dry-run", help="Report planned edits without writing files."),
    no_emoji: bool = typer.Option(False, "--no-emoji", help="Disable emoji in output."),
    no_color: bool = typer.Option(False, "--no-color", help="Disable coloured output."),
    debug: bool = typer.Option(False, "--debug", help="Show debug logging."),
) -> None:
    """Suppress every ESLint error by inserting a directive above its line."""

    logger = build_cli_logger(emoji=not no_emoji, no_color=no_color)
    configure_debug_logging(enabled=debug, use_color=not no_color)
    project_root = (root or Path.cwd()).resolve()
    try:
        config = load_config(
            project_root,
            overrides={"directive": directive, "dry_run": True if dry_run else None},
        )
        text = _read_input(source)
        if report:
            summary = suppress_report(load_report(text), config, root=project_root)
        else:
            summary = suppress_text(text, config, root=project_root)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc
    except GrampaError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc
    _render_summary(summary, logger, dry_run=config.dry_run)


def main() -> None:
    """Console script entry point."""

    app()


__all__ = ["app", "main", "suppress"]
