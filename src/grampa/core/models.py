# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the grampa package."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Final

from pydantic import BaseModel, ConfigDict, Field, model_validator

SUCCESS_MESSAGE: Final[str] = (
    "Grampa ran successfully! Please run `git diff` and review the changes before committing."
)


class Diagnostic(BaseModel):
    """A single reported violation anchored to a 1-based line.

    ``rule_name`` is optional so that records lifted from structured reports
    can be represented before rule-less entries are filtered out. Consolidation
    treats a missing rule name as a broken contract.
    """

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=1)
    rule_name: str | None = None


class FileDiagnosticBag(BaseModel):
    """Diagnostics collected for one file in the order they were observed."""

    model_config = ConfigDict(validate_assignment=True)

    filepath: str
    diagnostics: list[Diagnostic] = Field(default_factory=list)

    def add(self, line_number: int, rule_name: str | None) -> None:
        """Append a diagnostic for ``line_number`` reported under ``rule_name``.

        Args:
            line_number: 1-based line the diagnostic points at.
            rule_name: Identifier of the rule that fired.
        """

        self.diagnostics.append(Diagnostic(line_number=line_number, rule_name=rule_name))


class LineEdit(BaseModel):
    """All rule names to suppress on a single line."""

    model_config = ConfigDict(frozen=True)

    line_number: int = Field(ge=1)
    rule_names: tuple[str, ...] = Field(min_length=1)


class ConsolidatedFile(BaseModel):
    """Edits for one file, ordered from the bottom of the file upwards."""

    model_config = ConfigDict(frozen=True)

    filepath: str
    edits: tuple[LineEdit, ...] = Field(default_factory=tuple)

    @model_validator(mode="after")
    def _check_descending(self) -> ConsolidatedFile:
        """Reject edit sequences that are not strictly descending by line.

        Returns:
            ConsolidatedFile: The validated instance.

        Raises:
            ValueError: If two edits share a line or appear in ascending order.
        """

        for upper, lower in zip(self.edits, self.edits[1:]):
            if upper.line_number <= lower.line_number:
                raise ValueError(
                    f"edits for {self.filepath} must be strictly descending by line number "
                    f"(found {upper.line_number} before {lower.line_number})",
                )
        return self

    @property
    def directive_count(self) -> int:
        """Return the number of directives this file will receive."""

        return len(self.edits)


class PatchStatus(str, Enum):
    """Enumerate the per-file results of a patch run."""

    PATCHED = "patched"
    UNCHANGED = "unchanged"
    PLANNED = "planned"
    FAILED = "failed"


class PatchOutcome(BaseModel):
    """Describe what happened to a single file during a run."""

    model_config = ConfigDict(frozen=True)

    filepath: str
    status: PatchStatus
    inserted: int = 0
    error: str | None = None

    @property
    def ok(self) -> bool:
        """Return ``True`` when the file did not fail."""

        return self.status is not PatchStatus.FAILED


@dataclass(slots=True)
class RunSummary:
    """Ordered per-file outcomes for one invocation."""

    outcomes: list[PatchOutcome] = field(default_factory=list)
    message: str = SUCCESS_MESSAGE

    def record(self, outcome: PatchOutcome) -> None:
        """Append ``outcome`` to the summary."""

        self.outcomes.append(outcome)

    @property
    def failures(self) -> list[PatchOutcome]:
        """Return outcomes for files that could not be patched."""

        return [outcome for outcome in self.outcomes if not outcome.ok]

    @property
    def patched(self) -> int:
        """Return the number of files rewritten on disk."""

        return sum(1 for outcome in self.outcomes if outcome.status is PatchStatus.PATCHED)

    @property
    def directives(self) -> int:
        """Return the number of directives inserted or planned."""

        return sum(outcome.inserted for outcome in self.outcomes if outcome.ok)


__all__ = [
    "SUCCESS_MESSAGE",
    "ConsolidatedFile",
    "Diagnostic",
    "FileDiagnosticBag",
    "LineEdit",
    "PatchOutcome",
    "PatchStatus",
    "RunSummary",
]
