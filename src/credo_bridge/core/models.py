# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Core data models shared across the credo_bridge package."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from ..constants import SOURCE_LABEL
from ..errors import CredoBridgeError
from .severity import Severity


class RawAnalysisIssue(BaseModel):
    """Single finding as emitted by ``mix credo --format json``."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    category: str
    check: str
    column: int | None = None
    column_end: int | None = None
    filename: str = ""
    line_no: int = Field(gt=0)
    message: str
    priority: int = Field(strict=True)
    scope: str = ""
    trigger: str = ""

    @field_validator("scope", "trigger", "filename", mode="before")
    @classmethod
    def _coerce_optional_text(cls, value: object) -> object:
        """Treat ``null`` text fields as empty strings."""
        return "" if value is None else value


class Diagnostic(BaseModel):
    """Normalized diagnostic handed to a host's diagnostic store."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    code: str
    message: str
    severity: Severity
    source: str = SOURCE_LABEL
    line: int
    column: int | None = None
    end_line: int = Field(serialization_alias="endLine")
    end_column: int | None = Field(default=None, serialization_alias="endColumn")
    check: str | None = None
    file: str | None = None

    @model_validator(mode="after")
    def _single_line_span(self) -> Diagnostic:
        """Reject spans that cross lines; Credo only reports single-line ranges."""
        if self.end_line != self.line:
            raise ValueError("diagnostic spans must start and end on the same line")
        return self

    def to_host_payload(self) -> dict[str, Any]:
        """Return the host-facing mapping using camel-cased span keys."""

        return self.model_dump(mode="json", by_alias=True, exclude={"check", "file"})


@dataclass(frozen=True, slots=True)
class ProcessResult:
    """Captured output of a finished subprocess."""

    args: tuple[str, ...]
    returncode: int | None
    stdout: str = ""
    stderr: str = ""
    timed_out: bool = False


@dataclass(frozen=True, slots=True)
class InspectionResult:
    """Tagged outcome of a single Credo inspection."""

    ok: bool
    issues: tuple[RawAnalysisIssue, ...] = ()
    error: CredoBridgeError | None = None
    stderr: str = ""
    returncode: int | None = None

    @classmethod
    def success(
        cls,
        issues: Sequence[RawAnalysisIssue],
        *,
        returncode: int | None = 0,
    ) -> InspectionResult:
        """Build a successful result wrapping ``issues``."""

        return cls(ok=True, issues=tuple(issues), returncode=returncode)

    @classmethod
    def failure(
        cls,
        error: CredoBridgeError,
        *,
        stderr: str = "",
        returncode: int | None = None,
    ) -> InspectionResult:
        """Build a failed result carrying ``error``."""

        return cls(ok=False, error=error, stderr=stderr, returncode=returncode)


@dataclass(frozen=True, slots=True)
class IssueSummary:
    """Total and per-bucket counts used for log summaries."""

    label: str
    total: int
    counts: Mapping[str, int] = field(default_factory=dict)

    def render(self, heading: str) -> str:
        """Return the tab-aligned summary table logged after each run."""

        lines = [heading, f"{self.label}\t| total"]
        lines.extend(f"{bucket}\t\t| {count}" for bucket, count in self.counts.items())
        return "\n".join(lines)


@dataclass(frozen=True, slots=True)
class NotificationRequest:
    """User-facing notification presented by the host."""

    identifier: str
    title: str
    body: str
    actions: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class NotificationResponse:
    """Host reply describing which notification action was chosen."""

    identifier: str
    action_idx: int | None = None


__all__ = [
    "Diagnostic",
    "InspectionResult",
    "IssueSummary",
    "NotificationRequest",
    "NotificationResponse",
    "ProcessResult",
    "RawAnalysisIssue",
]
