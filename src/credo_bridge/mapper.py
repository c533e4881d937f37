# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Translate Credo issue records into host diagnostics."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Final

from .constants import SOURCE_LABEL
from .core.models import Diagnostic, IssueSummary, RawAnalysisIssue
from .core.severity import PRIORITY_SEVERITIES, Severity, severity_from_priority

_PRIORITY_LABEL: Final[str] = "priority"
_SEVERITY_LABEL: Final[str] = "severity"


def to_diagnostic(raw: RawAnalysisIssue) -> Diagnostic:
    """Convert a single Credo issue into a :class:`Diagnostic`.

    The span never crosses lines. A missing or zero ``column_end`` collapses
    the span onto ``column``.

    Args:
        raw: Issue parsed from Credo's JSON output.

    Returns:
        Diagnostic: Normalized diagnostic.

    Raises:
        MappingError: If the issue carries an unknown priority.
    """

    severity = severity_from_priority(raw.priority, check=raw.check)
    end_column = raw.column_end if raw.column_end else raw.column
    return Diagnostic(
        code=raw.category,
        message=raw.message,
        severity=severity,
        source=SOURCE_LABEL,
        line=raw.line_no,
        column=raw.column,
        end_line=raw.line_no,
        end_column=end_column,
        check=raw.check,
        file=raw.filename or None,
    )


def to_diagnostics(raws: Iterable[RawAnalysisIssue]) -> list[Diagnostic]:
    """Map every issue in ``raws``; the first unknown priority aborts the batch."""

    return [to_diagnostic(raw) for raw in raws]


def summarize_priorities(raws: Sequence[RawAnalysisIssue]) -> IssueSummary:
    """Count issues per Credo priority."""

    counts = {str(priority): 0 for priority in PRIORITY_SEVERITIES}
    for raw in raws:
        key = str(raw.priority)
        if key in counts:
            counts[key] += 1
    return IssueSummary(label=_PRIORITY_LABEL, total=len(raws), counts=counts)


def summarize_severities(diagnostics: Sequence[Diagnostic]) -> IssueSummary:
    """Count diagnostics per severity."""

    counts = {severity.value: 0 for severity in Severity}
    for diagnostic in diagnostics:
        counts[diagnostic.severity.value] += 1
    return IssueSummary(label=_SEVERITY_LABEL, total=len(diagnostics), counts=counts)


__all__ = ["summarize_priorities", "summarize_severities", "to_diagnostic", "to_diagnostics"]
