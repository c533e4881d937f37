# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for translating Credo issues into diagnostics."""

from __future__ import annotations

import pytest

from credo_bridge.core.models import Diagnostic, RawAnalysisIssue
from credo_bridge.core.severity import Severity
from credo_bridge.errors import MappingError
from credo_bridge.mapper import summarize_priorities, summarize_severities, to_diagnostic, to_diagnostics


def test_to_diagnostic_copies_fields(make_issue) -> None:
    raw = RawAnalysisIssue.model_validate(make_issue())

    diagnostic = to_diagnostic(raw)

    assert diagnostic.code == "readability"
    assert diagnostic.message == "Missing moduledoc"
    assert diagnostic.severity is Severity.HINT
    assert diagnostic.source == "Credo"
    assert (diagnostic.line, diagnostic.column) == (3, 1)
    assert (diagnostic.end_line, diagnostic.end_column) == (3, 10)
    assert diagnostic.check == "Credo.Check.Readability.ModuleDoc"
    assert diagnostic.file == "lib/foo.ex"


def test_zero_columns_stay_on_the_reported_line(make_issue) -> None:
    raw = RawAnalysisIssue.model_validate(make_issue(line_no=4, column=0, column_end=0))

    diagnostic = to_diagnostic(raw)

    assert (diagnostic.line, diagnostic.column, diagnostic.end_line, diagnostic.end_column) == (4, 0, 4, 0)


def test_missing_column_end_falls_back_to_column(make_issue) -> None:
    payload = make_issue(column=7)
    del payload["column_end"]
    raw = RawAnalysisIssue.model_validate(payload)

    diagnostic = to_diagnostic(raw)

    assert diagnostic.end_column == 7
    assert diagnostic.end_line == diagnostic.line


def test_unknown_priority_is_rejected(make_issue) -> None:
    raw = RawAnalysisIssue.model_validate(make_issue(priority=9))

    with pytest.raises(MappingError):
        to_diagnostic(raw)


def test_to_diagnostics_aborts_on_first_bad_priority(make_issue) -> None:
    raws = [
        RawAnalysisIssue.model_validate(make_issue(priority=1)),
        RawAnalysisIssue.model_validate(make_issue(priority=0)),
    ]

    with pytest.raises(MappingError):
        to_diagnostics(raws)


def test_host_payload_uses_camel_case_span_keys(make_issue) -> None:
    diagnostic = to_diagnostic(RawAnalysisIssue.model_validate(make_issue()))

    assert diagnostic.to_host_payload() == {
        "code": "readability",
        "message": "Missing moduledoc",
        "severity": "hint",
        "source": "Credo",
        "line": 3,
        "column": 1,
        "endLine": 3,
        "endColumn": 10,
    }


def test_diagnostic_rejects_multi_line_spans() -> None:
    with pytest.raises(ValueError):
        Diagnostic(code="x", message="y", severity=Severity.INFO, line=1, end_line=2)


def test_summaries_count_each_bucket(make_issue) -> None:
    raws = [RawAnalysisIssue.model_validate(make_issue(priority=p)) for p in (1, 1, 2, 4)]

    by_priority = summarize_priorities(raws)
    by_severity = summarize_severities(to_diagnostics(raws))

    assert by_priority.total == 4
    assert dict(by_priority.counts) == {"1": 2, "2": 1, "3": 0, "4": 1}
    assert dict(by_severity.counts) == {"error": 2, "warning": 1, "hint": 0, "info": 1}
    rendered = by_priority.render("Received 4 issues from Credo:")
    assert rendered.splitlines() == [
        "Received 4 issues from Credo:",
        "priority\t| total",
        "1\t\t| 2",
        "2\t\t| 1",
        "3\t\t| 0",
        "4\t\t| 1",
    ]
