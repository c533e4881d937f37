# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the in-process host services."""

from __future__ import annotations

import asyncio
from io import StringIO
from pathlib import Path

from rich.console import Console

from credo_bridge.core.models import Diagnostic
from credo_bridge.core.severity import Severity
from credo_bridge.host import ConsoleNotifier, InMemoryDiagnosticStore, LocalDocument, LocalWorkspace
from credo_bridge.interfaces.host import DiagnosticStore, Workspace
from credo_bridge.notifications import build_error_request


def test_store_replaces_and_removes_entries() -> None:
    store = InMemoryDiagnosticStore()
    diagnostic = Diagnostic(code="c", message="m", severity=Severity.WARNING, line=1, end_line=1)

    store.set("file:///a.ex", [diagnostic, diagnostic])
    store.set("file:///a.ex", [diagnostic])
    assert list(store.get("file:///a.ex") or []) == [diagnostic]

    store.remove("file:///a.ex")
    store.remove("file:///missing.ex")
    assert len(store) == 0
    assert isinstance(store, DiagnosticStore)


def test_document_identity_ignores_relative_spelling(tmp_path: Path) -> None:
    relative = LocalDocument.from_path("lib/../lib/foo.ex", root=tmp_path)
    absolute = LocalDocument.from_path(tmp_path / "lib" / "foo.ex")

    assert relative.uri == absolute.uri
    assert relative.path == "lib/../lib/foo.ex"


def test_workspace_tracks_views_by_identity(tmp_path: Path) -> None:
    workspace = LocalWorkspace(tmp_path)
    document = LocalDocument.from_path("lib/foo.ex", root=tmp_path)
    first = workspace.open(document)
    second = workspace.open(document)

    workspace.close(first)

    assert workspace.text_editors == (second,)
    assert isinstance(workspace, Workspace)


def test_console_notifier_renders_request() -> None:
    buffer = StringIO()
    notifier = ConsoleNotifier(Console(file=buffer, width=120), action_idx=None)

    response = asyncio.run(notifier.add(build_error_request("mix not found")))

    assert response.identifier == "credo-error"
    assert response.action_idx is None
    output = buffer.getvalue()
    assert "Credo Encountered an Error" in output
    assert "mix not found" in output


def test_console_notifier_keeps_bracketed_stderr() -> None:
    buffer = StringIO()
    notifier = ConsoleNotifier(Console(file=buffer, width=120))

    asyncio.run(notifier.add(build_error_request("[error] Could not compile dependency :jason [/]")))

    output = buffer.getvalue()
    assert "[error] Could not compile dependency :jason [/]" in output
    assert "Dismiss / Project Settings" in output
