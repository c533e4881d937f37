# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Shared pytest fixtures."""

from __future__ import annotations

import asyncio
import json
from collections.abc import Sequence
from dataclasses import dataclass, field
from pathlib import Path

import pytest

from credo_bridge.core.models import NotificationRequest, NotificationResponse, ProcessResult
from credo_bridge.core.runtime.process import CommandOptions
from credo_bridge.host import InMemoryDiagnosticStore, LocalWorkspace
from credo_bridge.interfaces.host import HostServices

MODULEDOC_ISSUE: dict[str, object] = {
    "category": "readability",
    "check": "Credo.Check.Readability.ModuleDoc",
    "column": 1,
    "column_end": 10,
    "filename": "lib/foo.ex",
    "line_no": 3,
    "message": "Missing moduledoc",
    "priority": 3,
    "scope": "Foo",
    "trigger": "defmodule",
}


def make_issue(**overrides: object) -> dict[str, object]:
    """Return a Credo issue payload with ``overrides`` applied."""
    return {**MODULEDOC_ISSUE, **overrides}


def credo_stdout(*issues: dict[str, object]) -> str:
    """Render ``issues`` the way ``mix credo --format json`` prints them."""
    return json.dumps({"issues": list(issues)})


@dataclass
class FakeLauncher:
    """Launcher returning canned results and recording every call."""

    results: list[ProcessResult] = field(default_factory=list)
    calls: list[tuple[tuple[str, ...], CommandOptions]] = field(default_factory=list)
    gate: asyncio.Event | None = None
    error: OSError | None = None

    def queue(self, *, stdout: str = "", stderr: str = "", returncode: int = 0) -> None:
        self.results.append(ProcessResult(args=(), returncode=returncode, stdout=stdout, stderr=stderr))

    async def run(self, args: Sequence[str], *, options: CommandOptions) -> ProcessResult:
        self.calls.append((tuple(args), options))
        if self.gate is not None:
            await self.gate.wait()
        if self.error is not None:
            raise self.error
        if len(self.results) > 1:
            return self.results.pop(0)
        return self.results[0]


@dataclass
class RecordingNotifier:
    """Notifier that records requests and answers with ``action_idx``."""

    action_idx: int | None = 0
    requests: list[NotificationRequest] = field(default_factory=list)

    async def add(self, request: NotificationRequest) -> NotificationResponse:
        self.requests.append(request)
        return NotificationResponse(identifier=request.identifier, action_idx=self.action_idx)


@pytest.fixture
def launcher() -> FakeLauncher:
    return FakeLauncher()


@pytest.fixture
def notifier() -> RecordingNotifier:
    return RecordingNotifier()


@pytest.fixture
def store() -> InMemoryDiagnosticStore:
    return InMemoryDiagnosticStore()


@pytest.fixture
def workspace(tmp_path: Path) -> LocalWorkspace:
    return LocalWorkspace(tmp_path)


@pytest.fixture
def services(
    launcher: FakeLauncher,
    notifier: RecordingNotifier,
    store: InMemoryDiagnosticStore,
    workspace: LocalWorkspace,
) -> HostServices:
    return HostServices(launcher=launcher, notifier=notifier, store=store, workspace=workspace)


@pytest.fixture(name="make_issue")
def make_issue_fixture():
    return make_issue


@pytest.fixture(name="credo_stdout")
def credo_stdout_fixture():
    return credo_stdout
