# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""In-process host services used by the CLI and by embedding applications."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.text import Text

from .core.models import Diagnostic, NotificationRequest, NotificationResponse, ProcessResult
from .core.runtime.process import CommandOptions, run_shell_command
from .interfaces.host import EditorView, IssueAssistant

LOGGER = logging.getLogger(__name__)


class SubprocessLauncher:
    """Launch commands with :func:`asyncio.create_subprocess_shell`."""

    async def run(self, args: Sequence[str], *, options: CommandOptions) -> ProcessResult:
        """Run ``args`` through the shell.

        Args:
            args: Command and arguments, quoted individually.
            options: Working directory, environment and timeout.

        Returns:
            ProcessResult: Captured output once the command exits or times out.
        """

        return await run_shell_command(args, options=options)


class InMemoryDiagnosticStore:
    """Diagnostic store keeping one list of diagnostics per document key."""

    def __init__(self) -> None:
        self._entries: dict[str, tuple[Diagnostic, ...]] = {}

    def set(self, key: str, diagnostics: Sequence[Diagnostic]) -> None:
        """Replace the diagnostics stored for ``key``."""

        self._entries[key] = tuple(diagnostics)

    def remove(self, key: str) -> None:
        """Drop the entry for ``key``; unknown keys are ignored."""

        self._entries.pop(key, None)

    def get(self, key: str) -> Sequence[Diagnostic] | None:
        """Return the diagnostics for ``key``, or ``None`` when absent."""

        return self._entries.get(key)

    def keys(self) -> list[str]:
        """Return the document keys that currently hold diagnostics."""

        return list(self._entries)

    def __contains__(self, key: object) -> bool:
        return key in self._entries

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)


@dataclass(frozen=True, slots=True)
class MappingConfigScope:
    """Configuration tier backed by a plain mapping."""

    values: Mapping[str, object] = field(default_factory=dict)

    def get(self, name: str) -> object | None:
        """Return the value configured for ``name``, if any."""

        return self.values.get(name)


@dataclass(frozen=True, slots=True)
class LocalDocument:
    """Document backed by a file on the local filesystem."""

    path: str
    uri: str

    @classmethod
    def from_path(cls, path: Path | str, *, root: Path | None = None) -> LocalDocument:
        """Build a document whose identity is the resolved file URI.

        Args:
            path: File path, absolute or relative to ``root``.
            root: Directory used to resolve relative paths.

        Returns:
            LocalDocument: Document keyed by its ``file://`` URI.
        """

        candidate = Path(path)
        resolved = candidate if candidate.is_absolute() else (root or Path.cwd()) / candidate
        return cls(path=str(path), uri=resolved.resolve().as_uri())


@dataclass(frozen=True, slots=True, eq=False)
class LocalView:
    """A view onto a :class:`LocalDocument`; each instance is a distinct view."""

    document: LocalDocument


class LocalWorkspace:
    """Workspace rooted at a directory with an explicit list of open views."""

    def __init__(self, path: Path, *, on_open_config: Callable[[], None] | None = None) -> None:
        self._path = path
        self._views: list[EditorView] = []
        self._on_open_config = on_open_config
        self.config_requests = 0

    @property
    def path(self) -> Path:
        return self._path

    @property
    def text_editors(self) -> Sequence[EditorView]:
        return tuple(self._views)

    def open(self, document: LocalDocument) -> LocalView:
        """Open a new view onto ``document`` and return it."""

        view = LocalView(document)
        self._views.append(view)
        return view

    def close(self, view: EditorView) -> None:
        """Forget ``view``; closing an unknown view is a no-op."""

        self._views = [candidate for candidate in self._views if candidate is not view]

    def open_config(self) -> None:
        """Record a request to show the project settings and forward it."""

        self.config_requests += 1
        if self._on_open_config is not None:
            self._on_open_config()


class ConsoleNotifier:
    """Render notifications as rich panels and answer with a fixed action."""

    def __init__(self, console: Console | None = None, *, action_idx: int | None = 0) -> None:
        self._console = console or Console(stderr=True, highlight=False)
        self._action_idx = action_idx

    async def add(self, request: NotificationRequest) -> NotificationResponse:
        """Print ``request`` as a panel and answer with the configured action.

        Args:
            request: Notification to display.

        Returns:
            NotificationResponse: Reply carrying the preset ``action_idx``.
        """

        body = Text(request.body)
        if request.actions:
            body.append("\n\n")
            body.append(" / ".join(request.actions), style="dim")
        self._console.print(Panel(body, title=Text(request.title), border_style="red"))
        return NotificationResponse(identifier=request.identifier, action_idx=self._action_idx)


class LocalAssistantRegistry:
    """Registry mapping syntaxes to the assistants that handle them."""

    def __init__(self) -> None:
        self._assistants: dict[str, list[tuple[IssueAssistant, str]]] = {}

    def register_issue_assistant(
        self,
        syntaxes: Sequence[str],
        assistant: IssueAssistant,
        *,
        event: str,
    ) -> None:
        """Register ``assistant`` for each of ``syntaxes`` under ``event``."""

        for syntax in syntaxes:
            self._assistants.setdefault(syntax, []).append((assistant, event))
            LOGGER.debug("registered issue assistant for %s (%s)", syntax, event)

    def assistants_for(self, syntax: str, *, event: str | None = None) -> list[IssueAssistant]:
        """Return the assistants registered for ``syntax`` and optional ``event``."""

        return [
            assistant
            for assistant, registered_event in self._assistants.get(syntax, [])
            if event is None or registered_event == event
        ]


__all__ = [
    "ConsoleNotifier",
    "InMemoryDiagnosticStore",
    "LocalAssistantRegistry",
    "LocalDocument",
    "LocalView",
    "LocalWorkspace",
    "MappingConfigScope",
    "SubprocessLauncher",
]
