# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Host service protocols consumed by the invoker and publisher."""

from __future__ import annotations

from abc import abstractmethod
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path
from typing import Protocol, runtime_checkable

from ..core.models import Diagnostic, NotificationRequest, NotificationResponse, ProcessResult
from ..core.runtime.process import CommandOptions


@runtime_checkable
class Document(Protocol):
    """Describe an open document known to the host."""

    @property
    @abstractmethod
    def path(self) -> str:
        """Return the filesystem path handed to Credo.

        Returns:
            str: Path of the document on disk.
        """
        raise NotImplementedError

    @property
    @abstractmethod
    def uri(self) -> str:
        """Return the identity used to key diagnostics.

        Returns:
            str: Stable identifier of the underlying file.
        """
        raise NotImplementedError


@runtime_checkable
class EditorView(Protocol):
    """A single view (tab, pane) onto a document."""

    @property
    @abstractmethod
    def document(self) -> Document:
        """Return the document displayed by the view.

        Returns:
            Document: Document backing the view.
        """
        raise NotImplementedError


@runtime_checkable
class ProcessLauncher(Protocol):
    """Launch external commands on behalf of the bridge."""

    @abstractmethod
    async def run(self, args: Sequence[str], *, options: CommandOptions) -> ProcessResult:
        """Run ``args`` through the shell and return once the process exits.

        Args:
            args: Command and arguments to execute.
            options: Working directory, environment and timeout settings.

        Returns:
            ProcessResult: Captured output and exit status.
        """
        raise NotImplementedError


@runtime_checkable
class Notifier(Protocol):
    """Present notifications to the user."""

    @abstractmethod
    async def add(self, request: NotificationRequest) -> NotificationResponse:
        """Display ``request`` and return the user's response.

        Args:
            request: Notification to display.

        Returns:
            NotificationResponse: Response recording the chosen action.
        """
        raise NotImplementedError


@runtime_checkable
class ConfigScope(Protocol):
    """Read-only view over one tier of host configuration."""

    @abstractmethod
    def get(self, name: str) -> object | None:
        """Return the value stored for ``name`` or ``None`` when unset.

        Args:
            name: Configuration key to look up.

        Returns:
            object | None: Stored value, if any.
        """
        raise NotImplementedError


@runtime_checkable
class DiagnosticStore(Protocol):
    """Per-document diagnostic collection owned by the host."""

    @abstractmethod
    def set(self, key: str, diagnostics: Sequence[Diagnostic]) -> None:
        """Replace every diagnostic stored for ``key``.

        Args:
            key: Document identity.
            diagnostics: New diagnostics for the document.
        """
        raise NotImplementedError

    @abstractmethod
    def remove(self, key: str) -> None:
        """Drop the entry stored for ``key``.

        Args:
            key: Document identity.
        """
        raise NotImplementedError

    @abstractmethod
    def get(self, key: str) -> Sequence[Diagnostic] | None:
        """Return the diagnostics stored for ``key``.

        Args:
            key: Document identity.

        Returns:
            Sequence[Diagnostic] | None: Stored diagnostics or ``None``.
        """
        raise NotImplementedError


@runtime_checkable
class Workspace(Protocol):
    """The project the host currently has open."""

    @property
    @abstractmethod
    def path(self) -> Path:
        """Return the project root used as the working directory for Credo."""
        raise NotImplementedError

    @property
    @abstractmethod
    def text_editors(self) -> Sequence[EditorView]:
        """Return the views that are currently open."""
        raise NotImplementedError

    @abstractmethod
    def open_config(self) -> None:
        """Open the project-level configuration UI."""
        raise NotImplementedError


@runtime_checkable
class IssueAssistant(Protocol):
    """Capability implemented by anything able to provide diagnostics."""

    @abstractmethod
    async def provide_diagnostics(self, document: Document) -> list[Diagnostic] | None:
        """Analyse ``document`` and publish its diagnostics.

        Args:
            document: Document to analyse.

        Returns:
            list[Diagnostic] | None: Published diagnostics, or ``None`` when
            nothing was published.
        """
        raise NotImplementedError


@runtime_checkable
class AssistantRegistry(Protocol):
    """Host registry that routes documents to issue assistants."""

    @abstractmethod
    def register_issue_assistant(
        self,
        syntaxes: Sequence[str],
        assistant: IssueAssistant,
        *,
        event: str,
    ) -> None:
        """Register ``assistant`` for documents written in ``syntaxes``.

        Args:
            syntaxes: Language identifiers the assistant handles.
            assistant: Assistant implementation.
            event: Host event that triggers analysis (for example ``on-save``).
        """
        raise NotImplementedError


@dataclass(frozen=True, slots=True)
class HostServices:
    """Bundle of host services injected into the publisher."""

    launcher: ProcessLauncher
    notifier: Notifier
    store: DiagnosticStore
    workspace: Workspace


__all__ = [
    "AssistantRegistry",
    "ConfigScope",
    "DiagnosticStore",
    "Document",
    "EditorView",
    "HostServices",
    "IssueAssistant",
    "Notifier",
    "ProcessLauncher",
    "Workspace",
]
