# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Publish Credo diagnostics into a host's per-document store."""

from __future__ import annotations

import logging

from .config.models import BridgeSettings
from .core.models import Diagnostic
from .errors import MappingError
from .interfaces.host import AssistantRegistry, Document, EditorView, HostServices
from .invoker import CredoInvoker
from .mapper import summarize_severities, to_diagnostics

LOGGER = logging.getLogger(__name__)


class IssuePublisher:
    """Issue assistant that keeps a document's diagnostics in sync with Credo.

    Each run fully replaces the document's entry in the store. Failed runs
    publish nothing and, unless ``clear_on_failure`` is disabled, drop the
    previous entry so stale diagnostics do not linger. At most one analysis
    runs per document at a time, and a run whose document is closed before it
    finishes publishes nothing.
    """

    def __init__(
        self,
        services: HostServices,
        *,
        settings: BridgeSettings | None = None,
        invoker: CredoInvoker | None = None,
    ) -> None:
        self._services = services
        self._settings = settings or BridgeSettings()
        self._invoker = invoker or CredoInvoker(
            services.launcher,
            services.notifier,
            services.workspace,
            settings=self._settings,
        )
        self._in_flight: set[str] = set()
        self._closed_in_flight: set[str] = set()

    @property
    def in_flight(self) -> frozenset[str]:
        """Return the document keys currently being analysed."""

        return frozenset(self._in_flight)

    async def provide_diagnostics(self, document: Document) -> list[Diagnostic] | None:
        """Inspect ``document`` and replace its diagnostics.

        Args:
            document: Document to analyse.

        Returns:
            list[Diagnostic] | None: Published diagnostics, or ``None`` when the
            run failed, the document was closed before it finished, or another
            run for the same document was still active.
        """

        key = document.uri
        if key in self._in_flight:
            LOGGER.debug("Credo analysis already running for %s; skipping", document.path)
            return None
        self._in_flight.add(key)
        try:
            return await self._publish(document)
        finally:
            self._in_flight.discard(key)
            self._closed_in_flight.discard(key)

    async def _publish(self, document: Document) -> list[Diagnostic] | None:
        key = document.uri
        result = await self._invoker.inspect(document.path)
        if key in self._closed_in_flight:
            LOGGER.debug("%s was closed during the Credo run; discarding results", document.path)
            return None
        if not result.ok:
            self._discard_stale(key)
            return None

        try:
            diagnostics = to_diagnostics(result.issues)
        except MappingError as exc:
            LOGGER.error("Rejected Credo report for %s: %s", document.path, exc)
            self._discard_stale(key)
            return None

        self._services.store.set(key, diagnostics)
        summary = summarize_severities(diagnostics)
        LOGGER.info("%s", summary.render(f"Published {summary.total} Credo diagnostics for {document.path}:"))
        return diagnostics

    def _discard_stale(self, key: str) -> None:
        if self._settings.clear_on_failure:
            self._services.store.remove(key)

    def document_closed(self, view: EditorView) -> bool:
        """Drop diagnostics for a closed view unless the file is still open elsewhere.

        Args:
            view: View that was just closed.

        Returns:
            bool: ``True`` when the store entry was removed.
        """

        key = view.document.uri
        for other in self._services.workspace.text_editors:
            if other is not view and other.document.uri == key:
                return False
        if key in self._in_flight:
            self._closed_in_flight.add(key)
        self._services.store.remove(key)
        return True


def register_issue_assistant(
    registry: AssistantRegistry,
    publisher: IssuePublisher,
    *,
    settings: BridgeSettings | None = None,
) -> None:
    """Register ``publisher`` with the host for the configured syntaxes and event."""

    resolved = settings or BridgeSettings()
    registry.register_issue_assistant(resolved.syntaxes, publisher, event=resolved.event)


__all__ = ["IssuePublisher", "register_issue_assistant"]
