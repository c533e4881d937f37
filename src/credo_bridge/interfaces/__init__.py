# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Protocols describing the services a host provides to the bridge."""

from __future__ import annotations

from .host import (
    AssistantRegistry,
    ConfigScope,
    DiagnosticStore,
    Document,
    EditorView,
    HostServices,
    IssueAssistant,
    Notifier,
    ProcessLauncher,
    Workspace,
)

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
