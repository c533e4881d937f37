# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared constants describing the Credo command contract."""

from __future__ import annotations

from typing import Final

SOURCE_LABEL: Final[str] = "Credo"
DEFAULT_LAUNCHER: Final[str] = "/usr/bin/env"
DEFAULT_COMMAND: Final[tuple[str, ...]] = ("mix", "credo")
FORMAT_ARGS: Final[tuple[str, ...]] = ("--format", "json")
ISSUES_KEY: Final[str] = "issues"

DEFAULT_SYNTAXES: Final[tuple[str, ...]] = ("elixir",)
DEFAULT_EVENT: Final[str] = "on-save"

NOTIFICATION_ID: Final[str] = "credo-error"
NOTIFICATION_TITLE: Final[str] = "Credo Encountered an Error"
DISMISS_ACTION: Final[str] = "Dismiss"
PROJECT_SETTINGS_ACTION: Final[str] = "Project Settings"
PROJECT_SETTINGS_ACTION_INDEX: Final[int] = 1

CONFIG_KEY_PREFIX: Final[str] = "credo."
PYPROJECT_SECTION_KEY: Final[str] = "credo-bridge"
CONFIG_FILENAME: Final[str] = ".credo-bridge.toml"
ENV_PREFIX: Final[str] = "CREDO_BRIDGE_"
