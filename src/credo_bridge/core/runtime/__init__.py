# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Runtime helpers for launching external processes."""

from __future__ import annotations

from .process import CommandOptions, build_shell_command, run_shell_command

__all__ = ["CommandOptions", "build_shell_command", "run_shell_command"]
