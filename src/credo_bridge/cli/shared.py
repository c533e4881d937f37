# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Shared CLI helpers: error type and console logger."""

from __future__ import annotations

from dataclasses import dataclass

from rich.console import Console

from ..logging import fail as core_fail
from ..logging import ok as core_ok
from ..logging import warn as core_warn


class CLIError(RuntimeError):
    """Error raised when a CLI command fails and should exit with a status code."""

    def __init__(self, message: str, *, exit_code: int = 1) -> None:
        """Initialise the error with a message and exit code.

        Args:
            message: Human-readable error message shown to the user.
            exit_code: Exit status associated with the failure.
        """

        super().__init__(message)
        self.exit_code = exit_code


@dataclass(slots=True)
class CLILogger:
    """Adapter around project logging helpers respecting CLI emoji settings."""

    console: Console
    use_emoji: bool

    def fail(self, message: str) -> None:
        """Emit an error message honouring the configured emoji preference.

        Args:
            message: Message presented to the user.
        """

        core_fail(self.console, message, use_emoji=self.use_emoji)

    def warn(self, message: str) -> None:
        """Emit a warning message honouring the configured emoji preference.

        Args:
            message: Message presented to the user.
        """

        core_warn(self.console, message, use_emoji=self.use_emoji)

    def ok(self, message: str) -> None:
        """Emit a success message honouring the configured emoji preference.

        Args:
            message: Message presented to the user.
        """

        core_ok(self.console, message, use_emoji=self.use_emoji)


def build_cli_logger(*, emoji: bool, no_color: bool = False) -> CLILogger:
    """Return a ``CLILogger`` bound to a dedicated stderr console."""

    console = Console(stderr=True, no_color=no_color, highlight=False)
    return CLILogger(console=console, use_emoji=emoji)


__all__ = ["CLIError", "CLILogger", "build_cli_logger"]
