# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Exception hierarchy raised while running Credo and adapting its output."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Final

_EXCERPT_LIMIT: Final[int] = 200


class CredoBridgeError(RuntimeError):
    """Base class for every failure surfaced by the bridge."""


class ToolExecutionError(CredoBridgeError):
    """Raised when Credo reports a failure through stderr or cannot be launched."""

    def __init__(
        self,
        stderr: str,
        *,
        returncode: int | None = None,
        command: Sequence[str] = (),
    ) -> None:
        """Initialise the error with captured subprocess metadata.

        Args:
            stderr: Text written by the subprocess to standard error.
            returncode: Exit status reported by the subprocess, when known.
            command: Command sequence that was executed.
        """

        super().__init__(f"Credo exited with status {returncode}: {stderr.strip() or '<none>'}")
        self.stderr = stderr
        self.returncode = returncode
        self.command = tuple(command)


class ParseError(CredoBridgeError):
    """Raised when Credo's stdout is not the expected JSON document."""

    def __init__(self, reason: str, *, output: str = "") -> None:
        """Initialise the error with the parse failure reason.

        Args:
            reason: Human-readable description of what was wrong with the payload.
            output: Raw stdout that failed to parse.
        """

        super().__init__(reason)
        self.reason = reason
        self.output = output

    @property
    def excerpt(self) -> str:
        """Return a shortened copy of the offending output for log messages."""

        text = self.output.strip()
        if len(text) <= _EXCERPT_LIMIT:
            return text
        return f"{text[:_EXCERPT_LIMIT]}..."


class MappingError(CredoBridgeError):
    """Raised when a Credo issue cannot be translated into a diagnostic."""

    def __init__(self, priority: object, *, check: str | None = None) -> None:
        """Initialise the error with the priority that failed to map.

        Args:
            priority: Priority value reported by Credo.
            check: Credo check identifier that produced the issue.
        """

        subject = f" for check {check}" if check else ""
        super().__init__(f"unsupported Credo priority {priority!r}{subject}")
        self.priority = priority
        self.check = check


class ConfigError(CredoBridgeError):
    """Raised when configuration input is invalid."""


__all__ = [
    "ConfigError",
    "CredoBridgeError",
    "MappingError",
    "ParseError",
    "ToolExecutionError",
]
