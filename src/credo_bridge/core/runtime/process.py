# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Asynchronous wrappers around shell subprocess execution."""

from __future__ import annotations

import asyncio
import logging
import os
import shlex
import signal
from collections.abc import Mapping, Sequence
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Final

from ..models import ProcessResult

LOGGER = logging.getLogger(__name__)

TIMEOUT_RETURNCODE: Final[int] = 124


@dataclass(frozen=True, slots=True)
class CommandOptions:
    """Immutable command execution options."""

    cwd: Path | None = None
    env: Mapping[str, str] | None = None
    timeout: float | None = None

    def __post_init__(self) -> None:
        if self.timeout is not None and self.timeout < 0:
            raise ValueError("timeout must be non-negative")

    def with_overrides(
        self,
        *,
        cwd: Path | None = None,
        timeout: float | None = None,
    ) -> CommandOptions:
        """Return a copy with the supplied non-``None`` values applied.

        Args:
            cwd: Replacement working directory.
            timeout: Replacement timeout in seconds.

        Returns:
            CommandOptions: Updated options instance.
        """

        updated = self
        if cwd is not None:
            updated = replace(updated, cwd=cwd)
        if timeout is not None:
            updated = replace(updated, timeout=timeout)
        return updated


def build_shell_command(args: Sequence[str]) -> str:
    """Join ``args`` into a shell command line with each argument quoted.

    Args:
        args: Command and arguments to join.

    Returns:
        str: Command line safe to hand to ``/bin/sh``.

    Raises:
        ValueError: If no arguments are provided.
    """

    if not args:
        raise ValueError("subprocess command requires at least one argument")
    return shlex.join(args)


async def run_shell_command(
    args: Sequence[str],
    *,
    options: CommandOptions | None = None,
) -> ProcessResult:
    """Run ``args`` through the shell and collect its output once it exits.

    stdout and stderr are accumulated in full before returning. When a timeout
    is configured and expires the shell's whole process group is killed and the
    result is flagged as ``timed_out`` with exit status ``124``.

    Args:
        args: Command and argument sequence to execute.
        options: Working directory, environment and timeout settings.

    Returns:
        ProcessResult: Captured output and exit status.

    Raises:
        OSError: If the shell itself cannot be started.
    """

    resolved = options or CommandOptions()
    command_line = build_shell_command(args)
    process = await asyncio.create_subprocess_shell(
        command_line,
        cwd=str(resolved.cwd) if resolved.cwd is not None else None,
        env=dict(resolved.env) if resolved.env is not None else None,
        stdin=asyncio.subprocess.DEVNULL,
        stdout=asyncio.subprocess.PIPE,
        stderr=asyncio.subprocess.PIPE,
        start_new_session=True,
    )
    try:
        stdout, stderr = await asyncio.wait_for(process.communicate(), timeout=resolved.timeout)
    except asyncio.TimeoutError:
        _kill_process_group(process)
        stdout, stderr = await process.communicate()
        timeout_msg = f"Command timed out after {resolved.timeout:.1f}s"
        stderr_text = stderr.decode(errors="replace")
        LOGGER.warning("%s: %s", timeout_msg, command_line)
        return ProcessResult(
            args=tuple(args),
            returncode=TIMEOUT_RETURNCODE,
            stdout=stdout.decode(errors="replace"),
            stderr=f"{stderr_text}\n{timeout_msg}" if stderr_text else timeout_msg,
            timed_out=True,
        )
    return ProcessResult(
        args=tuple(args),
        returncode=process.returncode,
        stdout=stdout.decode(errors="replace"),
        stderr=stderr.decode(errors="replace"),
    )


def _kill_process_group(process: asyncio.subprocess.Process) -> None:
    """Kill ``process`` and every child sharing its session.

    The shell runs as the leader of its own session, so grandchildren that
    inherited the output pipes die with it and the pipes reach EOF.
    """

    killpg = getattr(os, "killpg", None)
    if killpg is None:
        process.kill()
        return
    try:
        killpg(process.pid, signal.SIGKILL)
    except ProcessLookupError:
        return
    except PermissionError:
        process.kill()


__all__ = ["CommandOptions", "TIMEOUT_RETURNCODE", "build_shell_command", "run_shell_command"]
