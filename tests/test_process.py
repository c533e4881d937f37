# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for the asynchronous shell runner."""

from __future__ import annotations

import asyncio
import time
from pathlib import Path

import pytest

from credo_bridge.core.runtime.process import (
    TIMEOUT_RETURNCODE,
    CommandOptions,
    build_shell_command,
    run_shell_command,
)


def test_build_shell_command_quotes_arguments() -> None:
    assert build_shell_command(["mix", "credo", "lib/my file.ex"]) == "mix credo 'lib/my file.ex'"


def test_build_shell_command_requires_arguments() -> None:
    with pytest.raises(ValueError):
        build_shell_command([])


def test_negative_timeout_is_rejected() -> None:
    with pytest.raises(ValueError):
        CommandOptions(timeout=-1)


def test_with_overrides_keeps_unset_values(tmp_path: Path) -> None:
    options = CommandOptions(timeout=5).with_overrides(cwd=tmp_path)

    assert options.cwd == tmp_path
    assert options.timeout == 5


def test_run_collects_stdout_and_stderr(tmp_path: Path) -> None:
    (tmp_path / "marker.txt").write_text("hello", encoding="utf-8")

    result = asyncio.run(
        run_shell_command(["sh", "-c", "cat marker.txt; echo oops >&2"], options=CommandOptions(cwd=tmp_path))
    )

    assert result.returncode == 0
    assert result.stdout == "hello"
    assert result.stderr.strip() == "oops"
    assert not result.timed_out


def test_run_kills_process_after_timeout() -> None:
    result = asyncio.run(run_shell_command(["sleep", "5"], options=CommandOptions(timeout=0.1)))

    assert result.timed_out
    assert result.returncode == TIMEOUT_RETURNCODE
    assert "timed out" in result.stderr


def test_timeout_kills_commands_started_by_the_shell() -> None:
    started = time.monotonic()
    result = asyncio.run(
        run_shell_command(["sh", "-c", "sleep 4; echo done"], options=CommandOptions(timeout=0.3))
    )
    elapsed = time.monotonic() - started

    assert result.timed_out
    assert result.returncode == TIMEOUT_RETURNCODE
    assert "done" not in result.stdout
    assert elapsed < 2.0
