# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Pydantic model describing how Credo is invoked."""

from __future__ import annotations

import shlex

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..constants import DEFAULT_COMMAND, DEFAULT_EVENT, DEFAULT_LAUNCHER, DEFAULT_SYNTAXES


class BridgeSettings(BaseModel):
    """Effective settings controlling the Credo invocation and publishing."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    launcher: str = DEFAULT_LAUNCHER
    command: tuple[str, ...] = DEFAULT_COMMAND
    extra_args: tuple[str, ...] = ()
    strict: bool = False
    config_name: str | None = None
    timeout: float | None = Field(default=None, ge=0)
    clear_on_failure: bool = True
    syntaxes: tuple[str, ...] = DEFAULT_SYNTAXES
    event: str = DEFAULT_EVENT

    @field_validator("command", "extra_args", "syntaxes", mode="before")
    @classmethod
    def _split_command_text(cls, value: object) -> object:
        """Accept shell-style strings wherever an argument list is expected."""
        if isinstance(value, str):
            return tuple(shlex.split(value))
        return value

    @field_validator("command")
    @classmethod
    def _require_command(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        if not value:
            raise ValueError("command must name at least one executable or task")
        return value

    def credo_options(self) -> tuple[str, ...]:
        """Return the Credo flags derived from the settings, excluding the file."""

        options: list[str] = []
        if self.strict:
            options.append("--strict")
        if self.config_name:
            options.extend(("--config-name", self.config_name))
        options.extend(self.extra_args)
        return tuple(options)


__all__ = ["BridgeSettings"]
