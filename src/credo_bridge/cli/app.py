# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""CLI application entry point wiring commands."""

from __future__ import annotations

import typer

from .config_cmd import config_command
from .inspect_cmd import inspect_command

app = typer.Typer(
    help="Run Credo and report its findings as editor diagnostics.",
    add_completion=False,
    no_args_is_help=True,
)
app.command("inspect")(inspect_command)
app.command("config")(config_command)

__all__ = ["app"]
