# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``inspect`` command: run Credo on one file and print its diagnostics."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Final

import typer
from rich.console import Console

from ..config import ConfigError, ConfigLoader
from ..core.models import Diagnostic
from ..core.severity import Severity
from ..host import ConsoleNotifier, InMemoryDiagnosticStore, LocalDocument, LocalWorkspace, SubprocessLauncher
from ..interfaces.host import HostServices
from ..logging import configure_logging
from ..publisher import IssuePublisher
from ..reporting import render_json, render_pretty
from .shared import CLIError, build_cli_logger

PRETTY_FORMAT: Final[str] = "pretty"
JSON_FORMAT: Final[str] = "json"
EXIT_CLEAN: Final[int] = 0
EXIT_ERRORS_FOUND: Final[int] = 1
EXIT_TOOL_FAILURE: Final[int] = 2


def inspect_command(
    file: Path = typer.Argument(..., help="Elixir source file to inspect."),
    root: Path = typer.Option(Path.cwd(), "--root", "-r", help="Mix project root used as the working directory."),
    output_format: str = typer.Option(
        PRETTY_FORMAT,
        "--format",
        "-f",
        case_sensitive=False,
        help="Output format: 'pretty' or 'json'.",
    ),
    strict: bool | None = typer.Option(None, "--strict/--no-strict", help="Pass --strict to Credo."),
    timeout: float | None = typer.Option(None, "--timeout", min=0, help="Kill Credo after this many seconds."),
    emoji: bool = typer.Option(True, "--emoji/--no-emoji", help="Toggle emoji in status messages."),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log the command and issue summaries."),
) -> None:
    """Run Credo on FILE and print the resulting diagnostics."""

    configure_logging(verbose=verbose)
    logger = build_cli_logger(emoji=emoji)
    fmt = output_format.lower()
    try:
        if fmt not in {PRETTY_FORMAT, JSON_FORMAT}:
            raise CLIError(f"unsupported format '{output_format}'", exit_code=EXIT_TOOL_FAILURE)
        diagnostics = _run(file, root=root, strict=strict, timeout=timeout)
    except CLIError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=exc.exit_code) from exc

    if fmt == JSON_FORMAT:
        typer.echo(render_json(diagnostics))
    else:
        render_pretty(diagnostics, title=str(file), console=Console(highlight=False))

    errors = sum(1 for diagnostic in diagnostics if diagnostic.severity is Severity.ERROR)
    if fmt == PRETTY_FORMAT:
        if errors:
            logger.warn(f"Credo reported {errors} error-severity issue(s) in {file}")
        else:
            logger.ok(f"Credo finished for {file}")
    raise typer.Exit(code=EXIT_ERRORS_FOUND if errors else EXIT_CLEAN)


def _run(file: Path, *, root: Path, strict: bool | None, timeout: float | None) -> list[Diagnostic]:
    try:
        settings = ConfigLoader.for_root(root).load({"strict": strict, "timeout": timeout})
    except ConfigError as exc:
        raise CLIError(str(exc), exit_code=EXIT_TOOL_FAILURE) from exc

    workspace = LocalWorkspace(root)
    services = HostServices(
        launcher=SubprocessLauncher(),
        notifier=ConsoleNotifier(),
        store=InMemoryDiagnosticStore(),
        workspace=workspace,
    )
    publisher = IssuePublisher(services, settings=settings)
    document = LocalDocument.from_path(file, root=root)
    workspace.open(document)

    diagnostics = asyncio.run(publisher.provide_diagnostics(document))
    if diagnostics is None:
        raise CLIError(f"Credo did not produce diagnostics for {file}", exit_code=EXIT_TOOL_FAILURE)
    return diagnostics


__all__ = ["inspect_command"]
