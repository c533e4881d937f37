# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""``config`` command: print the effective settings for a project."""

from __future__ import annotations

import json
from pathlib import Path

import typer

from ..config import ConfigError, ConfigLoader
from .shared import build_cli_logger


def config_command(
    root: Path = typer.Option(Path.cwd(), "--root", "-r", help="Project root."),
    trace: bool = typer.Option(False, "--trace", help="Show which source last set each field."),
) -> None:
    """Print the effective configuration as JSON."""

    logger = build_cli_logger(emoji=True)
    try:
        result = ConfigLoader.for_root(root).load_with_trace()
    except ConfigError as exc:
        logger.fail(str(exc))
        raise typer.Exit(code=1) from exc

    payload: dict[str, object] = {"settings": result.settings.model_dump(mode="json")}
    if trace:
        payload["sources"] = dict(sorted(result.provenance.items()))
    typer.echo(json.dumps(payload, indent=2))


__all__ = ["config_command"]
