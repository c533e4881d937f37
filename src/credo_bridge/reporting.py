# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Render published diagnostics for terminal and machine consumption."""

from __future__ import annotations

import json
from collections.abc import Sequence
from typing import Final

from rich import box
from rich.console import Console
from rich.table import Table
from rich.text import Text

from .core.models import Diagnostic
from .core.severity import Severity
from .mapper import summarize_severities

SEVERITY_STYLES: Final[dict[Severity, str]] = {
    Severity.ERROR: "bold red",
    Severity.WARNING: "yellow",
    Severity.HINT: "cyan",
    Severity.INFO: "dim",
}


def render_json(diagnostics: Sequence[Diagnostic]) -> str:
    """Return the host payloads of ``diagnostics`` as a JSON array."""

    return json.dumps([diagnostic.to_host_payload() for diagnostic in diagnostics], indent=2)


def render_pretty(diagnostics: Sequence[Diagnostic], *, title: str, console: Console) -> None:
    """Print ``diagnostics`` as a table followed by a per-severity tally."""

    if not diagnostics:
        console.print(Text(f"No Credo issues in {title}", style="green"))
        return

    table = Table(title=Text(title), box=box.SIMPLE, expand=True)
    table.add_column("Line", justify="right")
    table.add_column("Col", justify="right")
    table.add_column("Severity")
    table.add_column("Code")
    table.add_column("Message", overflow="fold")
    for diagnostic in sorted(diagnostics, key=lambda item: (item.line, item.column or 0)):
        column = "" if diagnostic.column is None else str(diagnostic.column)
        table.add_row(
            str(diagnostic.line),
            column,
            Text(diagnostic.severity.value, style=SEVERITY_STYLES[diagnostic.severity]),
            Text(diagnostic.code),
            Text(diagnostic.message),
        )
    console.print(table)

    summary = summarize_severities(diagnostics)
    tally = ", ".join(f"{count} {name}" for name, count in summary.counts.items() if count)
    console.print(Text(f"{summary.total} issue(s): {tally}"))


__all__ = ["SEVERITY_STYLES", "render_json", "render_pretty"]
