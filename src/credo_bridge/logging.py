# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Logging setup and user-facing console helpers with optional emoji support."""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler
from rich.text import Text

PACKAGE_LOGGER = "credo_bridge"


def configure_logging(*, verbose: bool = False, debug: bool = False) -> None:
    """Route package log records to stderr through :class:`RichHandler`.

    Without ``verbose`` or ``debug`` only warnings and errors are shown.
    """

    level = logging.DEBUG if debug else logging.INFO if verbose else logging.WARNING
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(level)
    if not any(isinstance(handler, RichHandler) for handler in logger.handlers):
        handler = RichHandler(console=Console(stderr=True), show_path=False, markup=False)
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)


def emoji(symbol: str, enable: bool) -> str:
    """Return ``symbol`` when emoji output is enabled, otherwise blank."""

    return symbol if enable else ""


def _print_line(console: Console, msg: str, *, style: str) -> None:
    text = Text(msg)
    text.stylize(style)
    console.print(text)


def ok(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit a success message."""

    _print_line(console, f"{emoji('✅ ', use_emoji)}{msg}", style="green")


def warn(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit a warning message."""

    _print_line(console, f"{emoji('⚠️ ', use_emoji)}{msg}", style="yellow")


def fail(console: Console, msg: str, *, use_emoji: bool) -> None:
    """Emit an error message."""

    _print_line(console, f"{emoji('❌ ', use_emoji)}{msg}", style="red")


__all__ = ["PACKAGE_LOGGER", "configure_logging", "emoji", "fail", "ok", "warn"]
