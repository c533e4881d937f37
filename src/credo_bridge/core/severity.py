# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Severity related types and helpers."""

from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from types import MappingProxyType
from typing import Final

from ..errors import MappingError


class Severity(str, Enum):
    """Severity levels understood by diagnostic hosts."""

    ERROR = "error"
    WARNING = "warning"
    HINT = "hint"
    INFO = "info"


PRIORITY_SEVERITIES: Final[Mapping[int, Severity]] = MappingProxyType(
    {
        1: Severity.ERROR,
        2: Severity.WARNING,
        3: Severity.HINT,
        4: Severity.INFO,
    }
)


def severity_from_priority(priority: object, *, check: str | None = None) -> Severity:
    """Translate a Credo priority into a :class:`Severity`.

    Credo ranks issues from ``1`` (most severe) to ``4``. Values outside that
    range are rejected rather than defaulted.

    Args:
        priority: Priority value reported by Credo.
        check: Optional check identifier included in the error message.

    Returns:
        Severity: Severity associated with ``priority``.

    Raises:
        MappingError: If ``priority`` is not one of the known priorities.
    """

    # bool is an int subclass; True must not pass for priority 1.
    if isinstance(priority, bool) or not isinstance(priority, int):
        raise MappingError(priority, check=check)
    try:
        return PRIORITY_SEVERITIES[priority]
    except KeyError as exc:
        raise MappingError(priority, check=check) from exc


__all__ = ["PRIORITY_SEVERITIES", "Severity", "severity_from_priority"]
