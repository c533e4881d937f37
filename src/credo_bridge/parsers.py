# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Parse Credo's JSON report into :class:`RawAnalysisIssue` instances."""

from __future__ import annotations

import json
from collections.abc import Mapping
from typing import Any

from pydantic import ValidationError

from .constants import ISSUES_KEY
from .core.models import RawAnalysisIssue
from .errors import ParseError


def _load_json(stdout: str) -> Any:
    try:
        return json.loads(stdout)
    except json.JSONDecodeError as exc:
        raise ParseError(f"Credo output is not valid JSON: {exc}", output=stdout) from exc


def parse_credo_output(stdout: str) -> list[RawAnalysisIssue]:
    """Parse the ``{"issues": [...]}`` document printed by ``mix credo --format json``.

    Args:
        stdout: Complete standard output captured from Credo.

    Returns:
        list[RawAnalysisIssue]: Issues in report order.

    Raises:
        ParseError: If the output is not JSON, does not have the expected
            top-level shape, or contains an issue with missing or mistyped fields.
    """

    payload = _load_json(stdout)
    if not isinstance(payload, Mapping):
        raise ParseError("Credo output must be a JSON object", output=stdout)
    items = payload.get(ISSUES_KEY)
    if not isinstance(items, list):
        raise ParseError(f"Credo output is missing the '{ISSUES_KEY}' list", output=stdout)

    issues: list[RawAnalysisIssue] = []
    for index, item in enumerate(items):
        try:
            issues.append(RawAnalysisIssue.model_validate(item))
        except ValidationError as exc:
            raise ParseError(f"Credo issue #{index} is malformed: {exc}", output=stdout) from exc
    return issues


__all__ = ["parse_credo_output"]
