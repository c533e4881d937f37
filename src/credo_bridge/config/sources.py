# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.

"""Concrete configuration sources (defaults, TOML, pyproject, environment)."""

from __future__ import annotations

import os
import tomllib
from collections.abc import Mapping
from pathlib import Path
from typing import Any, Final

from ..constants import CONFIG_FILENAME, ENV_PREFIX, PYPROJECT_SECTION_KEY
from ..errors import ConfigError
from .models import BridgeSettings

PYPROJECT_TOOL_KEY: Final[str] = "tool"


class DefaultConfigSource:
    """Return the built-in defaults as a configuration fragment."""

    name = "defaults"

    def load(self) -> Mapping[str, Any]:
        """Return every setting at its default value."""

        return BridgeSettings().model_dump()

    def describe(self) -> str:
        """Return a human-readable label for provenance output."""

        return "Built-in defaults"


class TomlConfigSource:
    """Load settings from a standalone TOML document."""

    def __init__(self, path: Path, *, name: str | None = None) -> None:
        """Bind the source to a TOML file.

        Args:
            path: Location of the TOML document; a missing file yields no settings.
            name: Optional provenance label, defaulting to the path.
        """

        self._path = path
        self.name = name or str(path)

    def load(self) -> Mapping[str, Any]:
        """Return the document's top-level keys as a settings fragment.

        Returns:
            Mapping[str, Any]: Settings with hyphenated keys normalised.

        Raises:
            ConfigError: If the file is not valid TOML.
        """

        return _normalise_keys(self._read())

    def _read(self) -> dict[str, Any]:
        if not self._path.is_file():
            return {}
        try:
            with self._path.open("rb") as handle:
                return tomllib.load(handle)
        except tomllib.TOMLDecodeError as exc:
            raise ConfigError(f"Configuration at {self._path} is not valid TOML: {exc}") from exc

    def describe(self) -> str:
        return f"TOML configuration at {self.name}"


class PyProjectConfigSource(TomlConfigSource):
    """Read settings from ``[tool.credo-bridge]`` within ``pyproject.toml``."""

    def load(self) -> Mapping[str, Any]:
        """Return the ``[tool.credo-bridge]`` table, or nothing when absent.

        Raises:
            ConfigError: If the file is invalid or the section is not a table.
        """

        data = self._read()
        tool_section = data.get(PYPROJECT_TOOL_KEY)
        if not isinstance(tool_section, Mapping):
            return {}
        section = tool_section.get(PYPROJECT_SECTION_KEY)
        if section is None:
            return {}
        if not isinstance(section, Mapping):
            raise ConfigError(f"[tool.{PYPROJECT_SECTION_KEY}] in {self._path} must be a table")
        return _normalise_keys(section)

    def describe(self) -> str:
        return f"pyproject.toml ({self.name})"


class EnvConfigSource:
    """Read ``CREDO_BRIDGE_*`` environment variables."""

    name = "environment"

    def __init__(self, env: Mapping[str, str] | None = None) -> None:
        """Read from ``env``, or from :data:`os.environ` when omitted."""

        self._env = env if env is not None else os.environ

    def load(self) -> Mapping[str, Any]:
        """Collect non-empty ``CREDO_BRIDGE_<FIELD>`` variables.

        Returns:
            Mapping[str, Any]: Raw string values keyed by settings field.
        """

        fragment: dict[str, Any] = {}
        for field_name in BridgeSettings.model_fields:
            value = self._env.get(f"{ENV_PREFIX}{field_name.upper()}")
            if value is not None and value != "":
                fragment[field_name] = value
        return fragment

    def describe(self) -> str:
        return f"Environment variables ({ENV_PREFIX}*)"


def default_sources(root: Path, *, env: Mapping[str, str] | None = None) -> list[Any]:
    """Return the standard source stack for ``root`` in precedence order."""

    return [
        DefaultConfigSource(),
        PyProjectConfigSource(root / "pyproject.toml"),
        TomlConfigSource(root / CONFIG_FILENAME),
        EnvConfigSource(env),
    ]


def _normalise_keys(data: Mapping[str, Any]) -> dict[str, Any]:
    # TOML users write ``clear-on-failure``; the model uses snake_case.
    return {str(key).replace("-", "_"): value for key, value in data.items()}


__all__ = [
    "DefaultConfigSource",
    "EnvConfigSource",
    "PyProjectConfigSource",
    "TomlConfigSource",
    "default_sources",
]
