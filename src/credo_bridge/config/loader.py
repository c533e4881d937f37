# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings loading with layered precedence and traceability."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol

from pydantic import ValidationError

from ..errors import ConfigError
from .models import BridgeSettings
from .sources import default_sources


class ConfigSource(Protocol):
    """Provide a fragment of settings data."""

    name: str

    def load(self) -> Mapping[str, Any]: ...

    def describe(self) -> str: ...


@dataclass(slots=True)
class ConfigLoadResult:
    """Resolved settings plus the source that last set each field."""

    settings: BridgeSettings
    provenance: dict[str, str] = field(default_factory=dict)


class ConfigLoader:
    """Apply layered configuration sources with predictable precedence."""

    def __init__(self, sources: Sequence[ConfigSource]) -> None:
        if not sources:
            raise ValueError("at least one configuration source is required")
        self._sources = list(sources)

    @classmethod
    def for_root(cls, root: Path, *, env: Mapping[str, str] | None = None) -> ConfigLoader:
        """Return a loader using the standard sources for ``root``."""

        return cls(default_sources(root, env=env))

    def load(self, overrides: Mapping[str, Any] | None = None) -> BridgeSettings:
        """Return the effective settings."""

        return self.load_with_trace(overrides).settings

    def load_with_trace(self, overrides: Mapping[str, Any] | None = None) -> ConfigLoadResult:
        """Merge every source, later sources winning, then apply ``overrides``.

        Args:
            overrides: Final layer, typically CLI options; ``None`` values are skipped.

        Returns:
            ConfigLoadResult: Settings and per-field provenance.

        Raises:
            ConfigError: If a source cannot be read or the merged data is invalid.
        """

        merged: dict[str, Any] = {}
        provenance: dict[str, str] = {}
        layers = [(source.name, source.load()) for source in self._sources]
        if overrides:
            layers.append(("overrides", {key: value for key, value in overrides.items() if value is not None}))
        for name, fragment in layers:
            for key, value in fragment.items():
                merged[key] = value
                provenance[key] = name
        try:
            settings = BridgeSettings.model_validate(merged)
        except ValidationError as exc:
            raise ConfigError(f"invalid configuration: {exc}") from exc
        return ConfigLoadResult(settings=settings, provenance=provenance)


def load_settings(
    root: Path,
    *,
    overrides: Mapping[str, Any] | None = None,
    env: Mapping[str, str] | None = None,
) -> BridgeSettings:
    """Load settings for the project at ``root``."""

    return ConfigLoader.for_root(root, env=env).load(overrides)


__all__ = ["ConfigLoadResult", "ConfigLoader", "ConfigSource", "load_settings"]
