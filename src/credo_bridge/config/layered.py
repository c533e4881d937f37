# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Two-tier configuration lookup mirroring editor preference scopes."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass

from pydantic import ValidationError

from ..constants import CONFIG_KEY_PREFIX
from ..errors import ConfigError
from ..interfaces.host import ConfigScope
from .models import BridgeSettings


@dataclass(frozen=True, slots=True)
class LayeredConfig:
    """Resolve settings from the workspace scope before the global scope.

    A workspace value only wins when it is truthy; ``None``, ``False`` and
    empty strings fall through to the global value of the same key.
    """

    workspace: ConfigScope
    global_scope: ConfigScope

    def get(self, name: str) -> object | None:
        """Return the effective value for ``name``.

        Args:
            name: Configuration key, for example ``credo.strict``.

        Returns:
            object | None: Workspace value when set, otherwise the global value.
        """

        workspace_value = self.workspace.get(name)
        if workspace_value:
            return workspace_value
        return self.global_scope.get(name)


def settings_from_scopes(
    config: ConfigScope,
    *,
    base: BridgeSettings | None = None,
) -> BridgeSettings:
    """Build :class:`BridgeSettings` from ``credo.*`` keys exposed by ``config``.

    Args:
        config: Scope (typically a :class:`LayeredConfig`) to read from.
        base: Settings supplying values for keys the scope leaves unset.

    Returns:
        BridgeSettings: Settings with every scoped value applied.

    Raises:
        ConfigError: If a scoped value fails validation.
    """

    seed = base or BridgeSettings()
    overrides: dict[str, object] = {}
    for field_name in BridgeSettings.model_fields:
        value = config.get(f"{CONFIG_KEY_PREFIX}{field_name}")
        if value is not None:
            overrides[field_name] = value
    return _apply(seed, overrides)


def _apply(seed: BridgeSettings, overrides: Mapping[str, object]) -> BridgeSettings:
    if not overrides:
        return seed
    try:
        return BridgeSettings.model_validate({**seed.model_dump(), **overrides})
    except ValidationError as exc:
        raise ConfigError(f"invalid host configuration: {exc}") from exc


__all__ = ["LayeredConfig", "settings_from_scopes"]
