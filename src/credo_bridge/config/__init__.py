# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Settings model and layered configuration helpers."""

from __future__ import annotations

from ..errors import ConfigError
from .layered import LayeredConfig, settings_from_scopes
from .loader import ConfigLoader, ConfigLoadResult, load_settings
from .models import BridgeSettings

__all__ = [
    "BridgeSettings",
    "ConfigError",
    "ConfigLoadResult",
    "ConfigLoader",
    "LayeredConfig",
    "load_settings",
    "settings_from_scopes",
]
