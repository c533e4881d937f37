# SPDX-License-Identifier: MIT
# Copyright (c) 2025 Blackcat Informatics® Inc.
"""Tests for layered configuration lookup and settings loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from credo_bridge.config import (
    BridgeSettings,
    ConfigError,
    ConfigLoader,
    LayeredConfig,
    load_settings,
    settings_from_scopes,
)
from credo_bridge.host import MappingConfigScope


def test_workspace_value_overrides_global() -> None:
    config = LayeredConfig(
        workspace=MappingConfigScope({"credo.config_name": "ci"}),
        global_scope=MappingConfigScope({"credo.config_name": "default"}),
    )

    assert config.get("credo.config_name") == "ci"


@pytest.mark.parametrize("workspace_value", [None, False, ""])
def test_unset_or_falsy_workspace_value_falls_through(workspace_value: object) -> None:
    workspace = {} if workspace_value is None else {"credo.strict": workspace_value}
    config = LayeredConfig(
        workspace=MappingConfigScope(workspace),
        global_scope=MappingConfigScope({"credo.strict": True}),
    )

    assert config.get("credo.strict") is True


def test_missing_everywhere_returns_none() -> None:
    config = LayeredConfig(MappingConfigScope(), MappingConfigScope())

    assert config.get("credo.strict") is None


def test_settings_from_scopes_reads_prefixed_keys() -> None:
    config = LayeredConfig(
        workspace=MappingConfigScope({"credo.extra_args": "--all --min-priority high"}),
        global_scope=MappingConfigScope({"credo.timeout": 30, "credo.strict": True}),
    )

    settings = settings_from_scopes(config)

    assert settings.extra_args == ("--all", "--min-priority", "high")
    assert settings.timeout == 30
    assert settings.strict
    assert settings.command == ("mix", "credo")


def test_settings_from_scopes_rejects_invalid_values() -> None:
    config = LayeredConfig(MappingConfigScope({"credo.timeout": -1}), MappingConfigScope())

    with pytest.raises(ConfigError):
        settings_from_scopes(config)


def test_credo_options_follow_settings() -> None:
    settings = BridgeSettings(strict=True, config_name="ci", extra_args=("--all",))

    assert settings.credo_options() == ("--strict", "--config-name", "ci", "--all")
    assert BridgeSettings().credo_options() == ()


def test_load_settings_defaults(tmp_path: Path) -> None:
    settings = load_settings(tmp_path, env={})

    assert settings == BridgeSettings()


def test_sources_apply_in_precedence_order(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text(
        '[tool.credo-bridge]\nstrict = true\ntimeout = 10\nconfig-name = "pyproject"\n',
        encoding="utf-8",
    )
    (tmp_path / ".credo-bridge.toml").write_text('config-name = "local"\n', encoding="utf-8")
    env = {"CREDO_BRIDGE_TIMEOUT": "20"}

    result = ConfigLoader.for_root(tmp_path, env=env).load_with_trace({"clear_on_failure": False, "strict": None})

    assert result.settings.strict is True
    assert result.settings.config_name == "local"
    assert result.settings.timeout == 20
    assert result.settings.clear_on_failure is False
    assert result.provenance["strict"].endswith("pyproject.toml")
    assert result.provenance["config_name"].endswith(".credo-bridge.toml")
    assert result.provenance["timeout"] == "environment"
    assert result.provenance["clear_on_failure"] == "overrides"
    assert result.provenance["launcher"] == "defaults"


def test_invalid_toml_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".credo-bridge.toml").write_text("strict = [", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(tmp_path, env={})


def test_unknown_setting_raises_config_error(tmp_path: Path) -> None:
    (tmp_path / ".credo-bridge.toml").write_text("colour = true\n", encoding="utf-8")

    with pytest.raises(ConfigError):
        load_settings(tmp_path, env={})


def test_pyproject_without_section_is_ignored(tmp_path: Path) -> None:
    (tmp_path / "pyproject.toml").write_text('[project]\nname = "demo"\n', encoding="utf-8")

    assert load_settings(tmp_path, env={}) == BridgeSettings()
