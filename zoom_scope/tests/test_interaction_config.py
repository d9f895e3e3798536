from __future__ import annotations

import json
import types

from zoom_scope import interaction_config
from zoom_scope.interaction_config import (
    InteractionOptions,
    PanZoomConfig,
    coerce_options,
    load_interaction_config,
    resolve_config_path,
)


def test_coerce_options_accepts_host_style_keys():
    options = coerce_options({"enabled": True, "mode": "xy", "overScaleMode": "y"})
    assert options == InteractionOptions(enabled=True, mode="xy", over_scale_mode="y")


def test_coerce_options_prefers_snake_case_key():
    options = coerce_options({"enabled": True, "over_scale_mode": "x", "overScaleMode": "y"})
    assert options.over_scale_mode == "x"


def test_coerce_options_passes_instances_through():
    options = InteractionOptions(enabled=True)
    assert coerce_options(options) is options


def test_coerce_options_reads_host_object_attributes():
    snake = types.SimpleNamespace(enabled=True, mode="xy", over_scale_mode="y")
    assert coerce_options(snake) == InteractionOptions(enabled=True, mode="xy", over_scale_mode="y")

    camel = types.SimpleNamespace(enabled="on", overScaleMode="x")
    assert coerce_options(camel) == InteractionOptions(enabled=True, over_scale_mode="x")

    both = types.SimpleNamespace(enabled=True, over_scale_mode="x", overScaleMode="y")
    assert coerce_options(both).over_scale_mode == "x"


def test_coerce_options_defaults_for_none_and_junk():
    assert coerce_options(None) == InteractionOptions()
    assert coerce_options("zoom") == InteractionOptions()


def test_enabled_tokens_are_parsed():
    assert coerce_options({"enabled": "yes"}).enabled is True
    assert coerce_options({"enabled": "off"}).enabled is False
    assert coerce_options({"enabled": 1}).enabled is True
    assert coerce_options({"enabled": "maybe"}).enabled is False


def test_load_reads_pan_and_zoom_blocks(tmp_path):
    path = tmp_path / "zoom_scope.json"
    path.write_text(
        json.dumps(
            {
                "pan": {"enabled": True, "mode": "x"},
                "zoom": {"enabled": True, "mode": "xy", "overScaleMode": "y"},
            }
        ),
        encoding="utf-8",
    )
    config = load_interaction_config(path)
    assert config.pan == InteractionOptions(enabled=True, mode="x")
    assert config.zoom == InteractionOptions(enabled=True, mode="xy", over_scale_mode="y")


def test_load_missing_file_returns_defaults(tmp_path):
    assert load_interaction_config(tmp_path / "missing.json") == PanZoomConfig()


def test_load_invalid_json_returns_defaults(tmp_path):
    path = tmp_path / "zoom_scope.json"
    path.write_text("{not json", encoding="utf-8")
    assert load_interaction_config(path) == PanZoomConfig()


def test_load_non_object_returns_defaults(tmp_path):
    path = tmp_path / "zoom_scope.json"
    path.write_text("[1, 2]", encoding="utf-8")
    assert load_interaction_config(path) == PanZoomConfig()


def test_config_path_uses_env_override(tmp_path, monkeypatch):
    target = tmp_path / "custom.json"
    monkeypatch.setenv(interaction_config.CONFIG_ENV_VAR, str(target))
    assert resolve_config_path() == target
    explicit = tmp_path / "explicit.json"
    assert resolve_config_path(explicit) == explicit


def test_config_path_defaults_to_cwd(tmp_path, monkeypatch):
    monkeypatch.delenv(interaction_config.CONFIG_ENV_VAR, raising=False)
    monkeypatch.chdir(tmp_path)
    assert resolve_config_path() == tmp_path / interaction_config.DEFAULT_CONFIG_FILENAME
