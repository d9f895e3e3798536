"""Pan/zoom option blocks and their JSON loader."""
from __future__ import annotations

import json
import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping, Optional

from zoom_scope.direction_mode import ModeSpecifier
from zoom_scope.logging_utils import get_logger

_LOGGER = get_logger("Config")

CONFIG_ENV_VAR = "ZOOM_SCOPE_CONFIG"
DEFAULT_CONFIG_FILENAME = "zoom_scope.json"

_TRUE_TOKENS = {"1", "true", "yes", "on"}
_FALSE_TOKENS = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class InteractionOptions:
    enabled: bool = False
    mode: ModeSpecifier = None
    over_scale_mode: ModeSpecifier = None


@dataclass(frozen=True)
class PanZoomConfig:
    pan: InteractionOptions = field(default_factory=InteractionOptions)
    zoom: InteractionOptions = field(default_factory=InteractionOptions)


def _coerce_enabled(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if isinstance(value, (int, float)):
        return value != 0
    if isinstance(value, str):
        token = value.strip().lower()
        if token in _TRUE_TOKENS:
            return True
        if token in _FALSE_TOKENS:
            return False
    return False


_OPTION_FIELDS = ("enabled", "mode", "over_scale_mode", "overScaleMode")


def _options_from_attributes(value: Any) -> InteractionOptions:
    if hasattr(value, "over_scale_mode"):
        over_scale_mode = getattr(value, "over_scale_mode")
    else:
        over_scale_mode = getattr(value, "overScaleMode", None)
    return InteractionOptions(
        enabled=_coerce_enabled(getattr(value, "enabled", False)),
        mode=getattr(value, "mode", None),
        over_scale_mode=over_scale_mode,
    )


def coerce_options(value: Any) -> InteractionOptions:
    """Accept InteractionOptions, a plain mapping, an object with option attributes, or None."""
    if isinstance(value, InteractionOptions):
        return value
    if value is None:
        return InteractionOptions()
    if not isinstance(value, Mapping):
        if any(hasattr(value, name) for name in _OPTION_FIELDS):
            return _options_from_attributes(value)
        _LOGGER.debug("Ignoring interaction options of type %s", type(value).__name__)
        return InteractionOptions()
    if "over_scale_mode" in value:
        over_scale_mode = value.get("over_scale_mode")
    else:
        over_scale_mode = value.get("overScaleMode")
    return InteractionOptions(
        enabled=_coerce_enabled(value.get("enabled", False)),
        mode=value.get("mode"),
        over_scale_mode=over_scale_mode,
    )


def config_from_mapping(data: Mapping[str, Any]) -> PanZoomConfig:
    return PanZoomConfig(
        pan=coerce_options(data.get("pan")),
        zoom=coerce_options(data.get("zoom")),
    )


def resolve_config_path(explicit: Optional[Path] = None) -> Path:
    if explicit is not None:
        return explicit
    env_value = os.environ.get(CONFIG_ENV_VAR)
    if env_value:
        return Path(env_value).expanduser()
    return Path.cwd() / DEFAULT_CONFIG_FILENAME


def load_interaction_config(path: Optional[Path] = None) -> PanZoomConfig:
    """Load pan/zoom options from JSON, returning defaults on any read error."""
    target = resolve_config_path(path)
    try:
        raw_text = target.read_text(encoding="utf-8")
    except FileNotFoundError:
        return PanZoomConfig()
    except OSError as exc:
        _LOGGER.debug("Failed to read interaction config %s: %s", target, exc)
        return PanZoomConfig()
    try:
        data = json.loads(raw_text)
    except json.JSONDecodeError as exc:
        _LOGGER.debug("Invalid JSON in interaction config %s: %s", target, exc)
        return PanZoomConfig()
    if not isinstance(data, dict):
        return PanZoomConfig()
    return config_from_mapping(data)
