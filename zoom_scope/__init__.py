"""Select which chart scales a pan or zoom gesture should affect."""

from zoom_scope.direction_mode import (
    DISABLED_MODE,
    FunctionMode,
    StringMode,
    direction_enabled,
    parse_mode,
)
from zoom_scope.gesture_debounce import Debouncer, debounce
from zoom_scope.interaction_config import (
    InteractionOptions,
    PanZoomConfig,
    coerce_options,
    load_interaction_config,
)
from zoom_scope.scale_locator import get_x_axis, get_y_axis, scale_under_point
from zoom_scope.scale_model import AXIS_X, AXIS_Y, ModeContext, ScaleBox, StaticChart
from zoom_scope.scale_selector import enabled_scales_by_point, resolve_interaction_scales

__version__ = "0.1.0"

__all__ = [
    "AXIS_X",
    "AXIS_Y",
    "DISABLED_MODE",
    "Debouncer",
    "FunctionMode",
    "InteractionOptions",
    "ModeContext",
    "PanZoomConfig",
    "ScaleBox",
    "StaticChart",
    "StringMode",
    "coerce_options",
    "debounce",
    "direction_enabled",
    "enabled_scales_by_point",
    "get_x_axis",
    "get_y_axis",
    "load_interaction_config",
    "parse_mode",
    "resolve_interaction_scales",
    "scale_under_point",
    "__version__",
]
