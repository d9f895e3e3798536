"""Pick the scales a pan or zoom gesture should act on."""
from __future__ import annotations

from typing import Any, List, Optional

from zoom_scope.direction_mode import FunctionMode, StringMode, direction_enabled
from zoom_scope.interaction_config import coerce_options
from zoom_scope.logging_utils import get_logger
from zoom_scope.scale_locator import scale_under_point
from zoom_scope.scale_model import AXIS_X, AXIS_Y, ChartLike, ModeContext, ScaleLike

_LOGGER = get_logger()


def _mode_is_set(mode: Any) -> bool:
    if isinstance(mode, StringMode):
        return bool(mode.value)
    return bool(mode)


def _resolve_over_scale_mode(mode: Any, chart: Any, scale: Optional[ScaleLike]) -> Any:
    context = ModeContext(chart=chart, scale=scale)
    if isinstance(mode, (StringMode, FunctionMode)):
        return mode.resolve(context)
    if callable(mode):
        return mode(context)
    return mode


def enabled_scales_by_point(
    options: Any,
    x: Optional[float],
    y: Optional[float],
    chart: ChartLike,
) -> Optional[List[ScaleLike]]:
    """
    Apply the over-scale override for a pointer position.

    Returns None when the override is not configured, telling the caller to
    use its regular direction check. Otherwise returns only the scale under
    the pointer when its direction is covered by ``over_scale_mode``, or every
    scale whose direction is not covered.

    Example: mode='xy', over_scale_mode='y' keeps 'x' working on all scales
    while 'y' acts only on the y scale currently under the cursor.
    """
    opts = coerce_options(options)
    if not opts.enabled or not _mode_is_set(opts.over_scale_mode):
        return None

    scale = scale_under_point(x, y, chart)
    mode = _resolve_over_scale_mode(opts.over_scale_mode, chart, scale)

    if scale is not None and direction_enabled(mode, scale.axis, chart):
        _LOGGER.debug("Locking interaction to scale %s under pointer (%s, %s)", scale.id, x, y)
        return [scale]

    return [item for item in chart.scales.values() if not direction_enabled(mode, item.axis, chart)]


def resolve_interaction_scales(
    options: Any,
    x: Optional[float],
    y: Optional[float],
    chart: ChartLike,
) -> List[ScaleLike]:
    """Return the scales a gesture at (x, y) may transform, honouring ``mode``."""
    opts = coerce_options(options)
    if not opts.enabled:
        return []
    x_enabled = direction_enabled(opts.mode, AXIS_X, chart)
    y_enabled = direction_enabled(opts.mode, AXIS_Y, chart)
    candidates = enabled_scales_by_point(opts, x, y, chart)
    if candidates is None:
        candidates = list(chart.scales.values())
    return [scale for scale in candidates if (x_enabled if scale.is_horizontal() else y_enabled)]
