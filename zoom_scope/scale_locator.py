"""Locate chart scales by pointer position or orientation."""
from __future__ import annotations

from typing import Optional

from zoom_scope.scale_model import ChartLike, ScaleLike


def scale_under_point(x: Optional[float], y: Optional[float], chart: ChartLike) -> Optional[ScaleLike]:
    """
    Return the first scale whose rectangle contains (x, y), bounds inclusive.

    Scales are checked in the chart's collection order, so when rectangles
    overlap the earlier entry wins. Missing coordinates match nothing.
    """
    if x is None or y is None:
        return None
    for scale in chart.scales.values():
        if scale.top <= y <= scale.bottom and scale.left <= x <= scale.right:
            return scale
    return None


def get_x_axis(chart: ChartLike) -> Optional[ScaleLike]:
    for scale in chart.scales.values():
        if scale.is_horizontal():
            return scale
    return None


def get_y_axis(chart: ChartLike) -> Optional[ScaleLike]:
    for scale in chart.scales.values():
        if not scale.is_horizontal():
            return scale
    return None
