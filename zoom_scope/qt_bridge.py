"""PyQt6 adapters for charts drawn on Qt widgets."""
from __future__ import annotations

import math
from typing import Callable, Mapping, Optional, Tuple, Union

from PyQt6.QtCore import QObject, QPoint, QPointF, QRect, QRectF, QTimer

from zoom_scope.scale_model import AXIS_X, AXIS_Y, ScaleBox, StaticChart

RectLike = Union[QRect, QRectF]
PointLike = Union[QPoint, QPointF]


def scale_from_rect(identifier: str, axis: str, rect: RectLike, horizontal: Optional[bool] = None) -> ScaleBox:
    # QRect.right() is x + width - 1; go through QRectF so the far edge is inclusive of the width.
    area = QRectF(rect) if isinstance(rect, QRect) else rect
    return ScaleBox(
        id=identifier,
        axis=axis,
        left=float(area.left()),
        top=float(area.top()),
        right=float(area.right()),
        bottom=float(area.bottom()),
        horizontal=horizontal,
    )


def point_from_qt(pos: Optional[PointLike]) -> Tuple[Optional[float], Optional[float]]:
    if pos is None:
        return None, None
    return float(pos.x()), float(pos.y())


def scales_from_plot_margins(widget_rect: RectLike, margins: Mapping[str, float]) -> StaticChart:
    """
    Build x/y scales from the margin bands around a widget's plot area.

    The x scale fills the band under the plot area, the y scale the band to
    its left, matching a chart that draws its axes inside its margins.
    """
    area = QRectF(widget_rect) if isinstance(widget_rect, QRect) else widget_rect
    left = float(area.left())
    top = float(area.top())
    right = float(area.right())
    bottom = float(area.bottom())
    plot_left = left + float(margins.get("left", 0))
    plot_right = right - float(margins.get("right", 0))
    plot_top = top + float(margins.get("top", 0))
    plot_bottom = bottom - float(margins.get("bottom", 0))
    x_scale = ScaleBox(id=AXIS_X, axis=AXIS_X, left=plot_left, top=plot_bottom, right=plot_right, bottom=bottom)
    y_scale = ScaleBox(id=AXIS_Y, axis=AXIS_Y, left=left, top=plot_top, right=plot_left, bottom=plot_bottom)
    return StaticChart.from_scales([x_scale, y_scale])


class QtDebouncer(QObject):
    """Single-shot QTimer debounce; runs ``fn`` on the Qt event loop."""

    def __init__(self, fn: Callable[[], object], delay_ms: float, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._fn = fn
        self._delay_ms = max(0, delay_ms or 0)
        self._timer = QTimer(self)
        self._timer.setSingleShot(True)
        # QTimer takes whole milliseconds; round up.
        self._timer.setInterval(math.ceil(self._delay_ms))
        self._timer.timeout.connect(self._fire)

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    def __call__(self) -> float:
        if not self._delay_ms:
            self._fn()
            return self._delay_ms
        # start() on an active timer restarts the countdown.
        self._timer.start()
        return self._delay_ms

    def is_pending(self) -> bool:
        return self._timer.isActive()

    def cancel(self) -> None:
        self._timer.stop()

    def _fire(self) -> None:
        self._fn()
