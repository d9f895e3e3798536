"""Read-only data model for chart scales and mode contexts (pure, no Qt)."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Iterable, Mapping, Optional, Protocol

AXIS_X = "x"
AXIS_Y = "y"


class ScaleLike(Protocol):
    id: str
    axis: str
    top: float
    bottom: float
    left: float
    right: float

    def is_horizontal(self) -> bool: ...


class ChartLike(Protocol):
    scales: Mapping[str, ScaleLike]


@dataclass(frozen=True)
class ScaleBox:
    """Screen-space rectangle occupied by one axis of a chart."""

    id: str
    axis: str
    left: float
    top: float
    right: float
    bottom: float
    horizontal: Optional[bool] = None

    def is_horizontal(self) -> bool:
        if self.horizontal is not None:
            return bool(self.horizontal)
        return self.axis == AXIS_X


@dataclass(frozen=True)
class StaticChart:
    """Minimal host chart: an ordered scale mapping and nothing else."""

    scales: Mapping[str, ScaleLike]

    @classmethod
    def from_scales(cls, scales: Iterable[ScaleLike]) -> "StaticChart":
        mapping: Dict[str, ScaleLike] = {}
        for scale in scales:
            if scale.id in mapping:
                raise ValueError(f"Duplicate scale id: {scale.id!r}")
            mapping[scale.id] = scale
        return cls(scales=mapping)


@dataclass(frozen=True)
class ModeContext:
    """Argument handed to callable mode specifiers."""

    chart: Any
    scale: Optional[ScaleLike] = None
