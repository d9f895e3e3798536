"""Direction mode specifiers and the per-direction enable check."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Optional, Union

from zoom_scope.logging_utils import get_logger
from zoom_scope.scale_model import ModeContext

_LOGGER = get_logger()

ModeFn = Callable[[ModeContext], Any]


@dataclass(frozen=True)
class StringMode:
    value: str

    def resolve(self, context: ModeContext) -> Any:
        return self.value


@dataclass(frozen=True)
class FunctionMode:
    fn: ModeFn

    def resolve(self, context: ModeContext) -> Any:
        # Evaluated on every query; the function may read live chart state.
        return self.fn(context)


DirectionMode = Union[StringMode, FunctionMode]
ModeSpecifier = Union[str, ModeFn, DirectionMode, None]

DISABLED_MODE = StringMode("")


def parse_mode(raw: Any) -> Optional[DirectionMode]:
    """Normalise a raw mode value; None means every direction is enabled."""
    if raw is None:
        return None
    if isinstance(raw, (StringMode, FunctionMode)):
        return raw
    if isinstance(raw, str):
        return StringMode(raw)
    if callable(raw):
        return FunctionMode(raw)
    _LOGGER.debug("Unrecognised mode %r; treating all directions as disabled", raw)
    return DISABLED_MODE


def mode_includes(resolved: Any, direction: str) -> bool:
    if not isinstance(resolved, str):
        return False
    return direction in resolved


def direction_enabled(mode: Any, direction: str, chart: Any) -> bool:
    """
    Return True when ``direction`` ('x' or 'y') is enabled under ``mode``.

    A missing mode enables every direction. A mode function is called with
    ``ModeContext(chart=chart)`` on every check and its result follows the
    same rules as a literal mode: ``None`` enables every direction, a string
    enables the directions it contains, anything else enables none.
    """
    spec = parse_mode(mode)
    if spec is None:
        return True
    resolved = spec.resolve(ModeContext(chart=chart))
    if resolved is None:
        return True
    if isinstance(spec, FunctionMode) and not isinstance(resolved, str):
        _LOGGER.debug("Mode function returned %r instead of a string; direction %s disabled", resolved, direction)
    return mode_includes(resolved, direction)
