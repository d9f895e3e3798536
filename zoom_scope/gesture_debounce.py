"""Timer-based debounce for gesture-complete callbacks."""
from __future__ import annotations

import threading
from typing import Callable, Optional


class Debouncer:
    """Delays ``fn`` until calls stop arriving for ``delay_ms`` milliseconds."""

    def __init__(self, fn: Callable[[], object], delay_ms: float) -> None:
        self._fn = fn
        self._delay_ms = max(0, delay_ms or 0)
        self._lock = threading.Lock()
        self._timer: Optional[threading.Timer] = None
        self._generation = 0

    @property
    def delay_ms(self) -> float:
        return self._delay_ms

    def __call__(self) -> float:
        if not self._delay_ms:
            self._fn()
            return self._delay_ms
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            timer = threading.Timer(self._delay_ms / 1000.0, self._fire, args=(self._generation,))
            timer.daemon = True
            self._timer = timer
            timer.start()
        return self._delay_ms

    def cancel(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._timer = None
            self._generation += 1

    def _fire(self, generation: int) -> None:
        with self._lock:
            # A newer call superseded this timer after it had already fired.
            if generation != self._generation:
                return
            self._timer = None
        self._fn()


def debounce(fn: Callable[[], object], delay_ms: float) -> Debouncer:
    """Wrap ``fn`` so repeated calls collapse; a zero delay calls through."""
    return Debouncer(fn, delay_ms)
