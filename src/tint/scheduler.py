"""Simulation clock and periodic callbacks driven by the ``tick`` event."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, List

PeriodicCallback = Callable[[float], None]


@dataclass
class Periodic:
    """Recurring timer. Fires once ``elapsed_ms`` reaches ``interval_ms``, then resets."""

    name: str
    interval_ms: float
    callback: PeriodicCallback
    elapsed_ms: float = 0.0


class TintScheduler:
    """Owns ``now_ms`` and runs periodic callbacks in registration order.

    A periodic fires at most once per tick however large ``dt`` is, and a
    callback that advances the scheduler itself is not re-entered.
    """

    def __init__(self, start_ms: float = 0.0) -> None:
        self.now_ms = float(start_ms)
        self._periodics: List[Periodic] = []
        self._running = False

    def every(self, name: str, interval_ms: float, callback: PeriodicCallback) -> Periodic:
        periodic = Periodic(name=name, interval_ms=float(interval_ms), callback=callback)
        self._periodics.append(periodic)
        return periodic

    def cancel(self, name: str) -> None:
        self._periodics = [p for p in self._periodics if p.name != name]

    def names(self) -> List[str]:
        return [p.name for p in self._periodics]

    def advance(self, dt_seconds: float) -> List[str]:
        """Move the clock forward and fire what is due. Returns the names fired."""
        if self._running:
            return []
        try:
            dt_ms = max(0.0, float(dt_seconds) * 1000.0)
        except (TypeError, ValueError):
            dt_ms = 0.0
        self.now_ms += dt_ms
        fired: List[str] = []
        self._running = True
        try:
            for periodic in list(self._periodics):
                periodic.elapsed_ms += dt_ms
                if periodic.elapsed_ms >= periodic.interval_ms:
                    periodic.elapsed_ms = 0.0
                    periodic.callback(periodic.interval_ms / 1000.0)
                    fired.append(periodic.name)
        finally:
            self._running = False
        return fired

    def clear(self) -> None:
        self._periodics.clear()
