"""Tick counter for driving animators at a nominal rate."""
from __future__ import annotations


class Clock:
    """Counts ticks and the seconds of animation time they covered.

    ``dt`` is the nominal step for the configured rate; a tick may still be
    advanced by an explicit, measured delta.
    """

    def __init__(self, tps: int) -> None:
        if tps <= 0:
            raise ValueError("tps must be positive")
        self._tps = tps
        self._dt = 1.0 / tps
        self._tick_number = 0
        self._elapsed = 0.0

    @property
    def tps(self) -> int:
        return self._tps

    @property
    def dt(self) -> float:
        return self._dt

    @property
    def tick_number(self) -> int:
        return self._tick_number

    @property
    def elapsed(self) -> float:
        return self._elapsed

    def advance(self, dt: float | None = None) -> float:
        """Count one tick of ``dt`` seconds (the nominal step by default)."""
        step = self._dt if dt is None else dt
        self._tick_number += 1
        self._elapsed += step
        return step

    def reset(self) -> None:
        self._tick_number = 0
        self._elapsed = 0.0
