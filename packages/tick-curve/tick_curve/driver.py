"""Driver - ticks a set of animators and flushes their signals."""
from __future__ import annotations

import logging
import time
from typing import Callable

from tick_curve.animator import CurveAnimator
from tick_curve.clock import Clock
from tick_curve.signals import SignalBus

logger = logging.getLogger(__name__)

Hook = Callable[["Driver"], None]


class Driver:
    """Single-threaded tick loop.

    Each tick calls ``update(dt)`` on every animator in the order they were
    added, then flushes the signal bus. Animators must not be updated from
    anywhere else while a driver owns them.
    """

    def __init__(self, tps: int = 60, bus: SignalBus | None = None) -> None:
        self._clock = Clock(tps)
        self._bus = bus
        self._animators: list[CurveAnimator] = []
        self._start_hooks: list[Hook] = []
        self._stop_hooks: list[Hook] = []
        self._stop_requested = False

    @property
    def clock(self) -> Clock:
        return self._clock

    @property
    def bus(self) -> SignalBus | None:
        return self._bus

    @property
    def animators(self) -> tuple[CurveAnimator, ...]:
        return tuple(self._animators)

    def add(self, animator: CurveAnimator) -> CurveAnimator:
        self._animators.append(animator)
        return animator

    def remove(self, animator: CurveAnimator) -> None:
        if animator in self._animators:
            self._animators.remove(animator)

    def on_start(self, hook: Hook) -> None:
        self._start_hooks.append(hook)

    def on_stop(self, hook: Hook) -> None:
        self._stop_hooks.append(hook)

    def request_stop(self) -> None:
        self._stop_requested = True

    def _tick(self, dt: float | None = None) -> None:
        dt = self._clock.advance(dt)
        for animator in list(self._animators):
            animator.update(dt)
        if self._bus is not None:
            self._bus.flush()

    def step(self, dt: float | None = None) -> None:
        """Run one tick, using the clock's fixed dt unless one is given."""
        self._stop_requested = False
        self._tick(dt)

    def run(self, n: int) -> None:
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self)

        for _ in range(n):
            self._tick()
            if self._stop_requested:
                break

        for hook in self._stop_hooks:
            hook(self)

    def run_forever(self) -> None:
        """Tick in real time until ``request_stop`` is called."""
        self._stop_requested = False
        for hook in self._start_hooks:
            hook(self)
        logger.debug("driver running at %d tps", self._clock.tps)

        dt = self._clock.dt
        while not self._stop_requested:
            start = time.monotonic()
            self._tick()
            if self._stop_requested:
                break
            sleep_time = dt - (time.monotonic() - start)
            if sleep_time > 0:
                time.sleep(sleep_time)

        logger.debug("driver stopped after %d ticks", self._clock.tick_number)
        for hook in self._stop_hooks:
            hook(self)
