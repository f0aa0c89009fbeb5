"""Playback signals and the queue-then-flush bus that delivers them."""
from __future__ import annotations

from typing import Any, Callable

CURVE_PLAY = "curve_play"
CURVE_PAUSE = "curve_pause"
CURVE_RESUME = "curve_resume"
CURVE_RESET = "curve_reset"
CURVE_LOOP = "curve_loop"
CURVE_COMPLETE = "curve_complete"

ALL_SIGNALS = (
    CURVE_PLAY,
    CURVE_PAUSE,
    CURVE_RESUME,
    CURVE_RESET,
    CURVE_LOOP,
    CURVE_COMPLETE,
)

Handler = Callable[[str, dict[str, Any]], None]


class SignalBus:
    """Queues published signals until ``flush``.

    Signals are delivered in publish order; handlers of one signal run in
    registration order. A signal with no subscribers is dropped.
    """

    def __init__(self) -> None:
        self._subscribers: dict[str, list[Handler]] = {}
        self._queue: list[tuple[str, dict[str, Any]]] = []

    def subscribe(self, signal_name: str, handler: Handler) -> None:
        self._subscribers.setdefault(signal_name, []).append(handler)

    def unsubscribe(self, signal_name: str, handler: Handler) -> None:
        handlers = self._subscribers.get(signal_name)
        if handlers is not None and handler in handlers:
            handlers.remove(handler)

    def publish(self, signal_name: str, **data: Any) -> None:
        self._queue.append((signal_name, data))

    @property
    def pending(self) -> int:
        return len(self._queue)

    def flush(self) -> None:
        snapshot = self._queue
        self._queue = []
        for signal_name, data in snapshot:
            for handler in list(self._subscribers.get(signal_name, [])):
                handler(signal_name, data)

    def clear(self) -> None:
        self._queue.clear()
