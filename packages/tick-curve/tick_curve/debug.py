"""Debug markers sampled along a curve."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol

from tick_curve.types import Point3


class PointSource(Protocol):
    def get_point(self, t: float) -> Point3: ...


@dataclass(frozen=True)
class Marker:
    position: Point3
    size: float
    color: int


class MarkerSink(Protocol):
    def add_markers(self, markers: list[Marker]) -> None: ...


def create_debug_markers(
    source: PointSource,
    sink: MarkerSink | None = None,
    *,
    count: int = 50,
    size: float = 0.05,
    color: int = 0x00FFFF,
) -> list[Marker]:
    """Place ``count + 1`` markers at parameters ``i / count`` and hand them
    to ``sink`` in one batch."""
    count = max(1, count)
    markers = [
        Marker(position=source.get_point(i / count), size=size, color=color)
        for i in range(count + 1)
    ]
    if sink is not None:
        sink.add_markers(markers)
    return markers
