"""Binding that pushes animator output into an external movable entity."""
from __future__ import annotations

from typing import Protocol

from tick_curve.types import CurveFrame, Point3


class Movable(Protocol):
    position: Point3

    def look_at(self, point: Point3) -> None: ...


class Attachment:
    """Copies each applied frame onto ``entity``.

    The entity's ``position`` is assigned the frame position. When ``orient``
    is set and the frame carries a look-ahead point, ``look_at`` is called
    with it; turning that into a rotation is up to the entity.
    """

    def __init__(self, entity: Movable, orient: bool = True) -> None:
        self.entity = entity
        self.orient = orient

    def apply(self, frame: CurveFrame) -> None:
        self.entity.position = frame.position
        if self.orient and frame.look_ahead is not None:
            self.entity.look_at(frame.look_ahead)
