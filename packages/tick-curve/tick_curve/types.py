"""Shared value types and errors for curve animation."""
from __future__ import annotations

from dataclasses import dataclass

Point3 = tuple[float, float, float]


class InvalidConfigError(ValueError):
    """Raised when an animator is constructed with unusable points or options."""


@dataclass(frozen=True, slots=True)
class ArcLengthSample:
    parameter: float
    distance: float


@dataclass(frozen=True, slots=True)
class CurveFrame:
    """Geometric output of one applied tick.

    ``look_ahead_parameter``, ``look_ahead`` and ``direction`` are ``None``
    unless orientation is enabled. ``direction`` is a unit vector, or the
    zero vector when the look-ahead point coincides with ``position``.
    """

    parameter: float
    position: Point3
    look_ahead_parameter: float | None = None
    look_ahead: Point3 | None = None
    direction: Point3 | None = None
