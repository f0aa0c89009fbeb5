"""Catmull-Rom spline evaluation over an ordered sequence of 3D control points."""
from __future__ import annotations

import math
from collections.abc import Iterable, Mapping
from typing import Any

from tick_curve.types import InvalidConfigError, Point3


def coerce_point(p: Any) -> Point3:
    """Convert a 3-sequence, an ``{x, y, z}`` mapping or an object with
    ``x``/``y``/``z`` attributes into a float tuple."""
    if isinstance(p, Mapping):
        try:
            return (float(p["x"]), float(p["y"]), float(p["z"]))
        except KeyError as exc:
            raise InvalidConfigError(f"control point {p!r} is missing {exc}") from exc
    if all(hasattr(p, axis) for axis in ("x", "y", "z")):
        return (float(p.x), float(p.y), float(p.z))
    if isinstance(p, (str, bytes)) or not isinstance(p, Iterable):
        raise InvalidConfigError(f"cannot interpret {p!r} as a 3D point")
    coords = tuple(float(c) for c in p)
    if len(coords) != 3:
        raise InvalidConfigError(
            f"control point {p!r} has {len(coords)} coordinates, expected 3"
        )
    return coords


def coerce_points(points: Any) -> tuple[Point3, ...]:
    pts = tuple(coerce_point(p) for p in points)
    if len(pts) < 2:
        raise InvalidConfigError(
            f"a curve needs at least 2 control points, got {len(pts)}"
        )
    return pts


def catmull_rom(p0: Point3, p1: Point3, p2: Point3, p3: Point3, u: float) -> Point3:
    """Blend one segment with the cubic Hermite basis.

    Tangents at ``p1`` and ``p2`` are half the chord between their
    neighbours. The result is exactly ``p1`` at ``u=0`` and ``p2`` at ``u=1``,
    and a segment whose four points coincide stays exactly on that point.
    """
    u2 = u * u
    u3 = u2 * u
    h00 = 2 * u3 - 3 * u2 + 1
    h10 = u3 - 2 * u2 + u
    h01 = -2 * u3 + 3 * u2
    h11 = u3 - u2
    # h00 + h01 == 1: blend from whichever end point is nearer in u.
    if u <= 0.5:
        return tuple(
            b + h01 * (c - b) + h10 * 0.5 * (c - a) + h11 * 0.5 * (d - b)
            for a, b, c, d in zip(p0, p1, p2, p3, strict=True)
        )
    return tuple(
        c + h00 * (b - c) + h10 * 0.5 * (c - a) + h11 * 0.5 * (d - b)
        for a, b, c, d in zip(p0, p1, p2, p3, strict=True)
    )


class CatmullRomSpline:
    """C1 curve through every control point.

    The end points are duplicated as their own outer neighbours, so the
    curve is clamped at both ends and does not wrap even when traversal
    loops.
    """

    def __init__(self, points: Any) -> None:
        self._points = coerce_points(points)

    @property
    def points(self) -> tuple[Point3, ...]:
        return self._points

    @property
    def segment_count(self) -> int:
        return len(self._points) - 1

    def get_point(self, t: float) -> Point3:
        t = max(0.0, min(1.0, t))
        pts = self._points
        n = len(pts) - 1
        segment = max(0, min(math.floor(t * n), n - 1))
        u = t * n - segment

        p0 = pts[max(0, segment - 1)]
        p1 = pts[segment]
        p2 = pts[min(n, segment + 1)]
        p3 = pts[min(n, segment + 2)]
        return catmull_rom(p0, p1, p2, p3, u)

    def sample(self, count: int) -> list[Point3]:
        """Return ``count + 1`` points at uniformly spaced parameters."""
        if count < 1:
            return [self.get_point(0.0)]
        return [self.get_point(i / count) for i in range(count + 1)]
