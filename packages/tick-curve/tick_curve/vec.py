"""3D vector helpers operating on plain float tuples."""
from __future__ import annotations

import math

from tick_curve.types import Point3


def add(a: Point3, b: Point3) -> Point3:
    return tuple(ai + bi for ai, bi in zip(a, b, strict=True))


def sub(a: Point3, b: Point3) -> Point3:
    return tuple(ai - bi for ai, bi in zip(a, b, strict=True))


def scale(v: Point3, s: float) -> Point3:
    return tuple(vi * s for vi in v)


def lerp(a: Point3, b: Point3, t: float) -> Point3:
    return tuple(ai + (bi - ai) * t for ai, bi in zip(a, b, strict=True))


def magnitude(v: Point3) -> float:
    return math.sqrt(sum(vi * vi for vi in v))


def normalize(v: Point3) -> Point3:
    mag = magnitude(v)
    if mag == 0.0:
        return v
    return scale(v, 1.0 / mag)


def distance(a: Point3, b: Point3) -> float:
    if len(a) != len(b):
        raise ValueError("points must have the same dimension")
    return math.dist(a, b)
