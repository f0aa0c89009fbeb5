"""Sampled arc-length table with inverse (distance -> parameter) lookup."""
from __future__ import annotations

import bisect
import logging
import math
from typing import Callable

from tick_curve import vec
from tick_curve.types import ArcLengthSample, InvalidConfigError, Point3

logger = logging.getLogger(__name__)


class ArcLengthTable:
    """Cumulative chord length of a curve sampled at ``i / segments``.

    More segments track the true arc length more closely at the cost of a
    larger table and a longer one-off build. The table is immutable once
    built and can be shared between animators over the same curve.
    """

    def __init__(self, evaluate: Callable[[float], Point3], segments: int) -> None:
        if segments < 1:
            raise InvalidConfigError(f"segments must be at least 1, got {segments}")
        self._segments = segments

        parameters = [0.0]
        distances = [0.0]
        total = 0.0
        prev = evaluate(0.0)
        for i in range(1, segments + 1):
            t = i / segments
            point = evaluate(t)
            total += vec.distance(prev, point)
            parameters.append(t)
            distances.append(total)
            prev = point

        self._parameters = parameters
        self._distances = distances
        self._samples = tuple(
            ArcLengthSample(p, d) for p, d in zip(parameters, distances)
        )
        logger.debug(
            "built arc-length table: %d segments, total length %.6f", segments, total
        )

    @property
    def segments(self) -> int:
        return self._segments

    @property
    def samples(self) -> tuple[ArcLengthSample, ...]:
        return self._samples

    @property
    def total_length(self) -> float:
        return self._distances[-1]

    def parameter_for_distance(self, distance: float) -> float:
        """Invert the table by binary search and linear interpolation.

        Distances at or below 0 map to 0 and at or above the total length
        map to 1. Every distance on a zero-length curve maps to 0.
        """
        if distance <= 0.0:
            return 0.0
        total = self._distances[-1]
        if total == 0.0:
            return 0.0
        if distance >= total:
            return 1.0

        # distances[high - 1] < distance <= distances[high]
        high = bisect.bisect_left(self._distances, distance)
        low = high - 1
        d0 = self._distances[low]
        d1 = self._distances[high]
        frac = (distance - d0) / (d1 - d0)
        p0 = self._parameters[low]
        return p0 + frac * (self._parameters[high] - p0)

    def distance_for_parameter(self, parameter: float) -> float:
        parameter = max(0.0, min(1.0, parameter))
        scaled = parameter * self._segments
        low = min(math.floor(scaled), self._segments - 1)
        frac = scaled - low
        d0 = self._distances[low]
        return d0 + frac * (self._distances[low + 1] - d0)

    def __len__(self) -> int:
        return len(self._samples)
