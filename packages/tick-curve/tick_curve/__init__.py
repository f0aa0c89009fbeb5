"""tick-curve - Catmull-Rom curve animation with arc-length traversal."""
from __future__ import annotations

from tick_curve import signals, vec
from tick_curve.animator import COMPLETE, IDLE, PAUSED, PLAYING, CurveAnimator
from tick_curve.arclength import ArcLengthTable
from tick_curve.attachment import Attachment, Movable
from tick_curve.clock import Clock
from tick_curve.config import TIME, TRAIN, AnimatorConfig
from tick_curve.debug import Marker, MarkerSink, create_debug_markers
from tick_curve.driver import Driver
from tick_curve.signals import SignalBus
from tick_curve.spline import CatmullRomSpline, catmull_rom, coerce_points
from tick_curve.types import ArcLengthSample, CurveFrame, InvalidConfigError, Point3

__all__ = [
    "AnimatorConfig",
    "ArcLengthSample",
    "ArcLengthTable",
    "Attachment",
    "CatmullRomSpline",
    "Clock",
    "COMPLETE",
    "CurveAnimator",
    "CurveFrame",
    "Driver",
    "IDLE",
    "InvalidConfigError",
    "Marker",
    "MarkerSink",
    "Movable",
    "PAUSED",
    "PLAYING",
    "Point3",
    "SignalBus",
    "TIME",
    "TRAIN",
    "catmull_rom",
    "coerce_points",
    "create_debug_markers",
    "signals",
    "vec",
]
