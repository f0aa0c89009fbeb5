"""Curve animator: playback state machine over a Catmull-Rom spline."""
from __future__ import annotations

import logging
from typing import Any, Mapping

from tick_curve import signals, vec
from tick_curve.arclength import ArcLengthTable
from tick_curve.attachment import Attachment, Movable
from tick_curve.config import AnimatorConfig
from tick_curve.signals import SignalBus
from tick_curve.spline import CatmullRomSpline
from tick_curve.types import CurveFrame, Point3

logger = logging.getLogger(__name__)

IDLE = "idle"
PLAYING = "playing"
PAUSED = "paused"
COMPLETE = "complete"


class CurveAnimator:
    """Moves a point along a curve, one ``update(dt)`` per frame.

    In distance mode (``mode="train"``) the animator advances by
    ``speed * dt`` units of arc length and converts the distance to a spline
    parameter through the arc-length table, giving constant speed along the
    curve. In time mode it advances the raw parameter by ``dt / duration``,
    which is not constant speed.

    ``speed`` may be changed between ticks. Everything else in the config is
    fixed for the lifetime of the animator.
    """

    def __init__(
        self,
        points: Any,
        config: AnimatorConfig | Mapping[str, Any] | None = None,
        *,
        bus: SignalBus | None = None,
    ) -> None:
        if config is None:
            config = AnimatorConfig()
        elif not isinstance(config, AnimatorConfig):
            config = AnimatorConfig.from_dict(config)
        self._config = config
        self._bus = bus

        self._spline = CatmullRomSpline(points)
        self._table = ArcLengthTable(self._spline.get_point, config.arc_length_segments)

        self.speed = config.speed
        self._progress = 0.0
        self._distance = 0.0
        self._is_playing = False
        self._is_paused = False
        self._is_complete = False
        self._frame: CurveFrame | None = None
        self._attachment: Attachment | None = None

        logger.debug(
            "curve animator: %d points, length %.6f, mode=%s, loop=%s",
            len(self._spline.points),
            self._table.total_length,
            config.mode,
            config.loop,
        )

    @property
    def config(self) -> AnimatorConfig:
        return self._config

    @property
    def spline(self) -> CatmullRomSpline:
        return self._spline

    @property
    def table(self) -> ArcLengthTable:
        return self._table

    @property
    def total_length(self) -> float:
        return self._table.total_length

    @property
    def progress(self) -> float:
        return self._progress

    @property
    def distance_traveled(self) -> float:
        return self._distance

    @property
    def is_playing(self) -> bool:
        return self._is_playing

    @property
    def is_complete(self) -> bool:
        return self._is_complete

    @property
    def state(self) -> str:
        if self._is_complete:
            return COMPLETE
        if self._is_playing:
            return PLAYING
        if self._is_paused:
            return PAUSED
        return IDLE

    @property
    def frame(self) -> CurveFrame | None:
        """Output of the most recent applied tick."""
        return self._frame

    # -- queries --------------------------------------------------------

    def get_point(self, t: float) -> Point3:
        return self._spline.get_point(t)

    def parameter_for_distance(self, distance: float) -> float:
        return self._table.parameter_for_distance(distance)

    def look_ahead_parameter(self, parameter: float) -> float:
        return min(1.0, parameter + self._config.look_ahead_distance)

    def look_ahead(self, parameter: float) -> Point3:
        return self._spline.get_point(self.look_ahead_parameter(parameter))

    # -- binding --------------------------------------------------------

    def attach_to(self, entity: Movable) -> CurveAnimator:
        self._attachment = Attachment(entity, orient=self._config.orient_to_direction)
        return self

    def detach(self) -> CurveAnimator:
        self._attachment = None
        return self

    # -- playback -------------------------------------------------------

    def play(self) -> CurveAnimator:
        self._progress = 0.0
        self._distance = 0.0
        self._is_playing = True
        self._is_paused = False
        self._is_complete = False
        logger.debug("curve play")
        self._publish(signals.CURVE_PLAY)
        return self

    def pause(self) -> CurveAnimator:
        if self.state == PLAYING:
            self._is_playing = False
            self._is_paused = True
            self._publish(signals.CURVE_PAUSE)
        return self

    def resume(self) -> CurveAnimator:
        if self.state == PAUSED:
            self._is_playing = True
            self._is_paused = False
            self._publish(signals.CURVE_RESUME)
        return self

    def reset(self) -> CurveAnimator:
        self._progress = 0.0
        self._distance = 0.0
        self._is_playing = False
        self._is_paused = False
        self._is_complete = False
        self._frame = None
        self._publish(signals.CURVE_RESET)
        return self

    def update(self, dt: float) -> Point3 | None:
        """Advance by ``dt`` seconds and return the new position.

        Returns ``None`` without touching any state unless playing.
        """
        if not self._is_playing or self._is_complete:
            return None

        wrapped = False
        if self._config.is_distance_mode:
            total = self._table.total_length
            self._distance += self.speed * dt
            if self._distance >= total:
                if self._config.loop:
                    if total > 0.0:
                        self._distance %= total
                        wrapped = True
                    else:
                        self._distance = 0.0
                else:
                    self._distance = total
                    self._complete()
            self._progress = self._table.parameter_for_distance(self._distance)
        else:
            self._progress += dt / self._config.duration
            if self._progress >= 1.0:
                if self._config.loop:
                    self._progress %= 1.0
                    wrapped = True
                else:
                    self._progress = 1.0
                    self._complete()

        position = self._spline.get_point(self._progress)
        self._frame = self._make_frame(self._progress, position)
        if self._attachment is not None:
            self._attachment.apply(self._frame)

        if wrapped:
            logger.debug("curve wrapped at distance %.6f", self._distance)
            self._publish(signals.CURVE_LOOP)
        if self._is_complete:
            self._publish(signals.CURVE_COMPLETE)
        return position

    def _complete(self) -> None:
        self._is_complete = True
        self._is_playing = False
        logger.debug("curve complete")

    def _make_frame(self, parameter: float, position: Point3) -> CurveFrame:
        if not self._config.orient_to_direction:
            return CurveFrame(parameter=parameter, position=position)
        ahead_t = self.look_ahead_parameter(parameter)
        ahead = self._spline.get_point(ahead_t)
        return CurveFrame(
            parameter=parameter,
            position=position,
            look_ahead_parameter=ahead_t,
            look_ahead=ahead,
            direction=vec.normalize(vec.sub(ahead, position)),
        )

    def _publish(self, signal_name: str) -> None:
        if self._bus is not None:
            self._bus.publish(
                signal_name,
                animator=self,
                progress=self._progress,
                distance=self._distance,
            )
