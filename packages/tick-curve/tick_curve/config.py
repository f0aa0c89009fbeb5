"""Animator configuration dataclass."""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Mapping

from tick_curve.types import InvalidConfigError

TRAIN = "train"
TIME = "time"

_ALIASES = {
    "orientToDirection": "orient_to_direction",
    "lookAheadDistance": "look_ahead_distance",
    "arcLengthSegments": "arc_length_segments",
}


@dataclass(frozen=True)
class AnimatorConfig:
    """Immutable configuration for a curve animator.

    Attributes:
        speed: Distance-mode traversal rate in units per second.
        mode: ``"train"`` for constant-speed (distance) traversal; any other
            value traverses the raw spline parameter over ``duration``.
        duration: Time-mode traversal length in seconds.
        loop: Wrap around at the end instead of completing.
        orient_to_direction: Compute a look-ahead point and facing direction.
        look_ahead_distance: Parameter offset of the look-ahead point.
        arc_length_segments: Sampling resolution of the arc-length table.
    """

    speed: float = 1.0
    mode: str = TRAIN
    duration: float = 3.0
    loop: bool = False
    orient_to_direction: bool = True
    look_ahead_distance: float = 0.01
    arc_length_segments: int = 200

    def __post_init__(self) -> None:
        if self.arc_length_segments < 1:
            raise InvalidConfigError(
                f"arc_length_segments must be at least 1, got {self.arc_length_segments}"
            )
        if self.duration <= 0:
            raise InvalidConfigError(f"duration must be positive, got {self.duration}")
        if self.look_ahead_distance < 0:
            raise InvalidConfigError(
                f"look_ahead_distance must not be negative, got {self.look_ahead_distance}"
            )

    @property
    def is_distance_mode(self) -> bool:
        return self.mode == TRAIN

    @classmethod
    def from_dict(cls, options: Mapping[str, Any]) -> AnimatorConfig:
        """Build a config from snake_case or camelCase option names."""
        known = {f.name for f in fields(cls)}
        kwargs: dict[str, Any] = {}
        for key, value in options.items():
            name = _ALIASES.get(key, key)
            if name not in known:
                raise InvalidConfigError(f"unknown animator option {key!r}")
            kwargs[name] = value
        return cls(**kwargs)
