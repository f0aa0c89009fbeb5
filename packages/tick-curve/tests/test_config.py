"""Tests for AnimatorConfig."""
from __future__ import annotations

import dataclasses

import pytest

from tick_curve import TIME, TRAIN, AnimatorConfig, InvalidConfigError


class TestAnimatorConfig:
    """Test defaults, validation and option parsing."""

    def test_defaults(self):
        """Every option has its documented default."""
        cfg = AnimatorConfig()
        assert cfg.speed == 1.0
        assert cfg.mode == TRAIN
        assert cfg.duration == 3.0
        assert cfg.loop is False
        assert cfg.orient_to_direction is True
        assert cfg.look_ahead_distance == 0.01
        assert cfg.arc_length_segments == 200

    def test_frozen(self):
        """Config cannot be mutated after construction."""
        cfg = AnimatorConfig()
        with pytest.raises(dataclasses.FrozenInstanceError):
            cfg.speed = 2.0  # type: ignore[misc]

    def test_replace_derives_variant(self):
        """dataclasses.replace builds a modified copy."""
        cfg = dataclasses.replace(AnimatorConfig(), loop=True)
        assert cfg.loop is True
        assert AnimatorConfig().loop is False

    def test_train_is_distance_mode(self):
        """Only "train" selects distance mode."""
        assert AnimatorConfig(mode=TRAIN).is_distance_mode
        assert not AnimatorConfig(mode=TIME).is_distance_mode
        assert not AnimatorConfig(mode="anything").is_distance_mode

    @pytest.mark.parametrize(
        "kwargs, match",
        [
            ({"arc_length_segments": 0}, "arc_length_segments"),
            ({"duration": 0.0}, "duration"),
            ({"duration": -1.0}, "duration"),
            ({"look_ahead_distance": -0.1}, "look_ahead_distance"),
        ],
    )
    def test_invalid_values_raise(self, kwargs, match):
        """Unusable values fail at construction."""
        with pytest.raises(InvalidConfigError, match=match):
            AnimatorConfig(**kwargs)


class TestFromDict:
    """Test building a config from an options mapping."""

    def test_snake_case(self):
        cfg = AnimatorConfig.from_dict({"speed": 2.5, "loop": True})
        assert cfg.speed == 2.5
        assert cfg.loop is True

    def test_camel_case_aliases(self):
        cfg = AnimatorConfig.from_dict(
            {"orientToDirection": False, "lookAheadDistance": 0.05, "arcLengthSegments": 32}
        )
        assert cfg.orient_to_direction is False
        assert cfg.look_ahead_distance == 0.05
        assert cfg.arc_length_segments == 32

    def test_empty_gives_defaults(self):
        assert AnimatorConfig.from_dict({}) == AnimatorConfig()

    def test_unknown_key_raises(self):
        with pytest.raises(InvalidConfigError, match="unknown animator option 'velocity'"):
            AnimatorConfig.from_dict({"velocity": 3.0})
