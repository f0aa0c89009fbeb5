"""End-to-end traversal scenarios."""
from __future__ import annotations

import pytest

from tick_curve import COMPLETE, TIME, AnimatorConfig, CurveAnimator, Driver, SignalBus, signals

LINE = [(0.0, 0.0, 0.0), (1.0, 0.0, 0.0), (2.0, 0.0, 0.0), (3.0, 0.0, 0.0)]


class TestCollinearTrain:
    """Constant-speed traversal of a straight four-point curve."""

    def test_half_way(self):
        anim = CurveAnimator(LINE, AnimatorConfig(speed=1.0)).play()
        assert anim.total_length == pytest.approx(3.0, abs=1e-9)
        pos = anim.update(1.5)
        assert anim.distance_traveled == 1.5
        assert pos == pytest.approx((1.5, 0.0, 0.0), abs=1e-6)

    def test_loop_two_full_lengths_wraps_to_start(self):
        anim = CurveAnimator(LINE, AnimatorConfig(speed=3.0, loop=True)).play()
        anim.update(2.0)
        assert anim.distance_traveled == 6.0 % anim.total_length
        assert anim.distance_traveled == pytest.approx(0.0, abs=1e-9)
        assert anim.is_complete is False

    def test_positions_advance_evenly(self):
        anim = CurveAnimator(LINE, AnimatorConfig(speed=1.0)).play()
        xs = [anim.update(0.25)[0] for _ in range(11)]
        for i, x in enumerate(xs, start=1):
            assert x == pytest.approx(0.25 * i, abs=1e-3)


class TestTimedTraversal:
    def test_two_second_duration_completes(self):
        anim = CurveAnimator(LINE, AnimatorConfig(mode=TIME, duration=2.0)).play()
        assert anim.update(1.0) is not None
        assert anim.update(1.0) is not None
        assert anim.progress == 1.0
        assert anim.is_complete is True
        assert anim.update(1.0) is None
        assert anim.progress == 1.0
        assert anim.state == COMPLETE

    def test_time_mode_is_not_constant_speed(self):
        anim = CurveAnimator(LINE, AnimatorConfig(mode=TIME, duration=3.0)).play()
        first = anim.update(0.5)[0]
        second = anim.update(0.5)[0] - first
        assert first < second


class TestDrivenScene:
    def test_two_animators_one_driver(self):
        bus = SignalBus()
        done: list[str] = []
        bus.subscribe(signals.CURVE_COMPLETE, lambda n, d: done.append(d["animator"].config.mode))

        driver = Driver(tps=20, bus=bus)
        train = driver.add(CurveAnimator(LINE, AnimatorConfig(speed=3.0), bus=bus).play())
        timed = driver.add(
            CurveAnimator(LINE, AnimatorConfig(mode=TIME, duration=2.0), bus=bus).play()
        )
        driver.run(50)

        assert train.is_complete and timed.is_complete
        assert done == ["train", "time"]
        assert train.frame.position == LINE[-1]
        assert timed.frame.position == LINE[-1]
