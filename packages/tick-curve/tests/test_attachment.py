"""Tests for pushing animator output into a movable entity."""
from __future__ import annotations

from tick_curve import AnimatorConfig, Attachment, CurveAnimator, CurveFrame

BENT = [(0.0, 0.0, 0.0), (1.3, 0.7, -0.2), (2.9, -1.1, 0.4), (3.3, 2.5, 1.7), (-0.6, 1.9, 0.1)]


class Body:
    """Minimal movable entity recording look_at targets."""

    def __init__(self) -> None:
        self.position = (0.0, 0.0, 0.0)
        self.targets: list[tuple[float, float, float]] = []

    def look_at(self, point) -> None:
        self.targets.append(point)


class TestAttachment:
    def test_apply_sets_position_and_faces_look_ahead(self):
        body = Body()
        frame = CurveFrame(
            parameter=0.5,
            position=(1.0, 2.0, 3.0),
            look_ahead_parameter=0.51,
            look_ahead=(1.1, 2.0, 3.0),
            direction=(1.0, 0.0, 0.0),
        )
        Attachment(body).apply(frame)
        assert body.position == (1.0, 2.0, 3.0)
        assert body.targets == [(1.1, 2.0, 3.0)]

    def test_apply_without_orientation_data(self):
        body = Body()
        Attachment(body).apply(CurveFrame(parameter=0.0, position=(4.0, 5.0, 6.0)))
        assert body.position == (4.0, 5.0, 6.0)
        assert body.targets == []

    def test_orient_flag_off(self):
        body = Body()
        frame = CurveFrame(0.5, (1.0, 2.0, 3.0), 0.51, (1.1, 2.0, 3.0), (1.0, 0.0, 0.0))
        Attachment(body, orient=False).apply(frame)
        assert body.targets == []


class TestAnimatorBinding:
    def test_attach_to_returns_animator(self):
        anim = CurveAnimator(BENT)
        assert anim.attach_to(Body()) is anim

    def test_update_pushes_frame(self):
        body = Body()
        anim = CurveAnimator(BENT).attach_to(body).play()
        pos = anim.update(0.75)
        assert body.position == pos
        assert body.targets == [anim.frame.look_ahead]

    def test_no_push_when_not_playing(self):
        body = Body()
        anim = CurveAnimator(BENT).attach_to(body)
        anim.update(0.75)
        assert body.position == (0.0, 0.0, 0.0)
        assert body.targets == []

    def test_no_look_at_when_orientation_disabled(self):
        body = Body()
        anim = CurveAnimator(BENT, AnimatorConfig(orient_to_direction=False))
        anim.attach_to(body).play().update(0.75)
        assert body.position == anim.frame.position
        assert body.targets == []

    def test_detach(self):
        body = Body()
        anim = CurveAnimator(BENT).attach_to(body).play()
        anim.update(0.5)
        moved_to = body.position
        anim.detach().update(0.5)
        assert body.position == moved_to
