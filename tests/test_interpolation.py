"""Tests for easing curves, arc waypoints and keyframe sampling."""

from __future__ import annotations

import pytest

from ceilivis.animation import Timeline
from ceilivis.errors import ConfigurationError
from ceilivis.interpolation import Sample, arc_waypoint, ease, sample_keyframes, value_at
from ceilivis.types import Direction, Formation, Point, Position


class TestEasing:
    @pytest.mark.parametrize("name", ["linear", "ease_in_out", "ease_out_quint", "ease_out_elastic"])
    def test_endpoints(self, name):
        assert ease(name, 0.0) == pytest.approx(0.0)
        assert ease(name, 1.0) == pytest.approx(1.0)

    def test_midpoints(self):
        assert ease("linear", 0.5) == 0.5
        assert ease("ease_in_out", 0.5) == pytest.approx(0.5)
        assert ease("ease_out_quint", 0.5) == pytest.approx(1 - 0.5 ** 5)

    def test_clamps_progress(self):
        assert ease("linear", 1.5) == 1.0
        assert ease("linear", -1.0) == 0.0

    def test_unknown_easing(self):
        with pytest.raises(ConfigurationError):
            ease("wobble", 0.5)


class TestArcWaypoint:
    def test_bows_to_either_side(self):
        start, end = Point(0, 0), Point(10, 0)
        assert arc_waypoint(start, end, Direction.RIGHT) == Point(5, -2.5)
        assert arc_waypoint(start, end, Direction.LEFT) == Point(5, 2.5)

    def test_same_point_is_the_midpoint(self):
        assert arc_waypoint(Point(3, 4), Point(3, 4), Direction.RIGHT) == Point(3, 4)

    def test_vertical_direction_rejected(self):
        with pytest.raises(ConfigurationError):
            arc_waypoint(Point(0, 0), Point(10, 0), Direction.UP)


class TestSamples:
    def test_sample_interpolates_then_holds(self):
        sample = Sample(0, 2, (0.0,), (10.0,))
        assert sample.at(1) == (5.0,)
        assert sample.at(5) == (10.0,)

    def test_zero_length_sample_jumps(self):
        assert Sample(1, 1, (0.0,), (4.0,)).at(1) == (4.0,)

    def test_value_at_uses_default_before_first_sample(self):
        track = [Sample(2, 4, (0.0,), (8.0,))]
        assert value_at(track, 1, (-1.0,)) == (-1.0,)
        assert value_at(track, 3, (-1.0,)) == (4.0,)


@pytest.mark.asyncio
async def test_sample_keyframes_replays_recording(square, animator):
    dancer = square.dancers[Position.FIRST_TOP_LEAD]
    square.status.update("Walk")
    await square.play(Timeline(target=dancer, beats=2).add(translate=(20.0, 0.0)))

    keyframes = sample_keyframes(
        animator, square.geometry, Formation.EIGHT_HAND_SQUARE, square.initial_poses, beats_per_frame=0.5
    )

    assert [kf.beat for kf in keyframes] == [0.0, 0.5, 1.0, 1.5, 2.0]
    home = square.home(Position.FIRST_TOP_LEAD)
    middle = keyframes[2].dancers[Position.FIRST_TOP_LEAD]
    assert (middle.x, middle.y) == pytest.approx((home.x + 10, home.y))
    assert keyframes[-1].dancers[Position.FIRST_TOP_LEAD].x == pytest.approx(home.x + 20)
    assert keyframes[0].annotation == "Walk - 1"
    assert len(keyframes[0].dancers) == 8
