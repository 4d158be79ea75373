"""Shared pytest fixtures for ceilivis tests."""

from __future__ import annotations

import pytest

from ceilivis.animation import TimelineAnimator
from ceilivis.choreographer import Choreographer
from ceilivis.config import Settings
from ceilivis.moves import ensure_loaded
from ceilivis.status import StatusDisplay
from ceilivis.types import Formation
from ceilivis.world import FormationGeometry

ensure_loaded()


# ============================================================================
# Engine Fixtures
# ============================================================================


@pytest.fixture
def settings() -> Settings:
    """Seeded settings with an instant beat clock."""
    return Settings(seed=7)


@pytest.fixture
def geometry() -> FormationGeometry:
    """Geometry for a 1000x800 floor (scale factor 1.0)."""
    return FormationGeometry(1000, 800)


@pytest.fixture
def animator() -> TimelineAnimator:
    return TimelineAnimator(beat_seconds=0.0)


@pytest.fixture
def status(animator: TimelineAnimator) -> StatusDisplay:
    return StatusDisplay(on_change=animator.annotate)


@pytest.fixture
def cues() -> list[str]:
    """Collects sound cues fired by moves."""
    return []


@pytest.fixture
def make_choreographer(geometry, status, animator, settings, cues):
    """Factory for a Choreographer sharing the fixtures above."""

    def factory(formation: Formation = Formation.EIGHT_HAND_SQUARE) -> Choreographer:
        return Choreographer(
            formation,
            geometry=geometry,
            status=status,
            animator=animator,
            settings=settings,
            on_cue=cues.append,
        )

    return factory


@pytest.fixture
def square(make_choreographer) -> Choreographer:
    """Eight dancers at home in an eight-hand square."""
    return make_choreographer(Formation.EIGHT_HAND_SQUARE)


@pytest.fixture
def two_facing_two(make_choreographer) -> Choreographer:
    """Four dancers at home in two-facing-two."""
    return make_choreographer(Formation.TWO_FACING_TWO)


@pytest.fixture
def three_facing_three(make_choreographer) -> Choreographer:
    return make_choreographer(Formation.THREE_FACING_THREE)


def assert_all_home(choreo: Choreographer) -> None:
    for dancer in choreo.dancers.values():
        assert dancer.current_named_position is dancer.role
        assert dancer.pose.x == pytest.approx(0.0, abs=1e-6)
        assert dancer.pose.y == pytest.approx(0.0, abs=1e-6)
