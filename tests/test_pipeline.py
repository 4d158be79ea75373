"""End-to-end tests: moves or dances in, keyframes and warnings out."""

from __future__ import annotations

from ceilivis.choreographer import Choreographer
from ceilivis.config import Settings
from ceilivis.dances.catalog import bonfire_dance
from ceilivis.pipeline import check_session, run_pipeline
from ceilivis.types import Formation, Position


def test_moves_produce_keyframes():
    keyframes, choreo, warnings = run_pipeline(moves=["quarter_circle_left"], settings=Settings(seed=1))

    assert warnings == []
    assert [kf.beat for kf in keyframes][:3] == [0.0, 0.25, 0.5]
    assert keyframes[-1].beat == 4.0
    assert len(keyframes) == 17
    lead = choreo.dancers[Position.FIRST_TOP_LEAD]
    assert lead.current_named_position is Position.FIRST_SIDE_LEAD

    final = keyframes[-1].dancers[Position.FIRST_TOP_LEAD]
    home = choreo.home(Position.FIRST_SIDE_LEAD)
    assert (round(final.x, 6), round(final.y, 6)) == (home.x, home.y)
    assert keyframes[-1].colors[Position.FIRST_TOP_LEAD] == "red"


def test_unknown_and_failed_moves_become_warnings():
    _, _, warnings = run_pipeline(
        moves=["sidestep_left", "moonwalk", "quarter_circle_left"],
        formation=Formation.TWO_FACING_TWO,
    )
    assert "Unknown move: moonwalk" in warnings
    assert "Move failed: quarter_circle_left: invalid formation" in warnings


def test_dance():
    keyframes, choreo, warnings = run_pipeline(dance=bonfire_dance)
    assert warnings == []
    assert keyframes[-1].annotation.startswith("Done")


def test_mingle_then_moves():
    keyframes, choreo, warnings = run_pipeline(
        moves=["advance_and_retire"], mingle_beats=16, settings=Settings(seed=3)
    )
    assert warnings == []
    assert not choreo.mingling
    for dancer in choreo.dancers.values():
        assert dancer.current_named_position is dancer.role
    assert keyframes[-1].beat > 16


def test_scramble_only():
    _, choreo, warnings = run_pipeline(moves=[], scramble=True, settings=Settings(seed=5))
    assert warnings == []
    assert all(d.out_of_position for d in choreo.dancers.values())


def test_check_session_flags_bad_rotation():
    choreo = Choreographer(Formation.TWO_FACING_TWO)
    assert check_session(choreo) == []
    choreo.dancers[Position.FIRST_TOP_LEAD].pose.rotation = 400
    (warning,) = check_session(choreo)
    assert "first-top-lead" in warning


def test_failed_mingle_does_not_stall_the_run():
    settings = Settings(beat_seconds=0.05, join_timeout_seconds=0.05)
    _, choreo, warnings = run_pipeline(moves=["advance_and_retire"], mingle_beats=8, settings=settings)
    assert "Move failed: mingle: TimeoutError" in warnings
    assert not choreo.mingling
