"""Orchestrates setup → (scramble, mingle) → moves or dance → keyframes."""

from __future__ import annotations

import asyncio
import logging

from .animation import TimelineAnimator
from .ascii_viz import render_state_compact
from .choreographer import Choreographer
from .config import Settings
from .dances.base import Dance
from .interpolation import sample_keyframes
from .moves import ensure_loaded, resolve_moves
from .moves.builtin.special import mingle, randomize_dancer_offsets
from .status import StatusDisplay
from .types import Formation, Keyframe
from .world import FormationGeometry, layout

logger = logging.getLogger(__name__)


def run_pipeline(
    moves: list[str] | None = None,
    dance: Dance | None = None,
    formation: Formation = Formation.EIGHT_HAND_SQUARE,
    settings: Settings | None = None,
    scramble: bool = False,
    mingle_beats: float = 0.0,
    verbose: bool = False,
) -> tuple[list[Keyframe], Choreographer, list[str]]:
    """Run a list of named moves (or a whole dance) and produce keyframes.

    Args:
        moves: Registered move names, run one after another.
        dance: A catalog dance; takes precedence over ``moves``.
        formation: Starting formation.
        settings: Engine settings (viewport, pacing, seed...).
        scramble: Scatter the dancers before starting.
        mingle_beats: Mingle for this many beats before starting.
        verbose: Print dancer state at each stage.

    Returns:
        (keyframes, choreographer, warnings)
    """
    return asyncio.run(run_session(
        moves=moves,
        dance=dance,
        formation=formation,
        settings=settings,
        scramble=scramble,
        mingle_beats=mingle_beats,
        verbose=verbose,
    ))


async def run_session(
    moves: list[str] | None = None,
    dance: Dance | None = None,
    formation: Formation = Formation.EIGHT_HAND_SQUARE,
    settings: Settings | None = None,
    scramble: bool = False,
    mingle_beats: float = 0.0,
    verbose: bool = False,
) -> tuple[list[Keyframe], Choreographer, list[str]]:
    """Async body of ``run_pipeline`` for callers already inside an event loop."""
    ensure_loaded()
    settings = settings or Settings()

    geometry = FormationGeometry(settings.viewport_width, settings.viewport_height)
    animator = TimelineAnimator(beat_seconds=settings.beat_seconds)
    status = StatusDisplay(on_change=animator.annotate)
    choreo = Choreographer(formation, geometry, status, animator, settings)
    warnings: list[str] = []

    if verbose:
        print(f"Starting formation: {formation.value}")
        print(render_state_compact(choreo.dancers))
        print()

    if scramble:
        await choreo.run_move(randomize_dancer_offsets)

    if mingle_beats > 0:
        await choreo.run_move(mingle)
        while choreo.background_running and animator.now < mingle_beats:
            await asyncio.sleep(settings.beat_seconds)

    if dance is not None:
        await choreo.perform(dance)
    else:
        move_set, unknown = resolve_moves(moves or [])
        warnings.extend(f"Unknown move: {name}" for name in unknown)
        choreo.move_set = move_set.moves
        await choreo.run()

    await choreo.stop_mingling()
    await choreo.close()

    if verbose:
        print(render_state_compact(choreo.dancers, title=f"Final (beat {animator.now:.1f})"))
        print()

    warnings.extend(f"Move failed: {failure}" for failure in choreo.failures)
    warnings.extend(check_session(choreo))

    keyframes = sample_keyframes(
        animator,
        geometry,
        formation,
        choreo.initial_poses,
        colors={role: d.color for role, d in choreo.dancers.items()},
        beats_per_frame=settings.beats_per_frame,
    )
    logger.info(f"Run finished at beat {animator.now:.1f} with {len(keyframes)} keyframes")
    return keyframes, choreo, warnings


def check_session(choreo: Choreographer) -> list[str]:
    """Sanity checks on the final dancer state."""
    warnings = []
    expected = len(layout(choreo.formation))
    if len(choreo.dancers) != expected:
        warnings.append(f"Expected {expected} dancers, found {len(choreo.dancers)}")
    for dancer in choreo.dancers.values():
        if not 0 <= dancer.pose.rotation < 360:
            warnings.append(f"{dancer.role.value} rotation not normalized: {dancer.pose.rotation}")
    return warnings
