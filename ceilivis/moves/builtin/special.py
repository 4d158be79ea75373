"""Claps, going home, scrambling, and the background mingle."""

from __future__ import annotations

import asyncio
import logging
import math
from typing import Any, Awaitable

from ...animation import Timeline
from ...errors import ConfigurationError
from ...rotation import dancer_point
from ...types import DancerState, Position
from ..base import move
from .facing import face_center, face_position

logger = logging.getLogger(__name__)

SCRAMBLE_DISTANCE = 100
CLAP_SCALES = [1.2, 1.0, None, None, 1.2, 1.0, None, None]


@move("clap_twice", category="special", aliases=["clap"])
async def clap_twice(choreo):
    choreo.status.update("Clap Twice")
    claps = Timeline(beats=1)
    for _ in range(2):
        claps.add(on_begin=lambda: choreo.cue("clap"))

    timelines = [choreo.ticker(2), claps]
    for dancer in choreo.dancers.values():
        pulse = Timeline(target=dancer, beats=0.25, easing="ease_out_elastic")
        for scale in CLAP_SCALES:
            pulse.add(scale=scale)
        timelines.append(pulse)
    await choreo.play(*timelines)


def go_to_position(choreo, dancer: DancerState, target: Position, beats: float = 2) -> Awaitable[Any]:
    def arrived() -> None:
        dancer.current_named_position = target

    return choreo.schedule(Timeline(target=dancer, beats=beats).add(
        translate=choreo.offset_to(dancer, choreo.home(target)),
        on_complete=arrived,
    ))


async def _send_home(choreo, dancers: list[DancerState], turn_beats: float):
    for dancer in dancers:
        dancer.turned_around = False
    await choreo.join([face_position(choreo, d, d.role, turn_beats) for d in dancers])
    await choreo.join([go_to_position(choreo, d, d.role) for d in dancers])
    choreo.normalize_rotations()
    await face_center(choreo)


@move("go_home", category="special", aliases=["home"])
async def go_home(choreo):
    """Everyone faces home, walks there, and faces the middle of the set."""
    choreo.status.update("Go Home")
    await _send_home(choreo, list(choreo.dancers.values()), turn_beats=2)
    choreo.status.reset_count()
    choreo.status.clear()


@move("follows_go_home", category="special")
async def follows_go_home(choreo):
    """Only dancers outside a lead slot go home; leads stay where they are."""
    follows = [
        d for d in choreo.dancers.values()
        if d.out_of_position or not choreo.is_lead(d.current_named_position)
    ]
    await _send_home(choreo, follows, turn_beats=1)


@move("randomize_dancer_offsets", category="special", aliases=["scramble"])
async def randomize_dancer_offsets(choreo):
    """Scatter everyone to a random spot and facing near home."""
    rng = choreo.rng
    timelines = []
    for dancer in choreo.dancers.values():
        x = rng.uniform(-1, 1) * SCRAMBLE_DISTANCE
        y = rng.uniform(-1, 1) * SCRAMBLE_DISTANCE
        rotation = rng.random() * 360
        dancer.current_named_position = Position.OUT_OF_POSITION
        timelines.append(Timeline(target=dancer, beats=0).add(translate=(x, y), rotate=rotation))
    await choreo.play(*timelines)


def _stride(choreo, dancer: DancerState) -> Timeline:
    """One random wander step, turned back toward the middle near the edges."""
    left, top, right, bottom = choreo.geometry.safe_zone()
    here = dancer_point(choreo.geometry, choreo.formation, dancer)
    walk = math.radians(dancer.pose.rotation + 90)
    new_angle = choreo.rng.random() * 360
    distance = choreo.rng.random() * choreo.geometry.scaled(choreo.settings.mingle_max_distance)

    if here.x < left:
        new_angle, distance = 270, 100
    elif here.x > right:
        new_angle, distance = 90, 100
    elif here.y < top:
        new_angle, distance = 0, 100
    elif here.y > bottom:
        new_angle, distance = 180, 100

    home = choreo.home(dancer.role)
    x = min(right, max(left, here.x + distance * math.cos(walk)))
    y = min(bottom, max(top, here.y + distance * math.sin(walk)))
    return (
        Timeline(target=dancer, beats=4)
        .add(translate=(x - home.x, y - home.y))
        .add(rotate=new_angle)
    )


@move("mingle", category="special", background=True)
async def mingle(choreo, stop: asyncio.Event | None = None):
    """Wander everyone around the floor until ``stop`` is set.

    The token is checked once per stride, so a stride that has started
    always lands before this returns.
    """
    if stop is None:
        raise ConfigurationError("mingle runs in the background; start it with Choreographer.run_move")
    choreo.status.update("Mingling")
    strides = 0
    while not stop.is_set():
        timelines = []
        for dancer in choreo.dancers.values():
            dancer.current_named_position = Position.OUT_OF_POSITION
            timelines.append(_stride(choreo, dancer))
        await choreo.play(*timelines)
        strides += 1
    logger.info(f"Mingle stopped after {strides} stride(s)")
