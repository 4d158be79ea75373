"""Facing moves: turning to face someone, or turning around on the spot."""

from __future__ import annotations

from typing import Any, Awaitable

from ...animation import Timeline
from ...rotation import shortest_turn_rotation
from ...types import DancerState, Direction, Position, Relationship, Role
from ..base import ALL_FORMATIONS, PAIRED_FORMATIONS, move


def _face_relationship(
    choreo,
    relationship: Relationship,
    facing_partner: bool,
    do_tick: bool,
    override: Direction | None,
) -> list[Timeline]:
    timelines: list[Timeline] = []
    for dancer in choreo.dancers.values():
        target = choreo.relationship_target(dancer.current_named_position, relationship)
        rotation = shortest_turn_rotation(choreo.geometry, choreo.formation, dancer, target, override)
        if rotation % 360 == dancer.pose.rotation % 360:
            continue

        def done(dancer: DancerState = dancer) -> None:
            dancer.facing_partner = facing_partner

        timelines.append(Timeline(target=dancer, beats=2).add(rotate=rotation, on_complete=done))
    if do_tick:
        timelines.append(choreo.ticker(2))
    return timelines


@move("face_partner", category="facing", formations=PAIRED_FORMATIONS)
async def face_partner(choreo, do_tick: bool = False, override: Direction | None = None):
    choreo.status.update("Face Partner")
    await choreo.play(*_face_relationship(choreo, Relationship.PARTNER, True, do_tick, override))


@move("face_center", category="facing", formations=ALL_FORMATIONS)
async def face_center(choreo, do_tick: bool = False, override: Direction | None = None):
    """Everyone faces across the set, toward their opposite."""
    choreo.status.update("Face Center")
    await choreo.play(*_face_relationship(choreo, Relationship.OPPOSITE, False, do_tick, override))


def face_position(
    choreo, dancer: DancerState, target: Position, beats: float = 2
) -> Awaitable[Any] | None:
    """Start turning one dancer toward a slot. None when already standing in it."""
    if dancer.current_named_position is target:
        return None
    rotation = shortest_turn_rotation(choreo.geometry, choreo.formation, dancer, target)
    return choreo.schedule(Timeline(target=dancer, beats=beats).add(rotate=rotation))


async def turn_around(choreo, role: Role):
    choreo.status.update("Turn Around")
    timelines = []
    for dancer in choreo.dancers_in(role):

        def done(dancer: DancerState = dancer) -> None:
            dancer.turned_around = not dancer.turned_around

        timelines.append(
            Timeline(target=dancer, beats=4).add(rotate=dancer.pose.rotation + 180, on_complete=done)
        )
    timelines.append(choreo.ticker(4))
    await choreo.play(*timelines)


@move("leads_turn_around", category="facing")
async def leads_turn_around(choreo):
    await turn_around(choreo, Role.LEAD)


@move("follows_turn_around", category="facing")
async def follows_turn_around(choreo):
    await turn_around(choreo, Role.FOLLOW)


@move("all_turn_around", category="facing", aliases=["turn_around"])
async def all_turn_around(choreo):
    await turn_around(choreo, Role.ALL)
