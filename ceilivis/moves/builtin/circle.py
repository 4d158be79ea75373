"""Circling moves round the square."""

from __future__ import annotations

from ...animation import Timeline
from ...rotation import calculate_rotation
from ...types import DancerState, Direction, Position, Role
from ..base import SQUARE_ONLY, move


def _arrive(dancer: DancerState, slot: Position, clear_turned_around: bool = False):
    def callback() -> None:
        dancer.current_named_position = slot
        if clear_turned_around:
            dancer.turned_around = False
    return callback


async def quarter_circle(choreo, direction: Direction):
    """Everyone travels one same-role slot round, passing through the slot between.

    Facing always turns the stated way, even when the other way is shorter.
    """
    choreo.status.update(f"Quarter Circle {direction.value}")
    timelines = []
    for dancer in choreo.dancers.values():
        next_slot = choreo.next_of_same_role(direction, dancer.current_named_position)
        between = choreo.next_slot(direction, dancer.current_named_position)
        timelines.append(
            Timeline(target=dancer, beats=2)
            .add(translate=choreo.offset_to(dancer, choreo.home(between)),
                 on_complete=_arrive(dancer, between))
            .add(translate=choreo.offset_to(dancer, choreo.home(next_slot)),
                 on_complete=_arrive(dancer, next_slot))
        )
        rotation = calculate_rotation(dancer.pose.rotation, choreo.home(next_slot).rotation, direction)
        timelines.append(Timeline(target=dancer, beats=4).add(rotate=rotation))
    timelines.append(choreo.ticker(4))
    await choreo.play(*timelines)


@move("quarter_circle_left", category="circle", formations=SQUARE_ONLY)
async def quarter_circle_left(choreo):
    await quarter_circle(choreo, Direction.LEFT)


@move("quarter_circle_right", category="circle", formations=SQUARE_ONLY)
async def quarter_circle_right(choreo):
    await quarter_circle(choreo, Direction.RIGHT)


async def circle_halfway(choreo, direction: Direction):
    choreo.status.update(f"Circle {direction.value}")
    await quarter_circle(choreo, direction)
    await quarter_circle(choreo, direction)


@move("circle_left_halfway", category="circle", formations=SQUARE_ONLY)
async def circle_left_halfway(choreo):
    await circle_halfway(choreo, Direction.LEFT)


@move("circle_right_halfway", category="circle", formations=SQUARE_ONLY)
async def circle_right_halfway(choreo):
    await circle_halfway(choreo, Direction.RIGHT)


async def inner_quarter_circle(
    choreo,
    direction: Direction,
    leads_active: bool,
    end_in_regular_position: bool,
    beats: float = 4,
):
    """Leads (or follows) move one same-role slot round on an inner ring.

    A dancer who has turned around walks the mirrored direction. Ending in
    regular position lands on the home slot itself and clears the turn.
    """
    who = "Leads" if leads_active else "Follows"
    choreo.status.update(f"Inner Quarter Circle {direction.value} - {who}")
    timelines = []
    for dancer in choreo.dancers_in(Role.LEAD if leads_active else Role.FOLLOW):
        walk = direction.mirrored if dancer.turned_around else direction
        next_slot = choreo.next_of_same_role(walk, dancer.current_named_position)
        if end_in_regular_position:
            destination = choreo.home(next_slot)
        else:
            destination = choreo.geometry.inner_circle(choreo.formation, next_slot)
        timelines.append(Timeline(target=dancer, beats=beats).add(
            translate=choreo.offset_to(dancer, destination),
            on_complete=_arrive(dancer, next_slot, clear_turned_around=end_in_regular_position),
        ))
        rotation = calculate_rotation(dancer.pose.rotation, choreo.home(next_slot).rotation, walk)
        timelines.append(Timeline(target=dancer, beats=beats).add(rotate=rotation))
    timelines.append(choreo.ticker(int(beats)))
    await choreo.play(*timelines)


async def fast_inner_circle(choreo, direction: Direction, leads_active: bool):
    """Four quick inner quarter circles, the last one landing home."""
    for i in range(4):
        await inner_quarter_circle(choreo, direction, leads_active, i == 3, beats=2)


@move("leads_inner_quarter_circle_right", category="circle", formations=SQUARE_ONLY)
async def leads_inner_quarter_circle_right(choreo):
    await inner_quarter_circle(choreo, Direction.RIGHT, True, False)


@move("leads_inner_quarter_circle_left", category="circle", formations=SQUARE_ONLY)
async def leads_inner_quarter_circle_left(choreo):
    await inner_quarter_circle(choreo, Direction.LEFT, True, False)


@move("follows_inner_quarter_circle_right", category="circle", formations=SQUARE_ONLY)
async def follows_inner_quarter_circle_right(choreo):
    await inner_quarter_circle(choreo, Direction.RIGHT, False, False)


@move("follows_inner_quarter_circle_left", category="circle", formations=SQUARE_ONLY)
async def follows_inner_quarter_circle_left(choreo):
    await inner_quarter_circle(choreo, Direction.LEFT, False, False)


@move("leads_inner_quarter_circle_right_end_home", category="circle", formations=SQUARE_ONLY)
async def leads_inner_quarter_circle_right_end_home(choreo):
    await inner_quarter_circle(choreo, Direction.RIGHT, True, True)


@move("leads_inner_quarter_circle_left_end_home", category="circle", formations=SQUARE_ONLY)
async def leads_inner_quarter_circle_left_end_home(choreo):
    await inner_quarter_circle(choreo, Direction.LEFT, True, True)


@move("follows_inner_quarter_circle_right_end_home", category="circle", formations=SQUARE_ONLY)
async def follows_inner_quarter_circle_right_end_home(choreo):
    await inner_quarter_circle(choreo, Direction.RIGHT, False, True)


@move("follows_inner_quarter_circle_left_end_home", category="circle", formations=SQUARE_ONLY)
async def follows_inner_quarter_circle_left_end_home(choreo):
    await inner_quarter_circle(choreo, Direction.LEFT, False, True)


@move("leads_fast_inner_circle_left", category="circle", formations=SQUARE_ONLY)
async def leads_fast_inner_circle_left(choreo):
    await fast_inner_circle(choreo, Direction.LEFT, leads_active=True)


@move("follows_fast_inner_circle_left", category="circle", formations=SQUARE_ONLY)
async def follows_fast_inner_circle_left(choreo):
    await fast_inner_circle(choreo, Direction.LEFT, leads_active=False)
