"""Partner moves: switches, advance and retire, turns and swings."""

from __future__ import annotations

from ...animation import Timeline
from ...errors import ConfigurationError
from ...interpolation import arc_waypoint
from ...types import DancerState, Direction, Position, Relationship
from ...world import toward_center
from ..base import ALL_FORMATIONS, PAIRED_FORMATIONS, move

ADVANCE_DISTANCE = 50


async def switch(choreo, beats: float = 4):
    """Each pair trades places in a straight line, keeping their facing."""
    choreo.status.update("Switch With Partner")
    timelines = []
    for group, members in choreo.groups().items():
        if len(members) != 2:
            raise ConfigurationError(f"Group {group.value} has {len(members)} dancers, not a pair")
        dancer1, dancer2 = members

        def swap(a: DancerState = dancer1, b: DancerState = dancer2) -> None:
            a.current_named_position, b.current_named_position = (
                b.current_named_position, a.current_named_position,
            )

        timelines.append(Timeline(target=dancer1, beats=beats).add(
            translate=choreo.offset_to(dancer1, choreo.home(dancer2.current_named_position)),
            on_complete=swap,
        ))
        timelines.append(Timeline(target=dancer2, beats=beats).add(
            translate=choreo.offset_to(dancer2, choreo.home(dancer1.current_named_position)),
        ))
    timelines.append(choreo.ticker(int(beats)))
    await choreo.play(*timelines)


@move("switch_with_partner", category="partner", formations=PAIRED_FORMATIONS)
async def switch_with_partner(choreo):
    await switch(choreo, 4)


@move("fast_switch_with_partner", category="partner", formations=PAIRED_FORMATIONS)
async def fast_switch_with_partner(choreo):
    await switch(choreo, 2)


@move("fast_sevens_with_partner", category="partner", formations=PAIRED_FORMATIONS,
      aliases=["fast_sevens"])
async def fast_sevens_with_partner(choreo):
    choreo.status.update("Fast Sevens")
    choreo.status.freeze()
    try:
        await switch(choreo)
        await switch(choreo)
    finally:
        choreo.status.unfreeze()


@move("advance_and_retire", category="partner", formations=ALL_FORMATIONS)
async def advance_and_retire(choreo):
    """Everyone steps in toward the middle of the set and back out."""
    choreo.status.update("Advance and Retire")
    distance = choreo.geometry.scaled(ADVANCE_DISTANCE)
    timelines = []
    for dancer in choreo.dancers.values():
        start_x, start_y = choreo.offset_to(dancer, choreo.home(dancer.current_named_position))
        ux, uy = toward_center(choreo.group_of(dancer.current_named_position))
        timelines.append(
            Timeline(target=dancer, beats=4)
            .add(translate=(start_x + ux * distance, start_y + uy * distance))
            .add(translate=(start_x, start_y))
        )
    timelines.append(choreo.ticker(8))
    await choreo.play(*timelines)


async def turn_partner_halfway(
    choreo,
    direction: Direction,
    end_facing_center: bool = False,
    snap_to_position: bool = True,
):
    """Partners swap places along a bowed path, turning half way round.

    With ``end_facing_center`` each dancer finishes on the home rotation of
    the slot they land in instead of turning exactly 180.
    """
    choreo.status.update(f"Turn Partner Halfway {direction.value}")
    timelines = []
    for dancer in choreo.dancers.values():
        partner_slot = choreo.relationship_target(dancer.current_named_position, Relationship.PARTNER)
        current = choreo.home(dancer.current_named_position).point
        partner = choreo.home(partner_slot).point
        if snap_to_position and dancer.current_named_position is dancer.role:
            ox, oy = 0.0, 0.0
        else:
            ox, oy = dancer.pose.x, dancer.pose.y
        waypoint = arc_waypoint(current, partner, direction)

        def arrived(dancer: DancerState = dancer, slot: Position = partner_slot) -> None:
            dancer.current_named_position = slot

        timelines.append(
            Timeline(target=dancer, beats=1, on_complete=arrived)
            .add(translate=(ox + waypoint.x - current.x, oy + waypoint.y - current.y))
            .add(translate=(ox + partner.x - current.x, oy + partner.y - current.y))
        )

        if end_facing_center:
            rotation = choreo.home(partner_slot).rotation
        else:
            rotation = dancer.pose.rotation + (180 if direction is Direction.RIGHT else -180)
        timelines.append(Timeline(target=dancer, beats=2).add(rotate=rotation))
    timelines.append(choreo.ticker(2))
    await choreo.play(*timelines)


@move("turn_partner_halfway_by_the_right", category="partner", formations=PAIRED_FORMATIONS)
async def turn_partner_halfway_by_the_right(choreo):
    await turn_partner_halfway(choreo, Direction.RIGHT)


@move("turn_partner_halfway_by_the_right_end_facing_center", category="partner",
      formations=PAIRED_FORMATIONS)
async def turn_partner_halfway_by_the_right_end_facing_center(choreo):
    await turn_partner_halfway(choreo, Direction.RIGHT, end_facing_center=True)


@move("turn_partner_halfway_by_the_left", category="partner", formations=PAIRED_FORMATIONS)
async def turn_partner_halfway_by_the_left(choreo):
    await turn_partner_halfway(choreo, Direction.LEFT)


@move("turn_partner_halfway_by_the_left_end_facing_center", category="partner",
      formations=PAIRED_FORMATIONS)
async def turn_partner_halfway_by_the_left_end_facing_center(choreo):
    await turn_partner_halfway(choreo, Direction.LEFT, end_facing_center=True)


async def swing(choreo, end_facing_center: bool = False):
    choreo.status.update("Swing Partner")
    choreo.status.freeze()
    try:
        for _ in range(3):
            await turn_partner_halfway(choreo, Direction.RIGHT)
        await turn_partner_halfway(choreo, Direction.RIGHT, end_facing_center)
    finally:
        choreo.status.unfreeze()


@move("swing_partner", category="partner", formations=PAIRED_FORMATIONS, aliases=["swing"])
async def swing_partner(choreo):
    await swing(choreo)


@move("swing_partner_end_facing_center", category="partner", formations=PAIRED_FORMATIONS)
async def swing_partner_end_facing_center(choreo):
    await swing(choreo, end_facing_center=True)
