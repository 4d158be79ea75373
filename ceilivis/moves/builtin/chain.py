"""Full chain: leads and follows weave round the set in opposite directions."""

from __future__ import annotations

from ...animation import Timeline
from ...interpolation import arc_waypoint
from ...rotation import heading, shortest_delta
from ...types import DancerState, Direction, Position
from ..base import ALL_FORMATIONS, move


@move("full_chain", category="circle", formations=ALL_FORMATIONS, aliases=["grand_chain"])
async def full_chain(choreo):
    choreo.status.update("Full Chain")
    choreo.status.freeze()
    try:
        for step in range(len(choreo.layout)):
            await _chain_step(choreo, Direction.RIGHT if step % 2 == 0 else Direction.LEFT)
    finally:
        choreo.status.unfreeze()


async def _chain_step(choreo, arc_direction: Direction):
    timelines = []
    for dancer in choreo.dancers.values():
        advance = Direction.RIGHT if choreo.is_lead(dancer.role) else Direction.LEFT
        next_slot = choreo.next_slot(advance, dancer.current_named_position)
        current = choreo.home(dancer.current_named_position).point
        target = choreo.home(next_slot).point
        waypoint = arc_waypoint(current, target, arc_direction)

        def arrived(dancer: DancerState = dancer, slot: Position = next_slot) -> None:
            dancer.current_named_position = slot

        timelines.append(
            Timeline(target=dancer, beats=1, on_complete=arrived)
            .add(translate=(dancer.pose.x + waypoint.x - current.x,
                            dancer.pose.y + waypoint.y - current.y))
            .add(translate=choreo.offset_to(dancer, target))
        )

        # face whoever comes next
        after = choreo.home(choreo.next_slot(advance, next_slot)).point
        rotation = dancer.pose.rotation + shortest_delta(dancer.pose.rotation, heading(target, after))
        timelines.append(Timeline(target=dancer, beats=2).add(rotate=rotation))
    timelines.append(choreo.ticker(2))
    await choreo.play(*timelines)
