"""Quarter house: couples travel one place round, lead and follow taking turns."""

from __future__ import annotations

from ...animation import Timeline
from ...errors import ConfigurationError
from ...rotation import rotation_toward
from ...types import DancerState, Direction, Position
from ..base import PAIRED_FORMATIONS, move


async def quarter_house(choreo, direction: Direction):
    """Each couple moves one couple-place round the set.

    Going RIGHT the lead steps first, going LEFT the follow does. While
    stepping, the mover first turns toward where their partner is, then
    toward where the partner will end up.
    """
    choreo.status.update(f"Quarter House {direction.value}")
    timelines = []
    for group, members in choreo.groups().items():
        lead = next((d for d in members if choreo.is_lead(d.current_named_position)), None)
        follow = next((d for d in members if not choreo.is_lead(d.current_named_position)), None)
        if lead is None or follow is None:
            raise ConfigurationError(f"Group {group.value} has no couple to house")

        travel = Timeline(beats=2)
        arrows = {
            lead.role: Timeline(target=lead, beats=2),
            follow.role: Timeline(target=follow, beats=2),
        }

        leads_moving = direction is Direction.RIGHT
        for _ in range(2):
            mover, partner = (lead, follow) if leads_moving else (follow, lead)
            here = choreo.home(mover.current_named_position).point
            next_slot = choreo.next_of_same_role(direction, mover.current_named_position)
            partner_next = choreo.next_of_same_role(direction, partner.current_named_position)
            there = choreo.home(next_slot).point

            def arrived(dancer: DancerState = mover, slot: Position = next_slot) -> None:
                dancer.current_named_position = slot

            travel.add(
                translate=(mover.pose.x + there.x - here.x, mover.pose.y + there.y - here.y),
                target=mover,
                on_complete=arrived,
            )

            # the first mover looks from their landing spot, the second from where they stand
            first_mover = leads_moving == (direction is Direction.RIGHT)
            if first_mover:
                look_from, look_at = next_slot, partner.current_named_position
            else:
                look_from, look_at = mover.current_named_position, partner_next

            _, midway = rotation_toward(
                choreo.geometry, choreo.formation, mover, mover.pose.rotation,
                look_from, look_at, direction,
            )
            _, final = rotation_toward(
                choreo.geometry, choreo.formation, mover, midway,
                next_slot, partner_next, direction,
            )
            arrows[mover.role].add(rotate=midway).add(rotate=final)

            leads_moving = not leads_moving

        timelines.append(travel)
        timelines.extend(arrows.values())
    timelines.append(choreo.ticker(4))
    await choreo.play(*timelines)


@move("quarter_house_right", category="house", formations=PAIRED_FORMATIONS)
async def quarter_house_right(choreo):
    await quarter_house(choreo, Direction.RIGHT)


@move("quarter_house_left", category="house", formations=PAIRED_FORMATIONS)
async def quarter_house_left(choreo):
    await quarter_house(choreo, Direction.LEFT)
