"""Stepping in place: sidesteps and two-threes."""

from __future__ import annotations

from ...animation import Timeline
from ...rotation import facing_direction
from ...types import Direction, Role
from ..base import PAIRED_FORMATIONS, move
from .facing import face_partner, turn_around

SIDESTEP_DISTANCE = 100
BUMP = 10


def _sideways(facing: Direction, step: Direction, amount: float) -> tuple[float, float]:
    """(dx, dy) for a step to the dancer's own right or left."""
    sign = 1 if step is Direction.RIGHT else -1
    if facing is Direction.LEFT:
        return 0.0, -sign * amount
    if facing is Direction.RIGHT:
        return 0.0, sign * amount
    if facing is Direction.UP:
        return sign * amount, 0.0
    return -sign * amount, 0.0


async def sidestep(choreo, direction: Direction):
    choreo.status.update(f"Sidestep {direction.value}")
    distance = choreo.geometry.scaled(SIDESTEP_DISTANCE)
    timelines = []
    for dancer in choreo.dancers.values():
        x, y = dancer.pose.x, dancer.pose.y
        dx, dy = _sideways(facing_direction(dancer.pose.rotation), direction, distance)
        timelines.append(
            Timeline(target=dancer, beats=4)
            .add(translate=(x + dx, y + dy))
            .add(translate=(x, y))
        )
    timelines.append(choreo.ticker(8))
    await choreo.play(*timelines)


@move("sidestep_right", category="steps")
async def sidestep_right(choreo):
    await sidestep(choreo, Direction.RIGHT)


@move("sidestep_left", category="steps")
async def sidestep_left(choreo):
    await sidestep(choreo, Direction.LEFT)


async def two_threes(choreo, direction: Direction, who: Role = Role.ALL):
    """A quick bump to one side, back, to the other side, back.

    ``who`` picks dancers by their home role, not the slot they stand in.
    """
    choreo.status.update("Two Threes")
    bump = choreo.geometry.scaled(BUMP)
    timelines = []
    for dancer in choreo.dancers.values():
        if who is Role.LEAD and not choreo.is_lead(dancer.role):
            continue
        if who is Role.FOLLOW and choreo.is_lead(dancer.role):
            continue

        x, y = dancer.pose.x, dancer.pose.y
        dx, dy = _sideways(facing_direction(dancer.pose.rotation), Direction.RIGHT, bump)
        first, second = (x + dx, y + dy), (x - dx, y - dy)
        if direction is Direction.LEFT:
            first, second = second, first
        timelines.append(
            Timeline(target=dancer, beats=1, easing="ease_out_quint")
            .add(translate=first)
            .add(translate=(x, y))
            .add(translate=second)
            .add(translate=(x, y))
        )
    timelines.append(choreo.ticker(4))
    await choreo.play(*timelines)


@move("two_threes_to_the_right", category="steps")
async def two_threes_to_the_right(choreo):
    await two_threes(choreo, Direction.RIGHT)


@move("two_threes_to_the_left", category="steps")
async def two_threes_to_the_left(choreo):
    await two_threes(choreo, Direction.LEFT)


@move("leads_two_threes_to_the_right", category="steps")
async def leads_two_threes_to_the_right(choreo):
    await two_threes(choreo, Direction.RIGHT, Role.LEAD)


@move("leads_two_threes_to_the_left", category="steps")
async def leads_two_threes_to_the_left(choreo):
    await two_threes(choreo, Direction.LEFT, Role.LEAD)


@move("follows_two_threes_to_the_right", category="steps")
async def follows_two_threes_to_the_right(choreo):
    await two_threes(choreo, Direction.RIGHT, Role.FOLLOW)


@move("follows_two_threes_to_the_left", category="steps")
async def follows_two_threes_to_the_left(choreo):
    await two_threes(choreo, Direction.LEFT, Role.FOLLOW)


@move("leads_two_threes_to_the_right_while_turning_around", category="steps")
async def leads_two_threes_to_the_right_while_turning_around(choreo):
    await choreo.together(two_threes(choreo, Direction.RIGHT, Role.LEAD), turn_around(choreo, Role.LEAD))


@move("leads_two_threes_to_the_left_while_turning_around", category="steps")
async def leads_two_threes_to_the_left_while_turning_around(choreo):
    await choreo.together(two_threes(choreo, Direction.LEFT, Role.LEAD), turn_around(choreo, Role.LEAD))


@move("follows_two_threes_to_the_right_while_turning_around", category="steps")
async def follows_two_threes_to_the_right_while_turning_around(choreo):
    await choreo.together(
        two_threes(choreo, Direction.RIGHT, Role.FOLLOW), turn_around(choreo, Role.FOLLOW)
    )


@move("follows_two_threes_to_the_left_while_turning_around", category="steps")
async def follows_two_threes_to_the_left_while_turning_around(choreo):
    await choreo.together(
        two_threes(choreo, Direction.LEFT, Role.FOLLOW), turn_around(choreo, Role.FOLLOW)
    )


@move("two_threes_to_the_right_end_facing_partner", category="steps", formations=PAIRED_FORMATIONS)
async def two_threes_to_the_right_end_facing_partner(choreo):
    await choreo.together(two_threes(choreo, Direction.RIGHT), face_partner(choreo))


@move("two_threes_to_the_left_end_facing_partner", category="steps", formations=PAIRED_FORMATIONS)
async def two_threes_to_the_left_end_facing_partner(choreo):
    await choreo.together(two_threes(choreo, Direction.LEFT), face_partner(choreo))

