"""Bearings and turn-direction solving.

Rotations are degrees with 0 facing screen-down, 90 screen-left, 180 up and
270 right. Within a move rotations accumulate without wrapping so the
animator always turns the intended physical way; the Choreographer folds
them back into [0, 360) once the move is over.
"""

from __future__ import annotations

import math

from .errors import ConfigurationError
from .types import DancerState, Direction, Formation, Point, Position
from .world import FormationGeometry


def normalize_rotation(rotation: float) -> float:
    """Reduce a rotation into [0, 360)."""
    return ((rotation % 360) + 360) % 360


def facing_direction(rotation: float) -> Direction:
    """Screen direction a dancer at this rotation is looking."""
    r = normalize_rotation(rotation)
    if 46 <= r < 135:
        return Direction.LEFT
    if 135 <= r < 225:
        return Direction.UP
    if 225 <= r < 315:
        return Direction.RIGHT
    return Direction.DOWN


def _check_turn(direction: Direction) -> None:
    if direction not in (Direction.RIGHT, Direction.LEFT):
        raise ConfigurationError(f"Unsupported turn direction: {direction}")


def heading(start: Point, target: Point) -> float:
    """Rotation in [0, 360) that faces from ``start`` toward ``target``."""
    return (math.atan2(target.y - start.y, target.x - start.x) * 180 / math.pi + 270) % 360


def shortest_delta(current: float, target: float) -> float:
    """Signed turn in [-180, 180] from ``current`` to ``target``."""
    diff = target - normalize_rotation(current)
    if diff > 180:
        diff -= 360
    if diff < -180:
        diff += 360
    return diff


def bearing(start: Point, target: Point, direction: Direction) -> float:
    """Like ``heading`` but biased for a turn in ``direction``.

    A result of exactly 0 becomes 360 when turning RIGHT, so that a
    clockwise walk keeps accumulating instead of snapping back.
    """
    _check_turn(direction)
    angle = heading(start, target)
    if angle == 0 and direction is Direction.RIGHT:
        angle = 360.0
    return angle


def angle_and_rotation(
    starting_rotation: float, target_angle: float, direction: Direction
) -> tuple[float, float]:
    """Unwrapped rotation reached by turning ``direction`` from ``starting_rotation``.

    Returns ``(adjusted_target_angle, new_rotation)``. RIGHT keeps the target
    at or above the current angle; LEFT keeps the current angle at or above
    the target.
    """
    _check_turn(direction)
    dancer_angle = starting_rotation

    if target_angle == 360 and -180 < dancer_angle < 0 and direction is Direction.RIGHT:
        target_angle = 0
    if target_angle == 360 and -360 < dancer_angle < 180 and direction is Direction.LEFT:
        target_angle = -360

    if target_angle < dancer_angle and direction is Direction.RIGHT:
        target_angle += 360
    if dancer_angle < target_angle and direction is Direction.LEFT:
        dancer_angle += 360

    difference = target_angle - dancer_angle
    if difference < 0 and direction is Direction.RIGHT:
        difference += 360

    return target_angle, starting_rotation + difference


def calculate_rotation(current: float, next_home_rotation: float, direction: Direction) -> float:
    """Turn toward a slot's home rotation, always the stated way round.

    >>> calculate_rotation(0, 90, Direction.RIGHT)
    -90
    """
    _check_turn(direction)
    difference = abs(next_home_rotation - current) % 360
    if difference > 180:
        difference = 360 - difference
    return current - difference if direction is Direction.RIGHT else current + difference


def choose_shortest(
    current: float, right: float, left: float, override: Direction | None = None
) -> float:
    """Pick the smaller turn; equal turns go RIGHT. ``override`` forces a side."""
    if override is Direction.RIGHT:
        return right
    if override is Direction.LEFT:
        return left
    diff_right = abs(right - current) % 360
    diff_left = abs(left - current) % 360
    return left if diff_left < diff_right else right


# -- dancer-aware helpers ----------------------------------------------------


def dancer_point(geometry: FormationGeometry, formation: Formation, dancer: DancerState) -> Point:
    """Live floor coordinate: home slot plus the dancer's offset."""
    home = geometry.get(formation, dancer.role)
    return Point(home.x + dancer.pose.x, home.y + dancer.pose.y)


def position_point(
    geometry: FormationGeometry, formation: Formation, dancer: DancerState, position: Position
) -> Point:
    if position is Position.OUT_OF_POSITION:
        return dancer_point(geometry, formation, dancer)
    return geometry.get(formation, position).point


def rotation_toward(
    geometry: FormationGeometry,
    formation: Formation,
    dancer: DancerState,
    starting_rotation: float,
    start: Position,
    target: Position,
    direction: Direction,
) -> tuple[float, float]:
    """``angle_and_rotation`` for the bearing between two named slots."""
    target_angle = bearing(
        position_point(geometry, formation, dancer, start),
        geometry.get(formation, target).point,
        direction,
    )
    return angle_and_rotation(starting_rotation, target_angle, direction)


def shortest_turn_rotation(
    geometry: FormationGeometry,
    formation: Formation,
    dancer: DancerState,
    target: Position,
    override: Direction | None = None,
) -> float:
    """Rotation that faces ``dancer`` toward ``target`` by the shorter way round."""
    current = dancer.pose.rotation
    _, right = rotation_toward(
        geometry, formation, dancer, current, dancer.current_named_position, target, Direction.RIGHT
    )
    _, left = rotation_toward(
        geometry, formation, dancer, current, dancer.current_named_position, target, Direction.LEFT
    )
    return choose_shortest(current, right, left, override)
