"""Formation geometry and relationship resolution.

Layouts are cyclic: walking a layout in index order goes round the set,
and lead/follow alternate so that even indices are always leads.
"""

from __future__ import annotations

import math

from .errors import ConfigurationError
from .types import Direction, Formation, Group, HomePosition, Point, Position, Relationship

HEADER_OFFSET = 100
INNER_CIRCLE_OFFSET = 100

LAYOUTS: dict[Formation, tuple[Position, ...]] = {
    Formation.EIGHT_HAND_SQUARE: (
        Position.FIRST_TOP_LEAD,
        Position.FIRST_TOP_FOLLOW,
        Position.SECOND_SIDE_LEAD,
        Position.SECOND_SIDE_FOLLOW,
        Position.SECOND_TOP_LEAD,
        Position.SECOND_TOP_FOLLOW,
        Position.FIRST_SIDE_LEAD,
        Position.FIRST_SIDE_FOLLOW,
    ),
    Formation.TWO_FACING_TWO: (
        Position.FIRST_TOP_LEAD,
        Position.FIRST_TOP_FOLLOW,
        Position.SECOND_TOP_LEAD,
        Position.SECOND_TOP_FOLLOW,
    ),
    Formation.THREE_FACING_THREE: (
        Position.TOP_LEFT,
        Position.TOP_CENTER,
        Position.TOP_RIGHT,
        Position.BOTTOM_LEFT,
        Position.BOTTOM_CENTER,
        Position.BOTTOM_RIGHT,
    ),
}

GROUPS: dict[Formation, dict[Position, Group]] = {
    Formation.EIGHT_HAND_SQUARE: {
        Position.FIRST_TOP_LEAD: Group.TOP,
        Position.FIRST_TOP_FOLLOW: Group.TOP,
        Position.SECOND_TOP_LEAD: Group.BOTTOM,
        Position.SECOND_TOP_FOLLOW: Group.BOTTOM,
        Position.FIRST_SIDE_LEAD: Group.FIRST_SIDE,
        Position.FIRST_SIDE_FOLLOW: Group.FIRST_SIDE,
        Position.SECOND_SIDE_LEAD: Group.SECOND_SIDE,
        Position.SECOND_SIDE_FOLLOW: Group.SECOND_SIDE,
    },
    Formation.TWO_FACING_TWO: {
        Position.FIRST_TOP_LEAD: Group.TOP,
        Position.FIRST_TOP_FOLLOW: Group.TOP,
        Position.SECOND_TOP_LEAD: Group.BOTTOM,
        Position.SECOND_TOP_FOLLOW: Group.BOTTOM,
    },
    Formation.THREE_FACING_THREE: {
        Position.TOP_LEFT: Group.TOP,
        Position.TOP_CENTER: Group.TOP,
        Position.TOP_RIGHT: Group.TOP,
        Position.BOTTOM_LEFT: Group.BOTTOM,
        Position.BOTTOM_CENTER: Group.BOTTOM,
        Position.BOTTOM_RIGHT: Group.BOTTOM,
    },
}

# (dx, dy, home rotation) from the formation center at scale 1.0
_OFFSETS: dict[Formation, dict[Position, tuple[float, float, float]]] = {
    Formation.EIGHT_HAND_SQUARE: {
        Position.FIRST_TOP_FOLLOW: (-125, -250, 0),
        Position.FIRST_TOP_LEAD: (25, -250, 0),
        Position.SECOND_TOP_FOLLOW: (25, 150, 180),
        Position.SECOND_TOP_LEAD: (-125, 150, 180),
        Position.FIRST_SIDE_LEAD: (150, 25, 90),
        Position.FIRST_SIDE_FOLLOW: (150, -125, 90),
        Position.SECOND_SIDE_LEAD: (-250, -125, 270),
        Position.SECOND_SIDE_FOLLOW: (-250, 25, 270),
    },
    Formation.TWO_FACING_TWO: {
        Position.FIRST_TOP_FOLLOW: (-125, -150, 0),
        Position.FIRST_TOP_LEAD: (25, -150, 0),
        Position.SECOND_TOP_FOLLOW: (25, 50, 180),
        Position.SECOND_TOP_LEAD: (-125, 50, 180),
    },
    Formation.THREE_FACING_THREE: {
        Position.TOP_LEFT: (-275, -150, 0),
        Position.TOP_CENTER: (-50, -150, 0),
        Position.TOP_RIGHT: (175, -150, 0),
        Position.BOTTOM_LEFT: (-275, 50, 180),
        Position.BOTTOM_CENTER: (-50, 50, 180),
        Position.BOTTOM_RIGHT: (175, 50, 180),
    },
}

# Unit vector pointing from each group's slots toward the middle of the set
_TOWARD_CENTER: dict[Group, tuple[float, float]] = {
    Group.TOP: (0.0, 1.0),
    Group.BOTTOM: (0.0, -1.0),
    Group.FIRST_SIDE: (-1.0, 0.0),
    Group.SECOND_SIDE: (1.0, 0.0),
}

# Lead-side index offsets; a follow uses the negation
_RELATIONSHIP_OFFSETS: dict[Formation, dict[Relationship, int]] = {
    Formation.EIGHT_HAND_SQUARE: {
        Relationship.PARTNER: 1,
        Relationship.CORNER: -1,
        Relationship.OPPOSITE: -3,
        Relationship.CONTRARY: -3,
    },
    Formation.TWO_FACING_TWO: {
        Relationship.PARTNER: 1,
        Relationship.CORNER: -1,
        Relationship.OPPOSITE: -1,
    },
    Formation.THREE_FACING_THREE: {
        Relationship.OPPOSITE: -3,
    },
}


def layout(formation: Formation) -> tuple[Position, ...]:
    """Ordered, cyclic slot list for a formation."""
    try:
        return LAYOUTS[formation]
    except KeyError:
        raise ConfigurationError(f"Unsupported formation: {formation}") from None


def group_of(formation: Formation, position: Position) -> Group:
    try:
        return GROUPS[formation][position]
    except KeyError:
        raise ConfigurationError(f"{position.value} is not part of {formation.value}") from None


def index_of(formation: Formation, position: Position) -> int:
    slots = layout(formation)
    try:
        return slots.index(position)
    except ValueError:
        raise ConfigurationError(f"{position.value} is not part of {formation.value}") from None


def toward_center(group: Group) -> tuple[float, float]:
    return _TOWARD_CENTER[group]


class FormationGeometry:
    """Absolute floor coordinates for every formation at the current viewport size.

    Recalculating only changes where home slots are; dancers keep their
    offsets relative to home, so nothing about their state needs re-deriving.
    """

    def __init__(self, width: float = 1000, height: float = 800):
        self.width = width
        self.height = height
        self.center = Point(0.0, 0.0)
        self.scale_factor = 1.0
        self._table: dict[Formation, dict[Position, HomePosition]] = {}
        self.recalculate(width, height)

    def recalculate(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self.center = Point(width / 2, height / 2 + HEADER_OFFSET)
        self.scale_factor = max(0.25, min(1.0, min(width / 600, (height - HEADER_OFFSET) / 700)))

        sf = self.scale_factor
        cx, cy = self.center.x, self.center.y
        self._table = {
            formation: {
                position: HomePosition(cx + dx * sf, cy + dy * sf, rotation)
                for position, (dx, dy, rotation) in offsets.items()
            }
            for formation, offsets in _OFFSETS.items()
        }

    def get(self, formation: Formation, position: Position) -> HomePosition:
        try:
            return self._table[formation][position]
        except KeyError:
            raise ConfigurationError(
                f"No home coordinate for {position.value} in {formation.value}"
            ) from None

    def positions(self, formation: Formation) -> dict[Position, HomePosition]:
        return {p: self.get(formation, p) for p in layout(formation)}

    def scaled(self, distance: float) -> float:
        return distance * self.scale_factor

    def inner_circle(self, formation: Formation, position: Position) -> Point:
        """Home coordinate pulled toward the middle of the set."""
        home = self.get(formation, position)
        ux, uy = toward_center(group_of(formation, position))
        offset = self.scaled(INNER_CIRCLE_OFFSET)
        return Point(home.x + ux * offset, home.y + uy * offset)

    def safe_zone(self) -> tuple[float, float, float, float]:
        """(left, top, right, bottom) bounds that mingling dancers stay inside."""
        return (50.0, HEADER_OFFSET + 200.0, self.width - 50.0, self.height - 100.0)


def _step(direction: Direction, amount: int) -> int:
    if direction is Direction.RIGHT:
        return amount
    if direction is Direction.LEFT:
        return -amount
    raise ConfigurationError(f"Unsupported direction: {direction}")


def next_of_same_role(formation: Formation, direction: Direction, position: Position) -> Position:
    """Next slot of the same role going round the set (skips the partner slot)."""
    slots = layout(formation)
    return slots[(index_of(formation, position) + _step(direction, 2)) % len(slots)]


def next_slot(formation: Formation, direction: Direction, position: Position) -> Position:
    """Adjacent slot going round the set."""
    slots = layout(formation)
    return slots[(index_of(formation, position) + _step(direction, 1)) % len(slots)]


def is_lead(formation: Formation, position: Position) -> bool:
    return index_of(formation, position) % 2 == 0


def relationship_target(
    formation: Formation, position: Position, relationship: Relationship
) -> Position:
    """Resolve e.g. "my corner" to a slot name.

    >>> relationship_target(Formation.EIGHT_HAND_SQUARE, Position.FIRST_TOP_LEAD, Relationship.PARTNER)
    <Position.FIRST_TOP_FOLLOW: 'first-top-follow'>
    """
    slots = layout(formation)
    try:
        offset = _RELATIONSHIP_OFFSETS[formation][relationship]
    except KeyError:
        raise ConfigurationError(
            f"Unsupported relationship {relationship.value} for {formation.value}"
        ) from None
    index = index_of(formation, position)
    if index % 2 != 0:
        offset = -offset
    return slots[(index + offset) % len(slots)]


def distance(a: Point, b: Point) -> float:
    return math.hypot(a.x - b.x, a.y - b.y)


def midpoint(a: Point, b: Point) -> Point:
    return Point((a.x + b.x) / 2, (a.y + b.y) / 2)
