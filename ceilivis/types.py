"""Core data types for the ceili dance simulator."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class Formation(Enum):
    EIGHT_HAND_SQUARE = "EIGHT_HAND_SQUARE"
    TWO_FACING_TWO = "TWO_FACING_TWO"
    THREE_FACING_THREE = "THREE_FACING_THREE"


class Position(Enum):
    FIRST_TOP_LEAD = "first-top-lead"
    FIRST_TOP_FOLLOW = "first-top-follow"
    SECOND_TOP_LEAD = "second-top-lead"
    SECOND_TOP_FOLLOW = "second-top-follow"
    FIRST_SIDE_LEAD = "first-side-lead"
    FIRST_SIDE_FOLLOW = "first-side-follow"
    SECOND_SIDE_LEAD = "second-side-lead"
    SECOND_SIDE_FOLLOW = "second-side-follow"
    TOP_LEFT = "top-left"
    TOP_CENTER = "top-center"
    TOP_RIGHT = "top-right"
    BOTTOM_LEFT = "bottom-left"
    BOTTOM_CENTER = "bottom-center"
    BOTTOM_RIGHT = "bottom-right"
    OUT_OF_POSITION = "out-of-position"


class Group(Enum):
    TOP = "TOP"
    BOTTOM = "BOTTOM"
    FIRST_SIDE = "1st SIDE"
    SECOND_SIDE = "2nd SIDE"


class Relationship(Enum):
    PARTNER = "PARTNER"
    CORNER = "CORNER"
    OPPOSITE = "OPPOSITE"
    CONTRARY = "CONTRARY"


class Direction(Enum):
    RIGHT = "RIGHT"
    LEFT = "LEFT"
    UP = "UP"
    DOWN = "DOWN"

    @property
    def mirrored(self) -> Direction:
        return {
            Direction.RIGHT: Direction.LEFT,
            Direction.LEFT: Direction.RIGHT,
            Direction.UP: Direction.DOWN,
            Direction.DOWN: Direction.UP,
        }[self]


class Role(Enum):
    ALL = "ALL"
    LEAD = "LEAD"
    FOLLOW = "FOLLOW"


@dataclass(frozen=True)
class Point:
    x: float
    y: float


@dataclass(frozen=True)
class HomePosition:
    """Absolute floor coordinate of a named slot plus its home rotation."""
    x: float
    y: float
    rotation: float

    @property
    def point(self) -> Point:
        return Point(self.x, self.y)


@dataclass
class Pose:
    x: float = 0.0  # offset from the dancer's home coordinate
    y: float = 0.0
    rotation: float = 0.0  # degrees, 0=screen-down, 90=left, 180=up, 270=right

    def copy(self) -> Pose:
        return Pose(self.x, self.y, self.rotation)


@dataclass
class DancerState:
    name: str
    color: str
    role: Position  # home slot, fixed for the dancer's lifetime
    group: Group
    current_named_position: Position
    pose: Pose
    facing_partner: bool = False
    turned_around: bool = False

    @property
    def out_of_position(self) -> bool:
        return self.current_named_position is Position.OUT_OF_POSITION


@dataclass
class FramePose:
    x: float
    y: float
    facing: float
    scale: float = 1.0


@dataclass
class Keyframe:
    beat: float
    dancers: dict[Position, FramePose]
    annotation: str = ""
    colors: dict[Position, str] = field(default_factory=dict)
