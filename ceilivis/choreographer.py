"""The Choreographer owns the dancers and runs moves and dances on them."""

from __future__ import annotations

import asyncio
import logging
import random
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Awaitable, Callable

from . import world
from .animation import Animator, Timeline, TimelineAnimator, join, ticker
from .config import Settings
from .errors import ConfigurationError
from .moves.base import MoveFunc, is_background, move_info
from .moves.builtin.special import go_home
from .rotation import normalize_rotation
from .status import StatusDisplay
from .types import DancerState, Direction, Formation, Group, HomePosition, Point, Pose, Position, Relationship, Role

if TYPE_CHECKING:
    from .dances.base import Dance

logger = logging.getLogger(__name__)

DANCER_NAMES = [
    "Aoife", "Brendan", "Ciara", "Declan", "Eimear", "Fionn", "Grainne", "Hugh",
    "Niamh", "Oisin", "Roisin", "Seamus", "Siobhan", "Tadhg", "Una", "Colm",
    "Maeve", "Padraig", "Orla", "Cormac", "Saoirse", "Ronan", "Deirdre", "Liam",
    "Emma", "Noah", "Grace", "Sam", "Katie", "Paul", "Amy", "Ed",
]

# Creation order matters: it is the order moves visit dancers in.
_CAST: dict[Formation, list[tuple[Position, str]]] = {
    Formation.EIGHT_HAND_SQUARE: [
        (Position.FIRST_TOP_LEAD, "red"),
        (Position.FIRST_TOP_FOLLOW, "blue"),
        (Position.SECOND_TOP_LEAD, "green"),
        (Position.SECOND_TOP_FOLLOW, "yellow"),
        (Position.FIRST_SIDE_LEAD, "purple"),
        (Position.FIRST_SIDE_FOLLOW, "orange"),
        (Position.SECOND_SIDE_LEAD, "pink"),
        (Position.SECOND_SIDE_FOLLOW, "brown"),
    ],
    Formation.TWO_FACING_TWO: [
        (Position.FIRST_TOP_LEAD, "red"),
        (Position.FIRST_TOP_FOLLOW, "blue"),
        (Position.SECOND_TOP_LEAD, "green"),
        (Position.SECOND_TOP_FOLLOW, "yellow"),
    ],
    Formation.THREE_FACING_THREE: [
        (Position.TOP_LEFT, "red"),
        (Position.TOP_CENTER, "blue"),
        (Position.TOP_RIGHT, "green"),
        (Position.BOTTOM_LEFT, "yellow"),
        (Position.BOTTOM_CENTER, "purple"),
        (Position.BOTTOM_RIGHT, "orange"),
    ],
}


@dataclass
class MoveFailure:
    move: str
    error: BaseException

    def __str__(self) -> str:
        return f"{self.move}: {str(self.error) or type(self.error).__name__}"


def move_name(func: Any) -> str:
    info = move_info(func)
    if info is not None:
        return info.name
    return getattr(func, "__name__", repr(func))


class Choreographer:
    """Runs moves against one formation's worth of dancers.

    Two states: idle, and mingling (a background move is wandering the
    dancers around). Requesting any other move while mingling signals the
    wander to stop, waits for its current stride to land, sends everyone
    home and only then runs the requested move.
    """

    def __init__(
        self,
        formation: Formation,
        geometry: world.FormationGeometry | None = None,
        status: StatusDisplay | None = None,
        animator: Animator | None = None,
        settings: Settings | None = None,
        rng: random.Random | None = None,
        on_cue: Callable[[str], None] | None = None,
    ):
        if formation not in _CAST:
            raise ConfigurationError("invalid formation")
        self.formation = formation
        self.settings = settings or Settings()
        self.geometry = geometry or world.FormationGeometry(
            self.settings.viewport_width, self.settings.viewport_height
        )
        self.status = status or StatusDisplay()
        self.animator = animator or TimelineAnimator(self.settings.beat_seconds)
        self.rng = rng or random.Random(self.settings.seed)
        self.on_cue = on_cue

        self.dancers: dict[Position, DancerState] = {}
        for role, color in _CAST[formation]:
            self._create_dancer(role, color)
        self.initial_poses = {role: d.pose.copy() for role, d in self.dancers.items()}

        self.move_set: list[MoveFunc] = []
        self.failures: list[MoveFailure] = []
        self.mingling = False
        self._stop: asyncio.Event | None = None
        self._background: asyncio.Task | None = None

    def _create_dancer(self, role: Position, color: str) -> None:
        home = self.geometry.get(self.formation, role)
        self.dancers[role] = DancerState(
            name=self.rng.choice(DANCER_NAMES),
            color=color,
            role=role,
            group=world.group_of(self.formation, role),
            current_named_position=role,
            pose=Pose(0.0, 0.0, home.rotation),
        )

    # -- running moves ------------------------------------------------------

    async def run_move(self, func: MoveFunc) -> None:
        """Run one move, handling the mingle state and any failure."""
        if is_background(func):
            if not self.mingling:
                self._start_background(func)
            return
        if self.mingling:
            await self.stop_mingling()
        await self._run_guarded(func)

    def _start_background(self, func: MoveFunc) -> None:
        logger.info(f"Starting background move {move_name(func)}")
        self.mingling = True
        self._stop = asyncio.Event()
        self._background = asyncio.ensure_future(self._run_guarded(func, self._stop))

    async def stop_mingling(self) -> None:
        """Stop the background move, wait for it to settle, then send everyone home."""
        if not self.mingling:
            return
        logger.info("Stopping mingle")
        self.mingling = False
        self.status.update("Stop Mingling")
        await self._halt_background()
        await self._run_guarded(go_home)

    async def _halt_background(self) -> None:
        if self._stop is not None:
            self._stop.set()
        task, self._background = self._background, None
        if task is not None:
            await task
        self._stop = None

    @property
    def background_running(self) -> bool:
        """True while the background move is still wandering.

        A background move that failed leaves ``mingling`` set, so the next
        move still sends everyone home first, but nothing is running.
        """
        return self._background is not None and not self._background.done()

    async def _run_guarded(self, func: MoveFunc, *args: Any) -> None:
        name = move_name(func)
        logger.info(f"Move: {name}")
        try:
            await func(self, *args)
        except Exception as exc:
            logger.exception(f"Move {name} failed")
            self.failures.append(MoveFailure(name, exc))
            self.status.flash(str(exc) or type(exc).__name__, self.settings.error_display_seconds)
        finally:
            self.normalize_rotations()

    async def run(self) -> None:
        """Run the queued ``move_set`` one move after another."""
        for func in self.move_set:
            await self.run_move(func)
        self.status.update("Done")

    async def perform(self, dance: Dance) -> None:
        """Start from home, perform ``dance``, then report completion."""
        if self.mingling:
            await self.stop_mingling()
        else:
            await self._run_guarded(go_home)
        logger.info(f"Dance start: {getattr(dance, 'name', dance)}")
        await dance.perform(self)
        logger.info(f"Dance finished: {getattr(dance, 'name', dance)}")
        self.status.update("Done")

    # -- animation helpers used by moves ---------------------------------------

    def schedule(self, timeline: Timeline) -> Awaitable[Any]:
        return self.animator.schedule(timeline)

    async def join(self, handles: list[Awaitable[Any] | None]) -> list[Any]:
        return await join(handles, self.settings.join_timeout_seconds)

    async def play(self, *timelines: Timeline | None) -> list[Any]:
        """Start every timeline at once and wait for all of them."""
        return await self.join([self.schedule(t) for t in timelines if t is not None])

    async def together(self, *moves: Awaitable[Any]) -> list[Any]:
        """Run several moves concurrently and wait for all of them."""
        return await self.join(list(moves))

    def ticker(self, n_beats: int) -> Timeline:
        return ticker(self.status, n_beats)

    def cue(self, name: str) -> None:
        logger.debug(f"cue: {name}")
        if self.on_cue is not None:
            self.on_cue(name)

    # -- state maintenance ------------------------------------------------------

    def normalize_rotations(self) -> None:
        for dancer in self.dancers.values():
            dancer.pose.rotation = normalize_rotation(dancer.pose.rotation)

    async def reset(self) -> None:
        """Stop any background move and put every dancer straight back home."""
        await self.close()
        for dancer in self.dancers.values():
            home = self.geometry.get(self.formation, dancer.role)
            dancer.current_named_position = dancer.role
            dancer.pose = Pose(0.0, 0.0, home.rotation)
            dancer.facing_partner = False
            dancer.turned_around = False

    async def close(self) -> None:
        """Stop the background move without recovering the formation."""
        self.mingling = False
        await self._halt_background()

    def adjust_positions(self, width: float, height: float) -> None:
        """Relayout for a new viewport; dancer offsets are kept as they are."""
        self.geometry.recalculate(width, height)
        logger.debug(f"Relayout for {width}x{height}, scale {self.geometry.scale_factor:.2f}")

    # -- formation queries ----------------------------------------------------

    @property
    def layout(self) -> tuple[Position, ...]:
        return world.layout(self.formation)

    def require(self, *formations: Formation) -> None:
        """Raise ``ConfigurationError`` unless the current formation is one of ``formations``."""
        if self.formation not in formations:
            raise ConfigurationError("invalid formation")

    def home(self, position: Position) -> HomePosition:
        return self.geometry.get(self.formation, position)

    def offset_to(self, dancer: DancerState, point: Point | HomePosition) -> tuple[float, float]:
        """Translate value that puts ``dancer`` on ``point``."""
        home = self.home(dancer.role)
        return (point.x - home.x, point.y - home.y)

    def group_of(self, position: Position) -> Group:
        return world.group_of(self.formation, position)

    def is_lead(self, position: Position) -> bool:
        return world.is_lead(self.formation, position)

    def next_of_same_role(self, direction: Direction, position: Position) -> Position:
        return world.next_of_same_role(self.formation, direction, position)

    def next_slot(self, direction: Direction, position: Position) -> Position:
        return world.next_slot(self.formation, direction, position)

    def relationship_target(self, position: Position, relationship: Relationship) -> Position:
        return world.relationship_target(self.formation, position, relationship)

    def dancers_in(self, role: Role) -> list[DancerState]:
        """Dancers currently standing in a lead or follow slot (or everyone)."""
        if role is Role.ALL:
            return list(self.dancers.values())
        want_lead = role is Role.LEAD
        return [
            d for d in self.dancers.values()
            if self.is_lead(d.current_named_position) == want_lead
        ]

    def groups(self) -> dict[Group, list[DancerState]]:
        """Dancers bucketed by the group of the slot they currently stand in."""
        result: dict[Group, list[DancerState]] = {}
        for dancer in self.dancers.values():
            result.setdefault(self.group_of(dancer.current_named_position), []).append(dancer)
        return result
