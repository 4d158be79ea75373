"""Dance variants: figure dances and flat ceili dances.

Both expose a single ``perform(choreographer)``; nothing else about them is
shared, so they are separate dataclasses behind a ``Dance`` protocol.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Callable, Protocol, Union

from ..errors import ConfigurationError
from ..moves.base import MoveFunc, Moves

if TYPE_CHECKING:
    from ..choreographer import Choreographer

logger = logging.getLogger(__name__)


class Dance(Protocol):
    name: str

    async def perform(self, choreographer: Choreographer) -> None: ...


def _no_steps(dance: FigureDance) -> list[Moves]:
    logger.warning(f"No steps defined for {dance.name}")
    return []


@dataclass
class FigureDance:
    """Named figures (and bodies) put in running order by ``steps``.

    Usage:
        FigureDance("Siege").with_figure("Lead Around", Moves([...])).with_steps(
            lambda d: [d.figures["Lead Around"]]
        )
    """
    name: str
    figures: dict[str, Moves] = field(default_factory=dict)
    bodies: dict[str, Moves] = field(default_factory=dict)
    steps: Callable[[FigureDance], list[Moves]] = _no_steps

    def with_figure(self, name: str, moves: Moves | list[MoveFunc]) -> FigureDance:
        self.figures[name] = _as_moves(moves)
        return self

    def with_body(self, name: str, moves: Moves | list[MoveFunc]) -> FigureDance:
        self.bodies[name] = _as_moves(moves)
        return self

    def with_steps(self, steps: Callable[[FigureDance], list[Moves]]) -> FigureDance:
        self.steps = steps
        return self

    async def perform(self, choreographer: Choreographer) -> None:
        for i, step in enumerate(self.steps(self)):
            logger.info(f"{self.name}: step {i + 1}")
            await step.perform(choreographer)
            choreographer.normalize_rotations()


@dataclass
class CeiliDance:
    """One flat sequence of moves."""
    name: str
    moves: Moves | None = None

    def with_moves(self, moves: Moves | list[MoveFunc]) -> CeiliDance:
        self.moves = _as_moves(moves)
        return self

    async def perform(self, choreographer: Choreographer) -> None:
        if self.moves is None:
            raise ConfigurationError(f"{self.name} has no moves")
        await self.moves.perform(choreographer)


AnyDance = Union[FigureDance, CeiliDance]


def _as_moves(moves: Moves | list[MoveFunc]) -> Moves:
    return moves if isinstance(moves, Moves) else Moves(list(moves))
