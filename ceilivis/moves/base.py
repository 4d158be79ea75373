"""Move protocol, registry, and decorator."""

from __future__ import annotations

import functools
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Protocol

from ..types import Formation

if TYPE_CHECKING:
    from ..choreographer import Choreographer

ALL_FORMATIONS = tuple(Formation)
PAIRED_FORMATIONS = (Formation.EIGHT_HAND_SQUARE, Formation.TWO_FACING_TWO)
SQUARE_ONLY = (Formation.EIGHT_HAND_SQUARE,)


class MoveFunc(Protocol):
    async def __call__(self, choreographer: Choreographer) -> Any: ...


@dataclass(frozen=True)
class MoveInfo:
    name: str
    category: str
    formations: tuple[Formation, ...]
    background: bool = False


# Global move registry
_registry: dict[str, MoveFunc] = {}


def move(
    name: str,
    category: str = "",
    formations: tuple[Formation, ...] = ALL_FORMATIONS,
    aliases: list[str] | None = None,
    background: bool = False,
):
    """Decorator to register a move.

    The registered function refuses to run in a formation it does not list.

    Usage:
        @move("quarter_circle_left", category="circle", formations=SQUARE_ONLY)
        async def quarter_circle_left(choreo): ...
    """
    def decorator(func):
        @functools.wraps(func)
        async def wrapper(choreographer: Choreographer, *args: Any, **kwargs: Any) -> Any:
            choreographer.require(*formations)
            return await func(choreographer, *args, **kwargs)

        wrapper.info = MoveInfo(name, category, formations, background)  # type: ignore[attr-defined]
        register_move(name, wrapper, aliases)
        return wrapper
    return decorator


def move_info(func: MoveFunc) -> MoveInfo | None:
    return getattr(func, "info", None)


def is_background(func: MoveFunc) -> bool:
    info = move_info(func)
    return info is not None and info.background


def get_move(name: str) -> MoveFunc | None:
    """Look up a move by name or alias."""
    return _registry.get(name)


def list_moves(category: str | None = None) -> list[str]:
    """Return all registered move names (excluding aliases)."""
    names = set()
    for key, func in _registry.items():
        info = move_info(func)
        if info is None:
            names.add(key)
        elif category is None or info.category == category:
            names.add(info.name)
    return sorted(names)


def register_move(name: str, func: MoveFunc, aliases: list[str] | None = None):
    """Programmatically register a move function."""
    _registry[name] = func
    for alias in (aliases or []):
        _registry[alias] = func


@dataclass
class Moves:
    """A strictly sequential run of moves.

    Each move goes through ``Choreographer.run_move``, so a failing move is
    reported and skipped while the rest of the sequence carries on.
    """
    moves: list[MoveFunc] = field(default_factory=list)

    async def perform(self, choreographer: Choreographer) -> None:
        for func in self.moves:
            await choreographer.run_move(func)

    def __len__(self) -> int:
        return len(self.moves)
