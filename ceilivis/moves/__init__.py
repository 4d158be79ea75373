"""Move registry with auto-loading of builtins."""

from __future__ import annotations

import importlib
import pkgutil
from pathlib import Path

from .base import MoveFunc, MoveInfo, Moves, get_move, list_moves, move, move_info, register_move


def load_builtins():
    """Import all modules in moves/builtin/ to trigger @move registrations."""
    from . import builtin
    package_path = Path(builtin.__file__).parent
    for _, name, _ in pkgutil.iter_modules([str(package_path)]):
        importlib.import_module(f".builtin.{name}", package="ceilivis.moves")


def ensure_loaded():
    """Load all move modules (idempotent)."""
    load_builtins()


def resolve_moves(names: list[str]) -> tuple[Moves, list[str]]:
    """Look up move names; returns the found moves and the unknown names."""
    ensure_loaded()
    found: list[MoveFunc] = []
    unknown: list[str] = []
    for name in names:
        func = get_move(name)
        if func is None:
            unknown.append(name)
        else:
            found.append(func)
    return Moves(found), unknown


__all__ = [
    "MoveFunc", "MoveInfo", "Moves", "ensure_loaded", "get_move", "list_moves",
    "move", "move_info", "register_move", "resolve_moves",
]
