"""Ceili dance simulator: dancers, moves, dances and a recorded animation run."""

from .choreographer import Choreographer
from .config import Settings
from .errors import ConfigurationError
from .types import Direction, Formation, Position, Relationship, Role

__all__ = [
    "Choreographer", "ConfigurationError", "Direction", "Formation", "Position",
    "Relationship", "Role", "Settings",
]
