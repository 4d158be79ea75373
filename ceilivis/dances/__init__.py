"""Dance composition and the built-in dance catalog."""

from .base import AnyDance, CeiliDance, Dance, FigureDance
from .catalog import DANCES, DanceEntry, get_dance

__all__ = ["AnyDance", "CeiliDance", "DANCES", "Dance", "DanceEntry", "FigureDance", "get_dance"]
