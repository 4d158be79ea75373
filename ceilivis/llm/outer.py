"""Parses dance text into a formation and a list of move names."""

from __future__ import annotations

import json
import logging
import re
from typing import Any

from ..errors import ConfigurationError
from ..types import Formation
from .client import complete
from .prompts import outer_system

logger = logging.getLogger(__name__)

_FORMATION_HEADER = re.compile(r"\[formation:\s*([\w-]+)\]", re.IGNORECASE)


def parse_formation(name: str) -> Formation:
    """Accept 'EIGHT_HAND_SQUARE', 'eight-hand-square' and similar spellings."""
    key = name.strip().upper().replace("-", "_").replace(" ", "_")
    try:
        return Formation[key]
    except KeyError:
        raise ConfigurationError(f"Unknown formation: {name}") from None


def dance_from_dict(data: dict[str, Any], default: Formation = Formation.EIGHT_HAND_SQUARE) -> tuple[Formation, list[str]]:
    """Validate a ``{"formation": ..., "moves": [...]}`` structure."""
    if not isinstance(data, dict) or not isinstance(data.get("moves"), list):
        raise ConfigurationError("Dance definition needs a 'moves' list")
    formation = parse_formation(data["formation"]) if data.get("formation") else default
    moves = [str(m).strip() for m in data["moves"] if str(m).strip()]
    return formation, moves


def _strip_fences(text: str) -> str:
    text = text.strip()
    if text.startswith("```"):
        lines = [line for line in text.split("\n") if not line.strip().startswith("```")]
        text = "\n".join(lines)
    return text


def parse_dance(text: str, model: str | None = None) -> tuple[Formation, list[str]]:
    """Parse a dance description into a formation and list of move names.

    A ``[formation: NAME]`` header in the text wins over whatever the
    model answers.
    """
    header = _FORMATION_HEADER.search(text)
    forced = parse_formation(header.group(1)) if header else None

    response = complete(system=outer_system(), user=text, model=model)
    try:
        data = json.loads(_strip_fences(response))
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Model response was not JSON: {exc}") from exc

    formation, moves = dance_from_dict(data)
    if forced is not None:
        formation = forced
    logger.info(f"Parsed {len(moves)} move(s) for {formation.value}")
    return formation, moves
