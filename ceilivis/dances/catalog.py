"""Dances available by display name."""

from __future__ import annotations

from dataclasses import dataclass

from ..moves.builtin.circle import (
    follows_fast_inner_circle_left,
    follows_inner_quarter_circle_left_end_home,
    follows_inner_quarter_circle_right,
    leads_fast_inner_circle_left,
    quarter_circle_left,
    quarter_circle_right,
)
from ..moves.builtin.partner import fast_switch_with_partner, switch_with_partner
from ..moves.builtin.special import clap_twice
from ..moves.builtin.steps import (
    follows_two_threes_to_the_right_while_turning_around,
    two_threes_to_the_left,
    two_threes_to_the_right,
)
from ..types import Formation
from .base import AnyDance, CeiliDance, FigureDance


@dataclass(frozen=True)
class DanceEntry:
    name: str
    formation: Formation
    executor: AnyDance


three_tunes = (
    FigureDance("The Three Tunes")
    .with_figure("Right Right/Left", [
        quarter_circle_left,
        two_threes_to_the_left,
        quarter_circle_right,
        two_threes_to_the_right,
        quarter_circle_right,
        two_threes_to_the_right,
        quarter_circle_left,
        two_threes_to_the_left,
    ])
    .with_figure("Rings", [
        follows_fast_inner_circle_left,
        clap_twice,
        fast_switch_with_partner,
        switch_with_partner,
        leads_fast_inner_circle_left,
        clap_twice,
        fast_switch_with_partner,
        switch_with_partner,
    ])
    .with_steps(lambda dance: [dance.figures["Right Right/Left"], dance.figures["Rings"]])
)

bonfire_dance = CeiliDance("Bonfire Dance").with_moves([
    follows_inner_quarter_circle_right,
    follows_two_threes_to_the_right_while_turning_around,
    follows_inner_quarter_circle_left_end_home,
])

DANCES: dict[str, DanceEntry] = {
    entry.name: entry
    for entry in (
        DanceEntry("The Three Tunes", Formation.EIGHT_HAND_SQUARE, three_tunes),
        DanceEntry("Bonfire Dance", Formation.EIGHT_HAND_SQUARE, bonfire_dance),
    )
}


def get_dance(name: str) -> DanceEntry | None:
    """Look up a dance by display name, ignoring case."""
    if name in DANCES:
        return DANCES[name]
    lowered = name.lower().strip()
    for key, entry in DANCES.items():
        if key.lower() == lowered:
            return entry
    return None
