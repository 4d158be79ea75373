"""Text dump of the dancers for debugging and logs."""

from __future__ import annotations

from .rotation import normalize_rotation
from .types import DancerState


def _facing_arrow(rotation: float) -> str:
    """Closest screen arrow for a rotation (0 faces down the screen)."""
    snapped = round(normalize_rotation(rotation) / 45) * 45 % 360
    return {
        0: "v", 45: "\\", 90: "<", 135: "/",
        180: "^", 225: "\\", 270: ">", 315: "/",
    }.get(snapped, "?")


def render_state_compact(dancers: dict, title: str = "") -> str:
    """One line per dancer: home, current slot, offset, facing and flags."""
    lines = [f"{title}:"] if title else []
    for dancer in dancers.values():
        lines.append(_dancer_line(dancer))
    return "\n".join(lines)


def _dancer_line(dancer: DancerState) -> str:
    pose = dancer.pose
    flags = []
    if dancer.facing_partner:
        flags.append("facing-partner")
    if dancer.turned_around:
        flags.append("turned-around")
    flag_text = f" [{', '.join(flags)}]" if flags else ""
    return (
        f"  {dancer.role.value:18s} -> {dancer.current_named_position.value:18s} "
        f"({pose.x:+7.1f}, {pose.y:+7.1f}) {_facing_arrow(pose.rotation)} "
        f"rot={pose.rotation:.0f}°  {dancer.name} ({dancer.color}){flag_text}"
    )
