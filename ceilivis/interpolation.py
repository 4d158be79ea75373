"""Easing curves, arc waypoints, and keyframe sampling.

The animator records every step as a ``Sample`` (start/end beat, start/end
value, easing). Rendering replays those samples at a fixed beat resolution
to produce evenly spaced keyframes.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable

from .errors import ConfigurationError
from .types import Direction, FramePose, Formation, Keyframe, Point, Pose, Position
from .world import FormationGeometry, distance, midpoint

if TYPE_CHECKING:
    from .animation import TimelineAnimator


def _linear(t: float) -> float:
    return t


def _ease_in_out(t: float) -> float:
    """Smooth ease-in-out using cosine interpolation. t in [0,1] → [0,1]."""
    return (1 - math.cos(t * math.pi)) / 2


def _ease_out_quint(t: float) -> float:
    return 1 - (1 - t) ** 5


def _ease_out_elastic(t: float, period: float = 0.6) -> float:
    if t <= 0:
        return 0.0
    if t >= 1:
        return 1.0
    return 2 ** (-10 * t) * math.sin((t - period / 4) * (2 * math.pi) / period) + 1


EASINGS: dict[str, Callable[[float], float]] = {
    "linear": _linear,
    "ease_in_out": _ease_in_out,
    "ease_out_quint": _ease_out_quint,
    "ease_out_elastic": _ease_out_elastic,
}


def ease(name: str, t: float) -> float:
    try:
        curve = EASINGS[name]
    except KeyError:
        raise ConfigurationError(f"Unknown easing: {name}") from None
    return curve(min(1.0, max(0.0, t)))


def lerp(a: float, b: float, t: float) -> float:
    return a + (b - a) * t


def arc_waypoint(current: Point, target: Point, arc_direction: Direction) -> Point:
    """Waypoint that bows the straight path from ``current`` to ``target``.

    The waypoint sits off the midpoint, perpendicular to the path, at a
    quarter of the path length. RIGHT bows to one side and LEFT to the other.
    """
    halfway = midpoint(current, target)
    desired = distance(halfway, current) / 2
    denominator = distance(current, target)
    if denominator == 0:
        return halfway

    modifier = desired / denominator
    px = modifier * (current.y - target.y)
    py = modifier * (target.x - current.x)

    if arc_direction is Direction.RIGHT:
        return Point(halfway.x - px, halfway.y - py)
    if arc_direction is Direction.LEFT:
        return Point(halfway.x + px, halfway.y + py)
    raise ConfigurationError(f"Unsupported arc direction: {arc_direction}")


@dataclass
class Sample:
    """One recorded step on one channel of one dancer."""
    start: float
    end: float
    start_value: tuple[float, ...]
    end_value: tuple[float, ...]
    easing: str = "linear"

    def at(self, beat: float) -> tuple[float, ...]:
        if beat >= self.end or self.end <= self.start:
            return self.end_value
        t = ease(self.easing, (beat - self.start) / (self.end - self.start))
        return tuple(lerp(a, b, t) for a, b in zip(self.start_value, self.end_value))


def value_at(track: list[Sample], beat: float, default: tuple[float, ...]) -> tuple[float, ...]:
    """Channel value at ``beat``; the latest sample that has started wins."""
    value = default
    for sample in track:
        if sample.start > beat:
            break
        value = sample.at(beat)
    return value


def sample_keyframes(
    animator: TimelineAnimator,
    geometry: FormationGeometry,
    formation: Formation,
    initial: dict[Position, Pose],
    colors: dict[Position, str] | None = None,
    beats_per_frame: float = 0.25,
) -> list[Keyframe]:
    """Replay an animator's recording as evenly spaced keyframes."""
    total = animator.now
    n_frames = int(math.floor(total / beats_per_frame + 1e-9)) + 1
    beats = [i * beats_per_frame for i in range(n_frames)]
    if beats[-1] < total:
        beats.append(total)

    tracks = {
        role: {channel: sorted(animator.track(role, channel), key=lambda s: s.start)
               for channel in ("xy", "rotation", "scale")}
        for role in initial
    }
    annotations = sorted(animator.annotations, key=lambda a: a[0])

    keyframes: list[Keyframe] = []
    for beat in beats:
        dancers: dict[Position, FramePose] = {}
        for role, pose in initial.items():
            home = geometry.get(formation, role)
            x, y = value_at(tracks[role]["xy"], beat, (pose.x, pose.y))
            (rotation,) = value_at(tracks[role]["rotation"], beat, (pose.rotation,))
            (scale,) = value_at(tracks[role]["scale"], beat, (1.0,))
            dancers[role] = FramePose(
                x=home.x + x,
                y=home.y + y,
                facing=rotation % 360,
                scale=scale,
            )

        annotation = ""
        for at, text in annotations:
            if at > beat:
                break
            annotation = text

        keyframes.append(Keyframe(
            beat=round(beat, 6),
            dancers=dancers,
            annotation=annotation,
            colors=dict(colors or {}),
        ))
    return keyframes
