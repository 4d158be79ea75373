"""Timed transitions for dancers.

Moves describe what should happen as ``Timeline`` objects (ordered
``Step``s) and hand them to an ``Animator``. The animator plays each
timeline as its own task, commits the step's pose to the dancer when the
step finishes and then fires the step's callback.

``TimelineAnimator`` keeps a virtual beat clock and records every step so a
whole run can be replayed as keyframes afterwards.
"""

from __future__ import annotations

import asyncio
import logging
from collections import defaultdict
from dataclasses import dataclass, field
from typing import Any, Awaitable, Callable, Iterable, Protocol

from .interpolation import Sample, ease
from .types import DancerState, Position

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


@dataclass
class Step:
    """One keyframe of a timeline. ``None`` fields are left untouched."""
    target: DancerState | None = None
    translate: tuple[float, float] | None = None  # offset from the dancer's home
    rotate: float | None = None
    scale: float | None = None
    beats: float | None = None
    easing: str | None = None
    on_begin: Callback | None = None
    on_complete: Callback | None = None


@dataclass
class Timeline:
    target: DancerState | None = None
    beats: float = 1.0  # default length of each step
    easing: str = "linear"
    on_complete: Callback | None = None
    steps: list[Step] = field(default_factory=list)

    def add(
        self,
        translate: tuple[float, float] | None = None,
        rotate: float | None = None,
        scale: float | None = None,
        *,
        target: DancerState | None = None,
        beats: float | None = None,
        easing: str | None = None,
        on_begin: Callback | None = None,
        on_complete: Callback | None = None,
    ) -> Timeline:
        self.steps.append(Step(
            target=target,
            translate=translate,
            rotate=rotate,
            scale=scale,
            beats=beats,
            easing=easing,
            on_begin=on_begin,
            on_complete=on_complete,
        ))
        return self

    def step_beats(self, step: Step) -> float:
        return self.beats if step.beats is None else step.beats

    @property
    def total_beats(self) -> float:
        return sum(self.step_beats(s) for s in self.steps)


class Animator(Protocol):
    def schedule(self, timeline: Timeline) -> Awaitable[Any]:
        """Start playing ``timeline``; the result completes when it has finished."""
        ...


class TimelineAnimator:
    """Plays timelines against a virtual beat clock.

    Args:
        beat_seconds: Wall-clock length of one beat. 0 plays as fast as the
            event loop allows while keeping the beat timestamps.
        record: Keep per-dancer samples and annotations for rendering.
    """

    def __init__(self, beat_seconds: float = 0.0, record: bool = True):
        self.beat_seconds = beat_seconds
        self.record = record
        self.now = 0.0
        self.annotations: list[tuple[float, str]] = []
        self._tracks: dict[tuple[Position, str], list[Sample]] = defaultdict(list)
        self._cursor: float | None = None

    def track(self, role: Position, channel: str) -> list[Sample]:
        return list(self._tracks.get((role, channel), []))

    def annotate(self, text: str) -> None:
        """Timestamp a status-line change at the current point in the run."""
        if not self.record:
            return
        at = self._cursor if self._cursor is not None else self.now
        self.annotations.append((at, text))

    def schedule(self, timeline: Timeline) -> asyncio.Task:
        logger.debug(
            f"scheduled {len(timeline.steps)} step(s), {timeline.total_beats} beat(s) at beat {self.now}"
        )
        return asyncio.ensure_future(self._play(timeline, self.now))

    async def _play(self, timeline: Timeline, start: float) -> None:
        cursor = start
        for step in timeline.steps:
            beats = timeline.step_beats(step)
            easing = step.easing or timeline.easing
            ease(easing, 0.0)
            target = step.target or timeline.target
            end = cursor + beats

            self._cursor = cursor
            if step.on_begin is not None:
                step.on_begin()
            self._cursor = None
            if target is not None and self.record:
                self._record(target, step, cursor, end, easing)

            if beats > 0 and self.beat_seconds > 0:
                await asyncio.sleep(beats * self.beat_seconds)
            else:
                await asyncio.sleep(0)

            if target is not None:
                self._commit(target, step)
            cursor = end
            self.now = max(self.now, cursor)
            self._cursor = cursor
            if step.on_complete is not None:
                step.on_complete()
            self._cursor = None

        self.now = max(self.now, cursor)
        if timeline.on_complete is not None:
            self._cursor = cursor
            timeline.on_complete()
            self._cursor = None

    def _record(self, dancer: DancerState, step: Step, start: float, end: float, easing: str) -> None:
        pose = dancer.pose
        if step.translate is not None:
            self._tracks[(dancer.role, "xy")].append(
                Sample(start, end, (pose.x, pose.y), tuple(step.translate), easing)
            )
        if step.rotate is not None:
            self._tracks[(dancer.role, "rotation")].append(
                Sample(start, end, (pose.rotation,), (step.rotate,), easing)
            )
        if step.scale is not None:
            previous = self._tracks[(dancer.role, "scale")]
            current = previous[-1].end_value if previous else (1.0,)
            previous.append(Sample(start, end, current, (step.scale,), easing))

    @staticmethod
    def _commit(dancer: DancerState, step: Step) -> None:
        if step.translate is not None:
            dancer.pose.x, dancer.pose.y = step.translate
        if step.rotate is not None:
            dancer.pose.rotation = step.rotate


async def join(handles: Iterable[Awaitable[Any] | None], timeout: float | None = None) -> list[Any]:
    """Wait for every handle, then re-raise the first failure.

    One failing handle does not stop the others; they all run to completion
    before anything is raised.
    """
    pending = [h for h in handles if h is not None]
    if not pending:
        return []
    gathered = asyncio.gather(*pending, return_exceptions=True)
    if timeout is not None:
        results = await asyncio.wait_for(gathered, timeout)
    else:
        results = await gathered
    for result in results:
        if isinstance(result, BaseException):
            raise result
    return results


def ticker(status: Any, n_beats: int) -> Timeline:
    """``n_beats`` one-beat steps, each advancing the status beat counter."""
    timeline = Timeline(beats=1.0)
    for _ in range(n_beats):
        timeline.add(on_complete=status.tick)
    return timeline
