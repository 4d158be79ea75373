"""Caption line with a rolling 1-8 beat counter."""

from __future__ import annotations

import asyncio
import logging
from typing import Callable

logger = logging.getLogger(__name__)


class StatusDisplay:
    """Text line shown above the floor, e.g. ``"Swing Partner - 3"``.

    ``freeze`` pins the caption so a composite move can keep its own name up
    while the moves it is built from call ``update``. Ticks still advance the
    counter while frozen.
    """

    def __init__(self, on_change: Callable[[str], None] | None = None):
        self.on_change = on_change
        self.count = 0
        self.text = ""
        self.frozen = False
        self.line = ""
        self._flash_handle: asyncio.TimerHandle | None = None

    def _render(self, line: str) -> None:
        self.line = line
        logger.debug(f"status: {line!r}")
        if self.on_change is not None:
            self.on_change(line)

    def freeze(self) -> None:
        self.frozen = True

    def unfreeze(self) -> None:
        self.frozen = False

    def update(self, text: str | None = None) -> None:
        if text and not self.frozen:
            self.text = text
        self._render(f"{self.text} - {self.count % 8 + 1}")

    def clear(self) -> None:
        self._render("")

    def tick(self) -> None:
        self.count += 1
        self.update()

    def reset_count(self) -> None:
        self.count = 0

    def flash(self, text: str, seconds: float) -> None:
        """Show ``text`` and clear the line again after ``seconds``.

        Needs a running event loop for the delayed clear.
        """
        self.update(text)
        if self._flash_handle is not None:
            self._flash_handle.cancel()
        loop = asyncio.get_running_loop()
        self._flash_handle = loop.call_later(seconds, self.clear)
