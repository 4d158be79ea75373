"""Runtime settings for the simulator."""

from __future__ import annotations

import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

logger = logging.getLogger(__name__)


class Settings(BaseModel):
    """Engine and pipeline settings.

    Example:
        >>> settings = Settings(seed=7)
        >>> settings.viewport_width
        1000
    """

    model_config = ConfigDict(extra="forbid")

    viewport_width: int = Field(default=1000, gt=0, description="Dance floor width in px")
    viewport_height: int = Field(default=800, gt=0, description="Dance floor height in px")

    beat_seconds: float = Field(
        default=0.0, ge=0.0, description="Wall-clock seconds per beat (0 = as fast as possible)"
    )

    error_display_seconds: float = Field(
        default=2.0, ge=0.0, description="How long a failed move's message stays on the status line"
    )

    join_timeout_seconds: float | None = Field(
        default=None, gt=0.0, description="Upper bound on any single join (None = wait forever)"
    )

    mingle_max_distance: float = Field(
        default=200.0, gt=0.0, description="Longest single mingle stride in px"
    )

    beats_per_frame: float = Field(
        default=0.25, gt=0.0, description="Keyframe sampling resolution for rendering"
    )

    seed: int | None = Field(default=None, description="Seed for names, scrambles and mingling")


def load_settings(path: str | Path) -> Settings:
    """Read settings from a JSON file."""
    path = Path(path)
    settings = Settings.model_validate_json(path.read_text())
    logger.debug(f"Loaded settings from {path}")
    return settings
