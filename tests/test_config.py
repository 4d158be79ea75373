"""Tests for settings loading."""

from __future__ import annotations

import json

import pytest
from pydantic import ValidationError

from ceilivis.config import Settings, load_settings


def test_defaults():
    settings = Settings()
    assert (settings.viewport_width, settings.viewport_height) == (1000, 800)
    assert settings.beat_seconds == 0.0
    assert settings.error_display_seconds == 2.0
    assert settings.join_timeout_seconds is None
    assert settings.seed is None


def test_load_settings(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"viewport_width": 600, "seed": 11, "beat_seconds": 0.5}))
    settings = load_settings(path)
    assert settings.viewport_width == 600
    assert settings.viewport_height == 800
    assert settings.seed == 11
    assert settings.beat_seconds == 0.5


def test_unknown_keys_rejected():
    with pytest.raises(ValidationError):
        Settings(viewport_depth=3)


def test_bounds_checked():
    with pytest.raises(ValidationError):
        Settings(viewport_width=0)
    with pytest.raises(ValidationError):
        Settings(beats_per_frame=0)
