"""Error classes shared across the engine."""

from __future__ import annotations


class ConfigurationError(ValueError):
    """A closed enumeration reached a case it does not handle.

    Unsupported formations, relationships, directions and easings all land
    here. These abort the current operation; nothing falls back to a default.
    """
