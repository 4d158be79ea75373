"""Anthropic SDK access for dance parsing."""

from __future__ import annotations

import logging
import os

import anthropic

from ..errors import ConfigurationError

logger = logging.getLogger(__name__)

_default_model = os.environ.get("CEILIVIS_MODEL", "claude-sonnet-4-20250514")


def get_client() -> anthropic.Anthropic:
    return anthropic.Anthropic()


def complete(
    system: str,
    user: str,
    model: str | None = None,
    max_tokens: int = 2048,
    temperature: float = 0.0,
) -> str:
    """Send one dance description and return the model's text answer.

    API failures surface as ``ConfigurationError`` so the CLI reports them
    like any other bad input.
    """
    model = model or _default_model
    logger.debug(f"Requesting completion from {model} ({len(user)} chars)")
    try:
        msg = get_client().messages.create(
            model=model,
            max_tokens=max_tokens,
            system=system,
            messages=[{"role": "user", "content": user}],
            temperature=temperature,
        )
    except anthropic.APIError as exc:
        logger.warning(f"Completion request to {model} failed: {exc}")
        raise ConfigurationError(f"Could not parse dance with {model}: {exc}") from exc

    text = "".join(block.text for block in msg.content if getattr(block, "type", None) == "text")
    if not text.strip():
        raise ConfigurationError(f"{model} returned an empty answer")
    return text
