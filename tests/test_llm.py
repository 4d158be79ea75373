"""Tests for natural-language dance parsing with a stubbed model."""

from __future__ import annotations

import json
from types import SimpleNamespace

import pytest

from ceilivis.errors import ConfigurationError
from ceilivis.llm import client, outer
from ceilivis.llm.outer import dance_from_dict, parse_dance, parse_formation
from ceilivis.llm.prompts import move_catalog, outer_system
from ceilivis.types import Formation


@pytest.fixture
def model_reply(monkeypatch):
    """Replace the Anthropic call with a canned reply."""
    calls = []

    def install(reply: str):
        def fake_complete(system, user, model=None, **kwargs):
            calls.append({"system": system, "user": user, "model": model})
            return reply

        monkeypatch.setattr(outer, "complete", fake_complete)
        return calls

    return install


@pytest.mark.parametrize("name", ["EIGHT_HAND_SQUARE", "eight-hand-square", "Eight Hand Square"])
def test_parse_formation_spellings(name):
    assert parse_formation(name) is Formation.EIGHT_HAND_SQUARE


def test_parse_formation_unknown():
    with pytest.raises(ConfigurationError):
        parse_formation("longways")


def test_dance_from_dict():
    formation, moves = dance_from_dict({"formation": "TWO_FACING_TWO", "moves": ["swing", " ", "go_home "]})
    assert formation is Formation.TWO_FACING_TWO
    assert moves == ["swing", "go_home"]


def test_dance_from_dict_defaults_and_validation():
    formation, _ = dance_from_dict({"moves": []}, default=Formation.THREE_FACING_THREE)
    assert formation is Formation.THREE_FACING_THREE
    with pytest.raises(ConfigurationError):
        dance_from_dict({"formation": "EIGHT_HAND_SQUARE"})


def test_parse_dance_strips_fences(model_reply):
    reply = "```json\n" + json.dumps({"formation": "EIGHT_HAND_SQUARE", "moves": ["quarter_circle_left"]}) + "\n```"
    calls = model_reply(reply)

    formation, moves = parse_dance("Circle to the left for a quarter.", model="test-model")

    assert formation is Formation.EIGHT_HAND_SQUARE
    assert moves == ["quarter_circle_left"]
    assert calls[0]["model"] == "test-model"
    assert "quarter_circle_left" in calls[0]["system"]


def test_formation_header_wins(model_reply):
    model_reply(json.dumps({"formation": "EIGHT_HAND_SQUARE", "moves": ["swing"]}))
    formation, _ = parse_dance("[formation: two-facing-two]\nSwing your partner.")
    assert formation is Formation.TWO_FACING_TWO


def test_non_json_reply(model_reply):
    model_reply("Sorry, I can't help with that.")
    with pytest.raises(ConfigurationError):
        parse_dance("Do something.")


def test_prompt_lists_registered_moves():
    catalog = move_catalog()
    assert "- circle:" in catalog
    assert "full_chain" in catalog
    assert "mingle" in catalog
    assert "TWO_FACING_TWO" in outer_system()


class _FakeMessages:
    def __init__(self, blocks):
        self.blocks = blocks
        self.kwargs = None

    def create(self, **kwargs):
        self.kwargs = kwargs
        return SimpleNamespace(content=self.blocks)


def _install_client(monkeypatch, blocks):
    messages = _FakeMessages(blocks)
    monkeypatch.setattr(client, "get_client", lambda: SimpleNamespace(messages=messages))
    return messages


def test_complete_joins_text_blocks(monkeypatch):
    messages = _install_client(monkeypatch, [
        SimpleNamespace(type="text", text='{"moves": '),
        SimpleNamespace(type="thinking", text="ignored"),
        SimpleNamespace(type="text", text="[]}"),
    ])
    assert client.complete("sys", "dance", model="m") == '{"moves": []}'
    assert messages.kwargs["model"] == "m"
    assert messages.kwargs["system"] == "sys"
    assert messages.kwargs["messages"] == [{"role": "user", "content": "dance"}]


def test_complete_rejects_empty_answer(monkeypatch):
    _install_client(monkeypatch, [SimpleNamespace(type="text", text="  ")])
    with pytest.raises(ConfigurationError, match="empty answer"):
        client.complete("sys", "dance", model="m")
