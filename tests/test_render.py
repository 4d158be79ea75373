"""Tests for the HTML player and the text dump."""

from __future__ import annotations

import json

from ceilivis.ascii_viz import render_state_compact
from ceilivis.pipeline import run_pipeline
from ceilivis.render.html_canvas import _short_label, keyframes_to_json, render_html


def test_short_labels():
    assert _short_label("first-top-lead") == "1TL"
    assert _short_label("second-side-follow") == "2SF"
    assert _short_label("bottom-center") == "BC"


def test_keyframes_to_json():
    keyframes, _, _ = run_pipeline(moves=["clap_twice"])
    frames = json.loads(keyframes_to_json(keyframes))
    assert frames[0]["beat"] == 0.0
    assert set(frames[0]["dancers"]["first-top-lead"]) == {"x", "y", "facing", "scale"}
    assert any(frame["dancers"]["first-top-lead"]["scale"] != 1.0 for frame in frames)


def test_render_html(tmp_path):
    keyframes, choreo, _ = run_pipeline(moves=["switch_with_partner"])
    output = render_html(
        keyframes, tmp_path / "dance.html", title="Switch", center=choreo.geometry.center
    )
    html = output.read_text()
    assert output.exists()
    assert "<title>Switch</title>" in html
    assert '"1TL"' in html
    assert '"x": 500.0, "y": 500.0' in html
    assert "%%" not in html


def test_render_html_defaults_center(tmp_path):
    output = render_html([], tmp_path / "empty.html", width=600, height=400)
    html = output.read_text()
    assert json.dumps({"x": 300.0, "y": 200.0}) in html
    assert 'width="600"' in html


def test_render_state_compact(square):
    text = render_state_compact(square.dancers, title="Start")
    lines = text.splitlines()
    assert lines[0] == "Start:"
    assert len(lines) == 9
    assert "first-top-lead" in lines[1]
    assert " v " in lines[1]


def test_render_html_escapes_title(tmp_path):
    output = render_html([], tmp_path / "odd.html", title="Reels & <Jigs>")
    html = output.read_text()
    assert "<title>Reels &amp; &lt;Jigs&gt;</title>" in html
    assert "<Jigs>" not in html
