"""Self-contained HTML+JS+Canvas player for a recorded run."""

from __future__ import annotations

import json
from html import escape
from pathlib import Path

from ..types import Keyframe, Point

_ABBREVIATIONS = {
    "first": "1", "second": "2", "top": "T", "side": "S", "lead": "L", "follow": "F",
    "bottom": "B", "left": "L", "center": "C", "right": "R",
}


def _short_label(role_value: str) -> str:
    """'first-top-lead' -> '1TL'."""
    return "".join(_ABBREVIATIONS.get(part, part[:1].upper()) for part in role_value.split("-"))


def keyframes_to_json(keyframes: list[Keyframe]) -> str:
    """Convert keyframes to JSON for embedding in HTML."""
    frames = []
    for kf in keyframes:
        dancers = {}
        for role, fp in kf.dancers.items():
            dancers[role.value] = {
                "x": round(fp.x, 2),
                "y": round(fp.y, 2),
                "facing": round(fp.facing, 2),
                "scale": round(fp.scale, 3),
            }
        frames.append({
            "beat": round(kf.beat, 3),
            "dancers": dancers,
            "annotation": kf.annotation,
        })
    return json.dumps(frames)


def _cast_json(keyframes: list[Keyframe]) -> str:
    cast = {}
    for kf in keyframes[:1]:
        for role in kf.dancers:
            cast[role.value] = {
                "color": kf.colors.get(role, "gray"),
                "label": _short_label(role.value),
            }
    return json.dumps(cast)


_HTML_TEMPLATE = r"""<!DOCTYPE html>
<html lang="en">
<head>
<meta charset="UTF-8">
<title>%%DANCE_TITLE%%</title>
<style>
* { margin: 0; padding: 0; box-sizing: border-box; }
body {
    background: #f4efe6;
    color: #2b2b2b;
    font-family: Georgia, 'Times New Roman', serif;
    display: flex;
    flex-direction: column;
    align-items: center;
    padding: 16px;
}
h1 { font-size: 1.4em; margin-bottom: 6px; color: #2f5d3a; }
#status { font-size: 1.1em; min-height: 1.4em; margin-bottom: 8px; }
canvas { background: #fffaf0; border: 1px solid #c9bca4; border-radius: 6px; }
.controls { margin-top: 12px; display: flex; align-items: center; gap: 12px; flex-wrap: wrap; }
button {
    background: #2f5d3a; color: #fff; border: none; border-radius: 4px;
    padding: 6px 14px; cursor: pointer; font-size: 14px;
}
button.active { background: #7aa36f; }
input[type="range"] { width: 320px; accent-color: #2f5d3a; }
.beat { font-variant-numeric: tabular-nums; min-width: 90px; }
</style>
</head>
<body>
<h1>%%DANCE_TITLE%%</h1>
<div id="status"></div>
<canvas id="floor" width="%%WIDTH%%" height="%%HEIGHT%%"></canvas>
<div class="controls">
    <button id="playBtn" onclick="togglePlay()">Play</button>
    <button onclick="stepBy(-0.25)">&lt; Step</button>
    <button onclick="stepBy(0.25)">Step &gt;</button>
    <input type="range" id="scrubber" min="0" max="1000" value="0" oninput="scrub(this.value)">
    <span class="beat" id="beat">Beat 0.0</span>
</div>
<div class="controls">
    <span>Speed:</span>
    <button class="speed" onclick="setSpeed(this, 0.5)">0.5x</button>
    <button class="speed active" onclick="setSpeed(this, 1)">1x</button>
    <button class="speed" onclick="setSpeed(this, 2)">2x</button>
    <button class="speed" onclick="setSpeed(this, 4)">4x</button>
</div>

<script>
const KEYFRAMES = %%KEYFRAMES_JSON%%;
const CAST = %%CAST_JSON%%;
const CENTER = %%CENTER_JSON%%;
const BEATS_PER_SECOND = 2;  // one beat is 500 ms at 1x

const canvas = document.getElementById('floor');
const ctx = canvas.getContext('2d');
const scrubber = document.getElementById('scrubber');
const beatEl = document.getElementById('beat');
const statusEl = document.getElementById('status');

const minBeat = KEYFRAMES.length ? KEYFRAMES[0].beat : 0;
const maxBeat = KEYFRAMES.length ? KEYFRAMES[KEYFRAMES.length - 1].beat : 0;
let beat = minBeat;
let playing = false;
let speed = 1;
let last = null;

function lerp(a, b, t) { return a + (b - a) * t; }

function lerpAngle(a, b, t) {
    let diff = ((b - a) % 360 + 540) % 360 - 180;
    return (a + diff * t + 360) % 360;
}

function frameAt(b) {
    if (!KEYFRAMES.length) return null;
    if (b <= minBeat) return KEYFRAMES[0];
    if (b >= maxBeat) return KEYFRAMES[KEYFRAMES.length - 1];
    let lo = 0, hi = KEYFRAMES.length - 1;
    while (lo < hi - 1) {
        const mid = (lo + hi) >> 1;
        if (KEYFRAMES[mid].beat <= b) lo = mid; else hi = mid;
    }
    const f0 = KEYFRAMES[lo], f1 = KEYFRAMES[hi];
    const t = (b - f0.beat) / (f1.beat - f0.beat);
    const dancers = {};
    for (const id of Object.keys(f0.dancers)) {
        const d0 = f0.dancers[id], d1 = f1.dancers[id];
        dancers[id] = {
            x: lerp(d0.x, d1.x, t),
            y: lerp(d0.y, d1.y, t),
            facing: lerpAngle(d0.facing, d1.facing, t),
            scale: lerp(d0.scale, d1.scale, t),
        };
    }
    return { beat: b, dancers: dancers, annotation: f0.annotation };
}

function drawDancer(id, d) {
    const who = CAST[id] || { color: 'gray', label: '?' };
    const r = 16 * d.scale;
    // rotation 0 faces down the screen, 90 faces left
    const rad = d.facing * Math.PI / 180;
    const fx = -Math.sin(rad), fy = Math.cos(rad);

    ctx.fillStyle = who.color;
    ctx.strokeStyle = '#333';
    ctx.lineWidth = 1.5;
    ctx.beginPath();
    ctx.arc(d.x, d.y, r, 0, Math.PI * 2);
    ctx.fill();
    ctx.stroke();

    const tipX = d.x + fx * (r + 10), tipY = d.y + fy * (r + 10);
    ctx.beginPath();
    ctx.moveTo(d.x, d.y);
    ctx.lineTo(tipX, tipY);
    ctx.lineTo(tipX - fx * 6 - fy * 4, tipY - fy * 6 + fx * 4);
    ctx.moveTo(tipX, tipY);
    ctx.lineTo(tipX - fx * 6 + fy * 4, tipY - fy * 6 - fx * 4);
    ctx.stroke();

    ctx.fillStyle = '#fff';
    ctx.font = 'bold 10px sans-serif';
    ctx.textAlign = 'center';
    ctx.textBaseline = 'middle';
    ctx.fillText(who.label, d.x, d.y);
}

function draw(frame) {
    ctx.clearRect(0, 0, canvas.width, canvas.height);
    ctx.fillStyle = '#c9bca4';
    ctx.fillRect(CENTER.x - 5, CENTER.y - 5, 10, 10);
    if (!frame) return;
    for (const [id, d] of Object.entries(frame.dancers)) drawDancer(id, d);
    beatEl.textContent = `Beat ${frame.beat.toFixed(1)}`;
    statusEl.textContent = frame.annotation || '';
    if (maxBeat > minBeat) {
        scrubber.value = Math.round((frame.beat - minBeat) / (maxBeat - minBeat) * 1000);
    }
}

function tick(ts) {
    if (!playing) return;
    if (last === null) last = ts;
    beat += (ts - last) / 1000 * BEATS_PER_SECOND * speed;
    last = ts;
    if (beat > maxBeat) beat = minBeat;
    draw(frameAt(beat));
    requestAnimationFrame(tick);
}

function togglePlay() {
    playing = !playing;
    document.getElementById('playBtn').textContent = playing ? 'Pause' : 'Play';
    if (playing) { last = null; requestAnimationFrame(tick); }
}

function stepBy(db) {
    beat = Math.min(maxBeat, Math.max(minBeat, beat + db));
    draw(frameAt(beat));
}

function scrub(val) {
    beat = minBeat + val / 1000 * (maxBeat - minBeat);
    draw(frameAt(beat));
}

function setSpeed(btn, s) {
    speed = s;
    document.querySelectorAll('button.speed').forEach(b => b.classList.remove('active'));
    btn.classList.add('active');
}

document.addEventListener('keydown', (e) => {
    if (e.code === 'Space') { e.preventDefault(); togglePlay(); }
    if (e.code === 'ArrowRight') { e.preventDefault(); stepBy(0.25); }
    if (e.code === 'ArrowLeft') { e.preventDefault(); stepBy(-0.25); }
});

draw(frameAt(minBeat));
</script>
</body>
</html>"""


def render_html(
    keyframes: list[Keyframe],
    output_path: str | Path,
    title: str = "Ceili Dance",
    width: int = 1000,
    height: int = 800,
    center: Point | None = None,
) -> Path:
    """Render keyframes to a self-contained HTML file.

    Args:
        keyframes: Sampled frames; coordinates are floor pixels.
        output_path: Where to write the HTML file.
        title: Dance title shown in the header.
        width, height: Floor size the frames were laid out for.
        center: Formation center to mark on the floor.

    Returns:
        Path to the written HTML file.
    """
    output_path = Path(output_path)
    center = center or Point(width / 2, height / 2)
    html = _HTML_TEMPLATE.replace("%%KEYFRAMES_JSON%%", keyframes_to_json(keyframes))
    html = html.replace("%%CAST_JSON%%", _cast_json(keyframes))
    html = html.replace("%%CENTER_JSON%%", json.dumps({"x": center.x, "y": center.y}))
    html = html.replace("%%WIDTH%%", str(int(width)))
    html = html.replace("%%HEIGHT%%", str(int(height)))
    html = html.replace("%%DANCE_TITLE%%", escape(title))
    output_path.write_text(html)
    return output_path
