"""
main.py — Sorting Visualizer Flask App
========================================
The web server that puts the step engine on screen.

Routes:
  GET  /               – main UI
  GET  /api/state      – current frame (JSON + SVG)
  POST /api/command    – apply one abstract command (select, toggle, reset, speed)
  POST /api/tick       – report elapsed time; the engine steps when the interval is reached
  POST /api/compare    – race two algorithms headlessly on the current data

State management:
  Each browser session gets its own Controller, kept in-process and keyed
  by a random id stored in the Flask session cookie.  At most
  MAX_SESSIONS controllers are kept; the least recently used is evicted.
  Each controller has a lock, so one session's requests run one at a time.
  The browser owns the timing loop: it posts /api/tick with the
  milliseconds since its last frame, exactly like a desktop render loop
  would call Controller.tick().
"""

import logging
import math
import secrets
import threading
from collections import OrderedDict
from contextlib import contextmanager
from typing import Iterator, Optional, Tuple

from flask import Flask, jsonify, render_template_string, request, session

from algorithms import get_algorithm, list_algorithms
from config import VisualizerConfig
from engine import Command, Controller, compare_algorithms
from ui import (
    render_canvas,
    algorithm_selector,
    run_controls,
    controls_help,
    pseudocode_viewer,
    explanation_panel,
    comparison_panel,
    CONTROLS_HELP,
)


app = Flask(__name__)
app.secret_key = secrets.token_hex(32)
app.config["VISUALIZER"] = VisualizerConfig.from_env()
app.config["MAX_SESSIONS"] = 256

# sid -> (controller, lock), least recently used first
_controllers: "OrderedDict[str, Tuple[Controller, threading.Lock]]" = OrderedDict()
_controllers_lock = threading.Lock()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def _session_entry() -> Tuple[Controller, threading.Lock]:
    """Controller and lock for the current browser session, created on first use."""
    with _controllers_lock:
        sid = session.get("sid")
        if sid is not None and sid in _controllers:
            _controllers.move_to_end(sid)
            return _controllers[sid]

        sid = secrets.token_hex(8)
        session["sid"] = sid
        _controllers[sid] = (Controller(app.config["VISUALIZER"]), threading.Lock())
        app.logger.debug("new controller for session %s", sid)
        while len(_controllers) > app.config["MAX_SESSIONS"]:
            old_sid, _ = _controllers.popitem(last=False)
            app.logger.debug("evicted controller for session %s", old_sid)
        return _controllers[sid]


@contextmanager
def session_controller() -> Iterator[Controller]:
    """
    Yield this session's Controller with its lock held.  Requests for the
    same session are serialised; the Controller itself is not thread-safe.
    """
    ctrl, lock = _session_entry()
    with lock:
        yield ctrl


def json_body() -> Optional[dict]:
    """The request's JSON object, {} when absent, None when it is not an object."""
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def bad_request(message: str):
    return jsonify({"error": message}), 400


def frame_payload(ctrl: Controller) -> dict:
    """Everything the page needs to redraw after a request."""
    frame = ctrl.frame()
    info = ctrl.algorithm
    payload = frame.to_dict()
    payload.update({
        "svg":          render_canvas(frame),
        "pseudocode":   pseudocode_viewer(
            pseudocode_lines=info.pseudocode if info else [],
            current_line=frame.pseudocode_line,
            algo_label=info.label if info else "",
        ),
        "explanation":  explanation_panel(frame.explanation),
        "run_controls": run_controls(frame.state, frame.stats.speed_ms),
        "selector":     algorithm_selector(list_algorithms(), frame.algorithm_key),
    })
    return payload


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    with session_controller() as ctrl:
        payload = frame_payload(ctrl)

    return render_template_string(
        INDEX_TEMPLATE,
        svg=payload["svg"],
        selector=payload["selector"],
        run_controls=payload["run_controls"],
        pseudocode=payload["pseudocode"],
        explanation=payload["explanation"],
        comparison=comparison_panel(),
        algorithms=list_algorithms(),
        help=controls_help(),
    )


# ---------------------------------------------------------------------------
# API
# ---------------------------------------------------------------------------
@app.route("/api/state")
def api_state():
    with session_controller() as ctrl:
        return jsonify(frame_payload(ctrl))


@app.route("/api/command", methods=["POST"])
def api_command():
    data = json_body()
    if data is None:
        return bad_request("Request body must be a JSON object")
    raw = data.get("command", "")
    if not isinstance(raw, str):
        return bad_request(f"Unknown command: {raw!r}")
    try:
        cmd = Command(raw)
    except ValueError:
        return bad_request(f"Unknown command: {raw!r}")

    with session_controller() as ctrl:
        ctrl.handle_command(cmd)
        return jsonify(frame_payload(ctrl))


@app.route("/api/tick", methods=["POST"])
def api_tick():
    data = json_body()
    if data is None:
        return bad_request("Request body must be a JSON object")
    try:
        elapsed = float(data.get("elapsed_ms", 0))
    except (TypeError, ValueError):
        return bad_request("elapsed_ms must be a number")
    if not math.isfinite(elapsed) or elapsed < 0:
        return bad_request("elapsed_ms must be a finite number >= 0")

    with session_controller() as ctrl:
        stepped = ctrl.tick(elapsed)
        payload = frame_payload(ctrl)
    payload["stepped"] = stepped
    return jsonify(payload)


@app.route("/api/compare", methods=["POST"])
def api_compare():
    data = json_body()
    if data is None:
        return bad_request("Request body must be a JSON object")
    left  = data.get("left", "bubble")
    right = data.get("right", "quick")
    for key in (left, right):
        if not isinstance(key, str) or get_algorithm(key) is None:
            return bad_request(f"Unknown algorithm: {key!r}")

    with session_controller() as ctrl:
        snapshot = ctrl.data.copy()
    comp = compare_algorithms(left, right, snapshot)
    return jsonify({
        "left":               comp.left.__dict__,
        "right":              comp.right.__dict__,
        "winner_steps":       comp.winner_steps,
        "winner_comparisons": comp.winner_comparisons,
        "winner_swaps":       comp.winner_swaps,
        "html":               comparison_panel(comp),
    })


# ---------------------------------------------------------------------------
# HTML Template
# ---------------------------------------------------------------------------
INDEX_TEMPLATE = """
<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="UTF-8">
  <meta name="viewport" content="width=device-width, initial-scale=1.0">
  <title>Sorting Algorithm Visualizer</title>
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #1e1e1e;
      --bg-panel: #262626;
      --border: #3a3a3a;
      --text-primary: #ffffff;
      --text-secondary: #c8c8c8;
      --accent: #4682b4;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-dark);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 20px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      align-items: center;
      justify-content: center;
      border-bottom: 1px solid var(--border);
    }
    #canvas-svg svg { max-width: 100%; max-height: 100%; }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr;
      gap: 16px;
      padding: 16px;
      max-height: 280px;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 14px;
      margin-bottom: 14px;
    }
    .panel h3 {
      font-size: 13px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      color: var(--accent);
      margin-bottom: 10px;
    }

    button {
      background: #333;
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 6px;
      padding: 6px 10px;
      cursor: pointer;
    }
    button:hover { border-color: var(--accent); }
    .algo-btn { display: block; width: 100%; text-align: left; margin-bottom: 6px; }
    .algo-btn.active { border-color: var(--accent); background: #2d3f52; }
    .complexity { float: right; color: var(--text-secondary); font-size: 12px; }
    .button-row, .speed-control { display: flex; gap: 8px; align-items: center; margin-bottom: 8px; }

    .code-block {
      background: #181818;
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 12px;
      overflow-y: auto;
      font-family: 'JetBrains Mono', 'Courier New', monospace;
      font-size: 13px;
      line-height: 1.6;
      height: 100%;
    }
    .code-line { padding: 2px 8px; white-space: pre; }
    .code-line.highlight {
      background: rgba(70, 130, 180, 0.25);
      border-left: 3px solid var(--accent);
    }
    .explanation-text { padding: 12px; color: var(--text-primary); }
    .placeholder { color: var(--text-secondary); }
    .controls-help { color: var(--text-secondary); font-size: 13px; padding: 8px 16px; }

    .comparison-table { width: 100%; border-collapse: collapse; font-size: 13px; }
    .comparison-table th, .comparison-table td { padding: 4px; border-bottom: 1px solid var(--border); }
    .badge.win { color: #32cd32; }
    .badge.tie { color: var(--text-secondary); }
    select { background: #333; color: var(--text-primary); border: 1px solid var(--border); padding: 4px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="selector">{{ selector|safe }}</div>
    <div id="run-controls">{{ run_controls|safe }}</div>
    <div class="panel">
      <h3>Race</h3>
      <div class="button-row">
        <select id="cmp-left">
          {% for a in algorithms %}<option value="{{ a.key }}">{{ a.label }}</option>{% endfor %}
        </select>
        <select id="cmp-right">
          {% for a in algorithms %}<option value="{{ a.key }}" {% if loop.index == 2 %}selected{% endif %}>{{ a.label }}</option>{% endfor %}
        </select>
      </div>
      <button id="btn-compare">Compare on current data</button>
    </div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container"><div id="canvas-svg">{{ svg|safe }}</div></div>
    {{ help|safe }}
    <div id="bottom-panel">
      <div id="pseudocode">{{ pseudocode|safe }}</div>
      <div id="explanation" class="panel">{{ explanation|safe }}</div>
    </div>
  </div>

  <script>
    async function post(url, body) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(body || {}),
      });
      return res.json();
    }

    let state = 'idle';

    function apply(data) {
      if (data.error) { console.warn(data.error); return; }
      state = data.state;
      document.getElementById('canvas-svg').innerHTML = data.svg;
      document.getElementById('pseudocode').innerHTML = data.pseudocode;
      document.getElementById('explanation').innerHTML = data.explanation;
      document.getElementById('run-controls').innerHTML = data.run_controls;
      document.getElementById('selector').innerHTML = data.selector;
    }

    async function command(cmd) {
      apply(await post('/api/command', {command: cmd}));
    }

    // buttons carry their command in data-command
    document.addEventListener('click', (e) => {
      const btn = e.target.closest('[data-command]');
      if (btn) command(btn.dataset.command);
    });

    const KEYMAP = {
      '1': 'select_bubble', '2': 'select_quick', '3': 'select_merge', '4': 'select_selection',
      ' ': 'toggle_run', 'r': 'reset', 'R': 'reset',
      '+': 'speed_up', '=': 'speed_up', 'ArrowUp': 'speed_up',
      '-': 'speed_down', 'ArrowDown': 'speed_down',
    };
    document.addEventListener('keydown', (e) => {
      const cmd = KEYMAP[e.key];
      if (!cmd || e.target.tagName === 'SELECT') return;
      e.preventDefault();
      command(cmd);
    });

    document.getElementById('btn-compare').addEventListener('click', async () => {
      const data = await post('/api/compare', {
        left: document.getElementById('cmp-left').value,
        right: document.getElementById('cmp-right').value,
      });
      if (data.html) document.getElementById('comparison').innerHTML = data.html;
    });

    // render loop: report elapsed time, the engine decides whether to step
    let last = performance.now();
    let inFlight = false;
    async function loop(now) {
      const elapsed = now - last;
      if (state === 'running' && !inFlight) {
        inFlight = true;
        last = now;
        try {
          apply(await post('/api/tick', {elapsed_ms: elapsed}));
        } finally {
          inFlight = false;
        }
      } else if (state !== 'running') {
        last = now;
      }
      requestAnimationFrame(loop);
    }

    fetch('/api/state').then(r => r.json()).then(apply);
    requestAnimationFrame(loop);
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s %(message)s")
    print("=" * 60)
    print("  SORTING ALGORITHM VISUALIZER")
    print("  " + CONTROLS_HELP)
    print("  Open http://localhost:5000")
    print("=" * 60)
    app.run(debug=False, port=5000)


if __name__ == "__main__":
    main()
