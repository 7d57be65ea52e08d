"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • algorithm_selector   – one button per algorithm, with its hotkey
  • run_controls         – start/pause, reset, speed −/+
  • controls_help        – the keyboard cheat-sheet line
  • pseudocode_viewer    – with live line highlighting
  • explanation_panel    – "what just happened" for the last step
  • comparison_panel     – side-by-side metrics of two headless runs

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import List, Optional

from algorithms import AlgoInfo
from engine import ComparisonResult

CONTROLS_HELP = (
    "Controls: 1-Bubble | 2-Quick | 3-Merge | 4-Selection | "
    "SPACE-Start/Pause | R-Reset | +/- Speed"
)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "") -> str:
    buttons = []
    for hotkey, algo in enumerate(algorithms, start=1):
        active = "active" if algo.key == selected_key else ""
        buttons.append(
            f'<button class="algo-btn {active}" data-command="select_{algo.key}" '
            f'title="{_escape(algo.description)}">'
            f'<kbd>{hotkey}</kbd> {algo.label} '
            f'<span class="complexity">{algo.complexity_time}</span></button>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>Algorithm</h3>
      {''.join(buttons)}
    </div>
    """


# ---------------------------------------------------------------------------
# Run Controls
# ---------------------------------------------------------------------------
def run_controls(state: str = "idle", speed_ms: int = 50) -> str:
    play_label = "Pause" if state == "running" else ("Resume" if state == "paused" else "Start")

    return f"""
    <div class="panel run-controls">
      <h3>Run</h3>
      <div class="button-row">
        <button id="btn-toggle" data-command="toggle_run">{play_label}</button>
        <button id="btn-reset" data-command="reset">Reset</button>
      </div>
      <div class="speed-control">
        <button id="btn-slower" data-command="speed_down">−</button>
        <span>Speed: <span id="speed-ms">{speed_ms}</span> ms</span>
        <button id="btn-faster" data-command="speed_up">+</button>
      </div>
    </div>
    """


def controls_help() -> str:
    return f'<div class="controls-help">{CONTROLS_HELP}</div>'


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
    algo_label: str = "",
) -> str:
    if not pseudocode_lines:
        return """
        <div class="code-block">
          <div class="placeholder">Select an algorithm to view pseudocode</div>
        </div>
        """

    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = "highlight" if i == current_line else ""
        lines_html.append(
            f'<div class="code-line {highlight}" data-line="{i}">{_escape(line)}</div>'
        )

    return f"""
    <div class="code-block" data-algo="{_escape(algo_label)}">
      {''.join(lines_html)}
    </div>
    """


def explanation_panel(explanation: str = "") -> str:
    if not explanation:
        return '<div class="explanation-text placeholder">Press SPACE to start.</div>'
    return f'<div class="explanation-text">{_escape(explanation)}</div>'


# ---------------------------------------------------------------------------
# Comparison Panel
# ---------------------------------------------------------------------------
def comparison_panel(comp: Optional[ComparisonResult] = None) -> str:
    if comp is None:
        return """
        <div class="panel comparison-panel">
          <h3>Compare</h3>
          <div class="placeholder">Pick two algorithms to race them on the current data.</div>
        </div>
        """

    left, right = comp.left, comp.right

    def winner_badge(winner_label: str) -> str:
        if winner_label == "tie":
            return '<span class="badge tie">tie</span>'
        return f'<span class="badge win">{winner_label}</span>'

    return f"""
    <div class="panel comparison-panel">
      <h3>Compare</h3>
      <table class="comparison-table">
        <thead>
          <tr>
            <th>Metric</th>
            <th>{left.algo_label}</th>
            <th>{right.algo_label}</th>
            <th>Winner</th>
          </tr>
        </thead>
        <tbody>
          <tr>
            <td>Steps</td>
            <td>{left.total_steps}</td>
            <td>{right.total_steps}</td>
            <td>{winner_badge(comp.winner_steps)}</td>
          </tr>
          <tr>
            <td>Comparisons</td>
            <td>{left.comparisons}</td>
            <td>{right.comparisons}</td>
            <td>{winner_badge(comp.winner_comparisons)}</td>
          </tr>
          <tr>
            <td>Swaps + Writes</td>
            <td>{left.swaps + left.writes}</td>
            <td>{right.swaps + right.writes}</td>
            <td>{winner_badge(comp.winner_swaps)}</td>
          </tr>
          <tr>
            <td>Wall Time</td>
            <td>{left.wall_time_ms:.2f} ms</td>
            <td>{right.wall_time_ms:.2f} ms</td>
            <td>–</td>
          </tr>
        </tbody>
      </table>
    </div>
    """
