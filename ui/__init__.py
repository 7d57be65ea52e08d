"""
ui/
---
Presentation layer.

    from ui import render_canvas
    from ui import algorithm_selector, run_controls, …
"""

from ui.canvas import render_canvas, CanvasConfig, status_line, stats_line

from ui.controls import (
    algorithm_selector,
    run_controls,
    controls_help,
    pseudocode_viewer,
    explanation_panel,
    comparison_panel,
    CONTROLS_HELP,
)

__all__ = [
    "render_canvas",
    "CanvasConfig",
    "status_line",
    "stats_line",
    "algorithm_selector",
    "run_controls",
    "controls_help",
    "pseudocode_viewer",
    "explanation_panel",
    "comparison_panel",
    "CONTROLS_HELP",
]
