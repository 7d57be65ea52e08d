"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: Frame → SVG string.

The renderer consumes:
  • frame   – the Controller's current Frame snapshot (values, markers, stats)
  • config  – visual config (canvas size, colours, fonts, …)

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  The caller passes in everything and gets back a string.
  - Marker → colour is a plain dict lookup.
  - Bar heights scale against `config.value_max` so a redraw never
    rescales mid-sort.
  - The legend is drawn inside the SVG, top-right, as in the desktop version.
"""

from typing import Dict, List, Optional

from dataset import Marker
from engine.frame import Frame


# ---------------------------------------------------------------------------
# Visual Config: colour palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 1200
    height: int = 700
    bg:     str = "#1e1e1e"

    # plot area
    margin_x:  int = 100
    baseline:  int = 600
    top:       int = 150
    bar_gap:   int = 1
    value_max: int = 600

    # bar colours (marker → fill)
    bar_colors: Dict[str, str] = {
        Marker.DEFAULT.value:   "#4682b4",   # steel blue
        Marker.COMPARING.value: "#ff6347",   # tomato
        Marker.SWAPPING.value:  "#32cd32",   # lime green
        Marker.SORTED.value:    "#9370db",   # medium purple
    }

    # axes & text
    axis_color:   str = "#ffffff"
    text_color:   str = "#ffffff"
    font_family:  str = "'DM Sans', sans-serif"
    title_size:   int = 24
    stats_size:   int = 20
    legend_size:  int = 16
    legend_x:     int = 800
    legend_y:     int = 20


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_canvas(
    frame: Frame,
    config: CanvasConfig = CONFIG,
    show_legend: bool = True,
    show_text: bool = True,
) -> str:
    """
    Returns an SVG string.

    Args:
        frame       : Snapshot to draw.
        config      : Visual config.
        show_legend : Draw the colour legend.
        show_text   : Draw the algorithm / stats header lines.
    """
    svg_parts = [
        f'<svg width="{config.width}" height="{config.height}" '
        f'viewBox="0 0 {config.width} {config.height}" '
        f'xmlns="http://www.w3.org/2000/svg" style="background: {config.bg};">',
        f'<rect width="{config.width}" height="{config.height}" fill="{config.bg}"/>',
    ]

    svg_parts.append(_render_bars(frame.values, frame.markers, config))
    svg_parts.append(_render_axes(config))

    if show_text:
        svg_parts.append(_render_header(frame, config))
    if show_legend:
        svg_parts.append(_render_legend(config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Bars
# ---------------------------------------------------------------------------
def bar_color(marker: str, config: CanvasConfig = CONFIG) -> str:
    return config.bar_colors.get(marker, config.bar_colors[Marker.DEFAULT.value])


def _render_bars(values: List[int], markers: List[str], config: CanvasConfig) -> str:
    if not values:
        return '<g class="bars"></g>'

    plot_w  = config.width - 2 * config.margin_x
    plot_h  = config.baseline - config.top
    bar_w   = plot_w / len(values)
    inner_w = max(bar_w - config.bar_gap, 1)

    parts = ['<g class="bars">']
    for idx, value in enumerate(values):
        h = min(value, config.value_max) / config.value_max * plot_h
        x = config.margin_x + idx * bar_w
        y = config.baseline - h
        fill = bar_color(markers[idx] if idx < len(markers) else "", config)
        parts.append(
            f'  <rect class="bar" data-index="{idx}" x="{x:.2f}" y="{y:.2f}" '
            f'width="{inner_w:.2f}" height="{h:.2f}" fill="{fill}"/>'
        )
    parts.append("</g>")
    return "\n".join(parts)


def _render_axes(config: CanvasConfig) -> str:
    x0 = config.margin_x
    x1 = config.width - config.margin_x
    return "\n".join([
        '<g class="axes">',
        f'  <line x1="{x0}" y1="{config.baseline}" x2="{x1}" y2="{config.baseline}" '
        f'stroke="{config.axis_color}" stroke-width="2"/>',
        f'  <line x1="{x0}" y1="{config.top - 100}" x2="{x0}" y2="{config.baseline}" '
        f'stroke="{config.axis_color}" stroke-width="2"/>',
        "</g>",
    ])


# ---------------------------------------------------------------------------
# Text
# ---------------------------------------------------------------------------
def status_line(frame: Frame) -> str:
    return f"Algorithm: {frame.algorithm_name} ({frame.state_label.upper()})"


def stats_line(frame: Frame) -> str:
    s = frame.stats
    line = (
        f"Comparisons: {s.comparisons}  |  Swaps: {s.swaps}  |  "
        f"Time: {int(s.elapsed_ms)}ms  |  Speed: {s.speed_ms}ms"
    )
    if s.writes:
        line += f"  |  Writes: {s.writes}"
    return line


def _text(x: int, y: int, text: str, size: int, color: str, config: CanvasConfig,
          css_class: Optional[str] = None) -> str:
    cls = f' class="{css_class}"' if css_class else ""
    return (
        f'  <text{cls} x="{x}" y="{y}" font-size="{size}" '
        f'font-family="{config.font_family}" fill="{color}">{_escape(text)}</text>'
    )


def _render_header(frame: Frame, config: CanvasConfig) -> str:
    return "\n".join([
        '<g class="header">',
        _text(20, 44, status_line(frame), config.title_size, config.text_color, config, "status"),
        _text(20, 84, stats_line(frame), config.stats_size, config.text_color, config, "stats"),
        "</g>",
    ])


def _render_legend(config: CanvasConfig) -> str:
    parts = ['<g class="legend">']
    for row, marker in enumerate(Marker):
        y = config.legend_y + row * 30
        parts.append(
            f'  <rect x="{config.legend_x}" y="{y}" width="20" height="20" '
            f'fill="{bar_color(marker.value, config)}"/>'
        )
        parts.append(_text(config.legend_x + 30, y + 16, marker.label,
                           config.legend_size, config.text_color, config))
    parts.append("</g>")
    return "\n".join(parts)


def _escape(text: str) -> str:
    return text.replace("&", "&amp;").replace("<", "&lt;").replace(">", "&gt;")
