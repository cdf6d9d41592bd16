"""
canvas.py — SVG Bar Renderer
==============================
Pure rendering function: values + highlight + sorted prefix → SVG string.

The renderer consumes:
  • values     – the sequence mirror (RunRecorder.values)
  • highlight  – (kind, indices) of the latest step, or None
  • sorted     – how many leading bars the completion sweep has painted
  • config     – visual config (canvas size, colors, …)

Design decisions:
  - NO mutation.  Stateless; the caller passes everything in.
  - Bar height is proportional to value / max(values), so any positive
    numeric range fits the canvas.
  - Colour is a dict lookup: step kind → fill.  Sorted beats everything.
"""

from typing import Dict, List, Optional, Sequence, Tuple

from algorithms.step import Number


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions
# ---------------------------------------------------------------------------
class CanvasConfig:
    # canvas
    width:  int = 900
    height: int = 400
    bg:     str = "#0d1117"
    pad:    int = 10

    # bar colors (state → fill)
    bar_colors: Dict[str, str] = {
        "default":   "#0ea5e9",   # cyan blue
        "compare":   "#f59e0b",   # amber — being compared
        "swap":      "#f43f5e",   # rose — being exchanged
        "overwrite": "#a855f7",   # purple — being written
        "sorted":    "#10b981",   # emerald — final position
    }

    bar_gap:        float = 2.0
    min_bar_width:  float = 1.0
    min_bar_height: float = 2.0


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_bars(
    values: Sequence[Number],
    highlight: Optional[Tuple[str, Sequence[int]]] = None,
    sorted_count: int = 0,
    config: CanvasConfig = CONFIG,
) -> str:
    """
    Returns an <svg> element with one <rect> per value.

    Args:
        values       : Bar heights, in sequence order.
        highlight    : (step kind, indices) to colour, or None.
        sorted_count : Bars [0, sorted_count) are drawn as sorted.
        config       : CanvasConfig.
    """
    w, h, pad = config.width, config.height, config.pad
    parts: List[str] = [
        f'<svg xmlns="http://www.w3.org/2000/svg" viewBox="0 0 {w} {h}" '
        f'width="{w}" height="{h}" id="bars">',
        f'<rect x="0" y="0" width="{w}" height="{h}" fill="{config.bg}"/>',
    ]

    n = len(values)
    if n == 0:
        parts.append("</svg>")
        return "".join(parts)

    top = max(max(values), 1)
    slot = (w - 2 * pad) / n
    bar_w = max(config.min_bar_width, slot - config.bar_gap)
    usable_h = h - 2 * pad

    colors = _bar_colors(n, highlight, sorted_count, config)
    for idx, v in enumerate(values):
        bar_h = max(config.min_bar_height, usable_h * max(v, 0) / top)
        x = pad + idx * slot
        y = h - pad - bar_h
        parts.append(
            f'<rect id="bar-{idx}" x="{x:.2f}" y="{y:.2f}" width="{bar_w:.2f}" '
            f'height="{bar_h:.2f}" fill="{colors[idx]}" rx="1"/>'
        )

    parts.append("</svg>")
    return "".join(parts)


# ---------------------------------------------------------------------------
# Helper
# ---------------------------------------------------------------------------
def _bar_colors(
    n: int,
    highlight: Optional[Tuple[str, Sequence[int]]],
    sorted_count: int,
    config: CanvasConfig,
) -> List[str]:
    palette = config.bar_colors
    colors = [palette["default"]] * n
    if highlight:
        kind, indices = highlight
        fill = palette.get(kind, palette["default"])
        for i in indices:
            if 0 <= i < n:
                colors[i] = fill
    for i in range(min(sorted_count, n)):
        colors[i] = palette["sorted"]
    return colors
