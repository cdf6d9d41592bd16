"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import run_controls, algorithm_selector, …
"""

from ui.canvas import render_bars, CanvasConfig

from ui.controls import (
    run_controls,
    algorithm_selector,
    sliders,
    stats_panel,
    algorithm_info,
)

__all__ = [
    "render_bars",
    "CanvasConfig",
    "run_controls",
    "algorithm_selector",
    "sliders",
    "stats_panel",
    "algorithm_info",
]
