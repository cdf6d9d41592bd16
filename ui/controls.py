"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • run_controls         – start / stop / new sequence + run-state badge
  • algorithm_selector   – dropdown over the five algorithms
  • sliders              – array size & speed
  • stats_panel          – comparisons, exchanges, elapsed time
  • algorithm_info       – description & complexity card

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from typing import Optional, List, Dict, Any
from algorithms import AlgoInfo


# ---------------------------------------------------------------------------
# Run Controls
# ---------------------------------------------------------------------------
def run_controls(state: str = "idle") -> str:
    running = state == "running"
    disabled = "disabled" if running else ""
    stop_disabled = "" if running else "disabled"

    return f"""
    <div class="panel run-controls">
      <h3>⏯ Run</h3>
      <div class="button-row">
        <button id="btn-new" title="Generate a new sequence" {disabled}>🎲 New Array</button>
        <button id="btn-start" class="btn-primary" title="Start sorting" {disabled}>▶ Sort</button>
        <button id="btn-stop" title="Stop sorting" {stop_disabled}>■ Stop</button>
      </div>
      <div class="step-info">
        State: <span id="run-state" class="state-badge state-{state}">{state.upper()}</span>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(algorithms: List[AlgoInfo], selected_key: str = "bubble") -> str:
    options = []
    for algo in algorithms:
        sel = 'selected' if algo.key == selected_key else ''
        options.append(
            f'<option value="{algo.key}" {sel}>{algo.label} — {algo.average}</option>'
        )

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Algorithm</h3>
      <select id="algo-selector">
        {''.join(options)}
      </select>
    </div>
    """


# ---------------------------------------------------------------------------
# Size & Speed Sliders
# ---------------------------------------------------------------------------
def sliders(
    size: int = 50,
    speed: int = 5,
    size_range: tuple = (5, 500),
    speed_range: tuple = (1, 10),
) -> str:
    return f"""
    <div class="panel sliders">
      <h3>🎚 Settings</h3>
      <label for="size-slider">Array size: <strong id="size-value">{size}</strong></label>
      <input type="range" id="size-slider" min="{size_range[0]}" max="{size_range[1]}" value="{size}">
      <label for="speed-slider">Speed: <strong id="speed-value">{speed}</strong></label>
      <input type="range" id="speed-slider" min="{speed_range[0]}" max="{speed_range[1]}" value="{speed}">
    </div>
    """


# ---------------------------------------------------------------------------
# Statistics
# ---------------------------------------------------------------------------
def stats_panel(stats: Optional[Dict[str, Any]] = None) -> str:
    stats = stats or {"comparisons": 0, "exchanges": 0, "elapsed_ms": 0}
    return f"""
    <div class="panel stats-panel">
      <h3>📊 Statistics</h3>
      <table>
        <tr><td>Comparisons:</td><td><strong id="stat-comparisons">{stats['comparisons']}</strong></td></tr>
        <tr><td>Exchanges:</td><td><strong id="stat-exchanges">{stats['exchanges']}</strong></td></tr>
        <tr><td>Time:</td><td><strong id="stat-time">{stats['elapsed_ms']}ms</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Info Card
# ---------------------------------------------------------------------------
def algorithm_info(info: Optional[AlgoInfo]) -> str:
    if not info:
        return """
        <div class="panel algorithm-info">
          <p class="placeholder">Select an algorithm.</p>
        </div>
        """

    return f"""
    <div class="panel algorithm-info">
      <div class="info-title">{info.label}</div>
      <p>{info.description}</p>
      <div class="complexity">
        <div class="complexity-item"><strong>Best Case:</strong> {info.best}</div>
        <div class="complexity-item"><strong>Average Case:</strong> {info.average}</div>
        <div class="complexity-item"><strong>Worst Case:</strong> {info.worst}</div>
        <div class="complexity-item"><strong>Space:</strong> {info.space}</div>
      </div>
    </div>
    """
