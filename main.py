"""
main.py — Sorting Algorithm Visualizer Flask App
==================================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current frame (SVG bars, stats, run state) for polling
  POST /api/config/size        – change array size (regenerates the sequence)
  POST /api/config/speed       – change speed level (applies mid-run)
  POST /api/config/algo        – select algorithm
  POST /api/sequence/new       – generate a new random sequence
  POST /api/run                – start sorting on a background worker
  POST /api/cancel             – request cancellation of the current run

State management:
  One RunController per app (there is exactly one sequence and at most one
  run at a time), stored in app.extensions["sortviz"] together with the
  RunRecorder that mirrors the worker's events for polling.

Configuration:
  SORTVIZ_* keys in app.config (see engine.config.EngineConfig), loaded
  from FLASK_SORTVIZ_* environment variables or from create_app(config).
  SORTVIZ_SEED seeds the sequence generator; SORTVIZ_LOG_LEVEL and
  SORTVIZ_LOG_FORMAT set up logging (engine.log.configure_logging).
"""

import logging
import random
from typing import Any, Dict, Optional

from flask import Flask, render_template_string, request, jsonify, current_app

from algorithms import get_algorithm, list_algorithms
from engine import EngineConfig, RunController, RunRecorder, configure_logging
from engine.log import DEFAULT_LEVEL
from sequence.errors import InvalidArgument, InvalidState
from ui import (
    render_bars,
    run_controls,
    algorithm_selector,
    sliders,
    stats_panel,
    algorithm_info,
)

LOG = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# App factory
# ---------------------------------------------------------------------------
def create_app(config: Optional[Dict[str, Any]] = None) -> Flask:
    app = Flask(__name__)
    app.config.from_mapping(
        SORTVIZ_SEED=None,
        SORTVIZ_LOG_LEVEL=DEFAULT_LEVEL,
        SORTVIZ_LOG_FORMAT=None,
    )
    app.config.from_prefixed_env()
    if config:
        app.config.update(config)

    configure_logging(app.config["SORTVIZ_LOG_LEVEL"], app.config["SORTVIZ_LOG_FORMAT"])
    engine_config = EngineConfig.from_mapping(app.config)
    seed = app.config.get("SORTVIZ_SEED")
    recorder = RunRecorder()
    controller = RunController(
        renderer=recorder,
        config=engine_config,
        rng=random.Random(seed),
    )
    app.extensions["sortviz"] = {"controller": controller, "recorder": recorder}

    app.register_error_handler(InvalidArgument, _bad_request)
    app.register_error_handler(InvalidState, _conflict)
    _register_routes(app)
    return app


def get_controller() -> RunController:
    return current_app.extensions["sortviz"]["controller"]


def get_recorder() -> RunRecorder:
    return current_app.extensions["sortviz"]["recorder"]


def _payload() -> Dict[str, Any]:
    return request.get_json(silent=True) or {}


def _bad_request(err: InvalidArgument):
    LOG.warning("rejected request: %s", err)
    return jsonify({"error": str(err)}), 400


def _conflict(err: InvalidState):
    LOG.warning("rejected request: %s", err)
    return jsonify({"error": str(err)}), 409


def frame_json() -> Dict[str, Any]:
    """Everything the page needs to redraw, from one recorder snapshot."""
    frame = get_recorder().export()
    highlight = frame["highlight"]
    svg = render_bars(
        frame["values"],
        highlight=(highlight["kind"], highlight["indices"]) if highlight["kind"] else None,
        sorted_count=frame["sorted"],
    )
    return {
        "svg":   svg,
        "state": frame["state"],
        "stats": frame["stats"],
        "epoch": frame["epoch"],
        "size":  len(frame["values"]),
    }


# ---------------------------------------------------------------------------
# Routes
# ---------------------------------------------------------------------------
def _register_routes(app: Flask) -> None:

    @app.route("/")
    def index():
        ctl = get_controller()
        cfg = ctl.config
        frame = frame_json()

        html = render_template_string(INDEX_TEMPLATE,
            svg=frame["svg"],
            controls=run_controls(frame["state"]),
            algo_selector=algorithm_selector(list_algorithms(), selected_key=ctl.algorithm),
            sliders=sliders(
                size=ctl.size,
                speed=ctl.speed,
                size_range=(cfg.min_size, cfg.max_size),
                speed_range=(cfg.min_speed, cfg.max_speed),
            ),
            stats=stats_panel(frame["stats"]),
            info=algorithm_info(get_algorithm(ctl.algorithm)),
        )
        return html

    @app.route("/api/state")
    def api_state():
        return jsonify(frame_json())

    # -----------------------------------------------------------------
    # Config
    # -----------------------------------------------------------------
    @app.route("/api/config/size", methods=["POST"])
    def api_config_size():
        get_controller().configure_size(_payload().get("size"))
        return jsonify(frame_json())

    @app.route("/api/config/speed", methods=["POST"])
    def api_config_speed():
        ctl = get_controller()
        ctl.configure_speed(_payload().get("speed"))
        return jsonify({"speed": ctl.speed})

    @app.route("/api/config/algo", methods=["POST"])
    def api_config_algo():
        ctl = get_controller()
        ctl.select_algorithm(_payload().get("algo_key"))
        return jsonify({
            "algo_key": ctl.algorithm,
            "info":     algorithm_info(get_algorithm(ctl.algorithm)),
        })

    # -----------------------------------------------------------------
    # Sequence & run
    # -----------------------------------------------------------------
    @app.route("/api/sequence/new", methods=["POST"])
    def api_sequence_new():
        get_controller().request_new_sequence()
        return jsonify(frame_json())

    @app.route("/api/run", methods=["POST"])
    def api_run():
        ctl = get_controller()
        algo_key = _payload().get("algo_key")
        ctl.start_background(algo_key)
        return jsonify({"state": ctl.state.value, "algo_key": algo_key or ctl.algorithm}), 202

    @app.route("/api/cancel", methods=["POST"])
    def api_cancel():
        ctl = get_controller()
        ctl.cancel()
        return jsonify({"state": ctl.state.value})


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
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --accent-cyan: #0ea5e9;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --accent-rose: #f43f5e;
    }

    body {
      font-family: -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 320px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main {
      flex: 1;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      gap: 20px;
      padding: 20px;
    }

    #canvas-svg svg { max-width: 100%; height: auto; }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
    }

    .panel h3 {
      font-size: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
      margin-bottom: 12px;
      color: var(--accent-cyan);
    }

    .button-row { display: flex; gap: 8px; margin-bottom: 12px; }
    button, select, input[type=range] { width: 100%; }
    button {
      background: var(--bg-dark);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 8px;
      cursor: pointer;
    }
    button:disabled { opacity: 0.4; cursor: not-allowed; }
    .btn-primary { background: var(--accent-cyan); border-color: var(--accent-cyan); }

    select {
      background: var(--bg-dark);
      color: var(--text-primary);
      border: 1px solid var(--border);
      border-radius: 8px;
      padding: 8px;
    }

    label { display: block; margin: 8px 0 4px; color: var(--text-secondary); }
    table { width: 100%; color: var(--text-secondary); }
    td strong { color: var(--text-primary); }

    .state-badge { font-weight: 700; }
    .state-running { color: var(--accent-amber); }
    .state-completed { color: var(--accent-emerald); }
    .state-cancelled { color: var(--accent-rose); }

    .algorithm-info { max-width: 900px; width: 100%; }
    .info-title { font-weight: 700; margin-bottom: 8px; color: var(--accent-cyan); }
    .complexity { display: grid; grid-template-columns: 1fr 1fr; gap: 6px; margin-top: 10px; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="controls">{{ controls|safe }}</div>
    <div id="algo-selector-panel">{{ algo_selector|safe }}</div>
    <div id="sliders">{{ sliders|safe }}</div>
    <div id="stats">{{ stats|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-svg">{{ svg|safe }}</div>
    <div id="info">{{ info|safe }}</div>
  </div>

  <script>
    // API helpers
    async function post(url, data) {
      const res = await fetch(url, {
        method: 'POST',
        headers: {'Content-Type': 'application/json'},
        body: JSON.stringify(data),
      });
      return await res.json();
    }

    let polling = null;

    function applyFrame(data) {
      if (data.svg) document.getElementById('canvas-svg').innerHTML = data.svg;
      if (data.stats) {
        document.getElementById('stat-comparisons').textContent = data.stats.comparisons;
        document.getElementById('stat-exchanges').textContent = data.stats.exchanges;
        document.getElementById('stat-time').textContent = data.stats.elapsed_ms + 'ms';
      }
      if (data.state) {
        const badge = document.getElementById('run-state');
        badge.textContent = data.state.toUpperCase();
        badge.className = 'state-badge state-' + data.state;
        const running = data.state === 'running';
        document.getElementById('btn-start').disabled = running;
        document.getElementById('btn-new').disabled = running;
        document.getElementById('size-slider').disabled = running;
        document.getElementById('btn-stop').disabled = !running;
        if (!running && polling) { clearInterval(polling); polling = null; }
      }
    }

    async function poll() {
      const res = await fetch('/api/state');
      applyFrame(await res.json());
    }

    // Run controls
    document.getElementById('btn-start')?.addEventListener('click', async () => {
      const data = await post('/api/run', {});
      if (data.error) return;
      if (!polling) polling = setInterval(poll, 50);
    });

    document.getElementById('btn-stop')?.addEventListener('click', async () => {
      await post('/api/cancel', {});
      await poll();
    });

    document.getElementById('btn-new')?.addEventListener('click', async () => {
      applyFrame(await post('/api/sequence/new', {}));
    });

    // Settings
    document.getElementById('size-slider')?.addEventListener('input', async (e) => {
      document.getElementById('size-value').textContent = e.target.value;
      applyFrame(await post('/api/config/size', {size: +e.target.value}));
    });

    document.getElementById('speed-slider')?.addEventListener('input', async (e) => {
      document.getElementById('speed-value').textContent = e.target.value;
      await post('/api/config/speed', {speed: +e.target.value});
    });

    document.getElementById('algo-selector')?.addEventListener('change', async (e) => {
      const data = await post('/api/config/algo', {algo_key: e.target.value});
      if (data.info) document.getElementById('info').innerHTML = data.info;
    });
  </script>
</body>
</html>
"""


app = create_app()


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    LOG.info("Sorting Algorithm Visualizer on http://localhost:5000")
    app.run(debug=True, host="0.0.0.0", port=5000, use_reloader=False)
