"""
main.py — Maze Algorithm Visualizer Flask App
===============================================
The web server that powers the visualizer.

Routes:
  GET  /                       – main UI
  GET  /api/state              – current state + rendered panels
  POST /api/maze/generate      – carve a new maze (optional seed)
  POST /api/config/size        – change the maze side length
  POST /api/config/algo        – select BFS / A* / Dijkstra
  POST /api/config/speed       – select a speed preset
  POST /api/config/scores      – toggle g / f score labels
  POST /api/phase              – switch between generate and solve
  POST /api/step/next          – advance one step
  POST /api/step/prev          – rewind one step
  POST /api/step/goto          – jump to step N
  POST /api/step/play          – toggle play/pause
  POST /api/step/tick          – one auto-play tick (client timer)
  GET  /api/compare            – run every solver on the current maze

State management:
  The Flask session holds the serialised visualizer Session only
  (size, seed, phase, solver, playback cursor).  Step sequences are
  recomputed from (size, seed) and memoised server-side, so the
  cookie stays small.  Each user's session also keeps:
    • show_scores     – whether A* g / f labels are drawn
"""

from flask import Flask, render_template_string, request, jsonify, session
import logging
import secrets

from algorithms import GENERATOR, get_algorithm, list_algorithms
from algorithms.step import step_to_dict
from engine import compare_all, stepper
from engine import session as sessions
from engine.session import Session, SIZES
from ui import (
    render_maze,
    playback_controls,
    size_selector,
    phase_tabs,
    algorithm_selector,
    frontier_items,
    frontier_panel,
    step_panel,
    info_panel,
    path_banner,
    analytics_panel,
    comparison_panel,
    pseudocode_viewer,
)


app = Flask(__name__)
app.config.from_mapping(
    SECRET_KEY=secrets.token_hex(32),
    MAZE_DEFAULT_SIZE=sessions.DEFAULT_SIZE,
    MAZE_DEFAULT_ALGO=sessions.DEFAULT_ALGO,
    MAZE_DEFAULT_SPEED="medium",
)
app.config.from_prefixed_env()


# ---------------------------------------------------------------------------
# Session State Helpers
# ---------------------------------------------------------------------------
def load_session() -> Session:
    """Deserialise the visualizer session, or carve the default maze."""
    data = session.get("maze")
    if data is not None:
        try:
            return Session.from_dict(data)
        except (KeyError, TypeError, ValueError) as exc:
            app.logger.warning("discarding unreadable session state: %s", exc)

    speed = stepper.SPEED_PRESETS.get(app.config["MAZE_DEFAULT_SPEED"], stepper.SPEED_PRESETS["medium"])
    fresh = sessions.new_session(
        size=int(app.config["MAZE_DEFAULT_SIZE"]),
        algo_key=app.config["MAZE_DEFAULT_ALGO"],
        speed=speed,
    )
    save_session(fresh)
    return fresh


def save_session(sess: Session):
    session["maze"] = sess.to_dict()


def request_data() -> dict:
    return request.get_json(silent=True) or {}


def speed_name(seconds: float) -> str:
    for name, value in stepper.SPEED_PRESETS.items():
        if value == seconds:
            return name
    return "custom"


def render_state(sess: Session) -> dict:
    """Everything the page needs to redraw itself for `sess`."""
    step  = sessions.current_step(sess)
    pb    = sess.playback
    algo  = get_algorithm(sess.algo_key)
    info  = GENERATOR if sess.phase == "generate" else algo
    show_scores = session.get("show_scores", False) and sess.algo_key == "astar"

    metrics = None
    if sess.phase == "solve" and pb.at_end:
        metrics = sessions.solve_metrics(sess.size, sess.seed, sess.algo_key)

    return {
        "state":  sess.to_dict(),
        "step":   step_to_dict(step, include_grid=False),
        "svg":    render_maze(step, show_scores=show_scores),
        "panels": {
            "phase_tabs": phase_tabs(sess.phase),
            "size":       size_selector(SIZES, sess.size),
            "algo":       algorithm_selector(
                list_algorithms(), sess.algo_key,
                show_scores=session.get("show_scores", False), phase=sess.phase,
            ),
            "playback":   playback_controls(
                is_playing=pb.is_playing, at_start=pb.at_start,
                at_end=pb.at_end, speed=speed_name(pb.speed),
            ),
            "step":       step_panel(step, pb.index, pb.total, stepper.progress(pb)),
            "frontier":   frontier_panel(info.frontier_label, frontier_items(step, sess.phase, sess.algo_key)),
            "banner":     path_banner(step, sess.phase),
            "info":       info_panel(info),
            "pseudocode": pseudocode_viewer(info.pseudocode, step.pseudocode_line),
            "analytics":  analytics_panel(metrics),
        },
    }


def update(sess: Session):
    save_session(sess)
    return jsonify(render_state(sess))


@app.errorhandler(ValueError)
def handle_value_error(exc):
    return jsonify({"error": str(exc)}), 400


# ---------------------------------------------------------------------------
# Main UI Route
# ---------------------------------------------------------------------------
@app.route("/")
def index():
    sess  = load_session()
    state = render_state(sess)
    return render_template_string(
        INDEX_TEMPLATE,
        svg=state["svg"],
        comparison=comparison_panel(),
        **state["panels"],
    )


@app.route("/api/state")
def api_state():
    return jsonify(render_state(load_session()))


# ---------------------------------------------------------------------------
# API: Maze & Config Changes
# ---------------------------------------------------------------------------
@app.route("/api/maze/generate", methods=["POST"])
def api_maze_generate():
    seed = request_data().get("seed")
    sess = sessions.regenerate(load_session(), None if seed is None else int(seed))
    app.logger.info("new %dx%d maze (seed=%d)", sess.size, sess.size, sess.seed)
    return update(sess)


@app.route("/api/config/size", methods=["POST"])
def api_config_size():
    size = request_data().get("size")
    if size is None:
        return jsonify({"error": "Missing size"}), 400
    return update(sessions.change_size(load_session(), int(size)))


@app.route("/api/config/algo", methods=["POST"])
def api_config_algo():
    algo_key = request_data().get("algo_key", sessions.DEFAULT_ALGO)
    return update(sessions.switch_algorithm(load_session(), algo_key))


@app.route("/api/config/speed", methods=["POST"])
def api_config_speed():
    sess = load_session()
    pb = stepper.set_speed(sess.playback, request_data().get("speed", "medium"))
    return update(sessions.with_playback(sess, pb))


@app.route("/api/config/scores", methods=["POST"])
def api_config_scores():
    session["show_scores"] = bool(request_data().get("show", False))
    return jsonify(render_state(load_session()))


@app.route("/api/phase", methods=["POST"])
def api_phase():
    phase = request_data().get("phase", "generate")
    return update(sessions.switch_phase(load_session(), phase))


# ---------------------------------------------------------------------------
# API: Step Navigation
# ---------------------------------------------------------------------------
@app.route("/api/step/next", methods=["POST"])
def api_step_next():
    sess = load_session()
    if sess.playback.at_end:
        return jsonify({"error": "Already at last step"}), 400
    return update(sessions.with_playback(sess, stepper.next_step(sess.playback)))


@app.route("/api/step/prev", methods=["POST"])
def api_step_prev():
    sess = load_session()
    if sess.playback.at_start:
        return jsonify({"error": "Already at first step"}), 400
    return update(sessions.with_playback(sess, stepper.prev_step(sess.playback)))


@app.route("/api/step/goto", methods=["POST"])
def api_step_goto():
    sess = load_session()
    idx  = request_data().get("index", 0)

    if idx == "end":
        return update(sessions.with_playback(sess, stepper.jump_to_end(sess.playback)))
    if not isinstance(idx, int) or not 0 <= idx < sess.playback.total:
        return jsonify({"error": "Invalid step index"}), 400
    return update(sessions.with_playback(sess, stepper.goto_step(sess.playback, idx)))


@app.route("/api/step/play", methods=["POST"])
def api_step_play():
    sess = load_session()
    return update(sessions.with_playback(sess, stepper.toggle_play(sess.playback)))


@app.route("/api/step/tick", methods=["POST"])
def api_step_tick():
    sess = load_session()
    return update(sessions.tick(sess))


# ---------------------------------------------------------------------------
# API: Comparison
# ---------------------------------------------------------------------------
@app.route("/api/compare")
def api_compare():
    sess    = load_session()
    results = compare_all(sessions.final_grid(sess))
    return jsonify({
        "results":    [vars(m) for m in results],
        "comparison": comparison_panel(results),
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
  <title>Maze Algorithm Visualizer</title>
  <link rel="preconnect" href="https://fonts.googleapis.com">
  <link rel="preconnect" href="https://fonts.gstatic.com" crossorigin>
  <link href="https://fonts.googleapis.com/css2?family=JetBrains+Mono:wght@400;500;700&family=DM+Sans:wght@400;500;700&display=swap" rel="stylesheet">
  <style>
    * { margin: 0; padding: 0; box-sizing: border-box; }

    :root {
      --bg-dark: #0d1117;
      --bg-darker: #010409;
      --bg-panel: #161b22;
      --bg-panel-hover: #1c2128;
      --border: #30363d;
      --text-primary: #e6edf3;
      --text-secondary: #7d8590;
      --text-muted: #484f58;
      --accent-cyan: #0ea5e9;
      --accent-teal: #06b6d4;
      --accent-emerald: #10b981;
      --accent-amber: #f59e0b;
      --accent-rose: #f43f5e;
      --accent-purple: #a855f7;
    }

    body {
      font-family: 'DM Sans', -apple-system, BlinkMacSystemFont, sans-serif;
      background: var(--bg-darker);
      color: var(--text-primary);
      display: flex;
      height: 100vh;
      overflow: hidden;
    }

    #sidebar {
      width: 340px;
      background: var(--bg-dark);
      border-right: 1px solid var(--border);
      overflow-y: auto;
      padding: 24px 16px;
    }

    #main { flex: 1; display: flex; flex-direction: column; }

    #canvas-container {
      flex: 1;
      display: flex;
      flex-direction: column;
      align-items: center;
      justify-content: center;
      gap: 12px;
      border-bottom: 1px solid var(--border);
    }

    #bottom-panel {
      display: grid;
      grid-template-columns: 1fr 1fr 1fr;
      gap: 20px;
      padding: 20px;
      background: var(--bg-dark);
      max-height: 340px;
      overflow: hidden;
    }

    .panel {
      background: var(--bg-panel);
      border: 1px solid var(--border);
      border-radius: 12px;
      padding: 18px;
      margin-bottom: 16px;
      overflow: auto;
    }

    .panel h3 {
      font-size: 13px;
      font-weight: 700;
      margin-bottom: 14px;
      text-transform: uppercase;
      letter-spacing: 0.5px;
    }

    .button-row { display: flex; gap: 8px; margin-bottom: 12px; }
    .button-row.wrap { flex-wrap: wrap; }

    button {
      background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal));
      color: #fff;
      border: none;
      padding: 10px 16px;
      border-radius: 8px;
      cursor: pointer;
      font-size: 13px;
      font-weight: 600;
      font-family: 'DM Sans', sans-serif;
    }
    button:disabled { opacity: 0.4; cursor: default; }
    .btn-green { background: linear-gradient(135deg, var(--accent-emerald), #059669); }
    .btn-red { background: linear-gradient(135deg, var(--accent-rose), #be123c); }
    .btn-secondary { background: var(--bg-panel-hover); border: 1px solid var(--border); }

    .size-btn, .algo-pill { background: var(--bg-panel-hover); border: 1px solid var(--border); }
    .size-btn.active, .algo-pill.active-bfs { background: var(--accent-cyan); }
    .algo-pill.active-astar { background: var(--accent-amber); }
    .algo-pill.active-dijkstra { background: var(--accent-purple); }

    select {
      width: 100%;
      padding: 10px 12px;
      margin: 6px 0;
      background: var(--bg-darker);
      border: 1px solid var(--border);
      border-radius: 8px;
      color: var(--text-primary);
    }

    label { display: block; margin: 10px 0 4px; font-size: 12px; color: var(--text-secondary); }

    .tabs { display: flex; gap: 6px; margin-bottom: 14px; background: var(--bg-darker); padding: 4px; border-radius: 8px; }
    .tab-btn { flex: 1; background: transparent; }
    .tab-btn.active { background: linear-gradient(135deg, var(--accent-cyan), var(--accent-teal)); }

    .step-panel { width: 480px; }
    .step-info {
      font-size: 13px;
      color: var(--text-secondary);
      font-family: 'JetBrains Mono', monospace;
      padding: 8px 12px;
      background: var(--bg-panel);
      border-radius: 6px;
      border-left: 3px solid var(--accent-cyan);
    }
    .finished-badge { background: var(--accent-emerald); color: #fff; padding: 2px 8px; border-radius: 6px; font-size: 11px; }
    .progress { height: 4px; background: var(--border); border-radius: 2px; margin: 8px 0; }
    #progress-fill { height: 100%; background: var(--accent-cyan); border-radius: 2px; }
    .step-type { font-family: 'JetBrains Mono', monospace; font-size: 12px; font-weight: 700; color: var(--accent-amber); }
    .step-type.found, .step-type.complete { color: var(--accent-emerald); }
    .step-type.exhausted { color: var(--accent-rose); }
    .step-msg { font-size: 14px; margin-top: 4px; }

    #path-banner { display: none; color: var(--accent-purple); font-weight: 700; }
    #path-banner.show { display: block; }

    .stack-item { font-family: 'JetBrains Mono', monospace; font-size: 12px; padding: 3px 8px; border-bottom: 1px solid var(--border); }
    .stack-more, .stack-empty, .placeholder, .hint { font-size: 11px; color: var(--text-muted); font-style: italic; }

    .code-block { font-family: 'JetBrains Mono', monospace; font-size: 12px; line-height: 1.6; white-space: pre; }
    .code-line { padding: 2px 8px; border-radius: 4px; }
    .code-line.highlight { background: rgba(6, 182, 212, 0.15); border-left: 3px solid var(--accent-cyan); }

    .explanation-text { color: var(--text-secondary); line-height: 1.7; font-size: 14px; }

    table { width: 100%; font-size: 13px; }
    table td, table th { padding: 6px 4px; text-align: left; }
    table td:last-child { font-family: 'JetBrains Mono', monospace; }
  </style>
</head>
<body>
  <div id="sidebar">
    <div id="phase_tabs">{{ phase_tabs|safe }}</div>
    <div id="size">{{ size|safe }}</div>
    <div id="algo">{{ algo|safe }}</div>
    <div id="playback">{{ playback|safe }}</div>
    <div id="analytics">{{ analytics|safe }}</div>
    <div id="comparison">{{ comparison|safe }}</div>
  </div>

  <div id="main">
    <div id="canvas-container">
      <div id="canvas-svg">{{ svg|safe }}</div>
      <div id="banner">{{ banner|safe }}</div>
      <div id="step">{{ step|safe }}</div>
    </div>

    <div id="bottom-panel">
      <div class="panel"><h3>Pseudocode</h3><div id="pseudocode">{{ pseudocode|safe }}</div></div>
      <div id="frontier">{{ frontier|safe }}</div>
      <div id="info">{{ info|safe }}</div>
    </div>
  </div>

  <script>
    let state = null;
    let timer = null;

    async function call(url, data, method = 'POST') {
      const opts = {method};
      if (method === 'POST') {
        opts.headers = {'Content-Type': 'application/json'};
        opts.body = JSON.stringify(data || {});
      }
      const res = await fetch(url, opts);
      const json = await res.json();
      if (!res.ok) { console.warn(json.error); return null; }
      return json;
    }

    function apply(data) {
      if (!data || !data.panels) return;
      state = data.state;
      document.getElementById('canvas-svg').innerHTML = data.svg;
      for (const [id, html] of Object.entries(data.panels)) {
        const el = document.getElementById(id);
        if (el) el.innerHTML = html;
      }
      schedule();
    }

    // Auto-play: the server owns the cursor, the page owns the clock
    function schedule() {
      clearTimeout(timer);
      if (state && state.playback.state === 'playing') {
        timer = setTimeout(async () => apply(await call('/api/step/tick')), state.playback.speed * 1000);
      }
    }

    document.addEventListener('click', async (e) => {
      const btn = e.target.closest('button');
      if (!btn) return;
      if (btn.dataset.phase) return apply(await call('/api/phase', {phase: btn.dataset.phase}));
      if (btn.dataset.size) return apply(await call('/api/config/size', {size: +btn.dataset.size}));
      if (btn.dataset.algo) return apply(await call('/api/config/algo', {algo_key: btn.dataset.algo}));
      switch (btn.id) {
        case 'btn-new-maze': return apply(await call('/api/maze/generate'));
        case 'btn-next':     return apply(await call('/api/step/next'));
        case 'btn-prev':     return apply(await call('/api/step/prev'));
        case 'btn-rewind':   return apply(await call('/api/step/goto', {index: 0}));
        case 'btn-end':      return apply(await call('/api/step/goto', {index: 'end'}));
        case 'btn-play':     return apply(await call('/api/step/play'));
        case 'btn-compare': {
          const data = await call('/api/compare', null, 'GET');
          if (data) document.getElementById('comparison').innerHTML = data.comparison;
        }
      }
    });

    document.addEventListener('change', async (e) => {
      if (e.target.id === 'speed-selector') apply(await call('/api/config/speed', {speed: e.target.value}));
      if (e.target.id === 'score-toggle') apply(await call('/api/config/scores', {show: e.target.checked}));
    });

    call('/api/state', null, 'GET').then(apply);
  </script>
</body>
</html>
"""


# ---------------------------------------------------------------------------
# Run
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    app.logger.info("Maze Algorithm Visualizer on http://localhost:5000")
    app.run(debug=True, port=5000)
