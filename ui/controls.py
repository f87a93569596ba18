"""
controls.py — UI Control Panels
=================================
Every UI panel is a pure function that takes state and returns HTML.

Panels:
  • playback_controls   – play/pause/next/prev/rewind/end/speed
  • size_selector       – maze side length buttons
  • phase_tabs          – Generate / Solve tabs
  • algorithm_selector  – BFS / A* / Dijkstra pills + score toggle
  • frontier_panel      – carving stack / queue / open set / priority list
  • step_panel          – counter, progress bar, step kind, message
  • info_panel          – one-paragraph description of the algorithm
  • path_banner         – "Path found!" strip
  • analytics_panel     – explored cells, path length, steps, …
  • comparison_panel    – all solvers side by side on the same maze
  • pseudocode_viewer   – with live line highlighting

Design:
  - All panels are stateless render functions.
  - State is passed in as kwargs.
  - Output is raw HTML strings (no templating engine).
  - The main app stitches them together.
"""

from html import escape
from typing import Iterable, List, Optional

from algorithms import AlgoInfo
from algorithms.step import Step
from engine import RunMetrics


FRONTIER_LIMIT = 12


# ---------------------------------------------------------------------------
# Playback Controls
# ---------------------------------------------------------------------------
def playback_controls(
    is_playing: bool = False,
    at_start: bool = True,
    at_end: bool = False,
    speed: str = "medium",
) -> str:
    play_icon = "⏸ PAUSE" if is_playing else "▶ PLAY"
    play_cls  = "btn-red" if is_playing else "btn-green"

    return f"""
    <div class="panel playback-controls">
      <h3>⏯ Playback</h3>
      <div class="button-row">
        <button id="btn-rewind" title="Rewind to start">⏮</button>
        <button id="btn-prev" title="Previous step" {'disabled' if at_start else ''}>◀</button>
        <button id="btn-play" class="{play_cls}">{play_icon}</button>
        <button id="btn-next" title="Next step" {'disabled' if at_end else ''}>▶</button>
        <button id="btn-end" title="Jump to end">⏭</button>
      </div>
      <div class="speed-control">
        <label>Speed:</label>
        <select id="speed-selector">
          <option value="slow" {'selected' if speed == 'slow' else ''}>Slow (teaching)</option>
          <option value="medium" {'selected' if speed == 'medium' else ''}>Medium</option>
          <option value="fast" {'selected' if speed == 'fast' else ''}>Fast (demo)</option>
          <option value="turbo" {'selected' if speed == 'turbo' else ''}>Turbo</option>
        </select>
      </div>
    </div>
    """


# ---------------------------------------------------------------------------
# Size Selector
# ---------------------------------------------------------------------------
def size_selector(sizes: Iterable[int], selected: int) -> str:
    buttons = []
    for n in sizes:
        active = "active" if n == selected else ""
        buttons.append(f'<button class="size-btn {active}" data-size="{n}">{n}×{n}</button>')

    return f"""
    <div class="panel size-selector">
      <h3>📐 Maze Size</h3>
      <div class="button-row wrap">
        {''.join(buttons)}
      </div>
      <button id="btn-new-maze" class="btn-secondary">🔀 New Maze</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Phase Tabs
# ---------------------------------------------------------------------------
def phase_tabs(phase: str = "generate") -> str:
    gen_cls   = "tab-btn active" if phase == "generate" else "tab-btn"
    solve_cls = "tab-btn active" if phase == "solve" else "tab-btn"
    return f"""
    <div class="tabs">
      <button id="tab-gen" class="{gen_cls}" data-phase="generate">1 · Generate</button>
      <button id="tab-solve" class="{solve_cls}" data-phase="solve">2 · Solve</button>
    </div>
    """


# ---------------------------------------------------------------------------
# Algorithm Selector
# ---------------------------------------------------------------------------
def algorithm_selector(
    algorithms: List[AlgoInfo],
    selected_key: str = "bfs",
    show_scores: bool = False,
    phase: str = "generate",
) -> str:
    pills = []
    for algo in algorithms:
        active = f"active-{algo.key}" if algo.key == selected_key else ""
        pills.append(
            f'<button class="algo-pill {active}" data-algo="{algo.key}" '
            f'title="{algo.complexity_time}">{escape(algo.label)}</button>'
        )

    score_toggle = ""
    if phase == "solve":
        score_toggle = f"""
      <label id="score-toggle-label">
        <input type="checkbox" id="score-toggle" {'checked' if show_scores else ''}>
        Show g / f scores
      </label>
        """

    return f"""
    <div class="panel algorithm-selector">
      <h3>🧠 Solver</h3>
      <div class="button-row wrap">
        {''.join(pills)}
      </div>
      {score_toggle}
    </div>
    """


# ---------------------------------------------------------------------------
# Frontier Panel (stack / queue / open set / priority list)
# ---------------------------------------------------------------------------
def frontier_items(step: Step, phase: str, algo_key: str) -> List[str]:
    """Display strings for the frontier of `step`, in panel order."""
    if phase == "generate":
        return [f"({x},{y})" for x, y in reversed(step.stack)]
    if algo_key == "astar":
        return [f"({x},{y}) f={step.f_score.get((x, y), '?')}" for x, y in step.frontier]
    if algo_key == "dijkstra":
        return [f"({x},{y}) d={step.distances.get((x, y), '∞')}" for x, y in step.frontier]
    return [f"({x},{y})" for x, y in step.frontier]


def frontier_panel(label: str, items: List[str], limit: int = FRONTIER_LIMIT) -> str:
    if items:
        body = "".join(f'<div class="stack-item">{escape(t)}</div>' for t in items[:limit])
        if len(items) > limit:
            body += f'<div class="stack-more">+{len(items) - limit} more...</div>'
    else:
        body = '<span class="stack-empty">empty</span>'

    return f"""
    <div class="panel frontier-panel">
      <h3 id="stack-label">{escape(label)}</h3>
      <div id="stack-list">{body}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Step Panel
# ---------------------------------------------------------------------------
def step_panel(step: Step, index: int, total: int, progress: float) -> str:
    return f"""
    <div class="step-panel">
      <div class="step-info">
        Step <span id="current-step">{index + 1}</span> / <span id="total-steps">{total}</span>
        {' <span class="finished-badge">FINISHED</span>' if step.is_final and index == total - 1 else ''}
      </div>
      <div class="progress"><div id="progress-fill" style="width: {progress * 100:.1f}%"></div></div>
      <div id="step-type" class="step-type {step.kind.value}">{step.kind.value.upper()}</div>
      <div id="step-msg" class="step-msg">{escape(step.message)}</div>
    </div>
    """


# ---------------------------------------------------------------------------
# Info Panel
# ---------------------------------------------------------------------------
def info_panel(info: AlgoInfo) -> str:
    return f"""
    <div class="panel info-panel">
      <h3>💡 {escape(info.label)}</h3>
      <p id="algo-info-text" class="explanation-text">{escape(info.description)}</p>
      <p class="hint">Time {info.complexity_time} · Space {info.complexity_space}</p>
    </div>
    """


# ---------------------------------------------------------------------------
# Path Banner
# ---------------------------------------------------------------------------
def path_banner(step: Step, phase: str) -> str:
    if phase == "solve" and len(step.path) > 1:
        return f'<div id="path-banner" class="show">✅ Path found! Length: {step.path_length} steps</div>'
    return '<div id="path-banner"></div>'


# ---------------------------------------------------------------------------
# Analytics Panel
# ---------------------------------------------------------------------------
def analytics_panel(metrics: Optional[RunMetrics] = None) -> str:
    if not metrics:
        return """
        <div class="panel analytics-panel">
          <h3>📊 Analytics</h3>
          <p class="placeholder">Solve the maze to see metrics.</p>
        </div>
        """

    path_status = "✅ Found" if metrics.path_found else "❌ Not Found"

    return f"""
    <div class="panel analytics-panel">
      <h3>📊 Analytics — {escape(metrics.algo_label)}</h3>
      <table>
        <tr><td>Cells Explored:</td><td><strong>{metrics.explored}</strong></td></tr>
        <tr><td>Frontier Adds:</td><td><strong>{metrics.added}</strong></td></tr>
        <tr><td>Path Length:</td><td><strong>{metrics.path_length} moves</strong></td></tr>
        <tr><td>Total Steps:</td><td><strong>{metrics.total_steps}</strong></td></tr>
        <tr><td>Wall Time:</td><td><strong>{metrics.wall_time_ms:.2f} ms</strong></td></tr>
        <tr><td>Path:</td><td><strong>{path_status}</strong></td></tr>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Comparison Panel (side-by-side)
# ---------------------------------------------------------------------------
def comparison_panel(results: Optional[List[RunMetrics]] = None) -> str:
    if not results:
        return """
        <div class="panel comparison-panel">
          <h3>⚖️ Comparison</h3>
          <p class="placeholder">Compare every solver on the current maze.</p>
          <button id="btn-compare" class="btn-secondary">Compare Solvers</button>
        </div>
        """

    fewest = min(m.explored for m in results)
    rows = []
    for m in results:
        badge = " 👑" if m.explored == fewest else ""
        rows.append(
            f"<tr><td>{escape(m.algo_label)}{badge}</td><td>{m.explored}</td>"
            f"<td>{m.path_length}</td><td>{m.total_steps}</td></tr>"
        )

    return f"""
    <div class="panel comparison-panel">
      <h3>⚖️ Comparison</h3>
      <table class="comparison-table">
        <thead>
          <tr><th>Solver</th><th>Explored</th><th>Path</th><th>Steps</th></tr>
        </thead>
        <tbody>
          {''.join(rows)}
        </tbody>
      </table>
    </div>
    """


# ---------------------------------------------------------------------------
# Pseudocode Viewer
# ---------------------------------------------------------------------------
def pseudocode_viewer(
    pseudocode_lines: List[str],
    current_line: int = -1,
) -> str:
    lines_html = []
    for i, line in enumerate(pseudocode_lines):
        highlight = 'highlight' if i == current_line else ''
        lines_html.append(f'<div class="code-line {highlight}" data-line="{i}">{escape(line)}</div>')

    return f"""
    <div class="code-block">
      {''.join(lines_html)}
    </div>
    """
