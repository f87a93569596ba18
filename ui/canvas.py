"""
canvas.py — SVG Maze Renderer
==============================
Pure rendering function: Step → SVG string.

The renderer consumes:
  • step        – the current Step snapshot (its grid, cell, frontier, …)
  • config      – visual config (cell sizes, colors, fonts, …)
  • show_scores – overlay A* g / f values on each touched cell

And produces an SVG string ready to inject into the DOM.

Design decisions:
  - NO mutation.  This function is stateless — the caller passes in
    everything it needs and gets back a string.
  - Each cell gets exactly one role, highest priority first:
    current > path > open > closed > visited > plain.
  - Only walls that are still standing are drawn, so carving is
    visible as lines disappearing step after step.
"""

from typing import Dict

from maze import Coord
from algorithms.step import Step, StepKind


# ---------------------------------------------------------------------------
# Visual Config — color palette, dimensions, fonts
# ---------------------------------------------------------------------------
class CanvasConfig:
    bg:          str = "#0d1117"
    padding:     int = 8

    # cell role → fill
    cell_colors: Dict[str, str] = {
        "plain":    "#1c2128",   # not yet reached
        "visited":  "#14532d",   # reached by carving / solver
        "closed":   "#10b981",   # expanded (A* closed / explored)
        "open":     "#0ea5e9",   # on the frontier
        "path":     "#a855f7",   # final path
        "current":  "#f59e0b",   # cell of interest right now
    }

    wall_color:        str = "#e6edf3"
    wall_width:        int = 3
    coord_color:       str = "#7d8590"
    coord_size:        int = 10
    score_color:       str = "#e6edf3"
    score_size:        int = 11
    entry_marker:      str = "🚀"
    exit_marker:       str = "🏁"

    # side length of a cell in pixels for a maze of size n
    cell_sizes: Dict[int, int] = {3: 110, 4: 92, 5: 78, 6: 66, 7: 57}
    cell_size_min: int = 51

    def cell_size(self, n: int) -> int:
        if n <= 3:
            return self.cell_sizes[3]
        return self.cell_sizes.get(n, self.cell_size_min)

    def marker_size(self, n: int) -> int:
        return 26 if n <= 4 else 20 if n <= 6 else 15


CONFIG = CanvasConfig()


# ---------------------------------------------------------------------------
# Main Render Function
# ---------------------------------------------------------------------------
def render_maze(
    step: Step,
    config: CanvasConfig = CONFIG,
    show_scores: bool = False,
) -> str:
    """
    Returns an SVG string for one snapshot.

    Args:
        step        : Snapshot to draw; its grid provides the walls.
        config      : Visual config.
        show_scores : Draw g / f labels (only meaningful for A* steps).
    """
    grid = step.grid
    n    = grid.size
    cs   = config.cell_size(n)
    pad  = config.padding
    side = n * cs + 2 * pad

    svg_parts = [
        f'<svg width="{side}" height="{side}" viewBox="0 0 {side} {side}" '
        f'xmlns="http://www.w3.org/2000/svg" class="maze" data-size="{n}">',
        f'<rect width="{side}" height="{side}" fill="{config.bg}"/>',
    ]

    roles = _cell_roles(step)

    # -- fills first so walls sit on top --
    for coord in grid.coords():
        svg_parts.append(_render_cell(step, coord, roles.get(coord, "plain"), cs, config, show_scores))

    # -- walls --
    for coord in grid.coords():
        svg_parts.append(_render_walls(step, coord, cs, config))

    svg_parts.append("</svg>")
    return "\n".join(svg_parts)


# ---------------------------------------------------------------------------
# Cell roles
# ---------------------------------------------------------------------------
def _cell_roles(step: Step) -> Dict[Coord, str]:
    """Lowest priority written first; later writes win."""
    roles: Dict[Coord, str] = {}

    if step.kind in (StepKind.VISIT, StepKind.MOVE, StepKind.BACKTRACK, StepKind.COMPLETE):
        for coord in step.grid.coords():
            if step.grid.cell(coord).visited:
                roles[coord] = "visited"
    else:
        for coord in step.visited:
            roles[coord] = "visited"

    for coord in step.closed:
        roles[coord] = "closed"
    for coord in step.frontier:
        roles[coord] = "open"
    for coord in step.path:
        roles[coord] = "path"
    roles[step.cell] = "current"
    return roles


# ---------------------------------------------------------------------------
# Cell Rendering
# ---------------------------------------------------------------------------
def _render_cell(
    step: Step,
    coord: Coord,
    role: str,
    cs: int,
    config: CanvasConfig,
    show_scores: bool,
) -> str:
    x, y = coord
    n    = step.grid.size
    px   = config.padding + x * cs
    py   = config.padding + y * cs
    fill = config.cell_colors.get(role, config.cell_colors["plain"])

    parts = [
        f'<g class="cell {role}" data-x="{x}" data-y="{y}">',
        f'  <rect x="{px}" y="{py}" width="{cs}" height="{cs}" fill="{fill}"/>',
    ]

    marker = None
    if coord == (0, 0):
        marker = config.entry_marker
    elif coord == step.grid.goal:
        marker = config.exit_marker
    if marker:
        parts.append(
            f'  <text x="{px + cs / 2}" y="{py + cs / 2}" text-anchor="middle" '
            f'dominant-baseline="central" font-size="{config.marker_size(n)}">{marker}</text>'
        )
    elif show_scores:
        parts.append(_render_scores(step, coord, px, py, cs, config))

    parts.append(
        f'  <text x="{px + 4}" y="{py + cs - 4}" font-size="{config.coord_size}" '
        f'font-family="\'JetBrains Mono\', monospace" fill="{config.coord_color}">{x},{y}</text>'
    )
    parts.append("</g>")
    return "\n".join(p for p in parts if p)


def _render_scores(step: Step, coord: Coord, px: float, py: float, cs: int, config: CanvasConfig) -> str:
    g = step.g_score.get(coord)
    f = step.f_score.get(coord)
    if g is None and f is None:
        return ""
    lines = []
    if g is not None:
        lines.append(f"g:{g}")
    if f is not None:
        lines.append(f"f:{f}")
    return "\n".join(
        f'  <text class="score" x="{px + cs / 2}" y="{py + cs / 2 - 6 + i * (config.score_size + 2)}" '
        f'text-anchor="middle" font-size="{config.score_size}" '
        f'font-family="\'JetBrains Mono\', monospace" fill="{config.score_color}">{text}</text>'
        for i, text in enumerate(lines)
    )


# ---------------------------------------------------------------------------
# Wall Rendering
# ---------------------------------------------------------------------------
def _render_walls(step: Step, coord: Coord, cs: int, config: CanvasConfig) -> str:
    cell = step.grid.cell(coord)
    x0 = config.padding + coord[0] * cs
    y0 = config.padding + coord[1] * cs
    x1, y1 = x0 + cs, y0 + cs

    segments = []
    if cell.n:
        segments.append((x0, y0, x1, y0))
    if cell.e:
        segments.append((x1, y0, x1, y1))
    if cell.s:
        segments.append((x0, y1, x1, y1))
    if cell.w:
        segments.append((x0, y0, x0, y1))

    return "\n".join(
        f'<line class="wall" x1="{a}" y1="{b}" x2="{c}" y2="{d}" '
        f'stroke="{config.wall_color}" stroke-width="{config.wall_width}" stroke-linecap="square"/>'
        for a, b, c, d in segments
    )
