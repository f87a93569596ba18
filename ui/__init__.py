"""
ui/
---
Presentation layer.

    from ui import render_maze
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_maze, CanvasConfig

from ui.controls import (
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

__all__ = [
    "render_maze",
    "CanvasConfig",
    "playback_controls",
    "size_selector",
    "phase_tabs",
    "algorithm_selector",
    "frontier_items",
    "frontier_panel",
    "step_panel",
    "info_panel",
    "path_banner",
    "analytics_panel",
    "comparison_panel",
    "pseudocode_viewer",
]
