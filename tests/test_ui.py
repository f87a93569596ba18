from html import escape

from algorithms import GENERATOR, build_maze, get_algorithm, list_algorithms, solve
from algorithms.step import StepKind
from engine import RunMetrics
from ui import (
    render_maze,
    algorithm_selector,
    analytics_panel,
    comparison_panel,
    frontier_items,
    frontier_panel,
    info_panel,
    path_banner,
    playback_controls,
    pseudocode_viewer,
    size_selector,
    step_panel,
)


class TestCanvas:
    def test_svg_has_one_group_per_cell(self, maze5):
        step = solve("bfs", maze5).steps[-1]
        svg = render_maze(step)
        assert svg.startswith("<svg")
        assert svg.endswith("</svg>")
        assert svg.count('class="cell ') == 25

    def test_blank_grid_draws_every_wall(self):
        step = build_maze(3, seed=0).steps[0]
        assert render_maze(step).count('class="wall"') == 9 * 4

    def test_path_cells_marked(self, maze5):
        step = solve("astar", maze5).steps[-1]
        svg = render_maze(step)
        assert svg.count('class="cell path"') == len(step.path) - 1     # the current cell wins

    def test_scores_only_when_requested(self, maze5):
        step = solve("astar", maze5).steps[-1]
        assert 'class="score"' not in render_maze(step)
        assert 'class="score"' in render_maze(step, show_scores=True)

    def test_markers(self):
        svg = render_maze(build_maze(5, seed=42).steps[-1])
        assert "🚀" in svg and "🏁" in svg


class TestFrontier:
    def test_generation_stack_reversed(self):
        steps = build_maze(5, seed=42).steps
        step = next(s for s in steps if len(s.stack) >= 2)
        items = frontier_items(step, "generate", "bfs")
        assert items[0] == f"({step.stack[-1][0]},{step.stack[-1][1]})"

    def test_astar_items_carry_f(self, maze5):
        step = solve("astar", maze5).steps[2]
        items = frontier_items(step, "solve", "astar")
        assert items
        assert all(" f=" in item for item in items)

    def test_dijkstra_items_carry_d(self, maze5):
        step = solve("dijkstra", maze5).steps[2]
        items = frontier_items(step, "solve", "dijkstra")
        assert items
        assert all(" d=" in item for item in items)

    def test_panel_caps_items(self):
        html = frontier_panel("BFS Queue", [f"({i},0)" for i in range(15)])
        assert html.count('class="stack-item"') == 12
        assert "+3 more..." in html

    def test_empty_panel(self):
        assert "empty" in frontier_panel("DFS Stack", [])


class TestPanels:
    def test_step_panel(self, maze5):
        step = solve("bfs", maze5).steps[0]
        html = step_panel(step, 0, 10, 0.0)
        assert "START" in html
        assert "BFS from (0,0)" in html
        assert 'id="total-steps">10<' in html

    def test_path_banner_only_when_solved(self, maze5):
        run = solve("bfs", maze5)
        assert "show" in path_banner(run.steps[-1], "solve")
        assert "show" not in path_banner(run.steps[0], "solve")
        assert "show" not in path_banner(build_maze(5, seed=42).steps[-1], "generate")

    def test_selectors(self):
        assert algorithm_selector(list_algorithms(), "astar").count('class="algo-pill') == 3
        assert "active-astar" in algorithm_selector(list_algorithms(), "astar")
        assert 'data-size="8"' in size_selector(range(1, 9), 8)
        assert "⏸ PAUSE" in playback_controls(is_playing=True)

    def test_info_and_pseudocode(self):
        info = get_algorithm("dijkstra")
        assert escape(info.label) in info_panel(info)
        html = pseudocode_viewer(GENERATOR.pseudocode, current_line=3)
        assert html.count("code-line highlight") == 1

    def test_comparison_crowns_fewest_explored(self):
        results = [
            RunMetrics(algo_key="bfs", algo_label="BFS", explored=10, path_length=8),
            RunMetrics(algo_key="astar", algo_label="A*", explored=6, path_length=8),
        ]
        html = comparison_panel(results)
        assert "A* 👑" in html
        assert "BFS 👑" not in html

    def test_step_kind_css_class(self, maze5):
        step = solve("bfs", maze5).steps[-1]
        assert step.kind is StepKind.FOUND
        assert 'step-type found' in step_panel(step, 5, 6, 1.0)

    def test_labels_are_escaped_everywhere(self):
        label = get_algorithm("dijkstra").label
        metrics = RunMetrics(algo_key="dijkstra", algo_label=label, explored=3, path_length=2)
        for html in (
            analytics_panel(metrics),
            comparison_panel([metrics]),
            algorithm_selector(list_algorithms(), "dijkstra"),
        ):
            assert escape(label) in html
            assert label not in html
