import pytest

from algorithms import REGISTRY, build_maze, get_algorithm, list_algorithms, solve
from algorithms.astar import manhattan
from algorithms.step import StepKind, TERMINAL_KINDS
from maze import Direction, Grid, ORIGIN


SOLVERS = ["bfs", "astar", "dijkstra"]


def two_by_two():
    """(0,0) → (1,0) → (1,1), with (0,1) hanging off (0,0)."""
    return (
        Grid.blank(2)
        .remove_wall(ORIGIN, Direction.E)
        .remove_wall((1, 0), Direction.S)
        .remove_wall(ORIGIN, Direction.S)
    )


class TestRegistry:
    def test_registry_order(self):
        assert [a.key for a in list_algorithms()] == SOLVERS

    def test_unknown_key_raises(self):
        with pytest.raises(ValueError):
            get_algorithm("dfs")

    def test_only_astar_has_heuristic(self):
        assert [k for k, a in REGISTRY.items() if a.has_heuristic] == ["astar"]

    def test_frontier_labels(self):
        assert get_algorithm("bfs").frontier_label == "BFS Queue"
        assert get_algorithm("astar").frontier_label == "A* Open Set"
        assert get_algorithm("dijkstra").frontier_label == "Dijkstra Queue"


class TestPathProperties:
    @pytest.mark.parametrize("key", SOLVERS)
    def test_path_found_on_every_maze(self, seeded_maze, key):
        run = solve(key, seeded_maze)
        assert run.found
        assert run.steps[-1].kind is StepKind.FOUND
        assert run.path[0] == ORIGIN
        assert run.path[-1] == seeded_maze.goal

    @pytest.mark.parametrize("key", SOLVERS)
    def test_path_follows_open_walls(self, seeded_maze, key):
        path = solve(key, seeded_maze).path
        for a, b in zip(path, path[1:]):
            assert seeded_maze.has_passage(a, b)
        assert len(set(path)) == len(path)

    def test_all_solvers_agree(self, seeded_maze):
        runs = [solve(k, seeded_maze) for k in SOLVERS]
        assert len({r.path for r in runs}) == 1
        assert len({r.path_length for r in runs}) == 1

    def test_path_length_bounds(self, seeded_maze):
        n = seeded_maze.size
        length = solve("bfs", seeded_maze).path_length
        assert 2 * (n - 1) <= length <= n * n - 1

    def test_astar_explores_no_more_than_bfs(self, seeded_maze):
        assert solve("astar", seeded_maze).explored <= solve("bfs", seeded_maze).explored

    def test_dijkstra_distance_equals_path_length(self, seeded_maze):
        run = solve("dijkstra", seeded_maze)
        assert run.steps[-1].distances[seeded_maze.goal] == run.path_length

    def test_astar_scores_at_goal(self, seeded_maze):
        last = solve("astar", seeded_maze).steps[-1]
        goal = seeded_maze.goal
        assert last.g_score[goal] == last.path_length
        assert last.f_score[goal] == last.path_length


class TestStepShape:
    @pytest.mark.parametrize("key", SOLVERS)
    def test_start_and_terminal(self, maze5, key):
        steps = solve(key, maze5).steps
        assert steps[0].kind is StepKind.START
        assert steps[0].cell == ORIGIN
        assert steps[-1].kind in TERMINAL_KINDS
        assert [s.is_final for s in steps].count(True) == 1

    @pytest.mark.parametrize("key", SOLVERS)
    def test_grid_is_only_read(self, maze5, key):
        for step in solve(key, maze5).steps:
            assert step.grid is maze5

    @pytest.mark.parametrize("key", SOLVERS)
    def test_path_only_on_final_step(self, maze5, key):
        steps = solve(key, maze5).steps
        assert all(s.path == () for s in steps[:-1])
        assert steps[-1].path

    @pytest.mark.parametrize("key", SOLVERS)
    def test_single_cell_maze(self, key):
        run = solve(key, build_maze(1, seed=0).grid)
        assert [s.kind for s in run.steps] == [StepKind.START, StepKind.EXPLORE, StepKind.FOUND]
        assert run.path == (ORIGIN,)
        assert run.path_length == 0

    def test_bfs_visited_grows(self, maze5):
        sizes = [len(s.visited) for s in solve("bfs", maze5).steps]
        assert sizes == sorted(sizes)

    def test_astar_frontier_sorted_by_f(self, maze5):
        for step in solve("astar", maze5).steps:
            fs = [step.f_score[c] for c in step.frontier]
            assert fs == sorted(fs)

    def test_astar_closed_never_in_frontier(self, maze5):
        for step in solve("astar", maze5).steps:
            assert not set(step.closed) & set(step.frontier)


class TestTwoByTwo:
    def test_bfs_trace(self):
        steps = solve("bfs", two_by_two()).steps
        assert [s.kind for s in steps] == [
            StepKind.START,
            StepKind.EXPLORE,   # (0,0)
            StepKind.ADD,       # (1,0)
            StepKind.ADD,       # (0,1)
            StepKind.EXPLORE,   # (1,0)
            StepKind.ADD,       # (1,1)
            StepKind.EXPLORE,   # (0,1)
            StepKind.EXPLORE,   # (1,1)
            StepKind.FOUND,
        ]
        assert steps[-1].message == "Found exit! Path length: 2"
        assert steps[-1].path == (ORIGIN, (1, 0), (1, 1))

    def test_astar_equal_f_taken_first_come(self):
        # (0,1) and (1,1) both have f=2; (0,1) joined the open set first
        run = solve("astar", two_by_two())
        explored = [s.cell for s in run.steps if s.kind is StepKind.EXPLORE]
        assert explored == [ORIGIN, (1, 0), (0, 1), (1, 1)]
        assert run.steps[-1].message == "A* found optimal path! Length: 2"

    def test_astar_add_messages_carry_scores(self):
        steps = solve("astar", two_by_two()).steps
        adds = [s.message for s in steps if s.kind is StepKind.ADD]
        assert adds == ["Add (1,0) | g=1 f=2", "Add (0,1) | g=1 f=2", "Add (1,1) | g=2 f=2"]

    def test_dijkstra_matches_bfs_order(self):
        grid = two_by_two()
        bfs_order = [s.cell for s in solve("bfs", grid).steps if s.kind is StepKind.EXPLORE]
        dij_order = [s.cell for s in solve("dijkstra", grid).steps if s.kind is StepKind.EXPLORE]
        assert dij_order == bfs_order
        assert solve("dijkstra", grid).steps[-1].message == "Dijkstra found path! Distance: 2"


class TestExhausted:
    @pytest.mark.parametrize("key", SOLVERS)
    def test_walled_in_origin(self, key):
        run = solve(key, Grid.blank(2))
        last = run.steps[-1]
        assert last.kind is StepKind.EXHAUSTED
        assert last.is_final
        assert last.path == ()
        assert not run.found
        assert run.path_length == 0

    @pytest.mark.parametrize("key", SOLVERS)
    def test_unreachable_exit(self, key):
        grid = Grid.blank(2).remove_wall(ORIGIN, Direction.E).remove_wall(ORIGIN, Direction.S)
        run = solve(key, grid)
        assert run.steps[-1].kind is StepKind.EXHAUSTED
        assert run.explored == 3


class TestHeuristic:
    def test_manhattan(self):
        assert manhattan((0, 0), (4, 4)) == 8
        assert manhattan((4, 4), (4, 4)) == 0
        assert manhattan((3, 1), (1, 2)) == 3
