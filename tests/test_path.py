from algorithms.path import reconstruct_path
from maze import Direction, ORIGIN


class TestReconstructPath:
    def test_walks_parents_back_to_origin(self):
        parents = {
            ORIGIN: (None, None),
            (1, 0): (ORIGIN, Direction.E),
            (1, 1): ((1, 0), Direction.S),
        }
        assert reconstruct_path(parents, (1, 1)) == (ORIGIN, (1, 0), (1, 1))

    def test_goal_is_origin(self):
        assert reconstruct_path({ORIGIN: (None, None)}, ORIGIN) == (ORIGIN,)

    def test_unreached_goal_gives_single_cell_path(self):
        assert reconstruct_path({ORIGIN: (None, None)}, (3, 3)) == (ORIGIN,)

    def test_result_is_a_tuple(self):
        parents = {ORIGIN: (None, None), (0, 1): (ORIGIN, Direction.S)}
        assert isinstance(reconstruct_path(parents, (0, 1)), tuple)
