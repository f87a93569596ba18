import pytest

from maze import Cell, Direction, DIRECTIONS, Grid, ORIGIN


class TestCell:
    def test_new_cell_has_all_walls(self):
        cell = Cell()
        assert all(cell.has_wall(d) for d in DIRECTIONS)
        assert cell.wall_count == 4
        assert not cell.visited

    def test_without_wall_returns_new_cell(self):
        cell = Cell()
        opened = cell.without_wall(Direction.E)
        assert cell.e
        assert not opened.e
        assert opened.wall_count == 3

    def test_to_dict_keys(self):
        assert Cell().to_dict() == {"N": True, "E": True, "S": True, "W": True, "visited": False}


class TestDirection:
    def test_opposites(self):
        assert Direction.N.opposite is Direction.S
        assert Direction.E.opposite is Direction.W
        assert Direction.S.opposite is Direction.N
        assert Direction.W.opposite is Direction.E

    def test_step(self):
        assert Direction.N.step((2, 2)) == (2, 1)
        assert Direction.E.step((2, 2)) == (3, 2)
        assert Direction.S.step((2, 2)) == (2, 3)
        assert Direction.W.step((2, 2)) == (1, 2)


class TestGrid:
    def test_blank_grid(self):
        grid = Grid.blank(3)
        assert grid.size == 3
        assert grid.area == 9
        assert grid.goal == (2, 2)
        assert grid.passage_count() == 0
        assert grid.visited_count() == 0

    def test_coords_row_major(self):
        assert list(Grid.blank(2).coords()) == [(0, 0), (1, 0), (0, 1), (1, 1)]

    def test_in_bounds(self):
        grid = Grid.blank(3)
        assert grid.in_bounds((0, 0))
        assert grid.in_bounds((2, 2))
        assert not grid.in_bounds((3, 0))
        assert not grid.in_bounds((0, -1))

    def test_remove_wall_is_symmetric(self):
        grid = Grid.blank(3).remove_wall((1, 1), Direction.S)
        assert not grid.cell((1, 1)).s
        assert not grid.cell((1, 2)).n
        assert grid.has_passage((1, 1), (1, 2))
        assert grid.has_passage((1, 2), (1, 1))
        assert grid.passage_count() == 1

    def test_remove_wall_leaves_source_grid_untouched(self):
        before = Grid.blank(3)
        after = before.remove_wall(ORIGIN, Direction.E)
        assert before.cell(ORIGIN).e
        assert before.passage_count() == 0
        assert after.passage_count() == 1

    def test_unchanged_rows_are_shared(self):
        before = Grid.blank(3)
        after = before.remove_wall(ORIGIN, Direction.E)
        assert after.cells[1] is before.cells[1]
        assert after.cells[2] is before.cells[2]

    def test_mark_visited(self):
        grid = Grid.blank(2).mark_visited((1, 0))
        assert grid.cell((1, 0)).visited
        assert grid.visited_count() == 1
        assert grid.mark_visited((1, 0)) is grid

    def test_open_neighbours_skip_outer_and_closed_walls(self):
        grid = Grid.blank(2)
        assert grid.open_neighbours(ORIGIN) == []
        grid = grid.remove_wall(ORIGIN, Direction.S)
        assert grid.open_neighbours(ORIGIN) == [(Direction.S, (0, 1))]

    def test_unvisited_neighbours_in_compass_order(self):
        grid = Grid.blank(3).mark_visited((1, 0))
        nbrs = grid.unvisited_neighbours((1, 1))
        assert [d for d, _ in nbrs] == [Direction.E, Direction.S, Direction.W]

    def test_has_passage_requires_adjacency(self):
        grid = Grid.blank(3)
        assert not grid.has_passage((0, 0), (2, 2))

    def test_out_of_range_cell_raises(self):
        with pytest.raises(IndexError):
            Grid.blank(2).cell((0, 5))

    def test_to_ascii(self):
        grid = Grid.blank(2).remove_wall(ORIGIN, Direction.E)
        lines = grid.to_ascii().splitlines()
        assert lines[0] == "+--+--+"
        assert lines[1] == "|     |"
        assert len(lines) == 5

    def test_to_dict_shape(self):
        data = Grid.blank(2).to_dict()
        assert data["size"] == 2
        assert len(data["cells"]) == 2
        assert data["cells"][0][0]["N"] is True
