import pytest

from sphgrid.hgrid import HGrid, cell_range, cell_range_around


def test_grid_neighbor_iterator():
    expected = [
        (-1, 0), (0, 0), (1, 0), (2, 0), (3, 0),
        (-1, 1), (0, 1), (1, 1), (2, 1), (3, 1),
        (-1, 2), (0, 2), (1, 2), (2, 2), (3, 2),
        (-1, 3), (0, 3), (1, 3), (2, 3), (3, 3),
    ]
    cells = list(cell_range_around((1, 2), 2))
    assert cells[: len(expected)] == expected
    assert len(cells) == 25
    assert cells[-1] == (3, 4)


def test_cell_range_3d_order_and_count():
    cells = list(cell_range((0, 0, 0), (1, 1, 1)))
    assert len(cells) == 8
    assert cells[0] == (0, 0, 0)
    assert cells[1] == (1, 0, 0)
    assert cells[-1] == (1, 1, 1)


def test_cell_range_single_cell():
    assert list(cell_range((4, -2), (4, -2))) == [(4, -2)]


def test_cell_range_empty_when_start_after_end():
    assert list(cell_range((2, 0), (1, 0))) == []


def test_cell_range_dimension_mismatch():
    with pytest.raises(ValueError):
        list(cell_range((0, 0), (1, 1, 1)))


def test_key_floors_coordinates():
    grid = HGrid(0.5)
    assert grid.key((0.7, -0.1)) == (1, -1)
    assert grid.key((0.0, 0.0, 1.0)) == (0, 0, 2)


def test_insert_and_lookup():
    grid = HGrid(1.0)
    grid.insert((0.2, 0.3), "a")
    grid.insert((0.9, 0.1), "b")
    grid.insert((1.5, 0.1), "c")
    assert grid.cell_containing_point((0.5, 0.5)) == ["a", "b"]
    assert grid.cell((1, 0)) == ["c"]
    assert grid.cell((5, 5)) is None
    assert grid.cell_containing_point((-3.0, 0.0)) is None
    assert dict(grid.cells()) == {(0, 0): ["a", "b"], (1, 0): ["c"]}


def test_clear_removes_everything():
    grid = HGrid(1.0)
    grid.insert((0.0, 0.0), 1)
    grid.clear()
    assert list(grid.cells()) == []
    assert len(grid) == 0


def test_neighbor_cells_includes_self_and_adjacent():
    grid = HGrid(1.0)
    grid.insert((0.5, 0.5), "center")
    grid.insert((1.5, 1.5), "diag")
    grid.insert((3.5, 0.5), "far")
    found = dict(grid.neighbor_cells((0, 0), 1.0))
    assert found == {(0, 0): ["center"], (1, 1): ["diag"]}


def test_neighbor_cells_radius_rounds_up():
    grid = HGrid(1.0)
    grid.insert((2.5, 0.5), "two_away")
    assert dict(grid.neighbor_cells((0, 0), 1.2)) == {(2, 0): ["two_away"]}


def test_cells_intersecting_aabb():
    grid = HGrid(1.0)
    grid.insert((0.5, 0.5, 0.5), 1)
    grid.insert((2.5, 2.5, 2.5), 2)
    grid.insert((-1.5, 0.5, 0.5), 3)
    found = dict(grid.cells_intersecting_aabb((0.0, 0.0, 0.0), (2.1, 2.1, 2.1)))
    assert found == {(0, 0, 0): [1], (2, 2, 2): [2]}


def test_cell_width_is_kept():
    assert HGrid(0.25).cell_width == 0.25


def test_non_positive_cell_width_rejected():
    with pytest.raises(ValueError):
        HGrid(0.0)