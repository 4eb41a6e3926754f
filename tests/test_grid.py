import pytest

from graingrowth.cell import Cell, State
from graingrowth.grid import Grid


def test_new_grid_is_all_empty():
    grid = Grid(4, 3)
    assert len(grid) == 12
    assert all(cell == Cell() for cell in grid)


@pytest.mark.parametrize("cols,rows", [(0, 3), (3, 0), (-1, 2)])
def test_non_positive_dimensions_rejected(cols, rows):
    with pytest.raises(ValueError):
        Grid(cols, rows)


def test_at_returns_same_cell_object():
    grid = Grid(4, 3)
    grid.at(2, 1).set_state(State.OCCUPIED, 5, (1, 1, 1))
    assert grid.at(2, 1).grain_id == 5
    assert grid.at(1, 2).state is State.EMPTY


def test_wrapping_over_edges():
    grid = Grid(4, 3)
    assert grid.at(-1, 0) is grid.at(3, 0)
    assert grid.at(4, 0) is grid.at(0, 0)
    assert grid.at(0, -1) is grid.at(0, 2)
    assert grid.at(0, 3) is grid.at(0, 0)


def test_wrap_is_single_step_not_modulo():
    grid = Grid(4, 3)
    assert grid.at(-5, 0) is grid.at(3, 0)
    assert grid.at(9, 0) is grid.at(0, 0)


def test_reset_empties_all_cells():
    grid = Grid(3, 3)
    grid.at(0, 0).set_state(State.OCCUPIED, 1, (2, 2, 2))
    grid.at(2, 2).set_state(State.OCCUPIED, 2, (3, 3, 3))
    grid.reset()
    assert all(cell.state is State.EMPTY for cell in grid)


def test_copy_is_independent():
    grid = Grid(3, 2)
    grid.at(1, 1).set_state(State.OCCUPIED, 4, (5, 6, 7))
    dup = grid.copy()
    assert (dup.cols, dup.rows) == (3, 2)
    assert dup.at(1, 1) == grid.at(1, 1)
    grid.at(1, 1).reset()
    assert dup.at(1, 1).grain_id == 4