import pytest

from graingrowth.gui import (
    CELL_SIZE,
    GRID_COLS,
    GRID_HEIGHT,
    GRID_ROWS,
    GRID_WIDTH,
    cell_at_pixel,
    grid_lines,
    iteration_label,
)


def test_iteration_label_initial_text():
    assert iteration_label(0) == "Iteration: 0"


def test_iteration_label_includes_count():
    assert iteration_label(42) == "Iteration: 42"


@pytest.mark.parametrize("cell_size", [1, 2, 5, 10])
def test_cell_at_pixel_covers_whole_cell(cell_size):
    for cx in (0, 3, 7):
        for cy in (0, 1, 9):
            for offset in range(cell_size):
                px = cx * cell_size + offset
                py = cy * cell_size + (cell_size - 1 - offset)
                assert cell_at_pixel(px, py, cell_size) == (cx, cy)


def test_cell_at_pixel_last_pixel_maps_to_last_cell():
    assert cell_at_pixel(GRID_WIDTH - 1, GRID_HEIGHT - 1, CELL_SIZE) == (
        GRID_COLS - 1,
        GRID_ROWS - 1,
    )


@pytest.mark.parametrize("cell_size", [0, -5])
def test_cell_at_pixel_rejects_bad_cell_size(cell_size):
    with pytest.raises(ValueError):
        cell_at_pixel(10, 10, cell_size)


def test_grid_lines_count_and_start():
    lines = grid_lines(GRID_COLS, CELL_SIZE, GRID_WIDTH - 1)
    assert len(lines) == GRID_COLS + 1
    assert lines[0] == 0


def test_grid_lines_last_is_clamped_to_limit():
    limit = GRID_WIDTH - 1
    lines = grid_lines(GRID_COLS, CELL_SIZE, limit)
    assert lines[-1] == limit
    assert all(pos <= limit for pos in lines)


def test_grid_lines_are_non_decreasing_multiples_unless_clamped():
    limit = GRID_HEIGHT - 1
    lines = grid_lines(GRID_ROWS, CELL_SIZE, limit)
    assert lines == sorted(lines)
    for pos in lines:
        assert pos % CELL_SIZE == 0 or pos == limit


def test_grid_lines_without_clamping_are_multiples():
    lines = grid_lines(4, 10, 1000)
    assert lines == [0, 10, 20, 30, 40]


def test_grid_lines_negative_count_gives_nothing():
    assert grid_lines(-1, CELL_SIZE, 100) == []


def test_grid_lines_rejects_bad_cell_size():
    with pytest.raises(ValueError):
        grid_lines(3, 0, 100)


def test_grid_dimensions_cover_view():
    for px in (0, GRID_WIDTH // 2, GRID_WIDTH - 1):
        x, _ = cell_at_pixel(px, 0, CELL_SIZE)
        assert 0 <= x < GRID_COLS
    for py in (0, GRID_HEIGHT // 2, GRID_HEIGHT - 1):
        _, y = cell_at_pixel(0, py, CELL_SIZE)
        assert 0 <= y < GRID_ROWS