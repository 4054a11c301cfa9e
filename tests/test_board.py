# -*- coding: utf-8 -*-
from __future__ import annotations

import numpy as np
import pytest

from sudoku_solver import Grid, InputShapeError, OutOfBounds, box_index

from conftest import README_PUZZLE


def test_get_cell(readme_grid):
    assert readme_grid.get(3, 6) == 0
    assert readme_grid.get(0, 2) == 3
    assert readme_grid.get(8, 8) == 0
    assert readme_grid.get(4, 0) == 7


def test_set_and_clear(readme_grid):
    readme_grid.set(0, 0, 9)
    assert readme_grid.get(0, 0) == 9
    readme_grid.set(0, 0, 0)
    assert readme_grid.get(0, 0) == 0


@pytest.mark.parametrize("r, c", [(-1, 0), (0, 9), (9, 9), (3, -2)])
def test_out_of_bounds_coordinates(readme_grid, r, c):
    with pytest.raises(OutOfBounds):
        readme_grid.get(r, c)
    with pytest.raises(OutOfBounds):
        readme_grid.set(r, c, 1)


def test_set_rejects_value_out_of_range(readme_grid):
    with pytest.raises(OutOfBounds):
        readme_grid.set(0, 0, 10)
    assert readme_grid.get(0, 0) == 0


def test_box_index():
    assert box_index(0, 0) == 0
    assert box_index(2, 8) == 2
    assert box_index(4, 4) == 4
    assert box_index(5, 0) == 3
    assert box_index(8, 8) == 8
    assert Grid.box_index(7, 3) == 7


def test_row_column_box_views(readme_grid):
    assert readme_grid.row(3).tolist() == [0, 0, 0, 3, 0, 0, 0, 7, 4]
    assert readme_grid.column(5).tolist() == [4, 9, 3, 0, 0, 0, 0, 0, 0]
    assert readme_grid.box(5, 5).tolist() == [3, 0, 0, 0, 0, 0, 0, 2, 0]

    # ビューはコピーなので、書き換えても盤面は変わらない
    row = readme_grid.row(0)
    row[0] = 9
    assert readme_grid.get(0, 0) == 0


def test_is_complete(readme_grid, solved_grid):
    assert not readme_grid.is_complete()
    assert solved_grid.is_complete()
    assert not Grid.empty().is_complete()


def test_is_valid(readme_grid, solved_grid):
    assert readme_grid.is_valid()
    assert solved_grid.is_valid()
    readme_grid.set(0, 0, 3)
    assert not readme_grid.is_valid()


def test_empty_cells_are_row_major(readme_grid):
    cells = readme_grid.empty_cells()
    assert cells[:3] == [(0, 0), (0, 4), (1, 0)]
    assert cells == sorted(cells)
    assert len(cells) == 81 - readme_grid.filled_count()


def test_from_rows_rejects_bad_shape():
    with pytest.raises(InputShapeError):
        Grid.from_rows(README_PUZZLE[:8])
    with pytest.raises(InputShapeError):
        Grid.from_rows([row[:8] for row in README_PUZZLE])


def test_from_rows_rejects_bad_values():
    rows = [list(row) for row in README_PUZZLE]
    rows[2][2] = 10
    with pytest.raises(InputShapeError):
        Grid.from_rows(rows)
    rows[2][2] = 1.5
    with pytest.raises(InputShapeError):
        Grid.from_rows(rows)


def test_from_numpy_and_copy(readme_grid):
    grid = Grid.from_rows(np.array(README_PUZZLE))
    assert grid == readme_grid

    other = grid.copy()
    other.set(0, 0, 9)
    assert grid.get(0, 0) == 0
    assert other != grid
