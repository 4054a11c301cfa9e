# -*- coding: utf-8 -*-
from __future__ import annotations

from pathlib import Path

import pytest

from sudoku_solver import Grid

DATA_DIR = Path(__file__).resolve().parent / "data"

README_PUZZLE = [
    [0, 7, 3, 8, 0, 4, 2, 1, 6],
    [0, 0, 0, 2, 0, 9, 5, 0, 0],
    [2, 8, 5, 6, 0, 3, 0, 9, 7],
    [0, 0, 0, 3, 0, 0, 0, 7, 4],
    [7, 5, 0, 0, 0, 0, 3, 0, 1],
    [0, 0, 4, 0, 2, 0, 0, 0, 0],
    [0, 9, 7, 5, 6, 0, 0, 0, 0],
    [0, 0, 0, 7, 0, 0, 1, 0, 0],
    [4, 2, 0, 0, 3, 0, 0, 6, 0],
]

README_SOLUTION = [
    [9, 7, 3, 8, 5, 4, 2, 1, 6],
    [1, 4, 6, 2, 7, 9, 5, 8, 3],
    [2, 8, 5, 6, 1, 3, 4, 9, 7],
    [8, 1, 2, 3, 9, 5, 6, 7, 4],
    [7, 5, 9, 4, 8, 6, 3, 2, 1],
    [6, 3, 4, 1, 2, 7, 9, 5, 8],
    [3, 9, 7, 5, 6, 1, 8, 4, 2],
    [5, 6, 8, 7, 4, 2, 1, 3, 9],
    [4, 2, 1, 9, 3, 8, 7, 6, 5],
]

HARD_PUZZLE = [
    [0, 0, 3, 4, 0, 7, 0, 6, 0],
    [7, 0, 0, 0, 0, 0, 0, 4, 0],
    [0, 0, 0, 0, 1, 0, 2, 5, 0],
    [4, 8, 0, 3, 0, 0, 1, 0, 0],
    [0, 5, 0, 0, 0, 0, 0, 0, 2],
    [0, 6, 0, 0, 2, 0, 0, 0, 0],
    [0, 9, 0, 1, 0, 5, 0, 0, 8],
    [1, 0, 0, 6, 0, 0, 0, 0, 5],
    [0, 0, 0, 0, 0, 0, 4, 0, 0],
]


def assert_valid_solution(grid: Grid, givens=None) -> None:
    """行・列・ボックスに 1〜9 がちょうど 1 回ずつ入り、ヒントが保たれていること。"""
    rows = grid.to_list()
    digits = list(range(1, 10))
    for i in range(9):
        assert sorted(rows[i]) == digits
        assert sorted(rows[r][i] for r in range(9)) == digits
    for r0 in range(0, 9, 3):
        for c0 in range(0, 9, 3):
            box = [rows[r][c] for r in range(r0, r0 + 3) for c in range(c0, c0 + 3)]
            assert sorted(box) == digits
    if givens is not None:
        for r in range(9):
            for c in range(9):
                if givens[r][c]:
                    assert rows[r][c] == givens[r][c]


@pytest.fixture
def data_dir() -> Path:
    return DATA_DIR


@pytest.fixture
def readme_grid() -> Grid:
    return Grid.from_rows(README_PUZZLE)


@pytest.fixture
def solved_grid() -> Grid:
    return Grid.from_rows(README_SOLUTION)
