# -*- coding: utf-8 -*-
from __future__ import annotations

import pandas as pd
import pytest

from sudoku_solver import (
    InitialConstraintViolation,
    InputShapeError,
    Unsolvable,
    solve,
    solve_file,
)

from conftest import README_PUZZLE, README_SOLUTION, assert_valid_solution


def test_solve_dataframe():
    result = solve(pd.DataFrame(README_PUZZLE))
    assert result["status"] == "solved"
    assert result["solved_board"] == README_SOLUTION


def test_solve_dataframe_of_strings():
    df = pd.DataFrame([[str(v) for v in row] for row in README_PUZZLE])
    assert solve(df, cell_order="mrv")["solved_board"] == README_SOLUTION


def test_solve_file(data_dir):
    grid = solve_file(data_dir / "board_pass.csv")
    assert_valid_solution(grid, README_PUZZLE)


def test_solve_file_errors(data_dir):
    with pytest.raises(InputShapeError):
        solve_file(data_dir / "invalid_value.csv")
    with pytest.raises(InitialConstraintViolation):
        solve_file(data_dir / "board_invalid_sudoku.csv")
    with pytest.raises(Unsolvable):
        solve_file(data_dir / "board_unsolvable.csv")


def test_solve_all_zero_dataframe():
    result = solve(pd.DataFrame([[0] * 9 for _ in range(9)]))
    assert result["status"] == "solved"
    assert all(0 not in row for row in result["solved_board"])
