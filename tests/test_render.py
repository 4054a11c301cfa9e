# -*- coding: utf-8 -*-
from __future__ import annotations

import re

from sudoku_solver import Grid, build_result, load_grid_csv, render_grid, solve_in_place

from conftest import README_SOLUTION

SEPARATOR = "-" * 25


def test_render_solved_grid(solved_grid):
    text = render_grid(solved_grid)
    lines = text.splitlines()

    assert len(lines) == 13
    assert lines[0] == SEPARATOR
    assert lines[1] == "| 9 7 3 | 8 5 4 | 2 1 6 |"
    assert lines[4] == SEPARATOR
    assert lines[8] == SEPARATOR
    assert lines[-1] == SEPARATOR
    assert text.endswith("\n")


def test_render_empty_cells_as_blanks(readme_grid):
    lines = render_grid(readme_grid).splitlines()
    assert lines[1] == "|   7 3 | 8   4 | 2 1 6 |"


def test_csv_to_text_round_trip(data_dir):
    # 解き済みの盤面を読み込んで表示すると、同じ位置に同じ数字が出る
    grid = load_grid_csv(data_dir / "board_solved.csv")
    text = render_grid(grid)

    digit_rows = [
        [int(d) for d in re.findall(r"\d", line)]
        for line in text.splitlines()
        if line.startswith("|")
    ]
    assert digit_rows == README_SOLUTION


def test_build_result(readme_grid):
    result = solve_in_place(readme_grid)
    payload = build_result(result)

    assert payload["status"] == "solved"
    assert payload["solved_board"] == README_SOLUTION
    assert payload["shape"] == (9, 9)
    assert payload["stats"]["nodes_visited"] == result.stats.nodes_visited


def test_render_empty_grid():
    lines = render_grid(Grid.empty()).splitlines()
    assert lines[1] == "|       |       |       |"
