# sudoku_solver/__init__.py
# -*- coding: utf-8 -*-
"""
sudoku_solver パッケージの入口となるモジュールです。

    from sudoku_solver import solve, solve_file

と呼び出されることを想定しています。

ここでは、盤面（pandas.DataFrame または CSV ファイル）を受け取り、
1. 盤面の正規化（9x9 の 0〜9 になっているかの確認）
2. 制約トラッカーの構築（最初の盤面の重複チェック）
3. バックトラック探索
4. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict

import pandas as pd

from .config import CELL_ORDER
from .errors import (
    ConstraintViolation,
    InitialConstraintViolation,
    InputShapeError,
    OutOfBounds,
    SudokuError,
    Unsolvable,
)
from .logging_utils import get_logger
from .grid.board import Grid, box_index
from .grid.parser import load_grid_csv, normalize_grid, save_grid_csv
from .csp.constraints import ConstraintTracker
from .csp.search import BacktrackingSolver, solve_grid, solve_in_place
from .postprocess.render_result import build_result, render_grid
from .types import SearchState, SearchStats, SolveResult

__all__ = [
    "BacktrackingSolver",
    "ConstraintTracker",
    "ConstraintViolation",
    "Grid",
    "InitialConstraintViolation",
    "InputShapeError",
    "OutOfBounds",
    "SearchState",
    "SearchStats",
    "SolveResult",
    "SudokuError",
    "Unsolvable",
    "box_index",
    "build_result",
    "load_grid_csv",
    "normalize_grid",
    "render_grid",
    "save_grid_csv",
    "solve",
    "solve_file",
    "solve_grid",
    "solve_in_place",
]

__version__ = "0.1.0"

logger = get_logger()


def solve(df: pd.DataFrame, cell_order: str = CELL_ORDER) -> Dict[str, Any]:
    """
    DataFrame の盤面を解き、表示用の dict を返します。

    Raises
    ------
    InputShapeError
        9x9 の 0〜9 になっていない場合。
    InitialConstraintViolation
        最初の盤面に重複がある場合。
    Unsolvable
        解が存在しない場合。
    """
    logger.info("=== solve() START ===")
    logger.info("Grid shape: %s", df.shape)

    grid = normalize_grid(df)
    result = solve_in_place(grid, cell_order=cell_order)
    if not result.solved:
        raise Unsolvable()

    logger.info("=== solve() END ===")
    return build_result(result)


def solve_file(path: str | Path, cell_order: str = CELL_ORDER) -> Grid:
    """CSV ファイルの盤面を読み込んで解き、埋まった Grid を返します。"""
    grid = load_grid_csv(path)
    return solve_grid(grid, cell_order=cell_order)
