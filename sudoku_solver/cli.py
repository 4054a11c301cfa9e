# -*- coding: utf-8 -*-
"""
コマンドラインから盤面 CSV を解くためのモジュールです。

使い方::

    sudoku-solver puzzle.csv
    python -m sudoku_solver puzzle.csv

成功すると罫線付きの盤面を標準出力に表示して 0 で終了します。
入力の形式エラー・最初の盤面の重複・解なしの場合は、
理由を標準エラー出力に表示して 1 で終了します（途中の盤面は表示しません）。
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from .errors import InitialConstraintViolation, InputShapeError, Unsolvable
from .grid.parser import load_grid_csv
from .csp.search import solve_grid
from .logging_utils import get_logger
from .postprocess.render_result import render_grid

EXIT_SUCCESS = 0
EXIT_FAILURE = 1

logger = get_logger()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="sudoku-solver",
        description="Solve a 9x9 Sudoku puzzle given as a CSV file (0 = empty cell).",
    )
    parser.add_argument("path", help="path to the CSV file: 9 rows of 9 comma-separated digits")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    try:
        grid = load_grid_csv(args.path)
        solved = solve_grid(grid)
    except (InputShapeError, InitialConstraintViolation, Unsolvable, FileNotFoundError) as exc:
        logger.error("Failed to solve %s: %s", args.path, exc)
        print(f"Error: {exc}", file=sys.stderr)
        return EXIT_FAILURE

    print(render_grid(solved), end="")
    return EXIT_SUCCESS


if __name__ == "__main__":
    sys.exit(main())
