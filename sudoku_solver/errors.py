# -*- coding: utf-8 -*-
"""
sudoku_solver で使う例外クラスをまとめたモジュールです。

ユーザーに見せるエラー
- InputShapeError            : 入力 CSV が 9x9 の 0〜9 になっていない
- InitialConstraintViolation : 最初の盤面の時点で同じ数字が重複している
- Unsolvable                 : 全探索しても解が見つからなかった

内部エラー（正しく実装されていれば起きない）
- OutOfBounds         : 盤面の外の座標や範囲外の値を扱おうとした
- ConstraintViolation : 制約トラッカーへの不正な配置・取り消し
"""

from __future__ import annotations

from typing import Optional


class SudokuError(Exception):
    """sudoku_solver のすべての例外の基底クラス。"""


class InputShapeError(SudokuError, ValueError):
    """
    入力が 9 行 x 9 列の整数 (0〜9) になっていないときに送出されます。

    Attributes
    ----------
    row : int or None
        問題のあった行番号（1 始まり、CSV の行に対応）。
    column : int or None
        問題のあった列番号（1 始まり）。
    """

    def __init__(
        self,
        message: str,
        row: Optional[int] = None,
        column: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.row = row
        self.column = column


class InitialConstraintViolation(SudokuError):
    """最初に与えられた数字同士が、行・列・ボックスのどこかで重複している。"""

    def __init__(self, row: int, column: int, value: int, unit: str) -> None:
        super().__init__(
            f"Invalid board: digit {value} at row {row + 1}, column {column + 1} "
            f"is already used in the same {unit}"
        )
        self.row = row
        self.column = column
        self.value = value
        self.unit = unit


class Unsolvable(SudokuError):
    """全探索が終わっても、ルールを満たす埋め方が見つからなかった。"""

    def __init__(self, message: str = "No solution found") -> None:
        super().__init__(message)


class OutOfBounds(SudokuError, IndexError):
    """盤面外の座標、または 0〜9 以外の値が渡された。"""


class ConstraintViolation(SudokuError):
    """制約トラッカーの前提条件が破られた（プログラムの不具合）。"""
