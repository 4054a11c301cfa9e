# -*- coding: utf-8 -*-
"""
9x9 の盤面（Grid）を表すモジュールです。

盤面は numpy の 2次元配列 (dtype=uint8) で保持します。
- 0   : 空きマス
- 1〜9: 埋まっているマス

ここでは「値を出し入れする」ことと「盤面全体の妥当性を調べる」ことだけを行い、
数独のルールに沿った配置かどうかのチェックは
csp.constraints.ConstraintTracker の役割とします。
"""

from __future__ import annotations

from typing import Iterable, List, Sequence, Tuple

import numpy as np

from ..config import BOX_SIZE, EMPTY, GRID_SIZE
from ..errors import InputShapeError, OutOfBounds


def box_index(r: int, c: int) -> int:
    """
    マス (r, c) が属するボックスの番号 (0〜8) を返します。

    ボックスは左上から右へ 0, 1, 2、次の段が 3, 4, 5 ... と数えます。
    """
    return (r // BOX_SIZE) * BOX_SIZE + (c // BOX_SIZE)


def _has_duplicates(values: np.ndarray) -> bool:
    filled = values[values != EMPTY]
    return len(np.unique(filled)) != len(filled)


class Grid:
    """
    9x9 の数独盤面です。

    サイズは常に 9x9 で、0〜9 以外の値が格納されることはありません。
    """

    __slots__ = ("_cells",)

    def __init__(self) -> None:
        self._cells = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.uint8)

    # ---- 生成 ----------------------------------------------------------

    @classmethod
    def empty(cls) -> "Grid":
        """すべて空きマスの盤面を返します。"""
        return cls()

    @classmethod
    def from_rows(cls, rows: Sequence[Sequence[int]] | np.ndarray) -> "Grid":
        """
        9x9 の整数の並び（リストのリスト、または numpy 配列）から盤面を作ります。

        Raises
        ------
        InputShapeError
            9x9 でない、整数でない、0〜9 の範囲外の値がある場合。
        """
        if len(rows) != GRID_SIZE:
            raise InputShapeError(
                f"Only {GRID_SIZE}x{GRID_SIZE} boards allowed: got {len(rows)} rows"
            )

        grid = cls()
        for r, row in enumerate(rows):
            if len(row) != GRID_SIZE:
                raise InputShapeError(
                    f"Only {GRID_SIZE}x{GRID_SIZE} boards allowed: "
                    f"row {r + 1} has {len(row)} values",
                    row=r + 1,
                )
            for c, value in enumerate(row):
                if isinstance(value, (bool, np.bool_)) or not isinstance(
                    value, (int, np.integer)
                ):
                    raise InputShapeError(
                        f"Only int numbers allowed: {value!r} at row {r + 1}, "
                        f"column {c + 1}",
                        row=r + 1,
                        column=c + 1,
                    )
                if not EMPTY <= value <= GRID_SIZE:
                    raise InputShapeError(
                        f"Only numbers between {EMPTY} and {GRID_SIZE} allowed: "
                        f"{value} at row {r + 1}, column {c + 1}",
                        row=r + 1,
                        column=c + 1,
                    )
                grid._cells[r, c] = value
        return grid

    def copy(self) -> "Grid":
        other = Grid()
        other._cells[:, :] = self._cells
        return other

    # ---- 基本操作 ------------------------------------------------------

    @staticmethod
    def _check_coord(r: int, c: int) -> None:
        if not (0 <= r < GRID_SIZE and 0 <= c < GRID_SIZE):
            raise OutOfBounds(f"cell ({r}, {c}) is outside the {GRID_SIZE}x{GRID_SIZE} grid")

    def get(self, r: int, c: int) -> int:
        """マス (r, c) の値を返します。空きマスなら 0。"""
        self._check_coord(r, c)
        return int(self._cells[r, c])

    def set(self, r: int, c: int, v: int) -> None:
        """
        マス (r, c) に v を書き込みます。0 を書くと空きマスに戻ります。

        数独のルールに沿っているかどうかはチェックしません。
        """
        self._check_coord(r, c)
        if not EMPTY <= v <= GRID_SIZE:
            raise OutOfBounds(f"value {v} is outside [{EMPTY}, {GRID_SIZE}]")
        self._cells[r, c] = v

    box_index = staticmethod(box_index)

    # ---- 行・列・ボックス ----------------------------------------------

    def row(self, r: int) -> np.ndarray:
        self._check_coord(r, 0)
        return self._cells[r, :].copy()

    def column(self, c: int) -> np.ndarray:
        self._check_coord(0, c)
        return self._cells[:, c].copy()

    def box(self, r: int, c: int) -> np.ndarray:
        """マス (r, c) を含むボックスの 9 マスを、行優先で平らにして返します。"""
        self._check_coord(r, c)
        r0 = (r // BOX_SIZE) * BOX_SIZE
        c0 = (c // BOX_SIZE) * BOX_SIZE
        return self._cells[r0:r0 + BOX_SIZE, c0:c0 + BOX_SIZE].flatten()

    # ---- 問い合わせ ----------------------------------------------------

    def empty_cells(self) -> List[Tuple[int, int]]:
        """空きマスの座標を、上の行から左から順に返します。"""
        return [(int(r), int(c)) for r, c in np.argwhere(self._cells == EMPTY)]

    def filled_count(self) -> int:
        return int(np.count_nonzero(self._cells))

    def is_complete(self) -> bool:
        """空きマスが 1 つもなければ True。"""
        return not np.any(self._cells == EMPTY)

    def is_valid(self) -> bool:
        """
        どの行・列・ボックスにも同じ数字が 2 回以上現れていなければ True。

        空きマスは無視します。
        """
        for i in range(GRID_SIZE):
            if _has_duplicates(self._cells[i, :]) or _has_duplicates(self._cells[:, i]):
                return False
        for r0 in range(0, GRID_SIZE, BOX_SIZE):
            for c0 in range(0, GRID_SIZE, BOX_SIZE):
                if _has_duplicates(self._cells[r0:r0 + BOX_SIZE, c0:c0 + BOX_SIZE].flatten()):
                    return False
        return True

    def is_solved(self) -> bool:
        return self.is_complete() and self.is_valid()

    # ---- 変換 ----------------------------------------------------------

    def to_array(self) -> np.ndarray:
        """盤面のコピーを numpy 配列として返します。"""
        return self._cells.copy()

    def to_list(self) -> List[List[int]]:
        return self._cells.astype(int).tolist()

    def iter_cells(self) -> Iterable[Tuple[int, int, int]]:
        """(row, col, value) を行優先で順に返します。"""
        for r in range(GRID_SIZE):
            for c in range(GRID_SIZE):
                yield r, c, int(self._cells[r, c])

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return bool(np.array_equal(self._cells, other._cells))

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Grid({self.to_list()!r})"
