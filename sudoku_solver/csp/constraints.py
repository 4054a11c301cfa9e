# -*- coding: utf-8 -*-
"""
行・列・ボックスごとに「すでに使われている数字」を管理するモジュールです。

使用済みの数字は 9 ビットのビットマスクで表します。
- ビット d が立っている = 数字 d+1 がすでに使われている

行 9 個・列 9 個・ボックス 9 個の合計 27 個のマスクを
固定長のリストで持ち、探索中は

- can_place : 置けるかどうかの問い合わせ（変更なし）
- place     : 置いた数字のビットを立てる
- remove    : place の取り消し（ビットを落とす）

の 3 つだけで更新します。
"""

from __future__ import annotations

from typing import List

from ..config import CHECK_PLACEMENTS, DIGITS, EMPTY, FULL_MASK, GRID_SIZE
from ..errors import ConstraintViolation, InitialConstraintViolation
from ..grid.board import Grid, box_index


def digit_bit(v: int) -> int:
    """数字 v (1〜9) に対応するビットを返します。"""
    return 1 << (v - 1)


def mask_digits(mask: int) -> List[int]:
    """マスクに含まれる数字を昇順のリストで返します。"""
    return [v for v in DIGITS if mask & digit_bit(v)]


class ConstraintTracker:
    """
    行・列・ボックスごとの使用済み数字の集合（ビットマスク）です。

    Parameters
    ----------
    check_placements : bool
        True なら place / remove のたびに前提条件をチェックし、
        破られていれば ConstraintViolation を送出します。
    """

    __slots__ = ("rows", "cols", "boxes", "check_placements")

    def __init__(self, check_placements: bool = CHECK_PLACEMENTS) -> None:
        self.rows: List[int] = [0] * GRID_SIZE
        self.cols: List[int] = [0] * GRID_SIZE
        self.boxes: List[int] = [0] * GRID_SIZE
        self.check_placements = check_placements

    @classmethod
    def from_grid(cls, grid: Grid, check_placements: bool = CHECK_PLACEMENTS) -> "ConstraintTracker":
        """
        最初の盤面を 1 回だけ走査してトラッカーを作ります。

        行優先で見ていき、それより前に置かれた数字と
        行・列・ボックスのどこかで重複する数字があれば
        InitialConstraintViolation を送出します（探索は始めません）。
        """
        tracker = cls(check_placements=check_placements)
        for r, c, v in grid.iter_cells():
            if v == EMPTY:
                continue
            bit = digit_bit(v)
            if tracker.rows[r] & bit:
                raise InitialConstraintViolation(r, c, v, "row")
            if tracker.cols[c] & bit:
                raise InitialConstraintViolation(r, c, v, "column")
            if tracker.boxes[box_index(r, c)] & bit:
                raise InitialConstraintViolation(r, c, v, "box")
            tracker.place(r, c, v)
        return tracker

    # ---- 問い合わせ ----------------------------------------------------

    def used(self, r: int, c: int) -> int:
        """マス (r, c) から見て、行・列・ボックスで使用済みの数字のマスク。"""
        return self.rows[r] | self.cols[c] | self.boxes[box_index(r, c)]

    def candidates(self, r: int, c: int) -> int:
        """マス (r, c) にまだ置ける数字のマスク。"""
        return ~self.used(r, c) & FULL_MASK

    def candidate_digits(self, r: int, c: int) -> List[int]:
        """マス (r, c) にまだ置ける数字を昇順で返します。"""
        return mask_digits(self.candidates(r, c))

    def can_place(self, r: int, c: int, v: int) -> bool:
        """v が行 r・列 c・そのボックスのどこにもまだ無ければ True。"""
        return not self.used(r, c) & digit_bit(v)

    def row_mask(self, r: int) -> int:
        return self.rows[r]

    def col_mask(self, c: int) -> int:
        return self.cols[c]

    def box_mask(self, b: int) -> int:
        return self.boxes[b]

    # ---- 更新 ----------------------------------------------------------

    def place(self, r: int, c: int, v: int) -> None:
        """
        (r, c) に v を置いたことを記録します。

        前提: can_place(r, c, v) が True であること。
        """
        if self.check_placements and not self.can_place(r, c, v):
            raise ConstraintViolation(
                f"cannot place {v} at ({r}, {c}): already used in its row, column or box"
            )
        bit = digit_bit(v)
        self.rows[r] |= bit
        self.cols[c] |= bit
        self.boxes[box_index(r, c)] |= bit

    def remove(self, r: int, c: int, v: int) -> None:
        """
        place(r, c, v) を取り消します。バックトラック時にだけ使います。
        """
        bit = digit_bit(v)
        b = box_index(r, c)
        if self.check_placements and not (
            self.rows[r] & bit and self.cols[c] & bit and self.boxes[b] & bit
        ):
            raise ConstraintViolation(f"cannot remove {v} at ({r}, {c}): it was never placed")
        self.rows[r] &= ~bit
        self.cols[c] &= ~bit
        self.boxes[b] &= ~bit

    def snapshot(self) -> tuple:
        """現在の 27 個のマスクを (rows, cols, boxes) のタプルで返します。"""
        return tuple(self.rows), tuple(self.cols), tuple(self.boxes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ConstraintTracker):
            return NotImplemented
        return self.snapshot() == other.snapshot()

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        rows, cols, boxes = self.snapshot()
        return f"ConstraintTracker(rows={rows}, cols={cols}, boxes={boxes})"
