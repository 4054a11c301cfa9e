# -*- coding: utf-8 -*-
"""
sudoku solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass を使うことで、
「この構造体はどんなフィールドを持っているのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Tuple

from .grid.board import Grid

# グリッド上の座標を表す型 (row, col)
CellCoord = Tuple[int, int]


class SearchState(Enum):
    """
    探索の状態を表します。

    - SEARCHING : 空きマスと未試行の候補が残っている（探索中）
    - SOLVED    : 空きマスがなくなった（成功・終端）
    - EXHAUSTED : 最初のマスの候補を試し尽くした（解なし・終端）
    """

    SEARCHING = "searching"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


@dataclass
class SearchStats:
    """
    探索の統計情報です。

    Attributes
    ----------
    nodes_visited : int
        数字を仮置きした回数。
    backtracks : int
        仮置きを取り消した回数。
    max_depth : int
        到達した最大の再帰の深さ（= 同時に仮置きしていた数字の最大数）。
    elapsed_sec : float
        探索にかかった時間（秒）。
    """

    nodes_visited: int = 0
    backtracks: int = 0
    max_depth: int = 0
    elapsed_sec: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "nodes_visited": self.nodes_visited,
            "backtracks": self.backtracks,
            "max_depth": self.max_depth,
            "elapsed_sec": self.elapsed_sec,
        }


@dataclass
class SolveResult:
    """
    探索の結果を表すクラスです。

    Attributes
    ----------
    status : SearchState
        SOLVED または EXHAUSTED。
    grid : Grid
        探索に使った盤面。SOLVED なら埋まった盤面、
        EXHAUSTED なら探索前と同じ状態に戻っています。
    stats : SearchStats
        探索の統計情報。
    """

    status: SearchState
    grid: Grid
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def solved(self) -> bool:
        """解が見つかったかどうかを返します。"""
        return self.status is SearchState.SOLVED
