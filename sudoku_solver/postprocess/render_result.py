# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。

- render_grid  : 罫線付きの 9x9 テキストを作る（CLI の出力）
- build_result : プログラムから使うための dict を作る
"""

from __future__ import annotations

from typing import Any, Dict, List

from ..config import BOX_SIZE, EMPTY, RENDER_EMPTY, RENDER_SEPARATOR
from ..grid.board import Grid
from ..types import SolveResult


def render_row(values: List[int]) -> str:
    """
    1 行分を "| 5 2 3 | 4 8 7 | 9 6 1 |" の形にします。

    空きマスは数字 1 文字分の空白で表示します。
    """
    parts: List[str] = []
    for j, v in enumerate(values):
        if j % BOX_SIZE == 0:
            parts.append("| ")
        parts.append(f"{RENDER_EMPTY if v == EMPTY else v} ")
    parts.append("|")
    return "".join(parts)


def render_grid(grid: Grid) -> str:
    """
    盤面を 3x3 ブロックごとに区切った罫線付きテキストにします。

    例::

        -------------------------
        | 9 7 3 | 8 5 4 | 2 1 6 |
        ...
        -------------------------
    """
    lines: List[str] = []
    for i, row in enumerate(grid.to_list()):
        if i % BOX_SIZE == 0:
            lines.append(RENDER_SEPARATOR)
        lines.append(render_row(row))
    lines.append(RENDER_SEPARATOR)
    return "\n".join(lines) + "\n"


def build_result(result: SolveResult) -> Dict[str, Any]:
    rows = result.grid.to_list()
    return {
        "status": result.status.value,
        "solved_board": rows,
        "shape": (len(rows), len(rows[0])),
        "stats": result.stats.to_dict(),
    }
