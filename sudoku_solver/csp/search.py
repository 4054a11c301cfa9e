# -*- coding: utf-8 -*-
"""
数独のバックトラック探索を行うモジュールです。

1 枚の盤面（Grid）と制約トラッカー（ConstraintTracker）の組を
その場で書き換えながら、深さ優先で探索します。
枝ごとに盤面をコピーすることはしません。

ざっくり流れ
------------
1. 次に埋める空きマスを選ぶ（既定は行優先で最初の空きマス）
2. 空きマスがなければ SOLVED。成功をそのまま上の階層へ返す
3. 数字 1〜9 を昇順に試す。置ける数字なら仮置きして 1 へ再帰
   - 再帰が成功したら、残りの候補は試さずに成功を返す
   - 失敗したら仮置きを取り消して、次の数字へ
4. 9 個すべて失敗したら、呼び出し元へ失敗を返す
   （一番上の階層なら EXHAUSTED = 解なし）

仮置きは _Placement（with 文）で行い、commit されないまま
ブロックを抜けると必ず取り消されます。例外で抜けた場合も同じです。
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import List, Optional

from ..config import CELL_ORDER, CHECK_PLACEMENTS, DIGITS, EMPTY, LOG_EVERY_NODES
from ..errors import Unsolvable
from ..grid.board import Grid
from ..logging_utils import get_logger
from ..types import CellCoord, SearchState, SearchStats, SolveResult
from .constraints import ConstraintTracker

logger = get_logger()

CELL_ORDERS = ("row_major", "mrv")


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    grid: Grid
    tracker: ConstraintTracker
    cell_order: str
    empties: List[CellCoord]
    stats: SearchStats = field(default_factory=SearchStats)
    state: SearchState = SearchState.SEARCHING


class _Placement:
    """
    1 マスへの仮置きです。

    with ブロックに入ると盤面とトラッカーに同時に数字を置き、
    commit() されずに抜けると両方から取り消します。
    """

    __slots__ = ("ctx", "r", "c", "v", "committed")

    def __init__(self, ctx: SearchContext, r: int, c: int, v: int) -> None:
        self.ctx = ctx
        self.r = r
        self.c = c
        self.v = v
        self.committed = False

    def __enter__(self) -> "_Placement":
        self.ctx.tracker.place(self.r, self.c, self.v)
        self.ctx.grid.set(self.r, self.c, self.v)
        return self

    def commit(self) -> None:
        self.committed = True

    def __exit__(self, exc_type, exc, tb) -> bool:
        if not self.committed:
            self.ctx.tracker.remove(self.r, self.c, self.v)
            self.ctx.grid.set(self.r, self.c, EMPTY)
            self.ctx.stats.backtracks += 1
        return False


def _popcount(mask: int) -> int:
    return bin(mask).count("1")


def choose_next_cell(ctx: SearchContext, depth: int) -> Optional[CellCoord]:
    """
    次に埋める空きマスを選びます。空きマスがなければ None。

    - row_major: 上の行から、左から順に最初の空きマス。
      仮置きは常にこの順で進むので、深さ depth のマスは empties[depth] になる。
    - mrv: 候補数が最も少ない空きマス（同数なら row_major 順で先のもの）。
    """
    if ctx.cell_order == "row_major":
        return ctx.empties[depth] if depth < len(ctx.empties) else None

    best: Optional[CellCoord] = None
    best_count = len(DIGITS) + 1
    for r, c in ctx.empties:
        if ctx.grid.get(r, c) != EMPTY:
            continue
        count = _popcount(ctx.tracker.candidates(r, c))
        if count < best_count:
            best, best_count = (r, c), count
            if count <= 1:
                break
    return best


def _search(ctx: SearchContext, depth: int) -> bool:
    cell = choose_next_cell(ctx, depth)
    if cell is None:
        return True

    r, c = cell
    for v in DIGITS:
        if not ctx.tracker.can_place(r, c, v):
            continue

        stats = ctx.stats
        stats.nodes_visited += 1
        if depth + 1 > stats.max_depth:
            stats.max_depth = depth + 1
        if stats.nodes_visited % LOG_EVERY_NODES == 0:
            logger.info(
                "[search] nodes_visited = %d, backtracks = %d, depth = %d/%d",
                stats.nodes_visited,
                stats.backtracks,
                depth,
                len(ctx.empties),
            )

        with _Placement(ctx, r, c, v) as move:
            if _search(ctx, depth + 1):
                move.commit()
                return True

    return False


class BacktrackingSolver:
    """
    Grid をその場で埋めるバックトラック探索器です。

    生成時に最初の盤面から ConstraintTracker を作るので、
    与えられた数字同士が重複している盤面は
    InitialConstraintViolation で即座に弾かれます。

    Parameters
    ----------
    grid : Grid
        解く盤面。solve() によって書き換えられます。
    cell_order : str
        "row_major" または "mrv"。
    check_placements : bool
        ConstraintTracker の前提条件チェックを有効にするかどうか。
    """

    def __init__(
        self,
        grid: Grid,
        cell_order: str = CELL_ORDER,
        check_placements: bool = CHECK_PLACEMENTS,
    ) -> None:
        if cell_order not in CELL_ORDERS:
            raise ValueError(f"Unknown cell order: {cell_order}")

        tracker = ConstraintTracker.from_grid(grid, check_placements=check_placements)
        self.ctx = SearchContext(
            grid=grid,
            tracker=tracker,
            cell_order=cell_order,
            empties=grid.empty_cells(),
        )
        self._result: Optional[SolveResult] = None

    @property
    def state(self) -> SearchState:
        return self.ctx.state

    @property
    def tracker(self) -> ConstraintTracker:
        return self.ctx.tracker

    def solve(self) -> SolveResult:
        """
        探索を実行し、SolveResult を返します。

        解が無いことは例外ではなく、status=EXHAUSTED として返します。
        このとき盤面は探索前の状態に戻っています。
        """
        if self._result is not None:
            return self._result

        ctx = self.ctx
        logger.info(
            "Search start: %d empty cells, cell_order=%s", len(ctx.empties), ctx.cell_order
        )

        t0 = time.perf_counter()
        found = _search(ctx, 0)
        ctx.stats.elapsed_sec = time.perf_counter() - t0

        ctx.state = SearchState.SOLVED if found else SearchState.EXHAUSTED
        logger.info(
            "Search end: %s (nodes=%d, backtracks=%d, max_depth=%d, %.3f sec)",
            ctx.state.value,
            ctx.stats.nodes_visited,
            ctx.stats.backtracks,
            ctx.stats.max_depth,
            ctx.stats.elapsed_sec,
        )

        self._result = SolveResult(status=ctx.state, grid=ctx.grid, stats=ctx.stats)
        return self._result


def solve_in_place(
    grid: Grid,
    cell_order: str = CELL_ORDER,
    check_placements: bool = CHECK_PLACEMENTS,
) -> SolveResult:
    """
    grid をその場で解きます。

    解が見つかれば grid は埋まった状態に、
    見つからなければ元の状態のままになります。
    """
    return BacktrackingSolver(grid, cell_order=cell_order, check_placements=check_placements).solve()


def solve_grid(
    grid: Grid,
    cell_order: str = CELL_ORDER,
    check_placements: bool = CHECK_PLACEMENTS,
) -> Grid:
    """
    grid のコピーを解いて返します。渡した grid は変更しません。

    Raises
    ------
    InitialConstraintViolation
        最初の盤面に重複がある場合。
    Unsolvable
        解が存在しない場合。
    """
    work = grid.copy()
    result = solve_in_place(work, cell_order=cell_order, check_placements=check_placements)
    if not result.solved:
        raise Unsolvable()
    return work
