# -*- coding: utf-8 -*-
"""
sudoku_solver 全体で共通して使う設定値をまとめたモジュールです。

ここを編集することで
- CSV の読み込み方法
- 探索で次のマスを選ぶ順序
- 探索中の配置チェックを行うかどうか
- ログの出力レベル
などを変更できます。

盤面サイズ（9x9）は固定で、変更は想定していません。
"""

from __future__ import annotations

import logging

# ==== 盤面関連 =============================================================

# 盤面の一辺のマス数
GRID_SIZE: int = 9

# ボックス（3x3 ブロック）の一辺のマス数
BOX_SIZE: int = 3

# 空きマスを表す値
EMPTY: int = 0

# 配置できる数字（昇順で試す）
DIGITS: tuple = tuple(range(1, GRID_SIZE + 1))

# 1〜9 がすべて使われている状態のビットマスク（0b111111111）
FULL_MASK: int = (1 << GRID_SIZE) - 1

# ==== CSV 入出力関連 =======================================================

# 区切り文字（1行 = 1行分の盤面、ヘッダなし）
CSV_DELIMITER: str = ","

# 文字コード。BOM 付きの CSV も読めるように utf-8-sig にしておく
CSV_ENCODING: str = "utf-8-sig"

# ==== 探索関連 =============================================================

# 次に埋めるマスの選び方
# - "row_major": 上の行から、左から順に最初の空きマス
# - "mrv"      : 候補数が最も少ない空きマス（同数なら row_major 順）
CELL_ORDER: str = "row_major"

# 制約トラッカーへの配置・取り消しのたびに整合性をチェックするかどうか。
# 探索が正しく実装されていれば違反は起きないので、
# 速度を優先したい場合は False にできます。
CHECK_PLACEMENTS: bool = True

# 探索ノード数がこの数に達するごとに進捗ログを出す
LOG_EVERY_NODES: int = 100000

# ==== 表示関連 =============================================================

# 3行ごとに入る区切り線
RENDER_SEPARATOR: str = "-" * 25

# 空きマスの表示（数字 + 空白と同じ幅にする）
RENDER_EMPTY: str = " "

# ==== ログ関連 =============================================================

# パッケージ共通で使うロガー名
LOGGER_NAME: str = "sudoku_solver"

# ログの出力レベル
LOG_LEVEL: int = logging.INFO
