# -*- coding: utf-8 -*-
"""
盤面 CSV を読み込み、内部表現（Grid）に変換するモジュールです。

主な役割:
- CSV ファイルを pandas.DataFrame として読み込む
- 各セルの値を 0〜9 の整数に正規化する
- 9 行 x 9 列になっていない入力をはっきりしたメッセージで弾く

CSV の形式（ヘッダなし、1行 = 盤面の1行、0 = 空きマス）::

    0,7,3,8,0,4,2,1,6
    0,0,0,2,0,9,5,0,0
    ...

空行は読み飛ばします（行数には数えません）。
行末のカンマ 1 つ（空の 10 列目）は無視します。
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd

from ..config import CSV_DELIMITER, CSV_ENCODING, EMPTY, GRID_SIZE
from ..errors import InputShapeError
from ..logging_utils import get_logger
from .board import Grid

# 符号なしの整数（"007" のような先頭 0 も許可）
INT_RE = re.compile(r"\d+", re.ASCII)

# pandas の ParserError メッセージから行番号を取り出す
LINE_RE = re.compile(r"line (\d+)")

logger = get_logger()


def normalize_cell(x: Any, row: int, column: int) -> int:
    """
    個々のセルの値を 0〜9 の整数に変換します。

    row, column はエラーメッセージ用の 1 始まりの位置です。

    変換ルール
    ----------
    - 整数: そのまま
    - 文字列: 前後の空白を取り除いてから整数として解釈
    - それ以外（空欄、小数、記号など）: InputShapeError
    """
    if isinstance(x, (bool, np.bool_)):
        value = None
    elif isinstance(x, (int, np.integer)):
        value = int(x)
    elif isinstance(x, str) and INT_RE.fullmatch(x.strip()):
        value = int(x.strip())
    else:
        value = None

    if value is None:
        raise InputShapeError(
            f"Invalid csv file. Only int numbers allowed: {x!r} at row {row}, column {column}",
            row=row,
            column=column,
        )
    if not EMPTY <= value <= GRID_SIZE:
        raise InputShapeError(
            f"Invalid csv file. Only numbers between {EMPTY} and {GRID_SIZE} allowed: "
            f"{value} at row {row}, column {column}",
            row=row,
            column=column,
        )
    return value


def normalize_grid(df: pd.DataFrame) -> Grid:
    """
    DataFrame から Grid に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    Parameters
    ----------
    df : pandas.DataFrame
        入力の盤面データ。ヘッダなしで 9 行 x 9 列であること。

    Returns
    -------
    Grid
        0〜9 の整数が入った 9x9 の盤面。

    Raises
    ------
    InputShapeError
        行数・列数が 9 でない、または整数 0〜9 以外の値がある場合。
    """
    rows, cols = df.shape
    if rows != GRID_SIZE:
        raise InputShapeError(
            f"Invalid csv file. Only {GRID_SIZE}x{GRID_SIZE} boards allowed: got {rows} rows"
        )
    if cols != GRID_SIZE:
        raise InputShapeError(
            f"Invalid csv file. Only {GRID_SIZE}x{GRID_SIZE} boards allowed: "
            f"got {cols} columns",
            row=1,
        )

    values = np.zeros((GRID_SIZE, GRID_SIZE), dtype=np.uint8)
    for i in range(rows):
        # 短い行は pandas が NaN で埋めるので、ここで列数不足として弾く
        missing = df.iloc[i].isna()
        if missing.any():
            raise InputShapeError(
                f"Invalid csv file. Only {GRID_SIZE}x{GRID_SIZE} boards allowed: "
                f"row {i + 1} has {int((~missing).sum())} values",
                row=i + 1,
            )
        for j in range(cols):
            values[i, j] = normalize_cell(df.iat[i, j], row=i + 1, column=j + 1)

    return Grid.from_rows(values)


def load_grid_csv(path: str | Path) -> Grid:
    """
    盤面 CSV を読み込み、Grid にして返します。

    Parameters
    ----------
    path : str or Path
        CSV ファイルのパス。

    Raises
    ------
    FileNotFoundError
        ファイルが存在しない場合。
    InputShapeError
        CSV として読めない、または 9x9 の 0〜9 になっていない場合。
    """
    p = Path(path)
    if not p.exists():
        raise FileNotFoundError(f"Board CSV not found: {p}")

    try:
        # 列名を 1 つ多く (0〜9) 与えておくと、
        # 列数は 1 行目ではなくこの列名で決まり、
        # 短い行は NaN 埋め、10 個の行は列 9 に値が入る
        df = pd.read_csv(
            p,
            header=None,
            names=list(range(GRID_SIZE + 1)),
            index_col=False,
            sep=CSV_DELIMITER,
            dtype=str,
            encoding=CSV_ENCODING,
            keep_default_na=False,
            skipinitialspace=True,
        )
    except pd.errors.EmptyDataError as exc:
        raise InputShapeError(f"Invalid csv file. {p} is empty") from exc
    except pd.errors.ParserError as exc:
        # 例: "Error tokenizing data. C error: Expected 10 fields in line 3, saw 11"
        detail = str(exc).strip().split("C error: ")[-1]
        m = LINE_RE.search(detail)
        raise InputShapeError(
            f"Invalid csv file. Only {GRID_SIZE}x{GRID_SIZE} boards allowed: {detail}",
            row=int(m.group(1)) if m else None,
        ) from exc
    except UnicodeDecodeError as exc:
        raise InputShapeError(f"Unreadable csv: {p}") from exc
    except OSError as exc:
        # ディレクトリや読み取り権限のないファイル
        raise InputShapeError(f"Unreadable csv: {p} ({exc.strerror or exc})") from exc

    try:
        extra = df[GRID_SIZE].notna() & (df[GRID_SIZE] != "")
        if extra.any():
            i = int(extra.to_numpy().argmax())
            raise InputShapeError(
                f"Invalid csv file. Only {GRID_SIZE}x{GRID_SIZE} boards allowed: "
                f"row {i + 1} has more than {GRID_SIZE} values",
                row=i + 1,
            )
        grid = normalize_grid(df.iloc[:, :GRID_SIZE])
    except InputShapeError as exc:
        logger.warning("Rejected %s: %s", p, exc)
        raise

    logger.info("Loaded board from %s (%d givens)", p, grid.filled_count())
    return grid


def grid_to_dataframe(grid: Grid) -> pd.DataFrame:
    """Grid を整数の DataFrame (9x9) に変換します。"""
    return pd.DataFrame(grid.to_array().astype(int))


def save_grid_csv(grid: Grid, path: str | Path) -> Path:
    """
    Grid を load_grid_csv で読み戻せる形式（ヘッダなし CSV）で保存します。
    """
    p = Path(path)
    grid_to_dataframe(grid).to_csv(p, header=False, index=False, sep=CSV_DELIMITER)
    return p
