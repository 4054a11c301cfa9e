# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

解いた盤面は標準出力に、ログは標準エラー出力に出るので、
CLI の出力をそのままファイルに保存してもログは混ざりません。
"""

from __future__ import annotations

import logging

from .config import LOGGER_NAME, LOG_LEVEL

LOG_FORMAT = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"


def get_logger() -> logging.Logger:
    """
    sudoku_solver 共通の logger を返します。

    初回だけ、標準エラー出力へ LOG_LEVEL 以上を流すハンドラを付けます。
    """
    logger = logging.getLogger(LOGGER_NAME)
    if logger.handlers:
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    logger.addHandler(handler)
    logger.setLevel(LOG_LEVEL)
    return logger
