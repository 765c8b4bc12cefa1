# -*- coding: utf-8 -*-
"""
ログ出力の設定を行うモジュールです。

探索がどこまで進んだか（ノード数・バックトラック数）や、
どの推論モードで解いたかを確認するのに使います。
レベルと書式は config.py の LOG_LEVEL / LOG_FORMAT で決まります。
"""

from __future__ import annotations

import logging
from typing import Union

from .config import LOG_FORMAT, LOG_LEVEL

# magnets パッケージ共通で使うロガー名
LOGGER_NAME = "magnets"


def get_logger() -> logging.Logger:
    """
    magnets 全体で共通して使う logger を返します。

    初回だけ、標準エラー出力への handler を付け、
    レベルを config.LOG_LEVEL に合わせます。
    """
    logger = logging.getLogger(LOGGER_NAME)

    if not logger.handlers:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter(LOG_FORMAT))
        logger.addHandler(handler)
        logger.setLevel(LOG_LEVEL)

    return logger


def set_log_level(level: Union[str, int]) -> None:
    """実行中にレベルを変えます（CLI の --verbose など）。"""
    get_logger().setLevel(level)
