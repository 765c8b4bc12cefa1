# -*- coding: utf-8 -*-
"""
magnets 全体で共通して使う設定値をまとめたモジュールです。

実運用時には、ここを編集することで
- 既定の推論モード（none / fc / mac）
- LCV のペナルティ
- 探索ログの出力間隔
- 盤面表示の書式
などを簡単に変更できます。
"""

from __future__ import annotations

# ==== 探索関連 =============================================================

# 既定の推論モード。
# "none" : 推論なし（整合性チェックだけの素朴なバックトラック）
# "fc"   : forward checking
# "mac"  : maintaining arc consistency（AC-3 方式）
DEFAULT_INFERENCE_MODE: str = "mac"

# LCV で、ある値を選ぶと隣接マグネットのドメインが空になってしまう場合に
# 追加で与えるペナルティ。
LCV_WIPEOUT_PENALTY: int = 5

# 何ノードごとに探索の途中経過をログに出すか。
SEARCH_LOG_INTERVAL: int = 1000

# ==== ログ関連 =============================================================

# magnets ロガーのレベル。探索の1ノードごとのログを見たいときは "DEBUG"。
LOG_LEVEL: str = "INFO"

LOG_FORMAT: str = "%(asctime)s [%(levelname)s] [%(name)s] %(message)s"

# ==== 表示関連 =============================================================

# render_board で 1 マスに使う幅（行ヘッダは 2 マス分）
RENDER_CELL_WIDTH: int = 4

# build_result の "board" で空マスを表す文字
EMPTY_CELL_MARK: str = "."
