# -*- coding: utf-8 -*-
"""
magnets.grid パッケージ

盤面（グリッド）に関する処理をまとめたサブパッケージです。
- parser.py           : テキスト・DataFrame から Puzzle への変換
- magnet_extractor.py : レイアウトからマグネット（変数）の切り出し
- board.py            : 探索中に更新される盤面の符号とカウンタ
"""
