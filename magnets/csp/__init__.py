# -*- coding: utf-8 -*-
"""
magnets.csp パッケージ

マグネットパズルを CSP（制約充足問題）として解く処理をまとめています。

主に以下の役割を持つモジュールから構成されています。
- domains.py     : 初期ドメインと、ドメインのコピー・値の削除
- constraints.py : 二項制約アーク（符号制約・個数制約）の生成と判定
- consistency.py : 仮割り当て直後の整合性チェック
- propagation.py : revise と forward checking / MAC（AC-3）
- search.py      : MRV + LCV 付きのバックトラック探索
"""
