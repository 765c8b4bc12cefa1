# -*- coding: utf-8 -*-
"""
完成した盤面を、探索とは独立にゼロから検査するモジュールです。

探索側のカウンタ差分更新に誤りがあっても気づけるよう、
ここでは毎回数え直します。
"""

from __future__ import annotations

from typing import List

import numpy as np

from ..types import CellSign, Puzzle


def find_violations(puzzle: Puzzle, signs: np.ndarray) -> List[str]:
    """
    盤面 signs のルール違反を文字列のリストで返します（空なら正解）。

    - 未割り当てのマスが残っていない
    - 別マグネットの隣接マス同士が同じ符号になっていない
    - 各行・各列の +/- の個数が目標値と一致する
    """
    violations: List[str] = []
    rows, cols = puzzle.rows, puzzle.cols

    unassigned = np.argwhere(signs == int(CellSign.UNASSIGNED))
    for r, c in unassigned:
        violations.append(f"cell ({r}, {c}) is unassigned")

    for r in range(rows):
        for c in range(cols):
            sign = int(signs[r, c])
            if sign not in (int(CellSign.POSITIVE), int(CellSign.NEGATIVE)):
                continue
            # 右と下だけ見れば全ペアを1回ずつ調べられる
            for nr, nc in ((r + 1, c), (r, c + 1)):
                if nr >= rows or nc >= cols:
                    continue
                if puzzle.owner[r, c] == puzzle.owner[nr, nc]:
                    continue
                if int(signs[nr, nc]) == sign:
                    violations.append(f"cells ({r}, {c}) and ({nr}, {nc}) share sign {sign:+d}")

    pos = signs == int(CellSign.POSITIVE)
    neg = signs == int(CellSign.NEGATIVE)
    for r in range(rows):
        got = (int(pos[r].sum()), int(neg[r].sum()))
        want = (puzzle.row_pos[r], puzzle.row_neg[r])
        if got != want:
            violations.append(f"row {r} has (+{got[0]}, -{got[1]}), expected (+{want[0]}, -{want[1]})")
    for c in range(cols):
        got = (int(pos[:, c].sum()), int(neg[:, c].sum()))
        want = (puzzle.col_pos[c], puzzle.col_neg[c])
        if got != want:
            violations.append(f"col {c} has (+{got[0]}, -{got[1]}), expected (+{want[0]}, -{want[1]})")

    return violations
