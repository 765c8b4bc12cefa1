# -*- coding: utf-8 -*-
"""
仮割り当て直後の整合性チェックを行うモジュールです。

探索側はマグネットを盤面に置いた（Board.place）直後に
:func:`is_consistent` を呼び、False なら置いたマグネットを取り除いて
次の値を試します。
"""

from __future__ import annotations

from ..grid.board import Board
from .constraints import line_within_limits


def has_sign_conflict(board: Board, var: int) -> bool:
    """
    var の極と、上下左右で隣接する別マグネットのマスが同じ符号かどうか。

    空マス同士・未割り当てのマスとは衝突しません。
    """
    magnet = board.magnets[var]
    for cell in magnet.poles():
        sign = board.sign_at(cell)
        if not sign.is_charged:
            continue
        for ncell in board.neighbors(cell):
            if board.owner_of(ncell) == var:
                continue
            if board.sign_at(ncell) == sign:
                return True
    return False


def is_consistent(board: Board, var: int) -> bool:
    """
    マグネット var を置いた後の盤面が矛盾していないかを判定します。

    チェックは次の順で行い、最初に見つかった違反で False を返します。

    1. 隣接マスの符号の衝突
    2. var が触れている行・列で、+/- の個数が目標値を超えていないか
    3. 行・列のマスがすべて埋まったなら、個数が目標値とちょうど一致するか
    4. 残りの未割り当てマスで目標値に届くか
    """
    if has_sign_conflict(board, var):
        return False

    lines = board.lines_of(board.magnets[var])

    for line in lines:
        pos, neg = board.line_counts(line)
        target_pos, target_neg = board.line_targets(line)
        if pos > target_pos or neg > target_neg:
            return False

    for line in lines:
        if board.line_resolved(line) and board.line_counts(line) != board.line_targets(line):
            return False

    for line in lines:
        if not line_within_limits(board, line):
            return False

    return True
