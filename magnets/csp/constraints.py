# -*- coding: utf-8 -*-
"""
二項制約アーク（ConstraintArc）を生成・判定するモジュールです。

マグネット x に関係する「近傍」は2種類あります。

- 符号制約 (SIGN)  : x の極に上下左右で隣接するマスを持つ別マグネット。
                     隣り合う2マスが同じ符号（++ / --）になってはいけません。
- 個数制約 (LIMIT) : x と同じ行・列にマスを持つ別マグネット。
                     その行・列の +/- の個数が目標値を超えたり、
                     残りのマスでは目標値に届かなくなってはいけません。

アークは探索の各ステップで必要な分だけ生成し、保存はしません。
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterable, Optional, Set, Tuple

from ..grid.board import Board
from ..types import (
    Assignment,
    CellSign,
    ConstraintArc,
    ConstraintKind,
    Line,
    Magnet,
    Orientation,
)


def _is_arc_target(other: int, var: int, assignment: Assignment, exclude: Optional[int]) -> bool:
    # 割り当て済みの変数はドメインが動かないので、伝播の対象外
    return (
        other != var
        and other != exclude
        and assignment[other] is Orientation.UNASSIGNED
    )


def generate_arcs(
    board: Board,
    var: int,
    assignment: Assignment,
    exclude: Optional[int] = None,
    queue: Optional[Deque[ConstraintArc]] = None,
) -> Deque[ConstraintArc]:
    """
    var の未割り当ての近傍 xk について、アーク (xk, var) を生成します。

    Parameters
    ----------
    var : int
        ドメインが変化した（または値が割り当てられた）マグネット。
    exclude : int, optional
        アークを張らない近傍。MAC で「var を縮めた元の変数」に
        すぐ戻るアークを作らないために使います。
    queue : deque, optional
        指定するとそのキューの末尾に追加します。

    Returns
    -------
    deque of ConstraintArc
        先に符号制約（pole_a → pole_b、各極は 下・上・右・左）、
        次に個数制約（行 → 列、マスの並び順）の順です。
    """
    if queue is None:
        queue = deque()

    magnet = board.magnets[var]

    # 符号制約
    for pole, cell in enumerate(magnet.poles()):
        for ncell in board.neighbors(cell):
            other = board.owner_of(ncell)
            if not _is_arc_target(other, var, assignment, exclude):
                continue
            queue.append(
                ConstraintArc(
                    xi=other,
                    xj=var,
                    kind=ConstraintKind.SIGN,
                    pole_i=board.magnets[other].pole_at(ncell),
                    pole_j=pole,
                )
            )

    # 個数制約（同じ行・列で 1 マグネットにつき 1 本）
    for line in board.lines_of(magnet):
        seen: Set[int] = set()
        for cell in board.cells_of(line):
            other = board.owner_of(cell)
            if other in seen or not _is_arc_target(other, var, assignment, exclude):
                continue
            seen.add(other)
            queue.append(
                ConstraintArc(xi=other, xj=var, kind=ConstraintKind.LIMIT, line=line)
            )

    return queue


def line_within_limits(
    board: Board,
    line: Line,
    extra: Iterable[Tuple[Magnet, Orientation]] = (),
) -> bool:
    """
    行・列 line が、まだ目標値を満たし得るかどうかを判定します。

    extra には「盤面にはまだ置いていないが、置いたと仮定する」
    マグネットと向きを渡します。

    - + / - の個数が目標値を超えていないこと
    - 足りない個数の合計が、残りの未割り当てマスに収まること
    """
    pos, neg = board.line_counts(line)
    target_pos, target_neg = board.line_targets(line)
    open_cells = board.open_cells(line)

    for magnet, value in extra:
        for cell, sign in zip(magnet.poles(), value.signs()):
            if not board.in_line(cell, line):
                continue
            open_cells -= 1
            if sign == CellSign.POSITIVE:
                pos += 1
            elif sign == CellSign.NEGATIVE:
                neg += 1

    if pos > target_pos or neg > target_neg:
        return False
    return (target_pos - pos) + (target_neg - neg) <= open_cells


def compatible(board: Board, arc: ConstraintArc, value_i: Orientation, value_j: Orientation) -> bool:
    """
    xi = value_i, xj = value_j の組がアークの制約を満たすかどうか。

    xj がすでに盤面に置かれている場合、その寄与は盤面のカウンタに
    含まれているので二重に数えません。
    """
    if arc.kind is ConstraintKind.SIGN:
        sign_i = value_i.signs()[arc.pole_i]
        sign_j = value_j.signs()[arc.pole_j]
        return not (sign_i.is_charged and sign_i == sign_j)

    extra = [(board.magnets[arc.xi], value_i)]
    if not board.is_placed(arc.xj):
        extra.append((board.magnets[arc.xj], value_j))
    return line_within_limits(board, arc.line, extra)
