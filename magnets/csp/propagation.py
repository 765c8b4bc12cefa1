# -*- coding: utf-8 -*-
"""
制約伝播（propagation）を行うモジュールです。

ここでの伝播は、普通の CSP と同じく
「矛盾を見つけたら即座に枝を捨てる」ハードなものです。

- revise                      : アーク (xi, xj) について xi のドメインを絞る
- forward_checking            : 割り当てた変数から張ったアークを1回ずつ revise
- maintaining_arc_consistency : ドメインが縮んだ変数からさらにアークを張り直す（AC-3）

どちらの伝播も、呼び出し元のドメインはコピーしてから絞り込むので、
親ノードのスナップショットは変更しません。
"""

from __future__ import annotations

from collections import deque
from typing import Deque, List, Optional, Tuple

from ..grid.board import Board
from ..logging_utils import get_logger
from ..types import (
    Assignment,
    ConstraintArc,
    Domains,
    InferenceMode,
    Orientation,
    SearchStats,
)
from .constraints import compatible, generate_arcs
from .domains import copy_domains, options_of, remove_value

logger = get_logger()


def revise(
    board: Board,
    arc: ConstraintArc,
    domains: Domains,
    assignment: Assignment,
) -> Tuple[bool, bool]:
    """
    xj のどの候補（割り当て済みならその値）とも両立しない値を
    xi のドメインから取り除きます。

    Returns
    -------
    changed : bool
        1つでも値を取り除いたら True。
    feasible : bool
        xi のドメインが空になったら False（この枝は行き止まり）。
    """
    if assignment[arc.xi] is not Orientation.UNASSIGNED:
        return False, True

    options = options_of(arc.xj, domains, assignment)
    to_be_deleted: List[Orientation] = [
        value for value in domains[arc.xi]
        if not any(compatible(board, arc, value, other) for other in options)
    ]
    for value in to_be_deleted:
        remove_value(domains[arc.xi], value)

    return bool(to_be_deleted), bool(domains[arc.xi])


def forward_checking(
    board: Board,
    domains: Domains,
    assignment: Assignment,
    arc_queue: Deque[ConstraintArc],
    stats: Optional[SearchStats] = None,
) -> Tuple[bool, Optional[Domains]]:
    """
    キューのアークを1回ずつ revise します。新しいアークは積みません。

    Returns
    -------
    (True, 絞り込んだドメイン) または (False, None)
    """
    inferred = copy_domains(domains)
    while arc_queue:
        arc = arc_queue.popleft()
        before = len(inferred[arc.xi])
        _, feasible = revise(board, arc, inferred, assignment)
        if stats is not None:
            stats.pruned += before - len(inferred[arc.xi])
        if not feasible:
            return False, None
    return True, inferred


def maintaining_arc_consistency(
    board: Board,
    domains: Domains,
    assignment: Assignment,
    arc_queue: Deque[ConstraintArc],
    stats: Optional[SearchStats] = None,
) -> Tuple[bool, Optional[Domains]]:
    """
    AC-3 方式で、キューが空になるまでアークを revise します。

    xi のドメインが実際に縮んだときだけ、xi の未割り当ての近傍へ
    アークを張り直してキューの末尾に追加します（縮めた元の xj は除く）。
    ドメインは有限で単調に縮むだけなので、ループは必ず終わります。
    """
    inferred = copy_domains(domains)
    while arc_queue:
        arc = arc_queue.popleft()
        before = len(inferred[arc.xi])
        changed, feasible = revise(board, arc, inferred, assignment)
        if stats is not None:
            stats.pruned += before - len(inferred[arc.xi])
        if not feasible:
            return False, None
        if changed:
            generate_arcs(board, arc.xi, assignment, exclude=arc.xj, queue=arc_queue)
    return True, inferred


def infer(
    board: Board,
    mode: InferenceMode,
    var: int,
    domains: Domains,
    assignment: Assignment,
    stats: Optional[SearchStats] = None,
) -> Tuple[bool, Optional[Domains]]:
    """
    var に値を割り当てた直後の推論を、モードに応じて行います。

    NONE の場合は何もせず、ドメインのコピーをそのまま返します。
    """
    if mode is InferenceMode.NONE:
        return True, copy_domains(domains)

    arc_queue: Deque[ConstraintArc] = deque()
    generate_arcs(board, var, assignment, queue=arc_queue)
    logger.debug("infer: var=%d mode=%s arcs=%d", var, mode.value, len(arc_queue))

    if mode is InferenceMode.FC:
        return forward_checking(board, domains, assignment, arc_queue, stats)
    return maintaining_arc_consistency(board, domains, assignment, arc_queue, stats)
