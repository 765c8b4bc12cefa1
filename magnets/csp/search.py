# -*- coding: utf-8 -*-
"""
バックトラック探索を行うモジュールです。

ざっくり流れ
------------
1. 未割り当てのマグネットのうち、ドメインが最も小さいものを選ぶ（MRV）
2. その候補の向きを、近傍のドメインを削らない順に並べる（LCV）
3. 各値について
   - 盤面に置く（符号とカウンタを更新）
   - 整合性チェック（is_consistent）
   - 推論（none / fc / mac）でドメインを絞る
   - 絞ったドメインのスナップショットを持って再帰
4. 失敗したら盤面から取り除き、次の値へ
5. どの値でもダメなら None を返して呼び出し元に戻る

割り当て配列と盤面は 置く／取り除く の対で元に戻し、
ドメインは再帰ごとのコピーで元に戻します。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional, Sequence, Set

from ..config import LCV_WIPEOUT_PENALTY, SEARCH_LOG_INTERVAL
from ..grid.board import Board
from ..logging_utils import get_logger
from ..types import (
    Assignment,
    ConstraintArc,
    Domains,
    InferenceMode,
    Orientation,
    Puzzle,
    SearchStats,
    SolveOutcome,
)
from .consistency import is_consistent
from .constraints import compatible, generate_arcs
from .domains import build_initial_assignment, build_initial_domains
from .propagation import infer

logger = get_logger()


@dataclass
class SearchContext:
    """
    探索全体で共有する情報をまとめたクラスです。
    """

    board: Board
    mode: InferenceMode
    stats: SearchStats = field(default_factory=SearchStats)


def assign(board: Board, var: int, value: Orientation, assignment: Assignment) -> None:
    board.place(board.magnets[var], value)
    assignment[var] = value


def unassign(board: Board, var: int, assignment: Assignment) -> None:
    board.lift(board.magnets[var])
    assignment[var] = Orientation.UNASSIGNED


def select_unassigned_variable(domains: Domains, assignment: Assignment) -> Optional[int]:
    """
    次に割り当てるマグネットを選びます。

    MRV（Minimum Remaining Values）：
    - まだ割り当てられていないマグネットのうち、ドメインサイズが最も小さいもの
    - 同じなら番号の小さいもの
    """
    candidates = [v for v, value in enumerate(assignment) if value is Orientation.UNASSIGNED]
    if not candidates:
        return None
    return min(candidates, key=lambda v: (len(domains[v]), v))


def lcv_penalty(
    board: Board,
    value: Orientation,
    arcs: Sequence[ConstraintArc],
    domains: Domains,
) -> int:
    """
    value を選んだ場合に、近傍のドメインから消える値の個数。

    同じ近傍に複数のアークがあっても、消える値は和集合で数えます。
    ある近傍のドメインが空になる場合は LCV_WIPEOUT_PENALTY を加えます。
    """
    eliminated: Dict[int, Set[Orientation]] = {}
    for arc in arcs:
        gone = eliminated.setdefault(arc.xi, set())
        for other in domains[arc.xi]:
            if other not in gone and not compatible(board, arc, other, value):
                gone.add(other)

    penalty = 0
    for neighbor, gone in eliminated.items():
        penalty += len(gone)
        if gone and len(gone) == len(domains[neighbor]):
            penalty += LCV_WIPEOUT_PENALTY
    return penalty


def order_domain_values(
    board: Board,
    var: int,
    domains: Domains,
    assignment: Assignment,
) -> List[Orientation]:
    """
    LCV（Least Constraining Value）で値の順序付けを行う。

    近傍のドメインをあまり削らない値（= 影響が小さい）から試します。
    ドメイン自体は変更しません。同点ならドメインの並び順のままです。
    """
    arcs = list(generate_arcs(board, var, assignment))
    scored = [(lcv_penalty(board, value, arcs, domains), value) for value in domains[var]]
    scored.sort(key=lambda t: t[0])
    return [v for _, v in scored]


def backtrack(ctx: SearchContext, domains: Domains, assignment: Assignment) -> Optional[Assignment]:
    """
    再帰的なバックトラック探索です。

    解が見つかれば割り当て配列のコピーを、見つからなければ None を返します。
    """
    ctx.stats.nodes += 1
    if ctx.stats.nodes % SEARCH_LOG_INTERVAL == 0:
        logger.info(
            "[search] nodes=%d, backtracks=%d, pruned=%d",
            ctx.stats.nodes,
            ctx.stats.backtracks,
            ctx.stats.pruned,
        )

    var = select_unassigned_variable(domains, assignment)
    if var is None:
        # すべて割り当て済み
        return list(assignment)

    board = ctx.board
    for value in order_domain_values(board, var, domains, assignment):
        assign(board, var, value, assignment)

        if is_consistent(board, var):
            feasible, inferred = infer(board, ctx.mode, var, domains, assignment, ctx.stats)
            if feasible:
                result = backtrack(ctx, inferred, assignment)
                if result is not None:
                    return result

        unassign(board, var, assignment)
        ctx.stats.backtracks += 1

    return None


def backtracking_search(puzzle: Puzzle, mode: InferenceMode = InferenceMode.MAC) -> SolveOutcome:
    """
    探索のエントリポイント。

    Parameters
    ----------
    puzzle : Puzzle
        入力側で検証済みのパズル。
    mode : InferenceMode
        推論モード。結果の正しさには影響せず、探索量だけが変わります。
    """
    ctx = SearchContext(board=Board(puzzle), mode=mode)
    domains = build_initial_domains(puzzle.magnets)
    assignment = build_initial_assignment(puzzle.magnets)

    logger.info(
        "Search start: board=%dx%d, magnets=%d, mode=%s",
        puzzle.rows, puzzle.cols, len(puzzle.magnets), mode.value,
    )
    result = backtrack(ctx, domains, assignment)
    logger.info(
        "Search end: solved=%s, nodes=%d, backtracks=%d, pruned=%d",
        result is not None,
        ctx.stats.nodes,
        ctx.stats.backtracks,
        ctx.stats.pruned,
    )

    return SolveOutcome(assignment=result, mode=mode, stats=ctx.stats)
