# magnets/__init__.py
# -*- coding: utf-8 -*-
"""
magnets パッケージの入口となるモジュールです。

api_proto/local_api.py や ``python -m magnets`` から:

    from magnets import solve

と呼び出されることを想定しています。

ここでは、パズル（Puzzle）を受け取り、
1. 盤面とドメインの初期化
2. MRV + LCV 付きバックトラック探索（推論モード none / fc / mac）
3. 完成盤面の検査
4. 表示用の結果構築
を順番に呼び出します。
"""

from __future__ import annotations

from typing import Any, Dict

from .config import DEFAULT_INFERENCE_MODE
from .logging_utils import get_logger
from .types import InferenceMode, Orientation, Puzzle, SolveOutcome
from .grid.parser import PuzzleFormatError, build_puzzle, load_puzzle, parse_puzzle_text
from .csp.search import backtracking_search
from .eval.verify import find_violations
from .postprocess.render_result import apply_assignment, build_result, count_empty, render_board

logger = get_logger()

__all__ = [
    "InferenceMode",
    "Orientation",
    "Puzzle",
    "PuzzleFormatError",
    "SolveOutcome",
    "build_puzzle",
    "load_puzzle",
    "parse_puzzle_text",
    "render_board",
    "solve",
    "solve_puzzle",
    "solve_text",
]


def solve_puzzle(puzzle: Puzzle, mode: "str | InferenceMode" = DEFAULT_INFERENCE_MODE) -> SolveOutcome:
    """
    パズルを解いて SolveOutcome を返します。

    解がない場合は outcome.assignment が None になります（例外にはしません）。
    """
    inference_mode = InferenceMode.parse(mode)
    outcome = backtracking_search(puzzle, inference_mode)

    if outcome.solved:
        signs = apply_assignment(puzzle, outcome.assignment)
        # 念のため、完成盤面をゼロから検査しておく
        for problem in find_violations(puzzle, signs):
            logger.warning("[WARNING] Solved board violates a rule: %s", problem)
        logger.info(
            "Solved: %d magnets placed, %d left empty.",
            len(outcome.assignment) - count_empty(outcome.assignment),
            count_empty(outcome.assignment),
        )
    else:
        logger.info("No solution found.")

    return outcome


def solve(puzzle: Puzzle, mode: "str | InferenceMode" = DEFAULT_INFERENCE_MODE) -> Dict[str, Any]:
    """
    マグネットパズルを解くメイン関数。

    Returns
    -------
    dict
        :func:`magnets.postprocess.render_result.build_result` の結果。
    """
    logger.info("=== solve() START ===")
    logger.info("Board shape: %s, magnets=%d", puzzle.shape, len(puzzle.magnets))

    outcome = solve_puzzle(puzzle, mode)
    result = build_result(puzzle, outcome)

    logger.info("=== solve() END (status=%s) ===", result["status"])
    return result


def solve_text(text: str, mode: "str | InferenceMode" = DEFAULT_INFERENCE_MODE) -> Dict[str, Any]:
    """テキスト形式のパズル定義をそのまま解きます。"""
    return solve(parse_puzzle_text(text), mode)
