# -*- coding: utf-8 -*-
"""
探索結果をもとに表示用の情報を構築するモジュールです。
"""

from __future__ import annotations

from typing import Any, Dict, List

import numpy as np

from ..config import EMPTY_CELL_MARK, RENDER_CELL_WIDTH
from ..types import Assignment, CellSign, Orientation, Puzzle, SolveOutcome

_SIGN_CHARS = {
    int(CellSign.POSITIVE): "+",
    int(CellSign.NEGATIVE): "-",
    int(CellSign.EMPTY): " ",
    int(CellSign.UNASSIGNED): "?",
}


def apply_assignment(puzzle: Puzzle, assignment: Assignment) -> np.ndarray:
    """
    割り当て（マグネットごとの向き）を、マスごとの符号グリッドに展開します。

    Returns
    -------
    numpy.ndarray
        shape = (rows, cols) の int8 配列。値は CellSign。
    """
    signs = np.full((puzzle.rows, puzzle.cols), int(CellSign.UNASSIGNED), dtype=np.int8)
    for magnet, value in zip(puzzle.magnets, assignment):
        sign_a, sign_b = value.signs()
        signs[magnet.pole_a] = int(sign_a)
        signs[magnet.pole_b] = int(sign_b)
    return signs


def render_board(puzzle: Puzzle, signs: np.ndarray) -> str:
    """
    盤面をテキストにします。

    先頭2行が列ごとの +/- の目標値、各行の先頭2つがその行の +/- の目標値です。
    """
    w = RENDER_CELL_WIDTH
    lines: List[str] = []
    lines.append(" " * (2 * w) + "".join(f"{n:>{w}}" for n in puzzle.col_pos))
    lines.append(" " * (2 * w) + "".join(f"{n:>{w}}" for n in puzzle.col_neg))
    for r in range(puzzle.rows):
        head = f"{puzzle.row_pos[r]:>{w}}{puzzle.row_neg[r]:>{w}}"
        cells = "".join(f"{_SIGN_CHARS[int(s)]:>{w}}" for s in signs[r])
        lines.append(head + cells)
    return "\n".join(lines)


def build_board_rows(signs: np.ndarray) -> List[str]:
    """'+', '-', '.'（空）からなる行文字列のリスト"""
    chars = dict(_SIGN_CHARS)
    chars[int(CellSign.EMPTY)] = EMPTY_CELL_MARK
    return ["".join(chars[int(s)] for s in row) for row in signs]


def build_orientation_list(puzzle: Puzzle, assignment: Assignment) -> List[Dict[str, Any]]:
    """
    マグネット番号 → 極の座標 → 向き の対応表を作る
    """
    items: List[Dict[str, Any]] = []
    for magnet, value in zip(puzzle.magnets, assignment):
        items.append({
            "magnet": magnet.index,
            "poles": [list(magnet.pole_a), list(magnet.pole_b)],
            "orientation": value.name,
        })
    return items


def build_result(puzzle: Puzzle, outcome: SolveOutcome) -> Dict[str, Any]:

    result: Dict[str, Any] = {
        "status": "ok" if outcome.solved else "no_solution",
        "mode": outcome.mode.value,
        "shape": (puzzle.rows, puzzle.cols),
        "stats": outcome.stats.as_dict(),
    }

    if not outcome.solved:
        result["board"] = []
        result["orientations"] = []
        return result

    signs = apply_assignment(puzzle, outcome.assignment)
    result["board"] = build_board_rows(signs)
    result["orientations"] = build_orientation_list(puzzle, outcome.assignment)
    return result


def count_empty(assignment: Assignment) -> int:
    return sum(1 for v in assignment if v is Orientation.EMPTY)
