# -*- coding: utf-8 -*-
"""
探索中の盤面の状態を管理するモジュールです。

Board は次の2つを常に同期させて保持します。

- 各マスの符号（+ / - / 空 / 未割り当て）
- 行・列ごとの +/- の個数と、未割り当てマスの個数

符号の書き換えは必ず :meth:`Board.set_sign` を通し、
そのたびにカウンタを +1 / -1 で差分更新します。
（毎回数え直すことはしません）
"""

from __future__ import annotations

from typing import List, Tuple

import numpy as np

from ..types import CellSign, Coordinate, Line, Magnet, Orientation, Puzzle

ROW = "row"
COL = "col"


class Board:
    """
    盤面の符号グリッドと、行・列の集計カウンタです。

    Attributes
    ----------
    signs : numpy.ndarray
        shape = (rows, cols) の int8 配列。値は CellSign。
    row_pos, row_neg, col_pos, col_neg : numpy.ndarray
        現在の（部分）割り当てで実現している +/- の個数。
    row_open, col_open : numpy.ndarray
        まだ UNASSIGNED のマスの個数。
    """

    def __init__(self, puzzle: Puzzle):
        self.puzzle = puzzle
        self.rows = puzzle.rows
        self.cols = puzzle.cols
        self.magnets: List[Magnet] = puzzle.magnets
        self.owner = np.asarray(puzzle.owner, dtype=int)

        self.row_target_pos = np.asarray(puzzle.row_pos, dtype=int)
        self.row_target_neg = np.asarray(puzzle.row_neg, dtype=int)
        self.col_target_pos = np.asarray(puzzle.col_pos, dtype=int)
        self.col_target_neg = np.asarray(puzzle.col_neg, dtype=int)

        self.signs = np.full((self.rows, self.cols), int(CellSign.UNASSIGNED), dtype=np.int8)

        self.row_pos = np.zeros(self.rows, dtype=int)
        self.row_neg = np.zeros(self.rows, dtype=int)
        self.col_pos = np.zeros(self.cols, dtype=int)
        self.col_neg = np.zeros(self.cols, dtype=int)

        self.row_open = np.full(self.rows, self.cols, dtype=int)
        self.col_open = np.full(self.cols, self.rows, dtype=int)

    # ------------------------------------------------------------------
    # マス単位の参照・更新
    # ------------------------------------------------------------------
    def sign_at(self, cell: Coordinate) -> CellSign:
        return CellSign(int(self.signs[cell]))

    def owner_of(self, cell: Coordinate) -> int:
        return int(self.owner[cell])

    def set_sign(self, cell: Coordinate, sign: CellSign) -> None:
        """マスの符号を書き換え、行・列のカウンタを差分更新します。"""
        old = self.sign_at(cell)
        if old == sign:
            return
        self._count(cell, old, -1)
        self.signs[cell] = int(sign)
        self._count(cell, sign, +1)

    def _count(self, cell: Coordinate, sign: CellSign, delta: int) -> None:
        r, c = cell
        if sign == CellSign.POSITIVE:
            self.row_pos[r] += delta
            self.col_pos[c] += delta
        elif sign == CellSign.NEGATIVE:
            self.row_neg[r] += delta
            self.col_neg[c] += delta
        elif sign == CellSign.UNASSIGNED:
            self.row_open[r] += delta
            self.col_open[c] += delta

    # ------------------------------------------------------------------
    # マグネット単位の更新
    # ------------------------------------------------------------------
    def place(self, magnet: Magnet, orientation: Orientation) -> None:
        """マグネットの両極に、向きに応じた符号を書き込みます。"""
        if orientation is Orientation.UNASSIGNED:
            raise ValueError("Cannot place an UNASSIGNED orientation; use lift()")
        sign_a, sign_b = orientation.signs()
        self.set_sign(magnet.pole_a, sign_a)
        self.set_sign(magnet.pole_b, sign_b)

    def lift(self, magnet: Magnet) -> None:
        """place() の逆操作。両極を UNASSIGNED に戻します。"""
        self.set_sign(magnet.pole_a, CellSign.UNASSIGNED)
        self.set_sign(magnet.pole_b, CellSign.UNASSIGNED)

    def is_placed(self, index: int) -> bool:
        return self.sign_at(self.magnets[index].pole_a) != CellSign.UNASSIGNED

    # ------------------------------------------------------------------
    # 幾何
    # ------------------------------------------------------------------
    def neighbors(self, cell: Coordinate) -> List[Coordinate]:
        """上下左右の隣接マス（盤面内のもの）を 下・上・右・左 の順に返します。"""
        r, c = cell
        out: List[Coordinate] = []
        if r + 1 < self.rows:
            out.append((r + 1, c))
        if r - 1 >= 0:
            out.append((r - 1, c))
        if c + 1 < self.cols:
            out.append((r, c + 1))
        if c - 1 >= 0:
            out.append((r, c - 1))
        return out

    def lines_of(self, magnet: Magnet) -> List[Line]:
        """マグネットが触れている行（重複なし）→ 列（重複なし）の順に返します。"""
        rows: List[Line] = []
        cols: List[Line] = []
        for r, c in magnet.poles():
            if (ROW, r) not in rows:
                rows.append((ROW, r))
            if (COL, c) not in cols:
                cols.append((COL, c))
        return rows + cols

    def cells_of(self, line: Line) -> List[Coordinate]:
        kind, k = line
        if kind == ROW:
            return [(k, j) for j in range(self.cols)]
        return [(i, k) for i in range(self.rows)]

    @staticmethod
    def in_line(cell: Coordinate, line: Line) -> bool:
        kind, k = line
        return cell[0] == k if kind == ROW else cell[1] == k

    # ------------------------------------------------------------------
    # 行・列の集計
    # ------------------------------------------------------------------
    def line_counts(self, line: Line) -> Tuple[int, int]:
        """(+ の個数, - の個数)"""
        kind, k = line
        if kind == ROW:
            return int(self.row_pos[k]), int(self.row_neg[k])
        return int(self.col_pos[k]), int(self.col_neg[k])

    def line_targets(self, line: Line) -> Tuple[int, int]:
        kind, k = line
        if kind == ROW:
            return int(self.row_target_pos[k]), int(self.row_target_neg[k])
        return int(self.col_target_pos[k]), int(self.col_target_neg[k])

    def open_cells(self, line: Line) -> int:
        kind, k = line
        if kind == ROW:
            return int(self.row_open[k])
        return int(self.col_open[k])

    def row_resolved(self, r: int) -> bool:
        return int(self.row_open[r]) == 0

    def col_resolved(self, c: int) -> bool:
        return int(self.col_open[c]) == 0

    def line_resolved(self, line: Line) -> bool:
        return self.open_cells(line) == 0
