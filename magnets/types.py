# -*- coding: utf-8 -*-
"""
マグネットパズル solver で使う主なデータ構造（型）をまとめたモジュールです。

dataclass と Enum を使うことで、
「この構造体はどんなフィールドを持っているのか」
「この値はどんな状態を取り得るのか」を
分かりやすく表現しています。
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, IntEnum
from typing import List, Optional, Tuple

import numpy as np

# グリッド上の座標を表す型 (row, col)
Coordinate = Tuple[int, int]

# 行・列を表す型 ("row", 3) / ("col", 0) など
Line = Tuple[str, int]


class CellSign(IntEnum):
    """
    1マスの符号です。numpy の int8 配列にそのまま格納できるよう IntEnum にしています。
    """

    NEGATIVE = -1
    EMPTY = 0
    POSITIVE = 1
    UNASSIGNED = 2

    @property
    def is_charged(self) -> bool:
        """+ または - が確定しているかどうか。"""
        return self in (CellSign.POSITIVE, CellSign.NEGATIVE)


class Orientation(Enum):
    """
    マグネット（変数）の向き（値）です。

    - POSITIVE_NEGATIVE : pole_a が +、pole_b が -
    - NEGATIVE_POSITIVE : pole_b が +、pole_a が -
    - EMPTY             : マグネットを置かない（両マスとも空）
    - UNASSIGNED        : 未割り当ての番兵。ドメインには現れません。
    """

    POSITIVE_NEGATIVE = "+-"
    NEGATIVE_POSITIVE = "-+"
    EMPTY = "00"
    UNASSIGNED = "??"

    def signs(self) -> Tuple[CellSign, CellSign]:
        """(pole_a の符号, pole_b の符号) を返します。"""
        return _ORIENTATION_SIGNS[self]


_ORIENTATION_SIGNS = {
    Orientation.POSITIVE_NEGATIVE: (CellSign.POSITIVE, CellSign.NEGATIVE),
    Orientation.NEGATIVE_POSITIVE: (CellSign.NEGATIVE, CellSign.POSITIVE),
    Orientation.EMPTY: (CellSign.EMPTY, CellSign.EMPTY),
    Orientation.UNASSIGNED: (CellSign.UNASSIGNED, CellSign.UNASSIGNED),
}

# 割り当て: マグネット番号 -> 向き
Assignment = List[Orientation]

# ドメイン: マグネット番号 -> まだ候補に残っている向きのリスト
Domains = List[List[Orientation]]


class InferenceMode(Enum):
    """
    探索中に行う推論（制約伝播）の種類です。
    """

    NONE = "none"
    FC = "fc"
    MAC = "mac"

    @classmethod
    def parse(cls, value: "str | InferenceMode") -> "InferenceMode":
        """
        "mac" / "MAC" / "fc" などの文字列から InferenceMode を作ります。
        知らない文字列なら ValueError を送出します。
        """
        if isinstance(value, cls):
            return value
        text = str(value).strip().lower()
        for mode in cls:
            if text in (mode.value, mode.name.lower()):
                return mode
        raise ValueError(
            f"Unknown inference mode: {value!r} (expected one of: none, fc, mac)"
        )


class ConstraintKind(Enum):
    SIGN = "sign"    # 隣接マスの符号が等しくなってはいけない
    LIMIT = "limit"  # 同じ行・列の +/- 個数の上限・下限


@dataclass(frozen=True)
class Magnet:
    """
    2マスを占めるマグネット（CSP の変数）です。

    Attributes
    ----------
    index : int
        0,1,2,... の連番。割り当て配列・ドメイン配列の添字になります。
    pole_a : (row, col)
        1つ目の極のマス。
    pole_b : (row, col)
        2つ目の極のマス。pole_a と上下または左右に隣接しています。
    """

    index: int
    pole_a: Coordinate
    pole_b: Coordinate

    def poles(self) -> Tuple[Coordinate, Coordinate]:
        return (self.pole_a, self.pole_b)

    def pole_at(self, cell: Coordinate) -> int:
        """cell が pole_a なら 0、pole_b なら 1 を返します。"""
        if cell == self.pole_a:
            return 0
        if cell == self.pole_b:
            return 1
        raise ValueError(f"cell {cell} does not belong to magnet {self.index}")

    @property
    def is_vertical(self) -> bool:
        return self.pole_a[1] == self.pole_b[1]


@dataclass(frozen=True)
class ConstraintArc:
    """
    伝播で使う有向の二項制約 (xi, xj) です。

    revise は xi のドメインだけを xj に対して絞り込みます。

    Attributes
    ----------
    xi, xj : int
        マグネット番号。
    kind : ConstraintKind
        SIGN なら pole_i / pole_j が隣接している極の番号、
        LIMIT なら line が共有している行・列を表します。
    """

    xi: int
    xj: int
    kind: ConstraintKind
    pole_i: Optional[int] = None
    pole_j: Optional[int] = None
    line: Optional[Line] = None


@dataclass
class Puzzle:
    """
    入力側から受け取る、解く前の盤面です。

    Attributes
    ----------
    rows, cols : int
        盤面の大きさ。
    row_pos, row_neg : list of int
        各行の + / - の個数（目標値）。
    col_pos, col_neg : list of int
        各列の + / - の個数（目標値）。
    magnets : list of Magnet
        マグネットの一覧。magnets[i].index == i です。
    owner : numpy.ndarray
        shape = (rows, cols)。各マスを占めているマグネット番号。
    """

    rows: int
    cols: int
    row_pos: List[int]
    row_neg: List[int]
    col_pos: List[int]
    col_neg: List[int]
    magnets: List[Magnet]
    owner: np.ndarray

    @property
    def shape(self) -> Tuple[int, int]:
        return (self.rows, self.cols)


@dataclass
class SearchStats:
    """探索の統計情報です。ログと結果表示に使います。"""

    nodes: int = 0
    backtracks: int = 0
    pruned: int = 0

    def as_dict(self) -> dict:
        return {"nodes": self.nodes, "backtracks": self.backtracks, "pruned": self.pruned}


@dataclass
class SolveOutcome:
    """
    1回の探索の結果です。

    assignment が None なら「解なし」を表します。
    """

    assignment: Optional[Assignment]
    mode: InferenceMode
    stats: SearchStats = field(default_factory=SearchStats)

    @property
    def solved(self) -> bool:
        return self.assignment is not None
