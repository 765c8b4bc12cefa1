# -*- coding: utf-8 -*-
"""
レイアウトからマグネット（2マスの変数）を抽出するモジュールです。

レイアウトの表し方は2通りあります。
- 向きコード : 1 = 縦向きマグネットの上マス、0 = 横向きマグネットの左マス
- 所有者番号 : 各マスに、そのマスを占めるマグネット番号が入っている
"""

from __future__ import annotations

from typing import Dict, List, Tuple

import numpy as np

from ..types import Coordinate, Magnet
from .parser import PuzzleFormatError

# 向きコード
VERTICAL_CODE = 1
HORIZONTAL_CODE = 0


def extract_magnets(codes: np.ndarray) -> Tuple[List[Magnet], np.ndarray]:
    """
    向きコードのグリッドからマグネットを抽出します。

    マスは行優先で走査し、すでに他のマグネットの2マス目として
    使われているマスは（コードに関係なく）読み飛ばします。
    マグネット番号は見つけた順に 0,1,2,... と振ります。

    Parameters
    ----------
    codes : numpy.ndarray
        shape = (rows, cols) の整数配列。

    Returns
    -------
    magnets : list of Magnet
    owner : numpy.ndarray
        各マスのマグネット番号。
    """
    rows, cols = codes.shape
    owner = np.full((rows, cols), -1, dtype=int)
    magnets: List[Magnet] = []

    for i in range(rows):
        for j in range(cols):
            if owner[i, j] >= 0:
                # 2マス目としてすでに使われている
                continue

            code = int(codes[i, j])
            if code == VERTICAL_CODE:
                other = (i + 1, j)
            elif code == HORIZONTAL_CODE:
                other = (i, j + 1)
            else:
                raise PuzzleFormatError(
                    f"Unknown layout code {code} at ({i}, {j}); expected 0 or 1"
                )

            oi, oj = other
            if oi >= rows or oj >= cols:
                raise PuzzleFormatError(
                    f"Magnet starting at ({i}, {j}) runs off the board"
                )
            if owner[oi, oj] >= 0:
                raise PuzzleFormatError(
                    f"Magnet starting at ({i}, {j}) overlaps magnet {owner[oi, oj]}"
                )

            index = len(magnets)
            magnets.append(Magnet(index=index, pole_a=(i, j), pole_b=other))
            owner[i, j] = index
            owner[oi, oj] = index

    return magnets, owner


def magnets_from_owner(owner: np.ndarray) -> List[Magnet]:
    """
    所有者番号のグリッドからマグネット一覧を作ります。

    番号は 0..N-1 の連番で、各番号はちょうど2つの隣接マスを
    占めている必要があります。行優先で先に現れるマスが pole_a です。
    """
    cells: Dict[int, List[Coordinate]] = {}
    rows, cols = owner.shape
    for i in range(rows):
        for j in range(cols):
            cells.setdefault(int(owner[i, j]), []).append((i, j))

    if sorted(cells) != list(range(len(cells))):
        raise PuzzleFormatError(
            f"Magnet ids must be 0..{len(cells) - 1}, got {sorted(cells)}"
        )

    magnets: List[Magnet] = []
    for index in range(len(cells)):
        pair = cells[index]
        if len(pair) != 2:
            raise PuzzleFormatError(
                f"Magnet {index} occupies {len(pair)} cells; expected 2"
            )
        (ai, aj), (bi, bj) = pair
        if abs(ai - bi) + abs(aj - bj) != 1:
            raise PuzzleFormatError(
                f"Magnet {index} cells {pair[0]} and {pair[1]} are not adjacent"
            )
        magnets.append(Magnet(index=index, pole_a=pair[0], pole_b=pair[1]))

    return magnets
