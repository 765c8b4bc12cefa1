# -*- coding: utf-8 -*-
"""
パズルの入力を内部表現（Puzzle）に変換するモジュールです。

主な役割:
- テキスト形式のパズル定義を読み込む
- レイアウト部分を pandas.DataFrame 経由で numpy 配列に変換
- 行・列の目標値（+ / - の個数）を検証する

テキスト形式
------------
::

    <行数> <列数>
    <各行の + の個数>
    <各行の - の個数>
    <各列の + の個数>
    <各列の - の個数>
    <レイアウト（行数ぶん）>

レイアウトの 1 は縦向きマグネットの上マス、0 は横向きマグネットの左マスです。
空行と "#" で始まる行は無視します。
"""

from __future__ import annotations

import io
from pathlib import Path
from typing import Any, List, Optional, Sequence

import numpy as np
import pandas as pd

from ..types import Puzzle


class PuzzleFormatError(ValueError):
    """入力されたパズル定義の形式が正しくないときに送出します。"""


def normalize_cell(x: Any) -> int:
    """
    レイアウトの1マスの値を整数コードに変換します。

    - 1, "1", 1.0 -> 1
    - 0, "0"      -> 0
    - 空・欠損値   -> PuzzleFormatError
    """
    if x is None or (not isinstance(x, str) and pd.isna(x)):
        raise PuzzleFormatError("Layout has a missing cell")

    s = str(x).strip()
    if not s:
        raise PuzzleFormatError("Layout has a blank cell")

    # pandas が数値として読んだ場合の "1.0" も許す
    if s.endswith(".0"):
        s = s[:-2]

    if not s.isdigit():
        raise PuzzleFormatError(f"Layout cell {x!r} is not a number")
    return int(s)


def normalize_layout(df: pd.DataFrame) -> np.ndarray:
    """
    DataFrame から 2次元 numpy 配列に変換し、
    各セルを :func:`normalize_cell` によって正規化します。

    Returns
    -------
    numpy.ndarray
        shape = (rows, cols) の整数配列。
    """
    rows, cols = df.shape
    grid = np.empty((rows, cols), dtype=int)

    for i in range(rows):
        for j in range(cols):
            grid[i, j] = normalize_cell(df.iat[i, j])

    return grid


def _parse_int_line(line: str, what: str, expected: Optional[int] = None) -> List[int]:
    try:
        values = [int(tok) for tok in line.split()]
    except ValueError as exc:
        raise PuzzleFormatError(f"Wrong input format. {what} must be integers: {line!r}") from exc
    if expected is not None and len(values) != expected:
        raise PuzzleFormatError(
            f"Wrong input format. {what} must have {expected} values, got {len(values)}"
        )
    return values


def _check_targets(values: Sequence[int], what: str) -> List[int]:
    if any(v < 0 for v in values):
        raise PuzzleFormatError(f"{what} must be non-negative: {list(values)}")
    return [int(v) for v in values]


def build_puzzle(
    rows: int,
    cols: int,
    row_pos: Sequence[int],
    row_neg: Sequence[int],
    col_pos: Sequence[int],
    col_neg: Sequence[int],
    codes: Optional[np.ndarray] = None,
    owner: Optional[np.ndarray] = None,
) -> Puzzle:
    """
    解析済みの部品から Puzzle を組み立てます。

    レイアウトは codes（向きコード）か owner（マグネット番号）の
    どちらか一方で与えます。
    """
    from .magnet_extractor import extract_magnets, magnets_from_owner

    if rows <= 0 or cols <= 0:
        raise PuzzleFormatError(f"Board size must be positive, got {rows}x{cols}")

    for values, what, n in (
        (row_pos, "Row positive targets", rows),
        (row_neg, "Row negative targets", rows),
        (col_pos, "Column positive targets", cols),
        (col_neg, "Column negative targets", cols),
    ):
        if len(values) != n:
            raise PuzzleFormatError(f"{what} must have {n} values, got {len(values)}")
        _check_targets(values, what)

    if (codes is None) == (owner is None):
        raise PuzzleFormatError("Exactly one of codes / owner must be given")

    layout = codes if codes is not None else owner
    layout = np.asarray(layout, dtype=int)
    if layout.shape != (rows, cols):
        raise PuzzleFormatError(
            f"Layout shape {layout.shape} does not match board size {(rows, cols)}"
        )

    if codes is not None:
        magnets, owner_grid = extract_magnets(layout)
    else:
        magnets = magnets_from_owner(layout)
        owner_grid = layout.copy()

    return Puzzle(
        rows=rows,
        cols=cols,
        row_pos=list(row_pos),
        row_neg=list(row_neg),
        col_pos=list(col_pos),
        col_neg=list(col_neg),
        magnets=magnets,
        owner=owner_grid,
    )


def parse_puzzle_text(text: str) -> Puzzle:
    """
    テキスト形式のパズル定義を Puzzle に変換します。
    """
    lines = [
        ln.strip() for ln in text.splitlines()
        if ln.strip() and not ln.strip().startswith("#")
    ]
    if not lines:
        raise PuzzleFormatError(
            "Wrong input format. First line must be the size of the board"
        )

    size = _parse_int_line(lines[0], "Board size", expected=2)
    rows, cols = size

    headers = [
        ("Row positive targets", rows),
        ("Row negative targets", rows),
        ("Column positive targets", cols),
        ("Column negative targets", cols),
    ]
    targets: List[List[int]] = []
    for offset, (what, n) in enumerate(headers, start=1):
        if offset >= len(lines):
            raise PuzzleFormatError(f"Wrong input format. Missing line: {what}")
        targets.append(_parse_int_line(lines[offset], what, expected=n))

    layout_lines = lines[5:]
    if len(layout_lines) != rows:
        raise PuzzleFormatError(
            f"Wrong input format. Expected {rows} layout rows, got {len(layout_lines)}"
        )

    try:
        df = pd.read_csv(
            io.StringIO("\n".join(layout_lines)),
            sep=r"\s+",
            header=None,
            dtype=str,
            engine="python",
        )
    except pd.errors.ParserError as exc:
        raise PuzzleFormatError(f"Wrong input format. Ragged layout rows: {exc}") from exc

    if df.shape != (rows, cols):
        raise PuzzleFormatError(
            f"Layout shape {df.shape} does not match board size {(rows, cols)}"
        )

    row_pos, row_neg, col_pos, col_neg = targets
    return build_puzzle(
        rows, cols, row_pos, row_neg, col_pos, col_neg,
        codes=normalize_layout(df),
    )


def load_puzzle(path: "str | Path") -> Puzzle:
    """ファイルからパズルを読み込みます。"""
    try:
        text = Path(path).read_text(encoding="utf-8")
    except UnicodeDecodeError as exc:
        raise PuzzleFormatError(f"Puzzle file is not valid UTF-8: {exc}") from exc
    return parse_puzzle_text(text)
