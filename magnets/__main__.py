# -*- coding: utf-8 -*-
"""
コマンドラインから解くためのエントリポイントです。

    python -m magnets data/sample_6x6.txt --mode mac

終了コード: 0 = 解あり, 1 = 解なし, 2 = 入力エラー
"""

from __future__ import annotations

import argparse
import sys
from typing import List, Optional

from . import solve_puzzle
from .config import DEFAULT_INFERENCE_MODE
from .grid.parser import PuzzleFormatError, load_puzzle
from .logging_utils import get_logger, set_log_level
from .postprocess.render_result import apply_assignment, render_board
from .types import InferenceMode

logger = get_logger()


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(prog="magnets", description="Solve a magnet puzzle.")
    parser.add_argument("puzzle", help="path to the puzzle definition file")
    parser.add_argument(
        "--mode",
        default=DEFAULT_INFERENCE_MODE,
        choices=[m.value for m in InferenceMode],
        help="inference used during search (default: %(default)s)",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="show DEBUG logs from propagation")
    args = parser.parse_args(argv)

    if args.verbose:
        set_log_level("DEBUG")

    try:
        puzzle = load_puzzle(args.puzzle)
    except (OSError, PuzzleFormatError) as exc:
        logger.error("Couldn't load puzzle %s: %s", args.puzzle, exc)
        return 2

    outcome = solve_puzzle(puzzle, args.mode)
    if not outcome.solved:
        print("No solution")
        return 1

    print(render_board(puzzle, apply_assignment(puzzle, outcome.assignment)))
    return 0


if __name__ == "__main__":
    sys.exit(main())
