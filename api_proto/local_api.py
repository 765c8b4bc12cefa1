import logging
from typing import List

import pandas as pd
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from magnets import build_puzzle, solve
from magnets.config import DEFAULT_INFERENCE_MODE
from magnets.grid.parser import normalize_layout

logger = logging.getLogger("magnets_api")

app = FastAPI()


class SolveRequest(BaseModel):
    rows: int
    cols: int
    row_pos: List[int]
    row_neg: List[int]
    col_pos: List[int]
    col_neg: List[int]
    layout: List[List[int]]  # 1 = top of a vertical magnet, 0 = left of a horizontal one
    mode: str = DEFAULT_INFERENCE_MODE


@app.post("/api/solve")
async def api_solve(request: SolveRequest):
    """
    Solver API endpoint.
    Receives targets and layout (2D array), converts the layout via DataFrame, and calls solver logic.
    """
    try:
        # 2D配列をDataFrameに変換
        df = pd.DataFrame(request.layout)
        puzzle = build_puzzle(
            request.rows,
            request.cols,
            request.row_pos,
            request.row_neg,
            request.col_pos,
            request.col_neg,
            codes=normalize_layout(df),
        )
        return solve(puzzle, request.mode)
    except ValueError as e:
        # 入力エラー（PuzzleFormatError / 不明な mode）
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.exception("Solver error")
        raise HTTPException(status_code=500, detail=str(e))


@app.get("/api/health")
async def api_health():
    return {"status": "ok"}
