# sudoku_tool_api.py
# Optional FastAPI wrapper for the solver.
# Run with: uvicorn apps.api.sudoku_tool_api:app --reload

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from solver.backtracking import Sudoku
from solver.solver_core import InvalidLength, InvalidValue

app = FastAPI(title="Sudoku Solver API")


class GridModel(BaseModel):
    cells: list[int]
    block_side: int = 3


class IsAllowedRequest(GridModel):
    value: int
    pos: int


def _build(req: GridModel) -> Sudoku:
    if not 1 <= req.block_side <= 5:
        raise HTTPException(status_code=422, detail=f"block_side must be in 1..5, got {req.block_side}")
    try:
        return Sudoku(req.cells, block_side=req.block_side)
    except (InvalidLength, InvalidValue) as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.post("/solve")
def api_solve(req: GridModel):
    s = _build(req)
    result = s.solve()
    return {
        "result": result.value,
        "cells": list(s.cells),
        "solved": s.solved(),
        "valid": s.is_valid(),
        "stats": s.stats.as_dict(),
    }


@app.post("/is_allowed")
def api_is_allowed(req: IsAllowedRequest):
    s = _build(req)
    if not 0 <= req.pos < len(s):
        raise HTTPException(status_code=422, detail=f"pos must be in 0..{len(s) - 1}, got {req.pos}")
    return {"allowed": s.is_allowed(req.value, req.pos)}


@app.post("/sanity_check")
def api_sanity(req: GridModel):
    issues = _build(req).duplicates()
    return {"ok": len(issues) == 0, "issues": issues}
