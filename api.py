from typing import Optional, Union

from fastapi import FastAPI, HTTPException
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field, StrictInt, StrictStr

from icepaths.grid import Grid, random_grid
from icepaths.solver import count_paths
from rules.rules import (
    DEFAULT_ALGORITHM,
    DEFAULT_BLOCKED_FRACTION,
    DEFAULT_MAX_EXHAUSTIVE_STEPS,
    EXHAUSTIVE_BIT_WIDTH,
    MAX_RANDOM_DIMENSION,
)


GridRow = Union[StrictStr, list[Union[StrictStr, StrictInt]]]


class CountRequest(BaseModel):
    grid: list[GridRow] = Field(
        ...,
        description="Rows of the grid: strings of '.' (open) and 'X' (blocked), or lists of 'open'/'blocked' or 0/1 flags",
    )
    algorithm: str = Field(
        default=DEFAULT_ALGORITHM,
        description="Counting algorithm: exhaustive, dyn_prog, or compare.",
    )
    max_exhaustive_steps: int = Field(
        default=DEFAULT_MAX_EXHAUSTIVE_STEPS,
        ge=0,
        le=EXHAUSTIVE_BIT_WIDTH - 1,
        description="Largest path length (rows + columns - 2) the exhaustive counter may enumerate.",
    )
    include_table: bool = Field(default=False, description="Include the dynamic-programming count table in the response")
    trace: bool = Field(default=False, description="Include counter trace output in the response")
    trace_max_lines: int = Field(default=1000, ge=1, le=20000, description="Maximum number of trace lines to return.")


class CountResponse(BaseModel):
    algorithm_used: str
    rows: int
    columns: int
    steps: int
    count: int
    exhaustive_count: Optional[int] = None
    dyn_prog_count: Optional[int] = None
    agree: Optional[bool] = None
    table: Optional[list[list[int]]] = None
    message: str
    grid_rows: list[str]
    grid_text: str
    trace: Optional[list[str]] = None
    trace_truncated: bool = False


class RandomGridRequest(BaseModel):
    rows: int = Field(..., ge=1, le=MAX_RANDOM_DIMENSION, description="Number of rows")
    columns: int = Field(..., ge=1, le=MAX_RANDOM_DIMENSION, description="Number of columns")
    blocked_fraction: float = Field(
        default=DEFAULT_BLOCKED_FRACTION,
        ge=0.0,
        le=1.0,
        description="Probability that a cell other than the two corners is blocked.",
    )
    seed: Optional[int] = Field(default=None, description="Seed for reproducible grids")


class RandomGridResponse(BaseModel):
    rows: int
    columns: int
    blocked_count: int
    grid_rows: list[str]
    grid_text: str


app = FastAPI(
    title="Iceberg Path Counter API",
    description="Count right/down paths from the top-left to the bottom-right cell of a grid while avoiding blocked cells.",
    version="0.1.0",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://127.0.0.1:5173", "http://localhost:5173"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.get("/health")
def health() -> dict[str, str]:
    return {"status": "ok"}


@app.post("/count", response_model=CountResponse)
def count(request: CountRequest) -> CountResponse:
    try:
        grid = Grid(request.grid)
        trace_log: list[str] = []
        result = count_paths(
            grid,
            algorithm=request.algorithm,
            max_exhaustive_steps=request.max_exhaustive_steps,
            include_table=request.include_table,
            trace=request.trace,
            trace_log=trace_log if request.trace else None,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except RuntimeError as exc:
        raise HTTPException(status_code=500, detail=str(exc)) from exc

    grid_rows = grid.text_rows()
    trace_truncated = len(trace_log) > request.trace_max_lines
    return CountResponse(
        **result,
        grid_rows=grid_rows,
        grid_text="\n".join(grid_rows),
        trace=trace_log[: request.trace_max_lines] if request.trace else None,
        trace_truncated=trace_truncated,
    )


@app.post("/grid/random", response_model=RandomGridResponse)
def generate_grid(request: RandomGridRequest) -> RandomGridResponse:
    try:
        grid = random_grid(
            rows=request.rows,
            columns=request.columns,
            blocked_fraction=request.blocked_fraction,
            seed=request.seed,
        )
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc

    grid_rows = grid.text_rows()
    return RandomGridResponse(
        rows=grid.rows(),
        columns=grid.columns(),
        blocked_count=grid.blocked_count(),
        grid_rows=grid_rows,
        grid_text="\n".join(grid_rows),
    )
