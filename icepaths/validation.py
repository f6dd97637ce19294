from typing import Optional

from rules.rules import (
    ALGORITHMS,
    BLOCKED_SYMBOL,
    CELL_BLOCKED,
    CELL_OPEN,
    EXHAUSTIVE_BIT_WIDTH,
    MAX_RANDOM_DIMENSION,
    OPEN_SYMBOL,
)

from .types import CellRows, CellState, GridInput


_SYMBOL_STATES = {
    OPEN_SYMBOL: CELL_OPEN,
    BLOCKED_SYMBOL: CELL_BLOCKED,
    BLOCKED_SYMBOL.lower(): CELL_BLOCKED,
}


def normalize_cell(value: object, row: int, column: int) -> CellState:
    if isinstance(value, bool):
        raise ValueError(f"cell ({row}, {column}) must be a cell state, symbol, or 0/1 flag")
    if isinstance(value, int):
        if value not in (0, 1):
            raise ValueError(f"cell ({row}, {column}) integer flags must be 0 (open) or 1 (blocked)")
        return CELL_BLOCKED if value == 1 else CELL_OPEN
    if isinstance(value, str):
        if value in (CELL_OPEN, CELL_BLOCKED):
            return value
        if value in _SYMBOL_STATES:
            return _SYMBOL_STATES[value]
    raise ValueError(f"cell ({row}, {column}) has unknown value {value!r}")


def validate_and_normalize_grid(cells: GridInput) -> CellRows:
    if not isinstance(cells, (list, tuple)) or len(cells) == 0:
        raise ValueError("grid must be a non-empty list of rows")

    normalized_rows: CellRows = []
    expected_columns: Optional[int] = None
    for r, row in enumerate(cells):
        if isinstance(row, str):
            values: list[object] = list(row)
        elif isinstance(row, (list, tuple)):
            values = list(row)
        else:
            raise ValueError(f"grid row {r} must be a string or a list of cells")

        if len(values) == 0:
            raise ValueError("grid rows must contain at least one cell")
        if expected_columns is None:
            expected_columns = len(values)
        elif len(values) != expected_columns:
            raise ValueError("grid must be rectangular: every row needs the same number of cells")

        normalized_rows.append([normalize_cell(value, r, c) for c, value in enumerate(values)])

    return normalized_rows


def validate_non_empty(rows: int, columns: int) -> None:
    if rows < 1:
        raise ValueError("grid must have at least one row")
    if columns < 1:
        raise ValueError("grid must have at least one column")


def validate_exhaustive_steps(steps: int, max_steps: int = EXHAUSTIVE_BIT_WIDTH - 1) -> None:
    if steps >= EXHAUSTIVE_BIT_WIDTH:
        raise ValueError(
            f"path length {steps} does not fit in a {EXHAUSTIVE_BIT_WIDTH}-bit enumeration counter"
        )
    if steps > max_steps:
        raise ValueError(
            f"path length {steps} exceeds the exhaustive limit of {max_steps} steps; use dyn_prog instead"
        )


def validate_count_options(algorithm: str, max_exhaustive_steps: int) -> None:
    if algorithm not in ALGORITHMS:
        raise ValueError(f"algorithm must be one of: {', '.join(ALGORITHMS)}")
    if max_exhaustive_steps < 0 or max_exhaustive_steps >= EXHAUSTIVE_BIT_WIDTH:
        raise ValueError(f"max_exhaustive_steps must be between 0 and {EXHAUSTIVE_BIT_WIDTH - 1}")


def validate_random_options(rows: int, columns: int, blocked_fraction: float) -> None:
    if rows < 1 or columns < 1:
        raise ValueError("rows and columns must be at least 1")
    if rows > MAX_RANDOM_DIMENSION or columns > MAX_RANDOM_DIMENSION:
        raise ValueError(f"rows and columns must be at most {MAX_RANDOM_DIMENSION}")
    if blocked_fraction < 0 or blocked_fraction > 1:
        raise ValueError("blocked_fraction must be between 0 and 1")
