import random
from typing import Optional

from rules.rules import BLOCKED_SYMBOL, CELL_BLOCKED, CELL_OPEN, DEFAULT_BLOCKED_FRACTION, OPEN_SYMBOL

from .types import CellRows, CellState, GridInput
from .validation import validate_and_normalize_grid, validate_random_options


class Grid:
    """Immutable rectangular arrangement of open and blocked cells.

    Cells are addressed as (row, column) with (0, 0) in the top-left corner.
    """

    __slots__ = ("_cells",)

    def __init__(self, cells: GridInput) -> None:
        normalized = validate_and_normalize_grid(cells)
        self._cells: tuple[tuple[CellState, ...], ...] = tuple(tuple(row) for row in normalized)

    def rows(self) -> int:
        return len(self._cells)

    def columns(self) -> int:
        return len(self._cells[0])

    def get(self, row: int, column: int) -> CellState:
        if not self.in_bounds(row, column):
            raise IndexError(f"cell ({row}, {column}) is outside a {self.rows()}x{self.columns()} grid")
        return self._cells[row][column]

    def in_bounds(self, row: int, column: int) -> bool:
        return 0 <= row < self.rows() and 0 <= column < self.columns()

    def is_open(self, row: int, column: int) -> bool:
        return self.get(row, column) == CELL_OPEN

    def blocked_count(self) -> int:
        return sum(1 for row in self._cells for state in row if state == CELL_BLOCKED)

    def text_rows(self) -> list[str]:
        return ["".join(OPEN_SYMBOL if state == CELL_OPEN else BLOCKED_SYMBOL for state in row) for row in self._cells]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Grid):
            return NotImplemented
        return self._cells == other._cells

    def __hash__(self) -> int:
        return hash(self._cells)

    def __repr__(self) -> str:
        return f"Grid({self.text_rows()!r})"

    def __str__(self) -> str:
        return "\n".join(self.text_rows())


def ensure_grid(grid: object) -> Grid:
    if isinstance(grid, Grid):
        return grid
    return Grid(grid)  # type: ignore[arg-type]


def open_grid(rows: int, columns: int) -> Grid:
    if rows < 1 or columns < 1:
        raise ValueError("rows and columns must be at least 1")
    return Grid([OPEN_SYMBOL * columns for _ in range(rows)])


def random_grid(
    rows: int,
    columns: int,
    blocked_fraction: float = DEFAULT_BLOCKED_FRACTION,
    seed: Optional[int] = None,
) -> Grid:
    validate_random_options(rows, columns, blocked_fraction)
    rng = random.Random(seed)

    cells: CellRows = []
    for r in range(rows):
        row: list[CellState] = []
        for c in range(columns):
            # corners stay open so generated grids are never trivially zero
            if (r, c) in ((0, 0), (rows - 1, columns - 1)):
                row.append(CELL_OPEN)
            elif rng.random() < blocked_fraction:
                row.append(CELL_BLOCKED)
            else:
                row.append(CELL_OPEN)
        cells.append(row)

    return Grid(cells)
