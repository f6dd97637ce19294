import math
from typing import Optional

from rules.rules import CELL_BLOCKED

from .grid import Grid
from .types import CountTable, TraceLog
from .utils import indent, path_length, trace
from .validation import validate_non_empty


def build_count_table(
    grid: Grid,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> CountTable:
    rows = grid.rows()
    columns = grid.columns()
    validate_non_empty(rows, columns)

    table: CountTable = [[0] * columns for _ in range(rows)]
    table[0][0] = 0 if grid.get(0, 0) == CELL_BLOCKED else 1
    trace(trace_enabled, trace_log, f"Dynamic programming: {rows}x{columns} table, origin={table[0][0]}")

    for i in range(rows):
        for j in range(columns):
            if i == 0 and j == 0:
                continue
            if grid.get(i, j) == CELL_BLOCKED:
                table[i][j] = 0
                trace(trace_enabled, trace_log, f"{indent(1)}Cell ({i}, {j}) is blocked")
                continue

            from_above = 0
            from_left = 0
            if i > 0 and grid.get(i - 1, j) != CELL_BLOCKED:
                from_above = table[i - 1][j]
            if j > 0 and grid.get(i, j - 1) != CELL_BLOCKED:
                from_left = table[i][j - 1]

            table[i][j] = from_above + from_left
            trace(
                trace_enabled,
                trace_log,
                f"{indent(1)}Cell ({i}, {j}) = {from_above} from above + {from_left} from left = {table[i][j]}",
            )

    return table


def count_paths_with_table(
    grid: Grid,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> tuple[int, CountTable]:
    table = build_count_table(grid, trace_enabled=trace_enabled, trace_log=trace_log)
    count = table[grid.rows() - 1][grid.columns() - 1]
    trace(trace_enabled, trace_log, f"Dynamic programming found {count} paths")
    return count, table


def count_paths_dyn_prog(
    grid: Grid,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> int:
    count, _ = count_paths_with_table(grid, trace_enabled=trace_enabled, trace_log=trace_log)
    return count


def count_paths_open_grid(rows: int, columns: int) -> int:
    validate_non_empty(rows, columns)
    return math.comb(path_length(rows, columns), rows - 1)
