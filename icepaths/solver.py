from typing import Optional

from rules.rules import DEFAULT_ALGORITHM, DEFAULT_MAX_EXHAUSTIVE_STEPS

from .counting import count_paths_dyn_prog, count_paths_with_table
from .grid import Grid, ensure_grid
from .search import count_paths_exhaustive
from .types import AlgorithmName, CountResult, TraceLog
from .utils import path_length, trace as trace_message
from .validation import validate_count_options, validate_exhaustive_steps


def count_paths(
    grid: object,
    algorithm: AlgorithmName = DEFAULT_ALGORITHM,
    max_exhaustive_steps: int = DEFAULT_MAX_EXHAUSTIVE_STEPS,
    include_table: bool = False,
    trace: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> CountResult:
    validate_count_options(algorithm, max_exhaustive_steps)
    setting = ensure_grid(grid)
    steps = path_length(setting.rows(), setting.columns())

    if algorithm in {"exhaustive", "compare"}:
        validate_exhaustive_steps(steps, max_exhaustive_steps)

    trace_message(
        trace,
        trace_log,
        f"Counting paths: algorithm={algorithm}, size={setting.rows()}x{setting.columns()}, blocked={setting.blocked_count()}",
    )

    exhaustive_count: Optional[int] = None
    dyn_prog_count: Optional[int] = None
    table = None

    if algorithm in {"exhaustive", "compare"}:
        exhaustive_count = count_paths_exhaustive(setting, trace_enabled=trace, trace_log=trace_log)
    if algorithm in {"dyn_prog", "compare"}:
        dyn_prog_count, table = count_paths_with_table(setting, trace_enabled=trace, trace_log=trace_log)

    if algorithm == "compare":
        if exhaustive_count != dyn_prog_count:
            raise RuntimeError(
                f"counters disagree: exhaustive={exhaustive_count}, dyn_prog={dyn_prog_count}"
            )
        count = dyn_prog_count
        message = "Exhaustive and dynamic-programming counts agree."
    elif algorithm == "exhaustive":
        count = exhaustive_count
        message = "Exhaustive enumeration completed."
    else:
        count = dyn_prog_count
        message = "Dynamic-programming count completed."

    return {
        "algorithm_used": algorithm,
        "rows": setting.rows(),
        "columns": setting.columns(),
        "steps": steps,
        "count": count,
        "exhaustive_count": exhaustive_count,
        "dyn_prog_count": dyn_prog_count,
        "agree": True if algorithm == "compare" else None,
        "table": table if include_table and table is not None else None,
        "message": message,
    }


def compare_counters(grid: object) -> tuple[int, int]:
    setting: Grid = ensure_grid(grid)
    return count_paths_exhaustive(setting), count_paths_dyn_prog(setting)
