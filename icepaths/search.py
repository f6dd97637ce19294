from typing import Optional

from rules.rules import CELL_BLOCKED

from .constraints import direction_for_bit
from .grid import Grid
from .state import Path
from .types import TraceLog
from .utils import format_bits, indent, path_length, trace
from .validation import validate_exhaustive_steps, validate_non_empty


def count_paths_exhaustive(
    grid: Grid,
    trace_enabled: bool = False,
    trace_log: Optional[TraceLog] = None,
) -> int:
    validate_non_empty(grid.rows(), grid.columns())
    steps = path_length(grid.rows(), grid.columns())
    validate_exhaustive_steps(steps)

    trace(
        trace_enabled,
        trace_log,
        f"Exhaustive search: {grid.rows()}x{grid.columns()} grid, steps={steps}, candidates={2 ** steps}",
    )

    if grid.get(0, 0) == CELL_BLOCKED:
        trace(trace_enabled, trace_log, f"{indent(1)}Origin is blocked; no path can start")
        return 0

    count = 0
    for bits in range(2 ** steps):
        candidate = Path(grid)
        rejected_at: Optional[int] = None
        for k in range(steps):
            direction = direction_for_bit(bits, k)
            if not candidate.is_step_valid(direction):
                rejected_at = k
                break
            candidate.add_step(direction)

        if rejected_at is None and candidate.reaches_destination():
            count += 1
            trace(trace_enabled, trace_log, f"{indent(1)}Accept {format_bits(bits, steps)} as {candidate.describe() or '(empty)'}")
        else:
            trace(
                trace_enabled,
                trace_log,
                f"{indent(1)}Reject {format_bits(bits, steps)} at step {rejected_at} from {candidate.position()}",
            )

    trace(trace_enabled, trace_log, f"Exhaustive search found {count} paths")
    return count
