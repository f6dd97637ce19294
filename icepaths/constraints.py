from rules.rules import STEP_DOWN, STEP_RIGHT

from .grid import Grid
from .types import Position, StepDirection


def step_target(position: Position, direction: StepDirection) -> Position:
    r, c = position
    if direction == STEP_RIGHT:
        return r, c + 1
    if direction == STEP_DOWN:
        return r + 1, c
    raise ValueError(f"step direction must be one of: {STEP_RIGHT}, {STEP_DOWN}")


def is_step_valid(grid: Grid, position: Position, direction: StepDirection) -> bool:
    r, c = step_target(position, direction)
    if not grid.in_bounds(r, c):
        return False
    return grid.is_open(r, c)


def direction_for_bit(bits: int, k: int) -> StepDirection:
    # bit k, least significant first: 1 moves right, 0 moves down
    return STEP_RIGHT if (bits >> k) & 1 == 1 else STEP_DOWN
