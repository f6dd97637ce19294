from rules.rules import STEP_RIGHT

from .constraints import is_step_valid, step_target
from .grid import Grid
from .types import Position, StepDirection


class Path:
    """Sequence of right/down steps taken from the origin of a grid."""

    def __init__(self, grid: Grid) -> None:
        self._grid = grid
        self._steps: list[StepDirection] = []
        self._row = 0
        self._column = 0

    @property
    def steps(self) -> list[StepDirection]:
        return list(self._steps)

    def position(self) -> Position:
        return self._row, self._column

    def is_step_valid(self, direction: StepDirection) -> bool:
        return is_step_valid(self._grid, self.position(), direction)

    def add_step(self, direction: StepDirection) -> None:
        if not self.is_step_valid(direction):
            raise ValueError(f"cannot step {direction} from {self.position()}")
        self._row, self._column = step_target(self.position(), direction)
        self._steps.append(direction)

    def reaches_destination(self) -> bool:
        return self.position() == (self._grid.rows() - 1, self._grid.columns() - 1)

    def describe(self) -> str:
        return "".join("R" if step == STEP_RIGHT else "D" for step in self._steps)

    def __len__(self) -> int:
        return len(self._steps)
