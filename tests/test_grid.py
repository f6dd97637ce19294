import unittest

from icepaths.grid import Grid, open_grid, random_grid
from icepaths.state import Path
from rules.rules import CELL_BLOCKED, CELL_OPEN, STEP_DOWN, STEP_RIGHT


class TestGrid(unittest.TestCase):
    def test_builds_from_text_rows(self) -> None:
        grid = Grid([".X.", "..."])
        self.assertEqual(grid.rows(), 2)
        self.assertEqual(grid.columns(), 3)
        self.assertEqual(grid.get(0, 1), CELL_BLOCKED)
        self.assertEqual(grid.get(1, 2), CELL_OPEN)
        self.assertEqual(grid.text_rows(), [".X.", "..."])

    def test_builds_from_cell_states_and_flags(self) -> None:
        by_state = Grid([["open", "blocked"], ["open", "open"]])
        by_flag = Grid([[0, 1], [0, 0]])
        by_symbol = Grid([".x", ".."])
        self.assertEqual(by_state, by_flag)
        self.assertEqual(by_state, by_symbol)
        self.assertEqual(by_state.blocked_count(), 1)

    def test_raises_when_grid_is_empty(self) -> None:
        with self.assertRaises(ValueError):
            Grid([])
        with self.assertRaises(ValueError):
            Grid([""])

    def test_raises_when_grid_is_ragged(self) -> None:
        with self.assertRaises(ValueError):
            Grid(["...", ".."])

    def test_raises_on_unknown_cell_value(self) -> None:
        with self.assertRaises(ValueError):
            Grid([".?"])
        with self.assertRaises(ValueError):
            Grid([[0, 2]])

    def test_get_outside_grid_raises_index_error(self) -> None:
        grid = open_grid(2, 2)
        with self.assertRaises(IndexError):
            grid.get(2, 0)
        with self.assertRaises(IndexError):
            grid.get(0, -1)

    def test_random_grid_is_reproducible_and_keeps_corners_open(self) -> None:
        first = random_grid(6, 7, blocked_fraction=0.5, seed=42)
        second = random_grid(6, 7, blocked_fraction=0.5, seed=42)
        self.assertEqual(first, second)
        self.assertEqual(first.get(0, 0), CELL_OPEN)
        self.assertEqual(first.get(5, 6), CELL_OPEN)

    def test_random_grid_fully_blocked_interior(self) -> None:
        grid = random_grid(3, 3, blocked_fraction=1.0, seed=1)
        self.assertEqual(grid.text_rows(), [".XX", "XXX", "XX."])

    def test_random_grid_rejects_bad_options(self) -> None:
        with self.assertRaises(ValueError):
            random_grid(0, 3)
        with self.assertRaises(ValueError):
            random_grid(3, 3, blocked_fraction=1.5)


class TestPath(unittest.TestCase):
    def test_starts_at_origin(self) -> None:
        path = Path(open_grid(2, 2))
        self.assertEqual(path.position(), (0, 0))
        self.assertEqual(len(path), 0)

    def test_steps_move_position(self) -> None:
        path = Path(open_grid(2, 2))
        path.add_step(STEP_RIGHT)
        path.add_step(STEP_DOWN)
        self.assertEqual(path.position(), (1, 1))
        self.assertEqual(path.steps, [STEP_RIGHT, STEP_DOWN])
        self.assertEqual(path.describe(), "RD")
        self.assertTrue(path.reaches_destination())

    def test_step_into_blocked_cell_is_invalid(self) -> None:
        path = Path(Grid([".X", ".."]))
        self.assertFalse(path.is_step_valid(STEP_RIGHT))
        self.assertTrue(path.is_step_valid(STEP_DOWN))
        with self.assertRaises(ValueError):
            path.add_step(STEP_RIGHT)
        self.assertEqual(path.position(), (0, 0))

    def test_step_off_grid_is_invalid(self) -> None:
        path = Path(open_grid(1, 2))
        self.assertFalse(path.is_step_valid(STEP_DOWN))
        path.add_step(STEP_RIGHT)
        self.assertFalse(path.is_step_valid(STEP_RIGHT))

    def test_unknown_direction_raises(self) -> None:
        path = Path(open_grid(2, 2))
        with self.assertRaises(ValueError):
            path.is_step_valid("left")


if __name__ == "__main__":
    unittest.main()
