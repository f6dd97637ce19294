OPEN_SYMBOL = "."
BLOCKED_SYMBOL = "X"

CELL_OPEN = "open"
CELL_BLOCKED = "blocked"

STEP_RIGHT = "right"
STEP_DOWN = "down"

# exhaustive enumeration packs one step per bit of a fixed-width counter
EXHAUSTIVE_BIT_WIDTH = 64
DEFAULT_MAX_EXHAUSTIVE_STEPS = 20

ALGORITHMS = ("exhaustive", "dyn_prog", "compare")
DEFAULT_ALGORITHM = "dyn_prog"

DEFAULT_BLOCKED_FRACTION = 0.2
MAX_RANDOM_DIMENSION = 500
