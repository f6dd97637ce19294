import argparse
import json
from pathlib import Path
from typing import Any, Optional

from icepaths.grid import Grid
from icepaths.solver import count_paths
from icepaths.types import CountResult, GridInput
from rules.rules import ALGORITHMS, DEFAULT_ALGORITHM, DEFAULT_MAX_EXHAUSTIVE_STEPS


def _validate_run_options(algorithm: object, max_exhaustive_steps: object) -> None:
    if not isinstance(algorithm, str):
        raise ValueError("algorithm must be a string")
    if not isinstance(max_exhaustive_steps, int) or isinstance(max_exhaustive_steps, bool):
        raise ValueError("max_exhaustive_steps must be an integer")


def run(
    grid: GridInput,
    algorithm: str = DEFAULT_ALGORITHM,
    max_exhaustive_steps: int = DEFAULT_MAX_EXHAUSTIVE_STEPS,
    include_table: bool = False,
) -> CountResult:
    # boundary validation
    _validate_run_options(algorithm, max_exhaustive_steps)

    return count_paths(
        Grid(grid),
        algorithm=algorithm,
        max_exhaustive_steps=max_exhaustive_steps,
        include_table=include_table,
    )


def run_with_trace(
    grid: GridInput,
    algorithm: str = DEFAULT_ALGORITHM,
    max_exhaustive_steps: int = DEFAULT_MAX_EXHAUSTIVE_STEPS,
    include_table: bool = False,
) -> tuple[CountResult, list[str]]:
    _validate_run_options(algorithm, max_exhaustive_steps)
    trace_log: list[str] = []
    result = count_paths(
        Grid(grid),
        algorithm=algorithm,
        max_exhaustive_steps=max_exhaustive_steps,
        include_table=include_table,
        trace=True,
        trace_log=trace_log,
    )
    return result, trace_log


def load_grid_from_file(input_path: str) -> tuple[GridInput, str, int]:
    path = Path(input_path)
    try:
        payload: Any = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"input file not found: {input_path}") from exc
    except json.JSONDecodeError as exc:
        raise ValueError(f"input file is not valid JSON: {input_path}") from exc

    if not isinstance(payload, dict):
        raise ValueError("JSON root must be an object")

    grid = payload.get("grid")
    algorithm = payload.get("algorithm", DEFAULT_ALGORITHM)
    max_exhaustive_steps = payload.get("max_exhaustive_steps", DEFAULT_MAX_EXHAUSTIVE_STEPS)
    if grid is None:
        raise ValueError("JSON must include 'grid'")
    if not isinstance(grid, list):
        raise ValueError("'grid' must be a list of rows")

    return grid, algorithm, max_exhaustive_steps


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Count right/down paths that avoid icebergs in a grid from a JSON input file")
    parser.add_argument("--input", required=True, help="Path to a JSON file with a grid and optional algorithm")
    parser.add_argument("--algorithm", choices=ALGORITHMS, default=None, help="Override the algorithm named in the input file")
    parser.add_argument("--max-exhaustive-steps", type=int, default=None, help="Largest path length the exhaustive counter may enumerate")
    parser.add_argument("--table", action="store_true", help="Include the dynamic-programming count table")
    parser.add_argument("--trace", action="store_true", help="Include counter trace output")
    return parser


def main(argv: Optional[list[str]] = None) -> None:
    args = _build_parser().parse_args(argv)

    try:
        grid, algorithm, max_exhaustive_steps = load_grid_from_file(args.input)
        if args.algorithm is not None:
            algorithm = args.algorithm
        if args.max_exhaustive_steps is not None:
            max_exhaustive_steps = args.max_exhaustive_steps
        if args.trace:
            result, trace_log = run_with_trace(
                grid=grid,
                algorithm=algorithm,
                max_exhaustive_steps=max_exhaustive_steps,
                include_table=args.table,
            )
            print(json.dumps({"result": result, "trace": trace_log}, indent=2))
        else:
            result = run(grid=grid, algorithm=algorithm, max_exhaustive_steps=max_exhaustive_steps, include_table=args.table)
            print(json.dumps({"result": result}, indent=2))
    except ValueError as exc:
        raise SystemExit(f"Error: {exc}")


if __name__ == "__main__":
    main()
