from typing import Optional

from .types import TraceLog


def trace(enabled: bool, trace_log: Optional[TraceLog], message: str) -> None:
    if not enabled:
        return
    if trace_log is not None:
        trace_log.append(message)
    else:
        print(message)


def indent(depth: int) -> str:
    return "  " * depth


def path_length(rows: int, columns: int) -> int:
    return rows + columns - 2


def format_bits(bits: int, width: int) -> str:
    if width == 0:
        return "-"
    return format(bits, f"0{width}b")

