from typing import Union


CellState = str
StepDirection = str
CellRows = list[list[CellState]]
GridInput = Union[list[str], list[list[Union[str, int]]]]
CountTable = list[list[int]]
CountResult = dict[str, object]
TraceLog = list[str]
Position = tuple[int, int]
AlgorithmName = str
