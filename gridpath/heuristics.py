# gridpath/heuristics.py
from __future__ import annotations
from typing import Optional, Sequence

from .types import Coord, Grid

def manhattan(a: Coord, b: Coord) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])

def find_cost(grid: Grid, cell: Coord) -> int:
    # weights sit on cells: entering a cell costs its weight
    return grid.weight(cell[0], cell[1])

def path_cost(grid: Grid, path: Optional[Sequence[Coord]]) -> Optional[int]:
    """Summed entry cost of a goal-to-start path; the start cell is free."""
    if not path:
        return None
    return sum(find_cost(grid, c) for c in path[:-1])
