# gridpath/types.py
from __future__ import annotations
from typing import Protocol, Tuple

Coord = Tuple[int, int]  # (x, y)

IMPASSABLE = -1  # weight sentinel for obstacle cells


class Grid(Protocol):
    """
    What the engine reads from a grid:
    - bounds (width/height), used to cap path reconstruction
    - validate(x, y): in bounds and not impassable
    - weight(x, y): cost to enter the cell, never asked for an impassable cell
    The engine never writes to it.
    """
    width: int
    height: int
    start: Coord
    goal: Coord

    def validate(self, x: int, y: int) -> bool: ...

    def weight(self, x: int, y: int) -> int: ...
