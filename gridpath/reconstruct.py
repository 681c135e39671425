# gridpath/reconstruct.py
from __future__ import annotations
from typing import Callable, List, Mapping, Optional

from .types import Coord
from .errors import NoPathRecorded

def reconstruct_path(
    came_from: Mapping[Coord, Optional[Coord]],
    start: Coord,
    goal: Coord,
    limit: int,
    on_step: Optional[Callable[[Coord], None]] = None,
) -> List[Coord]:
    """
    Backtrack from goal to start through the predecessor map.

    Returns the path goal-first, start-last. `on_step` is called for every
    cell strictly between the two endpoints. A chain that breaks or runs past
    `limit` links means the map is corrupt and raises NoPathRecorded.
    """
    path: List[Coord] = []
    cur = goal
    links = 0
    while cur != start:
        if links >= limit:
            raise NoPathRecorded(f"no route from {goal} back to {start} within {limit} links")
        path.append(cur)
        if on_step is not None and cur != goal:
            on_step(cur)
        prev = came_from.get(cur)
        if prev is None:
            raise NoPathRecorded(f"{cur} has no recorded predecessor")
        cur = prev
        links += 1
    path.append(start)
    return path
