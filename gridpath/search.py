# gridpath/search.py
from __future__ import annotations
from collections import deque
from enum import Enum
from typing import Container, Deque, Dict, List, Optional, Set, Type
import logging

from .types import Coord, Grid
from .pqueue import PriorityQueue
from .heuristics import manhattan, find_cost

logger = logging.getLogger(__name__)


class Status(Enum):
    RUNNING = "running"
    FOUND = "found"
    EXHAUSTED = "exhausted"


def find_neighbors(grid: Grid, x: int, y: int, visited: Container[Coord]) -> List[Coord]:
    """
    4-connected neighbors of (x, y) that are valid on the grid and not in `visited`.

    Canonical order is left, right, up, down; on cells where (x + y) is even the
    order is reversed. Equal-cost paths come out as staircases rather than L-shapes.
    """
    cand = [(x - 1, y), (x + 1, y), (x, y - 1), (x, y + 1)]
    out = [p for p in cand if grid.validate(p[0], p[1]) and p not in visited]
    if (x + y) % 2 == 0:
        out.reverse()
    return out


class SearchState:
    """
    One search run, advanced one frontier pop per step().

    Subclasses choose the frontier discipline and the admission rule for
    neighbors. State is created per run and never reused.
    """
    name = "search"

    def __init__(self, grid: Grid, start: Optional[Coord] = None, goal: Optional[Coord] = None):
        self.grid = grid
        self.start: Coord = start if start is not None else grid.start
        self.goal: Coord = goal if goal is not None else grid.goal
        self.status = Status.RUNNING
        # predecessor map; the start has no predecessor
        self.came_from: Dict[Coord, Optional[Coord]] = {self.start: None}
        self.expanded: Set[Coord] = set()
        self._seed()

    # -------- hooks --------
    def _seed(self) -> None:
        raise NotImplementedError

    def _pop(self) -> Optional[Coord]:
        raise NotImplementedError

    def _discard_frontier(self) -> None:
        raise NotImplementedError

    def _expand(self, current: Coord) -> None:
        raise NotImplementedError

    # -------- driver --------
    def step(self) -> Optional[Coord]:
        """Pop and process one cell. Returns it, or None if nothing was popped."""
        if self.status is not Status.RUNNING:
            return None

        current = self._pop()
        if current is None:
            self.status = Status.EXHAUSTED
            logger.debug("%s: frontier empty, goal %s unreachable", self.name, self.goal)
            return None

        logger.debug("%s: pop %s", self.name, current)
        self.expanded.add(current)
        if current == self.goal:
            self.status = Status.FOUND
            self._discard_frontier()
            logger.debug("%s: reached goal %s", self.name, current)
            return current

        self._expand(current)
        return current


class BreadthFirstSearch(SearchState):
    name = "bfs"

    def _seed(self) -> None:
        self.frontier: Deque[Coord] = deque([self.start])

    def _pop(self) -> Optional[Coord]:
        return self.frontier.popleft() if self.frontier else None

    def _discard_frontier(self) -> None:
        self.frontier = deque()

    def _expand(self, current: Coord) -> None:
        for nb in find_neighbors(self.grid, current[0], current[1], self.came_from):
            self.frontier.append(nb)
            self.came_from[nb] = current
            logger.debug("%s: admit %s from %s", self.name, nb, current)


class DijkstraSearch(SearchState):
    """
    Uniform-cost search. A coordinate may sit in the queue several times;
    entries for cells already expanded are dropped when popped.
    """
    name = "dijkstra"

    def _seed(self) -> None:
        self.frontier: PriorityQueue[Coord] = PriorityQueue()
        self.cumulated_cost: Dict[Coord, int] = {self.start: 0}
        self.frontier.enqueue(self.start, 0)

    def _pop(self) -> Optional[Coord]:
        while not self.frontier.is_empty():
            cell = self.frontier.dequeue()
            if cell in self.expanded:
                logger.debug("%s: dropping stale entry %s", self.name, cell)
                continue
            return cell
        return None

    def _discard_frontier(self) -> None:
        self.frontier = PriorityQueue()

    def _priority(self, cell: Coord, cost: int) -> float:
        return cost

    def _expand(self, current: Coord) -> None:
        base = self.cumulated_cost[current]
        for nb in find_neighbors(self.grid, current[0], current[1], self.expanded):
            new_cost = base + find_cost(self.grid, nb)
            if nb not in self.cumulated_cost or new_cost < self.cumulated_cost[nb]:
                if nb in self.cumulated_cost:
                    logger.debug("%s: re-admit %s at %s (was %s)", self.name, nb, new_cost,
                                 self.cumulated_cost[nb])
                else:
                    logger.debug("%s: admit %s at %s", self.name, nb, new_cost)
                self.cumulated_cost[nb] = new_cost
                self.came_from[nb] = current
                self.frontier.enqueue(nb, self._priority(nb, new_cost))


class AStarSearch(DijkstraSearch):
    """Dijkstra with the Manhattan distance to the goal added to the priority."""
    name = "astar"

    def _priority(self, cell: Coord, cost: int) -> float:
        return cost + manhattan(self.goal, cell)


ALGORITHMS: Dict[str, Type[SearchState]] = {
    "bfs": BreadthFirstSearch,
    "dijkstra": DijkstraSearch,
    "astar": AStarSearch,
}


def make_search(name: str, grid: Grid, start: Optional[Coord] = None,
                goal: Optional[Coord] = None) -> SearchState:
    try:
        cls = ALGORITHMS[name]
    except KeyError:
        raise ValueError(f"unknown algorithm {name!r}; choose from {', '.join(ALGORITHMS)}") from None
    return cls(grid, start=start, goal=goal)
