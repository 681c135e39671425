# gridpath/driver.py
from __future__ import annotations
from dataclasses import dataclass, field
from typing import List, Optional, Set
import logging
import time

from .types import Coord, Grid
from .search import Status, SearchState, DijkstraSearch, make_search
from .reconstruct import reconstruct_path
from .heuristics import path_cost
from .errors import PathfinderError, NoPathRecorded

logger = logging.getLogger(__name__)


@dataclass
class SearchResult:
    algorithm: str
    found: bool
    path: Optional[List[Coord]]      # goal first, start last
    cost: Optional[int]
    steps: int
    expanded: Set[Coord] = field(default_factory=set)
    elapsed_sec: float = 0.0
    start: Optional[Coord] = None
    goal: Optional[Coord] = None

    @property
    def visited_count(self) -> int:
        return len(self.expanded)


class SearchObserver:
    """No-op observer. Subclass and override what you need."""

    def on_visit(self, cell: Coord) -> None:
        pass

    def on_path(self, cell: Coord) -> None:
        pass

    def on_finish(self, result: SearchResult) -> None:
        pass


class RecordingObserver(SearchObserver):
    def __init__(self) -> None:
        self.visited: List[Coord] = []
        self.path: List[Coord] = []
        self.results: List[SearchResult] = []

    def on_visit(self, cell: Coord) -> None:
        self.visited.append(cell)

    def on_path(self, cell: Coord) -> None:
        self.path.append(cell)

    def on_finish(self, result: SearchResult) -> None:
        self.results.append(result)


class LoggingObserver(SearchObserver):
    def __init__(self, name: str = "") -> None:
        self.log = logging.getLogger(f"{__name__}.trace")
        self.name = name

    def on_visit(self, cell: Coord) -> None:
        self.log.debug("%s visit %s", self.name, cell)

    def on_path(self, cell: Coord) -> None:
        self.log.debug("%s path %s", self.name, cell)

    def on_finish(self, result: SearchResult) -> None:
        self.log.debug("%s finished: found=%s cost=%s", self.name, result.found, result.cost)


class SearchDriver:
    """
    Owns one search run. Call step() from whatever schedule you like (a tight
    loop, a timer, a game tick); run_to_completion() is the tight loop.
    Observer callbacks fire from inside step().
    """

    def __init__(self, grid: Grid, algorithm: str = "astar",
                 observer: Optional[SearchObserver] = None,
                 start: Optional[Coord] = None, goal: Optional[Coord] = None):
        self.grid = grid
        self.algorithm = algorithm
        self.observer = observer if observer is not None else SearchObserver()
        self.state: SearchState = make_search(algorithm, grid, start=start, goal=goal)
        self.steps = 0
        self.elapsed_sec = 0.0
        self.result: Optional[SearchResult] = None
        self.error: Optional[PathfinderError] = None
        logger.info("%s: search %s -> %s", algorithm, self.state.start, self.state.goal)

    @property
    def status(self) -> Status:
        return self.state.status

    def step(self) -> Status:
        if self.state.status is not Status.RUNNING:
            if self.error is not None:
                raise self.error
            return self.state.status

        t0 = time.perf_counter()
        cell = self.state.step()
        self.steps += 1
        if cell is not None and cell != self.state.start and cell != self.state.goal:
            self.observer.on_visit(cell)
        self.elapsed_sec += time.perf_counter() - t0
        if self.state.status is not Status.RUNNING:
            self._finish()
        return self.state.status

    def run_to_completion(self) -> SearchResult:
        while self.step() is Status.RUNNING:
            pass
        if self.result is None:
            raise PathfinderError(f"{self.algorithm}: run ended without a result")
        return self.result

    def _finish(self) -> None:
        st = self.state
        path: Optional[List[Coord]] = None
        cost: Optional[int] = None

        if st.status is Status.FOUND:
            try:
                path = reconstruct_path(st.came_from, st.start, st.goal,
                                        limit=self.grid.width * self.grid.height,
                                        on_step=self.observer.on_path)
            except NoPathRecorded as e:
                logger.error("%s: predecessor map is corrupt, cannot rebuild path", self.algorithm)
                self.error = e
                raise
            if isinstance(st, DijkstraSearch):
                cost = st.cumulated_cost[st.goal]
            else:
                cost = path_cost(self.grid, path)

        self.result = SearchResult(
            algorithm=self.algorithm,
            found=path is not None,
            path=path,
            cost=cost,
            steps=self.steps,
            expanded=set(st.expanded),
            elapsed_sec=self.elapsed_sec,
            start=st.start,
            goal=st.goal,
        )
        logger.info("%s: %s after %d steps (%d cells expanded, cost=%s)",
                    self.algorithm, st.status.value, self.steps, len(st.expanded), cost)
        self.observer.on_finish(self.result)


def run_search(grid: Grid, algorithm: str = "astar",
               observer: Optional[SearchObserver] = None) -> SearchResult:
    return SearchDriver(grid, algorithm, observer=observer).run_to_completion()
