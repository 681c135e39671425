# gridpath/__init__.py
from .types import Coord, Grid, IMPASSABLE
from .errors import PathfinderError, EmptyQueue, NoPathRecorded
from .pqueue import PriorityQueue, QueueElement
from .heuristics import manhattan, find_cost, path_cost
from .search import (Status, SearchState, BreadthFirstSearch, DijkstraSearch, AStarSearch,
                     ALGORITHMS, find_neighbors, make_search)
from .reconstruct import reconstruct_path
from .driver import (SearchDriver, SearchResult, SearchObserver, RecordingObserver,
                     LoggingObserver, run_search)
from .grid import GridWorld

__all__ = [
    "Coord", "Grid", "IMPASSABLE",
    "PathfinderError", "EmptyQueue", "NoPathRecorded",
    "PriorityQueue", "QueueElement",
    "manhattan", "find_cost", "path_cost",
    "Status", "SearchState", "BreadthFirstSearch", "DijkstraSearch", "AStarSearch",
    "ALGORITHMS", "find_neighbors", "make_search",
    "reconstruct_path",
    "SearchDriver", "SearchResult", "SearchObserver", "RecordingObserver",
    "LoggingObserver", "run_search",
    "GridWorld",
]
