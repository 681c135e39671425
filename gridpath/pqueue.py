# gridpath/pqueue.py
from __future__ import annotations
from typing import Any, Generic, List, NamedTuple, TypeVar
import heapq

from .errors import EmptyQueue

T = TypeVar("T")


class QueueElement(NamedTuple):
    priority: float
    seq: int        # insertion counter, keeps ties first-in first-out
    element: Any


class PriorityQueue(Generic[T]):
    """
    Min-priority queue: lowest priority dequeues first, equal priorities
    dequeue in insertion order.
    """

    def __init__(self) -> None:
        self._heap: List[QueueElement] = []
        self._counter = 0

    def enqueue(self, element: T, priority: float) -> None:
        heapq.heappush(self._heap, QueueElement(priority, self._counter, element))
        self._counter += 1

    def dequeue(self) -> T:
        if self.is_empty():
            raise EmptyQueue("no elements in queue")
        return heapq.heappop(self._heap).element

    def is_empty(self) -> bool:
        return not self._heap

    def __len__(self) -> int:
        return len(self._heap)
