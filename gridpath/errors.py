# gridpath/errors.py


class PathfinderError(Exception):
    """Base class for errors raised by the search engine."""


class EmptyQueue(PathfinderError):
    """dequeue() was called on an empty PriorityQueue."""


class NoPathRecorded(PathfinderError):
    """The predecessor chain does not lead back to the start."""
