"""Container data structures used by the graph algorithms."""

from .priority_queue import PriorityQueue

__all__ = ["PriorityQueue"]
