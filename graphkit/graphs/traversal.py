"""
Graph traversal algorithms: BFS and DFS.

Both searches call a visitor ``visitor(graph, vertex)`` once per reachable
vertex and return the visitor, so state accumulated by a callable object is
available to the caller. Neighbors are scanned in ascending id order for
reproducible results. A start vertex outside the graph is a silent no-op.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapters 22.2 (BFS) and 22.3 (DFS).
"""

from collections import deque
from enum import Enum
from typing import Callable, Iterator, List, Tuple, TypeVar

from ..logging import get_logger
from .core import TraversableGraph, Vertex, is_valid_vertex

logger = get_logger(__name__)

Visitor = TypeVar("Visitor", bound=Callable[[TraversableGraph, Vertex], object])


class _Color(Enum):
    WHITE = 0  # undiscovered
    GRAY = 1  # queued
    BLACK = 2  # visited


def breadth_first_search(graph: TraversableGraph, start: Vertex, visitor: Visitor) -> Visitor:
    """
    Breadth-first search from a start vertex.

    Every vertex reachable from ``start`` moves white -> gray -> black
    exactly once; unreachable vertices stay white and are never visited.
    Visit order is non-decreasing in hop distance from ``start``.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.
        visitor: Callable invoked as ``visitor(graph, vertex)``.

    Returns:
        The visitor.

    Complexity: O(V + E log E) on the sparse backend, where each neighbor
    list is sorted; O(V^2) on the dense backend, whose column scans already
    return neighbors in ascending order.

    Example:
        >>> g = DenseGraph(3, [(0, 2), (0, 1)])
        >>> order = []
        >>> _ = breadth_first_search(g, 0, lambda g, v: order.append(v))
        >>> order
        [0, 1, 2]
    """
    if not is_valid_vertex(graph, start):
        return visitor

    color: List[_Color] = [_Color.WHITE] * graph.size()
    color[start] = _Color.GRAY
    queue = deque([start])
    visited = 0

    while queue:
        u = queue.popleft()
        color[u] = _Color.BLACK
        visitor(graph, u)
        visited += 1

        for v in sorted(graph.outgoing(u)):
            if color[v] is _Color.WHITE:
                color[v] = _Color.GRAY
                queue.append(v)

    logger.debug("bfs from %d visited %d of %d vertices", start, visited, graph.size())
    return visitor


def depth_first_search(graph: TraversableGraph, start: Vertex, visitor: Visitor) -> Visitor:
    """
    Depth-first search (pre-order) from a start vertex.

    A vertex is visited when it is first discovered, before any of its
    unvisited neighbors are explored. Self-loops are skipped. The search
    keeps an explicit stack of ``(vertex, neighbor cursor)`` entries,
    so deep graphs do not exhaust the interpreter's recursion limit; the
    visit order equals that of the recursive formulation.

    Args:
        graph: Graph to traverse.
        start: Vertex to start from.
        visitor: Callable invoked as ``visitor(graph, vertex)``.

    Returns:
        The visitor.

    Complexity: O(V + E log E) on the sparse backend, where each neighbor
    list is sorted; O(V^2) on the dense backend, whose column scans already
    return neighbors in ascending order.
    """
    if not is_valid_vertex(graph, start):
        return visitor

    visited = [False] * graph.size()

    def discover(v: Vertex) -> Tuple[Vertex, Iterator[Vertex]]:
        visited[v] = True
        visitor(graph, v)
        # the iterator is the neighbor cursor, resumed after each descent
        return v, iter(sorted(u for u in graph.outgoing(v) if u != v))

    stack = [discover(start)]
    count = 1

    while stack:
        _, cursor = stack[-1]
        for v in cursor:
            if not visited[v]:
                stack.append(discover(v))
                count += 1
                break
        else:
            stack.pop()

    logger.debug("dfs from %d visited %d of %d vertices", start, count, graph.size())
    return visitor
