"""
Single-pair shortest path: Dijkstra's algorithm.

Vertices are queued in a :class:`~graphkit.structures.PriorityQueue`
ordered by an external distance array, rebuilt with ``update()`` whenever
a distance is relaxed. The search stops as soon as the destination is
settled.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 24.3 (Dijkstra).
"""

from typing import Tuple

import numpy as np

from ..logging import get_logger
from ..structures import PriorityQueue
from .core import INVALID_VERTEX, Graph, Vertex, VertexList, is_valid_vertex
from .utils import Weights, reconstruct_path, weight_function

logger = get_logger(__name__)


def shortest_path_dijkstra(
    graph: Graph, start: Vertex, destination: Vertex, weights: Weights = None
) -> Tuple[VertexList, bool]:
    """
    Dijkstra's algorithm for the shortest path between two vertices.

    Weights must be positive; zero means "no edge".

    Args:
        graph: Graph whose edge values are lengths, or whose structure is
            weighted by ``weights``.
        start: First vertex of the path.
        destination: Last vertex of the path.
        weights: Optional external weights, see
            :func:`~graphkit.graphs.utils.weight_function`.

    Returns:
        Tuple of:
        - path: Vertices from ``start`` to ``destination`` inclusive, empty
          if not found
        - found: False if ``destination`` is unreachable from ``start`` or
          either vertex is not in the graph

    Complexity: O(V * (V + E)) due to full reheapification on relaxation.

    Example:
        >>> g = DenseGraph(3)
        >>> g.add((0, 1), weight=1)
        >>> g.add((1, 2), weight=1)
        >>> g.add((0, 2), weight=5)
        >>> shortest_path_dijkstra(g, 0, 2)
        ([0, 1, 2], True)
    """
    if not (is_valid_vertex(graph, start) and is_valid_vertex(graph, destination)):
        return [], False

    n = graph.size()
    weight = weight_function(graph, weights)

    distance = np.full(n, np.inf)
    predecessor = [INVALID_VERTEX] * n
    queued = [True] * n
    distance[start] = 0.0

    pq = PriorityQueue(lambda a, b: (distance[a], a) < (distance[b], b), range(n))
    current = INVALID_VERTEX
    settled = 0

    while not pq.empty():
        current = pq.pop()
        queued[current] = False
        if current == destination or np.isinf(distance[current]):
            break
        settled += 1

        relaxed = False
        for v in graph.outgoing(current):
            if not queued[v]:
                continue
            w = weight(current, v)
            if not w > 0:
                continue
            d = distance[current] + w
            if d < distance[v]:
                distance[v] = d
                predecessor[v] = current
                relaxed = True

        if relaxed:
            pq.update()

    path = reconstruct_path(predecessor, start, destination) if current == destination else None
    if path is None:
        logger.debug("dijkstra: %d unreachable from %d after settling %d vertices", destination, start, settled)
        return [], False
    return path, True
