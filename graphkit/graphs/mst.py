"""
Minimum spanning tree: Prim's algorithm.

Vertices are queued in a :class:`~graphkit.structures.PriorityQueue`
ordered by an external cost array. When a cost improves, the queue is
rebuilt with ``update()``; an addressable heap with decrease-key would
lower this from O(V) to O(log V) per improvement.

References:
    - Cormen, Leiserson, Rivest, Stein. "Introduction to Algorithms", 3rd ed.
      Chapter 23.2 (Prim).
"""

import numpy as np

from ..diagnostics import is_debug_enabled
from ..logging import get_logger
from ..structures import PriorityQueue
from .core import INVALID_VERTEX, Edge, EdgeList, Graph, Vertex, is_valid_vertex
from .utils import Weights, weight_function

logger = get_logger(__name__)


def minimum_spanning_tree_prim(graph: Graph, start: Vertex = 0, weights: Weights = None) -> EdgeList:
    """
    Prim's algorithm for a minimum spanning tree.

    The graph must be bidirectional with strictly positive weights, since a
    weight of zero is indistinguishable from "no edge". Negative weights
    are ignored.

    Args:
        graph: Graph whose edge values are weights, or whose structure is
            weighted by ``weights``.
        start: Root vertex of the tree (default 0).
        weights: Optional external weights, see
            :func:`~graphkit.graphs.utils.weight_function`.

    Returns:
        Exactly ``graph.size()`` edges ``(parent, vertex)`` in the order the
        vertices were added. The root has parent ``INVALID_VERTEX``, and so
        does every vertex not connected to the root.

    Raises:
        ValueError: If ``start`` is not a vertex of ``graph``.

    Complexity: O(V * (V + E)) due to full reheapification on improvement.

    Example:
        >>> g = DenseGraph(3)
        >>> g.add((0, 1), EdgeType.BI, 2)
        >>> g.add((1, 2), EdgeType.BI, 1)
        >>> tree = minimum_spanning_tree_prim(g)
        >>> tree[0].source == INVALID_VERTEX
        True
        >>> [tuple(e) for e in tree[1:]]
        [(0, 1), (1, 2)]
    """
    if not is_valid_vertex(graph, start):
        raise ValueError(f"Start vertex {start} not in graph of size {graph.size()}")

    n = graph.size()
    weight = weight_function(graph, weights)
    debug = is_debug_enabled()

    cost = np.full(n, np.inf)
    parent = [INVALID_VERTEX] * n
    queued = [True] * n
    cost[start] = 0.0

    pq = PriorityQueue(lambda a, b: (cost[a], a) < (cost[b], b), range(n))
    tree: EdgeList = []

    while not pq.empty():
        u = pq.pop()
        queued[u] = False
        tree.append(Edge(parent[u], u))
        if np.isinf(cost[u]):
            # every vertex left in the queue is cut off from the root
            continue

        improved = False
        for v in graph.outgoing(u):
            if not queued[v]:
                continue
            w = weight(u, v)
            if not w > 0:
                if debug and w < 0:
                    logger.warning("prim: skipping non-positive weight %s on edge (%d, %d)", w, u, v)
                continue
            if w < cost[v]:
                cost[v] = w
                parent[v] = u
                improved = True

        if improved:
            pq.update()

    unconnected = sum(1 for e in tree if e.source == INVALID_VERTEX) - 1
    if unconnected:
        logger.debug("prim from %d: %d vertices not connected to the root", start, unconnected)
    return tree
