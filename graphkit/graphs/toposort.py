"""
Topological sort using Kahn's algorithm.

References:
    - Kahn, A. B. "Topological sorting of large networks" (1962).
"""

import copy
from collections import deque
from typing import List, Tuple

from ..logging import get_logger
from .core import Edge, MutableGraph, VertexList

logger = get_logger(__name__)


def topological_sort(graph: MutableGraph) -> Tuple[VertexList, bool]:
    """
    Order the vertices so that every edge points forward.

    The algorithm consumes edges of a private copy of ``graph``; the
    caller's graph is never modified. Vertices without incoming edges are
    queued in ascending order, and when a vertex is taken from the queue
    its outgoing edges are removed in ascending target order, queuing each
    target whose last incoming edge just disappeared.

    Args:
        graph: Graph to sort. It must support ``add``/``remove`` and be
            copyable with :func:`copy.deepcopy`.

    Returns:
        Tuple of:
        - order: Vertices in topological order, empty on failure
        - success: False if the graph contains a cycle (self-loops included)

    Complexity: O(V + E) on the sparse backend, O(V^2) on the dense backend.

    Example:
        >>> order, ok = topological_sort(SparseGraph(3, [(2, 1), (1, 0)]))
        >>> order, ok
        ([2, 1, 0], True)
    """
    work = copy.deepcopy(graph)

    indegree: List[int] = [0] * work.size()
    for e in work.edges():
        indegree[e.target] += 1

    queue = deque(v for v in work.vertices() if indegree[v] == 0)
    order: VertexList = []

    while queue:
        node = queue.popleft()
        order.append(node)

        for i in sorted(work.outgoing(node)):
            if i == node:
                continue
            work.remove(Edge(node, i))
            indegree[i] -= 1
            if indegree[i] == 0:
                queue.append(i)

    remaining = work.count_edges()
    if remaining > 0:
        logger.debug("topological sort failed: %d edges remain in a cycle", remaining)
        return [], False

    return order, True
