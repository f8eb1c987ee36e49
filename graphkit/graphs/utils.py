"""
Utility functions for graph algorithms.

Provides edge weight resolution, path reconstruction and weight sums.
"""

from collections.abc import Mapping
from typing import Any, Callable, Iterable, List, Optional, Sequence, Union

from .core import INVALID_VERTEX, Edge, Graph, Vertex, VertexList
from .property_map import EdgePropertyMap

WeightFunction = Callable[[Vertex, Vertex], Any]
Weights = Union[None, EdgePropertyMap, Mapping, WeightFunction]


def weight_function(graph: Graph, weights: Weights = None) -> WeightFunction:
    """
    Resolve the edge weight accessor used by weighted algorithms.

    Args:
        graph: Graph whose edges are weighted.
        weights: One of
            - None: weights are the graph's own edge values (``graph.at``)
            - EdgePropertyMap, or a Mapping keyed by Edge or
              ``(source, target)``: external weights, edges without an
              entry count as absent
            - callable ``(source, target) -> weight``

    Returns:
        Function ``(source, target) -> weight`` where a falsy result means
        "no edge". Lookups never insert into a property map.

    Example:
        >>> g = SparseGraph(2, [(0, 1)])
        >>> w = EdgePropertyMap(g)
        >>> w[(0, 1)] = 7
        >>> weight_function(g, w)(0, 1)
        7
    """
    if weights is None:
        return lambda u, v: graph.at(Edge(u, v))
    if isinstance(weights, EdgePropertyMap):
        return lambda u, v: weights.get(Edge(u, v), 0)
    if isinstance(weights, Mapping):
        # plain mappings may be keyed by Edge or by (source, target) tuples
        return lambda u, v: weights.get(Edge(u, v), weights.get((u, v), 0))
    if callable(weights):
        return weights
    raise TypeError(f"Unsupported weights of type {type(weights).__name__}")


def reconstruct_path(
    predecessor: Sequence[Vertex], start: Vertex, target: Vertex
) -> Optional[VertexList]:
    """
    Reconstruct the path from ``start`` to ``target`` using a predecessor table.

    ``predecessor[v]`` is the previous vertex on the best known path to
    ``v``, or ``INVALID_VERTEX``.

    Args:
        predecessor: Predecessor table indexed by vertex.
        start: First vertex of the path.
        target: Last vertex of the path.

    Returns:
        Vertices from ``start`` to ``target`` inclusive, or None if walking
        backwards from ``target`` does not reach ``start``.

    Example:
        >>> reconstruct_path([INVALID_VERTEX, 0, 1], 0, 2)
        [0, 1, 2]
    """
    path: VertexList = []
    current = target
    seen = set()
    while current != INVALID_VERTEX:
        if current in seen:
            return None
        seen.add(current)
        path.append(current)
        if current == start:
            path.reverse()
            return path
        current = predecessor[current]
    return None


def path_weight(graph: Graph, path: Sequence[Vertex], weights: Weights = None) -> Any:
    """Return the summed weight of consecutive edges along ``path``."""
    weight = weight_function(graph, weights)
    return sum(weight(u, v) for u, v in zip(path, path[1:]))


def tree_weight(graph: Graph, tree: Iterable[Edge], weights: Weights = None) -> Any:
    """
    Return the summed weight of spanning tree edges.

    Edges whose parent is ``INVALID_VERTEX`` (the root and unconnected
    vertices) contribute nothing.
    """
    weight = weight_function(graph, weights)
    return sum(weight(e.source, e.target) for e in tree if e.source != INVALID_VERTEX)


def tree_edges(tree: Iterable[Edge]) -> List[Edge]:
    """Return the spanning tree edges that connect a vertex to a parent."""
    return [e for e in tree if e.source != INVALID_VERTEX]
