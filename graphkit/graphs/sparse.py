"""
Sparse graph backend: adjacency lists without weights.

Each vertex owns a list of distinct target vertices in insertion order.
Weighted algorithms pair this backend with an external
:class:`~graphkit.graphs.property_map.EdgePropertyMap`.
"""

from typing import Any, Iterable, List

from .core import Edge, EdgeLike, EdgeList, EdgeType, Vertex, VertexList


class SparseGraph:
    """
    Graph stored as one neighbor list per vertex.

    No reverse index is maintained, so incoming queries scan all lists.

    Complexity:
        - add / remove / at: O(deg(v))
        - outgoing / count_outgoing: O(1)
        - incoming / count_incoming: O(V + E)
        - edges: O(V + E)
        - count_edges: O(V)
    """

    def __init__(self, n: int, edges: Iterable[EdgeLike] = ()):
        """
        Create a graph with ``n`` vertices and no edges.

        Args:
            n: Number of vertices, must be positive.
            edges: Optional unidirectional edges to add.

        Raises:
            ValueError: If ``n`` is not positive.
        """
        if n <= 0:
            raise ValueError(f"Number of vertices must be positive, got {n}")
        self._n = int(n)
        self._adj: List[List[Vertex]] = [[] for _ in range(self._n)]
        for e in edges:
            self.add(e)

    def _in_range(self, v: Vertex) -> bool:
        return 0 <= v < self._n

    def __repr__(self) -> str:
        return f"SparseGraph(n={self._n}, edges={self.count_edges()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SparseGraph):
            return NotImplemented
        return self._n == other._n and all(
            set(a) == set(b) for a, b in zip(self._adj, other._adj)
        )

    def __contains__(self, edge: EdgeLike) -> bool:
        return self.at(edge)

    def copy(self) -> "SparseGraph":
        """Return an independent copy of the graph."""
        g = SparseGraph.__new__(SparseGraph)
        g._n = self._n
        g._adj = [list(targets) for targets in self._adj]
        return g

    def size(self) -> int:
        """Return the number of vertices."""
        return self._n

    def add(self, edge: EdgeLike, edge_type: EdgeType = EdgeType.UNI, weight: Any = 1) -> bool:
        """
        Add an edge. Inserting an existing edge is a no-op.

        Args:
            edge: Edge or ``(source, target)`` pair.
            edge_type: ``EdgeType.BI`` also inserts the reverse edge.
            weight: Ignored; accepted so both backends share one signature.

        Returns:
            False (graph unchanged) if an endpoint is out of range.
        """
        e = Edge.of(edge)
        if not (self._in_range(e.source) and self._in_range(e.target)):
            return False
        if e.target not in self._adj[e.source]:
            self._adj[e.source].append(e.target)
        if edge_type is EdgeType.BI and e.source not in self._adj[e.target]:
            self._adj[e.target].append(e.source)
        return True

    def remove(self, edge: EdgeLike, edge_type: EdgeType = EdgeType.UNI) -> bool:
        """
        Remove an edge. Removing an absent edge is a no-op.

        Returns:
            False (graph unchanged) if an endpoint is out of range.
        """
        e = Edge.of(edge)
        if not (self._in_range(e.source) and self._in_range(e.target)):
            return False
        if e.target in self._adj[e.source]:
            self._adj[e.source].remove(e.target)
        if edge_type is EdgeType.BI and e.source in self._adj[e.target]:
            self._adj[e.target].remove(e.source)
        return True

    def at(self, edge: EdgeLike) -> bool:
        """Return True if ``edge`` is present."""
        e = Edge.of(edge)
        if not (self._in_range(e.source) and self._in_range(e.target)):
            return False
        return e.target in self._adj[e.source]

    def vertices(self) -> VertexList:
        """Return the vertex identifiers in ascending order."""
        return list(range(self._n))

    def outgoing(self, v: Vertex) -> VertexList:
        """
        Return the targets of edges leaving ``v`` in insertion order.

        The stored list itself is returned; callers must not mutate it.
        """
        if not self._in_range(v):
            return []
        return self._adj[v]

    def incoming(self, v: Vertex) -> VertexList:
        """Return the sources of edges entering ``v`` in ascending order."""
        if not self._in_range(v):
            return []
        return [u for u in range(self._n) if v in self._adj[u]]

    def count_outgoing(self, v: Vertex) -> int:
        """Return the number of edges leaving ``v`` (0 for invalid ``v``)."""
        if not self._in_range(v):
            return 0
        return len(self._adj[v])

    def count_incoming(self, v: Vertex) -> int:
        """Return the number of edges entering ``v`` (0 for invalid ``v``)."""
        if not self._in_range(v):
            return 0
        return sum(1 for targets in self._adj if v in targets)

    def count_edges(self) -> int:
        """Return the number of present edges."""
        return sum(len(targets) for targets in self._adj)

    def edges(self) -> EdgeList:
        """Return present edges, vertex-major, in insertion order per vertex."""
        return [Edge(u, v) for u, targets in enumerate(self._adj) for v in targets]
