"""
Dense graph backend: adjacency matrix with embedded edge weights.

The matrix is a flat numpy array of ``n * n`` cells where cell
``source + target * n`` holds the weight of edge ``(source, target)``.
A zero cell means "no edge", so zero-weight edges cannot be represented.
The size is fixed at construction.
"""

from typing import Any, Iterable

import numpy as np

from .core import Edge, EdgeLike, EdgeList, EdgeType, Vertex, VertexList


class DenseGraph:
    """
    Graph stored as an ``n x n`` weight matrix.

    Attributes:
        dtype: numpy dtype of the weight cells.

    Complexity:
        - add / remove / at / get: O(1)
        - outgoing / incoming / neighbors_of / count_*going: O(n)
        - edges / count_edges: O(n^2)
    """

    def __init__(self, n: int, edges: Iterable[EdgeLike] = (), dtype: Any = np.int64):
        """
        Create a graph with ``n`` vertices and no edges.

        Args:
            n: Number of vertices, must be positive.
            edges: Optional unidirectional edges of weight 1 to add.
            dtype: numpy dtype of the weights.

        Raises:
            ValueError: If ``n`` is not positive.
        """
        if n <= 0:
            raise ValueError(f"Number of vertices must be positive, got {n}")
        self._n = int(n)
        self.dtype = np.dtype(dtype)
        self._cells = np.zeros(self._n * self._n, dtype=self.dtype)
        for e in edges:
            self.add(e)

    def _index(self, source: Vertex, target: Vertex) -> int:
        return source + target * self._n

    def _in_range(self, v: Vertex) -> bool:
        return 0 <= v < self._n

    def _cell_value(self, weight: Any) -> Any:
        value = self.dtype.type(weight)
        if value != weight:
            raise ValueError(f"Weight {weight!r} cannot be stored exactly in a {self.dtype} graph")
        return value

    @property
    def _matrix(self) -> np.ndarray:
        # rows are targets, columns are sources
        return self._cells.reshape(self._n, self._n)

    def __repr__(self) -> str:
        return f"DenseGraph(n={self._n}, edges={self.count_edges()})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, DenseGraph):
            return NotImplemented
        return self._n == other._n and np.array_equal(self._cells, other._cells)

    def __contains__(self, edge: EdgeLike) -> bool:
        return bool(self.at(edge))

    def copy(self) -> "DenseGraph":
        """Return an independent copy of the graph."""
        g = DenseGraph.__new__(DenseGraph)
        g._n = self._n
        g.dtype = self.dtype
        g._cells = self._cells.copy()
        return g

    def size(self) -> int:
        """Return the number of vertices."""
        return self._n

    def add(self, edge: EdgeLike, edge_type: EdgeType = EdgeType.UNI, weight: Any = 1) -> bool:
        """
        Add an edge with the given weight.

        Args:
            edge: Edge or ``(source, target)`` pair.
            edge_type: ``EdgeType.BI`` also writes the reverse edge.
            weight: Weight to store; zero is indistinguishable from "no edge".

        Returns:
            False (graph unchanged) if an endpoint is out of range.

        Raises:
            ValueError: If ``weight`` would be altered by the cell dtype,
                e.g. a fractional weight in an integer graph.
        """
        e = Edge.of(edge)
        if not (self._in_range(e.source) and self._in_range(e.target)):
            return False
        value = self._cell_value(weight)
        self._cells[self._index(e.source, e.target)] = value
        if edge_type is EdgeType.BI:
            self._cells[self._index(e.target, e.source)] = value
        return True

    def remove(self, edge: EdgeLike, edge_type: EdgeType = EdgeType.UNI) -> bool:
        """
        Remove an edge.

        Returns:
            False (graph unchanged) if an endpoint is out of range.
        """
        e = Edge.of(edge)
        if not (self._in_range(e.source) and self._in_range(e.target)):
            return False
        self._cells[self._index(e.source, e.target)] = 0
        if edge_type is EdgeType.BI:
            self._cells[self._index(e.target, e.source)] = 0
        return True

    def at(self, edge: EdgeLike) -> Any:
        """Return the weight of ``edge``, zero if absent or out of range."""
        e = Edge.of(edge)
        return self.get(e.source, e.target)

    def get(self, source: Vertex, target: Vertex) -> Any:
        """Return the weight of edge ``(source, target)``, zero if absent."""
        if not (self._in_range(source) and self._in_range(target)):
            return self.dtype.type(0).item()
        return self._cells[self._index(source, target)].item()

    def set(self, source: Vertex, target: Vertex, weight: Any) -> None:
        """
        Write the weight of edge ``(source, target)`` without bounds checking.

        Equivalent to ``add((source, target), weight=weight)`` for in-range
        vertices, including the ValueError for weights the dtype would alter.
        """
        self._cells[self._index(source, target)] = self._cell_value(weight)

    def vertices(self) -> VertexList:
        """Return the vertex identifiers in ascending order."""
        return list(range(self._n))

    def outgoing(self, v: Vertex) -> VertexList:
        """Return targets of edges leaving ``v`` (ascending, self-loop included)."""
        if not self._in_range(v):
            return []
        return np.flatnonzero(self._matrix[:, v]).tolist()

    def incoming(self, v: Vertex) -> VertexList:
        """Return sources of edges entering ``v`` (ascending, self-loop included)."""
        if not self._in_range(v):
            return []
        return np.flatnonzero(self._matrix[v, :]).tolist()

    def neighbors_of(self, v: Vertex) -> VertexList:
        """Return targets of edges leaving ``v``, excluding ``v`` itself."""
        return [u for u in self.outgoing(v) if u != v]

    def count_outgoing(self, v: Vertex) -> int:
        """Return the number of edges leaving ``v`` (0 for invalid ``v``)."""
        if not self._in_range(v):
            return 0
        return int(np.count_nonzero(self._matrix[:, v]))

    def count_incoming(self, v: Vertex) -> int:
        """Return the number of edges entering ``v`` (0 for invalid ``v``)."""
        if not self._in_range(v):
            return 0
        return int(np.count_nonzero(self._matrix[v, :]))

    def count_edges(self) -> int:
        """Return the number of present edges."""
        return int(np.count_nonzero(self._cells))

    def edges(self) -> EdgeList:
        """Return present edges ordered by source, then target."""
        sources, targets = np.nonzero(self._matrix.T)
        return [Edge(int(s), int(t)) for s, t in zip(sources, targets)]

    def to_numpy(self) -> np.ndarray:
        """Return a copy of the weights as an array indexed ``[source, target]``."""
        return self._matrix.T.copy()
