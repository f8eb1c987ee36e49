"""
Core graph primitives and the structural graph contract.

Vertices are plain integers in ``[0, size())``; :data:`INVALID_VERTEX`
marks "no vertex" (absent parent or predecessor). An :class:`Edge` is an
immutable ordered pair and carries no directionality of its own:
bidirectional insertion is a policy of the backend's ``add``, selected by
:class:`EdgeType`.

Backends do not share a base class. Any object providing the methods of
:class:`Graph` works with the algorithms; the protocols below only name
the method sets each algorithm relies on.
"""

import sys
from dataclasses import dataclass
from enum import Enum
from typing import Any, List, Protocol, Sequence, Union, runtime_checkable

Vertex = int

#: Sentinel identifier meaning "no vertex"; the largest representable id.
INVALID_VERTEX: Vertex = sys.maxsize


class EdgeType(Enum):
    """Insertion policy for ``add``/``remove``."""

    UNI = "uni"  # single directed arc
    BI = "bi"  # arc written in both directions


@dataclass(frozen=True, order=True)
class Edge:
    """
    Directed edge between two vertices.

    Edges are hashable and ordered lexicographically by ``(source, target)``,
    which makes them usable as property map keys.

    Attributes:
        source: Starting vertex.
        target: Ending vertex.
    """

    source: Vertex
    target: Vertex

    def reverse(self) -> "Edge":
        """Return the edge with source and target swapped."""
        return Edge(self.target, self.source)

    @classmethod
    def of(cls, value: Union["Edge", Sequence[Vertex]]) -> "Edge":
        """
        Coerce an ``Edge`` or a ``(source, target)`` pair into an ``Edge``.

        Raises:
            ValueError: If a sequence does not hold exactly two vertices.
        """
        if isinstance(value, Edge):
            return value
        if len(value) != 2:
            raise ValueError(f"Edge requires exactly two vertices, got {value!r}")
        return cls(int(value[0]), int(value[1]))

    def __iter__(self):
        yield self.source
        yield self.target


VertexList = List[Vertex]
EdgeList = List[Edge]
EdgeLike = Union[Edge, Sequence[Vertex]]


@runtime_checkable
class TraversableGraph(Protocol):
    """Minimal contract needed by breadth/depth-first search."""

    def size(self) -> int:
        """Return the number of vertices."""
        ...

    def outgoing(self, v: Vertex) -> Sequence[Vertex]:
        """Return the targets of edges leaving ``v``."""
        ...


@runtime_checkable
class Graph(TraversableGraph, Protocol):
    """Read-only structural contract shared by all graph backends."""

    def vertices(self) -> VertexList:
        """Return ``[0, 1, ..., size() - 1]``."""
        ...

    def at(self, edge: EdgeLike) -> Any:
        """Return the edge value; falsy means the edge is absent."""
        ...

    def incoming(self, v: Vertex) -> VertexList:
        """Return the sources of edges entering ``v``."""
        ...

    def edges(self) -> EdgeList:
        """Return all present edges."""
        ...

    def count_edges(self) -> int:
        """Return the number of present edges."""
        ...


@runtime_checkable
class MutableGraph(Graph, Protocol):
    """Graph contract extended with edge insertion and removal."""

    def add(self, edge: EdgeLike, edge_type: EdgeType = EdgeType.UNI, weight: Any = 1) -> bool:
        """Insert an edge; False if an endpoint is out of range."""
        ...

    def remove(self, edge: EdgeLike, edge_type: EdgeType = EdgeType.UNI) -> bool:
        """Remove an edge; False if an endpoint is out of range."""
        ...


def is_valid_vertex(graph: TraversableGraph, v: Vertex) -> bool:
    """Return True if ``v`` identifies a vertex of ``graph``."""
    return 0 <= v < graph.size()
