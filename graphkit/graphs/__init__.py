"""
Graph algorithms package for graphkit.

This package provides:
- Vertex/edge primitives and the structural graph protocols
- Graph backends (DenseGraph adjacency matrix, SparseGraph adjacency list)
- Property maps attaching external values to vertices and edges
- Traversal algorithms (BFS, DFS)
- Topological sort (Kahn)
- Minimum spanning tree (Prim)
- Shortest path (Dijkstra)

Algorithms work with any object providing the methods of the protocol they
are annotated with, and scan neighbors in ascending id order for
reproducibility.
"""

from .core import (
    INVALID_VERTEX,
    Edge,
    EdgeList,
    EdgeType,
    Graph,
    MutableGraph,
    TraversableGraph,
    Vertex,
    VertexList,
    is_valid_vertex,
)
from .dense import DenseGraph
from .mst import minimum_spanning_tree_prim
from .property_map import EdgePropertyMap, MissingPropertyError, PropertyMap, VertexPropertyMap
from .shortest import shortest_path_dijkstra
from .sparse import SparseGraph
from .toposort import topological_sort
from .traversal import breadth_first_search, depth_first_search
from .utils import path_weight, reconstruct_path, tree_edges, tree_weight, weight_function

__all__ = [
    "Vertex",
    "VertexList",
    "Edge",
    "EdgeList",
    "EdgeType",
    "INVALID_VERTEX",
    "TraversableGraph",
    "Graph",
    "MutableGraph",
    "is_valid_vertex",
    "DenseGraph",
    "SparseGraph",
    "PropertyMap",
    "VertexPropertyMap",
    "EdgePropertyMap",
    "MissingPropertyError",
    "breadth_first_search",
    "depth_first_search",
    "topological_sort",
    "minimum_spanning_tree_prim",
    "shortest_path_dijkstra",
    "weight_function",
    "reconstruct_path",
    "path_weight",
    "tree_weight",
    "tree_edges",
]

# Example usage:
# from graphkit.graphs import DenseGraph, EdgeType, shortest_path_dijkstra
#
# g = DenseGraph(3)
# g.add((0, 1), EdgeType.UNI, 1)
# g.add((1, 2), EdgeType.UNI, 2)
# path, found = shortest_path_dijkstra(g, 0, 2)  # ([0, 1, 2], True)
