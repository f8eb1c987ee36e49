"""graphkit - generic graph storage backends and classic graph algorithms."""

__version__ = "0.1.0"

# Diagnostics
from .diagnostics import debug_context, is_debug_enabled, set_debug_enabled

# Graphs
from .graphs import (
    INVALID_VERTEX,
    DenseGraph,
    Edge,
    EdgePropertyMap,
    EdgeType,
    Graph,
    MissingPropertyError,
    MutableGraph,
    PropertyMap,
    SparseGraph,
    TraversableGraph,
    VertexPropertyMap,
    breadth_first_search,
    depth_first_search,
    minimum_spanning_tree_prim,
    path_weight,
    reconstruct_path,
    shortest_path_dijkstra,
    topological_sort,
    tree_weight,
)

# Logging
from .logging import configure_logging, get_logger, set_log_level

# Containers
from .structures import PriorityQueue

__all__ = [
    "__version__",
    # Graphs
    "INVALID_VERTEX",
    "Edge",
    "EdgeType",
    "TraversableGraph",
    "Graph",
    "MutableGraph",
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
    "reconstruct_path",
    "path_weight",
    "tree_weight",
    # Containers
    "PriorityQueue",
    # Diagnostics
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
