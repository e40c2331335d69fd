"""wgraph - a small weighted-graph algorithms engine."""

__version__ = "0.1.0"

from .containers import Heap, UnionFind
from .diagnostics import (
    assert_disjoint_set_consistent,
    assert_min_heap,
    debug_context,
    is_debug_enabled,
    is_min_heap,
    set_debug_enabled,
)
from .graphs import (
    EdgeRecord,
    MinSpanTree,
    Path,
    ShortestPaths,
    WeightedGraph,
    adjacency_matrix,
    dijkstra,
    kruskal_mst,
    prim_mst,
    reconstruct_path,
)
from .logging import configure_logging, get_logger, set_log_level

__all__ = [
    "__version__",
    # Containers
    "Heap",
    "UnionFind",
    # Graphs
    "WeightedGraph",
    "EdgeRecord",
    "MinSpanTree",
    "prim_mst",
    "kruskal_mst",
    "Path",
    "ShortestPaths",
    "dijkstra",
    "reconstruct_path",
    "adjacency_matrix",
    # Diagnostics
    "is_min_heap",
    "assert_min_heap",
    "assert_disjoint_set_consistent",
    "is_debug_enabled",
    "set_debug_enabled",
    "debug_context",
    # Logging
    "get_logger",
    "set_log_level",
    "configure_logging",
]
