"""fwgraph: generic all-pairs optimal paths for networkx graphs.

Primary API:
    floyd_warshall() - Compute all-pairs paths and return the finished algorithm
    FloydWarshallAllShortestPaths - Reusable algorithm object with path queries
    StrictMultiDiGraph - Strict multi-directed graph with unique edge keys
    DistanceRelaxer and concrete relaxers - Pluggable cost strategies
    CancelManager - Cooperative cancellation token

Example:
    from fwgraph import StrictMultiDiGraph, floyd_warshall

    g = StrictMultiDiGraph()
    for name in ("A", "B", "C"):
        g.add_node(name)
    g.add_edge("A", "B", cost=1)
    g.add_edge("B", "C", cost=2)

    fw = floyd_warshall(g)
    found, path = fw.try_get_path("A", "C")
"""

from __future__ import annotations

from fwgraph import logging
from fwgraph._version import __version__
from fwgraph.algorithms import (
    CRITICAL_DISTANCE,
    SHORTEST_DISTANCE,
    WIDEST_PATH,
    CancelManager,
    ComputationState,
    CriticalDistanceRelaxer,
    DistanceRelaxer,
    EdgeRecord,
    FloydWarshallAllShortestPaths,
    IdentityRecord,
    PredecessorRecord,
    ShortestDistanceRelaxer,
    WidestPathRelaxer,
    floyd_warshall,
)
from fwgraph.config import FW_CONFIG, FloydWarshallConfig
from fwgraph.exceptions import (
    AlgorithmStateError,
    FwGraphError,
    NegativeCycleGraphError,
    PathReconstructionError,
)
from fwgraph.graph import StrictMultiDiGraph, weight_function
from fwgraph.types import Cost, Edge, VertexPair

__all__ = [
    # Version
    "__version__",
    # Algorithms
    "floyd_warshall",
    "FloydWarshallAllShortestPaths",
    "ComputationState",
    "CancelManager",
    "EdgeRecord",
    "IdentityRecord",
    "PredecessorRecord",
    # Relaxers
    "DistanceRelaxer",
    "ShortestDistanceRelaxer",
    "CriticalDistanceRelaxer",
    "WidestPathRelaxer",
    "SHORTEST_DISTANCE",
    "CRITICAL_DISTANCE",
    "WIDEST_PATH",
    # Graph
    "StrictMultiDiGraph",
    "weight_function",
    # Types
    "Cost",
    "Edge",
    "VertexPair",
    # Config
    "FloydWarshallConfig",
    "FW_CONFIG",
    # Errors
    "FwGraphError",
    "NegativeCycleGraphError",
    "AlgorithmStateError",
    "PathReconstructionError",
    # Utilities
    "logging",
]
