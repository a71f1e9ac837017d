"""All-pairs path algorithms and their supporting strategies."""

from fwgraph.algorithms.base import AlgorithmBase, ComputationState
from fwgraph.algorithms.cancel import CancelManager
from fwgraph.algorithms.floyd_warshall import (
    EdgeRecord,
    FloydWarshallAllShortestPaths,
    IdentityRecord,
    PathRecord,
    PredecessorRecord,
    floyd_warshall,
)
from fwgraph.algorithms.relaxers import (
    CRITICAL_DISTANCE,
    SHORTEST_DISTANCE,
    WIDEST_PATH,
    CriticalDistanceRelaxer,
    DistanceRelaxer,
    ShortestDistanceRelaxer,
    WidestPathRelaxer,
)

__all__ = [
    "AlgorithmBase",
    "ComputationState",
    "CancelManager",
    "EdgeRecord",
    "FloydWarshallAllShortestPaths",
    "IdentityRecord",
    "PathRecord",
    "PredecessorRecord",
    "floyd_warshall",
    "CRITICAL_DISTANCE",
    "SHORTEST_DISTANCE",
    "WIDEST_PATH",
    "CriticalDistanceRelaxer",
    "DistanceRelaxer",
    "ShortestDistanceRelaxer",
    "WidestPathRelaxer",
]
