"""Graph primitives and networkx adapters.

`StrictMultiDiGraph` is the strict multi-directed graph type; `view` reads any
networkx graph as vertices, directed `Edge` values and a weight function.
"""

from fwgraph.graph.strict_multidigraph import StrictMultiDiGraph
from fwgraph.graph.view import (
    WeightFunction,
    edge_attr,
    edge_nodes,
    iter_edges,
    iter_vertices,
    weight_function,
)

__all__ = [
    "StrictMultiDiGraph",
    "WeightFunction",
    "edge_attr",
    "edge_nodes",
    "iter_edges",
    "iter_vertices",
    "weight_function",
]
