"""Read networkx graphs as the vertex set, edge set and weight function
consumed by the all-pairs algorithms.

Any networkx graph flavour is accepted. Multigraph edges keep their key;
simple-graph edges get ``key=None``. Undirected graphs yield every edge in
both directions so the algorithms only ever deal with directed edges.
"""

from __future__ import annotations

from typing import Any, Callable, Dict, Iterator, List, Optional

import networkx as nx

from fwgraph.config import FW_CONFIG
from fwgraph.types import Cost, Edge, NodeID

WeightFunction = Callable[[Edge], Cost]


def iter_vertices(graph: nx.Graph) -> Iterator[NodeID]:
    """Yield the graph's vertices in insertion order."""
    return iter(graph.nodes)


def iter_edges(graph: nx.Graph) -> Iterator[Edge]:
    """Yield every directed edge of ``graph`` as an `Edge`."""
    directed = graph.is_directed()
    if graph.is_multigraph():
        for u, v, key in graph.edges(keys=True):
            yield Edge(u, v, key)
            if not directed and u != v:
                yield Edge(v, u, key)
    else:
        for u, v in graph.edges():
            yield Edge(u, v)
            if not directed and u != v:
                yield Edge(v, u)


def edge_attr(graph: nx.Graph, edge: Edge) -> Dict[str, Any]:
    """Return the attribute dict backing ``edge``.

    Raises:
        KeyError: If the edge is not in the graph.
    """
    if graph.is_multigraph():
        return graph[edge.source][edge.target][edge.key]
    return graph[edge.source][edge.target]


def weight_function(
    graph: nx.Graph,
    weight: Optional[str] = None,
    default: Optional[Cost] = None,
) -> WeightFunction:
    """Build a weight function reading an edge attribute.

    Args:
        graph: Graph whose edges will be weighed.
        weight: Attribute name. Defaults to ``FW_CONFIG.weight_attr``.
        default: Weight for edges without the attribute. Defaults to
            ``FW_CONFIG.default_weight``.

    Returns:
        Callable mapping an `Edge` to its cost.
    """
    attr = weight if weight is not None else FW_CONFIG.weight_attr
    fallback = default if default is not None else FW_CONFIG.default_weight

    def _weight(edge: Edge) -> Cost:
        return edge_attr(graph, edge).get(attr, fallback)

    return _weight


def edge_nodes(path: List[Edge]) -> List[NodeID]:
    """Return the vertex sequence walked by a contiguous edge path."""
    if not path:
        return []
    nodes = [path[0].source]
    nodes.extend(edge.target for edge in path)
    return nodes
