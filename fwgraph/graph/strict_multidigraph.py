"""Strict multi-directed graph used as the default input for fwgraph.

`StrictMultiDiGraph` extends `networkx.MultiDiGraph` so that nodes must be
declared before edges reference them, edge keys are unique integers across the
whole graph, and misuse raises `ValueError` instead of silently mutating state.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Tuple

import networkx as nx

from fwgraph.types import Edge, EdgeID, NodeID

AttrDict = Dict[str, Any]
EdgeTuple = Tuple[NodeID, NodeID, EdgeID, AttrDict]


class StrictMultiDiGraph(nx.MultiDiGraph):
    """A multi-directed graph with explicit node management and unique edge keys.

    Rules:
      - ``add_edge`` never creates missing endpoints.
      - Adding an existing node or edge key raises ValueError.
      - Removing an unknown node or edge raises ValueError.
      - Auto-assigned edge keys are monotonically increasing integers and are
        never reused after removal.
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        # Edge key -> (source, target, key, attribute dict)
        self._edges: Dict[EdgeID, EdgeTuple] = {}
        self._next_edge_id: int = 0

    def new_edge_key(self, u: NodeID, v: NodeID, key: Optional[int] = None) -> int:  # type: ignore[override]
        """Return the next unused integer edge key (arguments are ignored)."""
        next_edge_id = self._next_edge_id
        self._next_edge_id += 1
        return next_edge_id

    def add_node(self, node_for_adding: NodeID, **attr: Any) -> None:
        """Add a node, rejecting duplicates.

        Raises:
            ValueError: If the node already exists.
        """
        if node_for_adding in self:
            raise ValueError(f"Node '{node_for_adding}' already exists in this graph.")
        super().add_node(node_for_adding, **attr)

    def remove_node(self, n: NodeID) -> None:
        """Remove a node together with its incident edges.

        Raises:
            ValueError: If the node does not exist.
        """
        if n not in self:
            raise ValueError(f"Node '{n}' does not exist.")
        for e_id in [k for k, (s, t, _, _) in self._edges.items() if n in (s, t)]:
            del self._edges[e_id]
        super().remove_node(n)

    def add_edge(  # pyright: ignore[reportIncompatibleMethodOverride]
        self,
        u_for_edge: NodeID,
        v_for_edge: NodeID,
        key: Optional[EdgeID] = None,
        **attr: Any,
    ) -> EdgeID:
        """Add a directed edge between two existing nodes.

        Args:
            u_for_edge: Source node; must exist.
            v_for_edge: Target node; must exist.
            key: Explicit edge key. Generated when omitted. Explicit integer
                keys push the auto-key counter past them.
            **attr: Edge attributes, e.g. ``cost=3``.

        Returns:
            The key of the new edge.

        Raises:
            ValueError: If an endpoint is missing or the key is taken.
        """
        if u_for_edge not in self:
            raise ValueError(f"Source node '{u_for_edge}' does not exist.")
        if v_for_edge not in self:
            raise ValueError(f"Target node '{v_for_edge}' does not exist.")

        if key is None:
            key = self.new_edge_key(u_for_edge, v_for_edge)
        else:
            if key in self._edges:
                raise ValueError(f"Edge with id '{key}' already exists.")
            if isinstance(key, int) and key >= self._next_edge_id:
                self._next_edge_id = key + 1

        super().add_edge(u_for_edge, v_for_edge, key=key, **attr)
        self._edges[key] = (
            u_for_edge,
            v_for_edge,
            key,
            self[u_for_edge][v_for_edge][key],  # pyright: ignore[reportArgumentType]
        )
        return key

    def remove_edge(self, u: NodeID, v: NodeID, key: Optional[EdgeID] = None) -> None:
        """Remove the edge ``key`` from ``u`` to ``v``, or every such edge if no key is given.

        Raises:
            ValueError: If no matching edge exists.
        """
        if key is not None:
            if key not in self._edges or self._edges[key][:2] != (u, v):
                raise ValueError(f"No edge with id='{key}' found from {u} to {v}.")
            self.remove_edge_by_id(key)
            return
        edge_ids = self.edges_between(u, v)
        if not edge_ids:
            raise ValueError(f"No edges from '{u}' to '{v}' to remove.")
        for e_id in edge_ids:
            self.remove_edge_by_id(e_id)

    def remove_edge_by_id(self, key: EdgeID) -> None:
        """Remove the edge with the given key.

        Raises:
            ValueError: If no such edge exists.
        """
        if key not in self._edges:
            raise ValueError(f"Edge with id='{key}' not found.")
        src_node, dst_node, _, _ = self._edges.pop(key)
        super().remove_edge(src_node, dst_node, key=key)

    def edges_between(self, u: NodeID, v: NodeID) -> List[EdgeID]:
        """List the keys of all edges from ``u`` to ``v``."""
        if u not in self.succ or v not in self.succ[u]:
            return []
        return list(self.succ[u][v].keys())

    def edge_list(self) -> List[Edge]:
        """Return every edge as an `Edge`, in insertion order."""
        return [Edge(src, dst, key) for src, dst, key, _ in self._edges.values()]
