"""Shared type aliases and small value types.

`Edge` identifies one directed graph edge by its endpoints and multigraph key.
`VertexPair` is the ordered ``(source, target)`` key of the path record store.
"""

from __future__ import annotations

from typing import Hashable, NamedTuple, Union

NodeID = Hashable
EdgeID = Hashable

#: Numeric cost of an edge or a path (distance, latency, capacity, ...).
Cost = Union[int, float]


class Edge(NamedTuple):
    """A directed edge as seen by the all-pairs algorithms.

    Attributes:
        source: Tail vertex.
        target: Head vertex.
        key: Multigraph edge key; ``None`` for simple graphs.
    """

    source: NodeID
    target: NodeID
    key: EdgeID = None


class VertexPair(NamedTuple):
    """Ordered ``(source, target)`` pair used as a store key."""

    source: NodeID
    target: NodeID

    @classmethod
    def from_edge(cls, edge: Edge) -> VertexPair:
        """Return the pair spanned by ``edge``."""
        return cls(edge.source, edge.target)

    @property
    def is_self_pair(self) -> bool:
        return self.source == self.target
