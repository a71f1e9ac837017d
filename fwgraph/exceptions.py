"""Exception hierarchy for fwgraph."""

from __future__ import annotations

from typing import Iterable, Tuple

from fwgraph.types import NodeID


class FwGraphError(Exception):
    """Base class for all fwgraph errors."""


class NegativeCycleGraphError(FwGraphError):
    """Raised when relaxation leaves a vertex with a cycle better than identity.

    Attributes:
        vertices: Vertices whose self-pair cost indicates a defective cycle.
    """

    def __init__(self, vertices: Iterable[NodeID]) -> None:
        self.vertices: Tuple[NodeID, ...] = tuple(vertices)
        shown = ", ".join(repr(v) for v in self.vertices[:5])
        if len(self.vertices) > 5:
            shown += ", ..."
        super().__init__(f"Graph contains a negative cycle through: {shown}")


class AlgorithmStateError(FwGraphError, RuntimeError):
    """Raised when an operation is not valid in the algorithm's current state."""


class PathReconstructionError(FwGraphError, RuntimeError):
    """Raised when a pair of the path record store decomposes into itself."""
