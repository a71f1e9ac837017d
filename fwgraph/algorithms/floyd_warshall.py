"""Floyd-Warshall all-pairs optimal paths over a pluggable relaxer.

The engine fills a sparse store keyed by `VertexPair`. Each stored record is
one of three variants:

  - `IdentityRecord`: the self-pair sentinel, cost = relaxer identity.
  - `EdgeRecord`: the best direct edge between the pair.
  - `PredecessorRecord`: an intermediate vertex ``k`` such that the pair's cost
    is ``combine(cost(source, k), cost(k, target))``.

Only O(V^2) records are kept; full paths are rebuilt on demand by splitting
pairs at their intermediate vertex with an explicit stack.

Example:
    >>> from fwgraph import StrictMultiDiGraph, floyd_warshall
    >>> g = StrictMultiDiGraph()
    >>> for n in "ABC":
    ...     g.add_node(n)
    >>> _ = g.add_edge("A", "B", cost=1)
    >>> _ = g.add_edge("B", "C", cost=2)
    >>> fw = floyd_warshall(g)
    >>> fw.try_get_distance("A", "C")
    (True, 3)
"""

from __future__ import annotations

import io
import time
from dataclasses import dataclass
from functools import reduce
from types import MappingProxyType
from typing import Dict, FrozenSet, List, Mapping, Optional, Sequence, TextIO, Tuple, Union

import networkx as nx

from fwgraph.algorithms.base import AlgorithmBase, ComputationState
from fwgraph.algorithms.cancel import CancelManager
from fwgraph.algorithms.relaxers import SHORTEST_DISTANCE, DistanceRelaxer
from fwgraph.config import FW_CONFIG, FloydWarshallConfig
from fwgraph.exceptions import NegativeCycleGraphError, PathReconstructionError
from fwgraph.graph.view import (
    WeightFunction,
    edge_nodes,
    iter_edges,
    iter_vertices,
    weight_function,
)
from fwgraph.logging import get_logger
from fwgraph.types import Cost, Edge, NodeID, VertexPair

logger = get_logger(__name__)


@dataclass(frozen=True, slots=True)
class IdentityRecord:
    """Self-pair sentinel. Carries no edge and never decomposes."""

    cost: Cost

    def __str__(self) -> str:
        return f"i:{self.cost}"


@dataclass(frozen=True, slots=True)
class EdgeRecord:
    """Pair reached by a single direct edge."""

    cost: Cost
    edge: Edge

    def __str__(self) -> str:
        return f"e:{self.cost}-{self.edge}"


@dataclass(frozen=True, slots=True)
class PredecessorRecord:
    """Pair split at an intermediate vertex."""

    cost: Cost
    predecessor: NodeID

    def __str__(self) -> str:
        return f"p:{self.cost}-{self.predecessor}"


PathRecord = Union[IdentityRecord, EdgeRecord, PredecessorRecord]

PathResult = Tuple[bool, Tuple[Edge, ...]]


class FloydWarshallAllShortestPaths(AlgorithmBase):
    """All-pairs optimal paths with on-demand path reconstruction.

    One instance holds the result of at most one completed run. Calling
    `compute()` again clears the store and invalidates earlier results.

    Args:
        graph: Any networkx graph.
        weights: Maps an `Edge` to its cost. Defaults to reading
            ``config.weight_attr`` from the edge attributes.
        relaxer: Cost strategy. Defaults to additive shortest distance.
        cancel_manager: Cancellation token; a private one is created if omitted.
        config: Engine configuration. Defaults to the global `FW_CONFIG`.
    """

    def __init__(
        self,
        graph: nx.Graph,
        weights: Optional[WeightFunction] = None,
        relaxer: Optional[DistanceRelaxer] = None,
        cancel_manager: Optional[CancelManager] = None,
        config: Optional[FloydWarshallConfig] = None,
    ) -> None:
        super().__init__(graph, cancel_manager)
        self.config = config if config is not None else FW_CONFIG
        self.config.validate()
        self.relaxer = relaxer if relaxer is not None else SHORTEST_DISTANCE
        self.weights = weights or weight_function(
            graph, self.config.weight_attr, self.config.default_weight
        )
        self._data: Dict[VertexPair, PathRecord] = {}
        self._vertices: FrozenSet[NodeID] = frozenset()

    #
    # Compute engine
    #
    def _internal_compute(self) -> None:
        data = self._data
        data.clear()
        self._vertices = frozenset()
        if self._checkpoint():
            return

        started = time.perf_counter()
        self._set_state(ComputationState.INITIALIZING)
        vertices: Sequence[NodeID] = tuple(iter_vertices(self.graph))
        self._vertices = frozenset(vertices)
        relaxer = self.relaxer
        combine = relaxer.combine
        improves = relaxer.improves

        # Best direct edge per pair; equal-cost later edges do not replace earlier ones
        edge_count = 0
        defective_loops = set()
        for edge in iter_edges(self.graph):
            edge_count += 1
            cost = self.weights(edge)
            ij = VertexPair.from_edge(edge)
            if ij.is_self_pair:
                if relaxer.is_cycle_defect(cost):
                    defective_loops.add(edge.source)
                continue
            current = data.get(ij)
            if current is None or improves(cost, current.cost):
                data[ij] = EdgeRecord(cost, edge)
        logger.debug(
            "Floyd-Warshall init: %d vertices, %d edges, %d direct pairs",
            len(vertices),
            edge_count,
            len(data),
        )
        if self._checkpoint():
            return

        for v in vertices:
            data[VertexPair(v, v)] = IdentityRecord(relaxer.identity)
        if self._checkpoint():
            return

        self._set_state(ComputationState.RELAXING)
        interval = self.config.progress_log_interval
        for index, vk in enumerate(vertices, 1):
            if self._checkpoint():
                return
            for vi in vertices:
                path_ik = data.get(VertexPair(vi, vk))
                if path_ik is None:
                    continue
                for vj in vertices:
                    path_kj = data.get(VertexPair(vk, vj))
                    if path_kj is None:
                        continue
                    combined = combine(path_ik.cost, path_kj.cost)
                    ij = VertexPair(vi, vj)
                    path_ij = data.get(ij)
                    if path_ij is None or improves(combined, path_ij.cost):
                        data[ij] = PredecessorRecord(combined, vk)
            if interval and index % interval == 0:
                logger.debug(
                    "Floyd-Warshall relaxed %d/%d intermediates, %d pairs stored",
                    index,
                    len(vertices),
                    len(data),
                )

        if self.config.check_negative_cycles and relaxer.check_cycles:
            self._set_state(ComputationState.NEGATIVE_CYCLE_CHECK)
            offending = [
                v
                for v in vertices
                if v in defective_loops
                or relaxer.is_cycle_defect(data[VertexPair(v, v)].cost)
            ]
            if offending:
                logger.warning(
                    "Negative cycle detected through %d vertices", len(offending)
                )
                raise NegativeCycleGraphError(offending)

        logger.debug(
            "Floyd-Warshall done: %d pairs stored in %.3fs",
            len(data),
            time.perf_counter() - started,
        )

    #
    # Queries
    #
    def _check_query(self, source: NodeID, target: NodeID) -> None:
        self._require_done()
        if source is None or target is None:
            raise ValueError("source and target must not be None.")
        if source not in self._vertices:
            raise KeyError(f"Source node '{source}' is not in the graph.")
        if target not in self._vertices:
            raise KeyError(f"Target node '{target}' is not in the graph.")

    def try_get_path(self, source: NodeID, target: NodeID) -> PathResult:
        """Rebuild an optimal path from ``source`` to ``target``.

        Pairs are split at their intermediate vertex until only direct edges
        remain. Under relaxers with ties (e.g. bottleneck widths) the halves of
        a split may share a vertex; such loops are cut out, which never makes
        the path worse once the cycle check has passed.

        Args:
            source: Start vertex.
            target: End vertex.

        Returns:
            ``(True, edges)`` with the edges of a simple path in
            source-to-target order, or ``(False, ())`` if ``target`` is
            unreachable. A vertex paired with itself yields ``(True, ())``.

        Raises:
            AlgorithmStateError: If no completed run is available.
            ValueError: If either vertex is None.
            KeyError: If either vertex is not in the graph.
            PathReconstructionError: If a pair re-enters its own decomposition.
        """
        self._check_query(source, target)
        if source == target:
            return True, ()

        guard = self.config.detect_revisits
        walk: List[Edge] = []
        # Each entry carries the pairs it was split from
        todo: List[Tuple[VertexPair, FrozenSet[VertexPair]]] = [
            (VertexPair(source, target), frozenset())
        ]
        while todo:
            current, ancestors = todo.pop()
            record = self._data.get(current)
            if record is None:
                return False, ()
            if isinstance(record, EdgeRecord):
                walk.append(record.edge)
            elif isinstance(record, PredecessorRecord):
                if guard:
                    if current in ancestors:
                        raise PathReconstructionError(
                            f"Pair {current.source!r} -> {current.target!r} repeats "
                            f"while rebuilding the path {source!r} -> {target!r}."
                        )
                    ancestors = ancestors | {current}
                intermediate = record.predecessor
                todo.append((VertexPair(intermediate, current.target), ancestors))
                todo.append((VertexPair(current.source, intermediate), ancestors))
        return True, tuple(_drop_cycles(source, walk))

    def get_path(self, source: NodeID, target: NodeID) -> Optional[Tuple[Edge, ...]]:
        """Return the path edges, or None if ``target`` is unreachable."""
        found, path = self.try_get_path(source, target)
        return path if found else None

    def try_get_distance(
        self, source: NodeID, target: NodeID
    ) -> Tuple[bool, Optional[Cost]]:
        """Return ``(True, cost)`` for a reachable pair, else ``(False, None)``."""
        self._check_query(source, target)
        record = self._data.get(VertexPair(source, target))
        if record is None:
            return False, None
        return True, record.cost

    def path_nodes(self, source: NodeID, target: NodeID) -> Optional[Tuple[NodeID, ...]]:
        """Return the vertex sequence of an optimal path, or None if unreachable."""
        path = self.get_path(source, target)
        if path is None:
            return None
        if not path:
            return (source,)
        return tuple(edge_nodes(list(path)))

    def path_cost(self, path: Sequence[Edge]) -> Cost:
        """Combine the weights of ``path`` under the relaxer (identity if empty)."""
        return reduce(
            self.relaxer.combine,
            (self.weights(edge) for edge in path),
            self.relaxer.identity,
        )

    def distances(self) -> Dict[VertexPair, Cost]:
        """Return a snapshot of the cost of every reachable pair."""
        self._require_done()
        return {pair: record.cost for pair, record in self._data.items()}

    @property
    def records(self) -> Mapping[VertexPair, PathRecord]:
        """Read-only view of the path record store."""
        return MappingProxyType(self._data)

    def dump(self, stream: Optional[TextIO] = None) -> str:
        """Render every stored pair and its record, for debugging.

        Works in any state, including after cancellation. The text is logged at
        DEBUG and, when given, written to ``stream``.
        """
        buf = io.StringIO()
        buf.write("data:\n")
        for pair, record in self._data.items():
            buf.write(f"{pair.source}->{pair.target}: {record}\n")
        text = buf.getvalue()
        logger.debug("%s", text.rstrip("\n"))
        if stream is not None:
            stream.write(text)
        return text


def floyd_warshall(
    graph: nx.Graph,
    weight: Optional[str] = None,
    weights: Optional[WeightFunction] = None,
    relaxer: Optional[DistanceRelaxer] = None,
    cancel_manager: Optional[CancelManager] = None,
    config: Optional[FloydWarshallConfig] = None,
) -> FloydWarshallAllShortestPaths:
    """Compute all-pairs optimal paths and return the finished algorithm.

    Args:
        graph: Any networkx graph.
        weight: Edge attribute holding the cost; ignored if ``weights`` is given.
        weights: Explicit weight function.
        relaxer: Cost strategy (defaults to shortest distance).
        cancel_manager: Cancellation token.
        config: Engine configuration.

    Returns:
        The algorithm instance after `compute()`. Check ``state`` if a
        cancellation token was passed.

    Raises:
        NegativeCycleGraphError: If the graph has a negative cycle.
    """
    cfg = config if config is not None else FW_CONFIG
    if weights is None and weight is not None:
        weights = weight_function(graph, weight, cfg.default_weight)
    algorithm = FloydWarshallAllShortestPaths(
        graph,
        weights=weights,
        relaxer=relaxer,
        cancel_manager=cancel_manager,
        config=cfg,
    )
    algorithm.compute()
    return algorithm


def _drop_cycles(source: NodeID, walk: Sequence[Edge]) -> List[Edge]:
    """Cut every loop out of a contiguous walk starting at ``source``."""
    path: List[Edge] = []
    # Vertex -> number of path edges leading to it
    position: Dict[NodeID, int] = {source: 0}
    for edge in walk:
        cut = position.get(edge.target)
        if cut is None:
            path.append(edge)
            position[edge.target] = len(path)
            continue
        for dropped in path[cut:]:
            del position[dropped.target]
        del path[cut:]
    return path
