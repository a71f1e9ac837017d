"""Common run-state handling for graph algorithms.

`AlgorithmBase` implements the run lifecycle once so concrete algorithms only
provide `_internal_compute`. Each run moves through `ComputationState` values
and ends in ``DONE``, ``CANCELLED`` or ``FAILED``.
"""

from __future__ import annotations

from enum import IntEnum
from typing import Callable, List, Optional

import networkx as nx

from fwgraph.algorithms.cancel import CancelManager
from fwgraph.exceptions import AlgorithmStateError
from fwgraph.logging import get_logger

logger = get_logger(__name__)


class ComputationState(IntEnum):
    """Lifecycle of a single algorithm run."""

    IDLE = 1
    INITIALIZING = 2
    RELAXING = 3
    NEGATIVE_CYCLE_CHECK = 4
    DONE = 5
    CANCELLED = 6
    FAILED = 7


#: States in which a run is in progress.
ACTIVE_STATES = frozenset(
    {
        ComputationState.INITIALIZING,
        ComputationState.RELAXING,
        ComputationState.NEGATIVE_CYCLE_CHECK,
    }
)

StateObserver = Callable[[ComputationState, ComputationState], None]


class AlgorithmBase:
    """Base class holding the visited graph, cancellation and run state.

    Attributes:
        graph: The graph the algorithm runs over.
        cancel_manager: Token polled at checkpoints.
    """

    def __init__(
        self, graph: nx.Graph, cancel_manager: Optional[CancelManager] = None
    ) -> None:
        if graph is None:
            raise ValueError("graph must not be None.")
        self.graph = graph
        self.cancel_manager = cancel_manager or CancelManager()
        self._state = ComputationState.IDLE
        self._observers: List[StateObserver] = []

    @property
    def state(self) -> ComputationState:
        return self._state

    @property
    def is_done(self) -> bool:
        return self._state == ComputationState.DONE

    def add_state_observer(self, observer: StateObserver) -> None:
        """Register ``observer(old_state, new_state)`` for every transition."""
        self._observers.append(observer)

    def remove_state_observer(self, observer: StateObserver) -> None:
        """Unregister an observer.

        Raises:
            ValueError: If the observer was never registered.
        """
        self._observers.remove(observer)

    def _set_state(self, new_state: ComputationState) -> None:
        old_state = self._state
        if old_state == new_state:
            return
        self._state = new_state
        for observer in list(self._observers):
            observer(old_state, new_state)

    def _checkpoint(self) -> bool:
        """Move to CANCELLED and return True if cancellation was requested."""
        if self.cancel_manager.is_cancelling:
            logger.info("%s cancelled in state %s", type(self).__name__, self._state.name)
            self._set_state(ComputationState.CANCELLED)
            return True
        return False

    def compute(self) -> None:
        """Run the algorithm to completion, cancellation or failure.

        Returns normally on ``DONE`` and ``CANCELLED``. Exceptions raised by the
        algorithm, interrupts included, leave the run in ``FAILED`` and propagate.

        Raises:
            AlgorithmStateError: If a run is already in progress.
        """
        if self._state in ACTIVE_STATES:
            raise AlgorithmStateError(
                f"{type(self).__name__} is already running ({self._state.name})."
            )
        self._set_state(ComputationState.IDLE)
        try:
            self._internal_compute()
        except BaseException:
            self._set_state(ComputationState.FAILED)
            raise
        if self._state != ComputationState.CANCELLED:
            self._set_state(ComputationState.DONE)

    def _internal_compute(self) -> None:
        raise NotImplementedError

    def _require_done(self) -> None:
        if self._state != ComputationState.DONE:
            raise AlgorithmStateError(
                f"No completed run available (state: {self._state.name}); "
                "call compute() first."
            )
