"""Cost combination and comparison strategies ("relaxers").

A relaxer turns the Floyd-Warshall recurrence into a generic dynamic program:
``combine`` joins the costs of two consecutive segments and ``improves``
decides whether a candidate cost beats the current one. For the recurrence to
be correct, ``combine`` must be associative and monotone with respect to
``improves``: if ``improves(a, b)`` then ``combine(a, c)`` must not be worse
than ``combine(b, c)``.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod

from fwgraph.types import Cost


class DistanceRelaxer(ABC):
    """Abstract cost semiring used by the all-pairs algorithms.

    Attributes:
        identity: Cost of the empty path (self-pairs).
        check_cycles: Whether a post-relaxation cycle check is meaningful.
    """

    identity: Cost = 0
    check_cycles: bool = True

    @abstractmethod
    def combine(self, a: Cost, b: Cost) -> Cost:
        """Return the cost of traversing a segment of cost ``a`` then ``b``."""

    @abstractmethod
    def improves(self, candidate: Cost, current: Cost) -> bool:
        """Return True if ``candidate`` is strictly better than ``current``."""

    def is_cycle_defect(self, cost: Cost) -> bool:
        """Return True if a cycle of this cost makes optimal paths unbounded.

        The default treats any cycle that beats the identity as a defect, which
        for additive costs is a negative cycle.
        """
        return self.improves(cost, self.identity)

    def __repr__(self) -> str:
        return f"{type(self).__name__}()"


class ShortestDistanceRelaxer(DistanceRelaxer):
    """Additive costs, smaller is better. Standard shortest paths."""

    identity = 0

    def combine(self, a: Cost, b: Cost) -> Cost:
        return a + b

    def improves(self, candidate: Cost, current: Cost) -> bool:
        return candidate < current


class CriticalDistanceRelaxer(DistanceRelaxer):
    """Additive costs, larger is better.

    Yields longest (critical) paths; only meaningful on graphs without
    positive-cost cycles, which the cycle check reports.
    """

    identity = 0

    def combine(self, a: Cost, b: Cost) -> Cost:
        return a + b

    def improves(self, candidate: Cost, current: Cost) -> bool:
        return candidate > current


class WidestPathRelaxer(DistanceRelaxer):
    """Bottleneck costs: a path is worth its narrowest edge, wider is better.

    Cycles can never widen a path beyond the infinite identity, so the cycle
    check never fires.
    """

    identity = math.inf
    check_cycles = False

    def combine(self, a: Cost, b: Cost) -> Cost:
        return min(a, b)

    def improves(self, candidate: Cost, current: Cost) -> bool:
        return candidate > current


SHORTEST_DISTANCE = ShortestDistanceRelaxer()
CRITICAL_DISTANCE = CriticalDistanceRelaxer()
WIDEST_PATH = WidestPathRelaxer()
