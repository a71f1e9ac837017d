import pytest

from fwgraph.graph.strict_multidigraph import StrictMultiDiGraph


@pytest.fixture
def line1():
    # Metric:
    #      [1]      [1,1,2]
    #  A◄───────►B◄───────►C
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C"):
        g.add_node(node)

    g.add_edge("A", "B", key=0, cost=1)
    g.add_edge("B", "A", key=1, cost=1)
    g.add_edge("B", "C", key=2, cost=1)
    g.add_edge("C", "B", key=3, cost=1)
    g.add_edge("B", "C", key=4, cost=1)
    g.add_edge("C", "B", key=5, cost=1)
    g.add_edge("B", "C", key=6, cost=2)
    g.add_edge("C", "B", key=7, cost=2)
    return g


@pytest.fixture
def square1():
    # Metric:
    #       [1]        [1]
    #   ┌────────►B─────────┐
    #   │                   │
    #   │                   ▼
    #   A                   C
    #   │                   ▲
    #   │   [2]        [2]  │
    #   └────────►D─────────┘
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C", "D"):
        g.add_node(node)

    g.add_edge("A", "B", key=0, cost=1)
    g.add_edge("B", "C", key=1, cost=1)
    g.add_edge("A", "D", key=2, cost=2)
    g.add_edge("D", "C", key=3, cost=2)
    return g


@pytest.fixture
def chain_with_shortcut():
    # Metric:
    #       [1]       [2]       [1]
    #   A────────►B────────►C────────►D        E (isolated)
    #   │                   ▲
    #   └───────────────────┘
    #            [10]
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C", "D", "E"):
        g.add_node(node)

    g.add_edge("A", "B", key=0, cost=1)
    g.add_edge("B", "C", key=1, cost=2)
    g.add_edge("A", "C", key=2, cost=10)
    g.add_edge("C", "D", key=3, cost=1)
    return g


@pytest.fixture
def parallel_edges():
    g = StrictMultiDiGraph()
    g.add_node("A")
    g.add_node("B")
    g.add_edge("A", "B", key=0, cost=5)
    g.add_edge("A", "B", key=1, cost=3)
    g.add_edge("A", "B", key=2, cost=3)
    return g


@pytest.fixture
def negative_cycle():
    # A -> B -> C -> A with total cost -1
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C"):
        g.add_node(node)

    g.add_edge("A", "B", key=0, cost=1)
    g.add_edge("B", "C", key=1, cost=-3)
    g.add_edge("C", "A", key=2, cost=1)
    return g


@pytest.fixture
def capacity_triangle():
    # Capacity:
    #     [10]       [5]
    #   A──────►B────────►C
    #   │                 ▲
    #   └─────────────────┘
    #          [3]
    g = StrictMultiDiGraph()
    for node in ("A", "B", "C"):
        g.add_node(node)

    g.add_edge("A", "B", key=0, cost=5, capacity=10)
    g.add_edge("B", "C", key=1, cost=5, capacity=5)
    g.add_edge("A", "C", key=2, cost=3, capacity=3)
    return g
