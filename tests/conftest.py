"""
Shared fixtures: the six-location city graph and both engine implementations.
"""

import pytest

from adjacency_list_graph import AdjacencyListGraph
from dijkstra_engine import HeapDijkstraEngine, SimpleDijkstraEngine
from nodes import Edge, Node, Traffic


CITY_NODES = [
    Node("0", "Main Square"),
    Node("1", "Central Hospital"),
    Node("2", "City Park"),
    Node("3", "Shopping Mall"),
    Node("4", "Train Station"),
    Node("5", "University"),
]

CITY_EDGES = [
    Edge("0", "1", 4, Traffic.LOW),
    Edge("0", "2", 2, Traffic.MEDIUM),
    Edge("1", "2", 5, Traffic.HIGH),
    Edge("1", "3", 3, Traffic.LOW),
    Edge("2", "3", 4, Traffic.MEDIUM),
    Edge("2", "4", 6, Traffic.HIGH),
    Edge("3", "4", 3, Traffic.LOW),
    Edge("3", "5", 2, Traffic.MEDIUM),
    Edge("4", "5", 4, Traffic.LOW),
]


@pytest.fixture
def city_graph() -> AdjacencyListGraph:
    return AdjacencyListGraph.from_parts(CITY_NODES, CITY_EDGES)


@pytest.fixture
def disconnected_graph() -> AdjacencyListGraph:
    """A - B (2) plus an isolated C."""
    g = AdjacencyListGraph()
    for node_id in ("A", "B", "C"):
        g.add_node(node_id)
    g.add_edge("A", "B", 2.0)
    return g


@pytest.fixture(params=[SimpleDijkstraEngine, HeapDijkstraEngine], ids=["scan", "heap"])
def engine(request):
    return request.param()
