"""
Shared fixtures for floorgraph tests
"""

import pytest

from floorgraph import Graph


@pytest.fixture
def empty_graph():
    return Graph()


@pytest.fixture
def path_graph():
    """1 <--> 2 <--> 3"""
    graph = Graph()
    for data in (1, 2, 3):
        graph.add_vertex(data)
    graph.add_edge(1, 2)
    graph.add_edge(2, 3)
    return graph


@pytest.fixture
def tree_graph():
    """1 - {2, 3}, 2 - 4, 3 - 5"""
    graph = Graph()
    for data in (1, 2, 3, 4, 5):
        graph.add_vertex(data)
    graph.add_edge(1, 2)
    graph.add_edge(1, 3)
    graph.add_edge(2, 4)
    graph.add_edge(3, 5)
    return graph
