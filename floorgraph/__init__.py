"""
floorgraph - Generic Undirected Graph Library

A small in-memory undirected graph for connectivity queries over abstract
elements, such as the blocks of a floorplan.

Main Classes:
    Graph: Graph container (vertices, edges, reachability)
    Vertex: Vertex wrapper around a payload value
    Edge: Unordered pair of payload values
    TraversalOrder: Depth-first or breadth-first component walks

Example:
    >>> from floorgraph import Graph
    >>> graph = Graph()
    >>> for block in (1, 2, 3):
    ...     graph.add_vertex(block)
    >>> graph.add_edge(1, 2)
    >>> graph.add_edge(2, 3)
    >>> sorted(graph.return_reached(3))
    [1, 2, 3]
"""

__version__ = "0.1.0"
__author__ = "floorgraph developers"

from floorgraph.classes.vertex import Vertex
from floorgraph.classes.edge import Edge
from floorgraph.classes.adjacency import AdjacencyEntry
from floorgraph.classes.exceptions import (
    EdgeDoesNotContainVertex,
    GraphError,
    VertexAlreadyExists,
    VertexDoesNotExist,
)
from floorgraph.analysis.reachability import ReachabilityFinder, TraversalOrder
from floorgraph.analysis.matrix import adjacency_matrix, degree_sequence
from floorgraph.core.graph import Graph
from floorgraph.operations.builders import build_graph

__all__ = [
    'Graph',
    'Vertex',
    'Edge',
    'AdjacencyEntry',
    'TraversalOrder',
    'ReachabilityFinder',
    'GraphError',
    'VertexAlreadyExists',
    'VertexDoesNotExist',
    'EdgeDoesNotContainVertex',
    'adjacency_matrix',
    'degree_sequence',
    'build_graph',
]
