"""
Core data classes for graph representation.

This module contains the value types stored by the graph and the errors it
raises.
"""

from .vertex import Vertex
from .edge import Edge
from .adjacency import AdjacencyEntry
from .exceptions import (
    EdgeDoesNotContainVertex,
    GraphError,
    VertexAlreadyExists,
    VertexDoesNotExist,
)

__all__ = [
    'Vertex',
    'Edge',
    'AdjacencyEntry',
    'GraphError',
    'VertexAlreadyExists',
    'VertexDoesNotExist',
    'EdgeDoesNotContainVertex',
]
