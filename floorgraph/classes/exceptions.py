"""
Exceptions raised by floorgraph.

All errors derive from GraphError so callers can catch the whole family, while
the concrete classes also derive from the closest builtin (ValueError or
LookupError) for callers that only know the standard hierarchy.
"""

from typing import Any, Optional


class GraphError(Exception):
    """Base class for every error raised by the graph container."""


class VertexAlreadyExists(GraphError, ValueError):
    """Raised when adding a vertex whose payload is already in the graph."""

    def __init__(self, vertex: Any):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} already exists in the graph")


class VertexDoesNotExist(GraphError, LookupError):
    """Raised when an operation references a vertex that is not in the graph."""

    def __init__(self, vertex: Any):
        self.vertex = vertex
        super().__init__(f"Vertex {vertex!r} does not exist in the graph")


class EdgeDoesNotContainVertex(GraphError, ValueError):
    """Raised when asking an edge for the other end of a vertex it does not touch."""

    def __init__(self, vertex: Any, edge: Optional[Any] = None):
        self.vertex = vertex
        self.edge = edge
        super().__init__(f"Edge {edge!r} does not contain vertex {vertex!r}")
