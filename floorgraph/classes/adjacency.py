"""
Adjacency entry: one vertex paired with its incident edges.
"""

import logging
from typing import Generic, Iterator, List, Set

from .edge import Edge
from .vertex import Data, Vertex

logger = logging.getLogger(__name__)


class AdjacencyEntry(Generic[Data]):
    """
    A vertex and the ordered list of edges incident to it.

    Edges keep insertion order; an edge equal (in the undirected sense) to one
    already present is not stored again.
    """

    __slots__ = ("vertex", "_edges", "_edge_set")

    def __init__(self, vertex: Vertex[Data]):
        self.vertex = vertex
        self._edges: List[Edge[Data]] = []
        self._edge_set: Set[Edge[Data]] = set()

    @property
    def edges(self) -> List[Edge[Data]]:
        """Snapshot of the incident edges in insertion order."""
        return self._edges.copy()

    def contains_edge(self, edge: Edge[Data]) -> bool:
        """
        Check whether an edge equal to the given one is stored here.

        Args:
            edge: Edge to look up, in either orientation

        Returns:
            True if an equal edge is present
        """
        return edge in self._edge_set

    def add_edge(self, edge: Edge[Data]) -> bool:
        """
        Append an edge unless an equal one is already present.

        Returns:
            True if the edge was inserted, False if it was a duplicate
        """
        if edge in self._edge_set:
            logger.debug(f"Edge {edge!r} already present at {self.vertex!r}, ignoring")
            return False
        self._edges.append(edge)
        self._edge_set.add(edge)
        return True

    def iter_edges(self) -> Iterator[Edge[Data]]:
        """
        Iterate the stored edges in insertion order without copying.

        Returns:
            Iterator over the incident edges
        """
        return iter(self._edges)

    def __len__(self) -> int:
        return len(self._edges)

    def __repr__(self) -> str:
        return f"AdjacencyEntry({self.vertex!r}, edges={self._edges!r})"
