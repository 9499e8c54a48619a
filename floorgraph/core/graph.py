"""
Core graph data structure.

This module provides the undirected graph container without the traversal
algorithms, which live in floorgraph.analysis.reachability.
"""

import logging
from typing import Callable, Dict, Generic, Iterator, List, Optional, Set, TypeVar

from ..analysis.reachability import ReachabilityFinder, TraversalOrder
from ..classes.adjacency import AdjacencyEntry
from ..classes.edge import Edge
from ..classes.exceptions import VertexAlreadyExists, VertexDoesNotExist
from ..classes.vertex import Data, Vertex

logger = logging.getLogger(__name__)

EdgeT = TypeVar("EdgeT")
EdgeFactory = Callable[[Data, Data], EdgeT]


class Graph(Generic[Data]):
    """
    Generic, in-memory, undirected graph.

    This class manages the vertex set and the adjacency relation. It provides:
    - Vertex and edge insertion with duplicate suppression
    - Adjacency queries (incident edges, neighbors, degree)
    - Connectivity queries (reached set, connected components)

    Vertices are identified by payload equality. Every edge is stored in the
    adjacency list of both endpoints; a self-loop is stored once.
    """

    def __init__(self, traversal_order: TraversalOrder = TraversalOrder.DEPTH_FIRST):
        """
        Initialize an empty graph.

        Args:
            traversal_order: Default order used by return_reached and
                connected_components
        """
        # dicts keep insertion order, which is the vertex order of the graph
        self._adjacency: Dict[Data, AdjacencyEntry[Data]] = {}
        self._edge_count = 0
        self.traversal_order = traversal_order
        self._reachability = ReachabilityFinder(self)

    # ========================================================================
    # MUTATION
    # ========================================================================

    def add_vertex(self, data: Data) -> None:
        """
        Add a vertex carrying data.

        Raises:
            VertexAlreadyExists: If a vertex with equal data is already present
        """
        if data in self._adjacency:
            raise VertexAlreadyExists(data)
        self._adjacency[data] = AdjacencyEntry(Vertex(data))
        logger.debug(f"Added vertex {data!r}")

    def add_edge(self, d1: Data, d2: Data) -> None:
        """
        Add the undirected edge d1 <--> d2.

        The edge goes into the adjacency list of both endpoints; an endpoint
        that already holds an equal edge is left unchanged.

        Raises:
            VertexDoesNotExist: If either endpoint is missing. Nothing is
                modified in that case.
        """
        entry1 = self.get_entry(d1)
        entry2 = self.get_entry(d2)

        edge = Edge(d1, d2)
        inserted = entry1.add_edge(edge)
        if entry2 is not entry1:
            inserted = entry2.add_edge(edge) or inserted

        if inserted:
            self._edge_count += 1
            logger.debug(f"Added edge {edge!r}")

    # ========================================================================
    # QUERIES
    # ========================================================================

    def vertex_exist(self, data: Data) -> bool:
        """Check whether a vertex with equal data is in the graph."""
        try:
            return data in self._adjacency
        except TypeError:
            # unhashable payloads can never have been added
            return False

    def get_entry(self, data: Data) -> AdjacencyEntry[Data]:
        """
        Get the adjacency entry of a vertex.

        Raises:
            VertexDoesNotExist: If the vertex is not in the graph
        """
        if not self.vertex_exist(data):
            raise VertexDoesNotExist(data)
        return self._adjacency[data]

    def get_vertices(self) -> List[Data]:
        """Return the payloads of all vertices in insertion order."""
        return list(self._adjacency)

    def get_edges_of_vertex(self, data: Data, edge_factory: Optional[EdgeFactory] = None) -> list:
        """
        Get the edges incident to a vertex, in the order they were added.

        Args:
            data: Payload of the vertex
            edge_factory: Optional callable taking the two endpoint payloads,
                used to build each returned edge in the caller's own type

        Returns:
            New list of edges (Edge objects unless edge_factory is given)

        Raises:
            VertexDoesNotExist: If the vertex is not in the graph
        """
        edges = self.get_entry(data).edges
        return self._convert_edges(edges, edge_factory)

    def get_all_edges(self, edge_factory: Optional[EdgeFactory] = None) -> list:
        """
        Get every edge of the graph, each undirected edge reported once.

        Edges are listed in the order they are first met when walking the
        vertices, and each vertex's adjacency list, in insertion order.
        """
        edges: List[Edge[Data]] = []
        seen: Set[Edge[Data]] = set()
        for entry in self._adjacency.values():
            for edge in entry.iter_edges():
                if edge not in seen:
                    seen.add(edge)
                    edges.append(edge)
        return self._convert_edges(edges, edge_factory)

    def has_edge(self, d1: Data, d2: Data) -> bool:
        """
        Check whether the undirected edge d1 <--> d2 is in the graph.

        Args:
            d1: Payload of one endpoint
            d2: Payload of the other endpoint

        Returns:
            True if the edge exists, False otherwise (including when either
            endpoint is missing)
        """
        if not (self.vertex_exist(d1) and self.vertex_exist(d2)):
            return False
        return self._adjacency[d1].contains_edge(Edge(d1, d2))

    def neighbors(self, data: Data) -> List[Data]:
        """
        Get the other endpoints of the edges incident to a vertex.

        Raises:
            VertexDoesNotExist: If the vertex is not in the graph
        """
        return [edge.other_end(data) for edge in self.get_entry(data).iter_edges()]

    def degree(self, data: Data) -> int:
        """
        Number of distinct edges incident to a vertex (a self-loop counts once).

        Raises:
            VertexDoesNotExist: If the vertex is not in the graph
        """
        return len(self.get_entry(data))

    def vertex_count(self) -> int:
        """
        Get the total number of vertices in the graph.

        Returns:
            Number of unique vertices
        """
        return len(self._adjacency)

    def edge_count(self) -> int:
        """Number of distinct undirected edges."""
        return self._edge_count

    # ========================================================================
    # CONNECTIVITY
    # ========================================================================

    def return_reached(self, data: Data, order: Optional[TraversalOrder] = None) -> List[Data]:
        """
        Get every vertex reachable from data, data itself included.

        Example:
            With edges 1 <--> 2 and 2 <--> 3, return_reached(1),
            return_reached(2) and return_reached(3) all contain 1, 2 and 3.

        Raises:
            VertexDoesNotExist: If the vertex is not in the graph
        """
        return self._reachability.return_reached(data, order)

    def connected_components(self, order: Optional[TraversalOrder] = None) -> List[List[Data]]:
        """Partition the vertices into connected components."""
        return self._reachability.connected_components(order)

    def is_connected(self, d1: Data, d2: Data) -> bool:
        """
        Check whether d1 and d2 are in the same connected component.

        Raises:
            VertexDoesNotExist: If either vertex is not in the graph
        """
        return self._reachability.is_connected(d1, d2)

    # ========================================================================
    # HELPERS
    # ========================================================================

    @staticmethod
    def _convert_edges(edges: List[Edge[Data]], edge_factory: Optional[EdgeFactory]) -> list:
        if edge_factory is None:
            return edges
        return [edge_factory(edge.vertex1, edge.vertex2) for edge in edges]

    def __contains__(self, data) -> bool:
        return self.vertex_exist(data)

    def __len__(self) -> int:
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Data]:
        return iter(self.get_vertices())

    def __repr__(self) -> str:
        return f"Graph(vertices={self.vertex_count()}, edges={self.edge_count()})"
