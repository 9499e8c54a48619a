"""
Reachability and connected-component analysis for undirected graphs.

This module provides the traversal algorithms behind Graph.return_reached.
Traversals run on an explicit work list, so the size of a connected component
is limited by memory rather than by the interpreter's recursion limit.
"""

import logging
from collections import deque
from enum import Enum
from typing import TYPE_CHECKING, Deque, Iterator, List, Optional, Set, Tuple

from ..classes.edge import Edge
from ..classes.vertex import Data

if TYPE_CHECKING:
    from ..core.graph import Graph

logger = logging.getLogger(__name__)


class TraversalOrder(Enum):
    """Visitation order used when walking a connected component."""
    DEPTH_FIRST = "depth_first"
    BREADTH_FIRST = "breadth_first"


class ReachabilityFinder:
    """
    Reachability algorithms for a Graph.

    This class provides methods for:
    - Collecting every vertex reachable from a start vertex
    - Partitioning the graph into connected components
    """

    def __init__(self, graph: "Graph"):
        """
        Initialize the reachability finder.

        Args:
            graph: Graph instance to analyze. Its traversal_order is used for
                walks that do not specify one.
        """
        self.graph = graph

    def return_reached(self, start: Data, order: Optional[TraversalOrder] = None) -> List[Data]:
        """
        Collect the vertices of the connected component containing start.

        The start vertex is always first. With depth-first order the result is
        exactly the preorder of a recursive depth-first search that expands
        neighbors in adjacency insertion order.

        Args:
            start: Payload of the start vertex
            order: Traversal order, defaults to the graph's traversal_order

        Returns:
            New list of distinct reachable payloads, including start

        Raises:
            ValueError: If order is not a TraversalOrder member
            VertexDoesNotExist: If start is not in the graph
        """
        order = order or self.graph.traversal_order
        if order is TraversalOrder.DEPTH_FIRST:
            walk = self._walk_depth_first
        elif order is TraversalOrder.BREADTH_FIRST:
            walk = self._walk_breadth_first
        else:
            raise ValueError(f"Unknown traversal order: {order}")

        # resolves the entry first so a missing vertex raises before any work
        self.graph.get_entry(start)
        reached = walk(start)

        logger.debug(f"Reached {len(reached)} vertices from {start!r} ({order.value})")
        return reached

    def connected_components(self, order: Optional[TraversalOrder] = None) -> List[List[Data]]:
        """
        Partition all vertices into connected components.

        Components are listed in the insertion order of their first vertex.

        Returns:
            List of components, each a list of payloads
        """
        components = []
        assigned: Set[Data] = set()

        for data in self.graph.get_vertices():
            if data in assigned:
                continue
            component = self.return_reached(data, order)
            assigned.update(component)
            components.append(component)

        logger.debug(f"Found {len(components)} connected components")
        return components

    def is_connected(self, source: Data, target: Data) -> bool:
        """
        Check whether target lies in the same component as source.

        Raises:
            VertexDoesNotExist: If either vertex is not in the graph
        """
        self.graph.get_entry(target)
        return target in self.return_reached(source)

    def _incident_edges(self, data: Data) -> Iterator[Edge]:
        return self.graph.get_entry(data).iter_edges()

    def _walk_depth_first(self, start: Data) -> List[Data]:
        # Each frame keeps its own edge iterator, reproducing the recursive
        # search: a vertex is marked before any of its neighbors are expanded.
        reached = [start]
        visited = {start}
        stack: Deque[Tuple[Data, Iterator[Edge]]] = deque([(start, self._incident_edges(start))])

        while stack:
            current_id, edges = stack[-1]
            for edge in edges:
                neighbor_id = edge.other_end(current_id)
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    reached.append(neighbor_id)
                    stack.append((neighbor_id, self._incident_edges(neighbor_id)))
                    break
            else:
                stack.pop()

        return reached

    def _walk_breadth_first(self, start: Data) -> List[Data]:
        reached = [start]
        visited = {start}
        queue: Deque[Data] = deque([start])

        while queue:
            current_id = queue.popleft()
            for edge in self._incident_edges(current_id):
                neighbor_id = edge.other_end(current_id)
                if neighbor_id not in visited:
                    visited.add(neighbor_id)
                    reached.append(neighbor_id)
                    queue.append(neighbor_id)

        return reached
