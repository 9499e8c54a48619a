"""
Bulk construction of graphs from vertex and edge collections.
"""

import logging
from typing import Iterable, Tuple

from ..analysis.reachability import TraversalOrder
from ..classes.exceptions import VertexDoesNotExist
from ..classes.vertex import Data
from ..core.graph import Graph

logger = logging.getLogger(__name__)


def build_graph(vertices: Iterable[Data] = (),
                edges: Iterable[Tuple[Data, Data]] = (),
                add_missing: bool = False,
                traversal_order: TraversalOrder = TraversalOrder.DEPTH_FIRST) -> Graph:
    """
    Build a graph from vertex payloads and endpoint pairs.

    Vertices are added first, in the order given, then edges. Duplicate
    vertices and duplicate edges are ignored rather than rejected, since bulk
    input commonly repeats them.

    Args:
        vertices: Payloads to add as vertices
        edges: Iterable of (d1, d2) endpoint pairs
        add_missing: Add edge endpoints that were not listed in vertices
            instead of raising
        traversal_order: Default traversal order of the new graph

    Returns:
        The populated Graph

    Raises:
        VertexDoesNotExist: If an edge names an unknown vertex and
            add_missing is False
    """
    graph = Graph(traversal_order=traversal_order)

    for data in vertices:
        if not graph.vertex_exist(data):
            graph.add_vertex(data)

    for d1, d2 in edges:
        for endpoint in (d1, d2):
            if not graph.vertex_exist(endpoint):
                if not add_missing:
                    raise VertexDoesNotExist(endpoint)
                graph.add_vertex(endpoint)
        graph.add_edge(d1, d2)

    logger.debug(f"Built graph with {graph.vertex_count()} vertices and {graph.edge_count()} edges")
    return graph
