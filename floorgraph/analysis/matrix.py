"""
Array views of a graph.

Helpers that export the adjacency structure as numpy arrays, in vertex
insertion order, for hosts that post-process connectivity numerically.
"""

import logging
from typing import TYPE_CHECKING, Dict

import numpy as np

if TYPE_CHECKING:
    from ..core.graph import Graph

logger = logging.getLogger(__name__)


def vertex_index(graph: "Graph") -> Dict:
    """
    Map each vertex payload to its row/column in the exported arrays.

    Args:
        graph: Graph to index

    Returns:
        Dictionary mapping payload -> 0-based position in insertion order
    """
    return {data: idx for idx, data in enumerate(graph.get_vertices())}


def adjacency_matrix(graph: "Graph", dtype=int) -> np.ndarray:
    """
    Build the symmetric 0/1 adjacency matrix of an undirected graph.

    A self-loop sets the diagonal entry of its vertex.

    Args:
        graph: Graph to export
        dtype: numpy dtype of the result

    Returns:
        Array of shape (n, n) with n the number of vertices
    """
    index = vertex_index(graph)
    matrix = np.zeros((len(index), len(index)), dtype=dtype)

    for edge in graph.get_all_edges():
        i = index[edge.vertex1]
        j = index[edge.vertex2]
        matrix[i, j] = 1
        matrix[j, i] = 1

    logger.debug(f"Built {matrix.shape[0]}x{matrix.shape[1]} adjacency matrix")
    return matrix


def degree_sequence(graph: "Graph") -> np.ndarray:
    """Degrees of all vertices in insertion order."""
    return np.array([graph.degree(data) for data in graph.get_vertices()], dtype=int)
