"""
Graph analysis modules for connectivity and array export.

This module contains the reachability traversals and numpy adjacency views.
"""

from .reachability import ReachabilityFinder, TraversalOrder
from .matrix import adjacency_matrix, degree_sequence, vertex_index

__all__ = [
    'ReachabilityFinder',
    'TraversalOrder',
    'adjacency_matrix',
    'degree_sequence',
    'vertex_index',
]
