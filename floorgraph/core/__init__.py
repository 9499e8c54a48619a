"""
Core graph data structure.

This module contains the graph container and its public operations.
"""

from .graph import Graph

__all__ = ['Graph']
