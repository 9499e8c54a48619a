"""
Graph construction operations.

This module contains helpers that assemble graphs from plain collections.
"""

from .builders import build_graph

__all__ = ['build_graph']
