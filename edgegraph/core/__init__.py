"""
Core graph data structures and management.

This module contains the fundamental graph representation and the facade
that ties analysis and modification together.
"""

from .graph import EdgeGraph
from .edgegraph import pyedgegraph

__all__ = ['EdgeGraph', 'pyedgegraph']
