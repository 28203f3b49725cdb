"""
Core data classes for edge-list graph representation.

This module contains the fundamental data structures used throughout
the edgegraph library.
"""

from .edge import pyedge
from .vertex import pyvertex, VertexNamingPolicy
from .utils import DisjointSet

__all__ = [
    'pyedge',
    'pyvertex',
    'VertexNamingPolicy',
    'DisjointSet',
]
