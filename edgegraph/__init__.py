"""
Edgegraph - Edge List Graph Analysis Library

A Python library for building weighted directed graphs from flat edge lists
and analyzing them. Vertices are derived from the edges; ids need not be
dense and are never renumbered.

Main Classes:
    pyedgegraph: Main class for graph analysis and mutation (facade)
    pyedge: Directed, integer-weighted edge record
    pyvertex: Vertex identity derived from the edge list

Example:
    >>> from edgegraph import pyedgegraph
    >>> graph = pyedgegraph.from_edges([(0, "A", 1, "B", 4), (1, "B", 2, "C", 3)])
    >>> graph.bellman_ford(0).distances
    {0: 0, 1: 4, 2: 7}
    >>> mst = graph.kruskal_mst()
"""

__version__ = "0.1.0"

from edgegraph.classes.edge import pyedge
from edgegraph.classes.vertex import pyvertex, VertexNamingPolicy
from edgegraph.core.edgegraph import pyedgegraph
from edgegraph.analysis.pathfinding import ShortestPathResult, UNREACHABLE
from edgegraph.exceptions import (
    EdgeGraphError,
    ConstructionError,
    EdgeIndexError,
    VertexReferenceError,
    InputError,
)

__all__ = [
    'pyedgegraph',
    'pyedge',
    'pyvertex',
    'VertexNamingPolicy',
    'ShortestPathResult',
    'UNREACHABLE',
    'EdgeGraphError',
    'ConstructionError',
    'EdgeIndexError',
    'VertexReferenceError',
    'InputError',
]
