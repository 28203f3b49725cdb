"""
Main facade class for edge-list graph analysis.

This module provides the pyedgegraph class that exposes construction,
analysis and mutation while delegating to specialized modules.
"""

import logging
import os
from typing import IO, Any, Iterable, List, Optional, Sequence, Union

from ..classes.edge import pyedge
from ..classes.vertex import pyvertex, VertexNamingPolicy
from ..classes.graph_builders import GraphBuilders
from ..classes.utils import get_total_weight
from ..formats.read_edge_list import read_edge_list
from ..formats.export_edge_list import export_edge_list
from .graph import EdgeGraph
from ..operations.modification import GraphModifier
from ..analysis.pathfinding import ShortestPathFinder, ShortestPathResult
from ..analysis.spanning import SpanningTreeBuilder

logger = logging.getLogger(__name__)


class pyedgegraph:
    """
    Main facade class for edge-list graph analysis.

    The graph is an ordered list of directed, integer-weighted edges; vertices
    are derived from the edges. Results are returned as records and copies,
    never as references into the graph.
    """

    def __init__(self, aEdge: Iterable[pyedge],
                 naming_policy: VertexNamingPolicy = VertexNamingPolicy.FIRST_OCCURRENCE):
        """
        Initialize the graph from edges.

        Args:
            aEdge: Ordered edge objects; each is validated and copied
            naming_policy: Which record supplies a vertex's display name

        Raises:
            ConstructionError: If any edge has a malformed field
        """
        # Initialize core graph
        self._graph = EdgeGraph(aEdge, naming_policy)

        # Initialize analysis components
        self._pathfinder = ShortestPathFinder(self._graph)
        self._spanning = SpanningTreeBuilder(self._graph)

        # Initialize operation components
        self._modifier = GraphModifier(self._graph)

        self._sync_state()

    @classmethod
    def from_edges(cls, records: Iterable[Sequence[Any]],
                   naming_policy: VertexNamingPolicy = VertexNamingPolicy.FIRST_OCCURRENCE) -> 'pyedgegraph':
        """
        Build a graph from raw (source id, source name, destination id, destination name, weight) records.

        Raises:
            ConstructionError: If any record is malformed or incomplete
        """
        return cls(GraphBuilders.build_edges(records), naming_policy)

    @classmethod
    def from_file(cls, source: Union[str, os.PathLike, IO[str]],
                  naming_policy: VertexNamingPolicy = VertexNamingPolicy.FIRST_OCCURRENCE) -> 'pyedgegraph':
        """
        Build a graph from an edge list text file or stream.

        Raises:
            ConstructionError: If the text holds a malformed or incomplete record
        """
        return cls.from_edges(read_edge_list(source), naming_policy)

    def _sync_state(self):
        """Sync state after operations that modify the graph."""
        self.nVertex = self._graph.nVertex
        self.nEdge = self._graph.nEdge

    # ========================================================================
    # BASIC GRAPH OPERATIONS
    # ========================================================================

    def get_vertices(self) -> List[pyvertex]:
        """Derive the vertex directory, ordered by ascending id."""
        return self._graph.get_vertices()

    def get_vertex_ids(self) -> List[int]:
        return self._graph.get_vertex_ids()

    def get_vertex_name(self, lVertexID: int) -> Optional[str]:
        return self._graph.get_vertex_name(lVertexID)

    def has_vertex(self, lVertexID: int) -> bool:
        return self._graph.has_vertex(lVertexID)

    def get_vertex_count(self) -> int:
        """Get the number of distinct vertices."""
        return self._graph.nVertex

    def get_edge_count(self) -> int:
        return self._graph.nEdge

    def get_edges(self) -> List[pyedge]:
        """Get copies of the edges, in list order (positions match edge indices)."""
        return [pEdge.copy() for pEdge in self._graph.aEdge]

    def get_edge(self, edge_index: int) -> pyedge:
        """Get a copy of the edge at a position."""
        self._graph.check_edge_index(edge_index)
        return self._graph.aEdge[edge_index].copy()

    def get_edges_sorted_by_source(self) -> List[pyedge]:
        """Get copies of the edges ordered by source id, ties in list order."""
        return sorted(self.get_edges(), key=lambda pEdge: pEdge.lSourceID)

    def get_records(self) -> List[tuple]:
        """Get the edges as raw 5-tuples, in list order."""
        return [pEdge.to_tuple() for pEdge in self._graph.aEdge]

    # ========================================================================
    # PATH FINDING & ANALYSIS
    # ========================================================================

    def bellman_ford(self, source_id: int, early_exit: bool = True) -> ShortestPathResult:
        """Compute shortest distances from a source vertex, flagging negative cycles."""
        return self._pathfinder.bellman_ford(source_id, early_exit)

    def find_negative_cycle(self, source_id: int) -> List[int]:
        """Find one negative cycle reachable from the source, if any."""
        return self._pathfinder.find_negative_cycle(source_id)

    def kruskal_mst(self) -> List[pyedge]:
        """Compute a minimum spanning tree (or forest) with Kruskal's algorithm."""
        return self._spanning.kruskal()

    def is_spanning_tree(self, aEdge: Sequence[pyedge]) -> bool:
        return self._spanning.is_spanning_tree(aEdge)

    @staticmethod
    def get_total_weight(aEdge: Iterable[pyedge]) -> int:
        """Sum the weights of a sequence of edges."""
        return get_total_weight(aEdge)

    # ========================================================================
    # GRAPH MODIFICATION
    # ========================================================================

    def change_weight(self, edge_index: int, iWeight: int):
        """Replace the weight of the edge at a position."""
        self._modifier.change_weight(edge_index, iWeight)
        self._sync_state()

    def remove_edge(self, edge_index: int) -> pyedge:
        """Remove the edge at a position."""
        result = self._modifier.remove_edge(edge_index)
        self._sync_state()
        return result

    def remove_vertex(self, lVertexID: int) -> List[pyedge]:
        """Remove a vertex and every edge that touches it."""
        result = self._modifier.remove_vertex(lVertexID)
        self._sync_state()
        return result

    def add_vertex(self, sName: str, target_id: int, iWeight: int) -> int:
        """Add a new vertex connected by one edge to an existing vertex."""
        result = self._modifier.add_vertex(sName, target_id, iWeight)
        self._sync_state()
        return result

    # ========================================================================
    # EXPORT
    # ========================================================================

    def export_edge_list(self, target: Union[str, os.PathLike, IO[str]]):
        """Write the current edges in the edge list text format."""
        export_edge_list(self._graph.aEdge, target)
