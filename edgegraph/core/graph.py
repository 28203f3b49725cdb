"""
Core graph data structure for edge-list graphs.

This module provides the fundamental graph structure without high-level operations.
"""

import logging
from typing import List, Dict, Optional, Iterable
from collections import defaultdict

from ..classes.edge import pyedge
from ..classes.vertex import pyvertex, VertexNamingPolicy
from ..classes.graph_builders import GraphBuilders, is_integer
from ..exceptions import EdgeIndexError

logger = logging.getLogger(__name__)


class EdgeGraph:
    """
    Core graph data structure backed by an ordered edge list.

    This class manages the fundamental graph representation without high-level
    operations like path finding or mutation. It provides:
    - The ordered edge list and its counts
    - Vertex directory derivation (ids and display names)
    - Vertex id to slot mapping for table-based algorithms
    - Fresh vertex id allocation
    """

    def __init__(self, aEdge: Iterable[pyedge],
                 naming_policy: VertexNamingPolicy = VertexNamingPolicy.FIRST_OCCURRENCE):
        """
        Initialize the graph from edges.

        Args:
            aEdge: Ordered edges; each one is validated and copied
            naming_policy: Which record supplies a vertex's display name

        Raises:
            ConstructionError: If any edge has a malformed field
        """
        self.aEdge: List[pyedge] = [
            GraphBuilders.build_edge(pEdge.to_tuple() if isinstance(pEdge, pyedge) else pEdge, i)
            for i, pEdge in enumerate(aEdge)
        ]
        self.naming_policy = naming_policy
        self.nEdge = 0
        self.nVertex = 0

        aVertexID = self.get_vertex_ids()
        self._lVertexID_next = aVertexID[-1] + 1 if aVertexID else 0

        self.refresh_counts()
        logger.debug(f"Built graph with {self.nVertex} vertices and {self.nEdge} edges")

    def refresh_counts(self):
        """Recompute vertex and edge counts from the edge list."""
        self.nEdge = len(self.aEdge)
        self.nVertex = len(self._get_vertex_names())

    def _get_vertex_names(self) -> Dict[int, str]:
        """
        Map every vertex id to its display name in a single pass.

        The source of each edge is considered before its destination.
        """
        vertex_names: Dict[int, str] = {}

        if self.naming_policy is VertexNamingPolicy.LAST_OCCURRENCE:
            for pEdge in self.aEdge:
                vertex_names[pEdge.lSourceID] = pEdge.sSource_name
                vertex_names[pEdge.lDestinationID] = pEdge.sDestination_name
        else:
            for pEdge in self.aEdge:
                vertex_names.setdefault(pEdge.lSourceID, pEdge.sSource_name)
                vertex_names.setdefault(pEdge.lDestinationID, pEdge.sDestination_name)

        return vertex_names

    def get_vertices(self) -> List[pyvertex]:
        """
        Derive the vertex directory from the edge list.

        Returns:
            List[pyvertex]: Distinct vertices ordered by ascending id
        """
        vertex_names = self._get_vertex_names()
        aVertex = [pyvertex(lVertexID, vertex_names[lVertexID]) for lVertexID in sorted(vertex_names)]
        logger.debug(f"Derived {len(aVertex)} vertices from {len(self.aEdge)} edges")
        return aVertex

    def get_vertex_ids(self) -> List[int]:
        """Get the distinct vertex ids in ascending order."""
        return sorted(self._get_vertex_names())

    def get_vertex_name(self, lVertexID: int) -> Optional[str]:
        """
        Get the display name of a vertex.

        Args:
            lVertexID: Vertex id

        Returns:
            The name, or None if the vertex does not exist
        """
        return self._get_vertex_names().get(lVertexID)

    def has_vertex(self, lVertexID: int) -> bool:
        return any(pEdge.is_incident(lVertexID) for pEdge in self.aEdge)

    def get_vertex_slots(self) -> Dict[int, int]:
        """
        Map each vertex id to a dense 0-based slot, in ascending id order.

        Ids are never renumbered; algorithms that need array-like tables go
        through this mapping instead of using ids as positions.
        """
        return {lVertexID: slot for slot, lVertexID in enumerate(self.get_vertex_ids())}

    def get_adjacency_list(self) -> Dict[int, List[int]]:
        """
        Build a directed adjacency list of vertex ids.

        Returns:
            Dictionary mapping vertex id -> list of neighbour ids, in edge order
        """
        adjacency_list: Dict[int, List[int]] = defaultdict(list)
        for pEdge in self.aEdge:
            adjacency_list[pEdge.lSourceID].append(pEdge.lDestinationID)
        return dict(adjacency_list)

    def check_edge_index(self, edge_index: int):
        """
        Validate a position in the edge list.

        Raises:
            EdgeIndexError: If the position is not an integer in range;
                negative positions never wrap around
        """
        if not is_integer(edge_index):
            raise EdgeIndexError(f"Edge index must be an integer, got {edge_index!r}")
        if not 0 <= edge_index < len(self.aEdge):
            raise EdgeIndexError(
                f"Edge index {edge_index} out of range for {len(self.aEdge)} edges")

    def allocate_vertex_id(self) -> int:
        """
        Reserve a fresh vertex id.

        Ids come from a counter that only ever increases, so removed ids are
        never handed out again.
        """
        lVertexID = self._lVertexID_next
        self._lVertexID_next += 1
        return lVertexID
