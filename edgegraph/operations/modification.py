"""
Graph modification operations for edge-list graphs.

This module provides operations that modify graph structure. Every operation
validates its arguments before touching the graph, so a failed call leaves
the graph exactly as it was.
"""

import logging
from typing import List

from ..classes.edge import pyedge
from ..classes.graph_builders import is_integer, is_vertex_name
from ..core.graph import EdgeGraph
from ..exceptions import InputError, VertexReferenceError

logger = logging.getLogger(__name__)


class GraphModifier:
    """
    Handles graph modification operations.

    This class provides methods for:
    - Changing the weight of an edge
    - Removing an edge
    - Removing a vertex together with its edges
    - Adding a vertex connected to an existing one
    """

    def __init__(self, graph: EdgeGraph):
        """
        Initialize the graph modifier.

        Args:
            graph: EdgeGraph instance to modify
        """
        self.graph = graph

    def _check_vertex(self, lVertexID: int):
        if not is_integer(lVertexID) or not self.graph.has_vertex(lVertexID):
            raise VertexReferenceError(f"Vertex {lVertexID!r} does not exist")

    def change_weight(self, edge_index: int, iWeight: int):
        """
        Replace the weight of the edge at a position.

        Args:
            edge_index: Position in the edge list
            iWeight: New integer weight

        Raises:
            EdgeIndexError: If the position is out of range
            InputError: If the weight is not an integer
        """
        self.graph.check_edge_index(edge_index)
        if not is_integer(iWeight):
            raise InputError(f"Weight must be an integer, got {iWeight!r}")

        pEdge = self.graph.aEdge[edge_index]
        iWeight_old = pEdge.iWeight
        pEdge.iWeight = iWeight
        logger.info(f"Changed weight of edge {edge_index} "
                    f"({pEdge.lSourceID} -> {pEdge.lDestinationID}) from {iWeight_old} to {iWeight}")

    def remove_edge(self, edge_index: int) -> pyedge:
        """
        Remove the edge at a position.

        Args:
            edge_index: Position in the edge list

        Returns:
            The removed edge

        Raises:
            EdgeIndexError: If the position is out of range
        """
        self.graph.check_edge_index(edge_index)

        pEdge = self.graph.aEdge.pop(edge_index)
        self.graph.refresh_counts()
        logger.info(f"Removed edge {edge_index} ({pEdge.lSourceID} -> {pEdge.lDestinationID}); "
                    f"{self.graph.nEdge} edges and {self.graph.nVertex} vertices remain")
        return pEdge

    def remove_vertex(self, lVertexID: int) -> List[pyedge]:
        """
        Remove a vertex and every edge that touches it.

        The edge list is compacted in one pass: kept edges are moved down to
        the next free position, so consecutive matches are never skipped.
        The vertex count is recomputed from the surviving edges, since other
        vertices can disappear along with the removed edges.

        Args:
            lVertexID: Id of the vertex to remove

        Returns:
            The removed edges, in their original order

        Raises:
            VertexReferenceError: If the vertex does not exist
        """
        self._check_vertex(lVertexID)

        aEdge = self.graph.aEdge
        aEdge_removed = []
        write_index = 0
        for pEdge in aEdge:
            if pEdge.is_incident(lVertexID):
                aEdge_removed.append(pEdge)
            else:
                aEdge[write_index] = pEdge
                write_index += 1
        del aEdge[write_index:]

        nVertex_old = self.graph.nVertex
        self.graph.refresh_counts()
        logger.info(f"Removed vertex {lVertexID} with {len(aEdge_removed)} edges; "
                    f"vertex count {nVertex_old} -> {self.graph.nVertex}")
        return aEdge_removed

    def add_vertex(self, sName: str, target_id: int, iWeight: int) -> int:
        """
        Add a new vertex connected by one edge to an existing vertex.

        Args:
            sName: Display name of the new vertex
            target_id: Id of the existing destination vertex
            iWeight: Weight of the new edge

        Returns:
            Id assigned to the new vertex

        Raises:
            VertexReferenceError: If the target vertex does not exist
            InputError: If the name or weight is invalid
        """
        self._check_vertex(target_id)
        if not is_vertex_name(sName):
            raise InputError(f"Vertex name must be non-empty without whitespace, got {sName!r}")
        if not is_integer(iWeight):
            raise InputError(f"Weight must be an integer, got {iWeight!r}")

        sTarget_name = self.graph.get_vertex_name(target_id)
        lVertexID = self.graph.allocate_vertex_id()
        self.graph.aEdge.append(pyedge(lVertexID, sName, target_id, sTarget_name, iWeight))
        self.graph.refresh_counts()

        logger.info(f"Added vertex {lVertexID} ({sName}) connected to {target_id} with weight {iWeight}")
        return lVertexID
