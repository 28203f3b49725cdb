"""
Minimum spanning tree construction for edge-list graphs.

This module provides Kruskal's algorithm backed by a disjoint-set structure.
"""

import logging
from typing import List, Sequence

import numpy as np

from ..classes.edge import pyedge
from ..classes.utils import DisjointSet
from ..core.graph import EdgeGraph

logger = logging.getLogger(__name__)


class SpanningTreeBuilder:
    """
    Builds minimum spanning trees (or forests) with Kruskal's algorithm.

    Edge direction is ignored. Ties between equal weights are broken by
    position in the edge list, so results are reproducible.
    """

    def __init__(self, graph: EdgeGraph):
        """
        Initialize the spanning tree builder.

        Args:
            graph: EdgeGraph instance to analyze
        """
        self.graph = graph

    def sort_edges_by_weight(self) -> List[pyedge]:
        """
        Sort a copy of the edge list by ascending weight.

        Returns:
            Edges in ascending weight order, equal weights in original order
        """
        if not self.graph.aEdge:
            return []

        aWeight = np.array([pEdge.iWeight for pEdge in self.graph.aEdge], dtype=object)
        aIndex_order = np.argsort(aWeight, kind='stable')
        return [self.graph.aEdge[i] for i in aIndex_order]

    def kruskal(self) -> List[pyedge]:
        """
        Compute a minimum spanning tree of the graph.

        Returns:
            Accepted edges, as copies, in the order they were accepted.
            A connected graph yields nVertex - 1 edges; a disconnected one
            yields a spanning forest.
        """
        groups = DisjointSet(self.graph.get_vertex_ids())
        aEdge_mst = []

        for pEdge in self.sort_edges_by_weight():
            if pEdge.is_self_loop():
                logger.debug(f"Discarded self-loop {pEdge}")
            elif groups.union(pEdge.lSourceID, pEdge.lDestinationID):
                aEdge_mst.append(pEdge.copy())
            else:
                logger.debug(f"Discarded {pEdge}: endpoints already connected")

        nTree = groups.get_group_count()
        if nTree > 1:
            logger.info(f"Graph is disconnected; built a spanning forest of {nTree} trees")
        logger.info(f"Kruskal accepted {len(aEdge_mst)} of {len(self.graph.aEdge)} edges")
        return aEdge_mst

    def is_spanning_tree(self, aEdge: Sequence[pyedge]) -> bool:
        """
        Check whether edges form a spanning tree of the graph's vertices.

        Args:
            aEdge: Candidate edges

        Returns:
            True if the edges connect every vertex without a cycle
        """
        aVertexID = self.graph.get_vertex_ids()
        if len(aEdge) != max(len(aVertexID) - 1, 0):
            return False

        groups = DisjointSet(aVertexID)
        for pEdge in aEdge:
            if pEdge.lSourceID not in groups.parent or pEdge.lDestinationID not in groups.parent:
                return False
            if not groups.union(pEdge.lSourceID, pEdge.lDestinationID):
                return False
        return groups.get_group_count() <= 1
