"""
Negative cycle analysis for edge-list graphs.

This module locates the vertices affected by negative-weight cycles once a
shortest path run has flagged one.
"""

import logging
from typing import Dict, List, Optional, Set, Union

from ..core.graph import EdgeGraph
from ..classes.utils import find_reachable_vertices

logger = logging.getLogger(__name__)


class CycleAnalyzer:
    """
    Detects negative cycles and the vertices they affect.

    This class provides methods for:
    - Finding edges that still relax after the bounded passes
    - Finding vertices on, or reachable from, a negative cycle
    - Recovering one negative cycle from the predecessor table
    """

    def __init__(self, graph: EdgeGraph):
        """
        Initialize the cycle analyzer.

        Args:
            graph: EdgeGraph instance to analyze
        """
        self.graph = graph

    def find_relaxable_edges(self, distances: Dict[int, Union[int, float]]) -> List[int]:
        """
        Find edges that can still shorten a distance.

        Args:
            distances: Distance table keyed by vertex id

        Returns:
            Positions of the relaxable edges in the edge list
        """
        aIndex = []
        for i, pEdge in enumerate(self.graph.aEdge):
            dDistance_source = distances[pEdge.lSourceID]
            if dDistance_source == float('inf'):
                continue
            if dDistance_source + pEdge.iWeight < distances[pEdge.lDestinationID]:
                aIndex.append(i)
        return aIndex

    def find_negative_cycle_vertices(self, distances: Dict[int, Union[int, float]]) -> Set[int]:
        """
        Find every vertex whose distance is unbounded below.

        These are the vertices on a reachable negative cycle plus everything
        reachable from one.

        Args:
            distances: Distance table after the bounded relaxation passes

        Returns:
            Set of affected vertex ids, empty when there is no negative cycle
        """
        aSeed = [self.graph.aEdge[i].lDestinationID for i in self.find_relaxable_edges(distances)]
        if not aSeed:
            return set()

        affected = find_reachable_vertices(self.graph.get_adjacency_list(), aSeed)
        logger.debug(f"Negative cycle affects {len(affected)} vertices: {sorted(affected)}")
        return affected

    def find_negative_cycle(self, distances: Dict[int, Union[int, float]],
                            predecessors: Dict[int, Optional[int]]) -> List[int]:
        """
        Recover one negative cycle by walking the predecessor table.

        Args:
            distances: Distance table after the bounded relaxation passes
            predecessors: Predecessor table from the same run

        Returns:
            Cycle as a list of vertex ids, first id repeated at the end;
            empty when there is no negative cycle
        """
        distances = dict(distances)
        predecessors = dict(predecessors)
        last_relaxed_id = None

        # One more full pass; the last vertex relaxed leads back into a cycle
        for pEdge in self.graph.aEdge:
            dDistance_source = distances[pEdge.lSourceID]
            if dDistance_source == float('inf'):
                continue
            if dDistance_source + pEdge.iWeight < distances[pEdge.lDestinationID]:
                distances[pEdge.lDestinationID] = dDistance_source + pEdge.iWeight
                predecessors[pEdge.lDestinationID] = pEdge.lSourceID
                last_relaxed_id = pEdge.lDestinationID

        if last_relaxed_id is None:
            return []

        current_id = last_relaxed_id
        for _ in range(self.graph.nVertex):
            current_id = predecessors[current_id]

        cycle = [current_id]
        previous_id = predecessors[current_id]
        while previous_id != current_id:
            cycle.append(previous_id)
            previous_id = predecessors[previous_id]
        cycle.append(current_id)
        cycle.reverse()

        logger.debug(f"Recovered negative cycle: {cycle}")
        return cycle
