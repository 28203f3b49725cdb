"""
Shortest path finding for edge-list graphs.

This module provides the Bellman-Ford single-source shortest path algorithm
with negative-weight cycle detection.
"""

import logging
import math
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Set, Union

from ..core.graph import EdgeGraph
from ..classes.graph_builders import is_integer
from ..exceptions import InputError
from .detection import CycleAnalyzer

logger = logging.getLogger(__name__)

# Distance of a vertex with no path from the source. Integer sums never reach it.
UNREACHABLE = math.inf


@dataclass
class ShortestPathResult:
    """Distances and predecessors from one Bellman-Ford run."""
    source_id: int
    distances: Dict[int, Union[int, float]] = field(default_factory=dict)
    predecessors: Dict[int, Optional[int]] = field(default_factory=dict)
    negative_cycle: bool = False
    negative_cycle_vertices: Set[int] = field(default_factory=set)

    def is_reachable(self, lVertexID: int) -> bool:
        return self.get_distance(lVertexID) != UNREACHABLE

    def get_distance(self, lVertexID: int) -> Union[int, float]:
        """
        Get the distance to a vertex.

        Raises:
            InputError: If the vertex was not part of the graph
        """
        if lVertexID not in self.distances:
            raise InputError(f"Vertex {lVertexID} is not part of this result")
        return self.distances[lVertexID]

    def get_path(self, lVertexID: int) -> List[int]:
        """
        Rebuild the shortest path from the source to a vertex.

        Args:
            lVertexID: Target vertex id

        Returns:
            Vertex ids from source to target, or an empty list if unreachable

        Raises:
            InputError: If the vertex is unknown or its distance is unbounded
                because of a negative cycle
        """
        if not self.is_reachable(lVertexID):
            return []
        if lVertexID in self.negative_cycle_vertices:
            raise InputError(f"Vertex {lVertexID} is affected by a negative cycle; no shortest path exists")

        path = [lVertexID]
        while path[-1] != self.source_id:
            path.append(self.predecessors[path[-1]])
        path.reverse()
        return path


class ShortestPathFinder:
    """
    Bellman-Ford shortest paths over the edge list.

    Distance tables are keyed by vertex id, so ids do not need to form a
    dense range.
    """

    def __init__(self, graph: EdgeGraph):
        """
        Initialize the path finder.

        Args:
            graph: EdgeGraph instance to analyze
        """
        self.graph = graph
        self.cycle_analyzer = CycleAnalyzer(graph)

    def bellman_ford(self, source_id: int, early_exit: bool = True) -> ShortestPathResult:
        """
        Compute shortest distances from a source vertex to every vertex.

        Args:
            source_id: Id of an existing vertex
            early_exit: Stop relaxing once a full pass changes nothing

        Returns:
            ShortestPathResult with distances, predecessors and the negative cycle flag

        Raises:
            InputError: If the source is not an existing vertex id
        """
        if not is_integer(source_id):
            raise InputError(f"Source vertex must be an integer id, got {source_id!r}")

        vertex_slots = self.graph.get_vertex_slots()
        if source_id not in vertex_slots:
            raise InputError(f"Source vertex {source_id} does not exist; valid ids: {list(vertex_slots)}")

        distances: Dict[int, Union[int, float]] = dict.fromkeys(vertex_slots, UNREACHABLE)
        predecessors: Dict[int, Optional[int]] = dict.fromkeys(vertex_slots)
        distances[source_id] = 0

        nPass = 0
        for _ in range(self.graph.nVertex - 1):
            nPass += 1
            if not self._relax_all(distances, predecessors) and early_exit:
                break

        result = ShortestPathResult(source_id, distances, predecessors)
        result.negative_cycle_vertices = self.cycle_analyzer.find_negative_cycle_vertices(distances)
        result.negative_cycle = bool(result.negative_cycle_vertices)

        if result.negative_cycle:
            logger.warning(f"Graph contains a negative weight cycle reachable from vertex {source_id}")
        logger.info(f"Bellman-Ford from vertex {source_id} finished after {nPass} passes")
        return result

    def find_negative_cycle(self, source_id: int) -> List[int]:
        """
        Find one negative cycle reachable from the source.

        Returns:
            Cycle as a list of vertex ids, first id repeated at the end;
            empty when there is none
        """
        result = self.bellman_ford(source_id)
        if not result.negative_cycle:
            return []
        return self.cycle_analyzer.find_negative_cycle(result.distances, result.predecessors)

    def _relax_all(self, distances: Dict[int, Union[int, float]],
                   predecessors: Dict[int, Optional[int]]) -> bool:
        """
        Relax every edge once, in edge list order.

        Returns:
            True if any distance changed
        """
        changed = False
        for pEdge in self.graph.aEdge:
            dDistance_source = distances[pEdge.lSourceID]
            if dDistance_source == UNREACHABLE:
                continue
            dDistance_new = dDistance_source + pEdge.iWeight
            if dDistance_new < distances[pEdge.lDestinationID]:
                distances[pEdge.lDestinationID] = dDistance_new
                predecessors[pEdge.lDestinationID] = pEdge.lSourceID
                changed = True
        return changed
