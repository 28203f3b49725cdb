"""
Utility functions for edgegraph.

This module provides shared helpers used across the edgegraph package,
including the disjoint-set structure behind spanning tree construction and
common traversal routines.
"""

import logging
from typing import Dict, Iterable, List, Set
from collections import deque

logger = logging.getLogger(__name__)


class DisjointSet:
    """
    Union-find over vertex ids with path compression and union by size.

    Every id must be registered with :meth:`add` (or the constructor) before
    it can be found or merged.
    """

    def __init__(self, aVertexID: Iterable[int] = ()):
        self.parent: Dict[int, int] = {}
        self.size: Dict[int, int] = {}
        for lVertexID in aVertexID:
            self.add(lVertexID)

    def add(self, lVertexID: int):
        """Register a vertex as a singleton group, if not already present."""
        if lVertexID not in self.parent:
            self.parent[lVertexID] = lVertexID
            self.size[lVertexID] = 1

    def find(self, lVertexID: int) -> int:
        """
        Find the representative of the group containing a vertex.

        Args:
            lVertexID: Registered vertex id

        Returns:
            Representative vertex id of the group

        Raises:
            KeyError: If the vertex was never registered
        """
        root = lVertexID
        while self.parent[root] != root:
            root = self.parent[root]

        # Path compression
        while self.parent[lVertexID] != root:
            self.parent[lVertexID], lVertexID = root, self.parent[lVertexID]

        return root

    def connected(self, a: int, b: int) -> bool:
        return self.find(a) == self.find(b)

    def union(self, a: int, b: int) -> bool:
        """
        Merge the groups containing two vertices.

        Returns:
            True if two groups were merged, False if already in the same group
        """
        root_a = self.find(a)
        root_b = self.find(b)
        if root_a == root_b:
            return False

        if self.size[root_a] < self.size[root_b]:
            root_a, root_b = root_b, root_a
        self.parent[root_b] = root_a
        self.size[root_a] += self.size[root_b]
        return True

    def get_group_count(self) -> int:
        return sum(1 for lVertexID, parent in self.parent.items() if lVertexID == parent)


def find_reachable_vertices(adjacency_dict: Dict[int, List[int]], aStart: Iterable[int]) -> Set[int]:
    """
    Find all vertices reachable from any of the start vertices using BFS.

    Args:
        adjacency_dict: Dictionary mapping node_id -> list of connected node_ids
        aStart: Start vertex ids, included in the result

    Returns:
        Set of reachable vertex ids
    """
    reachable = set(aStart)
    queue = deque(reachable)

    while queue:
        current_id = queue.popleft()
        for neighbor_id in adjacency_dict.get(current_id, []):
            if neighbor_id not in reachable:
                reachable.add(neighbor_id)
                queue.append(neighbor_id)

    return reachable


def get_total_weight(aEdge) -> int:
    """Sum the weights of a sequence of edges."""
    return sum(pEdge.iWeight for pEdge in aEdge)
