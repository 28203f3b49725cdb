"""Tests for Kruskal minimum spanning trees."""

import random
from itertools import combinations

import pytest

from edgegraph import pyedge, pyedgegraph
from edgegraph.classes.utils import DisjointSet


def brute_force_mst_weight(graph):
    """Smallest total weight over every spanning tree of a small graph."""
    aEdge = graph.get_edges()
    nTree_edge = graph.get_vertex_count() - 1
    return min(
        graph.get_total_weight(candidate)
        for candidate in combinations(aEdge, nTree_edge)
        if graph.is_spanning_tree(candidate)
    )


def random_connected_records(seed, nVertex):
    """A chain through every vertex plus a few random extra edges."""
    rng = random.Random(seed)
    aRecord = []
    for lVertexID in range(1, nVertex):
        lParent = rng.randrange(lVertexID)
        aRecord.append((lParent, f"V{lParent}", lVertexID, f"V{lVertexID}", rng.randint(-5, 20)))
    for _ in range(rng.randint(1, 5)):
        a, b = rng.sample(range(nVertex), 2)
        aRecord.append((a, f"V{a}", b, f"V{b}", rng.randint(-5, 20)))
    rng.shuffle(aRecord)
    return aRecord


class TestKruskal:
    """Tests for spanning tree construction."""

    def test_triangle_example(self, triangle_graph):
        """Test that the heavy direct edge is left out."""
        aEdge_mst = triangle_graph.kruskal_mst()

        assert sorted(pEdge.to_tuple() for pEdge in aEdge_mst) == [
            (0, "A", 1, "B", 4),
            (1, "B", 2, "C", 3),
        ]
        assert pyedgegraph.get_total_weight(aEdge_mst) == 7

    def test_edges_in_acceptance_order(self, network_graph):
        """Test that edges come back lightest first, equal weights in list order."""
        aEdge_mst = network_graph.kruskal_mst()

        assert [pEdge.to_tuple() for pEdge in aEdge_mst] == [
            (2, "Ajax", 5, "Uxbridge", 2),
            (3, "Pickering", 4, "Toronto", 6),
            (0, "Oshawa", 1, "Whitby", 7),
            (0, "Oshawa", 2, "Ajax", 9),
            (4, "Toronto", 5, "Uxbridge", 9),
        ]
        assert pyedgegraph.get_total_weight(aEdge_mst) == 33

    def test_connected_graph_has_v_minus_one_edges(self, network_graph):
        aEdge_mst = network_graph.kruskal_mst()

        assert len(aEdge_mst) == network_graph.get_vertex_count() - 1
        assert network_graph.is_spanning_tree(aEdge_mst)

    def test_matches_brute_force(self, network_graph):
        assert pyedgegraph.get_total_weight(network_graph.kruskal_mst()) == brute_force_mst_weight(network_graph)

    @pytest.mark.parametrize("seed", range(8))
    def test_random_graphs_match_brute_force(self, seed):
        """Test small random connected graphs against exhaustive enumeration."""
        graph = pyedgegraph.from_edges(random_connected_records(seed, nVertex=3 + seed % 4))

        aEdge_mst = graph.kruskal_mst()

        assert graph.is_spanning_tree(aEdge_mst)
        assert pyedgegraph.get_total_weight(aEdge_mst) == brute_force_mst_weight(graph)

    def test_equal_weights_keep_list_order(self):
        """Test that the first of several equal-weight candidates wins."""
        graph = pyedgegraph.from_edges([
            (0, "A", 1, "B", 1),
            (1, "B", 2, "C", 1),
            (0, "A", 2, "C", 1),
        ])

        assert [pEdge.to_tuple() for pEdge in graph.kruskal_mst()] == [
            (0, "A", 1, "B", 1),
            (1, "B", 2, "C", 1),
        ]

    def test_result_is_deterministic(self, network_graph):
        assert network_graph.kruskal_mst() == network_graph.kruskal_mst()

    def test_negative_weights(self):
        graph = pyedgegraph.from_edges([
            (0, "A", 1, "B", -4),
            (1, "B", 2, "C", 3),
            (0, "A", 2, "C", -1),
        ])

        assert pyedgegraph.get_total_weight(graph.kruskal_mst()) == -5

    def test_disconnected_graph_gives_forest(self):
        """Test that each component gets its own tree."""
        graph = pyedgegraph.from_edges([
            (0, "A", 1, "B", 1),
            (1, "B", 2, "C", 2),
            (0, "A", 2, "C", 3),
            (7, "X", 8, "Y", 5),
        ])

        aEdge_mst = graph.kruskal_mst()

        assert [pEdge.to_tuple() for pEdge in aEdge_mst] == [
            (0, "A", 1, "B", 1),
            (1, "B", 2, "C", 2),
            (7, "X", 8, "Y", 5),
        ]
        assert not graph.is_spanning_tree(aEdge_mst)

    def test_self_loops_and_parallel_edges_discarded(self):
        graph = pyedgegraph.from_edges([
            (0, "A", 0, "A", -10),
            (0, "A", 1, "B", 5),
            (1, "B", 0, "A", 2),
        ])

        assert [pEdge.to_tuple() for pEdge in graph.kruskal_mst()] == [(1, "B", 0, "A", 2)]

    def test_empty_graph(self):
        assert pyedgegraph.from_edges([]).kruskal_mst() == []

    def test_result_is_copy(self, triangle_graph):
        """Test that editing the returned edges leaves the graph alone."""
        triangle_graph.kruskal_mst()[0].iWeight = 500

        assert [pEdge.iWeight for pEdge in triangle_graph.get_edges()] == [4, 3, 10]

    def test_follows_weight_change(self, triangle_graph):
        triangle_graph.change_weight(2, 1)

        assert sorted(pEdge.to_tuple() for pEdge in triangle_graph.kruskal_mst()) == [
            (0, "A", 2, "C", 1),
            (1, "B", 2, "C", 3),
        ]


class TestIsSpanningTree:
    """Tests for spanning tree validation."""

    def test_rejects_cycle(self, triangle_graph):
        aEdge = triangle_graph.get_edges()

        assert not triangle_graph.is_spanning_tree(aEdge)

    def test_rejects_foreign_vertex(self, triangle_graph):
        assert not triangle_graph.is_spanning_tree([pyedge(0, "A", 1, "B", 4), pyedge(2, "C", 9, "Z", 1)])


class TestDisjointSet:
    """Tests for the union-find structure."""

    def test_singletons(self):
        groups = DisjointSet([3, 1, 2])

        assert groups.get_group_count() == 3
        assert not groups.connected(1, 2)

    def test_union_and_find(self):
        groups = DisjointSet(range(5))

        assert groups.union(0, 1)
        assert groups.union(3, 4)
        assert groups.union(1, 4)
        assert not groups.union(0, 3)
        assert groups.connected(0, 4)
        assert not groups.connected(0, 2)
        assert groups.get_group_count() == 2

    def test_path_compression(self):
        groups = DisjointSet(range(4))
        groups.parent.update({0: 1, 1: 2, 2: 3})

        root = groups.find(0)

        assert root == 3
        assert groups.parent[0] == 3
        assert groups.parent[1] == 3

    def test_unknown_vertex(self):
        with pytest.raises(KeyError):
            DisjointSet([0]).find(1)
