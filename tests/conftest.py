"""Shared fixtures for edgegraph tests."""

import pytest

from edgegraph import pyedgegraph


@pytest.fixture
def triangle_records():
    """The A/B/C example: the path through B beats the direct edge."""
    return [
        (0, "A", 1, "B", 4),
        (1, "B", 2, "C", 3),
        (0, "A", 2, "C", 10),
    ]


@pytest.fixture
def triangle_graph(triangle_records):
    return pyedgegraph.from_edges(triangle_records)


@pytest.fixture
def network_records():
    """Six vertices, nine edges, connected, with a couple of equal weights."""
    return [
        (0, "Oshawa", 1, "Whitby", 7),
        (0, "Oshawa", 2, "Ajax", 9),
        (0, "Oshawa", 5, "Uxbridge", 14),
        (1, "Whitby", 2, "Ajax", 10),
        (1, "Whitby", 3, "Pickering", 15),
        (2, "Ajax", 3, "Pickering", 11),
        (2, "Ajax", 5, "Uxbridge", 2),
        (3, "Pickering", 4, "Toronto", 6),
        (4, "Toronto", 5, "Uxbridge", 9),
    ]


@pytest.fixture
def network_graph(network_records):
    return pyedgegraph.from_edges(network_records)
