"""Tests for reading and writing the edge list text format."""

import io

import pytest

from edgegraph import ConstructionError, pyedgegraph
from edgegraph.formats import export_edge_list, format_edge_list, parse_edge_list, read_edge_list

NETWORK_TEXT = """\
0 A 1 B 4
1 B 2 C 3
0 A 2 C 10
"""


class TestParseEdgeList:
    """Tests for parsing edge list text."""

    def test_parse(self, triangle_records):
        assert parse_edge_list(NETWORK_TEXT) == triangle_records

    def test_records_may_span_lines(self, triangle_records):
        """Test that only whitespace-separated token order matters."""
        sText = "0 A 1\nB 4 1 B\t2 C 3\n\n0 A 2 C\n10"

        assert parse_edge_list(sText) == triangle_records

    def test_negative_values(self):
        assert parse_edge_list("-1 X 2 Y -7") == [(-1, "X", 2, "Y", -7)]

    @pytest.mark.parametrize("sText", [
        "1_0 A 2 B 3",
        "0 A ٢ B 3",
        "0 A 1 B ٣",
        "0 A 1 B 0x1",
        "0 A 1 B --1",
    ])
    def test_rejects_non_ascii_and_underscore_integers(self, sText):
        """Test that only plain ASCII digits are read as integers."""
        with pytest.raises(ConstructionError, match="must be an integer"):
            parse_edge_list(sText)

    def test_explicit_plus_sign(self):
        assert parse_edge_list("+1 A 2 B +3") == [(1, "A", 2, "B", 3)]

    def test_empty(self):
        assert parse_edge_list("") == []
        assert parse_edge_list("   \n\n") == []

    @pytest.mark.parametrize("sText", [
        "0 A 1 B 4\n1 B 2",
        "0 A 1 B 4\n1",
        "0 A 1 B",
    ])
    def test_incomplete_trailing_record(self, sText):
        """Test that a partial last record is rejected instead of appended."""
        with pytest.raises(ConstructionError, match="Incomplete trailing record"):
            parse_edge_list(sText)

    @pytest.mark.parametrize("sText, sField", [
        ("x A 1 B 4", "source id"),
        ("0 A y B 4", "destination id"),
        ("0 A 1 B 4.5", "weight"),
    ])
    def test_non_integer_tokens(self, sText, sField):
        with pytest.raises(ConstructionError, match=sField):
            parse_edge_list(sText)

    def test_shifted_fields_are_caught(self):
        """Test that a missing name shifts a word into a numeric field."""
        with pytest.raises(ConstructionError):
            parse_edge_list("0 A 1 4 1 B 2 C 3 0")


class TestReadEdgeList:
    """Tests for loading edge lists from files and streams."""

    def test_read_path(self, tmp_path, triangle_records):
        network = tmp_path / "network.txt"
        network.write_text(NETWORK_TEXT)

        assert read_edge_list(network) == triangle_records
        assert read_edge_list(str(network)) == triangle_records

    def test_read_stream(self, triangle_records):
        assert read_edge_list(io.StringIO(NETWORK_TEXT)) == triangle_records

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            read_edge_list(tmp_path / "missing.txt")

    def test_graph_from_file(self, tmp_path):
        network = tmp_path / "network.txt"
        network.write_text(NETWORK_TEXT)

        graph = pyedgegraph.from_file(network)

        assert graph.get_edge_count() == 3
        assert graph.bellman_ford(0).distances == {0: 0, 1: 4, 2: 7}

    def test_graph_from_truncated_file(self, tmp_path):
        network = tmp_path / "network.txt"
        network.write_text(NETWORK_TEXT + "2 C 0\n")

        with pytest.raises(ConstructionError):
            pyedgegraph.from_file(network)


class TestExportEdgeList:
    """Tests for writing edge lists."""

    def test_format(self, triangle_graph):
        assert format_edge_list(triangle_graph.get_edges()) == NETWORK_TEXT

    def test_export_after_mutation(self, tmp_path, triangle_graph):
        """Test that the written file reloads into the mutated graph."""
        triangle_graph.remove_edge(2)
        triangle_graph.add_vertex("D", 2, -1)
        network = tmp_path / "out.txt"

        triangle_graph.export_edge_list(network)

        assert pyedgegraph.from_file(network).get_records() == triangle_graph.get_records()

    def test_export_stream(self, triangle_graph):
        stream = io.StringIO()

        export_edge_list(triangle_graph.get_edges(), stream)

        assert stream.getvalue() == NETWORK_TEXT
