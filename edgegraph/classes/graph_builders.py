"""
Graph builders module for edgegraph.

This module turns raw edge records into validated edge objects. A record is
only admitted once all five of its fields are present and well typed, so a
truncated trailing record can never enter the graph.
"""

import logging
from typing import Any, Iterable, List, Sequence

from .edge import pyedge
from ..exceptions import ConstructionError

logger = logging.getLogger(__name__)

RECORD_FIELDS = ('source id', 'source name', 'destination id', 'destination name', 'weight')


def is_integer(value: Any) -> bool:
    """Check for a true integer; booleans are rejected."""
    return isinstance(value, int) and not isinstance(value, bool)


def is_vertex_name(value: Any) -> bool:
    """Check for a non-empty name that survives whitespace-separated text."""
    return isinstance(value, str) and value != '' and not any(c.isspace() for c in value)


class GraphBuilders:
    """
    Edge record construction utilities.

    This class provides methods for validating raw 5-tuples and converting
    them into edge objects in input order.
    """

    @staticmethod
    def build_edge(record: Sequence[Any], lRecord_index: int = 0) -> pyedge:
        """
        Build a single edge from a raw record.

        Args:
            record: (source id, source name, destination id, destination name, weight)
            lRecord_index: Position of the record in the input, used in error messages

        Returns:
            The new edge

        Raises:
            ConstructionError: If the record is incomplete or a field has the wrong type
        """
        if isinstance(record, (str, bytes)) or not isinstance(record, Sequence):
            raise ConstructionError(f"Record {lRecord_index} is not a sequence: {record!r}")

        if len(record) != len(RECORD_FIELDS):
            raise ConstructionError(
                f"Record {lRecord_index} has {len(record)} fields, expected {len(RECORD_FIELDS)}: {record!r}")

        lSourceID, sSource_name, lDestinationID, sDestination_name, iWeight = record

        for field_index in (0, 2, 4):
            if not is_integer(record[field_index]):
                raise ConstructionError(
                    f"Record {lRecord_index}: {RECORD_FIELDS[field_index]} must be an integer, "
                    f"got {record[field_index]!r}")

        for field_index in (1, 3):
            if not is_vertex_name(record[field_index]):
                raise ConstructionError(
                    f"Record {lRecord_index}: {RECORD_FIELDS[field_index]} must be a non-empty "
                    f"name without whitespace, got {record[field_index]!r}")

        return pyedge(lSourceID, sSource_name, lDestinationID, sDestination_name, iWeight)

    @classmethod
    def build_edges(cls, records: Iterable[Sequence[Any]]) -> List[pyedge]:
        """
        Build the ordered edge list from raw records.

        The whole input is validated before anything is returned; one bad
        record rejects the entire input.

        Args:
            records: Ordered iterable of raw 5-tuples

        Returns:
            List of edges in input order
        """
        if records is None:
            raise ConstructionError("No edge records supplied")

        aEdge = [cls.build_edge(record, i) for i, record in enumerate(records)]
        logger.debug(f"Built {len(aEdge)} edges from raw records")
        return aEdge
