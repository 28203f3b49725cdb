"""
Edge record representation.
"""

from typing import Tuple


class pyedge:
    """
    A directed, integer-weighted edge between two vertices.

    The endpoint names are carried on the edge itself; there is no separate
    vertex store. Only the weight may change after construction.
    """

    __slots__ = ('lSourceID', 'sSource_name', 'lDestinationID', 'sDestination_name', 'iWeight')

    def __init__(self, lSourceID: int, sSource_name: str,
                 lDestinationID: int, sDestination_name: str, iWeight: int):
        """
        Initialize an edge.

        Args:
            lSourceID: Id of the source vertex
            sSource_name: Display name of the source vertex
            lDestinationID: Id of the destination vertex
            sDestination_name: Display name of the destination vertex
            iWeight: Integer weight, may be negative
        """
        self.lSourceID = lSourceID
        self.sSource_name = sSource_name
        self.lDestinationID = lDestinationID
        self.sDestination_name = sDestination_name
        self.iWeight = iWeight

    def is_incident(self, lVertexID: int) -> bool:
        """Check whether the vertex is either endpoint of this edge."""
        return self.lSourceID == lVertexID or self.lDestinationID == lVertexID

    def is_self_loop(self) -> bool:
        return self.lSourceID == self.lDestinationID

    def copy(self) -> 'pyedge':
        """Return a detached copy of this edge."""
        return pyedge(self.lSourceID, self.sSource_name,
                      self.lDestinationID, self.sDestination_name, self.iWeight)

    def to_tuple(self) -> Tuple[int, str, int, str, int]:
        """
        Convert the edge back to a raw record.

        Returns:
            (source id, source name, destination id, destination name, weight)
        """
        return (self.lSourceID, self.sSource_name,
                self.lDestinationID, self.sDestination_name, self.iWeight)

    def __eq__(self, other):
        if not isinstance(other, pyedge):
            return NotImplemented
        return self.to_tuple() == other.to_tuple()

    __hash__ = None

    def __repr__(self):
        return (f"pyedge({self.lSourceID}, {self.sSource_name!r}, "
                f"{self.lDestinationID}, {self.sDestination_name!r}, {self.iWeight})")
