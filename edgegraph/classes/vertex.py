"""
Vertex identity representation.
"""

from enum import Enum


class VertexNamingPolicy(Enum):
    """Which edge record supplies a vertex's display name."""
    FIRST_OCCURRENCE = "first_occurrence"
    LAST_OCCURRENCE = "last_occurrence"


class pyvertex:
    """
    Identity of a vertex derived from the edge list.

    Vertices are never stored by the graph; they are rebuilt from the edges
    whenever the vertex directory is requested.
    """

    __slots__ = ('lVertexID', 'sName')

    def __init__(self, lVertexID: int, sName: str):
        self.lVertexID = lVertexID
        self.sName = sName

    def __eq__(self, other):
        if not isinstance(other, pyvertex):
            return NotImplemented
        return self.lVertexID == other.lVertexID and self.sName == other.sName

    def __hash__(self):
        return hash((self.lVertexID, self.sName))

    def __repr__(self):
        return f"pyvertex({self.lVertexID}, {self.sName!r})"
