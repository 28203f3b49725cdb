"""
Exception types raised by the edgegraph package.

Every error leaves the graph unchanged; callers may catch and retry.
"""


class EdgeGraphError(Exception):
    """Base class for all package-specific errors."""


class ConstructionError(EdgeGraphError, ValueError):
    """Raised when an edge record is malformed or incomplete."""


class EdgeIndexError(EdgeGraphError, IndexError):
    """Raised when an edge position is outside the current edge list."""


class VertexReferenceError(EdgeGraphError, LookupError):
    """Raised when a vertex id does not exist in the graph."""


class InputError(EdgeGraphError, ValueError):
    """Raised when an algorithm or operation receives an invalid argument."""


__all__ = [
    'EdgeGraphError',
    'ConstructionError',
    'EdgeIndexError',
    'VertexReferenceError',
    'InputError',
]
