"""
Graph analysis modules for shortest paths, spanning trees and cycle detection.
"""

from .pathfinding import ShortestPathFinder, ShortestPathResult, UNREACHABLE
from .detection import CycleAnalyzer
from .spanning import SpanningTreeBuilder

__all__ = [
    'ShortestPathFinder',
    'ShortestPathResult',
    'UNREACHABLE',
    'CycleAnalyzer',
    'SpanningTreeBuilder',
]
