"""
Readers and writers for the edge list text format.
"""

from .read_edge_list import read_edge_list, parse_edge_list
from .export_edge_list import export_edge_list, format_edge_list

__all__ = [
    'read_edge_list',
    'parse_edge_list',
    'export_edge_list',
    'format_edge_list',
]
