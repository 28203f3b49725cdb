"""
Graph operation modules for modifying edge-list graphs.
"""

from .modification import GraphModifier

__all__ = ['GraphModifier']
