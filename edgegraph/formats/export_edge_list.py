"""
Writer for the whitespace-separated edge list text format.
"""

import logging
import os
from typing import IO, Iterable, Union

from ..classes.edge import pyedge

logger = logging.getLogger(__name__)


def format_edge_list(aEdge: Iterable[pyedge]) -> str:
    """Render edges one record per line, in list order."""
    return ''.join(
        f"{pEdge.lSourceID} {pEdge.sSource_name} {pEdge.lDestinationID} "
        f"{pEdge.sDestination_name} {pEdge.iWeight}\n"
        for pEdge in aEdge)


def export_edge_list(aEdge: Iterable[pyedge], target: Union[str, os.PathLike, IO[str]]):
    """
    Write edges in the format read by :func:`read_edge_list`.

    Args:
        aEdge: Edges to write
        target: Output file path, or a writable text stream
    """
    aEdge = list(aEdge)
    sText = format_edge_list(aEdge)
    if hasattr(target, 'write'):
        target.write(sText)
        return

    with open(target, 'w', encoding='utf-8') as network:
        network.write(sText)
    logger.info(f"Exported {len(aEdge)} edges to {target}")
