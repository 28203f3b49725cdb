"""
Reader for the whitespace-separated edge list text format.

Each record is five tokens: ``source_id source_name destination_id
destination_name weight``. Records may span or share lines; only the token
order matters.
"""

import logging
import os
import re
from typing import IO, List, Tuple, Union

from ..exceptions import ConstructionError

logger = logging.getLogger(__name__)

EdgeRecord = Tuple[int, str, int, str, int]
INTEGER_TOKEN = re.compile(r'[+-]?[0-9]+')


def _parse_integer(sToken: str, lRecord_index: int, sField: str) -> int:
    if not INTEGER_TOKEN.fullmatch(sToken):
        raise ConstructionError(
            f"Record {lRecord_index}: {sField} must be an integer, got {sToken!r}")
    return int(sToken)


def parse_edge_list(sText: str) -> List[EdgeRecord]:
    """
    Parse edge list text into raw records.

    Args:
        sText: Text content in the edge list format

    Returns:
        Ordered list of (source id, source name, destination id, destination name, weight)

    Raises:
        ConstructionError: If a token is malformed or the last record is incomplete
    """
    aToken = sText.split()
    nToken = len(aToken)
    if nToken % 5 != 0:
        raise ConstructionError(
            f"Incomplete trailing record: {nToken % 5} of 5 fields present "
            f"after {nToken // 5} complete records")

    aRecord = []
    for lRecord_index, i in enumerate(range(0, nToken, 5)):
        sSource_id, sSource_name, sDestination_id, sDestination_name, sWeight = aToken[i:i + 5]
        aRecord.append((
            _parse_integer(sSource_id, lRecord_index, 'source id'),
            sSource_name,
            _parse_integer(sDestination_id, lRecord_index, 'destination id'),
            sDestination_name,
            _parse_integer(sWeight, lRecord_index, 'weight'),
        ))

    logger.debug(f"Parsed {len(aRecord)} edge records")
    return aRecord


def read_edge_list(source: Union[str, os.PathLike, IO[str]]) -> List[EdgeRecord]:
    """
    Load edge records from a file path or an open text stream.

    Args:
        source: Path to a network file, or a readable text stream

    Returns:
        Ordered list of raw edge records
    """
    if hasattr(source, 'read'):
        return parse_edge_list(source.read())

    with open(source, 'r', encoding='utf-8') as network:
        aRecord = parse_edge_list(network.read())
    logger.info(f"Loaded {len(aRecord)} edge records from {source}")
    return aRecord
