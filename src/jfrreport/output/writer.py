"""
Collapsed stack output.

One line per distinct collapsed stack: ``<stack> <count>``. This is the input
format of flamegraph.pl.
"""

import logging
from typing import Mapping, TextIO

logger = logging.getLogger(__name__)


def write_stack_counts(counts: Mapping[str, int], writer: TextIO, sort: bool = False) -> int:
    """
    Write collapsed stack counts to a text stream.

    Args:
        counts: Collapsed stack signature -> sample count
        writer: Destination stream
        sort: Emit lines by descending count instead of insertion order

    Returns:
        Number of lines written
    """
    items = counts.items()
    if sort:
        # sorted() is stable: equal counts keep their insertion order
        items = sorted(items, key=lambda item: item[1], reverse=True)

    lines = 0
    for signature, count in items:
        writer.write(f"{signature} {count}\n")
        lines += 1

    logger.debug(f"Wrote {lines} collapsed stack lines")
    return lines
