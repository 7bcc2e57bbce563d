"""
Collapsing of stack traces into counted flame graph signatures.
"""

from collections import Counter
from typing import Callable, Dict, Iterable, Sequence

STACK_SEPARATOR = ";"


def collapse_stack(frames: Sequence[str], format_frame: Callable[[str], str]) -> str:
    return STACK_SEPARATOR.join(format_frame(frame) for frame in frames)


def collapse_stacks(
    stacks: Iterable[Sequence[str]], format_frame: Callable[[str], str]
) -> Dict[str, int]:
    """
    Count identical collapsed stacks.

    Args:
        stacks: Root-grouped stack traces that passed the significance test
        format_frame: Applied to every frame before joining

    Returns:
        Mapping of collapsed signature to the number of traces producing it,
        in order of first appearance
    """
    counts: Counter = Counter()
    for frames in stacks:
        counts[collapse_stack(frames, format_frame)] += 1
    return dict(counts)
