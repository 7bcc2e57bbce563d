"""
Significance grouping of call paths.

Stack traces are bucketed by their first frames (the root group). Only
groups with more than ``minimum_samples`` members reach the output, which
keeps rare call paths out of the flame graph.
"""

from typing import Dict, Iterator, List, Sequence

ROOT_KEY_SEPARATOR = ";"


class StackTraceRoots:
    """Collects filtered stack traces per root group for one window."""

    def __init__(self, minimum_samples_frame_depth: int = 5):
        self.frame_depth = minimum_samples_frame_depth
        self.roots: Dict[str, List[List[str]]] = {}

    def root_key(self, frames: Sequence[str]) -> str:
        return ROOT_KEY_SEPARATOR.join(frames[:self.frame_depth])

    def add_stack_trace(self, frames: Sequence[str]) -> None:
        self.roots.setdefault(self.root_key(frames), []).append(list(frames))

    def significant_stacks(self, minimum_samples: int) -> Iterator[List[str]]:
        """
        Yield every member of every group with more than ``minimum_samples`` members.

        The comparison is strict: a group of exactly ``minimum_samples``
        traces is dropped.
        """
        for stacks in self.roots.values():
            if len(stacks) > minimum_samples:
                yield from stacks

    def __len__(self) -> int:
        return len(self.roots)
