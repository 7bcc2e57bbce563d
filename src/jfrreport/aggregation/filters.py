"""
Stack trace filter chain.

Filters run in a fixed order on the leaf-first signature list:

1. grep: keep the trace only if some frame matches
2. cutoff: drop the first matching frame and everything after it
3. include/exclude: drop individual frames

All patterns are applied with ``re.search`` (case-sensitive).
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Pattern, Sequence

from ..models.config import FilterConfig, ReportConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FilterChain:
    """Applies the configured filters to one stack trace at a time."""

    include: Optional[Pattern[str]] = None
    exclude: Optional[Pattern[str]] = None
    grep: Optional[Pattern[str]] = None
    cutoff: Optional[Pattern[str]] = None
    reverse: bool = False

    @classmethod
    def from_filter_config(cls, filters: FilterConfig, reverse: bool = False) -> "FilterChain":
        return cls(
            include=filters.include,
            exclude=filters.exclude,
            grep=filters.grep,
            cutoff=filters.cutoff,
            reverse=reverse,
        )

    @classmethod
    def from_config(cls, config: ReportConfig) -> "FilterChain":
        return cls.from_filter_config(config.filters, reverse=config.sampling.reverse)

    def matches_grep_filter(self, stack_trace: Sequence[str]) -> bool:
        if self.grep is None:
            return True
        return any(signature and self.grep.search(signature) for signature in stack_trace)

    def apply_cutoff(self, stack_trace: Sequence[str]) -> List[str]:
        if self.cutoff is not None:
            for index, signature in enumerate(stack_trace):
                if self.cutoff.search(signature):
                    return list(stack_trace[:index])
        return list(stack_trace)

    def matches_method(self, signature: str) -> bool:
        if self.include is not None and not self.include.search(signature):
            return False
        if self.exclude is not None and self.exclude.search(signature):
            return False
        return True

    def apply(self, stack_trace: Sequence[str]) -> Optional[List[str]]:
        """
        Run the whole chain on a leaf-first trace.

        Returns:
            The surviving frames, root first unless ``reverse`` is set, or
            None when the trace is discarded
        """
        if not self.matches_grep_filter(stack_trace):
            return None

        filtered = [
            signature for signature in self.apply_cutoff(stack_trace)
            if self.matches_method(signature)
        ]
        if not filtered:
            return None

        if not self.reverse:
            filtered.reverse()
        return filtered
