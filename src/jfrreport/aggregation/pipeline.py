"""
Per-window aggregation passes.

A pass reads the events of one window exactly once. Stacks are filtered and
grouped while reading; collapsing happens only after the whole window has
been read, because the significance test needs complete root groups.
"""

import logging
from collections import Counter
from functools import partial
from typing import AbstractSet, Dict, Optional

from ..models.config import ReportConfig
from ..models.events import FILTERED_EVENT_PATHS, Window
from ..models.results import InfoAccumulator, WindowResult
from ..recording.base import RecordingReader
from ..validation import handle_error, ErrorSeverity
from .collapser import collapse_stacks
from .filters import FilterChain
from .formatter import format_method_name
from .grouper import StackTraceRoots
from .splitter import split_events

logger = logging.getLogger(__name__)


def process_window(
    reader: RecordingReader,
    window: Window,
    config: ReportConfig,
    accepted_event_types: Optional[AbstractSet[str]] = FILTERED_EVENT_PATHS,
) -> WindowResult:
    """
    Aggregate one window into collapsed flame graph stacks.

    Args:
        reader: Source of decoded events
        window: The window to aggregate
        config: Immutable report settings
        accepted_event_types: Event type paths read from the recording

    Returns:
        WindowResult with the collapsed stack counts and collected info

    Raises:
        Exception: Any failure while reading events aborts the window
    """
    info = InfoAccumulator()
    chain = FilterChain.from_config(config)
    roots = StackTraceRoots(config.sampling.minimum_samples_frame_depth)

    try:
        for stack_trace in split_events(reader.events(window, accepted_event_types), info):
            filtered = chain.apply(stack_trace)
            if filtered:
                roots.add_stack_trace(filtered)
    except Exception as e:
        handle_error(
            error=e,
            context=f"reading events of window {window.number}",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger,
        )

    format_frame = partial(
        format_method_name, compress_package_names=config.output.compress_package_names
    )
    stack_counts = collapse_stacks(
        roots.significant_stacks(config.sampling.minimum_samples), format_frame
    )
    logger.debug(
        f"Window {window.number}: {len(roots)} root groups, "
        f"{len(stack_counts)} distinct stacks"
    )
    return WindowResult(window=window, stack_counts=stack_counts, info=info)


def count_top_frames(
    reader: RecordingReader,
    window: Window,
    config: ReportConfig,
    accepted_event_types: Optional[AbstractSet[str]] = FILTERED_EVENT_PATHS,
) -> WindowResult:
    """
    Count how often each method appears in the stacks of one window.

    Only stacks passing the grep filter are considered, and only frames
    passing the include/exclude filters are counted. Signatures are kept
    fully qualified; the significance test does not apply.
    """
    info = InfoAccumulator()
    chain = FilterChain.from_config(config)
    method_counts: Dict[str, int] = Counter()

    try:
        for stack_trace in split_events(reader.events(window, accepted_event_types), info):
            if not chain.matches_grep_filter(stack_trace):
                continue
            for signature in stack_trace:
                if chain.matches_method(signature):
                    method_counts[signature] += 1
    except Exception as e:
        handle_error(
            error=e,
            context=f"reading events of window {window.number}",
            severity=ErrorSeverity.ERROR,
            reraise=True,
            logger=logger,
        )

    return WindowResult(window=window, stack_counts=dict(method_counts), info=info)
