"""
Stack aggregation pipeline.

The pipeline turns the events of one window into collapsed stack counts:
- splitter: separates information events from sampled stacks
- filters: grep, cutoff and include/exclude filtering
- grouper: significance grouping by root frames
- collapser: counting of collapsed stack signatures
- formatter: method signatures and their compact display form
"""

from .collapser import collapse_stacks
from .filters import FilterChain
from .formatter import convert_stack_trace, convert_to_method_signature, format_method_name
from .grouper import StackTraceRoots
from .pipeline import count_top_frames, process_window
from .splitter import split_events

__all__ = [
    "FilterChain",
    "StackTraceRoots",
    "collapse_stacks",
    "convert_stack_trace",
    "convert_to_method_signature",
    "count_top_frames",
    "format_method_name",
    "process_window",
    "split_events",
]
