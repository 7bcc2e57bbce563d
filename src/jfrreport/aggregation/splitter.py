"""
Separation of information events from sampling events.
"""

from typing import Iterable, Iterator, List

from ..models.events import INFO_EVENT_PATHS, Event
from ..models.results import InfoAccumulator
from .formatter import convert_stack_trace


def split_events(events: Iterable[Event], accumulator: InfoAccumulator) -> Iterator[List[str]]:
    """
    Route information events to the accumulator and yield sampled stacks.

    Events without a stack trace are skipped. Truncated stack traces are
    counted on the accumulator but otherwise processed as usual.

    Yields:
        The leaf-first method signatures of each sampled stack trace
    """
    for event in events:
        if event.event_type_path in INFO_EVENT_PATHS:
            accumulator.record_info_event(event)
            continue

        stack_trace = event.stack_trace
        if stack_trace is None:
            continue
        if stack_trace.truncated:
            accumulator.stack_traces_truncated += 1
        yield convert_stack_trace(stack_trace)
