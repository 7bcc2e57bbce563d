"""
Per-window results of the aggregation pipeline.

A window pass never mutates shared state: it returns a WindowResult holding
its own collapsed counts and its own InfoAccumulator. Callers that process
several windows merge the accumulators in window order.
"""

from dataclasses import dataclass, field
from typing import Dict, Optional

from .events import RECORDING_LOST_EVENT_PATH, Event, Window


@dataclass
class InfoAccumulator:
    """
    Information events and advisory counters collected during a pass.

    At most one event is kept per information event type path (the latest
    one wins); buffer-loss events are only counted.
    """

    info_events: Dict[str, Event] = field(default_factory=dict)
    recording_buffers_lost: int = 0
    stack_traces_truncated: int = 0

    def record_info_event(self, event: Event) -> None:
        if event.event_type_path == RECORDING_LOST_EVENT_PATH:
            self.recording_buffers_lost += 1
        else:
            self.info_events[event.event_type_path] = event

    def merge(self, other: "InfoAccumulator") -> None:
        """Fold a later window's accumulator into this one."""
        self.info_events.update(other.info_events)
        self.recording_buffers_lost += other.recording_buffers_lost
        self.stack_traces_truncated += other.stack_traces_truncated

    def get_event(self, event_type_path: str) -> Optional[Event]:
        return self.info_events.get(event_type_path)

    @property
    def has_info(self) -> bool:
        return bool(self.info_events)


@dataclass
class WindowResult:
    """Collapsed stack counts and collected info for one window."""

    window: Window
    # Collapsed stack signature (or raw frame signature for top frames) -> count
    stack_counts: Dict[str, int]
    info: InfoAccumulator = field(default_factory=InfoAccumulator)

    @property
    def is_empty(self) -> bool:
        return not self.stack_counts

    @property
    def total_samples(self) -> int:
        return sum(self.stack_counts.values())
