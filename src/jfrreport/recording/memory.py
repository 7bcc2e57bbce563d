"""
In-memory recording reader.
"""

import logging
from bisect import bisect_left
from typing import AbstractSet, Iterable, Iterator, List, Optional

from ..models.events import Event, EventType, RecordingTimeRange, Window
from .base import RecordingReader

logger = logging.getLogger(__name__)


class MemoryRecordingReader(RecordingReader):
    """
    Serves events from a list held in memory.

    Events are sorted by timestamp once at construction. Without an explicit
    time range the recording spans ``[first timestamp, last timestamp + 1)``.
    """

    def __init__(
        self,
        events: Iterable[Event],
        event_types: Optional[List[EventType]] = None,
        time_range: Optional[RecordingTimeRange] = None,
    ):
        self._events: List[Event] = sorted(events, key=lambda event: event.timestamp)
        self._timestamps = [event.timestamp for event in self._events]
        self._event_types = event_types
        if time_range is None:
            if self._events:
                time_range = RecordingTimeRange(self._timestamps[0], self._timestamps[-1] + 1)
            else:
                time_range = RecordingTimeRange(0, 0)
        self._time_range = time_range
        logger.debug(f"Recording with {len(self._events)} events, range {time_range}")

    @property
    def time_range(self) -> RecordingTimeRange:
        return self._time_range

    def events(
        self, window: Window, accepted_event_types: Optional[AbstractSet[str]] = None
    ) -> Iterator[Event]:
        index = bisect_left(self._timestamps, window.start)
        while index < len(self._events):
            event = self._events[index]
            if event.timestamp >= window.end:
                break
            if not accepted_event_types or event.event_type_path in accepted_event_types:
                yield event
            index += 1

    def event_types(self) -> List[EventType]:
        if self._event_types is not None:
            return list(self._event_types)

        seen = {}
        for event in self._events:
            if event.event_type_path not in seen:
                seen[event.event_type_path] = EventType(
                    name=event.display_name, path=event.event_type_path
                )
        return list(seen.values())

    def __len__(self) -> int:
        return len(self._events)
