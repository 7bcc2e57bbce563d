"""
Abstract base class for recording readers.

A reader exposes an already-decoded recording: its time range, the event
types it declares and, for a given window, the events inside that window.
Decoding the native recording format is the job of the reader
implementation, never of the aggregation pipeline.
"""

from abc import ABC, abstractmethod
from typing import AbstractSet, Iterator, List, Optional

from ..models.events import Event, EventType, RecordingTimeRange, Window


class RecordingReader(ABC):
    """Abstract base class for recording reader implementations."""

    @property
    @abstractmethod
    def time_range(self) -> RecordingTimeRange:
        """
        The half-open time range covered by the recording.

        Returns:
            RecordingTimeRange in nanoseconds
        """
        pass

    @abstractmethod
    def events(
        self, window: Window, accepted_event_types: Optional[AbstractSet[str]] = None
    ) -> Iterator[Event]:
        """
        Iterate over the events of one window in timestamp order.

        Args:
            window: Only events with ``window.start <= timestamp < window.end``
            accepted_event_types: Event type paths to include; None or an
                empty set accepts every event type

        Returns:
            Iterator of decoded events
        """
        pass

    @abstractmethod
    def event_types(self) -> List[EventType]:
        """
        List the event types declared by the recording.

        Returns:
            Event types in declaration order
        """
        pass

    def full_window(self) -> Window:
        """A single window spanning the whole recording."""
        time_range = self.time_range
        return Window(start=time_range.start, end=time_range.end, number=1)
