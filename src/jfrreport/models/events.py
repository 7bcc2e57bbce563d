"""
Decoded recording data models.

These structures are produced by a recording reader and consumed, read-only,
by the aggregation pipeline. Timestamps are integer nanoseconds.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, FrozenSet, Optional, Tuple

NANOS_PER_SECOND = 1_000_000_000

# --- Well-known event type paths ---
SAMPLING_EVENT_PATH = "vm/prof/execution_sample"
JVM_INFO_EVENT_PATH = "vm/info"
OS_INFO_EVENT_PATH = "os/information"
CPU_INFO_EVENT_PATH = "os/processor/cpu_information"
MEM_INFO_EVENT_PATH = "os/memory/physical_memory"
RECORDING_LOST_EVENT_PATH = "recordings/buffer_lost"

# Ordered: the info report lists captured events in this order.
INFO_EVENT_PATHS: Tuple[str, ...] = (
    JVM_INFO_EVENT_PATH,
    OS_INFO_EVENT_PATH,
    CPU_INFO_EVENT_PATH,
    MEM_INFO_EVENT_PATH,
    RECORDING_LOST_EVENT_PATH,
)

# Default acceptance set for sampling-based reports.
FILTERED_EVENT_PATHS: FrozenSet[str] = frozenset((SAMPLING_EVENT_PATH,) + INFO_EVENT_PATHS)


@dataclass(frozen=True)
class Frame:
    """
    One call-stack level as decoded from the recording.

    Any attribute may be missing when the recorder could not resolve the
    method; such frames have no method signature and are dropped.
    """

    type_name: Optional[str]
    method_name: Optional[str]
    argument_types: Tuple[str, ...] = ()
    return_type: Optional[str] = None


@dataclass(frozen=True)
class StackTrace:
    """Frames of one sampling event, leaf first."""

    frames: Tuple[Frame, ...]
    # Set by the recorder when the stack was deeper than its capture limit.
    truncated: bool = False


@dataclass(frozen=True)
class Event:
    """One decoded record of the recording."""

    event_type_path: str
    timestamp: int
    stack_trace: Optional[StackTrace] = None
    # Human-readable type name, e.g. "JVM Information".
    event_type_name: str = ""
    # Field name -> value, in the order the recorder declares them.
    fields: Dict[str, Any] = field(default_factory=dict, compare=False)

    @property
    def display_name(self) -> str:
        return self.event_type_name or self.event_type_path

    def get_value(self, field_name: str, default: Any = None) -> Any:
        return self.fields.get(field_name, default)


@dataclass(frozen=True)
class EventType:
    """Description of an event type declared by the recording."""

    name: str
    path: str
    description: str = ""


@dataclass(frozen=True)
class RecordingTimeRange:
    """Half-open ``[start, end)`` range covered by a recording."""

    start: int
    end: int

    @property
    def duration(self) -> int:
        return self.end - self.start


@dataclass(frozen=True)
class Window:
    """
    One time window of a report run.

    Windows are half-open ``[start, end)`` intervals numbered from 1 in
    scheduling order.
    """

    start: int
    end: int
    number: int = 1

    def contains(self, timestamp: int) -> bool:
        return self.start <= timestamp < self.end

    @property
    def duration(self) -> int:
        return self.end - self.start
