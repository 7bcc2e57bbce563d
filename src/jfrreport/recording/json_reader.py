"""
Reader for decoded recordings stored as JSON lines.

Each non-blank line holds one JSON object, either an event::

    {"type": "vm/prof/execution_sample", "timestamp": 1500000000,
     "stackTrace": {"truncated": false,
                    "frames": [{"type": "org.example.Worker", "method": "run",
                                "arguments": ["java.lang.String"], "returnType": "void"}]}}

    {"type": "vm/info", "name": "JVM Information", "timestamp": 1000,
     "fields": {"jvmName": "OpenJDK 64-Bit Server VM", "javaArguments": "-jar app.jar"}}

or an event type declaration::

    {"eventType": {"name": "Method Profiling Sample",
                   "path": "vm/prof/execution_sample", "description": "..."}}

Timestamps are nanoseconds.
"""

import json
import logging
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple, Union

from ..models.events import Event, EventType, Frame, StackTrace
from ..validation import RecordingError
from .memory import MemoryRecordingReader

logger = logging.getLogger(__name__)


def _parse_frame(frame_data: Dict[str, Any]) -> Frame:
    arguments = frame_data.get("arguments") or ()
    if not isinstance(arguments, (list, tuple)):
        raise TypeError(f"frame arguments must be a list, got {arguments!r}")
    return Frame(
        type_name=frame_data.get("type"),
        method_name=frame_data.get("method"),
        argument_types=tuple(str(argument) for argument in arguments),
        return_type=frame_data.get("returnType"),
    )


def _parse_stack_trace(stack_data: Optional[Dict[str, Any]]) -> Optional[StackTrace]:
    if stack_data is None:
        return None
    frames = stack_data.get("frames") or []
    return StackTrace(
        frames=tuple(_parse_frame(frame_data) for frame_data in frames),
        truncated=bool(stack_data.get("truncated", False)),
    )


def parse_event(data: Dict[str, Any]) -> Event:
    """
    Build an Event from one decoded JSON object.

    Raises:
        KeyError: If ``type`` or ``timestamp`` is missing
        TypeError, ValueError: If a value has the wrong shape
    """
    event_type_path = data["type"]
    if not isinstance(event_type_path, str):
        raise TypeError(f"event type must be a string, got {event_type_path!r}")
    fields = data.get("fields") or {}
    if not isinstance(fields, dict):
        raise TypeError(f"event fields must be an object, got {fields!r}")
    return Event(
        event_type_path=event_type_path,
        timestamp=int(data["timestamp"]),
        stack_trace=_parse_stack_trace(data.get("stackTrace")),
        event_type_name=data.get("name", ""),
        fields=dict(fields),
    )


def parse_event_type(data: Dict[str, Any]) -> EventType:
    return EventType(
        name=data["name"],
        path=data["path"],
        description=data.get("description", ""),
    )


def load_json_lines(path: Path) -> Tuple[List[Event], List[EventType]]:
    """
    Parse a JSON lines recording.

    Returns:
        The events and the declared event types, in file order

    Raises:
        RecordingError: If the file cannot be read or a line is malformed
    """
    events: List[Event] = []
    event_types: List[EventType] = []
    try:
        with open(path, "r", encoding="utf-8") as f:
            for line_number, line in enumerate(f, start=1):
                line = line.strip()
                if not line:
                    continue
                try:
                    data = json.loads(line)
                    if not isinstance(data, dict):
                        raise TypeError("expected a JSON object")
                    if "eventType" in data:
                        event_types.append(parse_event_type(data["eventType"]))
                    else:
                        events.append(parse_event(data))
                except (ValueError, KeyError, TypeError) as e:
                    raise RecordingError(
                        f"Malformed event at {path}:{line_number}: {type(e).__name__}: {e}",
                        source=str(path),
                        line_number=line_number,
                    ) from e
    except OSError as e:
        raise RecordingError(f"Cannot read recording {path}: {e}", source=str(path)) from e

    logger.info(f"Loaded {len(events)} events and {len(event_types)} event types from {path}")
    return events, event_types


class JsonRecordingReader(MemoryRecordingReader):
    """Recording reader for JSON lines files of decoded events."""

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        events, event_types = load_json_lines(self.path)
        super().__init__(events, event_types=event_types or None)
