"""
Recording readers.

Readers expose already-decoded recordings to the report pipeline:
- RecordingReader: the abstract interface
- MemoryRecordingReader: events held in memory
- JsonRecordingReader: events stored as JSON lines
"""

from .base import RecordingReader
from .memory import MemoryRecordingReader
from .json_reader import JsonRecordingReader, load_json_lines, parse_event
from .factory import create_reader

__all__ = [
    "RecordingReader",
    "MemoryRecordingReader",
    "JsonRecordingReader",
    "create_reader",
    "load_json_lines",
    "parse_event",
]
