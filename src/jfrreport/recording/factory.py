"""
Factory for creating recording readers.
"""

import logging
from pathlib import Path
from typing import Union

from .base import RecordingReader
from .json_reader import JsonRecordingReader

logger = logging.getLogger(__name__)

JSON_LINES_SUFFIXES = (".jsonl", ".ndjson", ".json")


def create_reader(path: Union[str, Path]) -> RecordingReader:
    """
    Create a reader for the recording at ``path`` based on its file suffix.

    Args:
        path: Path to a decoded recording

    Returns:
        RecordingReader instance

    Raises:
        ValueError: If the recording format is not supported
        RecordingError: If the recording cannot be read
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix in JSON_LINES_SUFFIXES:
        logger.debug(f"Creating JsonRecordingReader for {path}")
        return JsonRecordingReader(path)
    raise ValueError(
        f"Unsupported recording format: '{suffix or path.name}'. "
        f"Decode the recording to JSON lines ({', '.join(JSON_LINES_SUFFIXES)}) first."
    )
