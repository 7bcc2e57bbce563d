"""
Time window scheduling.

The selected part of a recording is split into consecutive windows which
are aggregated independently, one output file per window.
"""

import logging
from typing import Iterator, Optional

from ..models.config import WindowConfig
from ..models.events import NANOS_PER_SECOND, RecordingTimeRange, Window

logger = logging.getLogger(__name__)


def iter_windows(
    time_range: RecordingTimeRange,
    begin: int = 0,
    length: int = 0,
    window_duration: int = 0,
    first_split: bool = False,
) -> Iterator[Window]:
    """Yield the report windows of a recording, numbered from 1.

    The selection starts ``begin`` seconds into the recording and lasts
    ``length`` seconds, or until the end of the recording when ``length`` is
    0. With ``window_duration`` set, the selection is cut into windows of
    that many seconds; the first one lasts half as long when ``first_split``
    is set. Each window starts 1ns after the previous window's end, and the
    last window is not shortened to the end of the selection.

    Args:
        time_range: Recording range in nanoseconds
        begin: Offset of the selection in seconds
        length: Length of the selection in seconds, 0 for "until the end"
        window_duration: Window length in seconds, 0 for a single window
        first_split: Halve the first window

    Yields:
        Window instances in time order
    """
    start_time = time_range.start + begin * NANOS_PER_SECOND
    if length > 0:
        range_end = start_time + length * NANOS_PER_SECOND
    else:
        range_end = time_range.end

    if window_duration > 0:
        duration = window_duration * NANOS_PER_SECOND
    else:
        duration = range_end - start_time

    number = 0
    while start_time < range_end:
        number += 1
        current_duration = duration // 2 if first_split and number == 1 else duration
        end_time = start_time + current_duration
        logger.debug(f"Window {number}: [{start_time}, {end_time})")
        yield Window(start=start_time, end=end_time, number=number)
        start_time = end_time + 1


def iter_configured_windows(
    time_range: RecordingTimeRange, window_config: Optional[WindowConfig] = None
) -> Iterator[Window]:
    """Yield the windows described by a WindowConfig."""
    window_config = window_config or WindowConfig()
    return iter_windows(
        time_range,
        begin=window_config.begin,
        length=window_config.length,
        window_duration=window_config.duration,
        first_split=window_config.first_split,
    )
