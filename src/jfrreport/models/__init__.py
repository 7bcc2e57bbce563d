"""
Data models for the report pipeline.

Configuration Models:
- Immutable report settings (filters, sampling, windows, output, renderer,
  execution, storage)

Recording Models:
- Decoded events, frames and stack traces
- Event type descriptions and time ranges
- Report windows

Result Models:
- Per-window collapsed counts
- Information event accumulator
"""

from .config import (
    DEFAULT_EXCLUDE_PATTERN,
    ExecutionConfig,
    FilterConfig,
    OutputConfig,
    RendererConfig,
    ReportConfig,
    SamplingConfig,
    StorageConfig,
    WindowConfig,
)
from .events import (
    CPU_INFO_EVENT_PATH,
    FILTERED_EVENT_PATHS,
    INFO_EVENT_PATHS,
    JVM_INFO_EVENT_PATH,
    MEM_INFO_EVENT_PATH,
    NANOS_PER_SECOND,
    OS_INFO_EVENT_PATH,
    RECORDING_LOST_EVENT_PATH,
    SAMPLING_EVENT_PATH,
    Event,
    EventType,
    Frame,
    RecordingTimeRange,
    StackTrace,
    Window,
)
from .results import InfoAccumulator, WindowResult

__all__ = [
    # Configuration
    "DEFAULT_EXCLUDE_PATTERN",
    "ExecutionConfig",
    "FilterConfig",
    "OutputConfig",
    "RendererConfig",
    "ReportConfig",
    "SamplingConfig",
    "StorageConfig",
    "WindowConfig",
    # Recording
    "CPU_INFO_EVENT_PATH",
    "FILTERED_EVENT_PATHS",
    "INFO_EVENT_PATHS",
    "JVM_INFO_EVENT_PATH",
    "MEM_INFO_EVENT_PATH",
    "NANOS_PER_SECOND",
    "OS_INFO_EVENT_PATH",
    "RECORDING_LOST_EVENT_PATH",
    "SAMPLING_EVENT_PATH",
    "Event",
    "EventType",
    "Frame",
    "RecordingTimeRange",
    "StackTrace",
    "Window",
    # Results
    "InfoAccumulator",
    "WindowResult",
]
