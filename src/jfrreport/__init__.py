"""
jfrreport: flame graphs and reports from profiling recordings.

This package turns the execution samples of a decoded profiling recording
into collapsed-stack files for flamegraph.pl, rendered flame graphs and a
few text reports.

The package is organized into specialized modules:
- config: Configuration loading, validation and caching
- models: Data structures and type definitions
- validation: Input validation and error handling
- recording: Readers for decoded recordings
- windowing: Time window scheduling
- aggregation: Filtering, significance grouping and stack collapsing
- output: Collapsed stack files, info sidecars and index pages
- system: External renderer invocation
- executor: Concurrent window processing
- storage: Parquet export of stack counts
- reports: Report actions and the window runner
- cli: Command-line interface

Usage:
    From command line:
        jfr-report-tool [options] recording.jsonl

    Programmatically:
        from jfrreport import ActionContext, build_report_config, create_reader, get_report_action
        context = ActionContext(
            reader=create_reader("recording.jsonl"),
            config=build_report_config(),
            output_file=Path("recording.txt"),
        )
        get_report_action("stacks").run(context)
"""

# Main interfaces
from .config import build_report_config, clear_config_cache, get_config, set_config_path
from .cli import main_cli
from .reports import REPORT_ACTIONS, ActionContext, ReportRunner, get_report_action
from .recording import JsonRecordingReader, MemoryRecordingReader, RecordingReader, create_reader

# Pipeline entry points
from .aggregation import count_top_frames, process_window
from .windowing import iter_windows

# Model classes for external use
from .models import (
    Event,
    EventType,
    Frame,
    ReportConfig,
    StackTrace,
    Window,
    WindowResult,
)

# Validation utilities
from .validation import (
    RecordingError,
    RendererError,
    ValidationError,
)

__version__ = "1.0.0"

__all__ = [
    # Main interfaces
    "build_report_config",
    "clear_config_cache",
    "get_config",
    "set_config_path",
    "main_cli",
    "REPORT_ACTIONS",
    "ActionContext",
    "ReportRunner",
    "get_report_action",
    "JsonRecordingReader",
    "MemoryRecordingReader",
    "RecordingReader",
    "create_reader",
    # Pipeline
    "count_top_frames",
    "process_window",
    "iter_windows",
    # Models
    "Event",
    "EventType",
    "Frame",
    "ReportConfig",
    "StackTrace",
    "Window",
    "WindowResult",
    # Errors
    "RecordingError",
    "RendererError",
    "ValidationError",
]
