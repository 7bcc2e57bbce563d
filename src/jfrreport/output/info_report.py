"""
Recording information report and flame graph title.

The information report is a plain-text dump of the JVM, OS, CPU and memory
information events captured during a run, followed by the number of lost
recording buffers. It is written as a sidecar next to the main output.
"""

import logging
from datetime import datetime
from pathlib import Path
from typing import TextIO, Union

from ..models.events import (
    INFO_EVENT_PATHS,
    JVM_INFO_EVENT_PATH,
    NANOS_PER_SECOND,
    Event,
    Window,
)
from ..models.results import InfoAccumulator
from ..validation import handle_file_error

logger = logging.getLogger(__name__)

FIELD_NAME_WIDTH = 20
TITLE_TIME_FORMAT = "%Y-%m-%d %H:%M:%S"


def print_event_fields(event: Event, writer: TextIO) -> None:
    writer.write(f"{event.display_name}\n")
    for name, value in event.fields.items():
        writer.write(f"{name.ljust(FIELD_NAME_WIDTH)} {value}\n")
    writer.write("\n")


def write_info_report(info: InfoAccumulator, writer: TextIO) -> None:
    """
    Write the captured information events and, if any, the buffer-loss count.

    Events are listed in a fixed order (JVM, OS, CPU, memory) regardless of
    the order in which they were recorded.
    """
    for event_type_path in INFO_EVENT_PATHS:
        event = info.get_event(event_type_path)
        if event is not None:
            print_event_fields(event, writer)
    if info.recording_buffers_lost > 0:
        writer.write(f"{info.recording_buffers_lost} recording buffers lost.\n")


def info_report_path(output_file: Union[str, Path]) -> Path:
    output_file = Path(output_file)
    return output_file.with_name(f"{output_file.name}.info.txt")


def write_info_report_file(info: InfoAccumulator, output_file: Union[str, Path]) -> Path:
    """Write the information report sidecar of an output file."""
    report_path = info_report_path(output_file)
    try:
        with open(report_path, "w", encoding="utf-8") as f:
            write_info_report(info, f)
    except OSError as e:
        handle_file_error(error=e, context=f"writing {report_path}", reraise=True, logger=logger)
    logger.info(f"Recording information written to {report_path}")
    return report_path


def build_title(window: Window, info: InfoAccumulator) -> str:
    """
    Build the flame graph title of a window.

    The title holds the window start in local time and, when the JVM
    information event was captured, the application arguments.
    """
    started = datetime.fromtimestamp(window.start / NANOS_PER_SECOND)
    title = f"Started {started.strftime(TITLE_TIME_FORMAT)}"

    jvm_info = info.get_event(JVM_INFO_EVENT_PATH)
    if jvm_info is not None:
        java_arguments = jvm_info.get_value("javaArguments")
        if java_arguments:
            title += f" App args:{java_arguments} "
    return title
