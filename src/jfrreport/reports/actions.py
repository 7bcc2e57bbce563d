"""
Report actions.

Every action the command line can run is listed in ``REPORT_ACTIONS``. An
action handler receives an ActionContext and returns the output files it
produced (empty for actions that print to stdout).
"""

import logging
import sys
import tempfile
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, Dict, List, Optional, TextIO

from ..aggregation import count_top_frames, process_window
from ..models.config import ReportConfig
from ..models.events import INFO_EVENT_PATHS
from ..models.results import WindowResult
from ..output import build_title, print_event_fields, write_info_report_file, write_stack_counts
from ..recording.base import RecordingReader
from ..system import render_flame_graph
from ..validation import RendererError
from .runner import OutputMessage, ReportRunner

logger = logging.getLogger(__name__)

EVENT_TYPE_COLUMN_WIDTH = 33


@dataclass
class ActionContext:
    """Everything a report action needs to run."""

    reader: RecordingReader
    config: ReportConfig
    output_file: Optional[Path] = None
    output_message: Optional[OutputMessage] = None
    stdout: TextIO = field(default_factory=lambda: sys.stdout)

    def create_runner(self) -> ReportRunner:
        return ReportRunner(self.reader, self.config, self.output_message)

    def require_output_file(self) -> Path:
        if self.output_file is None:
            raise ValueError("This report action requires an output file")
        return self.output_file


ActionHandler = Callable[[ActionContext], List[Path]]


@dataclass(frozen=True)
class ReportAction:
    """A named report action and its command line metadata."""

    name: str
    description: str
    handler: ActionHandler
    needs_output: bool = True
    default_extension: Optional[str] = None

    def run(self, context: ActionContext) -> List[Path]:
        logger.debug(f"Running report action '{self.name}'")
        return self.handler(context)


def flame_graph(context: ActionContext) -> List[Path]:
    """Render one flame graph SVG per window."""
    config = context.config
    runner = context.create_runner()

    def handle_window(result: WindowResult, output_file: Path) -> None:
        with tempfile.NamedTemporaryFile(
            "w", prefix="jfr-flamegraph-", suffix=".txt", delete=False, encoding="utf-8"
        ) as temp:
            lines = write_stack_counts(result.stack_counts, temp, config.output.sort_frames)
        temp_file = Path(temp.name)

        try:
            if lines > 0:
                truncated = result.info.stack_traces_truncated
                if truncated:
                    logger.warning(
                        f"Some stacktraces ({truncated}) were truncated. "
                        f"Use stacktrace=1024 JFR option in recording to fix this."
                    )
                title = build_title(result.window, runner.info)
                try:
                    render_flame_graph(config.renderer, title, temp_file, output_file)
                except RendererError:
                    output_file.unlink(missing_ok=True)
                    raise
            else:
                logger.info(f"No significant stacks in window {result.window.number}")
        finally:
            temp_file.unlink(missing_ok=True)

    output_file = context.require_output_file()
    produced = runner.handle_recording_by_window_by_file(output_file, process_window, handle_window)
    if runner.info.has_info:
        write_info_report_file(runner.info, output_file)
    return produced


def stacks(context: ActionContext) -> List[Path]:
    """Write the collapsed stacks (flame graph input) of each window."""
    config = context.config
    runner = context.create_runner()

    def handle_window(result: WindowResult, output_file: Path) -> None:
        with open(output_file, "w", encoding="utf-8") as f:
            write_stack_counts(result.stack_counts, f, config.output.sort_frames)

    return runner.handle_recording_by_window_by_file(
        context.require_output_file(), process_window, handle_window
    )


def topframes(context: ActionContext) -> List[Path]:
    """Write the most frequent methods of each window."""
    runner = context.create_runner()

    def handle_window(result: WindowResult, output_file: Path) -> None:
        with open(output_file, "w", encoding="utf-8") as f:
            write_stack_counts(result.stack_counts, f, sort=True)

    return runner.handle_recording_by_window_by_file(
        context.require_output_file(), count_top_frames, handle_window
    )


def dumpinfo(context: ActionContext) -> List[Path]:
    """Print the first event of each information event type."""
    reader = context.reader
    seen = set()
    for event in reader.events(reader.full_window(), frozenset(INFO_EVENT_PATHS)):
        if event.display_name not in seen:
            print_event_fields(event, context.stdout)
            seen.add(event.display_name)
    context.stdout.flush()
    return []


def recordtypes(context: ActionContext) -> List[Path]:
    """Print the event types declared by the recording."""
    for event_type in context.reader.event_types():
        context.stdout.write(
            f"{event_type.name.ljust(EVENT_TYPE_COLUMN_WIDTH)}"
            f"{event_type.path.ljust(EVENT_TYPE_COLUMN_WIDTH)}"
            f"{event_type.description}\n"
        )
    context.stdout.flush()
    return []


DEFAULT_ACTION = "flameGraph"

REPORT_ACTIONS: Dict[str, ReportAction] = {
    action.name: action
    for action in (
        ReportAction(
            "flameGraph",
            "creates flamegraph in svg format, default action",
            flame_graph,
            default_extension="svg",
        ),
        ReportAction("stacks", "creates flamegraph input file", stacks, default_extension="txt"),
        ReportAction("topframes", "shows top methods", topframes, default_extension="top.txt"),
        ReportAction("dumpinfo", "dump info", dumpinfo, needs_output=False),
        ReportAction("recordtypes", "dump record types", recordtypes, needs_output=False),
    )
}


def get_report_action(name: str) -> ReportAction:
    """
    Look up a report action by name.

    Raises:
        KeyError: If no action has that name
    """
    try:
        return REPORT_ACTIONS[name]
    except KeyError:
        raise KeyError(
            f"Unknown action {name}. Valid choices: {', '.join(REPORT_ACTIONS)}"
        ) from None
