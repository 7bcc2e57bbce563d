"""
Command-line interface for jfr-report-tool.

This module parses the command line, merges it with the configuration file,
opens the recording and runs the selected report action.
"""

import argparse
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from ..config import build_report_config, set_config_path
from ..output import create_index_file, default_output_file
from ..recording import create_reader
from ..reports import DEFAULT_ACTION, REPORT_ACTIONS, ActionContext, get_report_action
from ..validation import RecordingError, ValidationError, handle_cli_error, validate_path_exists

# --- Logging Setup ---
logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s [%(levelname)-5.5s] %(name)s:%(filename)s:%(lineno)d\t %(message)s",
    datefmt="%Y-%m-%d %H:%M:%S",
    stream=sys.stdout,
)
logger = logging.getLogger(__name__)

ACTION_COLUMN_WIDTH = 33


def format_action_list() -> str:
    lines = ["Supported actions:"]
    for name, action in REPORT_ACTIONS.items():
        lines.append(f"{name.ljust(ACTION_COLUMN_WIDTH)}{action.description}")
    return "\n".join(lines)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="jfr-report-tool",
        description="Create flame graphs and reports from profiling recordings.",
        epilog=format_action_list(),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("-i", "--include", metavar="filter",
                        help="Regexp include filter for methods")
    parser.add_argument("-e", "--exclude", metavar="filter",
                        help="Regexp exclude filter for methods ('none' disables the default)")
    parser.add_argument("-g", "--grep", metavar="filter",
                        help="Regexp to include all stacks with match in any frame")
    parser.add_argument("-a", "--action", default=DEFAULT_ACTION,
                        help=f"Tool action. Valid choices: {', '.join(REPORT_ACTIONS)}")
    parser.add_argument("-o", "--output", metavar="file", help="Output file")
    parser.add_argument("-w", "--width", type=int, metavar="pixels",
                        help="Width of flamegraph")
    parser.add_argument("--flamegraph-command", metavar="cmd", help="flamegraph.pl path")
    parser.add_argument("-s", "--sort", action="store_true", default=None,
                        help="Sort frames")
    parser.add_argument("-m", "--min", type=int, metavar="value",
                        help="Minimum number of samples")
    parser.add_argument("--min-samples-frame-depth", type=int, metavar="value",
                        help="Minimum samples sum taken at frame depth")
    parser.add_argument("-d", "--duration", type=int, metavar="seconds",
                        help="Duration of time window, splits output in to multiple files")
    parser.add_argument("-f", "--first-split", action="store_true", default=None,
                        help="First window duration half of given duration")
    parser.add_argument("-r", "--reverse", action="store_true", default=None,
                        help="Process stacks in reverse order")
    parser.add_argument("-b", "--begin", type=int, metavar="seconds", help="Begin time")
    parser.add_argument("-l", "--length", type=int, metavar="seconds",
                        help="Length of selected time")
    parser.add_argument("-c", "--cutoff", metavar="pattern", help="Cut off frame pattern")
    parser.add_argument("-n", "--no-compress", action="store_true",
                        help="Don't compress package names")
    parser.add_argument("--config", type=Path, metavar="file",
                        help="Configuration file (defaults to conf/config.toml)")
    parser.add_argument("--parallel", type=int, metavar="workers",
                        help="Number of windows processed concurrently")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("file", nargs="?", help="Recording file")
    return parser


def build_overrides(args: argparse.Namespace) -> Dict[str, Dict[str, Any]]:
    """Map parsed command line options onto configuration sections."""
    return {
        "filters": {
            "include": args.include,
            # An empty exclude keeps the configured pattern
            "exclude": args.exclude or None,
            "grep": args.grep,
            "cutoff": args.cutoff,
        },
        "sampling": {
            "minimum_samples": args.min,
            "minimum_samples_frame_depth": args.min_samples_frame_depth,
            "reverse": args.reverse,
        },
        "window": {
            "begin": args.begin,
            "length": args.length,
            "duration": args.duration,
            "first_split": args.first_split,
        },
        "output": {
            "compress_package_names": False if args.no_compress else None,
            "sort_frames": args.sort,
        },
        "renderer": {
            "command": args.flamegraph_command,
            "width": args.width,
        },
        "execution": {
            "max_parallel_windows": args.parallel,
        },
    }


def print_output_file(output_file: Path, stream: Optional[TextIO] = None) -> None:
    stream = stream or sys.stdout
    stream.write(f"Output in {output_file}\n")
    stream.write(f"URL {output_file.resolve().as_uri()}\n")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run jfr-report-tool.

    Args:
        argv: Command line arguments without the program name

    Returns:
        Process exit status

    Raises:
        SystemExit: On configuration, argument or report errors
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    if not args.file:
        parser.print_usage(sys.stdout)
        print(format_action_list())
        return 0

    try:
        action = get_report_action(args.action)
    except KeyError as e:
        handle_cli_error(error=e, context="action selection", exit_code=1, logger=logger)

    try:
        if args.config:
            set_config_path(args.config)
        config = build_report_config(build_overrides(args))
    except (FileNotFoundError, KeyError, ValidationError) as e:
        handle_cli_error(
            error=e,
            context="configuration loading",
            exit_code=1,
            include_traceback=False,
            logger=logger,
        )

    try:
        recording_file = Path(validate_path_exists(args.file, field_name="recording file")).absolute()
        reader = create_reader(recording_file)
    except (ValidationError, RecordingError, ValueError, OSError) as e:
        handle_cli_error(error=e, context="recording loading", exit_code=1, logger=logger)

    output_file = None
    if action.needs_output:
        if args.output:
            output_file = Path(args.output).absolute()
        else:
            output_file = default_output_file(recording_file, action.default_extension)

    print(f"Converting {recording_file}")
    context = ActionContext(
        reader=reader,
        config=config,
        output_file=output_file,
        output_message=print_output_file,
    )
    try:
        written_files = action.run(context)
        if len(written_files) > 1:
            index_file = create_index_file(written_files)
            print(f"Index is {index_file.resolve().as_uri()}")
    except Exception as e:
        handle_cli_error(
            error=e,
            context=f"running action '{action.name}'",
            exit_code=1,
            include_traceback=True,
            logger=logger,
        )
    return 0
