"""
External flame graph renderer invocation.

The renderer (flamegraph.pl by default) reads collapsed stacks from a file
and writes an SVG document to its standard output, which is redirected to
the output file of the window.
"""

import logging
import subprocess
from pathlib import Path
from typing import List, Union

from ..models.config import RendererConfig
from ..validation import ErrorSeverity, RendererError, handle_subprocess_error

logger = logging.getLogger(__name__)


def build_renderer_command(
    renderer_config: RendererConfig, title: str, input_file: Union[str, Path]
) -> List[str]:
    """Build the renderer argument list.

    Examples:
        >>> build_renderer_command(RendererConfig(), "Started", "stacks.txt")
        ['flamegraph.pl', '--width', '1850', '--title', 'Started', 'stacks.txt']
    """
    return [
        renderer_config.command,
        "--width",
        str(renderer_config.width),
        "--title",
        title,
        str(input_file),
    ]


def render_flame_graph(
    renderer_config: RendererConfig,
    title: str,
    input_file: Union[str, Path],
    output_file: Union[str, Path],
) -> None:
    """Run the renderer on a collapsed stack file.

    Args:
        renderer_config: Renderer command and image width.
        title: Flame graph title.
        input_file: File holding the collapsed stacks.
        output_file: Destination of the rendered SVG.

    Raises:
        RendererError: If the renderer cannot be started or exits with a
            non-zero status. The partial output file is left for the caller
            to remove.
    """
    command = build_renderer_command(renderer_config, title, input_file)
    logger.debug(f"Executing renderer: {command}")
    try:
        with open(output_file, "wb") as out:
            process = subprocess.run(
                command,
                stdout=out,
                stderr=subprocess.PIPE,
                check=False,
            )
    except FileNotFoundError as e:
        handle_subprocess_error(
            error=e,
            command=renderer_config.command,
            severity=ErrorSeverity.ERROR,
            reraise=False,
            logger=logger,
        )
        raise RendererError(
            f"Flame graph renderer not found: {renderer_config.command}",
            command=renderer_config.command,
        ) from e

    if process.returncode != 0:
        stderr = process.stderr.decode("utf-8", errors="replace") if process.stderr else ""
        raise RendererError(
            f"Flame graph renderer exited with status {process.returncode}: {stderr.strip()}",
            command=renderer_config.command,
            return_code=process.returncode,
            stderr=stderr,
        )
