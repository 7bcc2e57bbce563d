"""
HTML index page linking all output files of a multi-window run.
"""

import html
import logging
from pathlib import Path
from typing import Sequence

from ..validation import handle_file_error

logger = logging.getLogger(__name__)


def _index_entry(output_file: Path) -> str:
    name = html.escape(output_file.name, quote=True)
    entry = f'<p><a href="{name}">{name}</a></p>\n'
    if output_file.suffix == ".svg":
        entry += f'<p><img src="{name}"/></p>\n'
    return entry


def create_index_file(files: Sequence[Path]) -> Path:
    """
    Write ``<first file>.html`` next to the output files.

    SVG files are embedded as images below their link.

    Returns:
        Path of the index page
    """
    if not files:
        raise ValueError("Cannot create an index page without output files")

    first = Path(files[0])
    index_file = first.with_name(f"{first.name}.html")
    try:
        with open(index_file, "w", encoding="utf-8") as f:
            f.write("<html>\n<head><title>Index of generated files</title></head>\n<body>\n")
            for output_file in files:
                f.write(_index_entry(Path(output_file)))
            f.write("</body></html>\n")
    except OSError as e:
        handle_file_error(error=e, context=f"writing {index_file}", reraise=True, logger=logger)

    logger.info(f"Index page with {len(files)} entries written to {index_file}")
    return index_file
