"""
Output file naming for multi-window runs.
"""

import re
from pathlib import Path
from typing import Union

_EXTENSION_PATTERN = re.compile(r"^(.*\.)(.*?)$")


def create_new_file_name(file_number: int, template: Union[str, Path]) -> Path:
    """
    Derive the output file of a window from the requested output file.

    The first window writes to the template itself. Later windows insert
    the window number before the extension: ``out.svg`` becomes
    ``out.2.svg``, and ``out`` becomes ``out.2``.

    >>> create_new_file_name(1, "flames.svg").name
    'flames.svg'
    >>> create_new_file_name(3, "flames.svg").name
    'flames.3.svg'
    """
    template = Path(template)
    if file_number <= 1:
        return template

    match = _EXTENSION_PATTERN.match(template.name)
    if match:
        name = f"{match.group(1)}{file_number}.{match.group(2)}"
    else:
        name = f"{template.name}.{file_number}"
    return template.with_name(name)


def default_output_file(recording_file: Union[str, Path], extension: str) -> Path:
    """Output file used when none is given: the recording name plus an extension."""
    recording_file = Path(recording_file)
    return recording_file.with_name(f"{recording_file.name}.{extension}")
