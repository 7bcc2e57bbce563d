"""
Method signature conversion and compaction.

Frames are turned into ``pkg.Class.method(pkg.Arg, ...)`` signatures for
filtering and grouping. Compaction only happens when collapsed stacks are
written, so patterns always see fully qualified names.
"""

import re
from typing import List, Optional

from ..models.events import Frame, StackTrace

_SIGNATURE_PATTERN = re.compile(r"^(.*?)\((.*)\)$")

# Collapsed output is line based: line breaks inside names are escaped.
_LINE_BREAK_ESCAPES = str.maketrans({"\r": "\\r", "\n": "\\n"})

# Number of trailing dotted segments kept for the class and method part.
COMPACT_SEGMENTS = 3


def convert_to_method_signature(frame: Frame) -> Optional[str]:
    """
    Build the method signature of a frame.

    The return type is not part of the signature. Carriage returns and
    newlines in names are replaced by the two-character escapes ``\\r`` and
    ``\\n``.

    Returns:
        ``type.method(arg1, arg2)``, or None when the frame's type or method
        name is unknown
    """
    if not frame.type_name or not frame.method_name:
        return None
    arguments = ", ".join(frame.argument_types)
    signature = f"{frame.type_name}.{frame.method_name}({arguments})"
    return signature.translate(_LINE_BREAK_ESCAPES)


def convert_stack_trace(stack_trace: StackTrace) -> List[str]:
    """
    Convert a stack trace into method signatures, keeping the frame order.

    Frames without a signature are dropped.
    """
    signatures = []
    for frame in stack_trace.frames:
        signature = convert_to_method_signature(frame)
        if signature:
            signatures.append(signature)
    return signatures


def format_method_name(signature: str, compress_package_names: bool = True) -> str:
    """Shorten a method signature for display.

    Keeps the last three segments of the class and method name and the
    simple name of every argument type. Strings that do not look like
    ``name(args)`` are returned unchanged.

    Examples:
        >>> format_method_name("org.example.app.service.Worker.run(java.lang.String, int)")
        'service.Worker.run(String, int)'
        >>> format_method_name("<unknown>")
        '<unknown>'
    """
    if not compress_package_names:
        return signature

    match = _SIGNATURE_PATTERN.match(signature)
    if not match:
        return signature

    class_and_method, arguments = match.group(1), match.group(2)
    compact_method = ".".join(class_and_method.split(".")[-COMPACT_SEGMENTS:])
    compact_args = ", ".join(
        arg_type.split(".")[-1] for arg_type in arguments.split(", ")
    )
    return f"{compact_method}({compact_args})"
