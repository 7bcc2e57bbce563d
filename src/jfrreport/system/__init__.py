"""
System interaction utilities.

This package runs the external flame graph renderer.
"""

from .commands import (
    build_renderer_command,
    render_flame_graph,
)

__all__ = [
    "build_renderer_command",
    "render_flame_graph",
]
