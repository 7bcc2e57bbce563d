"""
Time window scheduling for report runs.
"""

from .scheduler import iter_configured_windows, iter_windows

__all__ = [
    "iter_configured_windows",
    "iter_windows",
]
