"""
Report actions and the window-by-window report runner.
"""

from .actions import (
    DEFAULT_ACTION,
    REPORT_ACTIONS,
    ActionContext,
    ReportAction,
    get_report_action,
)
from .runner import ReportRunner

__all__ = [
    "DEFAULT_ACTION",
    "REPORT_ACTIONS",
    "ActionContext",
    "ReportAction",
    "ReportRunner",
    "get_report_action",
]
