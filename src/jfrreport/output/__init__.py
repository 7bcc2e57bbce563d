"""
Report output: collapsed stack files, file naming, information sidecars and
the HTML index page.
"""

from .index_page import create_index_file
from .info_report import (
    build_title,
    info_report_path,
    print_event_fields,
    write_info_report,
    write_info_report_file,
)
from .naming import create_new_file_name, default_output_file
from .writer import write_stack_counts

__all__ = [
    "build_title",
    "create_index_file",
    "create_new_file_name",
    "default_output_file",
    "info_report_path",
    "print_event_fields",
    "write_info_report",
    "write_info_report_file",
    "write_stack_counts",
]
