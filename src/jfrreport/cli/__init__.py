"""
Command-line interface for jfr-report-tool.
"""

import sys

from .main import build_overrides, build_parser, main


def main_cli() -> None:
    """Console script entry point."""
    sys.exit(main())


__all__ = ["build_overrides", "build_parser", "main", "main_cli"]
