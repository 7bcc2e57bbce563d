"""
Configuration management for the jfrreport package.

This module provides a clean interface for loading, validating, and accessing
report configuration from a TOML file with singleton pattern management.
"""

# Main configuration interface
from .manager import (
    build_report_config,
    clear_config_cache,
    get_config,
    get_config_info,
    is_config_loaded,
    set_config_path,
)

# For advanced usage - direct access to loaders and validators
from .loader import (
    load_report_section,
    load_toml_file,
    merge_overrides,
)
from .validators import (
    validate_filter_config,
    validate_report_config,
)

__all__ = [
    # Main interface
    "build_report_config",
    "get_config",
    "set_config_path",
    "clear_config_cache",
    "is_config_loaded",
    "get_config_info",
    # Advanced interface
    "load_toml_file",
    "load_report_section",
    "merge_overrides",
    "validate_filter_config",
    "validate_report_config",
]
