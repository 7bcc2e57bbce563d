"""
Validation and error handling for the jfrreport package.

This module provides input validation and error handling with consistent
error reporting across the application.
"""

from .exceptions import (
    ErrorSeverity,
    RecordingError,
    RendererError,
    ValidationError,
    handle_cli_error,
    handle_config_error,
    handle_error,
    handle_file_error,
    handle_subprocess_error,
)

from .validators import (
    compile_optional_pattern,
    validate_boolean,
    validate_enum_choice,
    validate_non_empty_string,
    validate_path_exists,
    validate_positive_integer,
    validate_regex_pattern,
)

__all__ = [
    # Exceptions and handlers
    "ErrorSeverity",
    "RecordingError",
    "RendererError",
    "ValidationError",
    "handle_error",
    "handle_config_error",
    "handle_file_error",
    "handle_subprocess_error",
    "handle_cli_error",
    # Validators
    "compile_optional_pattern",
    "validate_boolean",
    "validate_enum_choice",
    "validate_non_empty_string",
    "validate_path_exists",
    "validate_positive_integer",
    "validate_regex_pattern",
]
