"""
Configuration validation utilities.

This module turns raw ``[report]`` settings into an immutable ReportConfig.
Filter patterns are compiled here, so an invalid pattern stops the run
before any recording is read.
"""

import logging
from typing import Any, Dict

from ..models.config import (
    DEFAULT_EXCLUDE_PATTERN,
    SUPPORTED_COMPRESSIONS,
    SUPPORTED_EXPORT_FORMATS,
    ExecutionConfig,
    FilterConfig,
    OutputConfig,
    RendererConfig,
    ReportConfig,
    SamplingConfig,
    StorageConfig,
    WindowConfig,
)
from ..validation import (
    ValidationError,
    compile_optional_pattern,
    validate_boolean,
    validate_enum_choice,
    validate_non_empty_string,
    validate_positive_integer,
)

logger = logging.getLogger(__name__)


def validate_filter_config(filter_data: Dict[str, Any]) -> FilterConfig:
    """
    Validate ``[report.filters]`` and compile its patterns.

    The exclude pattern defaults to the platform package prefixes, also when
    it is given as an empty string; set it to ``"none"`` to disable it.

    Raises:
        ValidationError: If a pattern does not compile
    """
    return FilterConfig(
        include=compile_optional_pattern(
            filter_data.get("include"), field_name="report.filters.include"
        ),
        exclude=compile_optional_pattern(
            filter_data.get("exclude") or DEFAULT_EXCLUDE_PATTERN,
            field_name="report.filters.exclude",
            allow_none_keyword=True,
        ),
        grep=compile_optional_pattern(
            filter_data.get("grep"), field_name="report.filters.grep"
        ),
        cutoff=compile_optional_pattern(
            filter_data.get("cutoff"), field_name="report.filters.cutoff"
        ),
    )


def validate_sampling_config(sampling_data: Dict[str, Any]) -> SamplingConfig:
    """Validate ``[report.sampling]``."""
    return SamplingConfig(
        minimum_samples=validate_positive_integer(
            sampling_data.get("minimum_samples", 3),
            min_value=0,
            field_name="report.sampling.minimum_samples",
        ),
        minimum_samples_frame_depth=validate_positive_integer(
            sampling_data.get("minimum_samples_frame_depth", 5),
            min_value=1,
            max_value=4096,
            field_name="report.sampling.minimum_samples_frame_depth",
        ),
        reverse=validate_boolean(
            sampling_data.get("reverse", False), field_name="report.sampling.reverse"
        ),
    )


def validate_window_config(window_data: Dict[str, Any]) -> WindowConfig:
    """Validate ``[report.window]``; all durations are whole seconds."""
    return WindowConfig(
        begin=validate_positive_integer(
            window_data.get("begin", 0), min_value=0, field_name="report.window.begin"
        ),
        length=validate_positive_integer(
            window_data.get("length", 0), min_value=0, field_name="report.window.length"
        ),
        duration=validate_positive_integer(
            window_data.get("duration", 0), min_value=0, field_name="report.window.duration"
        ),
        first_split=validate_boolean(
            window_data.get("first_split", False), field_name="report.window.first_split"
        ),
    )


def validate_output_config(output_data: Dict[str, Any]) -> OutputConfig:
    """Validate ``[report.output]``."""
    return OutputConfig(
        compress_package_names=validate_boolean(
            output_data.get("compress_package_names", True),
            field_name="report.output.compress_package_names",
        ),
        sort_frames=validate_boolean(
            output_data.get("sort_frames", False), field_name="report.output.sort_frames"
        ),
    )


def validate_renderer_config(renderer_data: Dict[str, Any]) -> RendererConfig:
    """Validate ``[report.renderer]``."""
    return RendererConfig(
        command=validate_non_empty_string(
            renderer_data.get("command", "flamegraph.pl"),
            field_name="report.renderer.command",
        ),
        width=validate_positive_integer(
            renderer_data.get("width", 1850),
            min_value=1,
            max_value=100000,
            field_name="report.renderer.width",
        ),
    )


def validate_execution_config(execution_data: Dict[str, Any]) -> ExecutionConfig:
    """Validate ``[report.execution]``."""
    return ExecutionConfig(
        max_parallel_windows=validate_positive_integer(
            execution_data.get("max_parallel_windows", 1),
            min_value=1,
            max_value=128,
            field_name="report.execution.max_parallel_windows",
        ),
        thread_name_prefix=validate_non_empty_string(
            execution_data.get("thread_name_prefix", "WindowWorker"),
            field_name="report.execution.thread_name_prefix",
        ),
    )


def validate_storage_config(storage_data: Dict[str, Any]) -> StorageConfig:
    """Validate ``[report.storage]``. Choices are matched case-insensitively."""
    return StorageConfig(
        export_format=validate_enum_choice(
            storage_data.get("export_format", "none"),
            list(SUPPORTED_EXPORT_FORMATS),
            field_name="report.storage.export_format",
            case_sensitive=False,
        ),
        compression=validate_enum_choice(
            storage_data.get("compression", "snappy"),
            list(SUPPORTED_COMPRESSIONS),
            field_name="report.storage.compression",
            case_sensitive=False,
        ),
    )


def validate_report_config(report_data: Dict[str, Any]) -> ReportConfig:
    """
    Validate and create a ReportConfig from raw configuration data.

    Missing sections and keys fall back to their defaults.

    Args:
        report_data: Raw ``[report]`` settings from TOML, with overrides applied

    Returns:
        Validated, immutable ReportConfig instance

    Raises:
        ValidationError: If validation fails
    """
    sections = {}
    for section in ("filters", "sampling", "window", "output", "renderer", "execution", "storage"):
        section_data = report_data.get(section, {})
        if not isinstance(section_data, dict):
            raise ValidationError(
                f"report.{section} must be a table", field_name=f"report.{section}"
            )
        sections[section] = section_data

    config = ReportConfig(
        filters=validate_filter_config(sections["filters"]),
        sampling=validate_sampling_config(sections["sampling"]),
        window=validate_window_config(sections["window"]),
        output=validate_output_config(sections["output"]),
        renderer=validate_renderer_config(sections["renderer"]),
        execution=validate_execution_config(sections["execution"]),
        storage=validate_storage_config(sections["storage"]),
    )
    logger.debug(f"Validated report configuration: {config}")
    return config
