"""
Configuration data models.

All report settings are immutable once validated: one ReportConfig is built
per run and passed, read-only, into every window pass.
"""

from dataclasses import dataclass, field
from typing import Literal, Optional, Pattern

DEFAULT_EXCLUDE_PATTERN = r"^(java\.|sun\.|com\.sun\.|org\.codehaus\.groovy\.|groovy\.|org\.apache\.)"

SUPPORTED_EXPORT_FORMATS = ("none", "parquet")
SUPPORTED_COMPRESSIONS = ("snappy", "gzip", "brotli", "lz4", "zstd")


@dataclass(frozen=True)
class FilterConfig:
    """
    Compiled stack trace filters, loaded from ``[report.filters]``.

    A None pattern means the corresponding stage is disabled.
    """

    # Frames must match this to survive the include/exclude stage.
    include: Optional[Pattern[str]] = None
    # Frames matching this are removed.
    exclude: Optional[Pattern[str]] = None
    # Whole traces are kept only if any frame matches this.
    grep: Optional[Pattern[str]] = None
    # Traces are truncated before the first frame matching this.
    cutoff: Optional[Pattern[str]] = None


@dataclass(frozen=True)
class SamplingConfig:
    """Significance grouping settings, loaded from ``[report.sampling]``."""

    minimum_samples: int = 3
    minimum_samples_frame_depth: int = 5
    # Keep leaf-to-root order (icicle graph) instead of root-to-leaf.
    reverse: bool = False


@dataclass(frozen=True)
class WindowConfig:
    """Time selection settings in seconds, loaded from ``[report.window]``."""

    begin: int = 0
    # 0 means "until the end of the recording".
    length: int = 0
    # 0 means a single window over the whole selection.
    duration: int = 0
    # The first window lasts half of the configured duration.
    first_split: bool = False


@dataclass(frozen=True)
class OutputConfig:
    """Collapsed output settings, loaded from ``[report.output]``."""

    compress_package_names: bool = True
    sort_frames: bool = False


@dataclass(frozen=True)
class RendererConfig:
    """External flame graph renderer, loaded from ``[report.renderer]``."""

    command: str = "flamegraph.pl"
    width: int = 1850


@dataclass(frozen=True)
class ExecutionConfig:
    """Window execution settings, loaded from ``[report.execution]``."""

    max_parallel_windows: int = 1
    thread_name_prefix: str = "WindowWorker"


@dataclass(frozen=True)
class StorageConfig:
    """
    Configuration model for collapsed-count export, loaded from ``[report.storage]``.

    Attributes:
        export_format: 'none' disables the export, 'parquet' writes one
            Parquet table next to every window's output file
        compression: Compression algorithm for Parquet format
            - 'snappy': Fast compression/decompression (default)
            - 'gzip': Higher compression ratio, slower
            - 'brotli': Very high compression ratio
            - 'lz4': Very fast compression
            - 'zstd': Modern balanced compression
    """

    export_format: Literal["none", "parquet"] = "none"
    compression: Literal["snappy", "gzip", "brotli", "lz4", "zstd"] = "snappy"

    @property
    def enabled(self) -> bool:
        return self.export_format != "none"


@dataclass(frozen=True)
class ReportConfig:
    """
    The root configuration object that aggregates all report settings.
    """

    filters: FilterConfig = field(default_factory=FilterConfig)
    sampling: SamplingConfig = field(default_factory=SamplingConfig)
    window: WindowConfig = field(default_factory=WindowConfig)
    output: OutputConfig = field(default_factory=OutputConfig)
    renderer: RendererConfig = field(default_factory=RendererConfig)
    execution: ExecutionConfig = field(default_factory=ExecutionConfig)
    storage: StorageConfig = field(default_factory=StorageConfig)
