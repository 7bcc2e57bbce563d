"""
Storage module for exporting stack counts.

Collapsed stack counts can be exported per window as Parquet tables (written
with Polars) for analysis outside of the flame graph tooling.
"""

from .base import DataStorage
from .parquet_storage import ParquetStorage
from .factory import create_storage
from .exporter import StackCountsExporter, stack_counts_to_dataframe

__all__ = [
    "DataStorage",
    "ParquetStorage",
    "StackCountsExporter",
    "create_storage",
    "stack_counts_to_dataframe",
]
