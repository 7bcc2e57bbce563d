"""
Tabular export of per-window stack counts.

Each exported window becomes one table with a row per collapsed stack,
written next to the window's output file.
"""

import logging
from pathlib import Path
from typing import Union

import polars as pl

from ..aggregation.collapser import STACK_SEPARATOR
from ..models.results import WindowResult
from .base import DataStorage

logger = logging.getLogger(__name__)

STACK_COUNT_SCHEMA = {
    "window": pl.Int64,
    "window_start": pl.Int64,
    "window_end": pl.Int64,
    "signature": pl.Utf8,
    "count": pl.Int64,
    "depth": pl.Int64,
}


def stack_counts_to_dataframe(result: WindowResult) -> pl.DataFrame:
    """
    Convert the stack counts of a window to a DataFrame.

    Rows keep the insertion order of the counts. ``depth`` is the number of
    frames in the collapsed stack.
    """
    signatures = list(result.stack_counts.keys())
    rows = len(signatures)
    return pl.DataFrame(
        {
            "window": [result.window.number] * rows,
            "window_start": [result.window.start] * rows,
            "window_end": [result.window.end] * rows,
            "signature": signatures,
            "count": list(result.stack_counts.values()),
            "depth": [len(signature.split(STACK_SEPARATOR)) for signature in signatures],
        },
        schema=STACK_COUNT_SCHEMA,
    )


class StackCountsExporter:
    """Writes window results through a storage backend."""

    def __init__(self, storage: DataStorage):
        self.storage = storage

    def export_path(self, output_file: Union[str, Path]) -> Path:
        output_file = Path(output_file)
        return output_file.with_name(f"{output_file.name}.{self.storage.file_extension}")

    def export(self, result: WindowResult, output_file: Union[str, Path]) -> Path:
        """
        Export a window result next to its output file.

        Returns:
            Path of the exported table
        """
        path = self.export_path(output_file)
        df = stack_counts_to_dataframe(result)
        self.storage.save_dataframe(df, str(path))
        logger.info(f"Exported {len(df)} stack counts of window {result.window.number} to {path}")
        return path
