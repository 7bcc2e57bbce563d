"""
Abstract base class for stack count storage backends.

Backends persist the collapsed stack counts of a window as a table so they
can be analysed outside of the flame graph tooling.
"""

from abc import ABC, abstractmethod
import polars as pl


class DataStorage(ABC):
    """Abstract base class for data storage implementations."""

    @property
    @abstractmethod
    def file_extension(self) -> str:
        """Extension (without the dot) of the files written by this backend."""
        pass

    @abstractmethod
    def save_dataframe(self, df: pl.DataFrame, path: str) -> None:
        """
        Save a Polars DataFrame to the specified path.

        Args:
            df: Polars DataFrame to save
            path: File path to save to
        """
        pass
