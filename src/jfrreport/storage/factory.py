"""
Factory for creating storage instances.
"""

import logging
from typing import Optional

from ..models.config import StorageConfig
from .base import DataStorage
from .parquet_storage import ParquetStorage

logger = logging.getLogger(__name__)


def create_storage(storage_config: StorageConfig) -> Optional[DataStorage]:
    """
    Create the storage backend selected by the configuration.

    Returns:
        DataStorage instance, or None when export is disabled

    Raises:
        ValueError: If an unsupported format type is specified
    """
    format_type = storage_config.export_format
    if format_type == "none":
        return None
    elif format_type == "parquet":
        logger.debug(f"Creating ParquetStorage with compression: {storage_config.compression}")
        return ParquetStorage(compression=storage_config.compression)
    else:
        raise ValueError(f"Unsupported storage format: {format_type}")
