"""
Configuration management and singleton pattern.

The file configuration is loaded once and cached. Each report run then
builds its own immutable ReportConfig by applying command-line overrides on
top of the cached file settings.
"""

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from ..models.config import ReportConfig
from ..validation import handle_config_error, ErrorSeverity
from .loader import load_report_section, merge_overrides
from .validators import validate_report_config

logger = logging.getLogger(__name__)

# --- Global Singleton for Configuration ---

_CONFIG: Optional[ReportConfig] = None
_RAW_REPORT_DATA: Optional[Dict[str, Any]] = None

# Default path to the configuration file, relative to this script's location.
# A missing default file is not an error: built-in defaults apply.
_DEFAULT_CONFIG_FILE_PATH = Path(__file__).parent.parent.parent.parent / "conf" / "config.toml"
_CONFIG_FILE_PATH = _DEFAULT_CONFIG_FILE_PATH
_CONFIG_PATH_EXPLICIT = False


def set_config_path(config_path: Path) -> None:
    """
    Set a custom configuration file path.

    Unlike the default path, an explicitly set file must exist when the
    configuration is loaded.

    Args:
        config_path: Path to the config.toml file
    """
    global _CONFIG_FILE_PATH, _CONFIG_PATH_EXPLICIT
    _CONFIG_FILE_PATH = Path(config_path)
    _CONFIG_PATH_EXPLICIT = Path(config_path) != _DEFAULT_CONFIG_FILE_PATH
    clear_config_cache()
    logger.info(f"Configuration path set to: {config_path}")


def clear_config_cache() -> None:
    """
    Clear the cached configuration, forcing a reload on next access.
    """
    global _CONFIG, _RAW_REPORT_DATA
    _CONFIG = None
    _RAW_REPORT_DATA = None
    logger.debug("Configuration cache cleared")


def _load_raw_report_data(config_path: Path) -> Dict[str, Any]:
    """
    Load the raw ``[report]`` settings.

    Raises:
        FileNotFoundError: If an explicitly configured file is missing
        tomllib.TOMLDecodeError: If the TOML file is malformed
    """
    if not config_path.exists() and not _CONFIG_PATH_EXPLICIT:
        logger.debug(f"No configuration file at {config_path}, using built-in defaults")
        return {}

    try:
        return load_report_section(config_path)
    except FileNotFoundError as e:
        handle_config_error(
            error=e,
            context="loading configuration file",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise
    except Exception as e:
        handle_config_error(
            error=e,
            context="processing configuration",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def _get_raw_report_data() -> Dict[str, Any]:
    global _RAW_REPORT_DATA
    if _RAW_REPORT_DATA is None:
        _RAW_REPORT_DATA = _load_raw_report_data(_CONFIG_FILE_PATH)
    return _RAW_REPORT_DATA


def get_config() -> ReportConfig:
    """
    Get the report configuration defined by the configuration file.

    The first call loads and validates the file; subsequent calls return the
    cached instance.

    Returns:
        The singleton ReportConfig instance

    Raises:
        FileNotFoundError: If an explicitly configured file is missing
        ValidationError: If configuration validation fails
    """
    global _CONFIG
    if _CONFIG is None:
        _CONFIG = validate_report_config(_get_raw_report_data())
        logger.info(f"Loaded report configuration from {_CONFIG_FILE_PATH}")
    return _CONFIG


def build_report_config(overrides: Optional[Dict[str, Dict[str, Any]]] = None) -> ReportConfig:
    """
    Build the configuration for one report run.

    Args:
        overrides: Section-keyed values (e.g. from the command line) that
            take precedence over the file; None values are ignored

    Returns:
        A validated, immutable ReportConfig

    Raises:
        ValidationError: If the merged settings are invalid
    """
    if not overrides:
        return get_config()
    return validate_report_config(merge_overrides(_get_raw_report_data(), overrides))


def is_config_loaded() -> bool:
    """Check if configuration has been loaded and cached."""
    return _CONFIG is not None


def get_config_info() -> dict:
    """
    Get information about the current configuration state.

    Returns:
        Dictionary with configuration metadata
    """
    return {
        "config_loaded": is_config_loaded(),
        "config_path": str(_CONFIG_FILE_PATH),
        "config_file_exists": _CONFIG_FILE_PATH.exists(),
    }
