"""
Configuration file loading utilities.

This module handles the low-level loading and parsing of the TOML
configuration file and the merging of command-line overrides into it.
"""

import copy
import logging
import tomllib
from pathlib import Path
from typing import Any, Dict, Optional

from ..validation import handle_config_error, ErrorSeverity

logger = logging.getLogger(__name__)


def load_toml_file(file_path: Path, description: str = "configuration file") -> Dict[str, Any]:
    """
    Load and parse a TOML file with error handling.

    Args:
        file_path: Path to the TOML file to load
        description: Human-readable description for error messages

    Returns:
        Parsed TOML data as a dictionary

    Raises:
        FileNotFoundError: If the file doesn't exist
        tomllib.TOMLDecodeError: If the file is malformed
    """
    logger.info(f"Loading {description} from: {file_path}")

    if not file_path.exists():
        logger.error(f"{description} not found: {file_path}")
        raise FileNotFoundError(f"{description} not found: {file_path}")

    try:
        with open(file_path, "rb") as f:
            return tomllib.load(f)
    except tomllib.TOMLDecodeError as e:
        handle_config_error(
            error=e,
            context=f"parsing {description}",
            severity=ErrorSeverity.CRITICAL,
            reraise=True,
            logger=logger
        )
        raise


def load_report_section(config_path: Path) -> Dict[str, Any]:
    """
    Load the ``[report]`` section of the main configuration file.

    Args:
        config_path: Path to the config.toml file

    Returns:
        The raw report settings, empty if the section is absent
    """
    config_data = load_toml_file(config_path, "main configuration file")
    report_data = config_data.get("report", {})
    if not isinstance(report_data, dict):
        raise KeyError("[report] in config.toml must be a table")
    return report_data


def merge_overrides(
    base: Dict[str, Any], overrides: Optional[Dict[str, Dict[str, Any]]]
) -> Dict[str, Any]:
    """
    Merge per-section overrides (e.g. from the command line) into raw settings.

    Overrides are given as ``{section: {key: value}}``; a value of None
    leaves the base setting untouched. The base dictionary is not modified.

    Args:
        base: Raw report settings as loaded from TOML
        overrides: Section-keyed override values

    Returns:
        A new dictionary with the overrides applied
    """
    merged = copy.deepcopy(base)
    if not overrides:
        return merged

    for section, values in overrides.items():
        target = merged.setdefault(section, {})
        for key, value in values.items():
            if value is not None:
                target[key] = value
    return merged
