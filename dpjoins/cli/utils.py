"""
CLI utility functions.

Pure, stateless utility functions used across CLI commands.
"""

import json
import logging
from typing import Any

import yaml


def setup_logging(verbose: bool = False, level: str = "WARNING") -> None:
    """
    Set up logging configuration.

    Args:
        verbose: If True, set logging level to DEBUG
        level: Level name used when not verbose
    """
    log_level = logging.DEBUG if verbose else getattr(logging, level.upper(), logging.WARNING)
    logging.basicConfig(level=log_level, format="%(levelname)s - %(name)s - %(message)s")


def format_output(data: Any, output_format: str = "json") -> str:
    """
    Render command output.

    Args:
        data: JSON-compatible data
        output_format: "json" or "yaml"

    Returns:
        Rendered text
    """
    if output_format == "yaml":
        return yaml.safe_dump(data, sort_keys=False, default_flow_style=False).rstrip("\n")
    return json.dumps(data, indent=2)
