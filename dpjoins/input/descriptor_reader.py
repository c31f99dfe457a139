"""
Data package descriptor reader.

Loads data package descriptors (the ``resources`` list of table schemas with
their foreign keys) from JSON or YAML files.
"""

import json
import logging
from pathlib import Path

import yaml

from dpjoins.shared.constants import SUPPORTED_JSON_EXTENSIONS, SUPPORTED_YAML_EXTENSIONS
from dpjoins.shared.exceptions import DescriptorError
from dpjoins.shared.types import Descriptor, FilePath

logger = logging.getLogger(__name__)


class DescriptorReader:
    """Reads data package descriptor files."""

    def read(self, file_path: FilePath) -> Descriptor:
        """
        Read a descriptor from a file.

        Supports JSON (.json) and YAML (.yaml, .yml). Other extensions are
        read as YAML, which also accepts JSON content.

        Args:
            file_path: Path to the descriptor file

        Returns:
            Raw descriptor dictionary

        Raises:
            DescriptorError: If the file cannot be read or does not hold a mapping
        """
        file_path = Path(file_path)
        if not file_path.exists():
            raise DescriptorError(f"Descriptor file not found: {file_path}")

        suffix = file_path.suffix.lower()
        if suffix not in SUPPORTED_JSON_EXTENSIONS + SUPPORTED_YAML_EXTENSIONS:
            logger.warning(
                f"File {file_path} does not have a .json, .yaml or .yml extension, "
                f"reading it as YAML"
            )

        try:
            with open(file_path, "r", encoding="utf-8") as f:
                if suffix in SUPPORTED_JSON_EXTENSIONS:
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except json.JSONDecodeError as e:
            raise DescriptorError(f"Invalid JSON in descriptor file {file_path}: {e}") from e
        except yaml.YAMLError as e:
            raise DescriptorError(f"Invalid YAML in descriptor file {file_path}: {e}") from e
        except OSError as e:
            raise DescriptorError(f"Error reading descriptor file {file_path}: {e}") from e

        if data is None:
            raise DescriptorError(f"Empty descriptor file: {file_path}")
        if not isinstance(data, dict):
            raise DescriptorError(
                f"Descriptor file {file_path} must contain a mapping, got {type(data).__name__}"
            )

        logger.info(f"Loaded descriptor {data.get('name', file_path.stem)} from {file_path}")
        return data
