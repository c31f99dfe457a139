"""
Planner configuration management.

This module loads join planner settings from pyproject.toml and environment
variables, environment variables taking precedence.
"""

import logging
import os
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from dpjoins.shared.constants import (
    CONFIG_TOOL_SECTION,
    DEFAULT_LOG_LEVEL,
    ENV_PREFIX,
    LOG_LEVELS,
)


@dataclass(frozen=True)
class PlannerConfig:
    """Settings shared by the join operations."""

    # Upper bound on joined tables for path search (None: unbounded)
    max_joins: int | None = None
    log_level: str = DEFAULT_LOG_LEVEL


class PlannerConfigManager:
    """Manages planner configuration from multiple sources."""

    def __init__(self, project_root: str | Path | None = None) -> None:
        self.project_root = Path(project_root) if project_root else Path.cwd()
        self.logger = logging.getLogger(self.__class__.__name__)

    def load_config(self) -> PlannerConfig:
        """
        Load planner configuration from pyproject.toml and environment variables.

        Returns:
            PlannerConfig with merged settings

        Raises:
            ValueError: If a setting is invalid
        """
        toml_config = self._load_toml_config()
        env_config = self._load_env_config()
        merged_config = self._merge_configs(toml_config, env_config)
        return self._create_planner_config(merged_config)

    def _load_toml_config(self) -> dict[str, Any]:
        """Load the [tool.dpjoins] table from pyproject.toml."""
        toml_file = self.project_root / "pyproject.toml"
        if not toml_file.exists():
            self.logger.debug("No pyproject.toml found")
            return {}

        try:
            with open(toml_file, "rb") as f:
                data = tomllib.load(f)
        except (OSError, tomllib.TOMLDecodeError) as e:
            self.logger.warning(f"Could not read pyproject.toml: {e}")
            return {}

        config = data.get("tool", {}).get(CONFIG_TOOL_SECTION, {})
        if not config:
            self.logger.debug(f"No [tool.{CONFIG_TOOL_SECTION}] section in {toml_file}")
        return dict(config)

    def _load_env_config(self) -> dict[str, Any]:
        """Load configuration from environment variables."""
        env_config = {}

        env_mappings = {
            f"{ENV_PREFIX}MAX_JOINS": "max_joins",
            f"{ENV_PREFIX}LOG_LEVEL": "log_level",
        }

        for env_var, config_key in env_mappings.items():
            value = os.getenv(env_var)
            if value is not None:
                env_config[config_key] = value

        return env_config

    def _merge_configs(
        self, toml_config: dict[str, Any], env_config: dict[str, Any]
    ) -> dict[str, Any]:
        """Merge TOML and environment configurations."""
        merged = toml_config.copy()
        merged.update(env_config)
        return merged

    def _create_planner_config(self, config_dict: dict[str, Any]) -> PlannerConfig:
        """Create PlannerConfig from dictionary."""
        unknown = set(config_dict) - {"max_joins", "log_level"}
        if unknown:
            self.logger.warning(f"Ignoring unknown settings: {sorted(unknown)}")

        return PlannerConfig(
            max_joins=self._parse_max_joins(config_dict.get("max_joins")),
            log_level=self._parse_log_level(config_dict.get("log_level", DEFAULT_LOG_LEVEL)),
        )

    def _parse_max_joins(self, value: Any) -> int | None:
        if value is None or value == "":
            return None
        if isinstance(value, bool):
            raise ValueError(f"max_joins must be a positive integer, got {value!r}")
        try:
            max_joins = int(value)
        except (TypeError, ValueError) as e:
            raise ValueError(f"max_joins must be a positive integer, got {value!r}") from e
        if max_joins < 1:
            raise ValueError(f"max_joins must be a positive integer, got {value!r}")
        return max_joins

    def _parse_log_level(self, value: Any) -> str:
        level = str(value).upper()
        if level not in LOG_LEVELS:
            raise ValueError(
                f"log_level must be one of {', '.join(sorted(LOG_LEVELS))}, got {value!r}"
            )
        return level


def load_planner_config(project_root: str | Path | None = None) -> PlannerConfig:
    """
    Convenience function to load planner configuration.

    Args:
        project_root: Project root directory (defaults to current directory)

    Returns:
        PlannerConfig object
    """
    manager = PlannerConfigManager(project_root)
    return manager.load_config()
