"""
Configuration class for the logging system.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class LogConfig:
    """
    Immutable logger configuration.

    Attributes:
        level: Numeric level, or False to disable logging
        micros: Whether to show microsecond precision in timestamps
    """

    level: int | bool = logging.INFO
    micros: bool = False

    @staticmethod
    def _resolve_level(level: str | int | bool) -> int | bool:
        """Resolve level parameter to int or False."""
        from .constants import LogConstants
        from .exceptions import InvalidLogLevelError

        if isinstance(level, bool):
            return False if not level else logging.INFO
        elif isinstance(level, str):
            if level.isnumeric():
                return int(level)
            elif level.lower() in LogConstants.LEVEL_NAMES:
                return LogConstants.LEVEL_NAMES[level.lower()]
            else:
                raise InvalidLogLevelError(level)
        return level

    @classmethod
    def from_params(cls, level: str | int | bool, micros: bool = False) -> LogConfig:
        """
        Create LogConfig from individual parameters.

        Args:
            level: Log level (string name, numeric value, or False to disable logging)
            micros: Whether to show microsecond precision

        Returns:
            LogConfig instance
        """
        return cls(level=cls._resolve_level(level), micros=micros)

    @staticmethod
    def _navigate_to_section(config_dict: dict, section: str) -> dict:
        """Navigate to specified section in config dict."""
        from ..api import get
        from ..exceptions import ConfigError, TraversalError

        try:
            current = get(config_dict, *section.split("."))
        except TraversalError as e:
            raise ConfigError(
                "config section is not a mapping", section=section
            ) from e
        return current if isinstance(current, dict) else {}

    @classmethod
    def from_config(
        cls, config_dict: dict[str, Any], section: str = "logging"
    ) -> LogConfig:
        """
        Create LogConfig from a configuration dictionary.

        Args:
            config_dict: Configuration dictionary (e.g., loaded from YAML)
            section: Dot-separated section to use (default: "logging")

        Returns:
            LogConfig instance

        Example:
            log_config = LogConfig.from_config(data, "deeppath.logging")
        """
        current = cls._navigate_to_section(config_dict, section)

        level = current.get("level", "info")
        micros = current.get("microseconds", current.get("micros", False))

        return cls.from_params(level=level, micros=micros)
