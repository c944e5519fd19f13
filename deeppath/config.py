"""
Configuration for the traversal engine.

AccessConfig can be built directly, from a configuration dictionary, or from a
YAML file with environment variable overrides:

    # etc/deeppath.yaml
    deeppath:
      strict_keys: true
      private_names: false
      logging:
        level: info

    config = AccessConfig.from_file("etc/deeppath.yaml")
"""

from __future__ import annotations

import os
from collections.abc import Mapping
from dataclasses import dataclass, field, replace
from pathlib import Path
from typing import Any

import yaml  # type: ignore[import-untyped]

from .exceptions import ConfigError, TraversalError
from .log import LogConfig, Logger, LoggerFactory

DEFAULT_SECTION = "deeppath"
DEFAULT_ENV_PREFIX = "DEEPPATH_"

_TRUE = frozenset({"1", "true", "yes", "on"})
_FALSE = frozenset({"0", "false", "no", "off"})


def _parse_bool(name: str, value: Any) -> bool:
    """Parse a boolean from a config or environment value."""
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in _TRUE:
        return True
    if text in _FALSE:
        return False
    raise ConfigError("invalid boolean value", name=name, value=value)


@dataclass(frozen=True)
class AccessConfig:
    """
    Immutable traversal settings.

    Attributes:
        strict_keys: Reject descriptor dicts with unknown or multiple fields
        private_names: Allow object steps on names starting with "_"
        sequence_fill: Padding value when writing past the end of a sequence
        log: Logging configuration used by create_logger()
    """

    strict_keys: bool = True
    private_names: bool = False
    sequence_fill: Any = None
    log: LogConfig = field(default_factory=LogConfig)

    @classmethod
    def from_dict(
        cls, data: Mapping[str, Any], section: str = DEFAULT_SECTION
    ) -> AccessConfig:
        """
        Create AccessConfig from a configuration dictionary.

        Args:
            data: Configuration dictionary
            section: Dot-separated section holding the settings

        Returns:
            AccessConfig instance (defaults for a missing section)
        """
        from .api import get

        try:
            current = get(data, *section.split("."))
        except TraversalError as e:
            raise ConfigError(
                "config section is not a mapping", section=section
            ) from e
        if current is None:
            current = {}
        if not isinstance(current, Mapping):
            raise ConfigError("config section is not a mapping", section=section)

        return cls(
            strict_keys=_parse_bool("strict_keys", current.get("strict_keys", True)),
            private_names=_parse_bool(
                "private_names", current.get("private_names", False)
            ),
            sequence_fill=current.get("sequence_fill"),
            log=LogConfig.from_config(dict(current), "logging"),
        )

    @classmethod
    def from_file(
        cls,
        path: str | Path,
        section: str = DEFAULT_SECTION,
        env_prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> AccessConfig:
        """
        Load AccessConfig from a YAML file and apply environment overrides.

        Recognized overrides (with the default prefix): DEEPPATH_STRICT_KEYS,
        DEEPPATH_PRIVATE_NAMES, DEEPPATH_LOG_LEVEL.

        Args:
            path: YAML file path
            section: Dot-separated section holding the settings
            env_prefix: Prefix for environment overrides
            environ: Environment mapping (default: os.environ)

        Returns:
            AccessConfig instance

        Raises:
            ConfigError: If the file is not a YAML mapping or an override is invalid
        """
        with open(path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError("invalid YAML", path=str(path)) from e
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise ConfigError("config file is not a mapping", path=str(path))

        config = cls.from_dict(data, section)
        return config.with_env_overrides(env_prefix, environ)

    def with_env_overrides(
        self,
        env_prefix: str = DEFAULT_ENV_PREFIX,
        environ: Mapping[str, str] | None = None,
    ) -> AccessConfig:
        """
        Return a copy with environment overrides applied.

        Args:
            env_prefix: Prefix for environment overrides
            environ: Environment mapping (default: os.environ)

        Returns:
            AccessConfig instance
        """
        env = os.environ if environ is None else environ
        changes: dict[str, Any] = {}

        for name in ("strict_keys", "private_names"):
            var = env_prefix + name.upper()
            if var in env:
                changes[name] = _parse_bool(var, env[var])

        level = env.get(env_prefix + "LOG_LEVEL")
        if level is not None:
            changes["log"] = LogConfig.from_params(level, micros=self.log.micros)

        return replace(self, **changes) if changes else self

    def create_logger(self, name: str = "/deeppath") -> Logger:
        """
        Create a logger configured from this config's log settings.

        Args:
            name: Logger name

        Returns:
            Logger instance
        """
        return LoggerFactory.create(name, self.log)
