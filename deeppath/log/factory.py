"""
Factory for creating and configuring loggers.
"""

import logging
import sys
from typing import IO, Any, cast

from .config import LogConfig
from .formatters import LogFormatter
from .logger import Logger


class LoggerFactory:
    """Factory for creating and configuring loggers."""

    @staticmethod
    def create(
        name: str,
        config: LogConfig,
        extra: dict[str, Any] | None = None,
        stream: IO[str] | None = None,
    ) -> Logger:
        """
        Create a logger with the specified configuration.

        Args:
            name: Logger name
            config: Logger configuration
            extra: Pre-populated extra fields to include in all log records
            stream: Output stream (default: stdout)

        Returns:
            Configured logger instance

        Example:
            >>> config = LogConfig.from_params(level="trace")
            >>> lg = LoggerFactory.create("/deeppath", config)
            >>> deeppath.get(data, "a", "b", lg=lg)
        """
        existing = LoggerFactory._check_existing_logger(name)
        if existing:
            return existing

        return LoggerFactory._create_new_logger(name, config, extra, stream)

    @staticmethod
    def _check_existing_logger(name: str) -> Logger | None:
        """Return an already registered logger of our class."""
        existing = logging.root.manager.loggerDict.get(name)
        if isinstance(existing, Logger):
            existing.trace2("logger already exists", extra={"logger": name})
            return existing
        return None

    @staticmethod
    def _setup_handler(config: LogConfig, stream: IO[str] | None) -> logging.Handler:
        """Set up a stream handler with our formatter."""
        handler = logging.StreamHandler(stream or sys.stdout)
        if config.level is not False:
            handler.setLevel(cast(int, config.level))
        handler.setFormatter(LogFormatter(config))
        return handler

    @staticmethod
    def _create_new_logger(
        name: str,
        config: LogConfig,
        extra: dict[str, Any] | None,
        stream: IO[str] | None,
    ) -> Logger:
        """Create a new logger with its own handler."""
        lg = Logger(name, config, extra)
        lg.addHandler(LoggerFactory._setup_handler(config, stream))
        lg.propagate = False
        lg.parent = logging.root

        # Register in loggerDict so later create() calls return the same logger
        logging.root.manager.loggerDict[name] = lg

        lg.trace2(
            "created logger",
            extra={"level": logging.getLevelName(lg.level)},
        )
        return lg

    @staticmethod
    def create_child(parent: Logger, name: str) -> Logger:
        """
        Create a child logger sharing the parent's handlers and configuration.

        Examples:
            >>> parent = LoggerFactory.create("/deeppath", config)
            >>> LoggerFactory.create_child(parent, "engine").name
            '/deeppath/engine'

        Args:
            parent: Parent logger instance
            name: Single child logger name (no "/" separators)

        Returns:
            Child logger instance
        """
        full_name = f"{parent.name}/{name}" if parent.name != "/" else f"/{name}"

        existing = LoggerFactory._check_existing_logger(full_name)
        if existing:
            return existing

        lg = Logger(full_name, parent.config, dict(parent._extra))
        for handler in parent.handlers:
            lg.addHandler(handler)
        lg.propagate = False
        lg.parent = parent
        logging.root.manager.loggerDict[full_name] = lg

        lg.trace2("child logger", extra={"parent": parent.name})
        return lg
