"""
Logging for deeppath, built on Python's standard logging.

Provides:
- Custom TRACE and TRACE2 log levels used for per-step traversal tracing
- Structured extra fields rendered as [key:value] columns
- LoggerFactory for creating configured loggers
- Complete logging disable (level=False or level="false")

Example:
    from deeppath.log import LogConfig, LoggerFactory

    lg = LoggerFactory.create("/deeppath", LogConfig.from_params("trace"))
    deeppath.set(cell, "a", 0, "b", 1, lg=lg)
"""

from .config import LogConfig
from .constants import LogConstants
from .exceptions import InvalidLogLevelError, LogError
from .factory import LoggerFactory
from .formatters import LogFormatter
from .logger import Logger

__all__ = [
    "LogConfig",
    "LogConstants",
    "LogError",
    "InvalidLogLevelError",
    "LoggerFactory",
    "LogFormatter",
    "Logger",
]
