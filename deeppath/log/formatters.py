"""
Log formatter rendering messages with bracketed extra fields.

Output format:
    [12:34:56,789] [T] step                          [depth:0] [key:a] [/deeppath]
"""

import logging
from typing import Any

from .config import LogConfig
from .constants import LogConstants


def _format_value(value: Any) -> str:
    """Format an extra field value."""
    if isinstance(value, Exception):
        return value.__class__.__name__
    if isinstance(value, (list, tuple)):
        return ",".join(str(v) for v in value)
    return str(value)


def _format_extra(record: logging.LogRecord) -> str:
    """Format extra fields sorted by key."""
    extra = getattr(record, "__deeppath__extra", None)
    if not extra:
        return ""
    parts = [f"[{key}:{_format_value(extra[key])}]" for key in sorted(extra)]
    return " ".join(parts)


class LogFormatter(logging.Formatter):
    """
    Formatter aligning extra fields in a column after the message.
    """

    def __init__(self, config: LogConfig):
        """
        Initialize the log formatter.

        Args:
            config: Logger configuration
        """
        super().__init__(LogConstants.DEFAULT_FORMAT)
        self._config = config

    def formatTime(self, record: logging.LogRecord, datefmt: str | None = None) -> str:
        """Format timestamp with optional microsecond precision."""
        s = super().formatTime(record, "%H:%M:%S")
        s = f"{s},{int(record.msecs):03d}"
        if self._config.micros:
            s += f".{int(record.created * 1_000_000) % 1000:03d}"
        return s

    def format(self, record: logging.LogRecord) -> str:
        """
        Format a log record.

        Args:
            record: Log record to format

        Returns:
            Formatted log message
        """
        line = super().format(record)
        rule = (
            LogConstants.MICRO_RULE_WIDTH
            if self._config.micros
            else LogConstants.DEFAULT_RULE_WIDTH
        )
        # Exception text is appended by the base class after a newline
        head, sep, tail = line.partition("\n")
        fields = _format_extra(record)
        if fields:
            head += " " * max(1, rule - len(head)) + fields
        head += f" [{record.name}]"
        return head + sep + tail
