"""
Tests for LogFormatter.
"""

import logging
import re

import pytest

from deeppath.log import LogConfig, LogConstants, LogFormatter, Logger


def _record(lg: Logger, msg: str, extra: dict | None = None) -> logging.LogRecord:
    return lg.makeRecord(lg.name, logging.INFO, __file__, 1, msg, (), None, extra=extra)


@pytest.mark.unit
class TestLogFormatter:
    """Test formatted output."""

    def test_plain_message(self):
        lg = Logger("/test/fmt", LogConfig())
        line = LogFormatter(LogConfig()).format(_record(lg, "hello"))
        assert re.match(r"^\[\d\d:\d\d:\d\d,\d{3}\] \[I\] hello \[/test/fmt\]$", line)

    def test_extra_fields_sorted_in_column(self):
        lg = Logger("/test/fmt", LogConfig())
        record = _record(lg, "step", {"kind": "map", "depth": 0})
        line = LogFormatter(LogConfig()).format(record)
        assert line.index("[depth:0]") == LogConstants.DEFAULT_RULE_WIDTH
        assert line.endswith("[depth:0] [kind:map] [/test/fmt]")

    def test_value_formatting(self):
        lg = Logger("/test/fmt", LogConfig())
        record = _record(lg, "m", {"err": ValueError("x"), "keys": ["a", 1]})
        line = LogFormatter(LogConfig()).format(record)
        assert "[err:ValueError]" in line
        assert "[keys:a,1]" in line

    def test_micros(self):
        config = LogConfig(micros=True)
        lg = Logger("/test/fmt", config)
        line = LogFormatter(config).format(_record(lg, "m"))
        assert re.match(r"^\[\d\d:\d\d:\d\d,\d{3}\.\d{3}\]", line)
