"""
Logging fixtures for testing.

Provides fixtures for trace loggers writing to an in-memory stream.
"""

import logging
import uuid
from collections.abc import Generator
from io import StringIO

import pytest

from deeppath.log import LogConfig, Logger, LoggerFactory


@pytest.fixture(autouse=True)
def reset_logging_state() -> Generator[None, None, None]:
    """
    Remove loggers created by a test from the global registry.

    This prevents test pollution from loggers created by previous tests.
    """
    yield

    for name in list(logging.root.manager.loggerDict.keys()):
        if name.startswith("/") or name.startswith("test"):
            del logging.root.manager.loggerDict[name]


@pytest.fixture
def log_stream() -> StringIO:
    """Provide a stream capturing log output."""
    return StringIO()


@pytest.fixture
def trace_config() -> LogConfig:
    """Provide a LogConfig enabling the most verbose level."""
    return LogConfig.from_params("trace2")


@pytest.fixture
def trace_logger(trace_config: LogConfig, log_stream: StringIO) -> Logger:
    """
    Provide a logger at TRACE2 level writing to log_stream.

    Returns:
        Logger: Test logger instance
    """
    name = f"/test/{uuid.uuid4().hex[:8]}"
    return LoggerFactory.create(name, trace_config, stream=log_stream)
