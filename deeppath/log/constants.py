"""
Constants for the logging system.

Contains the format string, the custom trace levels used by the traversal
engine, and the level-name table used to resolve configured levels.
"""

import logging


class LogConstants:
    """Constants for the logging system."""

    # Default format string
    DEFAULT_FORMAT: str = "[%(asctime)s] [%(levelname).1s] %(message)s"

    # Column where extra fields start
    DEFAULT_RULE_WIDTH: int = 70
    MICRO_RULE_WIDTH: int = 74

    # Custom log levels
    CUSTOM_LEVELS: dict[str, int] = {"TRACE": 5, "TRACE2": 4}

    # Log level names for resolution
    LEVEL_NAMES: dict[str, int | bool] = {
        "error": logging.ERROR,
        "warning": logging.WARNING,
        "info": logging.INFO,
        "debug": logging.DEBUG,
        "trace": CUSTOM_LEVELS["TRACE"],
        "trace2": CUSTOM_LEVELS["TRACE2"],
        "false": False,  # Special value to disable all logging
    }


for _name, _level in LogConstants.CUSTOM_LEVELS.items():
    logging.addLevelName(_level, _name)
