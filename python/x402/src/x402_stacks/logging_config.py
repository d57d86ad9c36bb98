"""
Logging configuration for x402-stacks services

The level comes from the caller or from ``X402_LOG_LEVEL`` (a level name such
as ``DEBUG`` or a number), so the facilitator and server examples can be made
verbose without code changes.
"""

import logging
import os
import sys

from x402_stacks.exceptions import ConfigurationError

LOG_LEVEL_ENV_VAR = "X402_LOG_LEVEL"

LOG_FORMAT = "%(asctime)s - %(levelname)-8s %(name)s %(filename)s:%(lineno)d %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# HTTP client libraries log every indexer request at INFO/DEBUG
NOISY_LOGGERS = ("httpx", "httpcore")


def parse_log_level(value: int | str) -> int:
    """
    Convert a level name or number into a logging level.

    Raises:
        ConfigurationError: If the value is not a known level
    """
    if isinstance(value, int):
        return value
    text = value.strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise ConfigurationError(f"Invalid log level: {value}")
    return level


def get_log_level(default: int = logging.INFO) -> int:
    """Read the log level from X402_LOG_LEVEL, falling back to *default*"""
    value = os.getenv(LOG_LEVEL_ENV_VAR)
    if not value:
        return default
    return parse_log_level(value)


def setup_logging(level: int | str | None = None) -> int:
    """
    Configure the root logger with timestamp, file and line number information

    Args:
        level: Logging level or level name. Defaults to X402_LOG_LEVEL, then INFO.

    Returns:
        The level that was applied
    """
    resolved = get_log_level() if level is None else parse_log_level(level)

    root_logger = logging.getLogger()
    root_logger.setLevel(resolved)

    # Replace handlers so repeated calls don't duplicate output
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(resolved)
    console_handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(console_handler)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(resolved, logging.WARNING))

    return resolved
