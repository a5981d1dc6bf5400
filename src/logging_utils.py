""" Runtime logging helpers. """
import os
import sys

from loguru import logger

LOG_LEVEL_ENV = "MINISH_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_FORMAT = "{time:HH:mm:ss.SSS} | {level:<7} | {name}:{function}:{line} | {message}"


def resolve_log_level(level: str | None = None) -> str:
    """ Pick the explicit level, else the environment, else the default. """
    if level:
        return level.upper()
    return os.getenv(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL).upper()


def configure_logging(level: str | None = None) -> None:
    """Route log records to stderr so they never mix with command output."""
    logger.remove()
    logger.add(
        sys.stderr,
        level=resolve_log_level(level),
        format=LOG_FORMAT,
        backtrace=False,
        diagnose=False,
    )
