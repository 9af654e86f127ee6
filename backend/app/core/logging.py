"""Logging configuration for the address service."""

import logging
import sys
from typing import Literal, TextIO

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Loggers of libraries that are chatty at INFO
_QUIET_LOGGERS = ("httpx", "httpcore", "uvicorn.access")


def setup_logging(level: LogLevel = "INFO", stream: TextIO | None = None) -> None:
    """Configure logging for the ``app`` package.

    The root logger stays at WARNING so only this package logs at the
    requested level.

    Args:
        level: The logging level for ``app.*`` loggers.
        stream: Output stream, stdout when omitted.
    """
    logging.basicConfig(
        level=logging.WARNING,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        handlers=[logging.StreamHandler(stream or sys.stdout)],
    )
    logging.getLogger("app").setLevel(level)

    for name in _QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def get_logger(name: str) -> logging.Logger:
    """Get a logger instance with the given name.

    Args:
        name: The name for the logger (typically __name__).

    Returns:
        A configured logger instance.
    """
    return logging.getLogger(name)
