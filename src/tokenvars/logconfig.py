"""
Structured logging for tokenvars.

Module loggers are structlog BoundLoggers wrapped around standard
`logging` loggers under the "tokenvars" namespace. Nothing is printed
unless the application enables the namespace, either through its own
`logging` setup or with configure_logging().

Events are key=value lines:
    event='missing_reference' reference='nowhere' token='ghost' ...
"""

import logging
import sys
from typing import IO, Optional, Union

import structlog

ROOT_LOGGER = "tokenvars"


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Return a structlog logger that writes through logging.getLogger(name)."""
    return structlog.wrap_logger(
        logging.getLogger(name),
        wrapper_class=structlog.stdlib.BoundLogger,
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.KeyValueRenderer(key_order=["event"], sort_keys=True),
        ],
    )


def configure_logging(
    level: Union[int, str] = logging.INFO,
    stream: Optional[IO[str]] = None,
) -> logging.Handler:
    """
    Send tokenvars events to a stream (stderr by default).

    Only the "tokenvars" logger is touched; the root logger and any
    application handlers are left alone.

    Args:
        level: Minimum level, as a logging constant or name ("debug")
        stream: Output stream

    Returns:
        The handler that was attached, so callers can remove it
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger(ROOT_LOGGER)
    logger.setLevel(level)
    logger.addHandler(handler)
    return handler


__all__ = ["ROOT_LOGGER", "configure_logging", "get_logger"]
