"""Logging configuration for UI tree path queries."""

import logging
import os
import sys
from enum import IntEnum
from typing import Any, List

import structlog


class LogLevel(IntEnum):
    """Log levels for path queries."""
    ERROR = 0
    WARN = 1
    INFO = 2
    DEBUG = 3


# LogLevel -> structlog method name
_METHODS = {
    LogLevel.ERROR: "error",
    LogLevel.WARN: "warning",
    LogLevel.INFO: "info",
    LogLevel.DEBUG: "debug",
}


def configure_logging(verbose: int = 0) -> structlog.BoundLogger:
    """
    Configure structlog for path queries.

    Args:
        verbose: Verbosity level (0-3)

    Returns:
        Configured logger instance
    """
    log_level = ["ERROR", "WARNING", "INFO", "DEBUG"][max(0, min(verbose, 3))]

    processors: List[Any] = [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.processors.format_exc_info,
    ]

    if sys.stderr.isatty() and os.getenv("NO_COLOR") is None:
        processors.append(structlog.dev.ConsoleRenderer())
    else:
        processors.append(structlog.processors.JSONRenderer())

    structlog.configure(
        processors=processors,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=getattr(logging, log_level),
    )

    return structlog.get_logger("ui_tree_paths")


class PathQueryLogger:
    """Logger wrapper with category support and a verbosity filter."""

    def __init__(self, logger: Any, verbose: int = 0):
        self.logger = logger
        self.verbose = verbose

    def enabled(self, level: LogLevel) -> bool:
        """Return True if events at ``level`` pass the verbosity filter."""
        return level <= self.verbose

    def log(self, level: LogLevel, category: str, message: str, **kwargs: Any) -> None:
        """Log a message under a category."""
        if not self.enabled(level):
            return
        getattr(self.logger, _METHODS[level])(message, category=category, level=level.name, **kwargs)

    def error(self, category: str, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.ERROR, category, message, **kwargs)

    def warn(self, category: str, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.WARN, category, message, **kwargs)

    def info(self, category: str, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.INFO, category, message, **kwargs)

    def debug(self, category: str, message: str, **kwargs: Any) -> None:
        self.log(LogLevel.DEBUG, category, message, **kwargs)

    def child(self, **bindings: Any) -> 'PathQueryLogger':
        """Create a child logger with additional context."""
        return PathQueryLogger(self.logger.bind(**bindings), self.verbose)


def get_logger(verbose: int = 0, **bindings: Any) -> PathQueryLogger:
    """
    Build a category logger without reconfiguring structlog.

    Args:
        verbose: Verbosity level (0-3)
        **bindings: Context bound to every event

    Returns:
        PathQueryLogger instance
    """
    logger = structlog.get_logger("ui_tree_paths")
    if bindings:
        logger = logger.bind(**bindings)
    return PathQueryLogger(logger, verbose)
